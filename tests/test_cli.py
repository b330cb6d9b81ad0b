import pytest

from tax_ids import cli
from tax_ids.errors import HttpError
from tax_ids.tax_id import TaxId
from tax_ids.verification import (
    Unavailable,
    UnavailableReason,
    Unverified,
    Verification,
    Verified,
)


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda settings: None)


def stub_verify(monkeypatch, result):
    def verify(self):
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(TaxId, "verify", verify)


def test_validate_only(capsys):
    assert cli.main(["XI123456789"]) == cli.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "value: XI123456789",
        "type: eu_vat",
        "tax_country_code: XI",
        "country_code: GB",
        "local_value: 123456789",
    ]


def test_invalid_syntax(capsys):
    assert cli.main(["SE12"]) == cli.EXIT_REJECTED
    assert "Invalid syntax" in capsys.readouterr().err


def test_unsupported_country(capsys):
    assert cli.main(["XX123456789"]) == cli.EXIT_REJECTED
    assert "Country code XX is not supported" in capsys.readouterr().err


def test_verified(monkeypatch, capsys):
    stub_verify(
        monkeypatch,
        Verification(Verified(), {"name": "ACME", "address": {"postcode": "RH10 9DF"}}),
    )
    assert cli.main(["GB425216184", "--verify"]) == cli.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert "status: verified" in out
    assert "data.name: ACME" in out
    assert "data.address.postcode: RH10 9DF" in out


def test_unverified(monkeypatch, capsys):
    stub_verify(monkeypatch, Verification(Unverified(), {"address": None}))
    assert cli.main(["SE123456789101", "--verify"]) == cli.EXIT_REJECTED
    out = capsys.readouterr().out.splitlines()
    assert "status: unverified" in out
    assert "data.address: " in out


def test_unavailable_is_accepted(monkeypatch, capsys):
    stub_verify(monkeypatch, Verification(Unavailable(UnavailableReason.TIMEOUT)))
    assert cli.main(["SE123456789101", "--verify"]) == cli.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert "status: unavailable" in out
    assert "reason: timeout" in out


def test_verification_error(monkeypatch, capsys):
    stub_verify(monkeypatch, HttpError("GET https://registry.test failed"))
    assert cli.main(["NO123456789MVA", "--verify"]) == cli.EXIT_ERROR
    assert "failed" in capsys.readouterr().err


def test_payload_lists_are_indexed(monkeypatch, capsys):
    stub_verify(
        monkeypatch,
        Verification(Verified(), {"activities": [{"code": "62.010"}, {"code": "70.220"}]}),
    )
    assert cli.main(["NO123456789MVA", "--verify"]) == cli.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert "data.activities.0.code: 62.010" in out
    assert "data.activities.1.code: 70.220" in out
