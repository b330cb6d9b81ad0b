import re

import pytest

from tax_ids.errors import (
    ConfigurationError,
    InvalidLength,
    InvalidSyntax,
    UnsupportedCountryCode,
)
from tax_ids.eu_vat import COUNTRIES, EuVat
from tax_ids.settings import get_settings
from tax_ids.syntax import (
    TAX_ID_TYPES,
    build_syntax_registry,
    syntax_registry,
    validate_syntax,
)
from tax_ids.tax_id_type import TaxIdType

VALID = {
    "AT": ["ATU12345678", "ATU87654321"],
    "BE": ["BE0123456789", "BE0987654321"],
    "BG": ["BG123456789", "BG1234567890"],
    "CY": ["CY12345678A", "CY98765432Z"],
    "CZ": ["CZ12345678", "CZ123456789", "CZ1234567890"],
    "DE": ["DE123456789", "DE987654321"],
    "DK": ["DK12345678"],
    "EE": ["EE101234567"],
    "EL": ["EL123456789"],
    "ES": ["ESX12345678", "ES12345678Z", "ESX1234567Z"],
    "FI": ["FI12345678"],
    "FR": ["FR12345678901", "FRX1234567890"],
    "HR": ["HR12345678901"],
    "HU": ["HU12345678"],
    "IE": ["IE1234567A", "IE1A23456A", "IE1234567AA"],
    "IT": ["IT12345678901"],
    "LT": ["LT999999919"],
    "LU": ["LU12345678"],
    "LV": ["LV12345678901"],
    "MT": ["MT12345678"],
    "NL": ["NL123456789B01"],
    "PL": ["PL1234567890"],
    "PT": ["PT123456789"],
    "RO": ["RO99999999", "RO999999999"],
    "SE": ["SE123456789101"],
    "SI": ["SI12345678"],
    "SK": ["SK1234567890"],
    "XI": ["XI123456789", "XI987654321", "XIHA123", "XIGD123"],
    "GB": ["GB123456789", "GB123456789101", "GBHA123", "GBGD123"],
    "CH": [
        "CHE-778.887.921",
        "CHE-778.887.921 MWST",
        "CHE778887921",
        "CHE778887921 TVA",
        "CHE-778.887.921 IVA",
    ],
    "NO": ["NO123456789MVA", "NO123456789"],
}

INVALID = {
    "AT": ["AT12345678", "ATU1234567", "ATU123456789", "ATU1234567A"],
    "BE": ["BE123456789", "BE012345678", "BE01234567890", "BE012345678A"],
    "BG": ["BG12345678", "BG12345678901", "BG12345678A"],
    "CY": ["CY12345678", "CY1234567A", "CY123456789A", "CY12345678AA"],
    "CZ": ["CZ1234567", "CZ12345678901", "CZ12345678A"],
    "DE": ["DE12345678", "DE1234567890", "DE12345678A"],
    "DK": ["DK1234567", "DK123456789", "DK1234567A"],
    "EE": ["EE10123456", "EE1012345678", "EE10123456A"],
    "EL": ["EL12345678", "EL1234567890", "EL12345678A"],
    "ES": ["ES12345678", "ESX123456789", "ES12345678ZZ"],
    "FI": ["FI1234567", "FI123456789", "FI1234567A"],
    "FR": ["FR1234567890", "FR123456789012", "FR1234567890A"],
    "HR": ["HR1234567890", "HR123456789012", "HR1234567890A"],
    "HU": ["HU1234567", "HU123456789", "HU1234567A"],
    "IE": ["IE1234567", "IE12345678A", "IE1234567AAA"],
    "IT": ["IT1234567890", "IT123456789012", "IT1234567890A"],
    "LT": ["LT12345678", "LT12345678901", "LT12345678A"],
    "LU": ["LU1234567", "LU123456789", "LU1234567A"],
    "LV": ["LV1234567890", "LV123456789012", "LV1234567890A"],
    "MT": ["MT1234567", "MT123456789", "MT1234567A"],
    "NL": ["NL123456789B0", "NL123456789B012", "NL123456789B0A"],
    "PL": ["PL123456789", "PL12345678901", "PL123456789A"],
    "PT": ["PT12345678", "PT1234567890", "PT12345678A"],
    "RO": ["RO12345678910", "RO12345678901", "RO12345678A"],
    "SE": ["SE12345678900", "SE123456789002", "SE12345678900A"],
    "SI": ["SI1234567", "SI123456789", "SI1234567A"],
    "SK": ["SK123456789", "SK12345678901", "SK123456789A"],
    "XI": ["XI12345678", "XI1234567890", "XI12345678A"],
    "GB": ["GB12345678", "GB1234567891011", "GBHA1234", "GBGD1234"],
    "CH": [
        "CHE-778.887.921MWST",
        "CHE778887921MWST",
        "CHE-778.887.9211",
        "CHE-778.887.9211 MWST",
        "CHE-34.887.921",
        "CHE778887921 VAT",
        "CHE12",
    ],
    "NO": [
        "NO123456789 MVA",
        "NO12345678MVA",
        "NO1234567891MVA",
        "NO123456789XXX",
        "NO123456789MVA1",
        "NO12345678",
    ],
}


@pytest.mark.parametrize(
    "value", [value for values in VALID.values() for value in values]
)
def test_valid_syntax(value):
    assert validate_syntax(value) is None


@pytest.mark.parametrize(
    "value", [value for values in INVALID.values() for value in values]
)
def test_invalid_syntax(value):
    with pytest.raises(InvalidSyntax):
        validate_syntax(value)


@pytest.mark.parametrize("value", ["XX123456789", "US123456789", "se123456789101", "GR123456789"])
def test_unsupported_country_code(value):
    with pytest.raises(UnsupportedCountryCode) as excinfo:
        validate_syntax(value)
    assert excinfo.value.country_code == value[:2]
    assert str(excinfo.value) == f"Country code {value[:2]} is not supported"


@pytest.mark.parametrize("value", ["", "S"])
def test_too_short(value):
    with pytest.raises(InvalidLength):
        validate_syntax(value)


def test_two_character_prefix_only():
    with pytest.raises(InvalidSyntax):
        validate_syntax("SE")


def test_every_supported_prefix_has_samples():
    registry = syntax_registry(tuple(TAX_ID_TYPES))
    assert set(registry) == set(VALID) == set(INVALID)


def test_eu_owns_every_member_state_and_northern_ireland():
    assert len(COUNTRIES) == 28
    assert set(EuVat.syntax_map) == COUNTRIES
    assert "XI" in COUNTRIES and "EL" in COUNTRIES and "GR" not in COUNTRIES


def test_patterns_are_anchored():
    for pattern in syntax_registry(tuple(TAX_ID_TYPES)).values():
        assert pattern.pattern.startswith("^") and pattern.pattern.endswith("$")


def test_trailing_newline_is_rejected():
    with pytest.raises(InvalidSyntax):
        validate_syntax("DE123456789\n")


def test_disabled_tax_id_type_is_unsupported():
    settings = get_settings({"TAX_ID_TYPES": ["eu_vat"]})
    validate_syntax("SE123456789101", settings)
    with pytest.raises(UnsupportedCountryCode):
        validate_syntax("NO123456789MVA", settings)


def test_unknown_tax_id_type_setting():
    with pytest.raises(ConfigurationError):
        validate_syntax("SE123456789101", get_settings({"TAX_ID_TYPES": ["us_vat"]}))


class DuplicateSwedishVat(TaxIdType):
    name = "se_vat"
    syntax_map = {"SE": re.compile(r"^SE[0-9]{12}$")}
    verifier_class = None

    def country_code_from_tax_country(self, tax_country_code):
        return tax_country_code


def test_country_code_claimed_twice_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="SE is claimed by both eu_vat and se_vat"):
        build_syntax_registry([EuVat(), DuplicateSwedishVat()])
