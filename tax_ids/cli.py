"""Command-line interface: validate, and optionally verify, one tax id."""

import argparse
import logging
import sys
from collections.abc import Iterable

from scrapy.utils.log import configure_logging

from .errors import ValidationError, VerificationError
from .settings import get_settings
from .tax_id import TaxId
from .verification import JSON, Unavailable, Unverified, Verification

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


def payload_lines(data: JSON, path: str = "data") -> Iterable[tuple[str, JSON]]:
    """Walk a registry payload down to its leaves, naming each by its dotted path.

    List items are named by their index. Empty objects and lists print nothing.

    Examples:
        >>> dict(payload_lines({"target": {"name": "ACME", "address": {"postcode": "RH10"}}}))
        {'data.target.name': 'ACME', 'data.target.address.postcode': 'RH10'}
        >>> list(payload_lines({"codes": ["A", None]}))
        [('data.codes.0', 'A'), ('data.codes.1', None)]

    """
    match data:
        case dict():
            for key, value in data.items():
                yield from payload_lines(value, f"{path}.{key}")
        case list():
            for index, value in enumerate(data):
                yield from payload_lines(value, f"{path}.{index}")
        case _:
            yield path, data


def describe_tax_id(tax_id: TaxId) -> Iterable[tuple[str, str]]:
    yield "value", tax_id.value
    yield "type", tax_id.tax_id_type
    yield "tax_country_code", tax_id.tax_country_code
    yield "country_code", tax_id.country_code
    yield "local_value", tax_id.local_value


def describe_verification(verification: Verification) -> Iterable[tuple[str, JSON]]:
    yield "status", verification.status.label
    if isinstance(verification.status, Unavailable):
        yield "reason", verification.status.reason.value
    yield "performed_at", verification.performed_at.isoformat()
    yield from payload_lines(verification.data)


def main(argv: list[str] | None = None) -> int:
    """Run the tax-ids CLI tool."""
    parser = argparse.ArgumentParser(
        prog="tax-ids",
        description="Validate and verify EU, GB, CH and NO VAT numbers",
        epilog=(
            "Exit status is 0 for valid (or verified, or unavailable) tax ids, "
            "1 for invalid or unverified ones and 2 on errors."
        ),
    )
    parser.add_argument(
        "value",
        metavar="TAX_ID",
        help="tax id including its 2-letter country prefix, e.g. SE123456789101",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="ask the government registry whether the tax id is legitimate",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        default=None,
        help="logging level (defaults to the LOG_LEVEL setting)",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        default=None,
        help="write the log to FILE instead of STDERR",
    )
    args = parser.parse_args(argv)

    overrides = {
        name: value
        for name, value in (("LOG_LEVEL", args.log_level), ("LOG_FILE", args.log_file))
        if value is not None
    }
    settings = get_settings(overrides)
    configure_logging(settings)

    try:
        tax_id = TaxId(args.value.strip(), settings)
    except ValidationError as error:
        print(f"{args.value}: {error}", file=sys.stderr)
        return EXIT_REJECTED
    lines = list(describe_tax_id(tax_id))

    status = EXIT_OK
    if args.verify:
        try:
            verification = tax_id.verify()
        except VerificationError as error:
            logger.error("Verification of %s failed", tax_id.value, exc_info=True)
            print(f"{tax_id.value}: {error}", file=sys.stderr)
            return EXIT_ERROR
        lines.extend(describe_verification(verification))
        if isinstance(verification.status, Unverified):
            status = EXIT_REJECTED

    for key, value in lines:
        print(f"{key}: {'' if value is None else value}")
    return status
