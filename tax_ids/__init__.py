"""Validate and verify European, British, Norwegian and Swiss VAT numbers.

Syntax is checked locally; verification asks the government registry of the
tax id's regime (VIES, HMRC, BFS or BRREG)::

    >>> from tax_ids import TaxId
    >>> tax_id = TaxId("CHE-778.887.921 MWST")
    >>> tax_id.country_code, tax_id.tax_id_type
    ('CH', 'ch_vat')

"""

from .errors import (
    ConfigurationError,
    HttpError,
    InvalidLength,
    InvalidSyntax,
    JsonParsingError,
    TaxIdError,
    UnexpectedResponse,
    UnexpectedStatusCode,
    UnsupportedCountryCode,
    ValidationError,
    VerificationError,
    XmlParsingError,
)
from .syntax import validate_syntax
from .tax_id import TaxId
from .verification import (
    Unavailable,
    UnavailableReason,
    Unverified,
    Verification,
    VerificationStatus,
    Verified,
)

__all__ = [
    "ConfigurationError",
    "HttpError",
    "InvalidLength",
    "InvalidSyntax",
    "JsonParsingError",
    "TaxId",
    "TaxIdError",
    "Unavailable",
    "UnavailableReason",
    "UnexpectedResponse",
    "UnexpectedStatusCode",
    "UnsupportedCountryCode",
    "Unverified",
    "ValidationError",
    "Verification",
    "VerificationError",
    "VerificationStatus",
    "Verified",
    "XmlParsingError",
    "validate_syntax",
]
