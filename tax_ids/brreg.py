"""Norwegian entity register (Brønnøysundregistrene, BRREG) adapter.

https://data.brreg.no/enhetsregisteret/oppslag/enheter
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from scrapy.http import Request

from .errors import UnexpectedStatusCode
from .http import decode_object
from .translator import translate_keys
from .verification import (
    JSON,
    Unavailable,
    UnavailableReason,
    Unverified,
    Verification,
    VerificationResponse,
    VerificationStatus,
    Verified,
    Verifier,
)

if TYPE_CHECKING:
    from .tax_id import TaxId

logger = logging.getLogger(__name__)

ACCEPT = "application/vnd.brreg.enhetsregisteret.enhet.v2+json"

VAT_SUFFIX = "MVA"

# Every field must be present with this exact value for the entity to count as verified
QUALIFICATION = MappingProxyType(
    {
        "registeredInVatRegister": True,
        "bankruptcy": False,
        "underLiquidation": False,
        "underForcedLiquidation": False,
    }
)


def org_number(tax_id: TaxId) -> str:
    """Return the organization number, the local value without ``MVA``."""
    return tax_id.local_value.removesuffix(VAT_SUFFIX)


def qualify(entity: dict[str, JSON]) -> VerificationStatus:
    """Decide the status of a registered entity.

    Examples:
        >>> qualify({"registeredInVatRegister": True, "bankruptcy": False,
        ...          "underLiquidation": False, "underForcedLiquidation": False})
        Verified()
        >>> qualify({"registeredInVatRegister": True})
        Unverified()

    """
    for key, expected in QUALIFICATION.items():
        if key not in entity or entity[key] is not expected:
            return Unverified()
    return Verified()


class BRREG(Verifier):
    name = "brreg"
    url_setting = "BRREG_URL"

    def build_request(self, tax_id: TaxId) -> Request:
        return Request(
            f"{self.url.rstrip('/')}/{org_number(tax_id)}",
            headers={"Accept": ACCEPT},
        )

    def parse_response(self, response: VerificationResponse) -> Verification:
        match response.status:
            # Never registered, or deleted: nothing more to tell
            case 404 | 410:
                return Verification(Unverified(), {})
            case 200:
                entity = translate_keys(decode_object(response))
                return Verification(qualify(entity), entity)
            case 500:
                error = translate_keys(decode_object(response))
                logger.info("BRREG server error: %r", error)
                return Verification(
                    Unavailable(UnavailableReason.SERVICE_UNAVAILABLE), error
                )
            case status:
                logger.warning("Unexpected BRREG status %d: %s", status, response.text)
                raise UnexpectedStatusCode(status)
