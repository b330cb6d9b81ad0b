"""UK HM Revenue & Customs VAT number check adapter.

https://developer.service.hmrc.gov.uk/api-documentation/docs/api/service/vat-registered-companies-api/1.0
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from scrapy.http import Request

from .errors import UnexpectedResponse
from .http import decode_object
from .verification import (
    Unavailable,
    UnavailableReason,
    Unverified,
    Verification,
    VerificationResponse,
    Verified,
    Verifier,
)

if TYPE_CHECKING:
    from .tax_id import TaxId

logger = logging.getLogger(__name__)

ACCEPT = "application/vnd.hmrc.1.0+json"

# Error codes that say more than "the service is down"
UNAVAILABLE_REASONS = MappingProxyType(
    {
        "MESSAGE_THROTTLED_OUT": UnavailableReason.RATE_LIMIT,
        "TOO_MANY_REQUESTS": UnavailableReason.RATE_LIMIT,
        "GATEWAY_TIMEOUT": UnavailableReason.TIMEOUT,
    }
)


class HMRC(Verifier):
    name = "hmrc"
    url_setting = "HMRC_URL"

    def build_request(self, tax_id: TaxId) -> Request:
        return Request(
            f"{self.url.rstrip('/')}/{tax_id.local_value}",
            headers={"Accept": ACCEPT},
        )

    def parse_response(self, response: VerificationResponse) -> Verification:
        data = decode_object(response)

        match data.get("code"):
            case None:
                return Verification(Verified(), data.get("target", {}))
            case "NOT_FOUND":
                return Verification(Unverified(), data)
            case str() as code:
                logger.info("HMRC answered %d with code %s", response.status, code)
                reason = UNAVAILABLE_REASONS.get(
                    code, UnavailableReason.SERVICE_UNAVAILABLE
                )
                return Verification(Unavailable(reason), data)
            case other:
                logger.warning("Unexpected HMRC response: %r", data)
                raise UnexpectedResponse(f"Unexpected code in HMRC response: {other!r}")
