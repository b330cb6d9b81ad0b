"""EU VAT Information Exchange System (VIES) adapter.

https://ec.europa.eu/taxation_customs/vies/checkVatService.wsdl
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from scrapy.http import Request

from .errors import UnexpectedResponse
from .soap import flatten_xml
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

ENVELOPE = """\
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
    <soapenv:Header/>
    <soapenv:Body>
        <checkVat xmlns="urn:ec.europa.eu:taxud:vies:services:checkVat:types">
            <countryCode>{country}</countryCode>
            <vatNumber>{number}</vatNumber>
        </checkVat>
    </soapenv:Body>
</soapenv:Envelope>
"""

EXCLUDED_TAGS = frozenset({"Body", "Envelope", "Fault"})

# VIES sends "---" for fields it has no data for
ABSENT = "---"

FAULTS = MappingProxyType(
    {
        "SERVICE_UNAVAILABLE": UnavailableReason.SERVICE_UNAVAILABLE,
        "MS_UNAVAILABLE": UnavailableReason.SERVICE_UNAVAILABLE,
        "TIMEOUT": UnavailableReason.TIMEOUT,
        "VAT_BLOCKED": UnavailableReason.BLOCK,
        "IP_BLOCKED": UnavailableReason.BLOCK,
        "GLOBAL_MAX_CONCURRENT_REQ": UnavailableReason.RATE_LIMIT,
        "GLOBAL_MAX_CONCURRENT_REQ_TIME": UnavailableReason.RATE_LIMIT,
        "MS_MAX_CONCURRENT_REQ": UnavailableReason.RATE_LIMIT,
        "MS_MAX_CONCURRENT_REQ_TIME": UnavailableReason.RATE_LIMIT,
    }
)


def _absent_as_none(text: str) -> str | None:
    return None if text == ABSENT else text


class VIES(Verifier):
    name = "vies"
    url_setting = "VIES_URL"

    def build_request(self, tax_id: TaxId) -> Request:
        body = ENVELOPE.format(
            country=tax_id.tax_country_code, number=tax_id.local_value
        )
        return Request(
            self.url,
            method="POST",
            headers={"Content-Type": "text/xml"},
            body=body,
            encoding="utf-8",
        )

    def parse_response(self, response: VerificationResponse) -> Verification:
        data = flatten_xml(
            response.body, exclude=EXCLUDED_TAGS, convert=_absent_as_none
        )

        if "faultstring" in data:
            fault = data["faultstring"]
            if fault not in FAULTS:
                logger.warning("Unexpected VIES fault: %r", data)
                raise UnexpectedResponse(f"Unexpected faultstring: {fault}")
            return Verification(Unavailable(FAULTS[fault]), data)

        match data.get("valid"):
            case "true":
                status = Verified()
            case "false":
                status = Unverified()
            case None:
                raise UnexpectedResponse("Missing valid field in VIES response")
            case _:
                raise UnexpectedResponse(
                    "Invalid value for valid field in VIES response"
                )
        return Verification(status, data)
