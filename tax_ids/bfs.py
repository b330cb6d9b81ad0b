"""Swiss UID register (BFS) adapter.

https://www.bfs.admin.ch/bfs/en/home/registers/enterprise-register/enterprise-identification/uid-register/uid-interfaces.html

The service accepts ``CHE123456789`` and ``CHE-123.456.789``, optionally
followed by a space and ``MWST``, ``TVA`` or ``IVA``.
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
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/" xmlns:uid="http://www.uid.admin.ch/xmlns/uid-wse">
    <soapenv:Header/>
    <soapenv:Body>
        <uid:ValidateVatNumber>
            <uid:vatNumber>{value}</uid:vatNumber>
        </uid:ValidateVatNumber>
    </soapenv:Body>
</soapenv:Envelope>
"""

HEADERS = MappingProxyType(
    {
        "Accept": "text/xml;charset=UTF-8",
        "Content-Type": "text/xml;charset=UTF-8",
        "SOAPAction": "http://www.uid.admin.ch/xmlns/uid-wse/IPublicServices/ValidateVatNumber",
    }
)

EXCLUDED_TAGS = frozenset(
    {
        "Body",
        "Envelope",
        "Fault",
        "businessFault",
        "detail",
        "ValidateVatNumberResponse",
    }
)

FAULTS = MappingProxyType(
    {
        "Data_validation_failed": Unverified(),
        "Request_limit_exceeded": Unavailable(UnavailableReason.RATE_LIMIT),
    }
)

RESULTS = MappingProxyType({"true": Verified(), "false": Unverified()})


class BFS(Verifier):
    name = "bfs"
    url_setting = "BFS_URL"

    def build_request(self, tax_id: TaxId) -> Request:
        return Request(
            self.url,
            method="POST",
            headers=dict(HEADERS),
            body=ENVELOPE.format(value=tax_id.value),
            encoding="utf-8",
        )

    def parse_response(self, response: VerificationResponse) -> Verification:
        data = flatten_xml(response.body, exclude=EXCLUDED_TAGS)

        if (fault := data.get("faultstring")) is not None:
            if fault not in FAULTS:
                logger.warning("Unexpected BFS fault: %r", data)
                raise UnexpectedResponse(f"Unexpected faultstring: {fault}")
            return Verification(FAULTS[fault], data)

        result = data.get("ValidateVatNumberResult")
        if result not in RESULTS:
            logger.warning("Unexpected BFS result: %r", data)
            raise UnexpectedResponse(
                "ValidateVatNumberResult should be 'true' or 'false'"
            )
        return Verification(RESULTS[result], data)
