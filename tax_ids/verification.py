"""Verification results and the contract every registry adapter implements."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Self

from scrapy.http import Request, TextResponse
from scrapy.settings import BaseSettings

from .http import fetch

if TYPE_CHECKING:
    from .tax_id import TaxId

logger = logging.getLogger(__name__)

type JSON = None | bool | int | float | str | list[JSON] | dict[str, JSON]
"""Type alias for `json` serializable values."""

type VerificationResponse = TextResponse
"""Raw registry reply: ``status`` plus the body ``text``."""


class UnavailableReason(StrEnum):
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    BLOCK = "block"
    RATE_LIMIT = "rate_limit"


@dataclass(frozen=True, slots=True)
class Verified:
    """The registry confirmed the tax id as legitimate."""

    label: ClassVar[str] = "verified"


@dataclass(frozen=True, slots=True)
class Unverified:
    """The registry identified the tax id as illegitimate."""

    label: ClassVar[str] = "unverified"


@dataclass(frozen=True, slots=True)
class Unavailable:
    """The registry could not give an authoritative answer."""

    reason: UnavailableReason
    label: ClassVar[str] = "unavailable"


type VerificationStatus = Verified | Unverified | Unavailable


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Verification:
    """Outcome of one registry call.

    ``status`` is what callers should act on. In a checkout, for example:

    - process the transaction on `Verified`;
    - block it, or ask for a corrected number, on `Unverified`;
    - process it on `Unavailable`, but verify again at a later stage.

    ``data`` holds the fields picked from the registry reply, or the error
    details the registry sent when the status is `Unavailable`. Its shape
    depends on the registry.
    """

    status: VerificationStatus
    data: JSON = field(default_factory=dict)
    performed_at: datetime = field(default_factory=_now)


class Verifier(ABC):
    """One registry adapter.

    Subclasses build the registry request and translate the reply into a
    `Verification`. Known failure modes of the registry become `Unavailable`;
    anything else raises a `tax_ids.errors.VerificationError`.
    """

    name: ClassVar[str]
    url_setting: ClassVar[str]

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> Self:
        return cls(
            settings[cls.url_setting],
            timeout=settings.getfloat("DOWNLOAD_TIMEOUT") or None,
            user_agent=settings.get("USER_AGENT"),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"

    @abstractmethod
    def build_request(self, tax_id: TaxId) -> Request:
        """Build the registry request for ``tax_id``."""

    def make_request(self, tax_id: TaxId) -> VerificationResponse:
        return fetch(
            self.build_request(tax_id),
            timeout=self.timeout,
            user_agent=self.user_agent,
        )

    @abstractmethod
    def parse_response(self, response: VerificationResponse) -> Verification:
        """Translate a registry reply into a `Verification`."""

    def verify(self, tax_id: TaxId) -> Verification:
        response = self.make_request(tax_id)
        verification = self.parse_response(response)
        logger.info(
            "%s verification of %s: %s", self.name, tax_id.value, verification.status
        )
        return verification
