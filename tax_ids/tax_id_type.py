"""The contract shared by the supported tax regimes."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from scrapy.settings import BaseSettings

from .errors import InvalidLength, InvalidSyntax, UnsupportedCountryCode
from .settings import get_settings
from .verification import Verification, Verifier

if TYPE_CHECKING:
    from .tax_id import TaxId


def split_country_code(value: str) -> tuple[str, str]:
    """Split a tax id into its 2-character tax country code and local part.

    Examples:
        >>> split_country_code("XI123456789")
        ('XI', '123456789')
        >>> split_country_code("S")
        Traceback (most recent call last):
        ...
        tax_ids.errors.InvalidLength: Tax id 'S' is too short to carry a country code

    """
    if len(value) < 2:
        raise InvalidLength(value)
    return value[:2], value[2:]


class TaxIdType(ABC):
    """A tax regime: its syntax patterns and the registry that verifies it."""

    name: ClassVar[str]
    syntax_map: ClassVar[Mapping[str, re.Pattern[str]]]
    verifier_class: ClassVar[type[Verifier]]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def validate_syntax(self, value: str) -> None:
        tax_country_code, _ = split_country_code(value)
        pattern = self.syntax_map.get(tax_country_code)
        if pattern is None:
            raise UnsupportedCountryCode(tax_country_code)
        if not pattern.fullmatch(value):
            raise InvalidSyntax(value)

    @abstractmethod
    def country_code_from_tax_country(self, tax_country_code: str) -> str:
        """Return the ISO country code behind a tax country code."""

    def verifier(self, settings: BaseSettings | None = None) -> Verifier:
        if settings is None:
            settings = get_settings()
        return self.verifier_class.from_settings(settings)

    def verify(self, tax_id: TaxId, settings: BaseSettings | None = None) -> Verification:
        return self.verifier(settings).verify(tax_id)


def compile_patterns(patterns: Mapping[str, str]) -> Mapping[str, re.Pattern[str]]:
    return MappingProxyType(
        {code: re.compile(pattern) for code, pattern in patterns.items()}
    )
