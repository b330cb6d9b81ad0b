"""Syntax registry: the union of the patterns of every enabled tax regime."""

import re
from collections.abc import Iterable, Mapping
from functools import cache
from types import MappingProxyType

from scrapy.settings import BaseSettings

from .ch_vat import ChVat
from .errors import ConfigurationError, InvalidSyntax, UnsupportedCountryCode
from .eu_vat import EuVat
from .gb_vat import GbVat
from .no_vat import NoVat
from .settings import get_settings
from .tax_id_type import TaxIdType, split_country_code

TAX_ID_TYPES: Mapping[str, TaxIdType] = MappingProxyType(
    {tax_id_type.name: tax_id_type for tax_id_type in (EuVat(), GbVat(), ChVat(), NoVat())}
)


def enabled_tax_id_types(settings: BaseSettings | None = None) -> tuple[str, ...]:
    """Names of the tax regimes enabled by the ``TAX_ID_TYPES`` setting."""
    settings = settings if settings is not None else get_settings()
    names = tuple(settings.getlist("TAX_ID_TYPES"))
    if unknown := [name for name in names if name not in TAX_ID_TYPES]:
        raise ConfigurationError(f"Unknown tax id types: {', '.join(unknown)}")
    return names


def build_syntax_registry(
    tax_id_types: Iterable[TaxIdType],
) -> Mapping[str, re.Pattern[str]]:
    """Merge the syntax maps of ``tax_id_types``.

    Raises:
        ConfigurationError: Two tax regimes claim the same country code.

    """
    registry: dict[str, re.Pattern[str]] = {}
    owners: dict[str, str] = {}
    for tax_id_type in tax_id_types:
        for country_code, pattern in tax_id_type.syntax_map.items():
            if country_code in owners:
                raise ConfigurationError(
                    f"Country code {country_code} is claimed by both "
                    f"{owners[country_code]} and {tax_id_type.name}"
                )
            owners[country_code] = tax_id_type.name
            registry[country_code] = pattern
    return MappingProxyType(registry)


@cache
def syntax_registry(names: tuple[str, ...]) -> Mapping[str, re.Pattern[str]]:
    return build_syntax_registry(TAX_ID_TYPES[name] for name in names)


def validate_syntax(value: str, settings: BaseSettings | None = None) -> None:
    """Check ``value`` against the pattern of its 2-character country prefix.

    Args:
        value: The full tax id, country prefix included.
        settings: Selects the enabled tax regimes. Defaults to `get_settings`.

    Raises:
        InvalidLength: ``value`` is shorter than 2 characters.
        UnsupportedCountryCode: No enabled tax regime governs the prefix.
        InvalidSyntax: The prefix is supported but ``value`` does not match.

    Examples:
        >>> validate_syntax("SE123456789101")
        >>> validate_syntax("CHE-778.887.921 MWST")
        >>> validate_syntax("SE12")
        Traceback (most recent call last):
        ...
        tax_ids.errors.InvalidSyntax: Invalid syntax
        >>> validate_syntax("XX123456789")
        Traceback (most recent call last):
        ...
        tax_ids.errors.UnsupportedCountryCode: Country code XX is not supported

    """
    tax_country_code, _ = split_country_code(value)
    pattern = syntax_registry(enabled_tax_id_types(settings)).get(tax_country_code)
    if pattern is None:
        raise UnsupportedCountryCode(tax_country_code)
    if not pattern.fullmatch(value):
        raise InvalidSyntax(value)
