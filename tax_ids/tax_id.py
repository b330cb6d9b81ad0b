"""The validated tax id value and the dispatch to its tax regime."""

import logging

from scrapy.settings import BaseSettings

from .errors import UnsupportedCountryCode
from .eu_vat import COUNTRIES as EU_COUNTRIES
from .settings import get_settings
from .syntax import TAX_ID_TYPES, enabled_tax_id_types, validate_syntax
from .tax_id_type import TaxIdType, split_country_code
from .verification import Verification

logger = logging.getLogger(__name__)


def resolve_tax_id_type(
    tax_country_code: str, settings: BaseSettings | None = None
) -> TaxIdType:
    """Pick the tax regime governing ``tax_country_code``.

    Examples:
        >>> resolve_tax_id_type("XI")
        EuVat()
        >>> resolve_tax_id_type("GB")
        GbVat()

    """
    match tax_country_code:
        case "GB" | "CH" | "NO":
            name = f"{tax_country_code.lower()}_vat"
        case code if code in EU_COUNTRIES:
            name = "eu_vat"
        case _:
            raise UnsupportedCountryCode(tax_country_code)
    if name not in enabled_tax_id_types(settings):
        raise UnsupportedCountryCode(tax_country_code)
    return TAX_ID_TYPES[name]


class TaxId:
    """A tax id that passed the syntax checks of its tax regime.

    Args:
        value: The full tax id, starting with its 2-character tax country code.
        settings: Selects the enabled tax regimes and configures verification.

    Raises:
        tax_ids.errors.ValidationError: ``value`` is not a valid tax id.

    Examples:
        >>> tax_id = TaxId("XI123456789")
        >>> tax_id.tax_country_code, tax_id.country_code, tax_id.local_value
        ('XI', 'GB', '123456789')
        >>> tax_id.tax_id_type
        'eu_vat'

    """

    __slots__ = (
        "_value",
        "_tax_country_code",
        "_country_code",
        "_local_value",
        "_id_type",
        "_settings",
    )

    def __init__(self, value: str, settings: BaseSettings | None = None) -> None:
        settings = settings if settings is not None else get_settings()
        tax_country_code, local_value = split_country_code(value)
        id_type = resolve_tax_id_type(tax_country_code, settings)
        id_type.validate_syntax(value)

        self._value = value
        self._tax_country_code = tax_country_code
        self._country_code = id_type.country_code_from_tax_country(tax_country_code)
        self._local_value = local_value
        self._id_type = id_type
        self._settings = settings

    @staticmethod
    def validate_syntax(value: str, settings: BaseSettings | None = None) -> None:
        validate_syntax(value, settings)

    @property
    def value(self) -> str:
        return self._value

    @property
    def tax_country_code(self) -> str:
        return self._tax_country_code

    @property
    def country_code(self) -> str:
        return self._country_code

    @property
    def local_value(self) -> str:
        return self._local_value

    @property
    def id_type(self) -> TaxIdType:
        return self._id_type

    @property
    def tax_id_type(self) -> str:
        return self._id_type.name

    def verify(self) -> Verification:
        """Ask the registry of this tax id's regime whether it is legitimate.

        Raises:
            tax_ids.errors.VerificationError: The registry call failed or its
                answer could not be interpreted.

        """
        logger.debug("Verifying %s as %s", self._value, self.tax_id_type)
        return self._id_type.verify(self, self._settings)

    def __repr__(self) -> str:
        return (
            f"TaxId(value={self._value!r}, country_code={self._country_code!r}, "
            f"tax_country_code={self._tax_country_code!r}, "
            f"local_value={self._local_value!r}, id_type={self.tax_id_type!r})"
        )

    def __str__(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaxId):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)
