"""VAT numbers of the EU member states and Northern Ireland, verified by VIES."""

from .tax_id_type import TaxIdType, compile_patterns
from .vies import VIES

# fmt:off
PATTERNS = compile_patterns({
    "AT": r"^ATU[0-9]{8}$",                                         # Austria
    "BE": r"^BE[0-1][0-9]{9}$",                                     # Belgium
    "BG": r"^BG[0-9]{9,10}$",                                       # Bulgaria
    "CY": r"^CY[0-69][0-9]{7}[A-Z]$",                               # Cyprus
    "CZ": r"^CZ[0-9]{8,10}$",                                       # Czech Republic
    "DE": r"^DE[0-9]{9}$",                                          # Germany
    "DK": r"^DK[0-9]{8}$",                                          # Denmark
    "EE": r"^EE10[0-9]{7}$",                                        # Estonia
    "EL": r"^EL[0-9]{9}$",                                          # Greece
    "ES": r"^ES([A-Z][0-9]{8}|[0-9]{8}[A-Z]|[A-Z][0-9]{7}[A-Z])$",  # Spain
    "FI": r"^FI[0-9]{8}$",                                          # Finland
    "FR": r"^FR[A-HJ-NP-Z0-9]{2}[0-9]{9}$",                         # France
    "HR": r"^HR[0-9]{11}$",                                         # Croatia
    "HU": r"^HU[0-9]{8}$",                                          # Hungary
    "IE": r"^IE([0-9][A-Z][0-9]{5}|[0-9]{7}[A-Z]?)[A-Z]$",          # Ireland
    "IT": r"^IT[0-9]{11}$",                                         # Italy
    "LT": r"^LT([0-9]{7}1[0-9]|[0-9]{10}1[0-9])$",                  # Lithuania
    "LU": r"^LU[0-9]{8}$",                                          # Luxembourg
    "LV": r"^LV[0-9]{11}$",                                         # Latvia
    "MT": r"^MT[0-9]{8}$",                                          # Malta
    "NL": r"^NL[0-9]{9}B[0-9]{2}$",                                 # Netherlands
    "PL": r"^PL[0-9]{10}$",                                         # Poland
    "PT": r"^PT[0-9]{9}$",                                          # Portugal
    "RO": r"^RO[1-9][0-9]{1,9}$",                                   # Romania
    "SE": r"^SE[0-9]{10}01$",                                       # Sweden
    "SI": r"^SI[0-9]{8}$",                                          # Slovenia
    "SK": r"^SK[0-9]{10}$",                                         # Slovakia
    "XI": r"^XI([0-9]{9}|[0-9]{12}|(HA|GD)[0-9]{3})$",              # Northern Ireland
})
# fmt:on

COUNTRIES = frozenset(PATTERNS)

# Tax country codes that differ from the ISO 3166 country code
COUNTRY_CODES = {"XI": "GB", "EL": "GR"}


class EuVat(TaxIdType):
    name = "eu_vat"
    syntax_map = PATTERNS
    verifier_class = VIES

    def country_code_from_tax_country(self, tax_country_code: str) -> str:
        """
        >>> [EuVat().country_code_from_tax_country(code) for code in ("XI", "EL", "SE")]
        ['GB', 'GR', 'SE']
        """
        return COUNTRY_CODES.get(tax_country_code, tax_country_code)
