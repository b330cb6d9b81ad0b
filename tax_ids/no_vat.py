"""Norwegian VAT numbers, verified by BRREG.

A Norwegian VAT number is the 9 digit organization number, optionally followed
by ``MVA`` (merverdiavgift).
"""

from .brreg import BRREG
from .tax_id_type import TaxIdType, compile_patterns

PATTERNS = compile_patterns({"NO": r"^NO[0-9]{9}(MVA)?$"})


class NoVat(TaxIdType):
    name = "no_vat"
    syntax_map = PATTERNS
    verifier_class = BRREG

    def country_code_from_tax_country(self, tax_country_code: str) -> str:
        return tax_country_code
