"""British VAT numbers, verified by HMRC."""

from .hmrc import HMRC
from .tax_id_type import TaxIdType, compile_patterns

# 9 or 12 digits, or government departments (GD) and health authorities (HA)
PATTERNS = compile_patterns({"GB": r"^GB([0-9]{9}|[0-9]{12}|(HA|GD)[0-9]{3})$"})


class GbVat(TaxIdType):
    name = "gb_vat"
    syntax_map = PATTERNS
    verifier_class = HMRC

    def country_code_from_tax_country(self, tax_country_code: str) -> str:
        return tax_country_code
