"""Swiss VAT numbers, verified by the BFS UID register."""

from .bfs import BFS
from .tax_id_type import TaxIdType, compile_patterns

PATTERNS = compile_patterns(
    {"CH": r"^CHE([0-9]{9}|-[0-9]{3}(\.[0-9]{3}){2})(?:\s(MWST|TVA|IVA))?$"}
)


class ChVat(TaxIdType):
    name = "ch_vat"
    syntax_map = PATTERNS
    verifier_class = BFS

    def country_code_from_tax_country(self, tax_country_code: str) -> str:
        return tax_country_code
