from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..core.tokens import SourceLocation

NUMERIC = "numeric"


@dataclass
class Symbol:
    name: str
    type_name: str = NUMERIC
    location: Optional[SourceLocation] = None
    assignments: int = 1
    references: int = 0

    @property
    def is_used(self) -> bool:
        return self.references > 0


class SymbolTable:
    """Flat name -> Symbol mapping for one analysis pass.

    There are no nested scopes: assigning to a name declares it, and assigning
    again overwrites the entry.
    """

    def __init__(self):
        self.symbols: Dict[str, Symbol] = {}

    def define(self, name: str, type_name: str = NUMERIC, location: Optional[SourceLocation] = None) -> Symbol:
        existing = self.symbols.get(name)
        symbol = Symbol(name, type_name, location)
        if existing is not None:
            symbol.assignments = existing.assignments + 1
            symbol.references = existing.references
        self.symbols[name] = symbol
        return symbol

    def lookup(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def get_unused_symbols(self) -> List[Symbol]:
        return [s for s in self.symbols.values() if not s.is_used]

    def as_dict(self) -> Dict[str, str]:
        return {name: symbol.type_name for name, symbol in self.symbols.items()}
