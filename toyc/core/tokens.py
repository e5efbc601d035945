from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


class TokenType(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"
    LITERAL = "LITERAL"
    SEMICOLON = "SEMICOLON"
    EQUALS = "EQUALS"
    ERROR = "ERROR"
    # Recognized by the lexer but never emitted
    WHITESPACE = "WHITESPACE"


KEYWORDS = frozenset({"if", "else"})
OPERATORS = frozenset({"+", "-", "*", "/"})
ADDITIVE_OPERATORS = frozenset({"+", "-"})
MULTIPLICATIVE_OPERATORS = frozenset({"*", "/"})


@dataclass(frozen=True)
class SourceLocation:
    line: int
    column: int
    file: str = "<stdin>"
    raw_line: str = ""

    def __str__(self):
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def __str__(self):
        return f"<{self.type.name}, {self.value}>"
