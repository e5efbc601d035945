from typing import List, Optional
from .tokens import SourceLocation, Token


class ToycError(Exception):
    """Base class for toyc errors"""

    kind = "error"

    def __init__(self, message: str, location: Optional[SourceLocation] = None, kind: Optional[str] = None,
                 notes: Optional[List[str]] = None):
        self.message = message
        self.location = location
        self.notes = notes or []
        if kind is not None:
            self.kind = kind
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message

    def __eq__(self, other):
        if not isinstance(other, ToycError):
            return NotImplemented
        return (type(self), self.kind, self.message, self.location) == \
            (type(other), other.kind, other.message, other.location)

    def __hash__(self):
        return hash((type(self), self.kind, self.message, self.location))


class LexError(ToycError):
    """Unrecognized character in the source text"""

    kind = "unrecognized-character"

    def __init__(self, character: str, location: Optional[SourceLocation] = None):
        self.character = character
        super().__init__(f"unrecognized character {character!r}", location)


class ParseError(ToycError):
    """A statement whose shape could not be completed"""

    MISSING_SEMICOLON = "missing-semicolon"
    EXPECTED_EXPRESSION = "expected-expression"

    kind = EXPECTED_EXPRESSION

    def __init__(self, message: str, token: Optional[Token] = None, kind: Optional[str] = None):
        self.token = token
        location = token.location if token is not None else None
        super().__init__(message, location, kind)


class SemanticError(ToycError):
    """Semantic analysis error"""

    UNDECLARED_IDENTIFIER = "undeclared-identifier"

    kind = UNDECLARED_IDENTIFIER

    def __init__(self, message: str, location: Optional[SourceLocation] = None, name: Optional[str] = None):
        self.name = name
        notes = [f"'{name}' is declared by assigning to it, e.g. {name} = 0;"] if name else None
        super().__init__(message, location, notes=notes)
