import logging
from typing import List

from .tokens import TokenType, Token, SourceLocation, KEYWORDS, OPERATORS
from .diagnostics import DiagnosticEngine, DiagnosticLevel
from .errors import LexError

logger = logging.getLogger(__name__)

_SINGLE_CHAR_TOKENS = {
    ';': TokenType.SEMICOLON,
    '=': TokenType.EQUALS,
}


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


class Lexer:
    """Single-pass scanner producing the full token list for a source text.

    Whitespace is skipped, letters start identifiers or keywords, digits start
    integer literals. Any character the language does not know becomes an
    ERROR token and scanning carries on.
    """

    def __init__(self, source: str, filename: str = "<stdin>", warnings_as_errors: bool = False):
        self.source = source
        self.filename = filename
        self.warnings_as_errors = warnings_as_errors
        self.diagnostics = DiagnosticEngine()
        self.errors: List[LexError] = []
        self._reset()
        self._lines = [line.rstrip("\r") for line in source.split("\n")]

    def _reset(self):
        self.position = 0
        self.line = 1
        self.column = 1
        self.errors = []
        self.diagnostics.clear()

    def _location(self) -> SourceLocation:
        raw = self._lines[self.line - 1] if self.line <= len(self._lines) else ""
        return SourceLocation(self.line, self.column, self.filename, raw)

    def _advance(self) -> str:
        c = self.source[self.position]
        self.position += 1
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def _read_while(self, predicate) -> str:
        start = self.position
        while self.position < len(self.source) and predicate(self.source[self.position]):
            self._advance()
        return self.source[start:self.position]

    def tokenize(self) -> List[Token]:
        # Every call scans the whole source again
        self._reset()
        tokens: List[Token] = []
        n = len(self.source)
        while self.position < n:
            c = self.source[self.position]
            if c.isspace():
                self._advance()
                continue

            location = self._location()
            if c.isalpha():
                word = self._read_while(lambda ch: ch.isalpha() or _is_digit(ch))
                kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
                tokens.append(Token(kind, word, location))
            elif c in OPERATORS:
                tokens.append(Token(TokenType.OPERATOR, self._advance(), location))
            elif _is_digit(c):
                tokens.append(Token(TokenType.LITERAL, self._read_while(_is_digit), location))
            elif c in _SINGLE_CHAR_TOKENS:
                tokens.append(Token(_SINGLE_CHAR_TOKENS[c], self._advance(), location))
            else:
                tokens.append(Token(TokenType.ERROR, self._advance(), location))
                self._report(LexError(c, location))

        logger.debug("lexed %d tokens from %s", len(tokens), self.filename)
        return tokens

    def _report(self, error: LexError):
        self.errors.append(error)
        level = DiagnosticLevel.ERROR if self.warnings_as_errors else DiagnosticLevel.WARNING
        self.diagnostics.report_error(error, level)


def tokenize(source: str, filename: str = "<stdin>") -> List[Token]:
    """Tokenize ``source`` with a fresh lexer"""
    return Lexer(source, filename).tokenize()
