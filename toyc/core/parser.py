import logging
from dataclasses import dataclass
from typing import List, Optional

from .tokens import TokenType, Token, ADDITIVE_OPERATORS, MULTIPLICATIVE_OPERATORS
from .ast import ASTNode, LiteralNode, IdentifierNode, BinaryOpNode, AssignmentNode
from .diagnostics import DiagnosticEngine
from .errors import ParseError

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of parsing one statement: a node or the error that stopped it"""
    node: Optional[ASTNode] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Parser:
    """Recursive-descent parser over a materialized token list.

    statement  := IDENTIFIER '=' expression ';' | expression [';']
    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := LITERAL | IDENTIFIER | KEYWORD
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.position = 0
        self.diagnostics = DiagnosticEngine()
        self.errors: List[ParseError] = []

    # token cursor

    def _at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        if self._at_end():
            return None
        return self.tokens[self.position]

    def _next(self) -> Token:
        tok = self.tokens[self.position]
        self.position += 1
        return tok

    def _match(self, typ: TokenType) -> Optional[Token]:
        tok = self._peek()
        if tok is not None and tok.type == typ:
            return self._next()
        return None

    def _match_operator(self, operators) -> Optional[Token]:
        tok = self._peek()
        if tok is not None and tok.type == TokenType.OPERATOR and tok.value in operators:
            return self._next()
        return None

    # statements

    def parse(self) -> List[ASTNode]:
        """Parse every statement, keeping only the ones that succeeded"""
        return [result.node for result in self.parse_results() if result.ok]

    def parse_results(self) -> List[ParseResult]:
        results: List[ParseResult] = []
        while not self._at_end():
            results.append(self.parse_statement())
        logger.debug("parsed %d statements (%d failed)", len(results), len(self.errors))
        return results

    def parse_statement(self) -> ParseResult:
        start = self.position
        try:
            return ParseResult(node=self._statement())
        except ParseError as e:
            self._synchronize(e, start)
            self.errors.append(e)
            self.diagnostics.report_error(e)
            return ParseResult(error=e)

    def _statement(self) -> ASTNode:
        ident = self._match(TokenType.IDENTIFIER)
        if ident is not None:
            if self._match(TokenType.EQUALS) is not None:
                expression = self.parse_expression()
                if self._match(TokenType.SEMICOLON) is None:
                    raise ParseError("expected semicolon after assignment", self._peek() or ident,
                                     ParseError.MISSING_SEMICOLON)
                return AssignmentNode(ident.value, expression, ident.location)
            # Not an assignment: give the identifier back to the expression
            self.position -= 1

        expression = self.parse_expression()
        self._match(TokenType.SEMICOLON)
        return expression

    def _synchronize(self, error: ParseError, start: int):
        if error.kind == ParseError.EXPECTED_EXPRESSION:
            while not self._at_end():
                if self._next().type == TokenType.SEMICOLON:
                    break
        if self.position <= start and not self._at_end():
            self.position = start + 1

    # expressions

    def parse_expression(self) -> ASTNode:
        left = self.parse_term()
        while True:
            op = self._match_operator(ADDITIVE_OPERATORS)
            if op is None:
                return left
            left = BinaryOpNode(left, op.value, self.parse_term())

    def parse_term(self) -> ASTNode:
        left = self.parse_factor()
        while True:
            op = self._match_operator(MULTIPLICATIVE_OPERATORS)
            if op is None:
                return left
            left = BinaryOpNode(left, op.value, self.parse_factor())

    def parse_factor(self) -> ASTNode:
        tok = self._peek()
        if tok is None:
            last = self.tokens[-1] if self.tokens else None
            raise ParseError("expected expression, found end of input", last)
        if tok.type == TokenType.LITERAL:
            return LiteralNode(self._next().value)
        if tok.type in (TokenType.IDENTIFIER, TokenType.KEYWORD):
            self._next()
            return IdentifierNode(tok.value, tok.location)
        raise ParseError(f"expected expression, found {tok.value!r}", tok)


def parse(tokens: List[Token]) -> List[ASTNode]:
    """Parse ``tokens`` with a fresh parser, dropping failed statements"""
    return Parser(tokens).parse()
