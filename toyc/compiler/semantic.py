import logging
from typing import List

from ..core.ast import ASTNode, ASTVisitor, LiteralNode, IdentifierNode, BinaryOpNode, AssignmentNode
from ..core.diagnostics import DiagnosticEngine
from ..core.errors import SemanticError
from .symbols import SymbolTable, NUMERIC

logger = logging.getLogger(__name__)


class SemanticAnalyzer(ASTVisitor):
    """Reports uses of identifiers that were never assigned.

    Analysis is advisory: errors are collected, never raised, and code
    generation runs regardless.
    """

    def __init__(self):
        self.symbol_table = SymbolTable()
        self.errors: List[SemanticError] = []
        self.diagnostics = DiagnosticEngine()

    @property
    def ok(self) -> bool:
        return not self.errors

    def analyze(self, statements: List[ASTNode]) -> None:
        # Each pass starts from scratch
        self.symbol_table = SymbolTable()
        self.errors = []
        self.diagnostics.clear()

        for stmt in statements:
            self.visit(stmt)
        logger.debug("analyzed %d statements, %d symbols, %d errors",
                     len(statements), len(self.symbol_table), len(self.errors))

    def visit_literal(self, node: LiteralNode):
        pass

    def visit_identifier(self, node: IdentifierNode):
        symbol = self.symbol_table.lookup(node.name)
        if symbol is None:
            error = SemanticError(f"undeclared identifier '{node.name}'", node.location, node.name)
            self.errors.append(error)
            self.diagnostics.report_error(error)
            return
        symbol.references += 1

    def visit_binary_op(self, node: BinaryOpNode, left, right):
        pass

    def enter_assignment(self, node: AssignmentNode):
        # Declared before the right-hand side is checked, so `x = x + 1` is fine
        self.symbol_table.define(node.identifier, NUMERIC, node.location)

    def visit_assignment(self, node: AssignmentNode, expression):
        pass


def analyze(statements: List[ASTNode]) -> List[SemanticError]:
    """Analyze ``statements`` with a fresh analyzer and return its errors"""
    analyzer = SemanticAnalyzer()
    analyzer.analyze(statements)
    return analyzer.errors
