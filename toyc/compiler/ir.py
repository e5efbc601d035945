import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from ..core.ast import ASTNode, ASTVisitor, LiteralNode, IdentifierNode, BinaryOpNode, AssignmentNode

logger = logging.getLogger(__name__)


class Opcode(Enum):
    PUSH = "push"
    LOAD = "load"
    STORE = "store"
    OPERATE = "operate"


@dataclass(frozen=True)
class Instruction:
    """One stack-machine instruction, rendered as ``<opcode> <operand>``"""
    opcode: Opcode
    operand: str

    def __str__(self):
        return f"{self.opcode.value} {self.operand}"


class IRGenerator(ASTVisitor):
    """Lowers statement trees to stack-machine instructions in post-order.

    Every visit returns the fragment for its subtree; fragments are joined by
    the caller, so the generator keeps no state between calls.
    """

    def generate(self, statements: List[ASTNode]) -> List[Instruction]:
        code: List[Instruction] = []
        for stmt in statements:
            code.extend(self.visit(stmt))
        logger.debug("generated %d instructions for %d statements", len(code), len(statements))
        return code

    def visit_literal(self, node: LiteralNode) -> List[Instruction]:
        return [Instruction(Opcode.PUSH, node.value)]

    def visit_identifier(self, node: IdentifierNode) -> List[Instruction]:
        return [Instruction(Opcode.LOAD, node.name)]

    def visit_binary_op(self, node: BinaryOpNode, left, right) -> List[Instruction]:
        left.extend(right)
        left.append(Instruction(Opcode.OPERATE, node.operator))
        return left

    def visit_assignment(self, node: AssignmentNode, expression) -> List[Instruction]:
        expression.append(Instruction(Opcode.STORE, node.identifier))
        return expression


def generate(statements: List[ASTNode]) -> List[Instruction]:
    return IRGenerator().generate(statements)
