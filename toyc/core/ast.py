#!/usr/bin/env python3
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import SourceLocation


class ASTNode(ABC):
    """Base class for all AST nodes"""

    @abstractmethod
    def accept(self, visitor, *child_results):
        """Accept a visitor for the visitor pattern"""
        pass

    def enter(self, visitor):
        """Pre-order hook, called before any child is visited"""
        pass

    def children(self) -> List['ASTNode']:
        return []

    def __str__(self):
        return format_node(self)


@dataclass
class LiteralNode(ASTNode):
    """Integer literal: 10"""
    value: str

    def accept(self, visitor, *child_results):
        return visitor.visit_literal(self)


@dataclass
class IdentifierNode(ASTNode):
    """Variable reference: x"""
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def accept(self, visitor, *child_results):
        return visitor.visit_identifier(self)


@dataclass
class BinaryOpNode(ASTNode):
    """Binary arithmetic: left op right"""
    left: ASTNode
    operator: str
    right: ASTNode

    def accept(self, visitor, *child_results):
        left, right = child_results
        return visitor.visit_binary_op(self, left, right)

    def children(self):
        return [self.left, self.right]


@dataclass
class AssignmentNode(ASTNode):
    """Assignment, which also declares the variable: name = expression;"""
    identifier: str
    expression: ASTNode
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def accept(self, visitor, *child_results):
        expression, = child_results
        return visitor.visit_assignment(self, expression)

    def enter(self, visitor):
        visitor.enter_assignment(self)

    def children(self):
        return [self.expression]


class ASTVisitor(ABC):
    """Visitor interface for traversing AST

    ``visit`` folds a tree bottom-up: each visit method receives the results
    already computed for the node's children, left before right. The walk
    keeps its own stack, so tree depth is not bounded by the interpreter's
    recursion limit.

    Subclasses must implement every visit method; a visitor missing one
    cannot be instantiated.
    """

    def visit(self, node: ASTNode):
        results = []
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded:
                arity = len(current.children())
                child_results = results[len(results) - arity:]
                del results[len(results) - arity:]
                results.append(current.accept(self, *child_results))
                continue
            current.enter(self)
            stack.append((current, True))
            for child in reversed(current.children()):
                stack.append((child, False))
        return results[0]

    def enter_assignment(self, node: 'AssignmentNode'):
        pass

    @abstractmethod
    def visit_literal(self, node: LiteralNode):
        pass

    @abstractmethod
    def visit_identifier(self, node: IdentifierNode):
        pass

    @abstractmethod
    def visit_binary_op(self, node: BinaryOpNode, left, right):
        pass

    @abstractmethod
    def visit_assignment(self, node: AssignmentNode, expression):
        pass


class _Formatter(ASTVisitor):
    def visit_literal(self, node):
        return f"Literal: {node.value}"

    def visit_identifier(self, node):
        return f"Identifier: {node.name}"

    def visit_binary_op(self, node, left, right):
        return f"({left} {node.operator} {right})"

    def visit_assignment(self, node, expression):
        return f"{node.identifier} = {expression}"


def format_node(node: ASTNode) -> str:
    """Render ``node`` as text, e.g. ``y = (Identifier: x + Literal: 5)``"""
    return _Formatter().visit(node)
