"""Core package re-exports: tokens, lexer, AST, parser and the pipeline"""
from .tokens import TokenType, Token, SourceLocation, KEYWORDS, OPERATORS
from .errors import ToycError, LexError, ParseError, SemanticError
from .diagnostics import DiagnosticLevel, Diagnostic, DiagnosticEngine
from .lexer import Lexer, tokenize
from .ast import ASTNode, ASTVisitor, LiteralNode, IdentifierNode, BinaryOpNode, AssignmentNode
from .parser import Parser, ParseResult, parse
from .pipeline import (CompilerConfig, CompilationResult, ToyCompiler, create_default_compiler,
                       compile_string, compile_lines, compile_file)

__all__ = [
    'TokenType', 'Token', 'SourceLocation', 'KEYWORDS', 'OPERATORS',
    'ToycError', 'LexError', 'ParseError', 'SemanticError',
    'DiagnosticLevel', 'Diagnostic', 'DiagnosticEngine',
    'Lexer', 'tokenize',
    'ASTNode', 'ASTVisitor', 'LiteralNode', 'IdentifierNode', 'BinaryOpNode', 'AssignmentNode',
    'Parser', 'ParseResult', 'parse',
    'CompilerConfig', 'CompilationResult', 'ToyCompiler', 'create_default_compiler',
    'compile_string', 'compile_lines', 'compile_file',
]
