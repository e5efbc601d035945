"""Back half of the pipeline: symbols, semantic analysis, IR and emission"""
from .symbols import Symbol, SymbolTable, NUMERIC
from .semantic import SemanticAnalyzer, analyze
from .ir import Opcode, Instruction, IRGenerator, generate
from .emitter import CodeEmitter, emit

__all__ = [
    'Symbol', 'SymbolTable', 'NUMERIC',
    'SemanticAnalyzer', 'analyze',
    'Opcode', 'Instruction', 'IRGenerator', 'generate',
    'CodeEmitter', 'emit',
]
