import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .ast import ASTNode
from .diagnostics import DiagnosticEngine
from .errors import ParseError, SemanticError
from .lexer import Lexer
from .parser import Parser, ParseResult
from .tokens import Token
from ..compiler.semantic import SemanticAnalyzer
from ..compiler.ir import IRGenerator, Instruction
from ..compiler.emitter import CodeEmitter

logger = logging.getLogger(__name__)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


class CompilerConfig:
    def __init__(self):
        self.filename = "<stdin>"
        self.verbose = False
        # Stop after the first stage that reported errors
        self.strict = False
        # Report unrecognized characters as errors instead of warnings
        self.warnings_as_errors = False
        self.minimal_ui = False

    @classmethod
    def from_env(cls) -> "CompilerConfig":
        config = cls()
        config.strict = _env_flag('TOYC_STRICT')
        config.warnings_as_errors = _env_flag('TOYC_WARNINGS_AS_ERRORS')
        config.minimal_ui = _env_flag('TOYC_MINIMAL_UI')
        return config


@dataclass
class CompilationResult:
    source: str
    filename: str = "<stdin>"
    tokens: List[Token] = field(default_factory=list)
    parse_results: List[ParseResult] = field(default_factory=list)
    symbols: Dict[str, str] = field(default_factory=dict)
    semantic_errors: List[SemanticError] = field(default_factory=list)
    ir: List[Instruction] = field(default_factory=list)
    machine_code: Optional[str] = None
    diagnostics: DiagnosticEngine = field(default_factory=DiagnosticEngine)
    halted_after: Optional[str] = None

    @property
    def statements(self) -> List[ASTNode]:
        return [r.node for r in self.parse_results if r.ok]

    @property
    def parse_errors(self) -> List[ParseError]:
        return [r.error for r in self.parse_results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_errors()


class ToyCompiler:
    STAGE_COUNT = 5

    def __init__(self, config: Optional[CompilerConfig] = None,
                 on_stage: Optional[Callable[[int, int, str], None]] = None):
        self.config = config or CompilerConfig()
        self.on_stage = on_stage

    def _stage(self, step: int, message: str):
        log = logger.info if self.config.verbose else logger.debug
        log("Phase %d: %s", step, message)
        if self.on_stage is not None:
            self.on_stage(step, self.STAGE_COUNT, message)

    def _halt(self, result: CompilationResult, stage: str, engine: DiagnosticEngine) -> bool:
        result.diagnostics.extend(engine.diagnostics)
        if self.config.strict and engine.has_errors():
            logger.info("stopping after %s: %d error(s)", stage, engine.error_count)
            result.halted_after = stage
            return True
        return False

    def compile(self, source: str, filename: Optional[str] = None) -> CompilationResult:
        filename = filename or self.config.filename
        result = CompilationResult(source=source, filename=filename)
        self._stage(1, "Lexical Analysis")
        lexer = Lexer(source, filename, warnings_as_errors=self.config.warnings_as_errors)
        result.tokens = lexer.tokenize()
        if self._halt(result, "lexing", lexer.diagnostics):
            return result

        self._stage(2, "Parsing")
        parser = Parser(result.tokens)
        result.parse_results = parser.parse_results()
        if self._halt(result, "parsing", parser.diagnostics):
            return result

        statements = result.statements
        self._stage(3, "Semantic Analysis")
        analyzer = SemanticAnalyzer()
        analyzer.analyze(statements)
        result.symbols = analyzer.symbol_table.as_dict()
        result.semantic_errors = list(analyzer.errors)
        if self._halt(result, "analysis", analyzer.diagnostics):
            return result

        self._stage(4, "IR Generation")
        result.ir = IRGenerator().generate(statements)

        self._stage(5, "Code Emission")
        result.machine_code = CodeEmitter().emit(result.ir)

        logger.info("compiled %s: %d statements, %d instructions, %d error(s), %d warning(s)",
                    filename, len(statements), len(result.ir),
                    result.diagnostics.error_count, result.diagnostics.warning_count)
        return result


def create_default_compiler() -> ToyCompiler:
    return ToyCompiler(CompilerConfig())


def compile_string(source: str, config: Optional[CompilerConfig] = None) -> CompilationResult:
    return ToyCompiler(config).compile(source)


def compile_lines(lines: Iterable[str], config: Optional[CompilerConfig] = None) -> CompilationResult:
    """Compile a program supplied line by line; the lines are joined before lexing"""
    return ToyCompiler(config).compile("\n".join(line.rstrip("\n") for line in lines))


def compile_file(filepath, config: Optional[CompilerConfig] = None) -> CompilationResult:
    path = Path(filepath)
    source = path.read_text(encoding='utf-8')
    return ToyCompiler(config).compile(source, str(path))
