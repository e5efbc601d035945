import pytest

from toyc.core.ast import AssignmentNode, IdentifierNode, LiteralNode
from toyc.core.diagnostics import DiagnosticLevel
from toyc.core.pipeline import (CompilerConfig, ToyCompiler, compile_file, compile_lines,
                                compile_string, create_default_compiler)

PROGRAM = "x = 10; y = x + 5; z = y * 2;"
PROGRAM_CODE = (
    "push 10\nstore x\n"
    "load x\npush 5\noperate +\nstore y\n"
    "load y\npush 2\noperate *\nstore z\n"
)


def strict_config():
    config = CompilerConfig()
    config.strict = True
    return config


def test_full_program():
    result = compile_string(PROGRAM)
    assert result.ok
    assert len(result.tokens) == 16
    assert len(result.statements) == 3
    assert result.symbols == {"x": "numeric", "y": "numeric", "z": "numeric"}
    assert result.machine_code == PROGRAM_CODE
    assert result.halted_after is None


def test_empty_program():
    result = compile_string("")
    assert result.ok
    assert result.ir == []
    assert result.machine_code == ""


def test_parse_failure_is_isolated():
    result = compile_string("a = 1; x = ; b = a;")
    assert not result.ok
    assert len(result.parse_errors) == 1
    assert result.statements == [AssignmentNode("a", LiteralNode("1")),
                                 AssignmentNode("b", IdentifierNode("a"))]
    assert result.machine_code == "push 1\nstore a\nload a\nstore b\n"


def test_semantic_errors_do_not_block_generation():
    result = compile_string("w + 1;")
    assert [e.name for e in result.semantic_errors] == ["w"]
    assert result.diagnostics.error_count == 1
    assert result.machine_code == "load w\npush 1\noperate +\n"


def test_strict_mode_stops_after_parsing():
    result = ToyCompiler(strict_config()).compile("x = ; y = 2;")
    assert result.halted_after == "parsing"
    assert result.machine_code is None
    assert result.ir == []
    assert len(result.parse_results) == 2


def test_strict_mode_stops_after_analysis():
    result = ToyCompiler(strict_config()).compile("y = w;")
    assert result.halted_after == "analysis"
    assert result.machine_code is None


def test_unrecognized_characters_are_warnings_by_default():
    result = compile_string("x = 1; $")
    levels = [d.level for d in result.diagnostics.diagnostics]
    assert levels == [DiagnosticLevel.WARNING, DiagnosticLevel.ERROR]
    assert result.machine_code == "push 1\nstore x\n"


def test_warnings_as_errors_halts_strict_lexing():
    config = strict_config()
    config.warnings_as_errors = True
    result = ToyCompiler(config).compile("x = 1; $")
    assert result.halted_after == "lexing"
    assert result.parse_results == []


def test_compile_lines_joins_before_lexing():
    result = compile_lines(["x = 1;\n", "y = x;"])
    assert result.machine_code == "push 1\nstore x\nload x\nstore y\n"
    assert result.tokens[-2].location.line == 2


def test_compile_file(tmp_path):
    path = tmp_path / "prog.toy"
    path.write_text("x = 2;\ny = q;\n", encoding="utf-8")
    result = compile_file(path)
    assert result.filename == str(path)
    assert result.machine_code == "push 2\nstore x\nload q\nstore y\n"
    assert str(result.semantic_errors[0].location) == f"{path}:2:5"


def test_compile_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        compile_file(tmp_path / "nope.toy")


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TOYC_STRICT", "1")
    monkeypatch.setenv("TOYC_WARNINGS_AS_ERRORS", "no")
    config = CompilerConfig.from_env()
    assert config.strict
    assert not config.warnings_as_errors


def test_default_compiler_is_lenient():
    compiler = create_default_compiler()
    assert not compiler.config.strict
    assert compiler.compile(PROGRAM).machine_code == PROGRAM_CODE


def test_long_expression_compiles():
    terms = 5000
    result = compile_string("x = 1; y = " + " * ".join(["x"] * terms) + ";")
    assert result.ok
    assert result.machine_code.count("\n") == 2 + 2 * terms
    text = str(result.statements[1])
    assert text.startswith("y = " + "(" * (terms - 1) + "Identifier: x * Identifier: x)")
    assert text.count("Identifier: x") == terms


def test_stage_callback_sees_every_stage():
    stages = []
    ToyCompiler(on_stage=lambda step, total, name: stages.append((step, total, name))).compile(PROGRAM)
    assert stages == [
        (1, 5, "Lexical Analysis"),
        (2, 5, "Parsing"),
        (3, 5, "Semantic Analysis"),
        (4, 5, "IR Generation"),
        (5, 5, "Code Emission"),
    ]


def test_stage_callback_stops_with_strict_halt():
    stages = []
    ToyCompiler(strict_config(), on_stage=lambda step, total, name: stages.append(step)).compile("x = ;")
    assert stages == [1, 2]
