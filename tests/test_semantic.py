from toyc.compiler.semantic import SemanticAnalyzer, analyze
from toyc.compiler.symbols import NUMERIC, SymbolTable
from toyc.core.errors import SemanticError
from toyc.core.lexer import tokenize
from toyc.core.parser import parse


def statements(source):
    return parse(tokenize(source))


def test_declared_program_is_clean():
    analyzer = SemanticAnalyzer()
    analyzer.analyze(statements("x = 10; y = x + 5; z = y * 2;"))
    assert analyzer.ok
    assert analyzer.errors == []
    assert analyzer.symbol_table.as_dict() == {"x": NUMERIC, "y": NUMERIC, "z": NUMERIC}


def test_undeclared_use_in_bare_expression():
    errors = analyze(statements("w + 1;"))
    assert len(errors) == 1
    assert isinstance(errors[0], SemanticError)
    assert errors[0].kind == SemanticError.UNDECLARED_IDENTIFIER
    assert errors[0].name == "w"
    assert "undeclared identifier 'w'" in errors[0].message


def test_self_reference_counts_as_declared():
    assert analyze(statements("x = x + 1;")) == []


def test_use_before_assignment_is_reported():
    errors = analyze(statements("y = x; x = 1; z = x;"))
    assert [e.name for e in errors] == ["x"]


def test_every_undeclared_use_is_reported():
    errors = analyze(statements("a = b + b * c;"))
    assert [e.name for e in errors] == ["b", "b", "c"]


def test_repeated_analysis_gives_identical_diagnostics():
    program = statements("w + 1; x = y; x + q;")
    first = analyze(program)
    second = analyze(program)
    assert first == second
    assert len(first) == 3

    analyzer = SemanticAnalyzer()
    analyzer.analyze(program)
    again = list(analyzer.errors)
    analyzer.analyze(program)
    assert analyzer.errors == again
    assert analyzer.diagnostics.error_count == 3


def test_reference_counts_and_unused_symbols():
    analyzer = SemanticAnalyzer()
    analyzer.analyze(statements("x = 1; y = x + x; x = 2;"))
    table = analyzer.symbol_table
    assert table.lookup("x").references == 2
    assert table.lookup("x").assignments == 2
    assert [s.name for s in table.get_unused_symbols()] == ["y"]


def test_error_points_at_the_use():
    errors = analyze(statements("x = 1;\n  w;"))
    assert (errors[0].location.line, errors[0].location.column) == (2, 3)


def test_symbol_table_overwrites_on_redefinition():
    table = SymbolTable()
    table.define("x")
    table.define("x")
    assert len(table) == 1
    assert "x" in table
    assert "y" not in table
    assert table.lookup("y") is None


def test_long_chain_of_references():
    terms = 5000
    analyzer = SemanticAnalyzer()
    analyzer.analyze(statements("x = 0; y = " + " + ".join(["x"] * terms) + " + w;"))
    assert len(analyzer.errors) == 1
    assert analyzer.errors[0].name == "w"
    assert analyzer.symbol_table.lookup("x").references == terms


def test_undeclared_error_suggests_an_assignment():
    error, = analyze(statements("w;"))
    assert error.notes == ["'w' is declared by assigning to it, e.g. w = 0;"]
