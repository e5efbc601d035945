from toyc.utils.syntax import check_syntax


def test_clean_source():
    assert check_syntax("x = 10; y = x + 5;") == []


def test_undeclared_identifiers_are_not_syntax_errors():
    assert check_syntax("y = w;") == []


def test_errors_in_source_order():
    errors = check_syntax("x = @;\ny = 1\n", filename="prog.toy")
    assert [(e['line'], e['column'], e['kind']) for e in errors] == [
        (1, 5, 'unrecognized-character'),
        (1, 5, 'expected-expression'),
        (2, 1, 'missing-semicolon'),
    ]
    assert "expected semicolon" in errors[2]['message']
