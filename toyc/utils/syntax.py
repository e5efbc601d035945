#!/usr/bin/env python3

"""
Simple syntax checker for toyc sources.

Runs the lexer and parser only and reports what they found, for editors and
other tools that want plain data:

  check_syntax(content: str, filename: Optional[str]) -> List[dict]

Each error dict contains: {'line': int|None, 'column': int|None,
'kind': str, 'message': str}
"""

from typing import List, Optional

from ..core.lexer import Lexer
from ..core.parser import Parser


def _as_dict(error) -> dict:
    location = error.location
    return {
        'line': location.line if location else None,
        'column': location.column if location else None,
        'kind': error.kind,
        'message': error.message,
    }


def check_syntax(content: str, filename: Optional[str] = None) -> List[dict]:
    """Return lexer and parser errors in source order. Empty list means clean."""
    lexer = Lexer(content, filename or "<stdin>")
    tokens = lexer.tokenize()
    parser = Parser(tokens)
    parser.parse_results()

    errors = [_as_dict(e) for e in lexer.errors + parser.errors]
    errors.sort(key=lambda e: (e['line'] or 0, e['column'] or 0))
    return errors
