"""toyc: a small compiler for a toy assignment/expression language.

    x = 10; y = x + 5; z = y * 2;

is lexed, parsed, checked for undeclared identifiers, lowered to
stack-machine IR (push/load/store/operate) and emitted as text.
"""
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .compiler import *  # noqa: F401,F403
from .compiler import __all__ as _compiler_all

__version__ = "0.1.0"

__all__ = list(_core_all) + list(_compiler_all)
