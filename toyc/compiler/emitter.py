from typing import Iterable

from .ir import Instruction


class CodeEmitter:
    """Formats IR as text, one instruction per line"""

    def emit(self, instructions: Iterable[Instruction]) -> str:
        return "".join(f"{instruction}\n" for instruction in instructions)


def emit(instructions: Iterable[Instruction]) -> str:
    return CodeEmitter().emit(instructions)
