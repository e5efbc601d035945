import sys
from enum import Enum
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..utils.colors import Colors
from .errors import ToycError


class DiagnosticLevel(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    NOTE = "note"


_LEVEL_COLORS = {
    DiagnosticLevel.ERROR: Colors.RED,
    DiagnosticLevel.WARNING: Colors.YELLOW,
    DiagnosticLevel.INFO: Colors.BLUE,
    DiagnosticLevel.NOTE: Colors.CYAN,
}


@dataclass
class Diagnostic:
    level: DiagnosticLevel
    message: str
    location: Optional[object] = None
    kind: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    @classmethod
    def from_error(cls, error: ToycError, level: DiagnosticLevel = DiagnosticLevel.ERROR) -> "Diagnostic":
        return cls(level, error.message, error.location, error.kind, list(error.notes))

    def format(self, with_colors: bool = True) -> str:
        color = _LEVEL_COLORS[self.level] if with_colors else ""
        note_color = _LEVEL_COLORS[DiagnosticLevel.NOTE] if with_colors else ""
        reset = Colors.RESET if with_colors else ""

        result = f"{color}{self.level.value}: {self.message}{reset}"
        if self.kind:
            result += f" [{self.kind}]"
        if self.location:
            result = f"{self.location}: {result}"
            raw_line = getattr(self.location, 'raw_line', None)
            if raw_line:
                result += f"\n  {raw_line}"
                result += f"\n  {' ' * (self.location.column - 1)}^"

        for note in self.notes:
            result += f"\n{note_color}note: {note}{reset}"
        return result

    def __str__(self):
        return self.format(with_colors=False)


class DiagnosticEngine:
    def __init__(self):
        self.diagnostics: List[Diagnostic] = []
        self.error_count = 0
        self.warning_count = 0

    def report(self, diag: Diagnostic):
        self.diagnostics.append(diag)
        if diag.level == DiagnosticLevel.ERROR:
            self.error_count += 1
        elif diag.level == DiagnosticLevel.WARNING:
            self.warning_count += 1

    def error(self, message: str, location: Optional[object] = None, **kwargs):
        self.report(Diagnostic(DiagnosticLevel.ERROR, message, location, **kwargs))

    def warning(self, message: str, location: Optional[object] = None, **kwargs):
        self.report(Diagnostic(DiagnosticLevel.WARNING, message, location, **kwargs))

    def info(self, message: str, location: Optional[object] = None, **kwargs):
        self.report(Diagnostic(DiagnosticLevel.INFO, message, location, **kwargs))

    def report_error(self, error: ToycError, level: DiagnosticLevel = DiagnosticLevel.ERROR):
        self.report(Diagnostic.from_error(error, level))

    def extend(self, diagnostics: Iterable[Diagnostic]):
        for diag in diagnostics:
            self.report(diag)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def clear(self):
        self.diagnostics.clear()
        self.error_count = 0
        self.warning_count = 0

    def print_all(self, with_colors: bool = True):
        for diag in self.diagnostics:
            print(diag.format(with_colors), file=sys.stderr)
