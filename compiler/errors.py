"""
EgoScript Compiler Errors

Defines the error taxonomy and the diagnostics sink used by the compiler.

Errors found while compiling are recorded, not raised: every stage reports
into a Diagnostics object and keeps going so that one invocation surfaces as
many problems as possible.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Type

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """Base exception for all EgoScript errors."""

    def __init__(self, message: str, line: Optional[int] = None,
                 filename: Optional[str] = None):
        self.message = message
        self.line = line
        self.filename = filename
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location information."""
        if self.filename and self.line is not None:
            return f"{self.filename}:{self.line}: {self.message}"
        if self.filename:
            return f"{self.filename}: {self.message}"
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class LexError(ScriptError):
    """Unterminated string literal, oversized word, malformed IDSZ."""
    pass


class TokenError(ScriptError):
    """Identifier that is not in the symbol table."""
    pass


class GrammarError(ScriptError):
    """Statement that does not follow the line grammar."""
    pass


class IndentationError(ScriptError):
    """Odd number of leading spaces or more than 15 levels."""
    pass


class CapacityError(ScriptError):
    """Source or instruction buffer exhausted."""
    pass


class CompileError(ScriptError):
    """Raised on request when a compile finished with errors."""

    def __init__(self, message: str, diagnostics: Optional['Diagnostics'] = None,
                 filename: Optional[str] = None):
        self.diagnostics = diagnostics
        super().__init__(message, filename=filename)


class Level(Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single compiler message."""

    level: Level
    script_name: str
    line: int
    message: str
    error_type: Type[ScriptError] = ScriptError

    def __str__(self) -> str:
        return f"{self.script_name}:{self.line}: {self.level.value}: {self.message}"


@dataclass
class Diagnostics:
    """
    Ordered, append-only list of diagnostics for one compile.

    ``had_error`` turns true on the first error-level entry and never
    turns back.
    """

    script_name: str = "<script>"
    entries: List[Diagnostic] = field(default_factory=list)
    had_error: bool = False

    def report(self, error: ScriptError, level: Level = Level.ERROR) -> Diagnostic:
        """Record an error instance without raising it."""
        line = error.line if error.line is not None else 0
        diagnostic = Diagnostic(level, self.script_name, line, error.message, type(error))
        self.entries.append(diagnostic)
        if level is Level.ERROR:
            self.had_error = True
        logger.debug("%s", diagnostic)
        return diagnostic

    def error(self, error_type: Type[ScriptError], message: str, line: int) -> Diagnostic:
        """Record an error-level diagnostic."""
        return self.report(error_type(message, line, self.script_name))

    def warning(self, error_type: Type[ScriptError], message: str, line: int) -> Diagnostic:
        """Record a warning-level diagnostic."""
        return self.report(error_type(message, line, self.script_name), Level.WARNING)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.entries if d.level is Level.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.entries if d.level is Level.WARNING]

    def of_type(self, error_type: Type[ScriptError]) -> List[Diagnostic]:
        """Get all diagnostics recorded for the given error class."""
        return [d for d in self.entries if issubclass(d.error_type, error_type)]

    def raise_for_errors(self) -> None:
        """Raise CompileError if any error-level diagnostic was recorded."""
        if not self.had_error:
            return
        errors = self.errors
        summary = f"{len(errors)} error(s); first: {errors[0]}"
        raise CompileError(summary, self, self.script_name)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
