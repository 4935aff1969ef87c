"""
Error types and source location tracking for the boof front end.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from boof.compiler.tokens import Token

# Process exit statuses used by the command-line front end
EXIT_FAILURE = 1
EXIT_USAGE = 64


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed character offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int = 1
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class BoofError(Exception):
    """
    Base exception for all boof errors.

    Every error carries the exit status the command-line front end
    reports when the error reaches the top level.
    """

    code: int = EXIT_FAILURE

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Error: {self.message}"


class LexerError(BoofError):
    """Raised when the lexer encounters an invalid character or literal."""

    def __init__(self, message: str, location: SourceLocation) -> None:
        super().__init__(message, location)

    @property
    def line(self) -> int:
        return self.location.line

    def _format_message(self) -> str:
        return f"[line: {self.location.line}] Error: {self.message}"


class ParserError(BoofError):
    """
    Raised when the parser encounters a syntax error.

    The formatted message carries no line number; the token the parser
    stopped at is kept on the error for tools that want to point at it.
    """

    def __init__(self, message: str, token: Optional["Token"] = None) -> None:
        self.token = token
        super().__init__(message, token.location if token is not None else None)


class UsageError(BoofError):
    """Raised when the command line is malformed."""

    code = EXIT_USAGE

    def __init__(self, message: str = "Usage: boof [script]") -> None:
        super().__init__(message)

    def _format_message(self) -> str:
        return self.message


class SourceReadError(BoofError):
    """Raised when a script file cannot be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Failed to read file {path!r}")

    def _format_message(self) -> str:
        return self.message
