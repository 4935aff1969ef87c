"""
Boof Utilities Package.

Error types and source locations shared by the front end and its tools.
"""

from boof.utils.errors import (
    EXIT_FAILURE,
    EXIT_USAGE,
    BoofError,
    LexerError,
    ParserError,
    SourceLocation,
    SourceReadError,
    UsageError,
)

__all__ = [
    "EXIT_FAILURE",
    "EXIT_USAGE",
    "BoofError",
    "LexerError",
    "ParserError",
    "SourceLocation",
    "SourceReadError",
    "UsageError",
]
