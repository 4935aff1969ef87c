"""
Diagnostic generation for boof LSP.

This module converts lexer and parser errors into LSP-compatible
diagnostic messages for display in editors. The front end stops at the
first error, so a document has at most one diagnostic.
"""

from lsprotocol import types

from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.tokens import TokenType
from boof.utils.errors import BoofError, LexerError, ParserError


class DiagnosticProvider:
    """
    Generates LSP diagnostics from boof source code.

    This provider runs the lexer and the parser and reports the first
    error either of them raises.
    """

    def __init__(self, source: str, uri: str, lenient_eof: bool = False) -> None:
        """
        Initialize the diagnostic provider.

        Args:
            source: The boof source code to analyze
            uri: The document URI for location information
            lenient_eof: Passed to the parser
        """
        self.source = source
        self.uri = uri
        self.lenient_eof = lenient_eof
        self._diagnostics: list[types.Diagnostic] = []

    def get_diagnostics(self) -> list[types.Diagnostic]:
        """
        Get all diagnostics for the document.

        Returns:
            List of LSP diagnostic objects (empty for a valid document)
        """
        self._diagnostics = []

        # Phase 1: Lexer errors
        try:
            tokens = Lexer(self.source, filename=self.uri).tokenize()
        except LexerError as e:
            # Unterminated strings are reported at end of input
            self._add_boof_error(e, 1)
            return self._diagnostics

        # Phase 2: Parser errors
        try:
            Parser(tokens, lenient_eof=self.lenient_eof).parse()
        except ParserError as e:
            self._add_boof_error(e, self._parser_error_width(e))

        return self._diagnostics

    @staticmethod
    def _parser_error_width(error: ParserError) -> int:
        token = error.token
        if token is None or token.type == TokenType.EOF:
            return 1
        first_line = token.lexeme.split("\n", 1)[0]
        return max(1, len(first_line))

    def _add_boof_error(self, error: BoofError, width: int) -> None:
        """
        Add a boof front-end error as an LSP diagnostic.

        Args:
            error: The boof error
            width: Number of characters to underline
        """
        line = 0
        character = 0

        if error.location:
            line = max(0, error.location.line - 1)  # Convert to 0-indexed
            character = max(0, error.location.column - 1)

        diagnostic = types.Diagnostic(
            range=types.Range(
                start=types.Position(line=line, character=character),
                end=types.Position(line=line, character=character + width),
            ),
            message=str(error),
            severity=types.DiagnosticSeverity.Error,
            source="boof",
        )

        self._diagnostics.append(diagnostic)


def get_diagnostics_for_document(
    source: str,
    uri: str,
    lenient_eof: bool = False,
) -> list[types.Diagnostic]:
    """
    Convenience function to get diagnostics for a document.

    Args:
        source: The boof source code
        uri: The document URI
        lenient_eof: Passed to the parser

    Returns:
        List of LSP diagnostics
    """
    provider = DiagnosticProvider(source, uri, lenient_eof=lenient_eof)
    return provider.get_diagnostics()
