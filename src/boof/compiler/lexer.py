"""
Boof Lexer (Tokenizer).

Transforms boof source code into a flat list of tokens in a single
left-to-right scan, stopping at the first lexical error.
"""

from typing import Iterator, Optional

from boof.compiler.tokens import (
    EOF_LEXEME,
    EQUAL_SUFFIX_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)
from boof.utils.errors import LexerError, SourceLocation


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == "_")


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Lexer:
    """
    Tokenizer for boof source code.

    The lexer supports:
    - Single-character punctuation and operators
    - Two-character operators (!=, ==, >=, <=)
    - Line comments starting with //
    - String literals in double quotes (may span lines, no escapes)
    - Number literals (digits with an optional fractional part)
    - Identifiers and reserved keywords

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()
        # or iterate: for token in lexer: ...
    """

    def __init__(self, source: str, filename: Optional[str] = None) -> None:
        """
        Initialize the lexer with source code.

        Args:
            source: The boof source code to tokenize
            filename: Optional filename for error reporting
        """
        self.source = source
        self.filename = filename
        self.tokens: list[Token] = []

        # Start of the current lexeme and the scan position
        self.start = 0
        self.pos = 0
        self.line = 1
        self.column = 1
        self._start_location = self._location()

    @property
    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def _current_char(self) -> str:
        """Return the current character, or '\\0' at end of input."""
        if self._is_at_end:
            return "\0"
        return self.source[self.pos]

    @property
    def _peek_char(self) -> str:
        """Return the character after the current one, or '\\0'."""
        peek_pos = self.pos + 1
        if peek_pos >= len(self.source):
            return "\0"
        return self.source[peek_pos]

    def _location(self) -> SourceLocation:
        """Create a SourceLocation for the current position."""
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.pos,
            filename=self.filename,
        )

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it is the expected one."""
        if self._is_at_end or self.source[self.pos] != expected:
            return False
        self._advance()
        return True

    def _add_token(self, token_type: TokenType, literal=None) -> None:
        lexeme = self.source[self.start:self.pos]
        self.tokens.append(
            Token(token_type, lexeme, self._start_location, literal, end_line=self.line)
        )

    def _skip_line_comment(self) -> None:
        """Skip the rest of a // comment, leaving the newline in place."""
        while not self._is_at_end and self._current_char != "\n":
            self._advance()

    def _read_string(self) -> None:
        """
        Read a string literal; the opening quote is already consumed.

        Newlines inside the literal are kept and counted. The token's
        literal is the raw text between the quotes, and its line is the
        line of the closing quote.
        """
        while not self._is_at_end and self._current_char != '"':
            self._advance()

        if self._is_at_end:
            raise LexerError("Unterminated String", self._location())

        self._advance()  # closing quote
        value = self.source[self.start + 1:self.pos - 1]
        self._add_token(TokenType.STRING, value)

    def _read_number(self) -> None:
        """
        Read a number literal; the first digit is already consumed.

        A '.' is only part of the number when a digit follows it, so
        "1." scans as NUMBER then DOT.
        """
        while _is_digit(self._current_char):
            self._advance()

        if self._current_char == "." and _is_digit(self._peek_char):
            self._advance()  # the '.'
            while _is_digit(self._current_char):
                self._advance()

        text = self.source[self.start:self.pos]
        try:
            value = float(text)
        except ValueError as e:
            raise LexerError(str(e), self._location()) from e
        self._add_token(TokenType.NUMBER, value)

    def _read_identifier_or_keyword(self) -> None:
        while _is_alphanumeric(self._current_char):
            self._advance()

        text = self.source[self.start:self.pos]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _scan_token(self) -> None:
        """Scan the lexeme starting at self.start, adding at most one token."""
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in " \r\t\n":
            # Newlines are counted by _advance
            pass
        elif char == '"':
            self._read_string()
        elif _is_digit(char):
            self._read_number()
        elif _is_alpha(char):
            self._read_identifier_or_keyword()
        else:
            raise LexerError(f'Unexpected Character "{char}"', self._start_location)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source code.

        Returns:
            A list of all tokens, ending with the EOF token.

        Raises:
            LexerError: On the first invalid character or literal. No
                partial token list is kept.
        """
        self.tokens = []
        self.start = 0
        self.pos = 0
        self.line = 1
        self.column = 1

        try:
            while not self._is_at_end:
                self.start = self.pos
                self._start_location = self._location()
                self._scan_token()
        except LexerError:
            self.tokens = []
            raise

        self.tokens.append(
            Token(TokenType.EOF, EOF_LEXEME, self._location(), end_line=self.line)
        )
        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens (tokenizes on first use)."""
        if not self.tokens:
            self.tokenize()
        return iter(self.tokens)


def tokenize(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: boof source code
        filename: Optional filename for error reporting

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()
