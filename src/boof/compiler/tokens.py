"""
Token definitions for the boof lexer.

This module defines every token type recognized by the boof language:
punctuation, operators, literals, and the reserved keywords.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from boof.utils.errors import SourceLocation


class TokenType(Enum):
    """Enumeration of all token types in boof."""

    # Delimiters
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }

    # Punctuation
    SEMICOLON = auto()      # ;
    DOT = auto()            # .
    COMMA = auto()          # ,

    # Arithmetic operators
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /

    # Comparison and logical operators
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # Literals (payload carried in Token.literal)
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    VAR = auto()            # boof
    FUNC = auto()           # boofer
    AND = auto()
    OR = auto()
    IF = auto()
    ELSE = auto()
    ELSE_IF = auto()        # elseif
    FOR = auto()
    WHILE = auto()
    RETURN = auto()
    PRINT = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()

    # End of input
    EOF = auto()


# Mapping of keywords to token types (case-sensitive)
KEYWORDS: dict[str, TokenType] = {
    "boof": TokenType.VAR,
    "boofer": TokenType.FUNC,
    "and": TokenType.AND,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "elseif": TokenType.ELSE_IF,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "print": TokenType.PRINT,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
}

# Characters that become a two-character operator when followed by '='
# (single form, '='-suffixed form)
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}

# Keywords that begin a statement; used for parser error recovery
STATEMENT_KEYWORDS: frozenset[TokenType] = frozenset(
    {
        TokenType.FUNC,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)

EOF_LEXEME = "\0"


@dataclass(frozen=True, slots=True)
class Token:
    """
    Represents a single token from the source code.

    Attributes:
        type: The category of this token
        lexeme: The source text the token was scanned from
        location: Source location of the first character of the lexeme
        literal: Payload for STRING (text between the quotes) and
            NUMBER (float value) tokens, None otherwise
        end_line: Line the lexeme ends on, when the lexer knows it
    """

    type: TokenType
    lexeme: str
    location: SourceLocation
    literal: Optional[Union[str, float]] = None
    end_line: Optional[int] = None

    @property
    def line(self) -> int:
        """The line reported for this token: where its lexeme ends."""
        if self.end_line is not None:
            return self.end_line
        return self.location.line

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"

    def __str__(self) -> str:
        return self.lexeme

    def is_type(self, *types: TokenType) -> bool:
        """
        Check the token's category against one or more categories.

        Only the category is compared: a NUMBER token matches
        TokenType.NUMBER whatever its value.
        """
        return self.type in types

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORDS.values()
