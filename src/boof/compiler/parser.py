"""
Boof Parser.

A recursive descent parser that turns a token stream into the expression
tree for a single expression. Each binary precedence level parses one
operand at the next-higher level, then folds further operators of its own
level into left-associative Binary nodes.

Grammar, lowest precedence first:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"
"""

from typing import Callable, Optional

from boof.compiler.ast_nodes import (
    FALSE,
    NIL,
    TRUE,
    Binary,
    Expr,
    Grouping,
    Literal,
    NumberValue,
    StringValue,
    Unary,
)
from boof.compiler.lexer import Lexer
from boof.compiler.tokens import STATEMENT_KEYWORDS, Token, TokenType
from boof.utils.errors import ParserError


# Operators of each binary precedence level, lowest first
EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
)
TERM_OPERATORS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPERATORS = (TokenType.SLASH, TokenType.STAR)
UNARY_OPERATORS = (TokenType.BANG, TokenType.MINUS)

# Deepest allowed parenthesis nesting; deeper input raises ParserError
MAX_NESTING_DEPTH = 64


class Parser:
    """
    Recursive descent parser for boof expressions.

    Token matching compares categories only: a NUMBER token matches
    TokenType.NUMBER whatever its value. The EOF token never matches an
    operator, so every loop ends at end of input.

    Usage:
        parser = Parser(tokens)
        expr = parser.parse()
    """

    def __init__(self, tokens: list[Token], lenient_eof: bool = False) -> None:
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
            lenient_eof: When True, a required token that is missing at
                end of input is treated as present instead of
                raising ParserError
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.lenient_eof = lenient_eof
        self._depth = 0

    @property
    def _current(self) -> Token:
        """Get the current token."""
        return self.tokens[self.pos]

    @property
    def _previous(self) -> Token:
        """Get the most recently consumed token."""
        return self.tokens[self.pos - 1]

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._current.type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        """Check if the current token is one of the given types."""
        if self._is_at_end():
            return False
        return self._current.is_type(*types)

    def _advance(self) -> Token:
        """Consume and return the current token (EOF is never consumed)."""
        token = self._current
        if not self._is_at_end():
            self.pos += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        """Consume current token if it matches one of the given types."""
        if self._check(*types):
            self._advance()
            return True
        return False

    def _expect(self, token_type: TokenType, message: str) -> Token:
        """Consume current token if it matches, else raise error."""
        if self._check(token_type):
            return self._advance()
        if self.lenient_eof and self._is_at_end():
            return self._current
        raise self._error(message)

    def _error(self, message: str) -> ParserError:
        """Create a parser error pointing at the current token."""
        return ParserError(message, self._current)

    def _synchronize(self) -> None:
        """
        Recover from a parse error by advancing to the next statement.

        Stops just after a ';' or before a keyword that starts a
        statement. Nothing calls this while only single expressions are
        parsed; it is kept for statement-level error recovery.
        """
        self._advance()
        while not self._is_at_end():
            if self._previous.type == TokenType.SEMICOLON:
                return
            if self._current.type in STATEMENT_KEYWORDS:
                return
            self._advance()

    # -------------------------------------------------------------------------
    # Expression Parsing
    # -------------------------------------------------------------------------

    def parse(self) -> Expr:
        """
        Parse a single expression from the start of the token stream.

        Returns:
            The root of the expression tree.

        Raises:
            ParserError: On the first syntax error; no partial tree is
                returned.
        """
        self.pos = 0
        self._depth = 0
        return self._parse_expression()

    def _parse_expression(self) -> Expr:
        return self._parse_equality()

    def _parse_binary_level(
        self,
        operand: Callable[[], Expr],
        operators: tuple[TokenType, ...],
    ) -> Expr:
        """Parse one left-associative binary precedence level."""
        expr = operand()
        while self._match(*operators):
            operator = self._previous
            right = operand()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def _parse_equality(self) -> Expr:
        return self._parse_binary_level(self._parse_comparison, EQUALITY_OPERATORS)

    def _parse_comparison(self) -> Expr:
        return self._parse_binary_level(self._parse_term, COMPARISON_OPERATORS)

    def _parse_term(self) -> Expr:
        return self._parse_binary_level(self._parse_factor, TERM_OPERATORS)

    def _parse_factor(self) -> Expr:
        return self._parse_binary_level(self._parse_unary, FACTOR_OPERATORS)

    def _parse_unary(self) -> Expr:
        """Parse a chain of prefix operators; the rightmost binds tightest."""
        operators: list[Token] = []
        while self._match(*UNARY_OPERATORS):
            operators.append(self._previous)

        expr = self._parse_primary()
        for operator in reversed(operators):
            expr = Unary(operator=operator, operand=expr)
        return expr

    def _parse_primary(self) -> Expr:
        """Parse a literal or a parenthesized expression."""
        if self._match(TokenType.FALSE):
            return Literal(FALSE)

        if self._match(TokenType.TRUE):
            return Literal(TRUE)

        if self._match(TokenType.NIL):
            return Literal(NIL)

        if self._match(TokenType.NUMBER):
            return Literal(NumberValue(self._previous.literal))

        if self._match(TokenType.STRING):
            return Literal(StringValue(self._previous.literal))

        if self._match(TokenType.LEFT_PAREN):
            if self._depth >= MAX_NESTING_DEPTH:
                raise ParserError("Expression nesting too deep", self._previous)
            self._depth += 1
            expr = self._parse_expression()
            self._depth -= 1
            self._expect(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self._error("Expected Expression")


def parse(
    source: str,
    filename: Optional[str] = None,
    lenient_eof: bool = False,
) -> Expr:
    """
    Convenience function to lex and parse one expression.

    Args:
        source: boof source code
        filename: Optional filename for error reporting
        lenient_eof: See Parser

    Returns:
        The parsed expression tree
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, lenient_eof=lenient_eof).parse()
