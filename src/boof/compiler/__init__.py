"""
Boof Compiler Package.

This package contains the front end and evaluator:
- Tokens: Token categories and the keyword table
- Lexer: Tokenizes boof source code
- Parser: Produces an expression tree from tokens
- AST: Expression nodes and literal values
- Printer: Prefix rendering of expression trees
- Interpreter: Reduces an expression tree to a value
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from boof.compiler.ast_nodes import Expr, LiteralValue
from boof.compiler.interpreter import Interpreter
from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.printer import AstPrinter
from boof.compiler.tokens import Token
from boof.utils.errors import SourceReadError


@dataclass(frozen=True)
class RunResult:
    """
    Everything one pass of the pipeline produced for a source text.

    Attributes:
        tokens: The token stream, ending with EOF
        ast: The parsed expression tree
        value: The evaluated value
    """

    tokens: list[Token]
    ast: Expr
    value: LiteralValue

    @property
    def printed_ast(self) -> str:
        return AstPrinter().print(self.ast)


def run_source(
    source: str,
    filename: Optional[str] = None,
    lenient_eof: bool = False,
) -> Expr:
    """
    Lex and parse boof source into one expression tree.

    Args:
        source: boof source code
        filename: Optional filename for error reporting
        lenient_eof: Treat a required token missing at end of input as
            present

    Returns:
        The parsed expression tree

    Raises:
        LexerError, ParserError: The first error found. Both carry the
            formatted message (str(error)) and an exit status (error.code).
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, lenient_eof=lenient_eof).parse()


def evaluate_source(
    source: str,
    filename: Optional[str] = None,
    lenient_eof: bool = False,
) -> RunResult:
    """
    Run the full pipeline: text -> tokens -> tree -> value.

    Raises the first LexerError or ParserError; evaluation itself
    never fails.
    """
    tokens = Lexer(source, filename).tokenize()
    ast = Parser(tokens, lenient_eof=lenient_eof).parse()
    value = Interpreter().evaluate(ast)
    return RunResult(tokens=tokens, ast=ast, value=value)


def read_source(path: str | Path) -> str:
    """
    Read a script file.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(path)) from e


def evaluate_file(path: str | Path, lenient_eof: bool = False) -> RunResult:
    """Read a script file and run the full pipeline on it."""
    source = read_source(path)
    return evaluate_source(source, filename=str(path), lenient_eof=lenient_eof)
