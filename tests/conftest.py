"""
Pytest configuration and shared fixtures for boof tests.
"""

import pytest

from boof.compiler import RunResult
from boof.compiler import evaluate_source as run_pipeline
from boof.compiler.ast_nodes import Expr
from boof.compiler.lexer import Lexer
from boof.compiler.parser import Parser
from boof.compiler.tokens import Token


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: str, filename: str = "test.boof") -> Lexer:
        return Lexer(source, filename)

    return _create_lexer


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize source code."""

    def _tokenize(source: str) -> list[Token]:
        lexer = lexer_factory(source)
        return lexer.tokenize()

    return _tokenize


@pytest.fixture
def token_types(tokenize):
    """Fixture returning the token categories of source, EOF excluded."""

    def _token_types(source: str) -> list:
        return [token.type for token in tokenize(source)[:-1]]

    return _token_types


@pytest.fixture
def parser_factory(tokenize):
    """Factory fixture for creating parsers from source."""

    def _create_parser(source: str, lenient_eof: bool = False) -> Parser:
        return Parser(tokenize(source), lenient_eof=lenient_eof)

    return _create_parser


@pytest.fixture
def parse(parser_factory):
    """Fixture to parse source code into an expression tree."""

    def _parse(source: str, lenient_eof: bool = False) -> Expr:
        return parser_factory(source, lenient_eof).parse()

    return _parse


@pytest.fixture
def evaluate_source():
    """Fixture to run the full pipeline on source code."""

    def _evaluate(source: str, lenient_eof: bool = False) -> RunResult:
        return run_pipeline(source, filename="test.boof", lenient_eof=lenient_eof)

    return _evaluate


@pytest.fixture
def evaluate(evaluate_source):
    """Fixture returning only the value of evaluated source code."""

    def _evaluate(source: str):
        return evaluate_source(source).value

    return _evaluate
