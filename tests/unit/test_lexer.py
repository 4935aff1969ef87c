"""
Tests for the boof lexer.
"""

import pytest

from boof.compiler.lexer import Lexer, tokenize
from boof.compiler.tokens import KEYWORDS, TokenType
from boof.utils.errors import LexerError


class TestPunctuationAndOperators:
    """Tests for single and two-character tokens."""

    def test_single_character_tokens(self, token_types):
        """Test every single-character token."""
        assert token_types("(){};.,+-*/") == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.SEMICOLON,
            TokenType.DOT,
            TokenType.COMMA,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.STAR,
            TokenType.SLASH,
        ]

    def test_comparison_operators(self, token_types):
        """Test one and two-character comparison operators."""
        assert token_types("! != = == > >= < <=") == [
            TokenType.BANG,
            TokenType.BANG_EQUAL,
            TokenType.EQUAL,
            TokenType.EQUAL_EQUAL,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        ]

    def test_two_character_operator_is_greedy(self, token_types):
        """Test that '===' scans as '==' then '='."""
        assert token_types("===") == [TokenType.EQUAL_EQUAL, TokenType.EQUAL]

    def test_operator_lexemes(self, tokenize):
        """Test that lexemes are the exact source slices."""
        tokens = tokenize("<= !")
        assert tokens[0].lexeme == "<="
        assert tokens[1].lexeme == "!"


class TestComments:
    """Tests for line comments."""

    def test_comment_produces_no_tokens(self, token_types):
        """Test that a comment-only source has no tokens."""
        assert token_types("// nothing to see here") == []

    def test_comment_runs_to_end_of_line(self, token_types):
        """Test that code after the newline is scanned again."""
        assert token_types("1 // ignore this\n+ 2") == token_types("1\n+ 2")

    def test_comment_keeps_line_count(self, tokenize):
        """Test that the newline ending a comment is counted."""
        tokens = tokenize("// first\n42")
        assert tokens[0].line == 2

    def test_single_slash_is_division(self, token_types):
        """Test that one slash is the division operator."""
        assert token_types("6 / 3") == [
            TokenType.NUMBER,
            TokenType.SLASH,
            TokenType.NUMBER,
        ]


class TestNumbers:
    """Tests for number literals."""

    def test_integer(self, tokenize):
        """Test an integer literal."""
        token = tokenize("123")[0]
        assert token.type == TokenType.NUMBER
        assert token.lexeme == "123"
        assert token.literal == 123.0

    def test_fraction(self, tokenize):
        """Test a literal with a fractional part."""
        token = tokenize("3.25")[0]
        assert token.literal == 3.25
        assert token.lexeme == "3.25"

    def test_trailing_dot_is_separate(self, token_types):
        """Test that '1.' is a number followed by a dot."""
        assert token_types("1.") == [TokenType.NUMBER, TokenType.DOT]

    def test_leading_dot_is_separate(self, token_types):
        """Test that '.5' is a dot followed by a number."""
        assert token_types(".5") == [TokenType.DOT, TokenType.NUMBER]

    def test_literal_is_float(self, tokenize):
        """Test that number payloads are floats."""
        assert isinstance(tokenize("7")[0].literal, float)


class TestStrings:
    """Tests for string literals."""

    def test_simple_string(self, tokenize):
        """Test lexeme and payload of a string."""
        token = tokenize('"hello"')[0]
        assert token.type == TokenType.STRING
        assert token.lexeme == '"hello"'
        assert token.literal == "hello"

    def test_empty_string(self, tokenize):
        """Test the empty string literal."""
        assert tokenize('""')[0].literal == ""

    def test_multiline_string(self, tokenize):
        """Test that strings may span lines and newlines are counted."""
        tokens = tokenize('"a\nb" 1')
        assert tokens[0].literal == "a\nb"
        assert tokens[1].line == 2

    def test_multiline_string_line_is_closing_line(self, tokenize):
        """Test that a multi-line string reports the line it ends on."""
        token = tokenize('\n"a\nb\nc"')[0]
        assert token.line == 4
        assert token.location.line == 2
        assert token.location.column == 1

    def test_no_escape_sequences(self, tokenize):
        """Test that backslashes are kept verbatim."""
        assert tokenize(r'"a\nb"')[0].literal == "a\\nb"

    def test_comment_inside_string(self, tokenize):
        """Test that '//' inside a string is not a comment."""
        assert tokenize('"a // b"')[0].literal == "a // b"

    def test_unterminated_string(self, lexer_factory):
        """Test the unterminated string error."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory('"abc').tokenize()

        assert exc_info.value.message == "Unterminated String"
        assert str(exc_info.value) == "[line: 1] Error: Unterminated String"

    def test_unterminated_string_reports_last_line(self, lexer_factory):
        """Test that the error line is where input ran out."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory('"abc\n\ndef').tokenize()

        assert exc_info.value.line == 3


class TestIdentifiersAndKeywords:
    """Tests for identifiers and reserved words."""

    @pytest.mark.parametrize("word, expected", sorted(KEYWORDS.items()))
    def test_keywords(self, tokenize, word, expected):
        """Test every reserved word."""
        token = tokenize(word)[0]
        assert token.type == expected
        assert token.is_keyword

    def test_keywords_are_case_sensitive(self, token_types):
        """Test that capitalized keywords are identifiers."""
        assert token_types("Boof TRUE Nil") == [TokenType.IDENTIFIER] * 3

    def test_identifier_with_digits_and_underscores(self, tokenize):
        """Test identifier characters."""
        token = tokenize("_count2")[0]
        assert token.type == TokenType.IDENTIFIER
        assert token.lexeme == "_count2"
        assert not token.is_keyword

    def test_keyword_prefix_is_identifier(self, token_types):
        """Test that longer words starting with a keyword are identifiers."""
        assert token_types("boofs nilly") == [TokenType.IDENTIFIER] * 2

    def test_digit_then_letters(self, token_types):
        """Test that '1abc' is a number followed by an identifier."""
        assert token_types("1abc") == [TokenType.NUMBER, TokenType.IDENTIFIER]


class TestErrors:
    """Tests for lexical errors."""

    def test_unexpected_character(self, lexer_factory):
        """Test the unexpected character error."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory("1 + @").tokenize()

        error = exc_info.value
        assert error.message == 'Unexpected Character "@"'
        assert str(error) == '[line: 1] Error: Unexpected Character "@"'

    @pytest.mark.parametrize("source, column", [("@", 1), ("1 @", 3), ("1 + @", 5)])
    def test_unexpected_character_column(self, lexer_factory, source, column):
        """Test that the error points at the offending character."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory(source).tokenize()

        assert exc_info.value.location.column == column

    def test_error_line_number(self, lexer_factory):
        """Test that errors report the line they occur on."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory("1\n\n#").tokenize()

        assert exc_info.value.line == 3
        assert str(exc_info.value).startswith("[line: 3]")

    def test_non_ascii_letter_is_rejected(self, lexer_factory):
        """Test that identifiers are ASCII only."""
        with pytest.raises(LexerError, match="Unexpected Character"):
            lexer_factory("café").tokenize()

    def test_first_error_wins(self, lexer_factory):
        """Test that scanning stops at the first error."""
        with pytest.raises(LexerError) as exc_info:
            lexer_factory("# $").tokenize()

        assert '"#"' in exc_info.value.message

    def test_no_partial_tokens_kept(self, lexer_factory):
        """Test that a failed scan leaves no tokens behind."""
        lexer = lexer_factory("1 + 2 ?")
        with pytest.raises(LexerError):
            lexer.tokenize()

        assert lexer.tokens == []


class TestEndOfInput:
    """Tests for the EOF token and locations."""

    def test_empty_source(self, tokenize):
        """Test that empty input yields only EOF."""
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].lexeme == "\0"

    def test_whitespace_only(self, token_types):
        """Test that whitespace produces no tokens."""
        assert token_types(" \t\r\n ") == []

    def test_exactly_one_eof_at_end(self, tokenize):
        """Test that EOF appears exactly once, last."""
        tokens = tokenize("1 + 2")
        eofs = [t for t in tokens if t.type == TokenType.EOF]
        assert len(eofs) == 1
        assert tokens[-1].type == TokenType.EOF

    def test_eof_line_is_final_line(self, tokenize):
        """Test that EOF carries the last line number."""
        assert tokenize("1\n2\n")[-1].line == 3

    def test_line_numbers_never_decrease(self, tokenize):
        """Test that token lines are monotonic."""
        lines = [t.line for t in tokenize("1\n+\n\n2 * \"x\ny\" - 3")]
        assert lines == sorted(lines)

    def test_columns(self, tokenize):
        """Test that locations point at the start of each lexeme."""
        tokens = tokenize("12 >= 3")
        assert [t.location.column for t in tokens[:-1]] == [1, 4, 7]

    def test_filename_in_location(self, tokenize):
        """Test that the filename is carried on token locations."""
        assert tokenize("1")[0].location.filename == "test.boof"


class TestRescan:
    """Tests for re-scanning printed lexemes."""

    @pytest.mark.parametrize(
        "source",
        [
            "1 + 2 * 3",
            '!(1 >= 2) == "a\nb"',
            "boof x = nil; if (x != 3.5) print true",
            "a<=b>c,d.e{f}g/h",
        ],
    )
    def test_rescan_reproduces_categories(self, tokenize, source):
        """Test that space-joined lexemes scan to the same categories."""
        tokens = tokenize(source)
        rejoined = " ".join(t.lexeme for t in tokens[:-1])
        rescanned = tokenize(rejoined)

        assert [t.type for t in rescanned] == [t.type for t in tokens]


class TestLexerAPI:
    """Tests for the lexer's public helpers."""

    def test_iterate_lexer(self):
        """Test that a lexer can be iterated."""
        tokens = list(Lexer("1 + 2"))
        assert [t.type for t in tokens] == [
            TokenType.NUMBER,
            TokenType.PLUS,
            TokenType.NUMBER,
            TokenType.EOF,
        ]

    def test_tokenize_function(self):
        """Test the module-level tokenize helper."""
        assert tokenize("nil")[0].type == TokenType.NIL

    def test_tokenize_is_repeatable(self, lexer_factory):
        """Test that tokenizing twice gives the same result."""
        lexer = lexer_factory("1 + 2")
        assert lexer.tokenize() == lexer.tokenize()

    def test_token_repr(self, tokenize):
        """Test the debug form of tokens."""
        number, plus = tokenize("1 +")[:2]
        assert repr(number) == "Token(NUMBER, '1', 1.0, line=1)"
        assert repr(plus) == "Token(PLUS, '+', line=1)"
        assert str(plus) == "+"

    def test_is_type_compares_category(self, tokenize):
        """Test that is_type ignores the payload."""
        token = tokenize("42")[0]
        assert token.is_type(TokenType.NUMBER)
        assert token.is_type(TokenType.STRING, TokenType.NUMBER)
        assert not token.is_type(TokenType.STRING)
