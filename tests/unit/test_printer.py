"""
Tests for the prefix tree printer and value debug forms.
"""

import math

import pytest

from boof.compiler.ast_nodes import (
    FALSE,
    NIL,
    TRUE,
    Grouping,
    Literal,
    NumberValue,
    StringValue,
)
from boof.compiler.printer import AstPrinter, print_ast


class TestValueRepr:
    """Tests for the debug form of values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (NumberValue(1.0), "Number(1.0)"),
            (NumberValue(-0.5), "Number(-0.5)"),
            (NumberValue(1e16), "Number(1e16)"),
            (NumberValue(1.5e16), "Number(1.5e16)"),
            (NumberValue(1e-5), "Number(1e-5)"),
            (NumberValue(-2.5e-7), "Number(-2.5e-7)"),
            (NumberValue(1e15), "Number(1000000000000000.0)"),
            (NumberValue(0.0001), "Number(0.0001)"),
            (NumberValue(math.nan), "Number(NaN)"),
            (NumberValue(math.inf), "Number(inf)"),
            (StringValue("x"), 'String("x")'),
            (StringValue('say "hi"'), 'String("say \\"hi\\"")'),
            (TRUE, "True"),
            (FALSE, "False"),
            (NIL, "Nil"),
        ],
    )
    def test_repr(self, value, expected):
        """Test the printed form of each kind of value."""
        assert repr(value) == expected


class TestAstPrinter:
    """Tests for printing expression trees."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("1", "Number(1.0)"),
            ('"hi"', 'String("hi")'),
            ("nil", "Nil"),
            ("1 + 2 * 3", "(+ Number(1.0) (* Number(2.0) Number(3.0)))"),
            ("1 - 2 - 3", "(- (- Number(1.0) Number(2.0)) Number(3.0))"),
            ("(1 + 2) * 3", "(* (group (+ Number(1.0) Number(2.0))) Number(3.0))"),
            ("-1", "(- Number(1.0))"),
            ("!!true", "(! (! True))"),
            ("1 <= 2 != false", "(!= (<= Number(1.0) Number(2.0)) False)"),
            ('"a" == nil', '(== String("a") Nil)'),
        ],
    )
    def test_printed_form(self, parse, source, expected):
        """Test printed trees for each node kind."""
        assert AstPrinter().print(parse(source)) == expected

    def test_str_of_expression(self, parse):
        """Test that str() of a node is its printed form."""
        assert str(parse("(nil)")) == "(group Nil)"

    def test_print_ast_function(self):
        """Test the module-level print_ast helper."""
        assert print_ast(Grouping(Literal(NumberValue(2.5)))) == "(group Number(2.5))"

    def test_printer_is_reusable(self, parse):
        """Test that one printer prints many trees."""
        printer = AstPrinter()
        assert printer.print(parse("1")) == "Number(1.0)"
        assert printer.print(parse("true")) == "True"

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("10000000000000000", "Number(1e16)"),
            ("0.00001", "Number(1e-5)"),
            ("123.5", "Number(123.5)"),
        ],
    )
    def test_number_literal_forms(self, parse, source, expected):
        """Test that large and small literals print in exponent form."""
        assert AstPrinter().print(parse(source)) == expected

    def test_long_chain(self, parse):
        """Test printing a left-deep chain of thousands of operators."""
        printed = AstPrinter().print(parse(" + ".join(["1"] * 2000)))
        assert printed.startswith("(+ " * 1999 + "Number(1.0) Number(1.0))")
        assert printed.endswith(" Number(1.0))")

    def test_long_unary_chain(self, parse):
        """Test printing a long chain of prefix operators."""
        printed = AstPrinter().print(parse("-" * 3000 + "1"))
        assert printed == "(- " * 3000 + "Number(1.0)" + ")" * 3000
