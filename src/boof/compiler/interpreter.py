"""
Boof Interpreter.

A tree-walking evaluator that reduces an expression tree to a single
LiteralValue. Evaluation is total: an operator applied to operands of the
wrong kind yields Nil instead of raising.

Truthiness: only False and Nil are falsy. Zero and the empty string are
truthy.
"""

import math

from boof.compiler.ast_nodes import (
    NIL,
    Binary,
    BooleanValue,
    Expr,
    Grouping,
    Literal,
    LiteralValue,
    NilValue,
    NumberValue,
    StackVisitor,
    StringValue,
    Unary,
    boolean,
)
from boof.compiler.tokens import TokenType


def is_truthy(value: LiteralValue) -> bool:
    """Return False for False and Nil, True for every other value."""
    if isinstance(value, NilValue):
        return False
    if isinstance(value, BooleanValue):
        return value.value
    return True


def values_equal(left: LiteralValue, right: LiteralValue) -> bool:
    """
    Structural, kind-sensitive equality.

    Numbers use plain float equality (NaN is not equal to itself).
    Values of different kinds are never equal.
    """
    if isinstance(left, NilValue) and isinstance(right, NilValue):
        return True
    if isinstance(left, BooleanValue) and isinstance(right, BooleanValue):
        return left.value == right.value
    if isinstance(left, NumberValue) and isinstance(right, NumberValue):
        return left.value == right.value
    if isinstance(left, StringValue) and isinstance(right, StringValue):
        return left.value == right.value
    return False


def _divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_ARITHMETIC = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: _divide,
}

_ORDERING = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
}


class Interpreter(StackVisitor):
    """
    Evaluates boof expression trees.

    The interpreter holds no state between calls; one instance can
    evaluate any number of independent trees. Operands are reduced with an
    explicit work stack, so arbitrarily long operator chains evaluate
    without deep recursion.

    Usage:
        value = Interpreter().evaluate(expr)
    """

    def evaluate(self, expr: Expr) -> LiteralValue:
        return self.walk(expr)

    def visit_literal(self, node: Literal) -> None:
        self._emit(node.value)

    def visit_grouping(self, node: Grouping) -> None:
        self._schedule(node.expression)

    def visit_unary(self, node: Unary) -> None:
        op = node.operator.type
        self._schedule(node.operand, self._reduce(1, lambda operand: apply_unary(op, operand)))

    def visit_binary(self, node: Binary) -> None:
        # Both sides are always evaluated, left first, each exactly once
        op = node.operator.type
        self._schedule(
            node.left,
            node.right,
            self._reduce(2, lambda left, right: apply_binary(op, left, right)),
        )


def apply_unary(op: TokenType, operand: LiteralValue) -> LiteralValue:
    """Apply a prefix operator to an evaluated operand."""
    if op == TokenType.BANG:
        return boolean(not is_truthy(operand))

    if op == TokenType.MINUS:
        if isinstance(operand, NumberValue):
            return NumberValue(-operand.value)
        return NIL

    return NIL


def apply_binary(op: TokenType, left: LiteralValue, right: LiteralValue) -> LiteralValue:
    """Apply a binary operator to evaluated operands."""
    if op == TokenType.EQUAL_EQUAL:
        return boolean(values_equal(left, right))

    if op == TokenType.BANG_EQUAL:
        return boolean(not values_equal(left, right))

    if op == TokenType.PLUS:
        if isinstance(left, StringValue) and isinstance(right, StringValue):
            return StringValue(left.value + right.value)
        if isinstance(left, NumberValue) and isinstance(right, NumberValue):
            return NumberValue(left.value + right.value)
        return NIL

    numbers = isinstance(left, NumberValue) and isinstance(right, NumberValue)

    if op in _ARITHMETIC:
        if numbers:
            return NumberValue(_ARITHMETIC[op](left.value, right.value))
        return NIL

    if op in _ORDERING:
        if numbers:
            return boolean(_ORDERING[op](left.value, right.value))
        return NIL

    return NIL


def evaluate(expr: Expr) -> LiteralValue:
    """Convenience function to evaluate an expression tree."""
    return Interpreter().evaluate(expr)
