"""
Prefix printer for boof expression trees.

Renders a tree in fully parenthesized prefix form, for example
``(+ Number(1.0) (* Number(2.0) Number(3.0)))``. The output format is
relied on by golden tests and must not change.
"""

from boof.compiler.ast_nodes import Binary, Expr, Grouping, Literal, StackVisitor, Unary


class AstPrinter(StackVisitor):
    """Visitor producing the printed form of an expression."""

    def print(self, expr: Expr) -> str:
        return self.walk(expr)

    def visit_binary(self, node: Binary) -> None:
        op = node.operator.lexeme
        self._schedule(
            node.left,
            node.right,
            self._reduce(2, lambda left, right: f"({op} {left} {right})"),
        )

    def visit_unary(self, node: Unary) -> None:
        op = node.operator.lexeme
        self._schedule(node.operand, self._reduce(1, lambda operand: f"({op} {operand})"))

    def visit_grouping(self, node: Grouping) -> None:
        self._schedule(node.expression, self._reduce(1, lambda inner: f"(group {inner})"))

    def visit_literal(self, node: Literal) -> None:
        self._emit(repr(node.value))


def print_ast(expr: Expr) -> str:
    """Convenience function returning the printed form of a tree."""
    return AstPrinter().print(expr)
