"""
Abstract Syntax Tree (AST) node definitions for boof.

This module defines the expression node types produced by the parser and
the literal value types shared by the parser (literal payloads) and the
interpreter (runtime results). Every node is immutable and owns its
children; the tree is finite and acyclic.
"""

import json
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Union

from boof.compiler.tokens import Token


# -----------------------------------------------------------------------------
# Literal Values
# -----------------------------------------------------------------------------


def format_number(value: float) -> str:
    """
    Render a float in the debug form used by printed trees.

    Integral values keep a trailing ".0", exponents carry no '+' sign or
    leading zeros, and NaN is spelled "NaN":

        1.0 -> "1.0", 1e16 -> "1e16", 0.00001 -> "1e-5", nan -> "NaN"
    """
    if math.isnan(value):
        return "NaN"
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    return f"{mantissa}e{int(exponent)}"


class LiteralValue(ABC):
    """
    Base class for the closed set of boof values.

    The variants are StringValue, NumberValue, BooleanValue and NilValue.
    Their repr is the debug form used by the tree printer, e.g.
    ``Number(1.0)``, ``String("x")``, ``True``, ``False``, ``Nil``.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class StringValue(LiteralValue):
    """A string value."""

    value: str

    def __repr__(self) -> str:
        return f"String({json.dumps(self.value, ensure_ascii=False)})"


@dataclass(frozen=True, slots=True)
class NumberValue(LiteralValue):
    """A floating-point number value."""

    value: float

    def __repr__(self) -> str:
        return f"Number({format_number(self.value)})"


@dataclass(frozen=True, slots=True)
class BooleanValue(LiteralValue):
    """The true/false values."""

    value: bool

    def __repr__(self) -> str:
        return "True" if self.value else "False"


@dataclass(frozen=True, slots=True)
class NilValue(LiteralValue):
    """The nil value."""

    def __repr__(self) -> str:
        return "Nil"


TRUE = BooleanValue(True)
FALSE = BooleanValue(False)
NIL = NilValue()


def boolean(value: bool) -> BooleanValue:
    """Return the canonical boof boolean for a Python bool."""
    return TRUE if value else FALSE


# -----------------------------------------------------------------------------
# Expression Nodes
# -----------------------------------------------------------------------------


class ASTNode(ABC):
    """Base class for all AST nodes."""

    __slots__ = ()

    @abstractmethod
    def accept(self, visitor: "ASTVisitor") -> Any:
        """Accept a visitor for tree traversal."""
        pass


class Expr(ASTNode):
    """Base class for all expressions."""

    __slots__ = ()

    def __str__(self) -> str:
        from boof.compiler.printer import AstPrinter

        return AstPrinter().print(self)


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """
    A binary operation.

    Example:
        1 + 2, a == b
    """

    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_binary(self)


@dataclass(frozen=True, slots=True)
class Unary(Expr):
    """
    A prefix operation.

    Example:
        -x, !flag
    """

    operator: Token
    operand: Expr

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_unary(self)


@dataclass(frozen=True, slots=True)
class Grouping(Expr):
    """A parenthesized expression."""

    expression: Expr

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_grouping(self)


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """A literal value: number, string, true, false or nil."""

    value: LiteralValue

    def accept(self, visitor: "ASTVisitor") -> Any:
        return visitor.visit_literal(self)


# -----------------------------------------------------------------------------
# Visitor
# -----------------------------------------------------------------------------


class ASTVisitor(ABC):
    """
    Visitor pattern base class for AST traversal.

    Implement this to create AST processors (printers, interpreters).
    Every expression variant must be handled.
    """

    def visit(self, node: ASTNode) -> Any:
        """Dispatch to the appropriate visit method."""
        return node.accept(self)

    @abstractmethod
    def visit_binary(self, node: Binary) -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: Unary) -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: Grouping) -> Any:
        pass

    @abstractmethod
    def visit_literal(self, node: Literal) -> Any:
        pass


class StackVisitor(ASTVisitor):
    """
    Visitor that walks a tree with an explicit work stack.

    Tree depth is bounded by memory rather than the Python call stack, so
    long operator chains such as ``1 + 1 + ... + 1`` are handled at any
    length. visit_* methods never recurse; they either emit a result or
    schedule work:

        self._emit(result)
        self._schedule(node.left, node.right, self._reduce(2, combine))

    Scheduled items run in the order given. Nodes are visited; callables
    run once everything scheduled before them has finished.
    """

    def walk(self, root: Expr) -> Any:
        """Visit root and everything below it, returning root's result."""
        self._work: list[Union[Expr, Callable[[], None]]] = [root]
        self._results: list[Any] = []

        while self._work:
            item = self._work.pop()
            if isinstance(item, Expr):
                item.accept(self)
            else:
                item()

        return self._results.pop()

    def _schedule(self, *items: Union[Expr, Callable[[], None]]) -> None:
        self._work.extend(reversed(items))

    def _emit(self, result: Any) -> None:
        self._results.append(result)

    def _reduce(self, arity: int, combine: Callable[..., Any]) -> Callable[[], None]:
        """Build a task replacing the last `arity` results with combine(*results)."""

        def task() -> None:
            args = self._results[-arity:]
            del self._results[-arity:]
            self._results.append(combine(*args))

        return task
