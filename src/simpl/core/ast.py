"""Core expression AST for SimPL."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class BinOp(Enum):
    """Primitive binary operators."""

    ADD = "+"
    MULT = "*"
    LEQ = "<="

    def __str__(self) -> str:
        return self.value


class Expr:
    """Base class for expressions."""

    pass


def _operand(expr: Expr) -> str:
    """Render an operand, parenthesizing anything that is not atomic."""
    match expr:
        case IntLit() | BoolLit() | Var():
            return str(expr)
        case _:
            return f"({expr})"


@dataclass(frozen=True)
class IntLit(Expr):
    """Integer literal: 42"""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolLit(Expr):
    """Boolean literal: true | false"""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Var(Expr):
    """Variable reference by name.

    Bindings are resolved by substitution, so a Var that survives until
    evaluation reaches it is unbound.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Binop(Expr):
    """Primitive binary application: e1 op e2."""

    op: BinOp
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"{_operand(self.left)} {self.op} {_operand(self.right)}"


@dataclass(frozen=True)
class Let(Expr):
    """Non-recursive let binding: let name = value in body."""

    name: str
    value: Expr
    body: Expr

    def __str__(self) -> str:
        return f"let {self.name} = {self.value} in {self.body}"


@dataclass(frozen=True)
class If(Expr):
    """Conditional: if guard then then_branch else else_branch."""

    guard: Expr
    then_branch: Expr
    else_branch: Expr

    def __str__(self) -> str:
        return f"if {self.guard} then {self.then_branch} else {self.else_branch}"


# Export the expression union for type checking
ExprRepr = Union[IntLit, BoolLit, Var, Binop, Let, If]

Value = Union[IntLit, BoolLit]


def is_value(expr: Expr) -> bool:
    """Whether ``expr`` is a value, i.e. needs no further evaluation."""
    match expr:
        case IntLit() | BoolLit():
            return True
        case Var() | Binop() | Let() | If():
            return False
        case _:
            raise RuntimeError(f"Unknown expression type: {type(expr)}")
