"""Small-step (structural operational) semantics.

``step`` is the single-step relation e --> e'. ``evaluate_small_step``
is its reflexive transitive closure e -->* v, applied until a value is
reached. Reduction is call-by-value and strictly left to right.
"""

from __future__ import annotations

from typing import Iterator

from loguru import logger

from simpl.core.ast import BinOp, Binop, BoolLit, Expr, If, IntLit, Let, Var, is_value
from simpl.core.errors import DoesNotStep, GuardTypeMismatch, OperatorTypeMismatch, UnboundVariable
from simpl.core.subst import substitute


def step(expr: Expr) -> Expr:
    """Take a single step of evaluation.

    Requires: ``expr`` is not a value.

    Raises:
        DoesNotStep: If ``expr`` is already a value
        UnboundVariable: If the redex is a variable
        OperatorTypeMismatch: If a primitive is applied to bad operands
        GuardTypeMismatch: If an if guard is an integer
    """
    match expr:
        case IntLit() | BoolLit():
            raise DoesNotStep(expr)

        case Var(name):
            raise UnboundVariable(name)

        case Binop(op, left, right) if is_value(left) and is_value(right):
            return apply_bop(op, left, right)

        case Binop(op, left, right) if is_value(left):
            return Binop(op, left, step(right))

        case Binop(op, left, right):
            return Binop(op, step(left), right)

        case Let(name, value, body) if is_value(value):
            return substitute(body, value, name)

        case Let(name, value, body):
            return Let(name, step(value), body)

        case If(BoolLit(True), then_branch, _):
            return then_branch

        case If(BoolLit(False), _, else_branch):
            return else_branch

        case If(IntLit() as guard, _, _):
            raise GuardTypeMismatch(guard)

        case If(guard, then_branch, else_branch):
            return If(step(guard), then_branch, else_branch)

        case _:
            raise RuntimeError(f"Unknown expression type: {type(expr)}")


def apply_bop(op: BinOp, left: Expr, right: Expr) -> Expr:
    """Perform the primitive operation ``left op right``.

    Requires: ``left`` and ``right`` are both values.
    """
    match op, left, right:
        case BinOp.ADD, IntLit(a), IntLit(b):
            return IntLit(a + b)
        case BinOp.MULT, IntLit(a), IntLit(b):
            return IntLit(a * b)
        case BinOp.LEQ, IntLit(a), IntLit(b):
            return BoolLit(a <= b)
        case _:
            raise OperatorTypeMismatch(op, left, right)


def trace_small_step(expr: Expr) -> Iterator[Expr]:
    """Yield ``expr`` and every reduct after it, ending with the value.

    A failing step raises from the generator after the last good reduct
    has been yielded.
    """
    yield expr
    while not is_value(expr):
        expr = step(expr)
        logger.trace("eval.small.step expr={}", expr)
        yield expr


def evaluate_small_step(expr: Expr) -> Expr:
    """Evaluate ``expr`` to a value by repeatedly applying ``step``.

    There is no step limit; every SimPL program terminates.
    """
    logger.debug("eval.small.start expr={}", expr)
    steps = 0
    while not is_value(expr):
        expr = step(expr)
        steps += 1
        logger.trace("eval.small.step n={} expr={}", steps, expr)
    logger.debug("eval.small.done value={} steps={}", expr, steps)
    return expr


def count_steps(expr: Expr) -> int:
    """Number of reductions needed to bring ``expr`` to a value."""
    return sum(1 for _ in trace_small_step(expr)) - 1
