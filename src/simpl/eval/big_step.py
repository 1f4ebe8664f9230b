"""Big-step (natural) semantics: the e ==> v relation.

Shares substitution with the small-step module but nothing else: the
two evaluators are compared against each other and neither calls the other.
"""

from __future__ import annotations

from loguru import logger

from simpl.core.ast import BinOp, Binop, BoolLit, Expr, If, IntLit, Let, Var
from simpl.core.errors import GuardTypeMismatch, OperatorTypeMismatch, UnboundVariable
from simpl.core.subst import substitute


def evaluate_big_step(expr: Expr) -> Expr:
    """Evaluate ``expr`` directly to a value by structural recursion."""
    match expr:
        case IntLit() | BoolLit():
            return expr

        case Var(name):
            raise UnboundVariable(name)

        case Binop(op, left, right):
            return _eval_bop(op, left, right)

        case Let(name, value, body):
            bound = evaluate_big_step(value)
            logger.trace("eval.big.let name={} value={}", name, bound)
            return evaluate_big_step(substitute(body, bound, name))

        case If(guard, then_branch, else_branch):
            return _eval_if(guard, then_branch, else_branch)

        case _:
            raise RuntimeError(f"Unknown expression type: {type(expr)}")


def _eval_bop(op: BinOp, left: Expr, right: Expr) -> Expr:
    """The ``v`` such that ``left op right ==> v``."""
    left_val = evaluate_big_step(left)
    right_val = evaluate_big_step(right)
    match op, left_val, right_val:
        case BinOp.ADD, IntLit(a), IntLit(b):
            return IntLit(a + b)
        case BinOp.MULT, IntLit(a), IntLit(b):
            return IntLit(a * b)
        case BinOp.LEQ, IntLit(a), IntLit(b):
            return BoolLit(a <= b)
        case _:
            raise OperatorTypeMismatch(op, left_val, right_val)


def _eval_if(guard: Expr, then_branch: Expr, else_branch: Expr) -> Expr:
    """The ``v`` such that ``if guard then then_branch else else_branch ==> v``."""
    match evaluate_big_step(guard):
        case BoolLit(True):
            return evaluate_big_step(then_branch)
        case BoolLit(False):
            return evaluate_big_step(else_branch)
        case other:
            raise GuardTypeMismatch(other)
