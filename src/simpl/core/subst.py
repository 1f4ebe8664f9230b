"""Syntactic substitution of variables in expressions."""

from __future__ import annotations

from simpl.core.ast import Binop, BoolLit, Expr, If, IntLit, Let, Var


def substitute(target: Expr, replacement: Expr, name: str) -> Expr:
    """Return ``target`` with ``replacement`` substituted for free ``name``.

    Written e{v/x} in the literature. A ``let`` that rebinds ``name``
    shadows it, so its body is left untouched.

    Substitution is not capture-avoiding: binders in ``target`` are never
    renamed, so a free variable of ``replacement`` that coincides with a
    binder inside ``target`` gets captured. The evaluators only substitute
    closed values, where this cannot happen.
    """
    match target:
        case Var(y):
            return replacement if y == name else target
        case IntLit() | BoolLit():
            return target
        case Binop(op, left, right):
            return Binop(
                op,
                substitute(left, replacement, name),
                substitute(right, replacement, name),
            )
        case Let(y, value, body):
            new_value = substitute(value, replacement, name)
            if y == name:
                return Let(y, new_value, body)
            return Let(y, new_value, substitute(body, replacement, name))
        case If(guard, then_branch, else_branch):
            return If(
                substitute(guard, replacement, name),
                substitute(then_branch, replacement, name),
                substitute(else_branch, replacement, name),
            )
        case _:
            raise RuntimeError(f"Unknown expression type: {type(target)}")


def free_vars(expr: Expr) -> frozenset[str]:
    """Names that occur free in ``expr``."""
    match expr:
        case Var(name):
            return frozenset({name})
        case IntLit() | BoolLit():
            return frozenset()
        case Binop(_, left, right):
            return free_vars(left) | free_vars(right)
        case Let(name, value, body):
            return free_vars(value) | (free_vars(body) - {name})
        case If(guard, then_branch, else_branch):
            return free_vars(guard) | free_vars(then_branch) | free_vars(else_branch)
        case _:
            raise RuntimeError(f"Unknown expression type: {type(expr)}")
