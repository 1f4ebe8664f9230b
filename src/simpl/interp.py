"""Interpreter entry points: parse, optionally type check, evaluate."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from simpl.core.ast import Expr
from simpl.core.checker import typecheck as run_typecheck
from simpl.eval.big_step import evaluate_big_step
from simpl.eval.small_step import evaluate_small_step
from simpl.surface.parser import parse_expr

EVALUATORS: dict[str, Callable[[Expr], Expr]] = {
    "small": evaluate_small_step,
    "big": evaluate_big_step,
}


def parse(source: str, filename: str = "<string>") -> Expr:
    """Parse ``source`` into an expression.

    Raises:
        LexerError: On malformed tokens
        ParseError: On malformed syntax
    """
    return parse_expr(source, filename)


def interpret(source: str, strategy: str = "small", *, typecheck: bool = False) -> Expr:
    """Interpret ``source`` with the named evaluation strategy.

    Args:
        source: SimPL program text
        strategy: "small" or "big"
        typecheck: Run the static type checker before evaluating

    Returns:
        The resulting value (an IntLit or BoolLit)
    """
    try:
        evaluate = EVALUATORS[strategy]
    except KeyError:
        raise ValueError(f"Unknown strategy: {strategy!r}") from None

    expr = parse(source)
    logger.debug("interp.parsed strategy={} expr={}", strategy, expr)
    if typecheck:
        run_typecheck(expr)
    return evaluate(expr)


def interpret_small_step(source: str, *, typecheck: bool = False) -> Expr:
    """Interpret ``source`` with the small-step model."""
    return interpret(source, "small", typecheck=typecheck)


def interpret_big_step(source: str, *, typecheck: bool = False) -> Expr:
    """Interpret ``source`` with the big-step model."""
    return interpret(source, "big", typecheck=typecheck)
