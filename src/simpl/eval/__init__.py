"""Operational semantics: small-step and big-step evaluators."""

from simpl.eval.big_step import evaluate_big_step
from simpl.eval.small_step import (
    apply_bop,
    count_steps,
    evaluate_small_step,
    step,
    trace_small_step,
)

__all__ = [
    "step",
    "apply_bop",
    "evaluate_small_step",
    "trace_small_step",
    "count_steps",
    "evaluate_big_step",
]
