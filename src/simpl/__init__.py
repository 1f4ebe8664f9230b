"""SimPL: small-step and big-step interpreters for a tiny expression language."""

from loguru import logger

from simpl.core.checker import typecheck
from simpl.interp import interpret, interpret_big_step, interpret_small_step, parse

logger.disable("simpl")

__all__ = [
    "interpret",
    "interpret_small_step",
    "interpret_big_step",
    "parse",
    "typecheck",
]
