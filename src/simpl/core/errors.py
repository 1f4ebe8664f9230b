"""Error types for the SimPL evaluators and type checker."""

from __future__ import annotations

from simpl.core.ast import BinOp, Expr

UNBOUND_VAR_ERR = "Unbound variable"
BOP_ERR = "Operator and operand type mismatch"
IF_BRANCH_ERR = "Branches of if must have same type"
IF_GUARD_ERR = "Guard of if must have type bool"


class SimplError(Exception):
    """Base class for errors reported to users of the interpreter."""

    pass


class EvalError(SimplError):
    """Base class for evaluation and type errors."""

    pass


class UnboundVariable(EvalError):
    """A variable was reached that no enclosing let binds."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{UNBOUND_VAR_ERR}: {name}")


class OperatorTypeMismatch(EvalError):
    """A binary operator was applied to operands of the wrong shape."""

    def __init__(self, op: BinOp, left: object, right: object):
        self.op = op
        self.left = left
        self.right = right
        super().__init__(f"{BOP_ERR}: {left} {op} {right}")


class GuardTypeMismatch(EvalError):
    """The guard of an if is not a boolean."""

    def __init__(self, guard: object):
        self.guard = guard
        super().__init__(f"{IF_GUARD_ERR}, got {guard}")


class BranchTypeMismatch(EvalError):
    """The branches of an if have different types.

    Only the type checker reports this; evaluation never inspects the
    branch it does not take.
    """

    def __init__(self, then_type: object, else_type: object):
        self.then_type = then_type
        self.else_type = else_type
        super().__init__(f"{IF_BRANCH_ERR}: {then_type} vs {else_type}")


class DoesNotStep(RuntimeError):
    """``step`` was called on a value.

    Signals a bug in the caller rather than in the program being run,
    and is not a ``SimplError``.
    """

    def __init__(self, expr: Expr):
        self.expr = expr
        super().__init__(f"Does not step: {expr}")
