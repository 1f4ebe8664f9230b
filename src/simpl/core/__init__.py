"""Core language: AST, substitution, types, and type checker."""

from simpl.core.ast import (
    BinOp,
    Binop,
    BoolLit,
    Expr,
    If,
    IntLit,
    Let,
    Value,
    Var,
    is_value,
)
from simpl.core.checker import TypeChecker, typecheck
from simpl.core.errors import (
    BranchTypeMismatch,
    DoesNotStep,
    EvalError,
    GuardTypeMismatch,
    OperatorTypeMismatch,
    SimplError,
    UnboundVariable,
)
from simpl.core.subst import free_vars, substitute
from simpl.core.types import Context, TBool, TInt, Type

__all__ = [
    # AST
    "Expr",
    "IntLit",
    "BoolLit",
    "Var",
    "Binop",
    "Let",
    "If",
    "BinOp",
    "Value",
    "is_value",
    # Substitution
    "substitute",
    "free_vars",
    # Types
    "Type",
    "TInt",
    "TBool",
    "Context",
    # Errors
    "SimplError",
    "EvalError",
    "UnboundVariable",
    "OperatorTypeMismatch",
    "GuardTypeMismatch",
    "BranchTypeMismatch",
    "DoesNotStep",
    # Type Checker
    "TypeChecker",
    "typecheck",
]
