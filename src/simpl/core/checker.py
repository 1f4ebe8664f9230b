"""Static type checker for SimPL.

Evaluation never runs this pass on its own; callers opt in. The checker
is stricter than either evaluator: it rejects an ill-typed branch of an
``if`` even when evaluation would never take it.
"""

from loguru import logger

from simpl.core.ast import BinOp, Binop, BoolLit, Expr, If, IntLit, Let, Var
from simpl.core.errors import (
    BranchTypeMismatch,
    GuardTypeMismatch,
    OperatorTypeMismatch,
    UnboundVariable,
)
from simpl.core.types import Context, TBool, TInt, Type


class TypeChecker:
    """Infers the type of an expression under a typing context."""

    # op -> (operand type, result type)
    OPERATOR_TYPES: dict[BinOp, tuple[Type, Type]] = {
        BinOp.ADD: (TInt(), TInt()),
        BinOp.MULT: (TInt(), TInt()),
        BinOp.LEQ: (TInt(), TBool()),
    }

    def infer(self, ctx: Context, expr: Expr) -> Type:
        """Synthesize the type of ``expr``.

        Args:
            ctx: Typing context
            expr: Expression to infer a type for

        Returns:
            The inferred type

        Raises:
            UnboundVariable: If a variable is not in context
            OperatorTypeMismatch: If an operand is not an int
            GuardTypeMismatch: If a guard is not a bool
            BranchTypeMismatch: If the branches of an if disagree
        """
        match expr:
            case IntLit():
                return TInt()

            case BoolLit():
                return TBool()

            case Var(name):
                try:
                    return ctx.lookup(name)
                except KeyError as e:
                    raise UnboundVariable(name) from e

            case Let(name, value, body):
                value_type = self.infer(ctx, value)
                return self.infer(ctx.extend(name, value_type), body)

            case Binop(op, left, right):
                operand_type, result_type = self.OPERATOR_TYPES[op]
                left_type = self.infer(ctx, left)
                right_type = self.infer(ctx, right)
                if left_type != operand_type or right_type != operand_type:
                    raise OperatorTypeMismatch(op, left_type, right_type)
                return result_type

            case If(guard, then_branch, else_branch):
                guard_type = self.infer(ctx, guard)
                if guard_type != TBool():
                    raise GuardTypeMismatch(guard_type)
                then_type = self.infer(ctx, then_branch)
                else_type = self.infer(ctx, else_branch)
                if then_type != else_type:
                    raise BranchTypeMismatch(then_type, else_type)
                return then_type

            case _:
                raise RuntimeError(f"Unknown expression type: {type(expr)}")


def typecheck(expr: Expr) -> Type:
    """Type check a closed expression and return its type."""
    ty = TypeChecker().infer(Context.empty(), expr)
    logger.debug("typecheck.ok expr={} type={}", expr, ty)
    return ty
