"""Type representations for SimPL."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class Type:
    """Base class for types."""

    pass


@dataclass(frozen=True)
class TInt(Type):
    """The type of integers."""

    def __str__(self) -> str:
        return "int"


@dataclass(frozen=True)
class TBool(Type):
    """The type of booleans."""

    def __str__(self) -> str:
        return "bool"


TypeRepr = Union[TInt, TBool]


@dataclass(frozen=True)
class Context:
    """Typing context Γ mapping variable names to types.

    Extending never mutates: the innermost binding of a name wins.
    """

    bindings: tuple[tuple[str, Type], ...] = field(default=())

    @staticmethod
    def empty() -> "Context":
        """Create an empty context."""
        return Context()

    def lookup(self, name: str) -> Type:
        """Look up the type bound to ``name``.

        Raises:
            KeyError: If ``name`` is not bound
        """
        for bound, ty in reversed(self.bindings):
            if bound == name:
                return ty
        raise KeyError(name)

    def extend(self, name: str, ty: Type) -> "Context":
        """Return a new context with ``name : ty`` added."""
        return Context(self.bindings + ((name, ty),))

    def __len__(self) -> int:
        return len(self.bindings)

    def __str__(self) -> str:
        return ", ".join(f"{name}:{ty}" for name, ty in self.bindings)
