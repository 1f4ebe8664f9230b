"""Source locations for error reporting."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Position in SimPL source text (1-based line and column)."""

    line: int
    column: int
    file: str | None = None

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}:{self.line}:{self.column}"
        return f"line {self.line}, column {self.column}"
