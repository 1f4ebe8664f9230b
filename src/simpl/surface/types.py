"""Token definitions for the SimPL lexer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from simpl.core.errors import SimplError
from simpl.utils.location import Location


class Token(Protocol):
    """Protocol for all tokens.

    The parser only relies on ``type``, ``value`` and ``location``.
    """

    @property
    def type(self) -> str:
        """Get the token type identifier."""
        ...

    @property
    def value(self) -> str:
        """Get the token value as a string."""
        ...

    @property
    def location(self) -> Location:
        """Get the source location of this token."""
        ...


@dataclass(frozen=True)
class IdentifierToken:
    """Variable name."""

    name: str
    location: Location

    @property
    def value(self) -> str:
        return self.name

    @property
    def type(self) -> str:
        return TokenType.IDENT

    def __str__(self) -> str:
        return f"{self.type}({self.value!r})"


@dataclass(frozen=True)
class NumberToken:
    """Integer literal, possibly negative."""

    number: str
    location: Location

    @property
    def value(self) -> str:
        return self.number

    @property
    def type(self) -> str:
        return TokenType.INT

    def __str__(self) -> str:
        return f"{self.type}({self.value!r})"


@dataclass(frozen=True)
class KeywordToken:
    """Keyword (let, in, if, then, else, true, false)."""

    keyword: str
    location: Location

    @property
    def value(self) -> str:
        return self.keyword

    @property
    def type(self) -> str:
        return self.keyword.upper()

    def __str__(self) -> str:
        return f"{self.type}({self.value!r})"


@dataclass(frozen=True)
class OperatorToken:
    """Operator or delimiter (+, *, <=, =, parentheses)."""

    operator: str
    location: Location
    op_type: str

    @property
    def value(self) -> str:
        return self.operator

    @property
    def type(self) -> str:
        return self.op_type

    def __str__(self) -> str:
        return f"{self.type}({self.value!r})"


@dataclass(frozen=True)
class EOFToken:
    """End of input."""

    location: Location

    @property
    def value(self) -> str:
        return ""

    @property
    def type(self) -> str:
        return TokenType.EOF

    def __str__(self) -> str:
        return f"{self.type}({self.value!r})"


class LexerError(SimplError):
    """Error during lexical analysis."""

    def __init__(self, message: str, location: Location):
        super().__init__(f"{location}: {message}")
        self.location = location


class TokenType:
    """Token type names.

    Plain string constants so that tokens compare against them directly.
    """

    IDENT = "IDENT"
    INT = "INT"
    EOF = "EOF"

    # Keywords
    LET = "LET"
    IN = "IN"
    IF = "IF"
    THEN = "THEN"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"

    # Operators
    PLUS = "PLUS"
    TIMES = "TIMES"
    LEQ = "LEQ"
    EQUALS = "EQUALS"

    # Delimiters
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


KEYWORDS = frozenset({"let", "in", "if", "then", "else", "true", "false"})
