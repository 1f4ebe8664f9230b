"""Recursive descent parser for SimPL.

Binary operators are handled with precedence climbing (Pratt parsing).
"""

from __future__ import annotations

from simpl.core.ast import BinOp, Binop, BoolLit, Expr, If, IntLit, Let, Var
from simpl.core.errors import SimplError
from simpl.surface.lexer import Lexer
from simpl.surface.types import Token, TokenType
from simpl.utils.location import Location


class ParseError(SimplError):
    """Error during parsing."""

    def __init__(self, message: str, location: Location):
        super().__init__(f"{location}: {message}")
        self.location = location


class Parser:
    """Recursive descent parser for SimPL.

    Grammar:
        prog ::= expr EOF

        expr ::= "let" IDENT "=" expr "in" expr
               | "if" expr "then" expr "else" expr
               | expr "<=" expr
               | expr "+" expr
               | expr "*" expr
               | atom

        atom ::= INT | "true" | "false" | IDENT | "(" expr ")"

    Operators are left-associative; ``*`` binds tighter than ``+``, which
    binds tighter than ``<=``. ``let`` and ``if`` extend as far right as
    possible.
    """

    # token type -> (operator, left binding power)
    BINARY_OPERATORS: dict[str, tuple[BinOp, int]] = {
        TokenType.LEQ: (BinOp.LEQ, 10),
        TokenType.PLUS: (BinOp.ADD, 20),
        TokenType.TIMES: (BinOp.MULT, 30),
    }

    def __init__(self, tokens: list[Token]):
        """Initialize parser with token stream."""
        self.tokens = tokens
        self.pos = 0

    def _current(self) -> Token:
        """Get current token."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]  # EOF token

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def _expect(self, token_type: str) -> Token:
        """Expect current token to be of specific type."""
        token = self._current()
        if token.type != token_type:
            raise ParseError(f"Expected {token_type}, got {token.type}", token.location)
        return self._advance()

    def _match(self, *token_types: str) -> bool:
        """Check if current token matches any of the types."""
        return self._current().type in token_types

    def _consume(self, token_type: str) -> bool:
        """Consume token if it matches type."""
        if self._match(token_type):
            self._advance()
            return True
        return False

    def at_end(self) -> bool:
        """Check if at end of input."""
        return self._current().type == TokenType.EOF

    # =====================================================================
    # Program
    # =====================================================================

    def parse(self) -> Expr:
        """Parse a whole program: exactly one expression, then EOF."""
        expr = self.parse_expr()
        if not self.at_end():
            token = self._current()
            raise ParseError(f"Unexpected token after expression: {token.type}", token.location)
        return expr

    # =====================================================================
    # Expressions
    # =====================================================================

    def parse_expr(self, min_power: int = 0) -> Expr:
        """Parse an expression whose operators bind tighter than ``min_power``."""
        left = self.parse_prefix()

        while self._current().type in self.BINARY_OPERATORS:
            op, power = self.BINARY_OPERATORS[self._current().type]
            if power <= min_power:
                break
            self._advance()
            right = self.parse_expr(power)  # Left-associative
            left = Binop(op, left, right)

        return left

    def parse_prefix(self) -> Expr:
        """Parse let, if, or an atom."""
        # Let binding: let x = e1 in e2
        if self._consume(TokenType.LET):
            name_tok = self._expect(TokenType.IDENT)
            self._expect(TokenType.EQUALS)
            value = self.parse_expr()
            self._expect(TokenType.IN)
            body = self.parse_expr()
            return Let(name_tok.value, value, body)

        # Conditional: if e1 then e2 else e3
        if self._consume(TokenType.IF):
            guard = self.parse_expr()
            self._expect(TokenType.THEN)
            then_branch = self.parse_expr()
            self._expect(TokenType.ELSE)
            else_branch = self.parse_expr()
            return If(guard, then_branch, else_branch)

        return self.parse_atom()

    def parse_atom(self) -> Expr:
        """Parse atomic expression."""
        token = self._current()

        if self._consume(TokenType.LPAREN):
            expr = self.parse_expr()
            self._expect(TokenType.RPAREN)
            return expr

        if self._consume(TokenType.INT):
            return IntLit(int(token.value))

        if self._consume(TokenType.TRUE):
            return BoolLit(True)

        if self._consume(TokenType.FALSE):
            return BoolLit(False)

        if self._consume(TokenType.IDENT):
            return Var(token.value)

        raise ParseError(f"Unexpected token: {token.type}", token.location)


# =============================================================================
# Convenience Functions
# =============================================================================


def parse_expr(source: str, filename: str = "<string>") -> Expr:
    """Parse a SimPL program from source.

    Example:
        >>> print(parse_expr("let x = 2 in x * 3"))
        let x = 2 in x * 3
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens).parse()
