"""Lexer for SimPL concrete syntax.

Whitespace is insignificant; ``(* ... *)`` comments are skipped.
"""

from __future__ import annotations

import re

from simpl.surface.types import (
    KEYWORDS,
    EOFToken,
    IdentifierToken,
    KeywordToken,
    LexerError,
    NumberToken,
    OperatorToken,
    Token,
    TokenType,
)
from simpl.utils.location import Location


class Lexer:
    """Regex-driven tokenizer for SimPL.

    Patterns are tried in order at the current position; the first
    alternative that matches wins, so longer operators precede their
    prefixes and comments precede ``(``.
    """

    TOKEN_PATTERNS = [
        ("WHITESPACE", r"[ \t\r\n]+"),
        ("COMMENT", r"\(\*[\s\S]*?\*\)"),
        ("UNTERMINATED_COMMENT", r"\(\*"),
        ("INT", r"-?[0-9]+"),
        ("LEQ", r"<="),
        ("PLUS", r"\+"),
        ("TIMES", r"\*"),
        ("EQUALS", r"="),
        ("LPAREN", r"\("),
        ("RPAREN", r"\)"),
        ("IDENT", r"[a-zA-Z][a-zA-Z0-9_']*"),
    ]

    def __init__(self, source: str, filename: str = "<string>"):
        """Initialize lexer with source code.

        Args:
            source: The source code to tokenize
            filename: Name of the source file (for error messages)
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

        self._pattern = re.compile(
            "|".join(f"(?P<{name}>{pattern})" for name, pattern in self.TOKEN_PATTERNS)
        )

    def tokenize(self) -> list[Token]:
        """Convert source code to a token stream ending in EOF.

        Raises:
            LexerError: On an unexpected character or unterminated comment
        """
        self.tokens = []
        self.pos = 0
        self.line = 1
        self.column = 1

        while self.pos < len(self.source):
            match = self._pattern.match(self.source, self.pos)
            loc = self._location()

            if not match or match.lastgroup is None:
                char = self.source[self.pos]
                raise LexerError(f"Unexpected character: {char!r}", loc)

            token_type = match.lastgroup
            value = match.group()

            if token_type == "UNTERMINATED_COMMENT":
                raise LexerError("Unterminated comment", loc)

            self._advance(value)

            if token_type in ("WHITESPACE", "COMMENT"):
                continue

            self.tokens.append(self._make_token(token_type, value, loc))

        self.tokens.append(EOFToken(self._location()))
        return self.tokens

    def _make_token(self, token_type: str, value: str, loc: Location) -> Token:
        if token_type == "IDENT":
            if value in KEYWORDS:
                return KeywordToken(value, loc)
            return IdentifierToken(value, loc)
        if token_type == "INT":
            return NumberToken(value, loc)
        return OperatorToken(value, loc, getattr(TokenType, token_type))

    def _location(self) -> Location:
        return Location(self.line, self.column, self.filename)

    def _advance(self, text: str) -> None:
        """Update line/column counters after consuming text."""
        for char in text:
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += len(text)


def lex(source: str, filename: str = "<string>") -> list[Token]:
    """Tokenize source code.

    Example:
        >>> [t.type for t in lex("let x = 1 in x")]
        ['LET', 'IDENT', 'EQUALS', 'INT', 'IN', 'IDENT', 'EOF']
    """
    return Lexer(source, filename).tokenize()
