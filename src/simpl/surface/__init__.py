"""Surface syntax: lexer and parser for SimPL source text."""

from simpl.surface.lexer import Lexer, lex
from simpl.surface.parser import ParseError, Parser, parse_expr
from simpl.surface.types import (
    EOFToken,
    IdentifierToken,
    KeywordToken,
    LexerError,
    NumberToken,
    OperatorToken,
    Token,
    TokenType,
)

__all__ = [
    # Lexer
    "Lexer",
    "lex",
    "LexerError",
    # Tokens
    "Token",
    "TokenType",
    "IdentifierToken",
    "NumberToken",
    "KeywordToken",
    "OperatorToken",
    "EOFToken",
    # Parser
    "Parser",
    "ParseError",
    "parse_expr",
]
