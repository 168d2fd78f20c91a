"""Lexer."""

from blockquery.lexer.lexer import Lexer, dump_tokens, split_segments, token_text, token_value
from blockquery.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "split_segments",
    "token_text",
    "token_value",
]
