"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from blockquery.text import TextRange

NAME_CHARS: Final[frozenset[str]] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_")
IDENTIFIER_CHARS: Final[frozenset[str]] = NAME_CHARS | {":"}


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Block references
    # -------------------------
    IDENTIFIER = 10  # stone, minecraft:stone
    TYPE_TAG = 11  # %BlockLeaves
    STRICT_TYPE_TAG = 12  # $BlockLeaves
    MATERIAL_TAG = 13  # ~water

    # -------------------------
    # Groups / references
    # -------------------------
    PROPERTY_GROUP = 20  # [facing=up,half=top]
    NAMED_REFERENCE = 21  # @airAbove


_SIGILS: Final[dict[TokenKind, str]] = {
    TokenKind.TYPE_TAG: "%",
    TokenKind.STRICT_TYPE_TAG: "$",
    TokenKind.MATERIAL_TAG: "~",
    TokenKind.NAMED_REFERENCE: "@",
}

SIGIL_KINDS: Final[dict[str, TokenKind]] = {sigil: kind for kind, sigil in _SIGILS.items()}


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    NEGATED = 1 << 0  # leading `!`


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed query token.

    `range` covers the whole token, including a leading `!` and the sigil or
    brackets.
    """

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_negated(self) -> bool:
        return bool(self.flags & TokenFlags.NEGATED)

    @property
    def value_range(self) -> TextRange:
        """Range of the token payload without `!`, sigil or brackets."""
        start, end = self.range.as_tuple()
        if self.is_negated:
            start += 1
        if self.kind == TokenKind.PROPERTY_GROUP:
            return TextRange.from_offsets(start + 1, end - 1)
        if self.kind in _SIGILS:
            return TextRange.from_offsets(start + 1, end)
        return TextRange.from_offsets(start, end)
