"""Lexer."""

from typing import NoReturn

from blockquery.diagnostics import QuerySyntaxError
from blockquery.lexer.tokens import (
    IDENTIFIER_CHARS,
    NAME_CHARS,
    SIGIL_KINDS,
    Token,
    TokenFlags,
    TokenKind,
)
from blockquery.text import TextRange, slice_text_range


class Lexer:
    """Tokenizer for one comma-delimited segment of a query spec.

    Offsets are always relative to the full spec string so that token ranges
    can be reported against the text the author wrote.
    """

    def __init__(self, source: str, start: int = 0, end: int | None = None) -> None:
        self._source = source
        self._start = start
        self._end = len(source) if end is None else end
        self._position = start
        self._current_start = start

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def segment_range(self) -> TextRange:
        return TextRange.from_offsets(self._start, self._end)

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= self._end

    @property
    def current_range(self) -> TextRange:
        return TextRange.from_offsets(self._current_start, self._position)

    @property
    def next_token(self) -> Token:
        self._skip_whitespace()
        self._current_start = self._position

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._position))

        flags = TokenFlags.NONE
        if self._current_char() == "!":
            flags |= TokenFlags.NEGATED
            self._advance(1)

        kind = self._lex_token()
        return Token(kind, self.current_range, flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        sigil_kind = SIGIL_KINDS.get(ch)
        if sigil_kind is not None:
            self._advance(1)
            if self._consume_while(NAME_CHARS) == 0:
                self._error()
            return sigil_kind

        if ch == "[":
            return self._lex_property_group()

        if ch in IDENTIFIER_CHARS:
            self._consume_while(IDENTIFIER_CHARS)
            return TokenKind.IDENTIFIER

        self._error()

    def _lex_property_group(self) -> TokenKind:
        close = self._source.find("]", self._position + 1, self._end)
        if close == -1:
            self._error()
        if not self._source[self._position + 1 : close].strip():
            self._error()
        self._position = close + 1
        return TokenKind.PROPERTY_GROUP

    def _consume_while(self, chars: frozenset[str]) -> int:
        begin = self._position
        while not self.is_eof and self._current_char() in chars:
            self._advance(1)
        return self._position - begin

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _error(self) -> NoReturn:
        raise QuerySyntaxError.at(
            self._source,
            fragment_range=self.segment_range,
            error_range=TextRange.from_offsets(self._current_start, self._end),
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def split_segments(source: str) -> list[TextRange]:
    """Split a spec on top-level commas into whitespace-trimmed segment ranges.

    Commas inside `[...]` belong to the property group and do not split.
    Trailing empty segments are dropped, but at least one segment is returned.
    """
    segments: list[TextRange] = []
    depth = 0
    segment_start = 0
    for index, ch in enumerate(source):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth > 0:
            depth -= 1
        elif ch == "," and depth == 0:
            segments.append(TextRange.stripped(source, segment_start, index))
            segment_start = index + 1
    segments.append(TextRange.stripped(source, segment_start, len(source)))
    while len(segments) > 1 and segments[-1].is_empty():
        segments.pop()
    return segments


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def token_value(source: str, token: Token) -> str:
    """Get the token payload: the name after a sigil or the interior of a group."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.value_range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}")
