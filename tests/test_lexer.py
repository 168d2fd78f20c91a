import pytest

from blockquery.diagnostics import QuerySyntaxError
from blockquery.lexer import Lexer, TokenFlags, TokenKind, split_segments, token_text, token_value


def lex(text: str):
    return Lexer(text).lex()


def test_lexes_every_token_form_with_ranges() -> None:
    src = "!~water @airAbove [facing=up,half=top] minecraft:stone"

    tokens = lex(src)

    assert [t.kind for t in tokens] == [
        TokenKind.MATERIAL_TAG,
        TokenKind.NAMED_REFERENCE,
        TokenKind.PROPERTY_GROUP,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert [t.range.as_tuple() for t in tokens] == [(0, 7), (8, 17), (18, 38), (39, 54), (54, 54)]
    assert tokens[0].flags == TokenFlags.NEGATED
    assert all(not t.is_negated for t in tokens[1:])
    assert [token_value(src, t) for t in tokens] == ["water", "airAbove", "facing=up,half=top", "minecraft:stone", ""]
    assert token_text(src, tokens[0]) == "!~water"


def test_type_tag_sigils() -> None:
    src = "%BlockLeaves$BlockBOPLeaves"

    tokens = lex(src)

    assert [t.kind for t in tokens] == [TokenKind.TYPE_TAG, TokenKind.STRICT_TYPE_TAG, TokenKind.EOF]
    assert [token_value(src, t) for t in tokens[:2]] == ["BlockLeaves", "BlockBOPLeaves"]


def test_whitespace_between_tokens_is_insignificant() -> None:
    assert [t.kind for t in lex("  stone\t\tdirt  ")] == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_negated_property_group_value_range() -> None:
    src = "![variant=red|blue]"

    (group, eof) = lex(src)

    assert group.kind == TokenKind.PROPERTY_GROUP
    assert group.is_negated
    assert token_value(src, group) == "variant=red|blue"
    assert eof.kind == TokenKind.EOF


def test_lexer_only_scans_its_segment() -> None:
    src = "stone,dirt ~water"

    tokens = Lexer(src, 6, len(src)).lex()

    assert [token_text(src, t) for t in tokens] == ["dirt", "~water", ""]
    assert tokens[0].range.as_tuple() == (6, 10)


def test_eof_is_repeated_after_exhaustion() -> None:
    lexer = Lexer("stone")

    assert lexer.next_token.kind == TokenKind.IDENTIFIER
    assert lexer.next_token.kind == TokenKind.EOF
    assert lexer.next_token.kind == TokenKind.EOF


@pytest.mark.parametrize(
    ("src", "remainder"),
    [
        ("stone #bad", "#bad"),
        ("stone ! dirt", "! dirt"),
        ("%", "%"),
        ("~ water", "~ water"),
        ("[]", "[]"),
        ("[ ]", "[ ]"),
        ("dirt [facing=up", "[facing=up"),
        ("!", "!"),
    ],
)
def test_syntax_error_carries_remainder(src: str, remainder: str) -> None:
    with pytest.raises(QuerySyntaxError) as excinfo:
        lex(src)

    error = excinfo.value
    assert error.remainder == remainder
    assert error.code == "QUERY_SYNTAX_ERROR"
    assert error.fragment == src
    assert error.diagnostic.range.as_tuple() == (len(src) - len(remainder), len(src))


def test_split_segments_on_top_level_commas() -> None:
    src = "a, b ,[x=1,y=2] c"

    segments = split_segments(src)

    assert [s.as_tuple() for s in segments] == [(0, 1), (3, 4), (6, 17)]
    assert [src[s.start.value : s.end.value] for s in segments] == ["a", "b", "[x=1,y=2] c"]


def test_split_segments_keeps_inner_empty_segments() -> None:
    assert [s.as_tuple() for s in split_segments("")] == [(0, 0)]
    assert [s.is_empty() for s in split_segments("a, ,b")] == [False, True, False]


def test_split_segments_drops_trailing_empty_segments() -> None:
    assert [s.as_tuple() for s in split_segments("a,")] == [(0, 1)]
    assert [s.as_tuple() for s in split_segments("a, , ")] == [(0, 1)]
    assert [s.as_tuple() for s in split_segments(",,")] == [(0, 0)]
