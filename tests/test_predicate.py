from dataclasses import FrozenInstanceError

import pytest

from blockquery.predicate import (
    And,
    ByIdentity,
    ByMaterialTag,
    ByProperty,
    InAltitudeRange,
    MatchAny,
    MatchNone,
    Not,
    Or,
    PredicateListBuilder,
    all_of,
    any_of,
    format_predicate,
    negate,
)
from blockquery.world import WATER, BlockId

STONE = ByIdentity(BlockId("minecraft", "stone"))
DIRT = ByIdentity(BlockId("minecraft", "dirt"))


def test_combinators_require_children() -> None:
    with pytest.raises(ValueError):
        And(())
    with pytest.raises(ValueError):
        Or(())
    with pytest.raises(TypeError):
        Or([STONE])  # type: ignore[arg-type]


def test_builders_collapse_single_children() -> None:
    assert all_of(STONE) is STONE
    assert any_of(DIRT) is DIRT
    assert all_of(STONE, DIRT) == And((STONE, DIRT))
    assert any_of(DIRT, STONE) == Or((DIRT, STONE))
    assert any_of(DIRT, STONE) != Or((STONE, DIRT))


def test_empty_builder_cannot_finish() -> None:
    builder = PredicateListBuilder("or")

    assert len(builder) == 0
    with pytest.raises(ValueError):
        builder.finish()


def test_negate_is_optional() -> None:
    assert negate(STONE) == Not(STONE)
    assert negate(STONE, False) is STONE


def test_property_case_is_folded() -> None:
    predicate = ByProperty("Facing", frozenset({"UP", "Down"}))

    assert predicate.name == "facing"
    assert predicate.values == frozenset({"up", "down"})
    assert predicate == ByProperty.of("facing", "up", "down")
    with pytest.raises(ValueError):
        ByProperty("facing", frozenset())


def test_property_rejects_a_single_string_as_values() -> None:
    with pytest.raises(TypeError):
        ByProperty("variant", "granite")  # type: ignore[arg-type]


def test_predicates_are_immutable_and_hashable() -> None:
    predicate = And((STONE, Not(ByMaterialTag(WATER))))

    with pytest.raises(FrozenInstanceError):
        predicate.children = (DIRT,)  # type: ignore[misc]
    assert len({predicate, And((STONE, Not(ByMaterialTag(WATER)))), MatchAny(), MatchNone()}) == 3


def test_altitude_range_rejects_inverted_bounds() -> None:
    assert InAltitudeRange(5, 5).max_height == 5
    with pytest.raises(ValueError):
        InAltitudeRange(10, 5)


def test_format_predicate_renders_tree() -> None:
    predicate = Or(
        (
            And((STONE, ByProperty.of("variant", "granite", "andesite"))),
            Not(ByMaterialTag(WATER)),
            InAltitudeRange(60, 70),
        )
    )

    assert format_predicate(predicate) == "\n".join(
        [
            "Or",
            "  And",
            "    ByIdentity minecraft:stone",
            "    ByProperty variant=andesite|granite",
            "  Not",
            "    ByMaterialTag ~water",
            "  InAltitudeRange 60..70",
        ]
    )
