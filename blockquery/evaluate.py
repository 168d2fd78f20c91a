"""Evaluation of compiled predicates against a world-state accessor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from blockquery.predicate import (
    And,
    ByIdentity,
    ByMaterialTag,
    ByProperty,
    ByStateValue,
    ByTypeTag,
    HasAdjacentWater,
    HasAirAbove,
    InAltitudeRange,
    MatchAny,
    MatchNone,
    Not,
    Or,
    Predicate,
)
from blockquery.world.model import BlockPos
from blockquery.world.view import StateView, WorldView


def matches(predicate: Predicate, world: WorldView, pos: BlockPos) -> bool:
    """Test `predicate` at `pos`.

    Pure and re-entrant: `world` is only read, never retained. Lookup misses
    (such as a missing property) evaluate to False rather than raising.
    `And`/`Or` evaluate children in source order and stop at the first
    decisive child.
    """
    match predicate:
        case MatchAny():
            return True
        case MatchNone():
            return False
        case Or(children=children):
            return any(matches(child, world, pos) for child in children)
        case And(children=children):
            return all(matches(child, world, pos) for child in children)
        case Not(child=child):
            return not matches(child, world, pos)
        case HasAdjacentWater(water=water):
            return any(world.state_at(neighbour).material_tag() == water for neighbour in pos.horizontal_neighbours())
        case HasAirAbove():
            return world.is_empty(pos.up())
        case InAltitudeRange(min_height=low, max_height=high):
            return low <= pos.y <= high
        case _:
            return matches_state(predicate, world.state_at(pos))


def matches_state(predicate: Predicate, state: StateView) -> bool:
    """Test a state-only predicate against one block state.

    Positional variants cannot be answered from a state alone and raise
    `TypeError`; use `matches` for those.
    """
    match predicate:
        case MatchAny():
            return True
        case MatchNone():
            return False
        case Or(children=children):
            return any(matches_state(child, state) for child in children)
        case And(children=children):
            return all(matches_state(child, state) for child in children)
        case Not(child=child):
            return not matches_state(child, state)
        case ByIdentity(block=block):
            return state.identifier() == block
        case ByStateValue(state=expected):
            return state == expected
        case ByTypeTag(tag=tag, strict=True):
            return state.type_tag() == tag
        case ByTypeTag(tag=tag):
            return state.type_tag().derives_from(tag)
        case ByProperty(name=name, values=values):
            value = _property_value_ignoring_case(state, name)
            return value is not None and value.lower() in values
        case ByMaterialTag(material=material):
            return state.material_tag() == material
        case _:
            raise TypeError(f"Predicate needs a position to evaluate: {predicate!r}")


def filter_matching(predicate: Predicate, world: WorldView, positions: Iterable[BlockPos]) -> Iterator[BlockPos]:
    """Yield the positions in `positions` that match, preserving order."""
    for pos in positions:
        if matches(predicate, world, pos):
            yield pos


def _property_value_ignoring_case(state: StateView, folded_name: str) -> str | None:
    for name in state.property_names():
        if name.lower() == folded_name:
            return state.property_value(name)
    return None
