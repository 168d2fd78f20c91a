"""Compiled block query predicates.

Every node is an immutable, hashable value. Compiled trees are shared between
callers and evaluated concurrently, so nothing here is ever mutated after
construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeAlias

from blockquery.world.model import WATER, BlockId, MaterialTag, TypeTag


@dataclass(frozen=True, slots=True)
class MatchAny:
    """Matches every position."""


@dataclass(frozen=True, slots=True)
class MatchNone:
    """Matches no position."""


@dataclass(frozen=True, slots=True)
class Or:
    """Matches if any child matches, evaluated in order."""

    children: tuple[Predicate, ...]

    def __post_init__(self) -> None:
        _require_children("Or", self.children)


@dataclass(frozen=True, slots=True)
class And:
    """Matches if every child matches, evaluated in order."""

    children: tuple[Predicate, ...]

    def __post_init__(self) -> None:
        _require_children("And", self.children)


@dataclass(frozen=True, slots=True)
class Not:
    child: Predicate


@dataclass(frozen=True, slots=True)
class ByIdentity:
    block: BlockId


@dataclass(frozen=True, slots=True)
class ByStateValue:
    """Matches one exact block state value (compared with `==`)."""

    state: object


@dataclass(frozen=True, slots=True)
class ByTypeTag:
    tag: TypeTag
    strict: bool = False


@dataclass(frozen=True, slots=True)
class ByProperty:
    """Property match; name and values are stored case-folded.

    The evaluator compares the folded name against each of the state's
    property names, so hosts never see it.
    """

    name: str
    values: frozenset[str]

    def __post_init__(self) -> None:
        if isinstance(self.values, str):
            raise TypeError("ByProperty values must be a collection of strings, not a single string")
        if not self.values:
            raise ValueError("ByProperty requires at least one accepted value")
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(self, "values", frozenset(value.lower() for value in self.values))

    @staticmethod
    def of(name: str, *values: str) -> ByProperty:
        return ByProperty(name, frozenset(values))


@dataclass(frozen=True, slots=True)
class ByMaterialTag:
    material: MaterialTag


@dataclass(frozen=True, slots=True)
class HasAdjacentWater:
    """Any of the four horizontal neighbours has the water material."""

    water: MaterialTag = field(default=WATER)


@dataclass(frozen=True, slots=True)
class HasAirAbove:
    pass


@dataclass(frozen=True, slots=True)
class InAltitudeRange:
    """Vertical coordinate within `[min_height, max_height]`."""

    min_height: int
    max_height: int

    def __post_init__(self) -> None:
        if self.min_height > self.max_height:
            raise ValueError(
                f"InAltitudeRange min_height {self.min_height} exceeds max_height {self.max_height}"
            )


Predicate: TypeAlias = (
    MatchAny
    | MatchNone
    | Or
    | And
    | Not
    | ByIdentity
    | ByStateValue
    | ByTypeTag
    | ByProperty
    | ByMaterialTag
    | HasAdjacentWater
    | HasAirAbove
    | InAltitudeRange
)


def _require_children(kind: str, children: Iterable[Predicate]) -> None:
    if not isinstance(children, tuple):
        raise TypeError(f"{kind} children must be a tuple")
    if not children:
        raise ValueError(f"{kind} requires at least one child")


__all__ = [
    "And",
    "ByIdentity",
    "ByMaterialTag",
    "ByProperty",
    "ByStateValue",
    "ByTypeTag",
    "HasAdjacentWater",
    "HasAirAbove",
    "InAltitudeRange",
    "MatchAny",
    "MatchNone",
    "Not",
    "Or",
    "Predicate",
]
