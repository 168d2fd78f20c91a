"""Predicate AST for compiled block queries."""

from blockquery.predicate.builders import PredicateListBuilder, all_of, any_of, negate
from blockquery.predicate.model import (
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
from blockquery.predicate.render import format_predicate

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
    "PredicateListBuilder",
    "all_of",
    "any_of",
    "format_predicate",
    "negate",
]
