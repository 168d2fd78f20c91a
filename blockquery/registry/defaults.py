"""Positional queries that the textual grammar cannot spell directly."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from blockquery.predicate import HasAdjacentWater, HasAirAbove, MatchAny, MatchNone, Predicate
from blockquery.registry.store import PredefinedQueryStore

DEFAULT_QUERIES: Final[Mapping[str, Predicate]] = MappingProxyType(
    {
        "anything": MatchAny(),
        "nothing": MatchNone(),
        "airAbove": HasAirAbove(),
        "hasWater": HasAdjacentWater(),
    }
)


def install_default_queries(store: PredefinedQueryStore) -> PredefinedQueryStore:
    for name, predicate in DEFAULT_QUERIES.items():
        store.register(name, predicate)
    return store
