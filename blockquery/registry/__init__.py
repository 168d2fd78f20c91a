"""Name registry and predefined-query store."""

from blockquery.registry.defaults import DEFAULT_QUERIES, install_default_queries
from blockquery.registry.names import NameRegistry, NameResolver
from blockquery.registry.store import PredefinedQueries, PredefinedQueryStore, QueryStoreFrozenError

__all__ = [
    "DEFAULT_QUERIES",
    "NameRegistry",
    "NameResolver",
    "PredefinedQueries",
    "PredefinedQueryStore",
    "QueryStoreFrozenError",
    "install_default_queries",
]
