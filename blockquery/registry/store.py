"""Predefined-query store backing `@name` references."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import TYPE_CHECKING, Protocol

from blockquery.predicate import Predicate

if TYPE_CHECKING:
    from blockquery.compiler.options import CompilerOptions
    from blockquery.registry.names import NameResolver

logger = logging.getLogger(__name__)


class QueryStoreFrozenError(RuntimeError):
    """Raised when registering into a store after `freeze()`."""


class PredefinedQueries(Protocol):
    """Compile-time lookup of named, already compiled predicates."""

    def lookup(self, name: str) -> Predicate | None: ...


class PredefinedQueryStore:
    """Name to compiled predicate table, populated then frozen by the host.

    Re-registering a name replaces the previous predicate so hosts can
    override defaults. Queries that reference `@name` capture the predicate
    registered at their own compile time.
    """

    def __init__(self) -> None:
        self._queries: dict[str, Predicate] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, predicate: Predicate) -> Predicate:
        if self._frozen:
            raise QueryStoreFrozenError(f"Cannot register predefined query `{name}`: store is frozen")
        if name in self._queries:
            logger.debug("Overriding predefined query %r", name)
        else:
            logger.debug("Registered predefined query %r", name)
        self._queries[name] = predicate
        return predicate

    def register_query(
        self,
        name: str,
        spec: str,
        *,
        resolver: NameResolver,
        options: CompilerOptions | None = None,
    ) -> Predicate:
        """Compile `spec` against this store and register the result under `name`."""
        from blockquery.compiler import compile_query

        predicate = compile_query(spec, resolver=resolver, store=self, options=options)
        return self.register(name, predicate)

    def freeze(self) -> None:
        self._frozen = True
        logger.debug("Predefined query store frozen with %d queries", len(self._queries))

    def lookup(self, name: str) -> Predicate | None:
        return self._queries.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._queries))

    def __contains__(self, name: object) -> bool:
        return name in self._queries

    def __len__(self) -> int:
        return len(self._queries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
