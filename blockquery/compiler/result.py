"""Non-raising compile entrypoint for editors and content linters."""

from __future__ import annotations

from dataclasses import dataclass

from blockquery.compiler.compiler import QueryCompiler
from blockquery.compiler.options import CompilerOptions
from blockquery.diagnostics import Diagnostic, QueryCompileError, has_errors
from blockquery.predicate import Predicate
from blockquery.registry.names import NameResolver
from blockquery.registry.store import PredefinedQueries


@dataclass(frozen=True, slots=True)
class QueryCheckResult:
    """Outcome of checking one spec: a predicate or the diagnostics explaining why not."""

    source_text: str
    predicate: Predicate | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def check_query(
    spec: str,
    *,
    resolver: NameResolver,
    store: PredefinedQueries | None = None,
    options: CompilerOptions | None = None,
) -> QueryCheckResult:
    try:
        predicate = QueryCompiler(resolver, store, options).compile(spec)
    except QueryCompileError as error:
        return QueryCheckResult(source_text=spec, predicate=None, diagnostics=(error.diagnostic,))
    return QueryCheckResult(source_text=spec, predicate=predicate)
