"""Block query language: compile textual block/position criteria and evaluate them against a world."""

from blockquery.compiler import (
    CompilerOptions,
    QueryCheckResult,
    QueryCompiler,
    check_query,
    compile_query,
)
from blockquery.diagnostics import (
    QueryCompileError,
    QuerySyntaxError,
    UnknownIdentifierError,
    UnknownMaterialError,
    UnknownPredefinedQueryError,
    UnknownTypeTagError,
)
from blockquery.evaluate import filter_matching, matches, matches_state
from blockquery.predicate import Predicate, format_predicate
from blockquery.registry import (
    NameRegistry,
    NameResolver,
    PredefinedQueries,
    PredefinedQueryStore,
    install_default_queries,
)
from blockquery.world import BlockId, BlockPos, MaterialTag, StateView, TypeTag, WorldView

__all__ = [
    "BlockId",
    "BlockPos",
    "CompilerOptions",
    "MaterialTag",
    "NameRegistry",
    "NameResolver",
    "PredefinedQueries",
    "PredefinedQueryStore",
    "Predicate",
    "QueryCheckResult",
    "QueryCompileError",
    "QueryCompiler",
    "QuerySyntaxError",
    "StateView",
    "TypeTag",
    "UnknownIdentifierError",
    "UnknownMaterialError",
    "UnknownPredefinedQueryError",
    "UnknownTypeTagError",
    "WorldView",
    "check_query",
    "compile_query",
    "filter_matching",
    "format_predicate",
    "install_default_queries",
    "matches",
    "matches_state",
]
