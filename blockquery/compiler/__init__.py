"""Query spec compiler."""

from blockquery.compiler.compiler import QueryCompiler, compile_query
from blockquery.compiler.options import DEFAULT_PROPERTY_NAME, DEFAULT_TYPE_TAG_PREFIXES, CompilerOptions
from blockquery.compiler.result import QueryCheckResult, check_query

__all__ = [
    "DEFAULT_PROPERTY_NAME",
    "DEFAULT_TYPE_TAG_PREFIXES",
    "CompilerOptions",
    "QueryCheckResult",
    "QueryCompiler",
    "check_query",
    "compile_query",
]
