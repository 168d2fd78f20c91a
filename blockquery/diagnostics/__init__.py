"""Diagnostics."""

from blockquery.diagnostics.codes import (
    QUERY_INVALID_PROPERTY,
    QUERY_SYNTAX_ERROR,
    QUERY_UNKNOWN_IDENTIFIER,
    QUERY_UNKNOWN_MATERIAL,
    QUERY_UNKNOWN_PREDEFINED_QUERY,
    QUERY_UNKNOWN_TYPE_TAG,
    DiagnosticSpec,
    Severity,
)
from blockquery.diagnostics.diagnostic import Diagnostic
from blockquery.diagnostics.errors import (
    QueryCompileError,
    QuerySyntaxError,
    UnknownIdentifierError,
    UnknownMaterialError,
    UnknownPredefinedQueryError,
    UnknownTypeTagError,
    UnresolvedReferenceError,
)
from blockquery.diagnostics.report import has_errors, render_diagnostic

__all__ = [
    "QUERY_INVALID_PROPERTY",
    "QUERY_SYNTAX_ERROR",
    "QUERY_UNKNOWN_IDENTIFIER",
    "QUERY_UNKNOWN_MATERIAL",
    "QUERY_UNKNOWN_PREDEFINED_QUERY",
    "QUERY_UNKNOWN_TYPE_TAG",
    "Diagnostic",
    "DiagnosticSpec",
    "QueryCompileError",
    "QuerySyntaxError",
    "Severity",
    "UnknownIdentifierError",
    "UnknownMaterialError",
    "UnknownPredefinedQueryError",
    "UnknownTypeTagError",
    "UnresolvedReferenceError",
    "has_errors",
    "render_diagnostic",
]
