"""Compile-time errors raised by the query compiler.

Every error carries a :class:`Diagnostic` whose range points into the original
spec string, so callers can either print ``str(error)`` or render the
diagnostic against the source with :func:`render_diagnostic`.
"""

from __future__ import annotations

from blockquery.diagnostics.codes import (
    QUERY_SYNTAX_ERROR,
    QUERY_UNKNOWN_IDENTIFIER,
    QUERY_UNKNOWN_MATERIAL,
    QUERY_UNKNOWN_PREDEFINED_QUERY,
    QUERY_UNKNOWN_TYPE_TAG,
    DiagnosticSpec,
)
from blockquery.diagnostics.diagnostic import Diagnostic
from blockquery.text import TextRange, slice_text_range


class QueryCompileError(ValueError):
    """Base class for all failures of ``compile_query``."""

    def __init__(self, diagnostic: Diagnostic, *, spec: str, fragment: str) -> None:
        super().__init__(f"{diagnostic.message} In `{fragment}` of `{spec}`.")
        self.diagnostic = diagnostic
        self.spec = spec
        self.fragment = fragment

    @property
    def code(self) -> str:
        return self.diagnostic.code


class QuerySyntaxError(QueryCompileError):
    """The remaining text of a segment matches no token form."""

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        spec: str,
        fragment: str,
        remainder: str,
    ) -> None:
        super().__init__(diagnostic, spec=spec, fragment=fragment)
        self.remainder = remainder

    @classmethod
    def at(
        cls,
        spec: str,
        *,
        fragment_range: TextRange,
        error_range: TextRange,
        diagnostic_spec: DiagnosticSpec = QUERY_SYNTAX_ERROR,
        detail: str | None = None,
    ) -> QuerySyntaxError:
        remainder = slice_text_range(spec, error_range)
        if detail is None:
            detail = f"Cannot parse `{remainder}`."
        diagnostic = Diagnostic.from_spec(diagnostic_spec, error_range, detail=detail)
        return cls(
            diagnostic,
            spec=spec,
            fragment=slice_text_range(spec, fragment_range),
            remainder=remainder,
        )


class UnresolvedReferenceError(QueryCompileError):
    """A symbolic reference did not resolve."""

    diagnostic_spec: DiagnosticSpec = QUERY_UNKNOWN_IDENTIFIER
    noun: str = "name"

    def __init__(self, diagnostic: Diagnostic, *, spec: str, fragment: str, name: str) -> None:
        super().__init__(diagnostic, spec=spec, fragment=fragment)
        self.name = name

    @classmethod
    def at(
        cls,
        spec: str,
        *,
        name: str,
        fragment_range: TextRange,
        token_range: TextRange,
    ) -> UnresolvedReferenceError:
        diagnostic = Diagnostic.from_spec(
            cls.diagnostic_spec,
            token_range,
            detail=f"Unknown {cls.noun} `{name}`.",
        )
        return cls(
            diagnostic,
            spec=spec,
            fragment=slice_text_range(spec, fragment_range),
            name=name,
        )


class UnknownIdentifierError(UnresolvedReferenceError):
    diagnostic_spec = QUERY_UNKNOWN_IDENTIFIER
    noun = "block"


class UnknownTypeTagError(UnresolvedReferenceError):
    diagnostic_spec = QUERY_UNKNOWN_TYPE_TAG
    noun = "type tag"


class UnknownMaterialError(UnresolvedReferenceError):
    diagnostic_spec = QUERY_UNKNOWN_MATERIAL
    noun = "material"


class UnknownPredefinedQueryError(UnresolvedReferenceError):
    diagnostic_spec = QUERY_UNKNOWN_PREDEFINED_QUERY
    noun = "predefined query"
