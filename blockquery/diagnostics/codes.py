"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


QUERY_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_SYNTAX_ERROR",
    message="Syntax error in block query.",
    hint="Tokens are `name`, `ns:name`, `%Type`, `$Type`, `~material`, `@query` or `[prop=value]`, optionally prefixed by `!`.",
    severity="error",
    category="lexer",
)

QUERY_INVALID_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_INVALID_PROPERTY",
    message="Invalid property match.",
    hint="Use `[name=value]`, `[name=a|b]` or a bare `[value]`.",
    severity="error",
    category="parser",
)

QUERY_UNKNOWN_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNKNOWN_IDENTIFIER",
    message="No block registered with this name.",
    hint="Check the spelling or add the namespace, e.g. `minecraft:stone`.",
    severity="error",
    category="resolve",
)

QUERY_UNKNOWN_TYPE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNKNOWN_TYPE_TAG",
    message="No block type tag registered with this name.",
    hint="Type tags are looked up under each configured prefix in order.",
    severity="error",
    category="resolve",
)

QUERY_UNKNOWN_MATERIAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNKNOWN_MATERIAL",
    message="No block material registered with this name.",
    severity="error",
    category="resolve",
)

QUERY_UNKNOWN_PREDEFINED_QUERY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="QUERY_UNKNOWN_PREDEFINED_QUERY",
    message="No predefined query registered with this name.",
    hint="Predefined queries must be registered before queries referring to them are compiled.",
    severity="error",
    category="resolve",
)
