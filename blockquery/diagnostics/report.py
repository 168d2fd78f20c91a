"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from blockquery.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(source: str, diagnostic: Diagnostic) -> str:
    """Render one diagnostic with a caret underline below the spec string.

    Query specs are single-line, so the underline is a plain column offset.
    """
    start, end = diagnostic.range.as_tuple()
    width = max(end - start, 1)
    lines = [
        f"{diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}",
        f"  | {source}",
        f"  | {' ' * start}{'^' * width}",
    ]
    if diagnostic.hint:
        lines.append(f"  = hint: {diagnostic.hint}")
    return "\n".join(lines)
