#!/usr/bin/env python
"""Print the tokens and compiled predicate tree for a block query."""

from __future__ import annotations

import argparse
import logging

from _demo_world import build_demo_registry, build_demo_store

from blockquery import QueryCompileError, compile_query, format_predicate
from blockquery.diagnostics import render_diagnostic
from blockquery.lexer import Lexer, dump_tokens, split_segments


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens and predicate tree for a block query")
    parser.add_argument("spec", help="Query spec, e.g. '!~water @airAbove,[variant=redwood]'")
    parser.add_argument("--tokens-only", action="store_true", help="Only tokenize, do not resolve names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    registry = build_demo_registry()
    store = build_demo_store(registry)

    try:
        for index, segment in enumerate(split_segments(args.spec)):
            start, end = segment.as_tuple()
            print(f"segment {index} range={segment.as_tuple()} text={args.spec[start:end]!r}")
            dump_tokens(Lexer(args.spec, start, end).lex(), args.spec)
        if args.tokens_only:
            return 0
        predicate = compile_query(args.spec, resolver=registry, store=store)
    except QueryCompileError as error:
        print(render_diagnostic(args.spec, error.diagnostic))
        return 1

    print()
    print(format_predicate(predicate))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
