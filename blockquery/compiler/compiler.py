"""Compiler from query spec strings to predicate trees.

Grammar (comma has the lowest precedence, juxtaposition is AND, `!` binds to
the single following token; an empty segment matches everything and trailing
empty segments are dropped)::

    query     := segment ("," segment)*
    segment   := token*
    token     := "!"? (bareId | "%" name | "$" name | "~" name | "@" name | "[" propList "]")
    propList  := propItem ("," propItem)*
    propItem  := (name "=")? value ("|" value)*
"""

from __future__ import annotations

import logging
import re
from typing import Final

from blockquery.compiler.options import CompilerOptions
from blockquery.diagnostics import (
    QUERY_INVALID_PROPERTY,
    QuerySyntaxError,
    UnknownIdentifierError,
    UnknownMaterialError,
    UnknownPredefinedQueryError,
    UnknownTypeTagError,
)
from blockquery.lexer import Lexer, Token, TokenKind, split_segments, token_value
from blockquery.predicate import (
    ByIdentity,
    MatchAny,
    ByMaterialTag,
    ByProperty,
    ByTypeTag,
    Predicate,
    PredicateListBuilder,
    negate,
)
from blockquery.registry.names import NameResolver
from blockquery.registry.store import PredefinedQueries
from blockquery.text import TextRange
from blockquery.world.model import TypeTag

logger = logging.getLogger(__name__)

_PROPERTY_ITEM_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(?:(\w+)\s*=\s*)?(\w+(?:\|\w+)*)\s*$", re.ASCII)


class QueryCompiler:
    """Compiles spec strings against one resolver, store and option set.

    The compiler holds no per-call state and can be shared between threads as
    long as the resolver and store are no longer being written to.
    """

    def __init__(
        self,
        resolver: NameResolver,
        store: PredefinedQueries | None = None,
        options: CompilerOptions | None = None,
    ) -> None:
        self._resolver = resolver
        self._store = store
        self._options = options or CompilerOptions()

    @property
    def options(self) -> CompilerOptions:
        return self._options

    def compile(self, spec: str) -> Predicate:
        """Compile `spec`, raising `QueryCompileError` on the first problem."""
        any_of = PredicateListBuilder("or")
        for segment in split_segments(spec):
            any_of.add(self._compile_segment(spec, segment))
        predicate = any_of.finish()
        logger.debug("Compiled block query %r", spec)
        return predicate

    def _compile_segment(self, spec: str, segment: TextRange) -> Predicate:
        if segment.is_empty():
            # Empty conjunction.
            return MatchAny()

        all_of = PredicateListBuilder("and")
        start, end = segment.as_tuple()
        lexer = Lexer(spec, start, end)
        while (token := lexer.next_token).kind != TokenKind.EOF:
            all_of.add(self._compile_token(spec, segment, token))
        return all_of.finish()

    def _compile_token(self, spec: str, segment: TextRange, token: Token) -> Predicate:
        name = token_value(spec, token)
        match token.kind:
            case TokenKind.TYPE_TAG | TokenKind.STRICT_TYPE_TAG:
                tag = self._resolve_type_tag(name)
                if tag is None:
                    raise UnknownTypeTagError.at(spec, name=name, fragment_range=segment, token_range=token.range)
                predicate: Predicate = ByTypeTag(tag, strict=token.kind == TokenKind.STRICT_TYPE_TAG)
            case TokenKind.MATERIAL_TAG:
                material = self._resolver.resolve_material_tag(name)
                if material is None:
                    raise UnknownMaterialError.at(spec, name=name, fragment_range=segment, token_range=token.range)
                predicate = ByMaterialTag(material)
            case TokenKind.NAMED_REFERENCE:
                stored = self._store.lookup(name) if self._store is not None else None
                if stored is None:
                    raise UnknownPredefinedQueryError.at(
                        spec,
                        name=name,
                        fragment_range=segment,
                        token_range=token.range,
                    )
                predicate = stored
            case TokenKind.PROPERTY_GROUP:
                predicate = self._compile_property_group(spec, segment, token)
            case TokenKind.IDENTIFIER:
                block = self._resolver.resolve_identifier(name)
                if block is None:
                    raise UnknownIdentifierError.at(spec, name=name, fragment_range=segment, token_range=token.range)
                predicate = ByIdentity(block)
            case _:
                raise ValueError(f"Unexpected token kind: {token.kind!r}")
        return negate(predicate, token.is_negated)

    def _resolve_type_tag(self, name: str) -> TypeTag | None:
        for qualified in self._options.qualified_type_tag_names(name):
            tag = self._resolver.resolve_type_tag(qualified)
            if tag is not None:
                return tag
        return None

    def _compile_property_group(self, spec: str, segment: TextRange, token: Token) -> Predicate:
        all_of = PredicateListBuilder("and")
        offset = token.value_range.start.value
        interior = token_value(spec, token)
        for item in interior.split(","):
            item_range = TextRange.from_offsets(offset, offset + len(item))
            offset += len(item) + 1
            item_match = _PROPERTY_ITEM_RE.match(item)
            if item_match is None:
                raise QuerySyntaxError.at(
                    spec,
                    fragment_range=segment,
                    error_range=item_range,
                    diagnostic_spec=QUERY_INVALID_PROPERTY,
                )
            property_name = item_match.group(1) or self._options.default_property_name
            values = frozenset(item_match.group(2).split("|"))
            all_of.add(ByProperty(property_name, values))
        return all_of.finish()


def compile_query(
    spec: str,
    *,
    resolver: NameResolver,
    store: PredefinedQueries | None = None,
    options: CompilerOptions | None = None,
) -> Predicate:
    """Compile one spec string into an immutable predicate."""
    return QueryCompiler(resolver, store, options).compile(spec)
