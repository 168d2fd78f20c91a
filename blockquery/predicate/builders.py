"""Builders for combinator predicates."""

from __future__ import annotations

from typing import Literal, TypeAlias

from blockquery.predicate.model import And, Not, Or, Predicate

CombinatorKind: TypeAlias = Literal["and", "or"]


class PredicateListBuilder:
    """Append children in source order, then finish into one immutable node.

    A single child finishes as the child itself, so callers always see the
    simplest equivalent tree.
    """

    __slots__ = ("_kind", "_children")

    def __init__(self, kind: CombinatorKind) -> None:
        self._kind = kind
        self._children: list[Predicate] = []

    def __len__(self) -> int:
        return len(self._children)

    def add(self, child: Predicate) -> PredicateListBuilder:
        self._children.append(child)
        return self

    def finish(self) -> Predicate:
        if not self._children:
            raise ValueError(f"Cannot finish an empty `{self._kind}` predicate")
        if len(self._children) == 1:
            return self._children[0]
        children = tuple(self._children)
        return And(children) if self._kind == "and" else Or(children)


def all_of(*children: Predicate) -> Predicate:
    builder = PredicateListBuilder("and")
    for child in children:
        builder.add(child)
    return builder.finish()


def any_of(*children: Predicate) -> Predicate:
    builder = PredicateListBuilder("or")
    for child in children:
        builder.add(child)
    return builder.finish()


def negate(predicate: Predicate, negated: bool = True) -> Predicate:
    return Not(predicate) if negated else predicate
