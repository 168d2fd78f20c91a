"""Human-readable rendering of predicate trees."""

from __future__ import annotations

from blockquery.predicate.model import (
    And,
    ByIdentity,
    ByMaterialTag,
    ByProperty,
    ByStateValue,
    ByTypeTag,
    HasAdjacentWater,
    HasAirAbove,
    InAltitudeRange,
    MatchAny,
    MatchNone,
    Not,
    Or,
    Predicate,
)


def format_predicate(predicate: Predicate, indent: str = "  ") -> str:
    """Render `predicate` as an indented tree, one node per line."""
    lines: list[str] = []
    _format_into(predicate, lines, depth=0, indent=indent)
    return "\n".join(lines)


def _format_into(predicate: Predicate, lines: list[str], *, depth: int, indent: str) -> None:
    prefix = indent * depth
    match predicate:
        case And(children=children) | Or(children=children):
            lines.append(f"{prefix}{type(predicate).__name__}")
            for child in children:
                _format_into(child, lines, depth=depth + 1, indent=indent)
        case Not(child=child):
            lines.append(f"{prefix}Not")
            _format_into(child, lines, depth=depth + 1, indent=indent)
        case _:
            lines.append(f"{prefix}{_describe_leaf(predicate)}")


def _describe_leaf(predicate: Predicate) -> str:
    match predicate:
        case MatchAny():
            return "MatchAny"
        case MatchNone():
            return "MatchNone"
        case ByIdentity(block=block):
            return f"ByIdentity {block}"
        case ByStateValue(state=state):
            return f"ByStateValue {state!r}"
        case ByTypeTag(tag=tag, strict=strict):
            return f"ByTypeTag {'$' if strict else '%'}{tag}"
        case ByProperty(name=name, values=values):
            return f"ByProperty {name}={'|'.join(sorted(values))}"
        case ByMaterialTag(material=material):
            return f"ByMaterialTag ~{material}"
        case HasAdjacentWater(water=water):
            return f"HasAdjacentWater ~{water}"
        case HasAirAbove():
            return "HasAirAbove"
        case InAltitudeRange(min_height=low, max_height=high):
            return f"InAltitudeRange {low}..{high}"
        case _:
            raise TypeError(f"Unknown predicate node: {predicate!r}")
