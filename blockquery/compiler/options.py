"""Compiler configuration options."""

from dataclasses import dataclass, replace
from typing import Final

DEFAULT_PROPERTY_NAME: Final[str] = "variant"

# Search path for `%name`/`$name`, tried in order; first registered match wins.
DEFAULT_TYPE_TAG_PREFIXES: Final[tuple[str, ...]] = (
    "",
    "biomesoplenty.common.block.",
    "net.minecraft.block.",
)


@dataclass(frozen=True, slots=True)
class CompilerOptions:
    """Conventions used when compiling query specs."""

    default_property_name: str = DEFAULT_PROPERTY_NAME
    type_tag_prefixes: tuple[str, ...] = DEFAULT_TYPE_TAG_PREFIXES

    def __post_init__(self) -> None:
        if not self.default_property_name:
            raise ValueError("default_property_name must not be empty")
        if not self.type_tag_prefixes:
            raise ValueError("type_tag_prefixes must contain at least one prefix")

    def with_type_tag_prefixes(self, *prefixes: str) -> "CompilerOptions":
        return replace(self, type_tag_prefixes=tuple(prefixes))

    def qualified_type_tag_names(self, name: str) -> tuple[str, ...]:
        return tuple(f"{prefix}{name}" for prefix in self.type_tag_prefixes)
