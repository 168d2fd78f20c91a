"""Value types shared by the registry, the predicate AST and world accessors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

DEFAULT_NAMESPACE: Final[str] = "minecraft"


@dataclass(frozen=True, slots=True, order=True)
class BlockId:
    """Namespaced block identifier, e.g. `minecraft:stone`."""

    namespace: str
    path: str

    @staticmethod
    def parse(text: str, default_namespace: str = DEFAULT_NAMESPACE) -> BlockId:
        namespace, sep, path = text.strip().partition(":")
        if not sep:
            return BlockId(default_namespace, namespace)
        if not namespace or not path or ":" in path:
            raise ValueError(f"Invalid block identifier: {text!r}")
        return BlockId(namespace, path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"


@dataclass(frozen=True, slots=True)
class TypeTag:
    """Block kind classifier with single inheritance.

    Non-strict type queries match a tag and everything derived from it.
    """

    name: str
    parent: TypeTag | None = None

    def derives_from(self, other: TypeTag) -> bool:
        return any(tag == other for tag in self.lineage())

    def lineage(self) -> Iterator[TypeTag]:
        tag: TypeTag | None = self
        while tag is not None:
            yield tag
            tag = tag.parent

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class MaterialTag:
    """Physical material classifier, independent of block identity."""

    name: str

    def __str__(self) -> str:
        return self.name


AIR: Final[MaterialTag] = MaterialTag("air")
WATER: Final[MaterialTag] = MaterialTag("water")


@dataclass(frozen=True, slots=True, order=True)
class BlockPos:
    """Integer block position; `y` is the vertical axis."""

    x: int
    y: int
    z: int

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> BlockPos:
        return BlockPos(self.x + dx, self.y + dy, self.z + dz)

    def up(self, n: int = 1) -> BlockPos:
        return self.offset(dy=n)

    def down(self, n: int = 1) -> BlockPos:
        return self.offset(dy=-n)

    def north(self, n: int = 1) -> BlockPos:
        return self.offset(dz=-n)

    def south(self, n: int = 1) -> BlockPos:
        return self.offset(dz=n)

    def west(self, n: int = 1) -> BlockPos:
        return self.offset(dx=-n)

    def east(self, n: int = 1) -> BlockPos:
        return self.offset(dx=n)

    def horizontal_neighbours(self) -> tuple[BlockPos, BlockPos, BlockPos, BlockPos]:
        return (self.west(), self.east(), self.north(), self.south())
