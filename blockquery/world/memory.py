"""In-memory world for tests, scripts and local wiring."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from blockquery.world.model import AIR, BlockId, BlockPos, MaterialTag, TypeTag

AIR_TYPE = TypeTag("BlockAir")


@dataclass(frozen=True, slots=True)
class BlockState:
    """Immutable block state implementing `StateView`."""

    block: BlockId
    tag: TypeTag
    material: MaterialTag
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Hashable and read-only regardless of what the caller passed in.
        object.__setattr__(self, "properties", _FrozenProperties(self.properties))

    def identifier(self) -> BlockId:
        return self.block

    def type_tag(self) -> TypeTag:
        return self.tag

    def material_tag(self) -> MaterialTag:
        return self.material

    def property_names(self) -> Iterable[str]:
        return self.properties.keys()

    def property_value(self, name: str) -> str | None:
        return self.properties.get(name)

    def with_properties(self, **properties: str) -> BlockState:
        merged = dict(self.properties)
        merged.update(properties)
        return BlockState(self.block, self.tag, self.material, merged)


class _FrozenProperties(Mapping[str, str]):
    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, str]) -> None:
        self._items = dict(items)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self._items) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return repr(self._items)


AIR_STATE = BlockState(BlockId("minecraft", "air"), AIR_TYPE, AIR)


class GridWorld:
    """Dict-backed `WorldView`. Unset positions hold `air`."""

    def __init__(self, blocks: Mapping[BlockPos, BlockState] | None = None, *, air: BlockState = AIR_STATE) -> None:
        self._blocks: dict[BlockPos, BlockState] = dict(blocks or {})
        self._air = air

    def set(self, pos: BlockPos, state: BlockState) -> None:
        self._blocks[pos] = state

    def fill(self, positions: Iterable[BlockPos], state: BlockState) -> None:
        for pos in positions:
            self._blocks[pos] = state

    def state_at(self, pos: BlockPos) -> BlockState:
        return self._blocks.get(pos, self._air)

    def is_empty(self, pos: BlockPos) -> bool:
        return self.state_at(pos).material == AIR

    def positions(self) -> list[BlockPos]:
        return sorted(self._blocks)
