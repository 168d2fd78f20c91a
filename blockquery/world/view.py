"""World-state accessor contracts consumed by the evaluator."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from blockquery.world.model import BlockId, BlockPos, MaterialTag, TypeTag


class StateView(Protocol):
    """Read-only view of the block state at one position."""

    def identifier(self) -> BlockId: ...

    def type_tag(self) -> TypeTag: ...

    def material_tag(self) -> MaterialTag: ...

    def property_names(self) -> Iterable[str]:
        """Names of the properties this state carries, spelled as the host spells them."""
        ...

    def property_value(self, name: str) -> str | None:
        """Value of the property called exactly `name`, or None if absent."""
        ...


class WorldView(Protocol):
    """Read-only world accessor owned by the caller of `matches`."""

    def state_at(self, pos: BlockPos) -> StateView: ...

    def is_empty(self, pos: BlockPos) -> bool: ...
