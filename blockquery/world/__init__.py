"""World model and world-state accessor contracts."""

from blockquery.world.memory import AIR_STATE, AIR_TYPE, BlockState, GridWorld
from blockquery.world.model import (
    AIR,
    DEFAULT_NAMESPACE,
    WATER,
    BlockId,
    BlockPos,
    MaterialTag,
    TypeTag,
)
from blockquery.world.view import StateView, WorldView

__all__ = [
    "AIR",
    "AIR_STATE",
    "AIR_TYPE",
    "DEFAULT_NAMESPACE",
    "WATER",
    "BlockId",
    "BlockPos",
    "BlockState",
    "GridWorld",
    "MaterialTag",
    "StateView",
    "TypeTag",
    "WorldView",
]
