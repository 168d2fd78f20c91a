"""Shared vocabulary, worlds and stubs used across block query tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockquery import NameRegistry, PredefinedQueryStore, install_default_queries
from blockquery.world import AIR, WATER, BlockId, BlockPos, BlockState, GridWorld, MaterialTag, TypeTag

ROCK = MaterialTag("rock")
GROUND = MaterialTag("ground")
LEAVES = MaterialTag("leaves")

BLOCK_TYPE = TypeTag("Block")
STONE_TYPE = TypeTag("BlockStone", BLOCK_TYPE)
DIRT_TYPE = TypeTag("BlockDirt", BLOCK_TYPE)
LIQUID_TYPE = TypeTag("BlockLiquid", BLOCK_TYPE)
LEAVES_TYPE = TypeTag("BlockLeaves", BLOCK_TYPE)
BOP_LEAVES_TYPE = TypeTag("BlockBOPLeaves", LEAVES_TYPE)

STONE = BlockState(BlockId("minecraft", "stone"), STONE_TYPE, ROCK, {"variant": "stone"})
GRANITE = BlockState(BlockId("minecraft", "stone"), STONE_TYPE, ROCK, {"variant": "granite"})
DIRT = BlockState(BlockId("minecraft", "dirt"), DIRT_TYPE, GROUND, {"variant": "dirt", "snowy": "false"})
WATER_STATE = BlockState(BlockId("minecraft", "water"), LIQUID_TYPE, WATER, {"level": "0"})
REDWOOD_LEAVES = BlockState(
    BlockId("biomesoplenty", "leaves_3"),
    BOP_LEAVES_TYPE,
    LEAVES,
    {"variant": "redwood"},
)
OAK_LEAVES = BlockState(BlockId("minecraft", "leaves"), LEAVES_TYPE, LEAVES, {"variant": "oak"})

ORIGIN = BlockPos(0, 0, 0)


def build_registry() -> NameRegistry:
    registry = NameRegistry()
    registry.register_blocks(["stone", "dirt", "water", "leaves", "biomesoplenty:leaves_3"])
    for material in (AIR, WATER, ROCK, GROUND, LEAVES):
        registry.register_material(material)
    for tag in (BLOCK_TYPE, STONE_TYPE, DIRT_TYPE, LIQUID_TYPE, LEAVES_TYPE):
        registry.register_type_tag(tag, f"net.minecraft.block.{tag.name}")
    registry.register_type_tag(BOP_LEAVES_TYPE, f"biomesoplenty.common.block.{BOP_LEAVES_TYPE.name}")
    return registry


def build_store() -> PredefinedQueryStore:
    return install_default_queries(PredefinedQueryStore())


def world_with(blocks: dict[BlockPos, BlockState]) -> GridWorld:
    return GridWorld(blocks)


@dataclass(slots=True)
class CountingWorld:
    """`WorldView` wrapper counting every accessor call."""

    inner: GridWorld
    state_at_calls: int = 0
    is_empty_calls: int = 0
    seen: list[BlockPos] = field(default_factory=list)

    def state_at(self, pos: BlockPos) -> BlockState:
        self.state_at_calls += 1
        self.seen.append(pos)
        return self.inner.state_at(pos)

    def is_empty(self, pos: BlockPos) -> bool:
        self.is_empty_calls += 1
        self.seen.append(pos)
        return self.inner.is_empty(pos)
