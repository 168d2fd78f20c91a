"""Small demo vocabulary shared by the developer scripts."""

from __future__ import annotations

import random

from blockquery import NameRegistry, PredefinedQueryStore, install_default_queries
from blockquery.world import AIR, WATER, BlockId, BlockPos, BlockState, GridWorld, MaterialTag, TypeTag

GROUND = MaterialTag("ground")
ROCK = MaterialTag("rock")
LEAVES = MaterialTag("leaves")

BLOCK_TYPE = TypeTag("Block")
DIRT_TYPE = TypeTag("BlockDirt", BLOCK_TYPE)
GRASS_TYPE = TypeTag("BlockGrass", BLOCK_TYPE)
STONE_TYPE = TypeTag("BlockStone", BLOCK_TYPE)
LIQUID_TYPE = TypeTag("BlockLiquid", BLOCK_TYPE)
LEAVES_TYPE = TypeTag("BlockLeaves", BLOCK_TYPE)
BOP_LEAVES_TYPE = TypeTag("BlockBOPLeaves", LEAVES_TYPE)

STONE = BlockState(BlockId("minecraft", "stone"), STONE_TYPE, ROCK, {"variant": "stone"})
GRANITE = BlockState(BlockId("minecraft", "stone"), STONE_TYPE, ROCK, {"variant": "granite"})
DIRT = BlockState(BlockId("minecraft", "dirt"), DIRT_TYPE, GROUND, {"variant": "dirt"})
GRASS = BlockState(BlockId("minecraft", "grass"), GRASS_TYPE, GROUND, {"snowy": "false"})
WATER_STATE = BlockState(BlockId("minecraft", "water"), LIQUID_TYPE, WATER, {"level": "0"})
REDWOOD_LEAVES = BlockState(
    BlockId("biomesoplenty", "leaves_3"),
    BOP_LEAVES_TYPE,
    LEAVES,
    {"variant": "redwood", "decayable": "true"},
)


def build_demo_registry() -> NameRegistry:
    registry = NameRegistry()
    for state in (STONE, DIRT, GRASS, WATER_STATE, REDWOOD_LEAVES):
        registry.register_block(state.block)
    registry.register_block("air")
    for material in (AIR, WATER, GROUND, ROCK, LEAVES):
        registry.register_material(material)
    for tag in (BLOCK_TYPE, DIRT_TYPE, GRASS_TYPE, STONE_TYPE, LIQUID_TYPE, LEAVES_TYPE):
        registry.register_type_tag(tag, f"net.minecraft.block.{tag.name}")
    registry.register_type_tag(BOP_LEAVES_TYPE, f"biomesoplenty.common.block.{BOP_LEAVES_TYPE.name}")
    return registry


def build_demo_store(registry: NameRegistry) -> PredefinedQueryStore:
    store = install_default_queries(PredefinedQueryStore())
    store.register_query("soil", "dirt,grass", resolver=registry)
    store.register_query("sapling", "@soil @airAbove", resolver=registry)
    store.freeze()
    return store


def build_demo_world(size: int, *, seed: int = 0) -> GridWorld:
    """Flat terrain: stone floor, a dirt/grass surface with scattered water."""
    rng = random.Random(seed)
    world = GridWorld()
    for x in range(size):
        for z in range(size):
            world.set(BlockPos(x, 0, z), rng.choice((STONE, GRANITE)))
            world.set(BlockPos(x, 1, z), DIRT)
            surface = rng.choices((GRASS, DIRT, WATER_STATE), weights=(6, 3, 1))[0]
            world.set(BlockPos(x, 2, z), surface)
            if surface is GRASS and rng.random() < 0.05:
                world.set(BlockPos(x, 3, z), REDWOOD_LEAVES)
    return world
