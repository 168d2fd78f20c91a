import logging

import pytest

from blockquery import compile_query
from blockquery.predicate import ByIdentity, HasAirAbove, InAltitudeRange, MatchAny, Or
from blockquery.registry import (
    DEFAULT_QUERIES,
    NameRegistry,
    PredefinedQueryStore,
    QueryStoreFrozenError,
    install_default_queries,
)
from blockquery.world import WATER, BlockId, BlockPos, MaterialTag, TypeTag
from tests._shared_cases import BOP_LEAVES_TYPE, LEAVES_TYPE, STONE_TYPE, build_registry


def test_identifiers_resolve_with_default_namespace() -> None:
    registry = NameRegistry()
    registry.register_block("stone")
    registry.register_block(BlockId("biomesoplenty", "leaves_3"))

    assert registry.resolve_identifier("stone") == BlockId("minecraft", "stone")
    assert registry.resolve_identifier("minecraft:stone") == BlockId("minecraft", "stone")
    assert registry.resolve_identifier("biomesoplenty:leaves_3") == BlockId("biomesoplenty", "leaves_3")
    assert registry.resolve_identifier("leaves_3") is None
    assert registry.resolve_identifier("a:b:c") is None
    assert registry.resolve_identifier(":stone") is None


def test_custom_default_namespace() -> None:
    registry = NameRegistry(default_namespace="biomesoplenty")
    registry.register_block("leaves_3")

    assert registry.resolve_identifier("leaves_3") == BlockId("biomesoplenty", "leaves_3")
    assert registry.blocks == frozenset({BlockId("biomesoplenty", "leaves_3")})


def test_registration_is_last_write_wins() -> None:
    registry = NameRegistry()
    first = TypeTag("Leaves")
    second = TypeTag("Leaves", TypeTag("Block"))

    registry.register_type_tag(first)
    registry.register_type_tag(second)
    registry.register_material(MaterialTag("liquid"), name="water")
    registry.register_material(WATER)

    assert registry.resolve_type_tag("Leaves") is second
    assert registry.resolve_material_tag("water") == WATER
    assert registry.resolve_material_tag("lava") is None
    assert set(registry.type_tags) == {"Leaves"}


def test_type_tag_lineage() -> None:
    assert BOP_LEAVES_TYPE.derives_from(LEAVES_TYPE)
    assert BOP_LEAVES_TYPE.derives_from(BOP_LEAVES_TYPE)
    assert not LEAVES_TYPE.derives_from(BOP_LEAVES_TYPE)
    assert not STONE_TYPE.derives_from(LEAVES_TYPE)
    assert [tag.name for tag in BOP_LEAVES_TYPE.lineage()] == ["BlockBOPLeaves", "BlockLeaves", "Block"]


def test_block_id_parse() -> None:
    assert BlockId.parse(" stone ") == BlockId("minecraft", "stone")
    assert str(BlockId.parse("biomesoplenty:leaves_3")) == "biomesoplenty:leaves_3"
    with pytest.raises(ValueError):
        BlockId.parse("minecraft:")


def test_block_pos_neighbours() -> None:
    pos = BlockPos(1, 64, -3)

    assert pos.up() == BlockPos(1, 65, -3)
    assert pos.down(2) == BlockPos(1, 62, -3)
    assert pos.horizontal_neighbours() == (
        BlockPos(0, 64, -3),
        BlockPos(2, 64, -3),
        BlockPos(1, 64, -4),
        BlockPos(1, 64, -2),
    )


def test_store_register_and_lookup() -> None:
    store = PredefinedQueryStore()
    altitude = InAltitudeRange(0, 10)

    assert store.register("low", altitude) is altitude
    assert store.lookup("low") is altitude
    assert store.lookup("high") is None
    assert "low" in store
    assert len(store) == 1
    assert list(store) == ["low"]


def test_store_override_keeps_earlier_compilations(caplog: pytest.LogCaptureFixture) -> None:
    registry = build_registry()
    store = PredefinedQueryStore()
    store.register("target", MatchAny())
    before = compile_query("@target", resolver=registry, store=store)

    with caplog.at_level(logging.DEBUG, logger="blockquery.registry.store"):
        store.register("target", HasAirAbove())
    after = compile_query("@target", resolver=registry, store=store)

    assert before == MatchAny()
    assert after == HasAirAbove()
    assert "Overriding predefined query 'target'" in caplog.text


def test_register_query_compiles_against_store() -> None:
    registry = build_registry()
    store = install_default_queries(PredefinedQueryStore())

    soil = store.register_query("soil", "dirt,stone", resolver=registry)
    sapling = store.register_query("sapling", "@soil @airAbove", resolver=registry)

    assert soil == Or((ByIdentity(BlockId("minecraft", "dirt")), ByIdentity(BlockId("minecraft", "stone"))))
    assert sapling.children[0] is soil
    assert store.names() == ("airAbove", "anything", "hasWater", "nothing", "sapling", "soil")


def test_frozen_store_rejects_registration() -> None:
    store = install_default_queries(PredefinedQueryStore())
    store.freeze()

    assert store.is_frozen
    assert store.lookup("airAbove") == HasAirAbove()
    with pytest.raises(QueryStoreFrozenError):
        store.register("late", MatchAny())


def test_default_queries() -> None:
    assert set(DEFAULT_QUERIES) == {"anything", "nothing", "airAbove", "hasWater"}
