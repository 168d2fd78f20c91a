"""Name registry: explicit lookup tables for block, type-tag and material names."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from types import MappingProxyType
from typing import Protocol

from blockquery.world.model import DEFAULT_NAMESPACE, BlockId, MaterialTag, TypeTag

logger = logging.getLogger(__name__)


class NameResolver(Protocol):
    """Compile-time lookups supplied by the host application."""

    def resolve_identifier(self, text: str) -> BlockId | None: ...

    def resolve_type_tag(self, text: str) -> TypeTag | None: ...

    def resolve_material_tag(self, text: str) -> MaterialTag | None: ...


class NameRegistry:
    """In-memory `NameResolver` populated by the host before compiling queries.

    Registration is last-write-wins for every table. Type tags are keyed by
    their fully qualified name; the compiler tries its configured prefixes in
    order when resolving `%name`/`$name`.
    """

    def __init__(self, *, default_namespace: str = DEFAULT_NAMESPACE) -> None:
        self._default_namespace = default_namespace
        self._blocks: dict[BlockId, BlockId] = {}
        self._type_tags: dict[str, TypeTag] = {}
        self._materials: dict[str, MaterialTag] = {}

    @property
    def default_namespace(self) -> str:
        return self._default_namespace

    @property
    def blocks(self) -> frozenset[BlockId]:
        return frozenset(self._blocks)

    @property
    def type_tags(self) -> Mapping[str, TypeTag]:
        return MappingProxyType(self._type_tags)

    @property
    def materials(self) -> Mapping[str, MaterialTag]:
        return MappingProxyType(self._materials)

    def register_block(self, block: BlockId | str) -> BlockId:
        block_id = block if isinstance(block, BlockId) else BlockId.parse(block, self._default_namespace)
        self._blocks[block_id] = block_id
        return block_id

    def register_blocks(self, blocks: Iterable[BlockId | str]) -> None:
        for block in blocks:
            self.register_block(block)

    def register_type_tag(self, tag: TypeTag, qualified_name: str | None = None) -> TypeTag:
        name = qualified_name if qualified_name is not None else tag.name
        previous = self._type_tags.get(name)
        if previous is not None and previous != tag:
            logger.debug("Type tag %r redefined: %r -> %r", name, previous, tag)
        self._type_tags[name] = tag
        return tag

    def register_material(self, material: MaterialTag, name: str | None = None) -> MaterialTag:
        self._materials[name if name is not None else material.name] = material
        return material

    def resolve_identifier(self, text: str) -> BlockId | None:
        try:
            block_id = BlockId.parse(text, self._default_namespace)
        except ValueError:
            return None
        return self._blocks.get(block_id)

    def resolve_type_tag(self, text: str) -> TypeTag | None:
        return self._type_tags.get(text)

    def resolve_material_tag(self, text: str) -> MaterialTag | None:
        return self._materials.get(text)
