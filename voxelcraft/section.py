"""A 16x16x16 cube of blocks within a chunk column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from .atlas import TextureAtlas
from .blocks import BlockDatabase, BlockId
from .config import CHUNK_AREA, CHUNK_SIZE, CHUNK_VOLUME
from .geometry import AABB
from .mesh import ChunkMeshCollection
from .mesh_builder import ChunkMeshBuilder


@dataclass
class Layer:
    """Tracks how many blocks of one horizontal layer count as solid."""

    solid_block_count: int = 0

    def update(self, is_opaque: bool) -> None:
        if is_opaque:
            self.solid_block_count -= 1
        else:
            self.solid_block_count += 1

    def is_all_solid(self) -> bool:
        return self.solid_block_count == CHUNK_AREA


def _out_of_bounds(value: int) -> bool:
    return value >= CHUNK_SIZE or value < 0


def _index(x: int, y: int, z: int) -> int:
    return y * CHUNK_AREA + z * CHUNK_SIZE + x


class ChunkSection:
    """Blocks of one section.

    ``world`` must provide ``get_block(x, y, z)``, ``set_block(x, y, z, block)``
    and a ``chunk_manager`` whose ``get_chunk(x, z).get_section(i)`` gives
    neighbouring sections. Positions outside the section go to the world.
    """

    def __init__(
        self,
        location: Sequence[int],
        world: Any,
        database: BlockDatabase,
        atlas: Optional[TextureAtlas] = None,
    ):
        self.location: Tuple[int, int, int] = tuple(int(v) for v in location)  # type: ignore[assignment]
        self.world = world
        self.database = database
        self.atlas = atlas if atlas is not None else TextureAtlas()
        self.blocks: List[BlockId] = [BlockId.Air] * CHUNK_VOLUME
        self.layers: List[Layer] = [Layer() for _ in range(CHUNK_SIZE)]
        self.meshes = ChunkMeshCollection()
        self.aabb = AABB(
            (CHUNK_SIZE, CHUNK_SIZE, CHUNK_SIZE),
            [coord * CHUNK_SIZE for coord in self.location],
        )
        self.has_mesh = False
        self.has_buffered = False

    def set_block(self, x: int, y: int, z: int, block: Union[BlockId, int]) -> None:
        if _out_of_bounds(x) or _out_of_bounds(y) or _out_of_bounds(z):
            self.world.set_block(*self.to_world_position(x, y, z), block)
            return
        block = BlockId(block)
        self.layers[y].update(self.database.get_data(block).is_opaque)
        self.blocks[_index(x, y, z)] = block

    def get_block(self, x: int, y: int, z: int) -> BlockId:
        if _out_of_bounds(x) or _out_of_bounds(y) or _out_of_bounds(z):
            return BlockId(self.world.get_block(*self.to_world_position(x, y, z)))
        return self.blocks[_index(x, y, z)]

    def to_world_position(self, x: int, y: int, z: int) -> Tuple[int, int, int]:
        lx, ly, lz = self.location
        return (lx * CHUNK_SIZE + x, ly * CHUNK_SIZE + y, lz * CHUNK_SIZE + z)

    def make_mesh(self) -> None:
        ChunkMeshBuilder(self, self.meshes).build_mesh()
        self.has_mesh = True
        self.has_buffered = False

    def buffer_mesh(self) -> None:
        self.meshes.solid_mesh.buffer()
        self.meshes.water_mesh.buffer()
        self.meshes.flora_mesh.buffer()
        self.has_buffered = True

    def get_layer(self, y: int) -> Layer:
        """Layer ``y``; -1 and CHUNK_SIZE reach into the sections below and above."""
        x, section_y, z = self.location
        if y == -1:
            chunk = self.world.chunk_manager.get_chunk(x, z)
            return chunk.get_section(section_y - 1).get_layer(CHUNK_SIZE - 1)
        if y == CHUNK_SIZE:
            chunk = self.world.chunk_manager.get_chunk(x, z)
            return chunk.get_section(section_y + 1).get_layer(0)
        if not 0 <= y < CHUNK_SIZE:
            raise IndexError(f"layer {y} is outside the section")
        return self.layers[y]

    def get_adjacent(self, dx: int, dz: int) -> "ChunkSection":
        x, section_y, z = self.location
        return self.world.chunk_manager.get_chunk(x + dx, z + dz).get_section(section_y)

    def delete_meshes(self) -> None:
        if self.has_mesh:
            self.has_buffered = False
            self.has_mesh = False
            self.meshes.solid_mesh.delete_data()
            self.meshes.water_mesh.delete_data()
            self.meshes.flora_mesh.delete_data()