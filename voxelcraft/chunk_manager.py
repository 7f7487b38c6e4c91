"""Keeps the chunk columns of a world, creating and loading them on demand."""

from __future__ import annotations

from itertools import product
from typing import Any, Dict, Optional

from .atlas import TextureAtlas
from .blocks import BlockDatabase
from .chunk import Chunk
from .geometry import VectorXZ
from .terrain import ClassicOverWorldGenerator, TerrainGenerator


class ChunkManager:
    """Chunk columns keyed by their (x, z) chunk position."""

    def __init__(
        self,
        world: Any,
        database: BlockDatabase,
        generator: Optional[TerrainGenerator] = None,
        atlas: Optional[TextureAtlas] = None,
    ):
        self.world = world
        self.database = database
        self.atlas = atlas if atlas is not None else TextureAtlas()
        self.terrain_generator: TerrainGenerator = (
            generator if generator is not None else ClassicOverWorldGenerator()
        )
        self.chunks: Dict[VectorXZ, Chunk] = {}

    def get_chunk(self, x: int, z: int) -> Chunk:
        """The chunk at (x, z); an empty, unloaded one is created if missing."""
        key = VectorXZ(x, z)
        chunk = self.chunks.get(key)
        if chunk is None:
            chunk = Chunk(self.world, (x, z), self.database, self.atlas)
            self.chunks[key] = chunk
        return chunk

    def make_mesh(self, x: int, z: int, frustum: Any) -> bool:
        """Load the chunk and its eight neighbours, then mesh one of its sections."""
        for dx, dz in product((-1, 0, 1), repeat=2):
            self.load_chunk(x + dx, z + dz)
        return self.get_chunk(x, z).make_mesh(frustum)

    def chunk_loaded_at(self, x: int, z: int) -> bool:
        chunk = self.chunks.get(VectorXZ(x, z))
        return chunk is not None and chunk.is_loaded

    def chunk_exists_at(self, x: int, z: int) -> bool:
        return VectorXZ(x, z) in self.chunks

    def load_chunk(self, x: int, z: int) -> None:
        self.get_chunk(x, z).load(self.terrain_generator)

    def unload_chunk(self, x: int, z: int) -> None:
        self.chunks.pop(VectorXZ(x, z), None)

    def delete_meshes(self) -> None:
        for chunk in self.chunks.values():
            chunk.delete_meshes()