"""Vertex data for chunk meshes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import CHUNK_SIZE


@dataclass
class Mesh:
    """Vertex positions (xyz), texture coordinates (uv) and triangle indices."""

    vertex_positions: List[float] = field(default_factory=list)
    texture_coords: List[float] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)


class ChunkMesh:
    """Collects block faces and hands them over as a buffered mesh."""

    def __init__(self) -> None:
        self.faces = 0
        self.mesh = Mesh()
        self.light: List[float] = []
        self.buffered: Optional[Mesh] = None
        self.buffered_light: List[float] = []
        self._next_index = 0

    def add_face(
        self,
        block_face: Sequence[float],
        texture_coords: Sequence[float],
        chunk_position: Sequence[int],
        block_position: Sequence[int],
        cardinal_light: float,
    ) -> None:
        """Append a four-corner face placed at a block of a chunk section."""
        self.faces += 1
        self.mesh.texture_coords.extend(texture_coords)

        offsets = [
            chunk * CHUNK_SIZE + block for chunk, block in zip(chunk_position, block_position)
        ]
        corners = zip(block_face[0::3], block_face[1::3], block_face[2::3])
        for corner in corners:
            self.mesh.vertex_positions.extend(
                value + offset for value, offset in zip(corner, offsets)
            )
            self.light.append(cardinal_light)

        base = self._next_index
        self.mesh.indices.extend((base, base + 1, base + 2, base + 2, base + 3, base))
        self._next_index += 4

    def buffer(self) -> None:
        """Move the collected data into the buffered mesh and start afresh."""
        self.buffered = self.mesh
        self.buffered_light = self.light
        self.mesh = Mesh()
        self.light = []
        self._next_index = 0

    def delete_data(self) -> None:
        """Drop the buffered mesh."""
        self.buffered = None
        self.buffered_light = []

    @property
    def indices_count(self) -> int:
        return len(self.buffered.indices) if self.buffered is not None else 0


@dataclass
class ChunkMeshCollection:
    """The solid, water and flora meshes of one chunk section."""

    solid_mesh: ChunkMesh = field(default_factory=ChunkMesh)
    water_mesh: ChunkMesh = field(default_factory=ChunkMesh)
    flora_mesh: ChunkMesh = field(default_factory=ChunkMesh)