"""Builds the visible faces of a chunk section into its meshes."""

from __future__ import annotations

from itertools import product
from typing import Any, Sequence, Tuple

from .blocks import BlockData, BlockId, BlockMeshType, BlockShaderType
from .config import CHUNK_SIZE
from .mesh import ChunkMesh, ChunkMeshCollection

FRONT_FACE = (0, 0, 1, 1, 0, 1, 1, 1, 1, 0, 1, 1)
BACK_FACE = (1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 1, 0)
LEFT_FACE = (0, 0, 0, 0, 0, 1, 0, 1, 1, 0, 1, 0)
RIGHT_FACE = (1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 1, 1)
TOP_FACE = (0, 1, 1, 1, 1, 1, 1, 1, 0, 0, 1, 0)
BOTTOM_FACE = (0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0, 1)
X_FACE_1 = (0, 0, 0, 1, 0, 1, 1, 1, 1, 0, 1, 0)
X_FACE_2 = (0, 0, 1, 1, 0, 0, 1, 1, 0, 0, 1, 1)

LIGHT_TOP = 1.0
LIGHT_X = 0.8
LIGHT_Z = 0.6
LIGHT_BOT = 0.4

Position = Tuple[int, int, int]


class ChunkMeshBuilder:
    """Adds the faces of a section's blocks to a mesh collection.

    The section supplies ``blocks``, ``location``, ``database``, ``atlas``,
    ``get_block``, ``get_layer`` and ``get_adjacent``.
    """

    def __init__(self, section: Any, meshes: ChunkMeshCollection):
        self._section = section
        self._meshes = meshes

    def build_mesh(self) -> None:
        # The block stream only advances on layers that are built, so a
        # skipped layer shifts the blocks read for the layers above it.
        blocks = iter(self._section.blocks)
        for y in range(CHUNK_SIZE):
            if not self._should_make_layer(y):
                continue
            for z, x in product(range(CHUNK_SIZE), repeat=2):
                self._add_block(BlockId(next(blocks)), (x, y, z))

    def _active_mesh(self, data: BlockData) -> ChunkMesh:
        if data.shader_type == BlockShaderType.Liquid:
            return self._meshes.water_mesh
        if data.shader_type == BlockShaderType.Flora:
            return self._meshes.flora_mesh
        return self._meshes.solid_mesh

    def _add_block(self, block: BlockId, position: Position) -> None:
        data = self._section.database.get_data(block)
        mesh = self._active_mesh(data)
        if block == BlockId.Air:
            return

        if data.mesh_type == BlockMeshType.X:
            self._add_x_block(mesh, data.tex_top_coord, position)
            return

        x, y, z = position
        if self._section.location[1] != 0 or y != 0:
            self._try_add_face(mesh, data, BOTTOM_FACE, data.tex_bottom_coord, position, (x, y - 1, z), LIGHT_BOT)
        self._try_add_face(mesh, data, TOP_FACE, data.tex_top_coord, position, (x, y + 1, z), LIGHT_TOP)

        self._try_add_face(mesh, data, LEFT_FACE, data.tex_side_coord, position, (x - 1, y, z), LIGHT_X)
        self._try_add_face(mesh, data, RIGHT_FACE, data.tex_side_coord, position, (x + 1, y, z), LIGHT_X)

        self._try_add_face(mesh, data, FRONT_FACE, data.tex_side_coord, position, (x, y, z + 1), LIGHT_Z)
        self._try_add_face(mesh, data, BACK_FACE, data.tex_side_coord, position, (x, y, z - 1), LIGHT_Z)

    def _add_x_block(self, mesh: ChunkMesh, texture: Sequence[int], position: Position) -> None:
        coords = self._section.atlas.get_texture(texture)
        location = self._section.location
        mesh.add_face(X_FACE_1, coords, location, position, LIGHT_X)
        mesh.add_face(X_FACE_2, coords, location, position, LIGHT_X)

    def _try_add_face(
        self,
        mesh: ChunkMesh,
        data: BlockData,
        face: Sequence[float],
        texture: Sequence[int],
        position: Position,
        facing: Position,
        light: float,
    ) -> None:
        if self._should_make_face(facing, data):
            coords = self._section.atlas.get_texture(texture)
            mesh.add_face(face, coords, self._section.location, position, light)

    def _should_make_face(self, adjacent: Position, data: BlockData) -> bool:
        block = BlockId(self._section.get_block(*adjacent))
        if block == BlockId.Air:
            return True
        adjacent_data = self._section.database.get_data(block)
        return not adjacent_data.is_opaque and adjacent_data.id != data.id

    def _should_make_layer(self, y: int) -> bool:
        section = self._section

        def adjacent_is_solid(dx: int, dz: int) -> bool:
            return section.get_adjacent(dx, dz).get_layer(y).is_all_solid()

        return (
            not section.get_layer(y).is_all_solid()
            or not section.get_layer(y + 1).is_all_solid()
            or not section.get_layer(y - 1).is_all_solid()
            or not adjacent_is_solid(1, 0)
            or not adjacent_is_solid(0, 1)
            or not adjacent_is_solid(-1, 0)
            or not adjacent_is_solid(0, -1)
        )