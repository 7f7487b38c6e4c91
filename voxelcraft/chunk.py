"""A column of chunk sections stacked vertically at one (x, z) position."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

from .atlas import TextureAtlas
from .blocks import BlockDatabase, BlockId
from .config import CHUNK_SIZE
from .grid import Grid2D
from .section import ChunkSection

_ERROR_SECTION_LOCATION = (444, 444, 444)


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


class Chunk:
    """Sections of one chunk column plus the height of its highest blocks.

    ``world`` is handed to every section; see ``ChunkSection`` for what it
    must provide.
    """

    def __init__(
        self,
        world: Any,
        location: Sequence[int],
        database: BlockDatabase,
        atlas: Optional[TextureAtlas] = None,
    ):
        self.location: Tuple[int, int] = (int(location[0]), int(location[1]))
        self.world = world
        self.database = database
        self.atlas = atlas if atlas is not None else TextureAtlas()
        self.sections: List[ChunkSection] = []
        self.highest_blocks: Grid2D[int] = Grid2D(CHUNK_SIZE, 0)
        self.is_loaded = False
        self._error_section: Optional[ChunkSection] = None

    def make_mesh(self, frustum: Any) -> bool:
        """Mesh the first unmeshed section inside the frustum; report if one was."""
        for section in self.sections:
            if not section.has_mesh and frustum.is_box_in_frustum(section.aabb):
                section.make_mesh()
                return True
        return False

    def set_block(self, x: int, y: int, z: int, block: Union[BlockId, int]) -> None:
        """Place a block, growing the column upward as needed.

        Positions outside the column are ignored. The recorded height only
        ever rises.
        """
        self._add_sections_up_to(_trunc_div(y, CHUNK_SIZE))
        if self._out_of_bound(x, y, z):
            return
        block = BlockId(block)
        self.sections[y // CHUNK_SIZE].set_block(x, y % CHUNK_SIZE, z, block)
        if y > self.highest_blocks.get(x, z):
            self.highest_blocks.set(x, z, y)

    def get_block(self, x: int, y: int, z: int) -> BlockId:
        """The block at a column position; outside the column it is air."""
        if self._out_of_bound(x, y, z):
            return BlockId.Air
        return self.sections[y // CHUNK_SIZE].get_block(x, y % CHUNK_SIZE, z)

    def get_height_at(self, x: int, z: int) -> int:
        return self.highest_blocks.get(x, z)

    def visible_sections(self, frustum: Any) -> List[ChunkSection]:
        """Meshed sections inside the frustum; every meshed section gets buffered."""
        visible = []
        for section in self.sections:
            if not section.has_mesh:
                continue
            if not section.has_buffered:
                section.buffer_mesh()
            if frustum.is_box_in_frustum(section.aabb):
                visible.append(section)
        return visible

    def load(self, generator: Any) -> None:
        """Generate terrain once; later calls do nothing."""
        if self.is_loaded:
            return
        generator.generate_terrain_for(self)
        self.is_loaded = True

    def get_section(self, index: int) -> ChunkSection:
        """Section ``index``, or a detached placeholder section when out of range."""
        if 0 <= index < len(self.sections):
            return self.sections[index]
        if self._error_section is None:
            self._error_section = ChunkSection(
                _ERROR_SECTION_LOCATION, self.world, self.database, self.atlas
            )
        return self._error_section

    def delete_meshes(self) -> None:
        for section in self.sections:
            section.delete_meshes()

    def _add_sections_up_to(self, index: int) -> None:
        while len(self.sections) < index + 1:
            x, z = self.location
            self.sections.append(
                ChunkSection((x, len(self.sections), z), self.world, self.database, self.atlas)
            )

    def _out_of_bound(self, x: int, y: int, z: int) -> bool:
        return (
            not 0 <= x < CHUNK_SIZE
            or not 0 <= z < CHUNK_SIZE
            or y < 0
            or y >= len(self.sections) * CHUNK_SIZE
        )