"""Block structures: a placement recorder and tree and cactus shapes."""

from __future__ import annotations

from typing import Any, List, NamedTuple

from .blocks import BlockId
from .rng import Random


class _Placement(NamedTuple):
    block: BlockId
    x: int
    y: int
    z: int


class StructureBuilder:
    """Records block placements and writes them to a chunk in order."""

    def __init__(self) -> None:
        self.blocks: List[_Placement] = []

    def build(self, chunk: Any) -> None:
        for placement in self.blocks:
            chunk.set_block(placement.x, placement.y, placement.z, placement.block)

    def make_column(self, x: int, z: int, y_start: int, height: int, block: BlockId) -> None:
        for y in range(y_start, y_start + height):
            self.add_block(x, y, z, block)

    def make_row_x(self, x_start: int, x_end: int, y: int, z: int, block: BlockId) -> None:
        """Blocks from ``x_start`` to ``x_end`` inclusive."""
        for x in range(x_start, x_end + 1):
            self.add_block(x, y, z, block)

    def make_row_z(self, z_start: int, z_end: int, x: int, y: int, block: BlockId) -> None:
        """Blocks from ``z_start`` to ``z_end`` inclusive."""
        for z in range(z_start, z_end + 1):
            self.add_block(x, y, z, block)

    def fill(self, y: int, x_start: int, x_end: int, z_start: int, z_end: int, block: BlockId) -> None:
        """A flat rectangle at height ``y``; the end bounds are exclusive."""
        for x in range(x_start, x_end):
            for z in range(z_start, z_end):
                self.add_block(x, y, z, block)

    def add_block(self, x: int, y: int, z: int, block: BlockId) -> None:
        self.blocks.append(_Placement(BlockId(block), x, y, z))


def make_oak_tree(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    builder = StructureBuilder()
    height = rand.int_in_range(4, 7)
    leaf_size = 2

    top = height + y
    for layer in (top, top - 1):
        builder.fill(layer, x - leaf_size, x + leaf_size, z - leaf_size, z + leaf_size, BlockId.OakLeaf)
    for offset in range(-leaf_size + 1, leaf_size):
        builder.add_block(x, top + 1, z + offset, BlockId.OakLeaf)
    for offset in range(-leaf_size + 1, leaf_size):
        builder.add_block(x + offset, top + 1, z, BlockId.OakLeaf)

    builder.make_column(x, z, y, height, BlockId.OakBark)
    builder.build(chunk)


def make_palm_tree(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    builder = StructureBuilder()
    height = rand.int_in_range(7, 9)
    diameter = rand.int_in_range(4, 6)

    for offset in range(-diameter, diameter):
        builder.add_block(x + offset, y + height, z, BlockId.OakLeaf)
    for offset in range(-diameter, diameter):
        builder.add_block(x, y + height, z + offset, BlockId.OakLeaf)

    builder.add_block(x, y + height - 1, z + diameter, BlockId.OakLeaf)
    builder.add_block(x, y + height - 1, z - diameter, BlockId.OakLeaf)
    builder.add_block(x + diameter, y + height - 1, z, BlockId.OakLeaf)
    builder.add_block(x - diameter, y + height - 1, z, BlockId.OakLeaf)
    builder.add_block(x, y + height + 1, z, BlockId.OakLeaf)

    builder.make_column(x, z, y, height, BlockId.OakBark)
    builder.build(chunk)


def _make_plain_cactus(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    builder = StructureBuilder()
    builder.make_column(x, z, y, rand.int_in_range(4, 7), BlockId.Cactus)
    builder.build(chunk)


def _make_cactus_arms_x(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    builder = StructureBuilder()
    height = rand.int_in_range(6, 8)
    builder.make_column(x, z, y, height, BlockId.Cactus)
    stem = height // 2
    builder.make_row_x(x - 2, x + 2, stem + y, z, BlockId.Cactus)
    builder.add_block(x - 2, stem + y + 1, z, BlockId.Cactus)
    builder.add_block(x - 2, stem + y + 2, z, BlockId.Cactus)
    builder.add_block(x + 2, stem + y + 1, z, BlockId.Cactus)
    builder.build(chunk)


def _make_cactus_arms_z(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    builder = StructureBuilder()
    height = rand.int_in_range(6, 8)
    builder.make_column(x, z, y, height, BlockId.Cactus)
    stem = height // 2
    builder.make_row_z(z - 2, z + 2, x, stem + y, BlockId.Cactus)
    builder.add_block(x, stem + y + 1, z - 2, BlockId.Cactus)
    builder.add_block(x, stem + y + 2, z - 2, BlockId.Cactus)
    builder.add_block(x, stem + y + 1, z + 2, BlockId.Cactus)
    builder.build(chunk)


_CACTUS_SHAPES = (_make_plain_cactus, _make_cactus_arms_x, _make_cactus_arms_z)


def make_cactus(chunk: Any, rand: Random, x: int, y: int, z: int) -> None:
    """One of three cactus shapes, chosen at random."""
    shape = _CACTUS_SHAPES[rand.int_in_range(0, 2)]
    shape(chunk, rand, x, y, z)