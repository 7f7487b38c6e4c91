"""Item materials and stacks of items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .blocks import BlockId


class MaterialId(IntEnum):
    Nothing = 0
    Grass = 1
    Dirt = 2
    Stone = 3
    OakBark = 4
    OakLeaf = 5
    Sand = 6
    Cactus = 7
    Rose = 8
    TallGrass = 9
    DeadShrub = 10


_TO_BLOCK = {
    MaterialId.Nothing: BlockId.Air,
    MaterialId.Grass: BlockId.Grass,
    MaterialId.Dirt: BlockId.Dirt,
    MaterialId.Stone: BlockId.Stone,
    MaterialId.OakBark: BlockId.OakBark,
    MaterialId.OakLeaf: BlockId.OakLeaf,
    MaterialId.Sand: BlockId.Sand,
    MaterialId.Cactus: BlockId.Cactus,
    MaterialId.TallGrass: BlockId.TallGrass,
    MaterialId.Rose: BlockId.Rose,
    MaterialId.DeadShrub: BlockId.DeadShrub,
}


@dataclass(frozen=True)
class Material:
    id: MaterialId
    max_stack_size: int
    is_block: bool
    name: str

    def to_block_id(self) -> BlockId:
        return _TO_BLOCK[self.id]


NOTHING = Material(MaterialId.Nothing, 0, False, "None")
GRASS_BLOCK = Material(MaterialId.Grass, 99, True, "Grass Block")
DIRT_BLOCK = Material(MaterialId.Dirt, 99, True, "Dirt Block")
STONE_BLOCK = Material(MaterialId.Stone, 99, True, "Stone Block")
OAK_BARK_BLOCK = Material(MaterialId.OakBark, 99, True, "Oak Bark Block")
OAK_LEAF_BLOCK = Material(MaterialId.OakLeaf, 99, True, "Oak Leaf Block")
SAND_BLOCK = Material(MaterialId.Sand, 99, True, "Sand Block")
CACTUS_BLOCK = Material(MaterialId.Cactus, 99, True, "Cactus Block")
ROSE = Material(MaterialId.Rose, 99, True, "Rose")
TALL_GRASS = Material(MaterialId.TallGrass, 99, True, "Tall Grass")
DEAD_SHRUB = Material(MaterialId.DeadShrub, 99, True, "Dead Shrub")

_FROM_BLOCK = {
    BlockId.Grass: GRASS_BLOCK,
    BlockId.Dirt: DIRT_BLOCK,
    BlockId.Stone: STONE_BLOCK,
    BlockId.OakBark: OAK_BARK_BLOCK,
    BlockId.OakLeaf: OAK_LEAF_BLOCK,
    BlockId.Sand: SAND_BLOCK,
    BlockId.Cactus: CACTUS_BLOCK,
    BlockId.Rose: ROSE,
    BlockId.TallGrass: TALL_GRASS,
    BlockId.DeadShrub: DEAD_SHRUB,
}


def material_from_block(block_id: BlockId) -> Material:
    """The material a block yields; blocks without one give ``NOTHING``."""
    return _FROM_BLOCK.get(block_id, NOTHING)


@dataclass
class ItemStack:
    """A number of items of one material."""

    material: Material = NOTHING
    count: int = 0

    def add(self, amount: int) -> int:
        """Add items, capping at the stack size; return how many did not fit."""
        self.count += amount
        if self.count > self.material.max_stack_size:
            left_over = self.count - self.material.max_stack_size
            self.count = self.material.max_stack_size
            return left_over
        return 0

    def remove(self) -> None:
        """Take one item; an emptied stack holds nothing."""
        self.count -= 1
        if self.count == 0:
            self.material = NOTHING