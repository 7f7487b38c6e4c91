"""Biomes: terrain shape, surface blocks, plants and trees of a region."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .blocks import BlockId
from .config import WATER_LEVEL
from .noise import NoiseGenerator, NoiseParameters
from .rng import Random
from .structures import make_cactus, make_oak_tree, make_palm_tree


class Biome(ABC):
    """A kind of landscape with its own height noise and vegetation."""

    def __init__(
        self,
        parameters: NoiseParameters,
        tree_frequency: int,
        plant_frequency: int,
        seed: int,
    ):
        self._height_generator = NoiseGenerator(seed)
        self._height_generator.set_parameters(parameters)
        self.tree_frequency = tree_frequency
        self.plant_frequency = plant_frequency

    @abstractmethod
    def get_plant(self, rand: Random) -> BlockId:
        """The plant block to grow on the surface."""

    @abstractmethod
    def get_top_block(self, rand: Random) -> BlockId:
        """The surface block above the beach line."""

    @abstractmethod
    def get_underwater_block(self, rand: Random) -> BlockId:
        """The surface block below the water level."""

    def get_beach_block(self, rand: Random) -> BlockId:
        """The surface block just above the water level."""
        return BlockId.Sand

    @abstractmethod
    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        """Grow a tree (or similar) with its base at (x, y, z)."""

    def get_height(self, x: int, z: int, chunk_x: int, chunk_z: int) -> int:
        return int(self._height_generator.get_height(x, z, chunk_x, chunk_z))


class DesertBiome(Biome):
    def __init__(self, seed: int):
        super().__init__(
            NoiseParameters(octaves=9, amplitude=80, smoothness=335, height_offset=-7, roughness=0.56),
            1350,
            500,
            seed,
        )

    def get_plant(self, rand: Random) -> BlockId:
        return BlockId.DeadShrub

    def get_top_block(self, rand: Random) -> BlockId:
        return BlockId.Sand

    def get_underwater_block(self, rand: Random) -> BlockId:
        return BlockId.Sand

    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        if y < WATER_LEVEL + 15 and rand.int_in_range(0, 100) > 75:
            make_palm_tree(chunk, rand, x, y, z)
        else:
            make_cactus(chunk, rand, x, y, z)


class GrasslandBiome(Biome):
    def __init__(self, seed: int):
        super().__init__(
            NoiseParameters(octaves=9, amplitude=85, smoothness=235, height_offset=-20, roughness=0.51),
            1000,
            20,
            seed,
        )

    def get_plant(self, rand: Random) -> BlockId:
        return BlockId.Rose if rand.int_in_range(0, 10) > 6 else BlockId.TallGrass

    def get_top_block(self, rand: Random) -> BlockId:
        return BlockId.Grass

    def get_underwater_block(self, rand: Random) -> BlockId:
        return BlockId.Dirt if rand.int_in_range(0, 10) > 8 else BlockId.Sand

    def get_beach_block(self, rand: Random) -> BlockId:
        return BlockId.Grass if rand.int_in_range(0, 10) > 2 else BlockId.Dirt

    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        make_oak_tree(chunk, rand, x, y, z)


class LightForestBiome(Biome):
    def __init__(self, seed: int):
        super().__init__(
            NoiseParameters(octaves=5, amplitude=100, smoothness=195, height_offset=-32, roughness=0.52),
            60,
            80,
            seed,
        )

    def get_plant(self, rand: Random) -> BlockId:
        return BlockId.Rose if rand.int_in_range(0, 10) > 8 else BlockId.TallGrass

    def get_top_block(self, rand: Random) -> BlockId:
        return BlockId.Grass

    def get_underwater_block(self, rand: Random) -> BlockId:
        return BlockId.Sand if rand.int_in_range(0, 10) > 9 else BlockId.Dirt

    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        make_oak_tree(chunk, rand, x, y, z)


class OceanBiome(Biome):
    def __init__(self, seed: int):
        super().__init__(
            NoiseParameters(octaves=7, amplitude=43, smoothness=55, height_offset=0, roughness=0.50),
            50,
            100,
            seed,
        )

    def get_plant(self, rand: Random) -> BlockId:
        return BlockId.Rose if rand.int_in_range(0, 10) > 6 else BlockId.TallGrass

    def get_top_block(self, rand: Random) -> BlockId:
        return BlockId.Grass

    def get_underwater_block(self, rand: Random) -> BlockId:
        return BlockId.Sand

    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        if rand.int_in_range(0, 5) < 3:
            make_palm_tree(chunk, rand, x, y, z)
        else:
            make_oak_tree(chunk, rand, x, y, z)


class TemperateForestBiome(Biome):
    def __init__(self, seed: int):
        super().__init__(
            NoiseParameters(octaves=5, amplitude=100, smoothness=195, height_offset=-30, roughness=0.52),
            55,
            75,
            seed,
        )

    def get_plant(self, rand: Random) -> BlockId:
        return BlockId.TallGrass

    def get_top_block(self, rand: Random) -> BlockId:
        return BlockId.Grass if rand.int_in_range(0, 10) < 8 else BlockId.Dirt

    def get_underwater_block(self, rand: Random) -> BlockId:
        return BlockId.Dirt if rand.int_in_range(0, 10) > 8 else BlockId.Sand

    def make_tree(self, rand: Random, chunk: Any, x: int, y: int, z: int) -> None:
        make_oak_tree(chunk, rand, x, y, z)