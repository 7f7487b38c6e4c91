"""Terrain generators that fill a chunk column with blocks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from itertools import product
from typing import Any, List, Optional, Tuple

from .biomes import (
    Biome,
    DesertBiome,
    GrasslandBiome,
    LightForestBiome,
    OceanBiome,
    TemperateForestBiome,
)
from .blocks import BlockId
from .config import CHUNK_SIZE, WATER_LEVEL
from .grid import Grid2D
from .interpolation import smooth_interpolation
from .noise import NoiseGenerator, NoiseParameters
from .rng import MinStdRand, Random, shared_random

_log = logging.getLogger(__name__)

_SEED_LOW = 424
_SEED_HIGH = 325322
_BIOME_OFFSET = 10
_HALF_CHUNK = CHUNK_SIZE // 2


class TerrainGenerator(ABC):
    """Fills chunks with terrain."""

    @abstractmethod
    def generate_terrain_for(self, chunk: Any) -> None:
        """Place the terrain blocks of a chunk column."""

    @abstractmethod
    def minimum_spawn_height(self) -> int:
        """The lowest surface height a player may spawn on."""


class ClassicOverWorldGenerator(TerrainGenerator):
    """Noise terrain blended between biomes, with plants and trees."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = shared_random().int_in_range(_SEED_LOW, _SEED_HIGH)
        self.seed = seed
        _log.info("Seed: %d", seed)

        self._biome_noise = NoiseGenerator(seed * 2)
        self._biome_noise.set_parameters(
            NoiseParameters(octaves=5, amplitude=120, smoothness=1035, height_offset=0, roughness=0.75)
        )

        self.grass_biome = GrasslandBiome(seed)
        self.temperate_forest = TemperateForestBiome(seed)
        self.desert_biome = DesertBiome(seed)
        self.ocean_biome = OceanBiome(seed)
        self.light_forest = LightForestBiome(seed)

        self.height_map: Grid2D[int] = Grid2D(CHUNK_SIZE, 0)
        self.biome_map: Grid2D[int] = Grid2D(CHUNK_SIZE + 1, 0)
        self._random = Random(seed=0, engine=MinStdRand)

    def minimum_spawn_height(self) -> int:
        return WATER_LEVEL

    def generate_terrain_for(self, chunk: Any) -> None:
        chunk_x, chunk_z = chunk.location
        self._random.set_seed((chunk_x ^ chunk_z) << 2)

        self._fill_biome_map(chunk_x, chunk_z)
        self._fill_height_map(chunk_x, chunk_z)

        max_height = max(self.height_map.max_value(), WATER_LEVEL)
        self._set_blocks(chunk, max_height)

    def get_biome(self, x: int, z: int) -> Biome:
        """The biome of a column, from the biome map of the last chunk generated."""
        value = self.biome_map.get(x, z)
        if value > 160:
            return self.ocean_biome
        if value > 150:
            return self.grass_biome
        if value > 130:
            return self.light_forest
        if value > 120:
            return self.temperate_forest
        if value > 110:
            return self.light_forest
        if value > 100:
            return self.grass_biome
        return self.desert_biome

    def _fill_biome_map(self, chunk_x: int, chunk_z: int) -> None:
        for x, z in product(range(CHUNK_SIZE + 1), repeat=2):
            height = self._biome_noise.get_height(
                x, z, chunk_x + _BIOME_OFFSET, chunk_z + _BIOME_OFFSET
            )
            self.biome_map.set(x, z, int(height))

    def _fill_height_map(self, chunk_x: int, chunk_z: int) -> None:
        for x_min, z_min in product((0, _HALF_CHUNK), repeat=2):
            self._fill_height_in(
                chunk_x, chunk_z, x_min, z_min, x_min + _HALF_CHUNK, z_min + _HALF_CHUNK
            )

    def _fill_height_in(
        self, chunk_x: int, chunk_z: int, x_min: int, z_min: int, x_max: int, z_max: int
    ) -> None:
        def height_at(x: int, z: int) -> float:
            return float(self.get_biome(x, z).get_height(x, z, chunk_x, chunk_z))

        bottom_left = height_at(x_min, z_min)
        bottom_right = height_at(x_max, z_min)
        top_left = height_at(x_min, z_max)
        top_right = height_at(x_max, z_max)

        for x, z in product(range(x_min, x_max), range(z_min, z_max)):
            if x == CHUNK_SIZE or z == CHUNK_SIZE:
                continue
            height = smooth_interpolation(
                bottom_left, top_left, bottom_right, top_right,
                float(x_min), float(x_max), float(z_min), float(z_max),
                float(x), float(z),
            )
            self.height_map.set(x, z, int(height))

    def _set_blocks(self, chunk: Any, max_height: int) -> None:
        rand = self._random
        trees: List[Tuple[int, int, int]] = []
        plants: List[Tuple[int, int, int]] = []

        for y in range(max_height + 1):
            for x, z in product(range(CHUNK_SIZE), repeat=2):
                height = self.height_map.get(x, z)
                biome = self.get_biome(x, z)

                if y > height:
                    if y <= WATER_LEVEL:
                        chunk.set_block(x, y, z, BlockId.Water)
                elif y == height:
                    if y >= WATER_LEVEL:
                        if y < WATER_LEVEL + 4:
                            chunk.set_block(x, y, z, biome.get_beach_block(rand))
                            continue
                        if rand.int_in_range(0, biome.tree_frequency) == 5:
                            trees.append((x, y + 1, z))
                        if rand.int_in_range(0, biome.plant_frequency) == 5:
                            plants.append((x, y + 1, z))
                        chunk.set_block(x, y, z, biome.get_top_block(rand))
                    else:
                        chunk.set_block(x, y, z, biome.get_underwater_block(rand))
                elif y > height - 3:
                    chunk.set_block(x, y, z, BlockId.Dirt)
                else:
                    chunk.set_block(x, y, z, BlockId.Stone)

        for x, y, z in plants:
            chunk.set_block(x, y, z, self.get_biome(x, z).get_plant(rand))

        for x, y, z in trees:
            self.get_biome(x, z).make_tree(rand, chunk, x, y, z)


class SuperFlatGenerator(TerrainGenerator):
    """Flat land: stone, three layers of dirt and grass on top."""

    _LAYERS = (BlockId.Stone, BlockId.Dirt, BlockId.Dirt, BlockId.Dirt, BlockId.Grass)

    def generate_terrain_for(self, chunk: Any) -> None:
        for x, z in product(range(CHUNK_SIZE), repeat=2):
            for y, block in enumerate(self._LAYERS):
                chunk.set_block(x, y, z, block)

    def minimum_spawn_height(self) -> int:
        return 1