"""Seeded value noise producing terrain heights."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from .config import CHUNK_SIZE, WATER_LEVEL

_MASK32 = 0xFFFFFFFF


@dataclass
class NoiseParameters:
    octaves: int
    amplitude: int
    smoothness: int
    height_offset: int
    roughness: float


class NoiseGenerator:
    """Octave value noise keyed by a seed."""

    def __init__(self, seed: int):
        self.seed = seed
        self.parameters = NoiseParameters(
            octaves=7, amplitude=70, smoothness=235, height_offset=-5, roughness=0.53
        )

    def set_parameters(self, params: NoiseParameters) -> None:
        self.parameters = replace(params)

    def _noise_at(self, n: int) -> float:
        n = (n + self.seed) & _MASK32
        n = ((n << 13) & _MASK32) ^ n
        value = (n * (n * n * 60493 + 19990303) + 1376312589) & 0x7FFFFFFF
        return 1.0 - value / 1073741824.0

    def _noise_2d(self, x: float, z: float) -> float:
        return self._noise_at(math.trunc(x + z * 57.0))

    @staticmethod
    def _lerp(a: float, b: float, t: float) -> float:
        mu2 = (1 - math.cos(t * 3.14)) / 2
        return a * (1 - mu2) + b * mu2

    def _noise(self, x: float, z: float) -> float:
        floor_x = float(math.trunc(x))
        floor_z = float(math.trunc(z))
        s = self._noise_2d(floor_x, floor_z)
        t = self._noise_2d(floor_x + 1, floor_z)
        u = self._noise_2d(floor_x, floor_z + 1)
        v = self._noise_2d(floor_x + 1, floor_z + 1)
        rec1 = self._lerp(s, t, x - floor_x)
        rec2 = self._lerp(u, v, x - floor_x)
        return self._lerp(rec1, rec2, z - floor_z)

    def get_height(self, x: int, z: int, chunk_x: int, chunk_z: int) -> float:
        """Height at a block of a chunk; negative world coordinates sit below water."""
        world_x = x + chunk_x * CHUNK_SIZE
        world_z = z + chunk_z * CHUNK_SIZE
        if world_x < 0 or world_z < 0:
            return float(WATER_LEVEL - 1)

        p = self.parameters
        total = 0.0
        for octave in range(p.octaves - 1):
            frequency = 2.0**octave
            amplitude = p.roughness**octave
            total += (
                self._noise(
                    world_x * frequency / p.smoothness,
                    world_z * frequency / p.smoothness,
                )
                * amplitude
            )

        value = ((total / 2.1) + 1.2) * p.amplitude + p.height_offset
        return value if value > 0 else 1.0