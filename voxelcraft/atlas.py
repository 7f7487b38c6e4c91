"""Texture coordinates of tiles in a square texture atlas."""

from __future__ import annotations

from typing import Sequence, Tuple


class TextureAtlas:
    """A square image divided into equal square tiles."""

    def __init__(self, image_size: int = 256, texture_size: int = 16):
        if image_size <= 0 or texture_size <= 0:
            raise ValueError("atlas and tile sizes must be positive")
        self.image_size = image_size
        self.texture_size = texture_size

    def get_texture(self, coords: Sequence[int]) -> Tuple[float, ...]:
        """UV corners of a tile, inset by half a pixel on each side.

        Returns (x_max, y_max, x_min, y_max, x_min, y_min, x_max, y_min).
        """
        tex_per_row = self.image_size / self.texture_size
        tile = 1.0 / tex_per_row
        pixel = 1.0 / self.image_size
        cx, cy = coords

        x_min = cx * tile + 0.5 * pixel
        y_min = cy * tile + 0.5 * pixel
        x_max = x_min + tile - pixel
        y_max = y_min + tile - pixel

        return (x_max, y_max, x_min, y_max, x_min, y_min, x_max, y_min)