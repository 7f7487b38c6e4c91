"""A fixed-size square grid of values indexed by (x, z)."""

from __future__ import annotations

from typing import Generic, List, TypeVar

T = TypeVar("T")


class Grid2D(Generic[T]):
    """A ``width`` x ``width`` grid stored row by row along x."""

    def __init__(self, width: int, fill: T = 0):  # type: ignore[assignment]
        if width <= 0:
            raise ValueError(f"grid width must be positive, got {width}")
        self.width = width
        self._cells: List[T] = [fill] * (width * width)

    def _index(self, x: int, z: int) -> int:
        if not (0 <= x < self.width and 0 <= z < self.width):
            raise IndexError(f"({x}, {z}) is outside a grid of width {self.width}")
        return x * self.width + z

    def get(self, x: int, z: int) -> T:
        return self._cells[self._index(x, z)]

    def set(self, x: int, z: int, value: T) -> None:
        self._cells[self._index(x, z)] = value

    def max_value(self) -> T:
        return max(self._cells)  # type: ignore[type-var]

    def set_all(self, value: T) -> None:
        self._cells = [value] * (self.width * self.width)