"""Voxel world core: blocks, chunks, terrain generation, meshing and player physics."""

__version__ = "0.1.0"