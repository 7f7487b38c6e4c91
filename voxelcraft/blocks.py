"""Block identifiers, block properties and the block file reader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple, Union


class BlockId(IntEnum):
    Air = 0
    Grass = 1
    Dirt = 2
    Stone = 3
    OakBark = 4
    OakLeaf = 5
    Sand = 6
    Water = 7
    Cactus = 8
    Rose = 9
    TallGrass = 10
    DeadShrub = 11


BLOCK_TYPE_COUNT = len(BlockId)


class BlockMeshType(IntEnum):
    Cube = 0
    X = 1


class BlockShaderType(IntEnum):
    Chunk = 0
    Liquid = 1
    Flora = 2


@dataclass
class BlockData:
    """Properties of one kind of block."""

    id: BlockId = BlockId.Air
    tex_top_coord: Tuple[int, int] = (0, 0)
    tex_side_coord: Tuple[int, int] = (0, 0)
    tex_bottom_coord: Tuple[int, int] = (0, 0)
    mesh_type: BlockMeshType = BlockMeshType.Cube
    shader_type: BlockShaderType = BlockShaderType.Chunk
    is_opaque: bool = False
    is_collidable: bool = False


_INTEGER = re.compile(r"\s*([+-]?\d+)")


class _Malformed(Exception):
    pass


class _Reader:
    """Reads whole lines, or whitespace-separated integers across lines."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    def readline(self) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end == -1:
            line = self._text[self._pos :]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos : end]
            self._pos = end + 1
        return line.rstrip("\r")

    def read_int(self) -> int:
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            raise _Malformed
        self._pos = match.end()
        return int(match.group(1))

    def read_pair(self) -> Tuple[int, int]:
        x = self.read_int()
        y = self.read_int()
        return (x, y)

    def read_bool(self) -> bool:
        value = self.read_int()
        if value not in (0, 1):
            raise _Malformed
        return bool(value)


def parse_block_data(text: str) -> BlockData:
    """Parse a block file: keyword lines, each followed by its values.

    Reading stops at the first malformed value; what was read is kept.
    """
    data = BlockData()
    reader = _Reader(text)
    try:
        for line in iter(reader.readline, None):
            if line == "TexTop":
                data.tex_top_coord = reader.read_pair()
            elif line == "TexSide":
                data.tex_side_coord = reader.read_pair()
            elif line == "TexBottom":
                data.tex_bottom_coord = reader.read_pair()
            elif line == "TexAll":
                coords = reader.read_pair()
                data.tex_top_coord = coords
                data.tex_side_coord = coords
                data.tex_bottom_coord = coords
            elif line == "Id":
                data.id = BlockId(reader.read_int())
            elif line == "Opaque":
                data.is_opaque = reader.read_bool()
            elif line == "Collidable":
                data.is_collidable = reader.read_bool()
            elif line == "MeshType":
                data.mesh_type = BlockMeshType(reader.read_int())
            elif line == "ShaderType":
                data.shader_type = BlockShaderType(reader.read_int())
    except _Malformed:
        pass
    return data


def load_block_data(path: Union[str, Path]) -> BlockData:
    """Read a ``.block`` file; raises ``FileNotFoundError`` if it is missing."""
    return parse_block_data(Path(path).read_text())


class BlockDatabase:
    """Block properties for every block id."""

    def __init__(self, blocks: Mapping[BlockId, BlockData]):
        self._blocks: Dict[BlockId, BlockData] = {BlockId(k): v for k, v in blocks.items()}

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "BlockDatabase":
        """Load ``<Name>.block`` for every block id from a directory."""
        base = Path(directory)
        return cls({block_id: load_block_data(base / f"{block_id.name}.block") for block_id in BlockId})

    def get_data(self, block_id: Union[BlockId, int]) -> BlockData:
        return self._blocks[BlockId(block_id)]