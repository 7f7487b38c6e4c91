"""The world: block access across chunks, loading, meshing and world events."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .atlas import TextureAtlas
from .blocks import BlockDatabase, BlockId
from .chunk_manager import ChunkManager
from .config import CHUNK_SIZE, Config
from .geometry import VectorXZ
from .items import MaterialId, material_from_block
from .rng import Random, shared_random
from .section import ChunkSection
from .terrain import TerrainGenerator

_log = logging.getLogger(__name__)

_START_LOAD_DISTANCE = 2
_SPAWN_CHUNK_LOW = 100
_SPAWN_CHUNK_HIGH = 200


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _trunc_mod(value: int, divisor: int) -> int:
    return value - _trunc_div(value, divisor) * divisor


def block_xz(x: int, z: int) -> VectorXZ:
    """Position of a world column inside its chunk (remainder rounds toward zero)."""
    return VectorXZ(_trunc_mod(x, CHUNK_SIZE), _trunc_mod(z, CHUNK_SIZE))


def chunk_xz(x: int, z: int) -> VectorXZ:
    """Chunk holding a world column (division rounds toward zero)."""
    return VectorXZ(_trunc_div(x, CHUNK_SIZE), _trunc_div(z, CHUNK_SIZE))


class WorldEvent(ABC):
    """Something that happens to the world during its next update."""

    @abstractmethod
    def handle(self, world: "World") -> None:
        """Apply the event to the world."""


class World:
    """Chunks of a world and the work queued on them.

    ``load_pass`` may be run from a background thread; access to chunks is
    guarded by a lock. The spawn point is found by ``find_spawn_point``.
    """

    def __init__(
        self,
        database: BlockDatabase,
        config: Optional[Config] = None,
        generator: Optional[TerrainGenerator] = None,
        atlas: Optional[TextureAtlas] = None,
    ):
        config = config if config is not None else Config()
        self.database = database
        self.chunk_manager = ChunkManager(self, database, generator, atlas)
        self.render_distance = config.render_distance
        self.load_distance = _START_LOAD_DISTANCE
        self.events: List[WorldEvent] = []
        self.chunk_updates: Dict[Tuple[int, int, int], ChunkSection] = {}
        self.spawn_point: Optional[Tuple[int, int, int]] = None
        self._lock = threading.RLock()

    def get_block(self, x: int, y: int, z: int) -> BlockId:
        position = block_xz(x, z)
        chunk = chunk_xz(x, z)
        return self.chunk_manager.get_chunk(chunk.x, chunk.z).get_block(position.x, y, position.z)

    def set_block(self, x: int, y: int, z: int, block: Union[BlockId, int]) -> None:
        """Place a block; nothing is placed at or below height zero."""
        if y <= 0:
            return
        position = block_xz(x, z)
        chunk = chunk_xz(x, z)
        self.chunk_manager.get_chunk(chunk.x, chunk.z).set_block(position.x, y, position.z, block)

    def is_collidable(self, x: int, y: int, z: int) -> bool:
        block = self.get_block(x, y, z)
        return block != BlockId.Air and self.database.get_data(block).is_collidable

    def add_event(self, event: WorldEvent) -> None:
        self.events.append(event)

    def update(self) -> None:
        """Handle queued events, then remesh the sections they touched."""
        events, self.events = self.events, []
        for event in events:
            event.handle(self)
        self._update_chunks()

    def reset_meshes(self) -> None:
        """Drop every mesh and restart loading from the nearest chunks."""
        with self._lock:
            self.chunk_manager.delete_meshes()
            self.load_distance = _START_LOAD_DISTANCE

    def update_chunk(self, block_x: int, block_y: int, block_z: int) -> None:
        """Queue the section of a block, and the neighbours it borders, for remeshing."""
        with self._lock:
            chunk = chunk_xz(block_x, block_z)
            section_y = _trunc_div(block_y, CHUNK_SIZE)
            self._queue_section(chunk.x, section_y, chunk.z)

            local = block_xz(block_x, block_z)
            local_y = _trunc_mod(block_y, CHUNK_SIZE)
            edge = CHUNK_SIZE - 1

            if local.x == 0:
                self._queue_section(chunk.x - 1, section_y, chunk.z)
            elif local.x == edge:
                self._queue_section(chunk.x + 1, section_y, chunk.z)

            if local_y == 0:
                self._queue_section(chunk.x, section_y - 1, chunk.z)
            elif local_y == edge:
                self._queue_section(chunk.x, section_y + 1, chunk.z)

            if local.z == 0:
                self._queue_section(chunk.x, section_y, chunk.z - 1)
            elif local.z == edge:
                self._queue_section(chunk.x, section_y, chunk.z + 1)

    def _queue_section(self, x: int, y: int, z: int) -> None:
        section = self.chunk_manager.get_chunk(x, z).get_section(y)
        self.chunk_updates.setdefault((x, y, z), section)

    def _update_chunks(self) -> None:
        with self._lock:
            for section in self.chunk_updates.values():
                section.make_mesh()
            self.chunk_updates.clear()

    def load_pass(self, camera_position: Sequence[float], frustum: Any) -> bool:
        """One round of loading and meshing in growing squares around the camera.

        Returns whether the last chunk tried produced a mesh. When none did, the
        load distance grows, wrapping back once it reaches the render distance.
        """
        camera_x = int(camera_position[0] / CHUNK_SIZE)
        camera_z = int(camera_position[2] / CHUNK_SIZE)
        is_mesh_made = False

        for i in range(self.load_distance):
            min_x = max(camera_x - i, 0)
            min_z = max(camera_z - i, 0)
            max_x = camera_x + i
            max_z = camera_z + i
            for x in range(min_x, max_x):
                for z in range(min_z, max_z):
                    with self._lock:
                        is_mesh_made = self.chunk_manager.make_mesh(x, z, frustum)
            if is_mesh_made:
                break

        if not is_mesh_made:
            self.load_distance += 1
        if self.load_distance >= self.render_distance:
            self.load_distance = _START_LOAD_DISTANCE
        return is_mesh_made

    def render_world(self, camera_position: Sequence[float], frustum: Any) -> List[ChunkSection]:
        """Drop chunks beyond the render distance and return the sections to draw."""
        with self._lock:
            camera_x = _trunc_div(int(camera_position[0]), CHUNK_SIZE)
            camera_z = _trunc_div(int(camera_position[2]), CHUNK_SIZE)
            min_x = camera_x - self.render_distance
            min_z = camera_z - self.render_distance
            max_x = camera_x + self.render_distance
            max_z = camera_z + self.render_distance

            sections: List[ChunkSection] = []
            chunks = self.chunk_manager.chunks
            for key, chunk in list(chunks.items()):
                x, z = chunk.location
                if min_x > x or min_z > z or max_z < z or max_x < x:
                    del chunks[key]
                    continue
                sections.extend(chunk.visible_sections(frustum))
            return sections

    def find_spawn_point(self, rand: Optional[Random] = None) -> Tuple[int, int, int]:
        """Try random columns until one rises above the minimum spawn height."""
        rand = rand if rand is not None else shared_random()
        started = time.monotonic()
        _log.info("Searching for spawn...")

        manager = self.chunk_manager
        minimum = manager.terrain_generator.minimum_spawn_height()
        attempts = 0
        chunk_x = chunk_z = -1
        block_x = block_z = block_y = 0

        while block_y <= minimum:
            manager.unload_chunk(chunk_x, chunk_z)
            chunk_x = rand.int_in_range(_SPAWN_CHUNK_LOW, _SPAWN_CHUNK_HIGH)
            chunk_z = rand.int_in_range(_SPAWN_CHUNK_LOW, _SPAWN_CHUNK_HIGH)
            block_x = rand.int_in_range(0, CHUNK_SIZE - 1)
            block_z = rand.int_in_range(0, CHUNK_SIZE - 1)
            manager.load_chunk(chunk_x, chunk_z)
            block_y = manager.get_chunk(chunk_x, chunk_z).get_height_at(block_x, block_z)
            attempts += 1

        world_x = chunk_x * CHUNK_SIZE + block_x
        world_z = chunk_z * CHUNK_SIZE + block_z
        self.spawn_point = (world_x, block_y, world_z)

        for x in range(world_x - 1, world_x + 2):
            for z in range(world_z - 1, world_z + 1):
                with self._lock:
                    manager.load_chunk(x, z)

        _log.info(
            "Spawn found! Attempts: %d Time Taken: %g seconds",
            attempts,
            time.monotonic() - started,
        )
        return self.spawn_point


class MouseButton(IntEnum):
    Left = 0
    Right = 1
    Middle = 2


class PlayerDigEvent(WorldEvent):
    """A player breaking (left) or placing (right) a block."""

    def __init__(self, button: MouseButton, location: Sequence[float], player: Any):
        self.button = MouseButton(button)
        self.location = tuple(float(v) for v in location)
        self.player = player

    def handle(self, world: World) -> None:
        x, _, z = self.location
        chunk = chunk_xz(int(x), int(z))
        if world.chunk_manager.chunk_loaded_at(chunk.x, chunk.z):
            self._dig(world)

    def _dig(self, world: World) -> None:
        x, y, z = (int(v) for v in self.location)
        if self.button == MouseButton.Left:
            block = world.get_block(x, y, z)
            self.player.add_item(material_from_block(block))
            world.update_chunk(x, y, z)
            world.set_block(x, y, z, BlockId.Air)
        elif self.button == MouseButton.Right:
            stack = self.player.held_item()
            material = stack.material
            if material.id == MaterialId.Nothing:
                return
            stack.remove()
            world.update_chunk(x, y, z)
            world.set_block(x, y, z, material.to_block_id())