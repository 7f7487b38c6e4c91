"""The player: inventory, movement, gravity and block collision."""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

import numpy as np

from .geometry import Entity
from .items import ItemStack, Material, MaterialId

SPEED = 0.2
_GRAVITY = 40.0
_DAMPING = 0.95
_SPRINT_FACTOR = 5
_JUMP_FACTOR = 50
_FLY_FACTOR = 3
_RESPAWN_HEIGHT = 300.0
_HEAD_ROOM = 0.7
_ROTATION_BOUND = 89.0
_MOUSE_SENSITIVITY = 0.05
_INVENTORY_SIZE = 5


class Player(Entity):
    """A player-controlled entity with a five-slot inventory.

    Keyboard keys are named "W", "A", "S", "D", "Space" and "LShift".
    """

    def __init__(self, position: Sequence[float] = (2500, 125, 2500)):
        super().__init__(position, (0, 0, 0), (0.3, 1.0, 0.3))
        self.items: List[ItemStack] = [ItemStack() for _ in range(_INVENTORY_SIZE)]
        self.held_index = 0
        self.is_on_ground = False
        self.is_flying = False
        self.acceleration = np.zeros(3)

    def add_item(self, material: Material) -> None:
        """Add one item to its stack, or to the first empty slot before it."""
        for index, stack in enumerate(self.items):
            if stack.material.id == material.id:
                stack.add(1)
                return
            if stack.material.id == MaterialId.Nothing:
                self.items[index] = ItemStack(material, 1)
                return

    def held_item(self) -> ItemStack:
        return self.items[self.held_index]

    def select_item(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"no inventory slot {index}")
        self.held_index = index

    def cycle_item(self, step: int) -> None:
        """Move the held slot by ``step``, wrapping around the inventory."""
        self.held_index = (self.held_index + step) % len(self.items)

    def toggle_flying(self) -> None:
        self.is_flying = not self.is_flying

    def keyboard_input(self, keyboard: Any, sprint: bool = False) -> None:
        """Accelerate from held keys; ``sprint`` speeds up forward movement."""
        yaw = self.rotation[1]
        forward = math.radians(yaw + 90)
        side = math.radians(yaw)
        if keyboard.is_key_down("W"):
            speed = SPEED * _SPRINT_FACTOR if sprint else SPEED
            self.acceleration[0] += -math.cos(forward) * speed
            self.acceleration[2] += -math.sin(forward) * speed
        if keyboard.is_key_down("S"):
            self.acceleration[0] += math.cos(forward) * SPEED
            self.acceleration[2] += math.sin(forward) * SPEED
        if keyboard.is_key_down("A"):
            self.acceleration[0] += -math.cos(side) * SPEED
            self.acceleration[2] += -math.sin(side) * SPEED
        if keyboard.is_key_down("D"):
            self.acceleration[0] += math.cos(side) * SPEED
            self.acceleration[2] += math.sin(side) * SPEED

        if keyboard.is_key_down("Space"):
            self.jump()
        elif keyboard.is_key_down("LShift") and self.is_flying:
            self.acceleration[1] -= SPEED * _FLY_FACTOR

    def rotate(self, dx: float, dy: float) -> None:
        """Turn by a mouse movement; pitch is bounded, yaw wraps."""
        self.rotation[1] += dx * _MOUSE_SENSITIVITY
        self.rotation[0] += dy * _MOUSE_SENSITIVITY

        if self.rotation[0] > _ROTATION_BOUND:
            self.rotation[0] = _ROTATION_BOUND
        elif self.rotation[0] < -_ROTATION_BOUND:
            self.rotation[0] = -_ROTATION_BOUND

        if self.rotation[1] > 360:
            self.rotation[1] = 0
        elif self.rotation[1] < 0:
            self.rotation[1] = 360

    def update(self, dt: float, world: Any) -> None:
        """Apply acceleration, gravity and collisions for one time step."""
        self.velocity += self.acceleration
        self.acceleration = np.zeros(3)

        if not self.is_flying:
            if not self.is_on_ground:
                self.velocity[1] -= _GRAVITY * dt
            self.is_on_ground = False

        if self.position[1] <= 0 and not self.is_flying:
            self.position[1] = _RESPAWN_HEIGHT

        for axis in range(3):
            self.position[axis] += self.velocity[axis] * dt
            movement = np.zeros(3)
            movement[axis] = self.velocity[axis]
            self.collide(world, movement, dt)

        self.box.update(self.position)
        self.velocity[0] *= _DAMPING
        self.velocity[2] *= _DAMPING
        if self.is_flying:
            self.velocity[1] *= _DAMPING

    def collide(self, world: Any, vel: Sequence[float], dt: float) -> None:
        """Push the player out of collidable blocks against the direction moved.

        ``world.is_collidable(x, y, z)`` decides which blocks block movement.
        The scanned range follows the position as it is corrected.
        """
        vel = np.asarray(vel, dtype=float)
        pos = self.position
        dims = self.box.dimensions

        x = int(pos[0] - dims[0])
        while x < pos[0] + dims[0]:
            y = int(pos[1] - dims[1])
            while y < pos[1] + _HEAD_ROOM:
                z = int(pos[2] - dims[2])
                while z < pos[2] + dims[2]:
                    if world.is_collidable(x, y, z):
                        self._push_out(vel, (x, y, z))
                    z += 1
                y += 1
            x += 1

    def _push_out(self, vel: np.ndarray, block: Tuple[int, int, int]) -> None:
        x, y, z = block
        dims = self.box.dimensions
        if vel[1] > 0:
            self.position[1] = y - dims[1]
            self.velocity[1] = 0
        elif vel[1] < 0:
            self.is_on_ground = True
            self.position[1] = y + dims[1] + 1
            self.velocity[1] = 0

        if vel[0] > 0:
            self.position[0] = x - dims[0]
        elif vel[0] < 0:
            self.position[0] = x + dims[0] + 1

        if vel[2] > 0:
            self.position[2] = z - dims[2]
        elif vel[2] < 0:
            self.position[2] = z + dims[2] + 1

    def jump(self) -> None:
        if not self.is_flying:
            if self.is_on_ground:
                self.is_on_ground = False
                self.acceleration[1] += SPEED * _JUMP_FACTOR
        else:
            self.acceleration[1] += SPEED * _FLY_FACTOR

    def status_lines(self) -> List[Tuple[str, bool]]:
        """Inventory lines, flagged True for the held slot, then a position line."""
        lines = [
            (f"{stack.material.name} {stack.count} ", index == self.held_index)
            for index, stack in enumerate(self.items)
        ]
        x, y, z = (float(v) for v in self.position)
        grounded = str(self.is_on_ground).lower()
        lines.append((f" X: {x:g} Y: {y:g} Z: {z:g} Grounded {grounded}", False))
        return lines