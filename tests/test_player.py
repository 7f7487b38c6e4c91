import pytest

from voxelcraft.controls import KeyEvent, Keyboard
from voxelcraft.items import DIRT_BLOCK, GRASS_BLOCK, NOTHING
from voxelcraft.player import SPEED, Player


class OpenWorld:
    def is_collidable(self, x, y, z):
        return False


class GroundWorld:
    def is_collidable(self, x, y, z):
        return y <= 10


class WallWorld:
    def is_collidable(self, x, y, z):
        return x == 7


def _keyboard(*keys):
    keyboard = Keyboard()
    for key in keys:
        keyboard.update(KeyEvent(key, True))
    return keyboard


def test_add_item_stacks_and_fills_slots():
    player = Player()
    player.add_item(GRASS_BLOCK)
    player.add_item(GRASS_BLOCK)
    player.add_item(DIRT_BLOCK)
    assert player.items[0].material == GRASS_BLOCK
    assert player.items[0].count == 2
    assert player.items[1].material == DIRT_BLOCK
    assert player.items[1].count == 1
    assert player.items[2].material == NOTHING


def test_held_item_can_be_emptied():
    player = Player()
    player.add_item(DIRT_BLOCK)
    player.held_item().remove()
    assert player.held_item().material == NOTHING
    assert player.held_item().count == 0


def test_cycle_item_wraps():
    player = Player()
    player.cycle_item(-1)
    assert player.held_index == len(player.items) - 1
    player.cycle_item(1)
    assert player.held_index == 0


def test_select_item_bounds():
    player = Player()
    player.select_item(3)
    assert player.held_index == 3
    with pytest.raises(IndexError):
        player.select_item(len(player.items))


def test_toggle_flying():
    player = Player()
    player.toggle_flying()
    assert player.is_flying
    player.toggle_flying()
    assert not player.is_flying


def test_forward_movement_and_sprint():
    player = Player()
    player.keyboard_input(_keyboard("W"))
    assert player.acceleration[0] == pytest.approx(0, abs=1e-9)
    assert player.acceleration[2] == pytest.approx(-SPEED)
    sprinting = Player()
    sprinting.keyboard_input(_keyboard("W"), sprint=True)
    assert sprinting.acceleration[2] == pytest.approx(-SPEED * 5)


def test_opposite_keys_cancel():
    player = Player()
    player.keyboard_input(_keyboard("W", "S", "A", "D"))
    assert player.acceleration == pytest.approx([0, 0, 0], abs=1e-9)


def test_jump_only_from_ground():
    player = Player()
    player.keyboard_input(_keyboard("Space"))
    assert player.acceleration[1] == 0
    player.is_on_ground = True
    player.keyboard_input(_keyboard("Space"))
    assert player.acceleration[1] == pytest.approx(SPEED * 50)
    assert not player.is_on_ground


def test_flying_up_and_down():
    player = Player()
    player.toggle_flying()
    player.jump()
    assert player.acceleration[1] == pytest.approx(SPEED * 3)
    descending = Player()
    descending.keyboard_input(_keyboard("LShift"))
    assert descending.acceleration[1] == 0
    descending.toggle_flying()
    descending.keyboard_input(_keyboard("LShift"))
    assert descending.acceleration[1] == pytest.approx(-SPEED * 3)


def test_rotation_bounds_and_wrap():
    player = Player()
    player.rotate(0, 10000)
    assert player.rotation[0] == 89.0
    player.rotate(0, -20000)
    assert player.rotation[0] == -89.0
    player.rotate(-1, 0)
    assert player.rotation[1] == 360
    player.rotate(1000, 0)
    assert player.rotation[1] == 0


def test_gravity_in_open_air():
    player = Player(position=(10, 125, 10))
    player.update(0.1, OpenWorld())
    assert player.velocity[1] < 0
    assert player.position[1] < 125
    assert not player.is_on_ground


def test_flying_damps_velocity():
    player = Player(position=(10, 50, 10))
    player.toggle_flying()
    player.velocity[:] = [1.0, 1.0, 0.0]
    player.update(0.1, OpenWorld())
    assert player.position[0] == pytest.approx(10 + 0.1)
    assert player.velocity[0] == pytest.approx(0.95)
    assert player.velocity[1] == pytest.approx(0.95)
    assert player.box.position == pytest.approx(list(player.position))


def test_falling_below_world_respawns_high():
    player = Player(position=(10, -5, 10))
    player.update(0.1, OpenWorld())
    assert 299 < player.position[1] < 300


def test_collide_lands_on_ground():
    player = Player(position=(5.5, 11.5, 5.5))
    player.velocity[1] = -3
    player.collide(GroundWorld(), (0, -1, 0), 0.1)
    assert player.position[1] == 12.0
    assert player.is_on_ground
    assert player.velocity[1] == 0


def test_collide_with_wall_stops_at_face():
    player = Player(position=(6.8, 20.5, 5.5))
    player.collide(WallWorld(), (1, 0, 0), 0.1)
    assert player.position[0] + player.box.dimensions[0] == pytest.approx(7)


def test_status_lines():
    player = Player(position=(1, 2, 3))
    player.add_item(GRASS_BLOCK)
    lines = player.status_lines()
    assert lines[0] == ("Grass Block 1 ", True)
    assert lines[1] == ("None 0 ", False)
    assert lines[-1] == (" X: 1 Y: 2 Z: 3 Grounded false", False)
    assert len(lines) == len(player.items) + 1