from voxelcraft.atlas import TextureAtlas
from voxelcraft.blocks import (
    BlockData,
    BlockDatabase,
    BlockId,
    BlockMeshType,
    BlockShaderType,
)
from voxelcraft.config import CHUNK_SIZE
from voxelcraft.mesh import ChunkMeshCollection
from voxelcraft.mesh_builder import (
    LIGHT_BOT,
    LIGHT_TOP,
    LIGHT_X,
    LIGHT_Z,
    ChunkMeshBuilder,
)
from voxelcraft.section import ChunkSection


def _database():
    blocks = {block_id: BlockData(id=block_id) for block_id in BlockId}
    blocks[BlockId.Stone] = BlockData(
        id=BlockId.Stone,
        tex_top_coord=(1, 0),
        tex_side_coord=(2, 0),
        tex_bottom_coord=(3, 0),
        is_opaque=True,
        is_collidable=True,
    )
    blocks[BlockId.Water] = BlockData(id=BlockId.Water, shader_type=BlockShaderType.Liquid)
    blocks[BlockId.Rose] = BlockData(
        id=BlockId.Rose,
        tex_top_coord=(3, 1),
        mesh_type=BlockMeshType.X,
        shader_type=BlockShaderType.Flora,
    )
    return BlockDatabase(blocks)


class _Chunk:
    def __init__(self, world, x, z):
        self._world = world
        self._x = x
        self._z = z

    def get_section(self, index):
        return self._world.sections.get((self._x, index, self._z), self._world.error_section)


class _Manager:
    def __init__(self, world):
        self._world = world

    def get_chunk(self, x, z):
        return _Chunk(self._world, x, z)


class _World:
    def __init__(self):
        self.database = _database()
        self.sections = {}
        self.chunk_manager = _Manager(self)
        self.error_section = ChunkSection((444, 444, 444), self, self.database)

    def add_section(self, location):
        section = ChunkSection(location, self, self.database)
        self.sections[tuple(location)] = section
        return section

    def get_block(self, x, y, z):
        key = (x // CHUNK_SIZE, y // CHUNK_SIZE, z // CHUNK_SIZE)
        section = self.sections.get(key)
        if section is None:
            return BlockId.Air
        return section.get_block(x % CHUNK_SIZE, y % CHUNK_SIZE, z % CHUNK_SIZE)

    def set_block(self, x, y, z, block):
        pass


def _build(section):
    meshes = ChunkMeshCollection()
    ChunkMeshBuilder(section, meshes).build_mesh()
    return meshes


def test_lone_block_gets_six_faces():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Stone)
    meshes = _build(section)
    solid = meshes.solid_mesh
    assert solid.faces == 6
    assert len(solid.mesh.vertex_positions) == solid.faces * 12
    assert len(solid.mesh.texture_coords) == solid.faces * 8
    assert len(solid.mesh.indices) == solid.faces * 6
    assert meshes.water_mesh.faces == 0
    assert meshes.flora_mesh.faces == 0


def test_face_lighting_order():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Stone)
    light = _build(section).solid_mesh.light
    expected = [LIGHT_BOT, LIGHT_TOP, LIGHT_X, LIGHT_X, LIGHT_Z, LIGHT_Z]
    assert light == [value for value in expected for _ in range(4)]


def test_bottom_face_uses_bottom_texture():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Stone)
    coords = _build(section).solid_mesh.mesh.texture_coords
    atlas = TextureAtlas()
    assert coords[:8] == list(atlas.get_texture((3, 0)))
    assert coords[8:16] == list(atlas.get_texture((1, 0)))


def test_no_bottom_face_at_world_floor():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 0, 5, BlockId.Stone)
    meshes = _build(section)
    assert meshes.solid_mesh.faces == 5
    assert LIGHT_BOT not in meshes.solid_mesh.light


def test_bottom_face_kept_above_first_section():
    world = _World()
    section = world.add_section((0, 1, 0))
    section.set_block(5, 0, 5, BlockId.Stone)
    assert _build(section).solid_mesh.faces == 6


def test_touching_blocks_hide_shared_faces():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Stone)
    section.set_block(6, 5, 5, BlockId.Stone)
    assert _build(section).solid_mesh.faces == 10


def test_water_goes_to_water_mesh_and_stone_face_shows_through():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Stone)
    section.set_block(6, 5, 5, BlockId.Water)
    meshes = _build(section)
    assert meshes.solid_mesh.faces == 6
    assert meshes.water_mesh.faces == 5


def test_neighbouring_water_hides_faces_between():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(5, 5, 5, BlockId.Water)
    section.set_block(5, 5, 6, BlockId.Water)
    assert _build(section).water_mesh.faces == 10


def test_x_block_adds_two_crossed_faces():
    world = _World()
    section = world.add_section((0, 0, 0))
    section.set_block(2, 3, 4, BlockId.Rose)
    meshes = _build(section)
    assert meshes.flora_mesh.faces == 2
    assert meshes.flora_mesh.light == [LIGHT_X] * 8
    assert meshes.solid_mesh.faces == 0


def test_vertices_placed_in_world_space():
    world = _World()
    section = world.add_section((1, 0, 2))
    section.set_block(0, 3, 0, BlockId.Stone)
    positions = _build(section).solid_mesh.mesh.vertex_positions
    xs, ys, zs = positions[0::3], positions[1::3], positions[2::3]
    assert min(xs) == CHUNK_SIZE and max(xs) == CHUNK_SIZE + 1
    assert min(ys) == 3 and max(ys) == 4
    assert min(zs) == 2 * CHUNK_SIZE and max(zs) == 2 * CHUNK_SIZE + 1


def test_block_on_section_edge_checks_neighbour_section():
    world = _World()
    section = world.add_section((0, 0, 0))
    neighbour = world.add_section((1, 0, 0))
    section.set_block(CHUNK_SIZE - 1, 5, 5, BlockId.Stone)
    neighbour.set_block(0, 5, 5, BlockId.Stone)
    assert _build(section).solid_mesh.faces == 5


def test_empty_section_builds_nothing():
    world = _World()
    section = world.add_section((0, 0, 0))
    meshes = _build(section)
    assert meshes.solid_mesh.faces == 0
    assert meshes.solid_mesh.mesh.vertex_positions == []