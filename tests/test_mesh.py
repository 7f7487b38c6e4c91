from voxelcraft.config import CHUNK_SIZE
from voxelcraft.mesh import ChunkMesh, ChunkMeshCollection, Mesh

FACE = (0, 0, 1, 1, 0, 1, 1, 1, 1, 0, 1, 1)
TEX = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8)


def test_add_face_at_origin_copies_face_vertices():
    mesh = ChunkMesh()
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 0.6)
    assert mesh.mesh.vertex_positions == list(FACE)
    assert mesh.mesh.texture_coords == list(TEX)
    assert mesh.light == [0.6] * 4
    assert mesh.faces == 1


def test_indices_follow_two_triangles_per_face():
    mesh = ChunkMesh()
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    assert mesh.mesh.indices == [0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4]
    assert mesh.faces == 2


def test_chunk_position_offsets_by_chunk_size():
    base = ChunkMesh()
    base.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    moved = ChunkMesh()
    moved.add_face(FACE, TEX, (1, 0, 0), (0, 0, 0), 1.0)
    base_xs = base.mesh.vertex_positions[0::3]
    moved_xs = moved.mesh.vertex_positions[0::3]
    assert [m - b for m, b in zip(moved_xs, base_xs)] == [CHUNK_SIZE] * 4
    assert moved.mesh.vertex_positions[1::3] == base.mesh.vertex_positions[1::3]


def test_block_position_offsets_vertices():
    base = ChunkMesh()
    base.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    moved = ChunkMesh()
    moved.add_face(FACE, TEX, (0, 0, 0), (0, 2, 0), 1.0)
    ys = [m - b for m, b in zip(moved.mesh.vertex_positions[1::3], base.mesh.vertex_positions[1::3])]
    assert ys == [2] * 4


def test_buffer_moves_data_and_restarts_indices():
    mesh = ChunkMesh()
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 0.4)
    mesh.buffer()
    assert mesh.buffered is not None
    assert mesh.indices_count == 6
    assert mesh.buffered_light == [0.4] * 4
    assert mesh.mesh == Mesh()
    assert mesh.light == []
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 0.4)
    assert mesh.mesh.indices[:3] == [0, 1, 2]


def test_delete_data_drops_buffer_but_keeps_face_count():
    mesh = ChunkMesh()
    mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    mesh.buffer()
    mesh.delete_data()
    assert mesh.buffered is None
    assert mesh.indices_count == 0
    assert mesh.faces == 1


def test_collection_holds_separate_meshes():
    collection = ChunkMeshCollection()
    collection.solid_mesh.add_face(FACE, TEX, (0, 0, 0), (0, 0, 0), 1.0)
    assert collection.solid_mesh.faces == 1
    assert collection.water_mesh.faces == 0
    assert collection.flora_mesh.faces == 0