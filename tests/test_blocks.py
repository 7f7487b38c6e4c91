import pytest

from voxelcraft.blocks import (
    BLOCK_TYPE_COUNT,
    BlockData,
    BlockDatabase,
    BlockId,
    BlockMeshType,
    BlockShaderType,
    load_block_data,
    parse_block_data,
)

GRASS_FILE = "Id\n1\nTexTop\n0 0\nTexSide\n1 0\nTexBottom\n2 0\nOpaque\n1\nCollidable\n1\n"


def test_block_ids_fixed_by_format():
    assert BlockId(0) is BlockId.Air
    assert parse_block_data("Id\n7\n").id is BlockId.Water
    assert parse_block_data("Id\n11\n").id is BlockId.DeadShrub
    assert len(BlockId) == BLOCK_TYPE_COUNT == 12


def test_parse_full_file():
    data = parse_block_data(GRASS_FILE)
    assert data.id is BlockId.Grass
    assert data.tex_top_coord == (0, 0)
    assert data.tex_side_coord == (1, 0)
    assert data.tex_bottom_coord == (2, 0)
    assert data.is_opaque is True
    assert data.is_collidable is True


def test_tex_all_sets_every_face():
    data = parse_block_data("TexAll\n3 4\n")
    assert data.tex_top_coord == data.tex_side_coord == data.tex_bottom_coord == (3, 4)


def test_values_may_span_lines():
    data = parse_block_data("TexTop\n5\n6\nId\n3\n")
    assert data.tex_top_coord == (5, 6)
    assert data.id is BlockId.Stone


def test_mesh_and_shader_types():
    data = parse_block_data("MeshType\n1\nShaderType\n2\n")
    assert data.mesh_type is BlockMeshType.X
    assert data.shader_type is BlockShaderType.Flora


def test_unknown_lines_are_ignored():
    data = parse_block_data("Colour\nred\nId\n6\n")
    assert data.id is BlockId.Sand


def test_malformed_value_stops_reading():
    data = parse_block_data("Id\n3\nOpaque\nx\nCollidable\n1\n")
    assert data.id is BlockId.Stone
    assert data.is_collidable is False


def test_empty_text_gives_defaults():
    assert parse_block_data("") == BlockData()


def test_load_block_data_reads_file(tmp_path):
    path = tmp_path / "Grass.block"
    path.write_text(GRASS_FILE)
    assert load_block_data(path) == parse_block_data(GRASS_FILE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_block_data(tmp_path / "Nope.block")


def test_database_from_directory(tmp_path):
    for block_id in BlockId:
        (tmp_path / f"{block_id.name}.block").write_text(f"Id\n{int(block_id)}\n")
    database = BlockDatabase.from_directory(tmp_path)
    assert all(database.get_data(block_id).id is block_id for block_id in BlockId)
    assert database.get_data(7).id is BlockId.Water


def test_database_missing_file_raises(tmp_path):
    (tmp_path / "Air.block").write_text("Id\n0\n")
    with pytest.raises(FileNotFoundError):
        BlockDatabase.from_directory(tmp_path)


def test_database_unknown_block_raises():
    database = BlockDatabase({BlockId.Air: BlockData()})
    with pytest.raises(KeyError):
        database.get_data(BlockId.Stone)