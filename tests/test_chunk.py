import pytest

from voxelburden.chunk import (
    CHUNK_SIZE,
    CUBE_VERTICES,
    DIRT,
    GRASS,
    STONE,
    Chunk,
    Face,
    texture_index,
)


def test_new_chunk_is_air():
    chunk = Chunk()
    assert chunk.get_block(0, 0, 0) == 0
    assert chunk.get_block(CHUNK_SIZE - 1, CHUNK_SIZE - 1, CHUNK_SIZE - 1) == 0
    assert chunk.build_mesh() == []
    assert chunk.vertex_count() == 0


def test_set_and_get_roundtrip():
    chunk = Chunk()
    chunk.set_block(3, 7, 11, STONE)
    assert chunk.get_block(3, 7, 11) == STONE
    assert chunk.is_solid(3, 7, 11)
    assert not chunk.is_solid(11, 7, 3)


@pytest.mark.parametrize("pos", [(-1, 0, 0), (0, CHUNK_SIZE, 0), (0, 0, CHUNK_SIZE)])
def test_out_of_bounds_is_air_and_ignored(pos):
    chunk = Chunk()
    chunk.set_block(*pos, DIRT)
    assert chunk.get_block(*pos) == 0
    assert not chunk.is_solid(*pos)
    assert chunk.build_mesh() == []


def test_invalid_block_value_rejected():
    with pytest.raises(ValueError):
        Chunk().set_block(0, 0, 0, 256)


def test_texture_indices():
    assert texture_index(GRASS, Face.TOP) == (12, 12)
    assert texture_index(GRASS, Face.BOTTOM) == (0, 2)
    assert texture_index(GRASS, Face.LEFT) == (0, 3)
    assert texture_index(DIRT, Face.TOP) == (0, 2)
    assert texture_index(STONE, Face.FRONT) == (0, 1)
    assert texture_index(42, Face.FRONT) == (9, 9)


def test_single_block_has_all_faces():
    chunk = Chunk()
    chunk.set_block(0, 0, 0, STONE)
    mesh = chunk.build_mesh()
    assert chunk.vertex_count() == len(mesh) == 6 * 6
    for x, y, z, _, _ in mesh:
        assert 0.0 <= x <= 1.0 and 0.0 <= y <= 1.0 and 0.0 <= z <= 1.0


def test_mesh_offsets_by_block_position():
    chunk = Chunk()
    chunk.set_block(5, 6, 7, DIRT)
    mesh = chunk.build_mesh()
    first_front = mesh[0]
    local = CUBE_VERTICES[Face.FRONT][0]
    assert first_front[:3] == (local[0] + 5, local[1] + 6, local[2] + 7)


def test_adjacent_blocks_cull_shared_faces():
    single = Chunk()
    single.set_block(4, 4, 4, STONE)
    single.build_mesh()
    pair = Chunk()
    pair.set_block(4, 4, 4, STONE)
    pair.set_block(5, 4, 4, STONE)
    pair.build_mesh()
    assert pair.vertex_count() == 2 * single.vertex_count() - 2 * 6


def test_enclosed_block_adds_nothing():
    solid = Chunk()
    hollow = Chunk()
    for x in range(3):
        for y in range(3):
            for z in range(3):
                solid.set_block(x, y, z, DIRT)
                if (x, y, z) != (1, 1, 1):
                    hollow.set_block(x, y, z, DIRT)
    solid.build_mesh()
    hollow.build_mesh()
    # hollow gains six inner faces that the solid cube hides
    assert hollow.vertex_count() == solid.vertex_count() + 6 * 6


def test_uvs_fall_inside_the_tile():
    step = 16.0 / 256.0
    chunk = Chunk()
    chunk.set_block(1, 1, 1, STONE)
    row, col = texture_index(STONE, Face.FRONT)
    gl_row = 15 - row
    for _, _, _, u, v in chunk.build_mesh():
        assert col * step <= u <= (col + 1) * step
        assert gl_row * step <= v <= (gl_row + 1) * step


def test_grass_top_uses_top_tile():
    step = 16.0 / 256.0
    chunk = Chunk()
    chunk.set_block(0, 0, 0, GRASS)
    mesh = chunk.build_mesh()
    top = mesh[Face.TOP * 6:(Face.TOP + 1) * 6]
    row, col = texture_index(GRASS, Face.TOP)
    for _, y, _, u, v in top:
        assert y == 1.0
        assert col * step <= u <= (col + 1) * step
        assert (15 - row) * step <= v <= (16 - row) * step