"""Cubic chunk of block ids with face-culled mesh generation."""

from __future__ import annotations

from enum import IntEnum

CHUNK_SIZE = 32
CHUNK_VOLUME = CHUNK_SIZE ** 3

AIR = 0
GRASS = 1
DIRT = 2
STONE = 3

ATLAS_WIDTH_PX = 256.0
ATLAS_HEIGHT_PX = 256.0
TILE_SIZE_PX = 16.0
ATLAS_ROWS = 16
ATLAS_COLS = 16

MeshVertex = tuple[float, float, float, float, float]


class Face(IntEnum):
    """Cube faces in mesh order."""

    FRONT = 0  # +Z
    BACK = 1  # -Z
    LEFT = 2  # -X
    RIGHT = 3  # +X
    TOP = 4  # +Y
    BOTTOM = 5  # -Y


_NEIGHBOURS: dict[Face, tuple[int, int, int]] = {
    Face.FRONT: (0, 0, 1),
    Face.BACK: (0, 0, -1),
    Face.LEFT: (-1, 0, 0),
    Face.RIGHT: (1, 0, 0),
    Face.TOP: (0, 1, 0),
    Face.BOTTOM: (0, -1, 0),
}

# Two triangles per face, each vertex as (x, y, z, u, v) on the unit cube.
CUBE_VERTICES: dict[Face, tuple[MeshVertex, ...]] = {
    Face.FRONT: (
        (0, 0, 1, 0, 0), (1, 0, 1, 1, 0), (1, 1, 1, 1, 1),
        (1, 1, 1, 1, 1), (0, 1, 1, 0, 1), (0, 0, 1, 0, 0),
    ),
    Face.BACK: (
        (1, 0, 0, 0, 0), (0, 0, 0, 1, 0), (0, 1, 0, 1, 1),
        (0, 1, 0, 1, 1), (1, 1, 0, 0, 1), (1, 0, 0, 0, 0),
    ),
    Face.LEFT: (
        (0, 0, 0, 0, 0), (0, 0, 1, 1, 0), (0, 1, 1, 1, 1),
        (0, 1, 1, 1, 1), (0, 1, 0, 0, 1), (0, 0, 0, 0, 0),
    ),
    Face.RIGHT: (
        (1, 0, 1, 0, 0), (1, 0, 0, 1, 0), (1, 1, 0, 1, 1),
        (1, 1, 0, 1, 1), (1, 1, 1, 0, 1), (1, 0, 1, 0, 0),
    ),
    Face.TOP: (
        (0, 1, 1, 0, 0), (1, 1, 1, 1, 0), (1, 1, 0, 1, 1),
        (1, 1, 0, 1, 1), (0, 1, 0, 0, 1), (0, 1, 1, 0, 0),
    ),
    Face.BOTTOM: (
        (0, 0, 0, 0, 0), (1, 0, 0, 1, 0), (1, 0, 1, 1, 1),
        (1, 0, 1, 1, 1), (0, 0, 1, 0, 1), (0, 0, 0, 0, 0),
    ),
}


def texture_index(block_id: int, face: int) -> tuple[int, int]:
    """Atlas (row, column) of the tile for a block's face, counted from the image top."""
    if block_id == GRASS:
        if face == Face.TOP:
            return 12, 12
        if face == Face.BOTTOM:
            return 0, 2
        return 0, 3
    if block_id == DIRT:
        return 0, 2
    if block_id == STONE:
        return 0, 1
    return 9, 9


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_SIZE and 0 <= z < CHUNK_SIZE


def _index(x: int, y: int, z: int) -> int:
    return x + z * CHUNK_SIZE + y * CHUNK_SIZE * CHUNK_SIZE


class Chunk:
    """A CHUNK_SIZE³ block of voxels, initially all air."""

    def __init__(self) -> None:
        self._blocks = bytearray(CHUNK_VOLUME)
        self.mesh: list[MeshVertex] = []

    def set_block(self, x: int, y: int, z: int, block: int) -> None:
        """Set a block; coordinates outside the chunk are ignored."""
        if _in_bounds(x, y, z):
            self._blocks[_index(x, y, z)] = block

    def get_block(self, x: int, y: int, z: int) -> int:
        """Block id at a position, air when outside the chunk."""
        if not _in_bounds(x, y, z):
            return AIR
        return self._blocks[_index(x, y, z)]

    def is_solid(self, x: int, y: int, z: int) -> bool:
        return self.get_block(x, y, z) > 0

    def build_mesh(self) -> list[MeshVertex]:
        """Rebuild and return the triangle list of all faces bordering air."""
        step_u = TILE_SIZE_PX / ATLAS_WIDTH_PX
        step_v = TILE_SIZE_PX / ATLAS_HEIGHT_PX
        mesh: list[MeshVertex] = []
        for y in range(CHUNK_SIZE):
            for z in range(CHUNK_SIZE):
                for x in range(CHUNK_SIZE):
                    block = self._blocks[_index(x, y, z)]
                    if not block:
                        continue
                    for face in Face:
                        dx, dy, dz = _NEIGHBOURS[face]
                        if self.is_solid(x + dx, y + dy, z + dz):
                            continue
                        row, col = texture_index(block, face)
                        gl_row = (ATLAS_ROWS - 1) - row
                        mesh.extend(
                            (
                                float(vx + x),
                                float(vy + y),
                                float(vz + z),
                                col * step_u + u * step_u,
                                gl_row * step_v + v * step_v,
                            )
                            for vx, vy, vz, u, v in CUBE_VERTICES[face]
                        )
        self.mesh = mesh
        return mesh

    def vertex_count(self) -> int:
        """Number of vertices in the last built mesh."""
        return len(self.mesh)