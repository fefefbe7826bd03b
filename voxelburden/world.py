"""A fixed square grid of chunks with generated terrain."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from .chunk import AIR, CHUNK_SIZE, DIRT, GRASS, STONE, Chunk
from .noise import perlin_noise3
from .vector import Vec3

WORLD_SIZE = 5  # chunks along each horizontal axis

TERRAIN_FREQUENCY = 0.05
TERRAIN_AMPLITUDE = 10.0
SEA_LEVEL = 4

logger = logging.getLogger(__name__)


class VoxelWorld:
    """WORLD_SIZE × WORLD_SIZE chunks laid out on the XZ plane, one chunk tall."""

    def __init__(self, generate: bool = True) -> None:
        self._chunks = [Chunk() for _ in range(WORLD_SIZE * WORLD_SIZE)]
        if generate:
            self.generate_terrain()

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """All chunks, indexed by cx + cz * WORLD_SIZE."""
        return tuple(self._chunks)

    def chunk(self, cx: int, cz: int) -> Chunk:
        """The chunk at chunk coordinates (cx, cz)."""
        if not (0 <= cx < WORLD_SIZE and 0 <= cz < WORLD_SIZE):
            raise IndexError(f"chunk ({cx}, {cz}) is outside the world")
        return self._chunks[cx + cz * WORLD_SIZE]

    def generate_terrain(self) -> None:
        """Fill every chunk with noise-shaped grass, dirt and stone, then mesh it."""
        logger.info("generating %dx%d world...", WORLD_SIZE, WORLD_SIZE)
        for cx in range(WORLD_SIZE):
            for cz in range(WORLD_SIZE):
                current = self.chunk(cx, cz)
                for x in range(CHUNK_SIZE):
                    for z in range(CHUNK_SIZE):
                        world_x = cx * CHUNK_SIZE + x
                        world_z = cz * CHUNK_SIZE + z
                        noise = perlin_noise3(
                            world_x * TERRAIN_FREQUENCY,
                            world_z * TERRAIN_FREQUENCY,
                            0.0,
                        )
                        height = SEA_LEVEL + int((noise + 1.0) * 0.5 * TERRAIN_AMPLITUDE)
                        height = max(0, min(CHUNK_SIZE - 1, height))
                        for y in range(height + 1):
                            if y == height:
                                block = GRASS
                            elif y > height - 3:
                                block = DIRT
                            else:
                                block = STONE
                            current.set_block(x, y, z, block)
                current.build_mesh()
        logger.info("generation complete!")

    @staticmethod
    def _locate(x: int, y: int, z: int) -> tuple[int, int, int, int] | None:
        if not 0 <= y < CHUNK_SIZE:
            return None
        cx, local_x = divmod(x, CHUNK_SIZE)
        cz, local_z = divmod(z, CHUNK_SIZE)
        if not (0 <= cx < WORLD_SIZE and 0 <= cz < WORLD_SIZE):
            return None
        return cx, cz, local_x, local_z

    def get_block(self, x: int, y: int, z: int) -> int:
        """Block id at world coordinates; air outside the world."""
        located = self._locate(x, y, z)
        if located is None:
            return AIR
        cx, cz, local_x, local_z = located
        return self.chunk(cx, cz).get_block(local_x, y, local_z)

    def set_block(self, x: int, y: int, z: int, block: int) -> None:
        """Set a block and rebuild the meshes it affects; ignored outside the world."""
        located = self._locate(x, y, z)
        if located is None:
            return
        cx, cz, local_x, local_z = located
        target = self.chunk(cx, cz)
        target.set_block(local_x, y, local_z, block)
        target.build_mesh()

        if local_x == 0 and cx > 0:
            self.chunk(cx - 1, cz).build_mesh()
        elif local_x == CHUNK_SIZE - 1 and cx < WORLD_SIZE - 1:
            self.chunk(cx + 1, cz).build_mesh()

        if local_z == 0 and cz > 0:
            self.chunk(cx, cz - 1).build_mesh()
        elif local_z == CHUNK_SIZE - 1 and cz < WORLD_SIZE - 1:
            self.chunk(cx, cz + 1).build_mesh()

    def visible_chunks(
        self, player_pos: Vec3, render_distance: int
    ) -> Iterator[tuple[int, int, Chunk]]:
        """Yield (cx, cz, chunk) for chunks within the render distance of the player."""
        player_cx = int(player_pos.x / CHUNK_SIZE)
        player_cz = int(player_pos.z / CHUNK_SIZE)
        for cx in range(WORLD_SIZE):
            for cz in range(WORLD_SIZE):
                dist = int(math.sqrt((cx - player_cx) ** 2 + (cz - player_cz) ** 2))
                if dist < render_distance:
                    yield cx, cz, self.chunk(cx, cz)