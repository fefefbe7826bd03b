"""Player gravity, collision, movement and voxel ray casting."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar, Protocol

from .camera import Camera
from .vector import Vec3

RESPAWN_POSITION = Vec3(16.0, 60.0, 16.0)
FALL_LIMIT = -50.0


class BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> int: ...


@dataclass(frozen=True)
class RaycastResult:
    """Outcome of a ray cast: the block hit and the normal of the face entered."""

    hit: bool
    x: int = 0
    y: int = 0
    z: int = 0
    normal: Vec3 = Vec3()


class Physics:
    """Walking-mode physics for a player whose eyes are at the camera position."""

    GRAVITY: ClassVar[float] = 18.0
    JUMP_FORCE: ClassVar[float] = 8.0
    PLAYER_HEIGHT: ClassVar[float] = 1.7
    PLAYER_WIDTH: ClassVar[float] = 0.3

    def __init__(self) -> None:
        self.vertical_velocity = 0.0

    def check_collision(self, pos: Vec3, world: BlockSource) -> bool:
        """Whether a player standing with feet at pos overlaps a solid block."""
        w = self.PLAYER_WIDTH
        for height in (0.1, 0.8, self.PLAYER_HEIGHT - 0.2):
            for dx, dz in ((-w, -w), (w, -w), (-w, w), (w, w)):
                if world.get_block(
                    math.floor(pos.x + dx),
                    math.floor(pos.y + height),
                    math.floor(pos.z + dz),
                ) > 0:
                    return True
        return False

    def _feet(self, eye: Vec3) -> Vec3:
        return replace(eye, y=eye.y - self.PLAYER_HEIGHT)

    def step(self, delta_time: float, world: BlockSource, camera: Camera) -> None:
        """Apply gravity for one frame, stopping on floors and ceilings."""
        if camera.flying_mode:
            return
        self.vertical_velocity -= self.GRAVITY * delta_time
        next_pos = replace(
            camera.position, y=camera.position.y + self.vertical_velocity * delta_time
        )
        if self.check_collision(self._feet(next_pos), world):
            self.vertical_velocity = 0.0
        else:
            camera.position = next_pos

        if camera.position.y < FALL_LIMIT:
            camera.position = RESPAWN_POSITION
            self.vertical_velocity = 0.0

    def move(self, direction: Vec3, speed: float, world: BlockSource, camera: Camera) -> None:
        """Move horizontally, resolving X and Z separately so walls can be slid along."""
        if camera.flying_mode or direction.length() == 0.0:
            return
        move_step = direction.normalized() * speed
        original = camera.position

        camera.position = replace(camera.position, x=camera.position.x + move_step.x)
        if self.check_collision(self._feet(camera.position), world):
            camera.position = replace(camera.position, x=original.x)

        camera.position = replace(camera.position, z=camera.position.z + move_step.z)
        if self.check_collision(self._feet(camera.position), world):
            camera.position = replace(camera.position, z=original.z)

    def jump(self, world: BlockSource, camera: Camera) -> None:
        """Start a jump when standing on the ground and not already moving vertically."""
        if camera.flying_mode:
            return
        below = replace(camera.position, y=camera.position.y - self.PLAYER_HEIGHT - 0.1)
        if self.check_collision(below, world) and abs(self.vertical_velocity) < 0.1:
            self.vertical_velocity = self.JUMP_FORCE

    def raycast(
        self, origin: Vec3, direction: Vec3, max_dist: float, world: BlockSource
    ) -> RaycastResult:
        """Walk the voxel grid along a ray and report the first solid block."""
        cell = [math.floor(c) for c in origin]
        steps = [1 if d > 0 else -1 for d in direction]
        deltas = [1e30 if d == 0 else abs(1.0 / d) for d in direction]
        sides = [
            (o - c) * delta if d < 0 else (c + 1.0 - o) * delta
            for o, c, d, delta in zip(origin, cell, direction, deltas)
        ]

        dist = 0.0
        while dist < max_dist:
            if sides[0] < sides[1] and sides[0] < sides[2]:
                axis = 0
            elif sides[1] < sides[2]:
                axis = 1
            else:
                axis = 2
            sides[axis] += deltas[axis]
            cell[axis] += steps[axis]
            dist = sides[axis] - deltas[axis]

            x, y, z = cell
            if world.get_block(x, y, z) > 0:
                normal = [0.0, 0.0, 0.0]
                normal[axis] = float(-steps[axis])
                return RaycastResult(True, x, y, z, Vec3(*normal))
        return RaycastResult(False)