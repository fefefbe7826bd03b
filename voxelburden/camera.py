"""First-person camera driven by Euler angles."""

from __future__ import annotations

import math
from enum import IntEnum

from .vector import Matrix4, Vec3, look_at

YAW = -90.0  # pointing along -z
PITCH = 0.0
SPEED = 10.0  # blocks per second
SENSITIVITY = 0.1
ZOOM = 45.0
PITCH_LIMIT = 89.0


class Direction(IntEnum):
    """Keyboard movement directions."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5


class Camera:
    """Free-look camera with position, orientation and movement options."""

    def __init__(
        self,
        position: Vec3 = Vec3(0.0, 0.0, 0.0),
        up: Vec3 = Vec3(0.0, 1.0, 0.0),
        yaw: float = YAW,
        pitch: float = PITCH,
    ) -> None:
        self.position = position
        self.world_up = up
        self.yaw = yaw
        self.pitch = pitch
        self.front = Vec3(0.0, 0.0, -1.0)
        self.right = Vec3(1.0, 0.0, 0.0)
        self.up = up
        self.movement_speed = SPEED
        self.mouse_sensitivity = SENSITIVITY
        self.zoom = ZOOM
        self.flying_mode = True
        self._update_vectors()

    def view_matrix(self) -> Matrix4:
        """View matrix looking from the position along the front vector."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: int, delta_time: float) -> None:
        """Move the camera in flying mode; walking movement is handled by physics."""
        if not self.flying_mode:
            return
        velocity = self.movement_speed * delta_time
        offsets = {
            Direction.FORWARD: self.front,
            Direction.BACKWARD: -self.front,
            Direction.LEFT: -self.right,
            Direction.RIGHT: self.right,
            Direction.UP: self.world_up,
            Direction.DOWN: -self.world_up,
        }
        offset = offsets.get(direction)
        if offset is not None:
            self.position = self.position + offset * velocity

    def process_mouse_movement(
        self, xoffset: float, yoffset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by mouse offsets, optionally clamping the pitch."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = front.normalized()
        self.right = self.front.cross(self.world_up).normalized()
        self.up = self.right.cross(self.front).normalized()