"""Keyboard and mouse handling: movement, mode toggling and block editing."""

from __future__ import annotations

import logging
from collections.abc import Collection
from enum import Enum, auto

from .camera import Camera, Direction
from .chunk import AIR, GRASS, DIRT, STONE
from .physics import Physics
from .vector import Vec3
from .world import VoxelWorld

WALK_SPEED = 10.0
SPRINT_MULTIPLIER = 2.0
REACH = 8.0
MIN_PLACE_DISTANCE = 1.5

logger = logging.getLogger(__name__)


class Key(Enum):
    ESCAPE = auto()
    C = auto()
    NUM_1 = auto()
    NUM_2 = auto()
    NUM_3 = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    SPACE = auto()
    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()


_HOTBAR = {Key.NUM_1: GRASS, Key.NUM_2: DIRT, Key.NUM_3: STONE}

_FLY_KEYS = {
    Key.W: Direction.FORWARD,
    Key.S: Direction.BACKWARD,
    Key.A: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.SPACE: Direction.UP,
    Key.LEFT_CONTROL: Direction.DOWN,
}


class InputSystem:
    """Per-frame input state with edge detection for toggles and clicks."""

    def __init__(self, width: float = 1280.0, height: float = 720.0) -> None:
        self._selected_block = GRASS
        self._left_held = False
        self._right_held = False
        self._c_held = False
        self._first_mouse = True
        self._last_x = width / 2.0
        self._last_y = height / 2.0
        self.close_requested = False

    def selected_block(self) -> int:
        """Block id placed by the right mouse button."""
        return self._selected_block

    def on_mouse_movement(self, xpos: float, ypos: float, camera: Camera) -> None:
        """Turn the camera by the cursor's motion since the last call."""
        xpos = float(xpos)
        ypos = float(ypos)
        if self._first_mouse:
            self._last_x = xpos
            self._last_y = ypos
            self._first_mouse = False
        xoffset = xpos - self._last_x
        yoffset = self._last_y - ypos  # screen y grows downwards
        self._last_x = xpos
        self._last_y = ypos
        camera.process_mouse_movement(xoffset, yoffset)

    def process_input(
        self,
        keys: Collection[Key],
        buttons: Collection[MouseButton],
        delta_time: float,
        world: VoxelWorld,
        physics: Physics,
        camera: Camera,
    ) -> None:
        """Apply one frame of input given the keys and buttons currently held."""
        if Key.ESCAPE in keys:
            self.close_requested = True

        if Key.C in keys:
            if not self._c_held:
                self._c_held = True
                camera.flying_mode = not camera.flying_mode
                logger.info("Mode: %s", "FLYING" if camera.flying_mode else "WALKING")
        else:
            self._c_held = False

        for key, block in _HOTBAR.items():
            if key in keys:
                self._selected_block = block

        velocity = WALK_SPEED * delta_time
        if Key.LEFT_SHIFT in keys:
            velocity *= SPRINT_MULTIPLIER

        if camera.flying_mode:
            for key, direction in _FLY_KEYS.items():
                if key in keys:
                    camera.process_keyboard(direction, delta_time)
        else:
            front = Vec3(camera.front.x, 0.0, camera.front.z).normalized()
            right = Vec3(camera.right.x, 0.0, camera.right.z).normalized()
            move_dir = Vec3()
            if Key.W in keys:
                move_dir = move_dir + front
            if Key.S in keys:
                move_dir = move_dir - front
            if Key.A in keys:
                move_dir = move_dir - right
            if Key.D in keys:
                move_dir = move_dir + right
            physics.move(move_dir, velocity, world, camera)
            if Key.SPACE in keys:
                physics.jump(world, camera)

        if MouseButton.LEFT in buttons:
            if not self._left_held:
                self._left_held = True
                self._break_block(world, physics, camera)
        else:
            self._left_held = False

        if MouseButton.RIGHT in buttons:
            if not self._right_held:
                self._right_held = True
                self._place_block(world, physics, camera)
        else:
            self._right_held = False

    def _break_block(self, world: VoxelWorld, physics: Physics, camera: Camera) -> None:
        result = physics.raycast(camera.position, camera.front, REACH, world)
        if result.hit:
            world.set_block(result.x, result.y, result.z, AIR)

    def _place_block(self, world: VoxelWorld, physics: Physics, camera: Camera) -> None:
        result = physics.raycast(camera.position, camera.front, REACH, world)
        if not result.hit:
            return
        nx = result.x + int(result.normal.x)
        ny = result.y + int(result.normal.y)
        nz = result.z + int(result.normal.z)
        centre = Vec3(nx + 0.5, ny + 0.5, nz + 0.5)
        if camera.position.distance(centre) > MIN_PLACE_DISTANCE:
            world.set_block(nx, ny, nz, self._selected_block)