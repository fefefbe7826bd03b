"""Wireframe outline geometry for the targeted block."""

from __future__ import annotations

from .vector import Matrix4, Vec3

LINE_WIDTH = 3.0
OUTLINE_SCALE = 1.002
OUTLINE_OFFSET = -0.001

_BOX_LINES: tuple[tuple[float, float, float], ...] = (
    (0, 0, 0), (1, 0, 0), (1, 0, 0), (1, 1, 0),
    (1, 1, 0), (0, 1, 0), (0, 1, 0), (0, 0, 0),
    (0, 0, 1), (1, 0, 1), (1, 0, 1), (1, 1, 1),
    (1, 1, 1), (0, 1, 1), (0, 1, 1), (0, 0, 1),
    (0, 0, 0), (0, 0, 1), (1, 0, 0), (1, 0, 1),
    (1, 1, 0), (1, 1, 1), (0, 1, 0), (0, 1, 1),
)


def outline_vertices() -> tuple[Vec3, ...]:
    """Endpoints of the twelve unit-cube edges, two vertices per line."""
    return tuple(Vec3(float(x), float(y), float(z)) for x, y, z in _BOX_LINES)


def outline_model_matrix(pos: Vec3) -> Matrix4:
    """Model matrix placing a slightly enlarged outline on the block at pos (row-major)."""
    s = OUTLINE_SCALE
    shift = s * OUTLINE_OFFSET
    return (
        (s, 0.0, 0.0, pos.x + shift),
        (0.0, s, 0.0, pos.y + shift),
        (0.0, 0.0, s, pos.z + shift),
        (0.0, 0.0, 0.0, 1.0),
    )