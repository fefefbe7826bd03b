"""Gradient (Perlin) noise in three dimensions."""

from __future__ import annotations

import math
import random

_WRAP = 256


def _build_permutation() -> tuple[int, ...]:
    table = list(range(_WRAP))
    random.Random(0).shuffle(table)
    return tuple(table + table)


_PERM = _build_permutation()


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def perlin_noise3(x: float, y: float, z: float) -> float:
    """Smooth noise value roughly in [-1, 1], repeating every 256 units."""
    fx, fy, fz = math.floor(x), math.floor(y), math.floor(z)
    xi, yi, zi = fx & 255, fy & 255, fz & 255
    x -= fx
    y -= fy
    z -= fz
    u, v, w = _fade(x), _fade(y), _fade(z)

    p = _PERM
    a = p[xi] + yi
    aa = p[a] + zi
    ab = p[a + 1] + zi
    b = p[xi + 1] + yi
    ba = p[b] + zi
    bb = p[b + 1] + zi

    return _lerp(
        w,
        _lerp(
            v,
            _lerp(u, _grad(p[aa], x, y, z), _grad(p[ba], x - 1, y, z)),
            _lerp(u, _grad(p[ab], x, y - 1, z), _grad(p[bb], x - 1, y - 1, z)),
        ),
        _lerp(
            v,
            _lerp(u, _grad(p[aa + 1], x, y, z - 1), _grad(p[ba + 1], x - 1, y, z - 1)),
            _lerp(
                u,
                _grad(p[ab + 1], x, y - 1, z - 1),
                _grad(p[bb + 1], x - 1, y - 1, z - 1),
            ),
        ),
    )