import pytest

from voxelburden.noise import perlin_noise3


@pytest.mark.parametrize("point", [(0, 0, 0), (3, 7, 0), (-5, 12, 2), (255, 1, -9)])
def test_zero_on_lattice_points(point):
    assert perlin_noise3(*point) == pytest.approx(0.0, abs=1e-12)


def test_deterministic():
    points = [(1.3, 2.7, 0.0), (0.45, 9.8, 0.0), (-3.2, 4.6, 1.5)]
    first = [perlin_noise3(*p) for p in points]
    for _ in range(3):
        again = [perlin_noise3(*p) for p in points]
        assert again == first
    assert all(-1.1 <= value <= 1.1 for value in first)
    assert len(set(first)) == len(points)


def test_bounded():
    samples = [
        perlin_noise3(i * 0.37, j * 0.53, k * 0.29)
        for i in range(20)
        for j in range(20)
        for k in range(3)
    ]
    assert all(-1.1 <= s <= 1.1 for s in samples)


def test_not_constant():
    samples = {round(perlin_noise3(i * 0.05, 0.0, 0.0), 9) for i in range(1, 200)}
    assert len(samples) > 50


def test_repeats_every_256_units():
    for x, z in [(0.25, 0.5), (10.75, 3.125), (-4.5, 1.25)]:
        assert perlin_noise3(x + 256, z, 0.0) == pytest.approx(
            perlin_noise3(x, z, 0.0), abs=1e-9
        )


def test_continuous():
    a = perlin_noise3(2.5, 3.5, 0.0)
    b = perlin_noise3(2.5 + 1e-6, 3.5, 0.0)
    assert abs(a - b) < 1e-4