"""Voxel world simulation: terrain, chunk meshing, camera, physics, raycasting and input."""

__version__ = "0.1.0"