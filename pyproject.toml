[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelburden"
version = "0.1.0"
description = "Voxel world simulation: chunked terrain, face-culled meshes, player physics, raycasting and input handling"
requires-python = ">=3.10"
keywords = ["voxel", "chunk", "terrain", "perlin", "raycast", "physics", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelburden"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
