# voxelburden

This package holds the logic of a small block-building world. It draws
nothing. It covers the following:

- **Terrain generation** (`voxelburden.world.VoxelWorld`). The world is a 5 × 5
  grid of 32³ chunks, and Perlin noise (`voxelburden.noise.perlin_noise3`)
  shapes it. Each column has a grass top, two layers of dirt beneath it and
  stone below that.
- **Chunk meshing** (`voxelburden.chunk.Chunk`). The mesher skips any face that
  a neighbouring block in the same chunk hides. Each face gets texture
  coordinates from a 16 × 16 tile atlas (`texture_index`).
- **Free-look camera** (`voxelburden.camera.Camera`). The camera has yaw and
  pitch, with pitch clamped to ±89°. It has a flying mode, and
  `view_matrix()` gives the view matrix.
- **Walking physics** (`voxelburden.physics.Physics`):
  - gravity and jumping;
  - collision checks against the player's box;
  - a respawn at (16, 60, 16) when the player falls below y = −50.
- **Voxel raycasting** (`Physics.raycast`). A grid walk returns a
  `RaycastResult` with the block that was hit and the normal of the face it
  entered.
- **Input handling** (`voxelburden.controls.InputSystem`). It takes the sets of
  `Key` and `MouseButton` values held in the current frame.
  - **Toggles:** C switches between flying and walking. Escape sets
    `close_requested`.
  - **Hotbar:** 1, 2 and 3 choose grass, dirt or stone.
  - **Movement:** W, A, S, D, Space and Left Control move the player, and Left
    Shift makes walking faster.
  - **Mouse buttons:** the left button breaks the targeted block and the right
    button places a block against it.
  - **Mouse movement:** `on_mouse_movement` turns the camera.
- **Block outline** (`voxelburden.outline`). `outline_vertices()` gives the
  24 endpoints of the unit cube's edges. `outline_model_matrix(pos)` gives
  the matrix that puts a slightly enlarged outline around a block.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from voxelburden.world import VoxelWorld
from voxelburden.camera import Camera, Direction
from voxelburden.physics import Physics
from voxelburden.controls import InputSystem, Key, MouseButton
from voxelburden.vector import Vec3

world = VoxelWorld()              # generates terrain; VoxelWorld(generate=False) stays empty
camera = Camera(Vec3(16.0, 20.0, 40.0))
physics = Physics()
controls = InputSystem()

# Fly forward for a tenth of a second.
camera.process_keyboard(Direction.FORWARD, 0.1)

# Look down a little, then select dirt and break the targeted block.
camera.process_mouse_movement(0.0, -300.0)
controls.process_input({Key.NUM_2}, {MouseButton.LEFT}, 0.016, world, physics, camera)
print(controls.selected_block())  # 2

# Cast a ray from the camera to find the block it points at.
hit = physics.raycast(camera.position, camera.front, 8.0, world)
if hit.hit:
    print("looking at", hit.x, hit.y, hit.z, "face normal", hit.normal)

# Advance the walking physics by one step (it does nothing in flying mode).
physics.step(0.016, world, camera)

# Chunks within a render distance of 8 chunks of the player.
for cx, cz, chunk in world.visible_chunks(camera.position, 8):
    vertices = chunk.mesh        # list of (x, y, z, u, v) tuples
```

## Blocks and meshes

Block ids are `0` for air, `1` for grass, `2` for dirt and `3` for stone.

`Chunk.build_mesh()` rebuilds a chunk's triangle list and returns it. The list
has six `(x, y, z, u, v)` vertices for each visible face, and
`Chunk.vertex_count()` gives its length. `VoxelWorld.set_block` rebuilds the
mesh of the chunk it changes. When the changed block lies on a chunk border, it
also rebuilds the neighbouring chunk's mesh.

Matrices are returned as four row tuples (row-major). This applies to
`look_at`, `Camera.view_matrix` and `outline_model_matrix`.

## What this package does not do

The package has no window, rendering, shaders or texture loading, and it reads
no input devices. It has no game loop and no command to run. A program that
uses it must read the keyboard and mouse itself and pass them to
`InputSystem`. It must also draw the chunk meshes and outline geometry with a
graphics library of its own choice.