# voxelcraft

The core of a block-based voxel world, as a library with no window or
graphics driver attached. It covers:

- **Configuration** (`voxelcraft.config`): the `Config` settings for window
  size, fullscreen, render distance and field of view, read from a
  whitespace-separated `config.txt` with `parse_config` or `load_config`,
  plus the world constants `CHUNK_SIZE`, `CHUNK_AREA`, `CHUNK_VOLUME` and
  `WATER_LEVEL`.
- **Geometry** (`voxelcraft.geometry`): `Entity`, `AABB`, `VectorXZ`,
  `ViewFrustum` culling with its `Plane`s, model/view/projection matrices as
  numpy arrays (`make_model_matrix`, `make_view_matrix`,
  `make_projection_matrix`), and the stepping `Ray` used to pick blocks.
- **Noise and randomness** (`voxelcraft.noise`, `voxelcraft.rng`,
  `voxelcraft.interpolation`): deterministic octave value noise for height
  maps; `Random`, which draws uniform integers from an MT19937 engine by
  default or from `MinStdRand` when asked; `shared_random()` for one
  time-seeded generator per process; and smooth and bilinear interpolation.
- **Blocks and items** (`voxelcraft.blocks`, `voxelcraft.items`): `BlockId`,
  `BlockData` read from `.block` files into a `BlockDatabase`, `Material`s
  and `ItemStack`s.
- **Chunks and meshing** (`voxelcraft.grid`, `voxelcraft.section`,
  `voxelcraft.chunk`, `voxelcraft.mesh`, `voxelcraft.mesh_builder`,
  `voxelcraft.atlas`): 16³ `ChunkSection`s stacked into `Chunk` columns, with
  face-culled vertex, texture-coordinate, light and index lists built per
  section by `ChunkMeshBuilder`, and tile coordinates from a `TextureAtlas`.
- **World generation** (`voxelcraft.biomes`, `voxelcraft.terrain`,
  `voxelcraft.structures`): desert, grassland, light forest, ocean and
  temperate forest biomes, the `ClassicOverWorldGenerator` and
  `SuperFlatGenerator`, and oak trees, palm trees and cacti.
- **The world itself** (`voxelcraft.chunk_manager`, `voxelcraft.world`,
  `voxelcraft.player`, `voxelcraft.controls`): chunk loading and unloading,
  spawn search, digging and placing blocks through `PlayerDigEvent`, a
  `Player` with gravity, flying, collision and a five-slot inventory, and
  `Keyboard`/`ToggleKey` input state fed from `KeyEvent`s.

## Reading a configuration

```python
from voxelcraft.config import parse_config

config = parse_config("renderdistance 8\nfov 70\nwindowsize 1920 1080\n")
```

Keys the text does not mention keep their defaults (1280 × 720 window,
windowed, render distance 16, field of view 90). Unknown keys are skipped,
and reading stops at the first missing or malformed value. `load_config(path)`
reads a file and returns the defaults if the file does not exist.

## Block definitions

A `BlockDatabase` needs a `BlockData` for every `BlockId`. Build one in code,
or load `<Name>.block` files (`Air.block`, `Grass.block`, ...) with
`BlockDatabase.from_directory(directory)`. A block file is a series of
keyword lines — `TexTop`, `TexSide`, `TexBottom`, `TexAll`, `Id`, `Opaque`,
`Collidable`, `MeshType`, `ShaderType` — each followed by its integer values.

## A small world

```python
from voxelcraft.blocks import BlockData, BlockDatabase, BlockId
from voxelcraft.terrain import SuperFlatGenerator
from voxelcraft.world import World

see_through = {BlockId.Air, BlockId.Water, BlockId.Rose, BlockId.TallGrass, BlockId.DeadShrub}
database = BlockDatabase({
    block: BlockData(id=block, is_opaque=block not in see_through,
                     is_collidable=block not in see_through)
    for block in BlockId
})

world = World(database, generator=SuperFlatGenerator())
world.chunk_manager.load_chunk(0, 0)
world.get_block(3, 4, 3)   # BlockId.Grass
world.get_block(3, 0, 3)   # BlockId.Stone
```

`World.update()` handles queued events such as `PlayerDigEvent` and remeshes
the sections they touched; `load_pass` loads and meshes chunks around a
camera position; `render_world` drops chunks beyond the render distance and
returns the sections inside a `ViewFrustum`.

## Terrain heights

```python
from voxelcraft.noise import NoiseGenerator

generator = NoiseGenerator(1234)
height = generator.get_height(3, 7, 10, 12)
```

The same seed and coordinates always give the same height, so terrain can be
regenerated chunk by chunk in any order. Positions at negative world
coordinates give one block below the water level.

## Interpolation

```python
from voxelcraft.interpolation import bilinear_interpolation

value = bilinear_interpolation(0.0, 10.0, 10.0, 20.0, 0.0, 8.0, 0.0, 8.0, 4.0, 4.0)
```

## What this package does not do

There is no command to run and no game loop. Nothing opens a window, reads
a real keyboard or mouse, compiles shaders, loads images or draws anything:
meshes are produced as plain lists of numbers for a renderer you supply, and
`Keyboard`, `ToggleKey` and `Player.rotate` are fed by your own input code.
Chunks live only in memory; nothing is saved to disk. No `.block` files ship
with the package.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.