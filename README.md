# sceneforge

sceneforge is a small scene graph for Python with no dependencies. It models
a world of actors that own components, with a lifecycle of initialise, begin
play, tick and destroy. It can also:

- read Wavefront OBJ/MTL files into mesh data and keep a binary cache of the
  result,
- pick objects with rays,
- lay out text and sprite-sheet animation as textured quads,
- run a small command console like the one in an editor.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `sceneforge.geometry` holds the basic maths types:
  - `Vector` is immutable and has `dot`, `cross`, `length` and
    `safe_normal`.
  - `Quat`, with `euler_to_quat`, `quat_to_euler` and `rotate_vector`.
    Angles are in degrees: roll is x, pitch is y, yaw is z.
  - `BoundingBox.intersect(origin, direction)` returns the distance to the
    box, or `None`.
  - `intersect_ray_triangle` returns the distance to the triangle, or `None`.
  - The records `VertexSimple` and `VertexTexture`.
  - The unit quads `QUAD_VERTICES` and `QUAD_TEXTURE_VERTICES` and their
    indices.
- `sceneforge.components` holds the component classes:
  - `ActorComponent` has the lifecycle methods `initialize_component`,
    `begin_play`, `tick_component`, `end_play`, `destroy_component`,
    `activate` and `deactivate`. It raises `RuntimeError` when a step is out
    of order.
  - `SceneComponent` adds a relative location, rotation and scale. It has
    the world transforms `world_location`, `world_rotation` and
    `world_scale`, direction vectors, and `setup_attachment`.
  - `PrimitiveComponent` adds a bounding box.
  - `LightComponent` adds a colour, a radius and a thin box you can pick.
  - `EndPlayReason` is the enum of reasons a component ends play.
  - Every `check_ray_intersection(origin, direction)` returns a pair
    `(hit_count, distance_or_None)`.
- `sceneforge.material`: `ObjMaterialInfo` holds material properties read
  from MTL. `Material` keeps its own copy of them, and its `set_transparency`
  method marks values below 1.0 as transparent.
- `sceneforge.obj_parser` turns an `.obj` file and its `.mtl` library into
  `StaticMeshRenderData`:
  - `parse_obj` reads the raw data into an `ObjInfo`.
  - `parse_material` reads the material library.
  - `combine_material_index` links each `MaterialSubset` to its material.
  - `convert_to_static_mesh` merges identical v/vt/vn corners.
  - `compute_bounding_box` finds the mesh bounds.
  - Faces may be triangles or quads. Quads are split into two triangles.
- `sceneforge.assets`:
  - `save_static_mesh` / `load_static_mesh` write and read a little-endian
    binary copy of the render data.
  - `ObjManager` caches render data, static meshes and materials.
    `load_static_mesh_asset(path)` first uses its cache. Next it tries
    `path + ".bin"` when that file exists. Otherwise it parses the OBJ and
    writes the `.bin` file next to it.
  - `StaticMesh` holds render data and one `StaticMaterial` slot per
    material.
  - `default_manager()` returns a shared `ObjManager`.
- `sceneforge.mesh_components` holds the mesh components:
  - `MeshComponent` has per-slot material overrides.
  - `StaticMeshComponent` picks against the triangles of its mesh.
  - `CubeComponent` loads its mesh from an OBJ file when it is initialised.
    The default path is `Assets/helloBlender.obj`.
  - `SphereComponent`.
  - `SkySphereComponent` advances its texture offsets on every tick.
- `sceneforge.sprites` holds the 2D pieces:
  - `Texture` records a name and a pixel size.
  - `BillboardComponent`.
  - `ParticleSubUVComponent` steps through the cells of a sprite sheet. It
    moves to the next cell when the time it has added up reaches 75. If it
    is not set to loop, it deactivates after the last cell.
- `sceneforge.text`:
  - `TextRenderComponent` lays out one quad per character, taken from a
    font sheet. It covers space, A–Z, a–z, 0–9 and Hangul syllables. Any
    other character logs a warning to the console.
  - `UUIDRenderComponent` is a small label placed above its parent.
- `sceneforge.viewport`:
  - `Viewport` places one pane of a four-way split. Use
    `resize_to_swap_chain(width, height)` to place it from the screen size,
    `resize_to_splits(top, bottom, left, right)` to place it from splitter
    rectangles, or `resize_to_rect(rect)` to place it from a single `Rect`.
  - `ViewportClient` is an abstract base class with a `draw` method.
- `sceneforge.actor`:
  - `Actor` owns components and drives them. Use `add_component`,
    `component_by_class`, `set_root_component` and the transform setters.
    It also has editor labels: `actor_label` defaults to the class name
    followed by the actor's UUID. On `begin_play` an actor attaches a UUID
    label to itself.
  - `StaticMeshActor` has a `StaticMeshComponent` as its root.
- `sceneforge.world`:
  - `World` owns a persistent `Level`. Use `spawn_actor`, `destroy_actor`,
    `tick` and `release`. Spawned actors begin play on the next tick.
  - `WorldContext` and `WorldType` hold the bookkeeping for a world.
- `sceneforge.console`: `Console` keeps a log of `LogEntry` items. Each has
  a `LogLevel`, and `visible_entries()` filters them by level and text. The
  console understands the commands `clear`, `help`, `stat fps`,
  `stat memory` and `stat none`. `get_console()` returns a shared instance.

## Examples

Build a world and destroy an actor:

```python
from sceneforge.world import World
from sceneforge.actor import StaticMeshActor
from sceneforge.geometry import Vector

world = World()
world.initialize()

actor = world.spawn_actor(StaticMeshActor)
actor.set_actor_location(Vector(1.0, 2.0, 3.0))

world.tick(0.016)          # begin_play runs on the first tick, then tick
world.destroy_actor(actor)
```

Load a mesh through the asset manager. This raises `OSError` if the file
cannot be read:

```python
from sceneforge.assets import default_manager

manager = default_manager()
mesh = manager.create_static_mesh("Assets/cube.obj")
print(mesh.used_materials())
```

Pick with a ray:

```python
from sceneforge.components import LightComponent
from sceneforge.geometry import Vector

light = LightComponent()
hits, distance = light.check_ray_intersection(Vector(0, 0, -5), Vector(0, 0, 1))
```

Run console commands:

```python
from sceneforge.console import get_console

console = get_console()
console.submit("help")
console.submit("stat fps")
for entry in console.visible_entries():
    print(entry.level.name, entry.message)
```

## What it does not do

- sceneforge draws nothing. It has no renderer, GPU buffers, shaders or
  window.
- It does not decode image files. A `Texture` carries only a name and a
  size.
- It handles no mouse or keyboard input, and has no camera or gizmo
  control.
- It has no culling structures such as an octree, a k-d tree or a BVH.
- The console keeps the flags for the stat overlay but does not display
  them.
- There is no command-line program.