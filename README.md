# sowa

The core pieces of a small 2D game engine, as a plain Python library:

- `sowa.vector2`, `sowa.rect`, `sowa.mathutil`: the `Vector2` and `Rect`
  types, and `clamp`, `lerp` and `atan2`.
- `sowa.matrix`: 4×4 transform matrices as numpy arrays —
  `calculate_transform`, `calculate_transform_3d`, `decompose_transform`
  and `calculate_ortho`.
- `sowa.color`: `Color`, built from floats (`rgba_float`), 8-bit channels
  (`rgb`) or hue/saturation/value (`hsv`).
- `sowa.timer`: `Timer`, which calls its callbacks once its timeout has
  passed and then stops.
- `sowa.ids`: `RandomNumberGenerator`, `UUIDGenerator` and
  `LinearIDGenerator`.
- `sowa.filesystem`: `FileSystem`, which routes `scheme://path` requests to
  file servers — `FolderFileServer` (a directory on disk, writable) and
  `DataFileServer` (files held in memory).
- `sowa.debug`: `log`, `info`, `warn`, `error` and `print_line` write
  timestamped, coloured lines to standard output and keep them; read them
  back with `get_lines()`, drop them with `clear_lines()`.
- `sowa.document`: `Document`, a key/value mapping with typed getters that
  fall back to a default, and a YAML text form (`to_yaml` / `from_yaml`).
- `sowa.input`: `InputState`, which tracks key and mouse-button states,
  named actions, the cursor and the scroll wheel.
- `sowa.resource`, `sowa.resource_registry`: the `Resource` base class and
  `ResourceRegistry`, which holds live resources by id and creates
  resources by registered type name.
- `sowa.sprite_sheet_animation`: `SpriteSheet` and `SpriteSheetAnimation`.
- `sowa.mesh`: `parse_obj` and `Mesh`, for Wavefront OBJ geometry.
- `sowa.image_texture`: `ImageTexture`, which decodes an image into RGBA
  pixels.
- `sowa.project_settings`: `ProjectSettings`, read from and written to
  `res://project.sowa`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from sowa.vector2 import Vector2
from sowa.color import Color
from sowa.timer import Timer

v = (Vector2(3, 4) + Vector2(1, 1)) * 2
print(v.length())

print(Color.hsv(120, 1, 1))          # Color(0, 255, 0, 255)

timer = Timer(0.5, True)
timer.on_timeout(lambda: print("done"))
timer.update(0.6)                    # prints "done" and stops the timer
```

### Files

```python
from sowa.filesystem import FileData, FileSystem

fs = FileSystem()
fs.register_file_server("res", fs.new_folder_file_server("res", "res"))

data = fs.new_data_file_server()
data.add_file("hello.txt", FileData.new_static(b"hello"))
fs.register_file_server("data", data)

print(fs.load("data://hello.txt").data)    # b'hello'
print(fs.load("data://missing"))           # None
print(fs.read_directory("res://"))         # sorted FileEntry list
```

`load` returns `None` when the scheme has no server or the file cannot be
read.

### Documents

```python
from sowa.document import Document
from sowa.vector2 import Vector2

doc = Document()
doc.set("Name", "player")
doc.set_vec2("Position", Vector2(10, 20))
text = doc.to_yaml()

loaded = Document.from_yaml(text)
print(loaded.get("Name", ""))                      # player
print(loaded.get_vec2("Position", Vector2()))      # Vector2(x=10.0, y=20.0)
print(loaded.get("Missing", 5))                    # 5
```

### Input

Input state is fed by whatever window layer you use, through the
`InputState` callbacks:

```python
from sowa.input import InputState, Key, KeyAction

state = InputState()
state.set_action_keys("left", [Key.A])
state.set_action_keys("right", [Key.D])
state.key_callback(Key.D, KeyAction.PRESS)
print(state.get_action_weight("left", "right"))   # 1.0
print(state.is_action_just_pressed("right"))      # True
state.poll()                                      # "just pressed" becomes "down"
```

`InputState(poll_events=...)` takes an optional function that `poll()` calls
to pump the window's events. Listeners registered with `on_event` receive an
`Event` for every key, button, mouse-move and scroll callback.

### Resources

```python
from sowa.resource_registry import ResourceRegistry
from sowa.sprite_sheet_animation import SpriteSheet, SpriteSheetAnimation

registry = ResourceRegistry()
registry.add_resource_type(SpriteSheetAnimation, "SpriteSheetAnimation")

anim = registry.create_resource("SpriteSheetAnimation")
anim.set_animation("walk", SpriteSheet(grid_size=(4, 1), frames=[(0, 0), (1, 0)]))
registry.add_resource(anim)            # assigns a random id if it has none
print(registry.get_resource(anim.rid) is anim)   # True
```

`Mesh` and `ImageTexture` read their files through a `FileSystem` given to
their constructor:

```python
from sowa.image_texture import ImageTexture
from sowa.mesh import Mesh

mesh = Mesh(fs)
mesh.load("res://teapot.obj")     # vertex_data: position, normal, uv per vertex

texture = ImageTexture(fs)
texture.load("res://tile.png")    # pixels: RGBA rows, bottom row first
```

### Project settings

```python
from sowa.project_settings import ProjectSettings

settings = ProjectSettings()
store = {}
settings.load(fs, store)          # fields missing from the file keep their defaults
settings.name = "My Game"
settings.save(fs, store)          # needs a writable "res" server; True on success
```

## What this package does not do

It has no window, renderer or audio output and no application loop or
command to run. `ImageTexture` and `Mesh` hold decoded pixels and vertex
data in memory but upload nothing to a graphics device; `ImageTexture.id`
is a counter, not a GPU handle. There is no scene tree, no node types and no
editor. Feeding `InputState` from real keyboard and mouse events is up to
the caller.