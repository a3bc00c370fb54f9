# teapotscene

Scene logic for a small lit 3D room that holds a teapot, a floor and five
walls. It is written with NumPy and uses no rendering API. It works out the
matrices, vertex data and uniform values that a renderer would upload. You
can connect it to any backend, or test it without a GPU.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `teapotscene.maths`

Functions that build homogeneous 4×4 matrices. The matrices are NumPy arrays
indexed `[row, column]` and applied to column vectors, so
`translate(v) @ point` moves `point` by `v`.

- `translate(v)` and `scale(v)` take a 3-component vector.
- `rotate(angle, v)` gives a rotation of `angle` radians about axis `v`.
  The axis is normalized first. A zero axis raises `ValueError`.
- `radians(angle)` converts degrees to radians with π taken as 3.1416.
- `as_vec3(v)` and `normalize(v)` both raise `ValueError` when the input is
  not a 3-vector. `normalize` also raises it for a zero vector.

### `teapotscene.camera`

- `look_at(eye, center, up)` returns a right-handed view matrix.
- `perspective(fov, aspect, near, far)` returns a right-handed projection
  that maps depth to [-1, 1]. It raises `ValueError` for a zero aspect, for
  equal near and far planes, or for a zero field of view.
- `Camera(eye, target)` starts with these settings:

  | Setting | Value |
  | --- | --- |
  | field of view | 45° |
  | aspect | 1024/768 |
  | near plane | 0.2 |
  | far plane | 100 |
  | `yaw` | −90° |
  | `pitch` | 0 |

  - `calculate_camera_vectors()` works out `front`, `right` and `up` from
    `yaw` and `pitch`.
  - `calculate_matrices()` refreshes those vectors first. It then fills
    `view` and `projection`.

### `teapotscene.model`

- `load_obj(path)` reads a triangulated Wavefront OBJ file. It returns
  unindexed arrays of vertices (N×3), uvs (N×2) and normals (N×3).
  - Faces must use the `v/vt/vn` form. Only the first three corners of a
    face line are used.
  - Lines with any other keyword are skipped.
  - It raises `ObjFormatError`, a subclass of `ValueError`, in these cases:
    a malformed number, a face with fewer than three corners, or an index
    that is out of range.
- `calculate_tangents(vertices, uvs)` computes one tangent and one
  bitangent per triangle and repeats them for each of the triangle's three
  vertices.
- `load_texture(path)` loads an image with Pillow into a `uint8` array with
  1, 3 or 4 channels. It raises `OSError` if the file cannot be read.
- `Texture` holds a `kind` (such as `"diffuse"`, `"normal"` or
  `"specular"`) and an `image`. It exposes:
  - `width`, `height` and `channels`
  - `format`: `RED`, `RGB` or `RGBA`
  - `uniform_name`: for example `diffuseMap`
- `Model(path)` loads a mesh and computes its tangents. Its members are:
  - the material coefficients `ka`, `kd`, `ks` and `ns`
  - `add_texture(path, kind)`, which loads a texture and attaches it to
    the model
  - `material_uniforms()`, which returns the coefficients keyed by uniform
    name: `ka`, `kd`, `ks` and `Ns`
  - `texture_units()`, which returns `(uniform name, unit, texture)` tuples
    in the order the textures were attached
  - `len(model)`, which gives the vertex count

### `teapotscene.light`

`Light` is an ordered, iterable collection of `LightSource` records. Each
record has a `LightType`: `POINT` = 1, `SPOT` = 2 or `DIRECTIONAL` = 3.

- Three methods add a light and return the new `LightSource`:
  - `add_point_light(position, colour, constant, linear, quadratic)`
  - `add_spot_light(position, direction, colour, constant, linear, quadratic, cos_phi)`
  - `add_directional_light(direction, colour)`
- `uniforms(view)` returns a dict. It holds `numLights`, plus these fields
  for each light:
  - `lightSources[i].position`
  - `.direction`
  - `.colour`
  - `.constant`
  - `.linear`
  - `.quadratic`
  - `.cosPhi`
  - `.type`

  Positions and directions are transformed into view space.
- `draw_transforms(view, projection)` returns `(light, mvp)` pairs. `mvp`
  places a marker scaled to 0.1 at the position of each light that is not
  directional.

### `teapotscene.scene`

- `SceneObject(name, position, rotation, scale, angle)` is one placed
  instance of a named model. `model_matrix()` returns
  `translate @ rotate @ scale`.
- `build_objects()` returns the objects in draw order: one teapot, the
  floor, and five walls.
- `build_lights()` returns the light rig: two point lights, a spot light
  pointing down, and a yellow directional light.
- `keyboard_input(camera, pressed_keys, delta_time)` moves the camera at
  5 units per second for each held key: `W`/`S` move forward and back,
  `A`/`D` move left and right. Keys are matched in any case. It returns
  `True` when `ESCAPE` is among the keys.
- `mouse_input(camera, x_pos, y_pos)` turns the camera by 0.005 radians
  per pixel of cursor offset from the centre of a 1024×768 window.
- `frame_matrices(camera, objects)` sets the camera target and recomputes
  its matrices. It returns an `(object, mv, mvp)` tuple for each object.

## Example

```python
from teapotscene.camera import Camera
from teapotscene.scene import build_lights, build_objects, frame_matrices, keyboard_input

camera = Camera((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
objects = build_objects()
lights = build_lights()

quit_requested = keyboard_input(camera, {"W"}, 0.016)  # step forward one frame

for obj, mv, mvp in frame_matrices(camera, objects):
    print(obj.name, mvp.shape)

uniforms = lights.uniforms(camera.view)
print(uniforms["numLights"])
```

## What this package does not do

The package has no window, no event loop, no shader compilation, no GPU
buffer or texture upload, and no drawing. It also provides no command to
run. It only computes the data a renderer would need. Opening a window,
reading input and sending these values to the GPU are left to the calling
code.