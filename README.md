# softy

`softy` is a small software renderer written in plain Python. It has its own
vector and matrix types, a parent/child `Transform` hierarchy, a perspective
`Camera`, shaders and materials, frustum culling and clipping against the
homogeneous clip planes, and a rasterizer that draws triangle wireframes into a
`ColorBuffer` with Bresenham lines.

It needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `softy` command renders the spinning demo cube off screen and writes the
last frame as a binary PPM image, then prints the frame rate it achieved:

```
softy
softy --frames 30 --width 320 --height 240 --dt 0.0166 --output cube.ppm
```

Options:

- `--frames` number of frames to render (default 1); the cube turns 60 degrees
  per second of simulated time
- `--width`, `--height` image size in pixels (default 800 x 600)
- `--dt` seconds of simulated time per frame (default 1/60)
- `--output` file to write (default `softy.ppm`)

## Library use

```python
from softy.app import cube_mesh, render_scene, write_ppm

target = render_scene(frames=10, width=320, height=240, dt=1 / 60)
write_ppm(target, "cube.ppm")
```

The building blocks can be used on their own:

```python
from softy.vector import Vec, cross, dot, normalize
from softy.matrix import Mat
from softy.transform import Transform

x = Vec(1.0, 0.0, 0.0)
y = Vec(0.0, 1.0, 0.0)
assert cross(x, y) == Vec(0.0, 0.0, 1.0)

m = Mat.identity(4)
v = Vec(1.0, 2.0, 3.0, 1.0)
assert (v * m).equals(v)

t = Transform()
t.position = Vec(0.0, 0.0, -0.5)
t.look_at(Vec(0.0, 0.0, 0.0), True)
```

Vectors are row vectors and multiply matrices from the left (`v * m`). A
transform's matrix (`Transform.trs`) is scale, then rotation, then
translation; rotations are (pitch, yaw, roll) in degrees. `Vec.equals` and
`Mat.equals` compare floats with an epsilon and ULP tolerance, while `==`
compares exactly.

A scene is drawn through a pipeline:

```python
from softy.app import cube_mesh
from softy.buffer import ColorBuffer, ConstantBuffer
from softy.camera import Camera
from softy.color import Color
from softy.material import Material
from softy.pipeline import ForwardRenderPipeline
from softy.shader import unlit_color_shader
from softy.transform import Transform
from softy.vector import Vec

target = ColorBuffer(800, 600)
camera = Camera(target)
camera.transform.position = Vec(0.0, 0.0, -0.5)
camera.transform.look_at(Vec(0.0, 0.0, 0.0), True)

cb = ConstantBuffer()
cb.set_data(ConstantBuffer(
    view_matrix=camera.view_matrix(),
    projection_matrix=camera.projection_matrix(),
))

material = Material(unlit_color_shader())
material.set_property("Color_", Color.red())

cube = Transform()
cube.scale = Vec.one(3) * 2.0

pipeline = ForwardRenderPipeline(cb)
mesh = cube_mesh()
pipeline.add_object(mesh.vertex_buffer, mesh.index_buffer, cube.trs, material)
pipeline.render(camera)
```

`ForwardRenderPipeline.render` sets the constant buffer's world matrix to each
queued object's transform, runs the material's vertex shader and hands the
result to `softy.rasterizer.rasterize`, then empties the queue.

`softy.events` holds a small `EventChannel` that delivers an event to the one
handler subscribed for its type, and a `WindowCreatedEvent` type.

## What it does not do

- It opens no window and shows nothing on screen; images are only written to
  PPM files with `write_ppm`.
- Triangles are drawn as red wireframes only. The fragment shader passed to
  `rasterize` is not called, so faces are not filled and the material's colour
  does not reach the image.
- `DepthBuffer` exists but the rasterizer does no depth testing.