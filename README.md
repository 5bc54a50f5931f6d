# dgengine

A small application framework built around named application states, with
the math a 3D program needs, the standard named colours, and a simulated
window, input system and render loop that can be driven entirely from code.

## What is inside

- `dgengine.scalar`: `minimum`, `maximum`, `clamp`, `lerp`, `absolute`,
  `sqr` and the constants `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`,
  `RAD_TO_DEG`.
- `dgengine.vectors`: immutable `Vector2`, `Vector3` and `Vector4` with
  negation, addition, subtraction and scaling (`Vector4` also has `r`, `g`,
  `b`, `a`), plus the `Vector3` helpers `dot`, `cross`, `magnitude`,
  `magnitude_sqr`, `distance`, `distance_sqr` and `normalize`.
- `dgengine.matrix`: row-major `Matrix4` (row-vector convention) with
  `translation`, `rotation_x`, `rotation_y`, `rotation_z`, `rotation_axis`,
  `rotation_quaternion` and `scaling` constructors, `ZERO` and `IDENTITY`,
  and the functions `transform_coord`, `transform_normal`, `transpose`,
  `determinant`, `adjoint`, `inverse`, `get_translation`, `get_right`,
  `get_up`, `get_look` and `get_scale`.
- `dgengine.quaternion`: immutable `Quaternion` with `conjugate`, `inverse`,
  `normalize`, `dot`, `magnitude`, the constructors `from_axis_angle`,
  `from_yaw_pitch_roll` and `from_rotation_matrix`, and the module functions
  `lerp` and `slerp`. `from_rotation_matrix` raises `ValueError` when it
  cannot pick a dominant component.
- `dgengine.colors`: the standard named colours as `Vector4` constants
  (`ALICE_BLUE`, `CRIMSON`, ...) and `by_name`, which ignores case, spaces,
  hyphens and underscores and raises `KeyError` for unknown names.
- `dgengine.debug`: `log` writes a line stamped with engine time to the
  `dgengine` logger at DEBUG level and returns it; `check` raises
  `DebugAssertionError` when a condition is false.
- `dgengine.timeutil`: `Clock` (time since first use and time between calls,
  truncated to milliseconds) and the module-wide `get_time` and
  `get_delta_time`.
- `dgengine.window`: `Window` with a message queue, `Message`,
  `MessageType` and `pack_lparam`. Handlers installed with `hook` see each
  message, newest first.
- `dgengine.input`: `InputSystem`, `KeyCode` and `MouseButton`. Key and
  mouse state come from window messages; `update` advances one frame.
- `dgengine.graphics`: `GraphicsSystem` and `Viewport`. It tracks the back
  buffer size, viewport, clear colour and vsync, and records what was drawn:
  `draw(vertices)` adds to the current frame, `end_render` stores it in
  `last_frame` and counts `frames_presented`.
- `dgengine.app`: `App`, `AppState`, `AppConfig` and `main_app()`.
- `dgengine.shapes`: `Vertex` and five shape states (`ShapeState`,
  `TriangleShapeState`, `SquareShapeState`, `HouseShapeState`,
  `RombusShapeState`) that draw fixed coloured triangles and switch between
  each other on the arrow keys.
- `dgengine.hello_window`, `dgengine.hello_shapes`: two demo programs, each
  with a `main()` that registers its states with `main_app()` and runs it.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Writing an application

```python
from dgengine.app import AppConfig, AppState, main_app


class Countdown(AppState):
    def initialize(self):
        self.frames = 3

    def update(self, delta_time):
        self.frames -= 1
        if self.frames <= 0:
            main_app().quit()


app = main_app()
app.add_state("Countdown", Countdown)
app.run(AppConfig(app_name="My App"))
```

The first state added becomes the current one; adding a name that already
exists keeps the existing state. `change_state` takes effect at the start of
the next frame: the old state is terminated and the new one initialized, and
unknown names are ignored. Each frame the loop processes window messages,
updates input, then calls the state's `update` and `render` between
`begin_render` and `end_render`. It stops when the window becomes inactive,
Escape is pressed, or `quit()` is called.

`App` takes an optional `window_factory` and `delta_time` callable, which
lets a test or tool supply its own `Window` and post messages to it.

## Driving input

```python
from dgengine.input import InputSystem, KeyCode
from dgengine.window import Message, MessageType, Window

window = Window()
window.initialize("Demo", 640, 480)
InputSystem.static_initialize(window)

window.post_message(Message(MessageType.KEYDOWN, wparam=KeyCode.SPACE))
window.process_messages()
inputs = InputSystem.get()
inputs.update()
print(inputs.is_key_pressed(KeyCode.SPACE))   # True

InputSystem.static_terminate()
```

## Math example

```python
from dgengine.vectors import Vector3, cross
from dgengine.matrix import Matrix4, inverse, transform_coord

m = Matrix4.translation(1.0, 2.0, 3.0)
print(transform_coord(Vector3(0.0, 0.0, 0.0), m))   # Vector3(x=1.0, y=2.0, z=3.0)
print(transform_coord(Vector3(1.0, 2.0, 3.0), inverse(m)))
print(cross(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)))
```

## What this package does not do

The window, input and graphics systems are simulations held in memory.
Nothing is shown on screen, no GPU is used, and no keyboard, mouse or
operating-system events arrive on their own: input reaches the program only
through messages posted to a `Window`. Rendering produces the recorded
vertex lists in `GraphicsSystem.last_frame`, not pixels. For the same reason
the demo `main()` functions keep looping until something posts a close or
Escape message or calls `quit()`, and no commands are installed for them.

## Tests

```
pytest
```