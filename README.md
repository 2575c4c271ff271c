# visol

`visol` is a small application framework. It provides:

- **Typed event dispatch** (`visol.events`). You register listeners per event class. A dispatch stops at the first listener that returns `True`.
- **Input state** (`visol.input`, `visol.keycodes`). It holds keyboard and mouse state, with GLFW-numbered key and button codes.
- **A window layer** (`visol.window`). It is built on pyglet and turns window callbacks into engine events.
- **An application base class** (`visol.application`). It owns a window and a dispatcher and runs the frame loop.
- **Loggers**:
  - `visol.logger` provides the engine and client loggers.
  - `visol.basic_logger` provides a synchronous file-and-console logger.
  - `visol.async_logger` provides a logger that writes on a background thread, buffers its writes and rotates its file.
- **3D vector and matrix helpers** (`visol.vecmath`). It covers vectors, 4×4 matrices, perspective projection, clipping tests and spherical conversions.
- **An ASCII rasterizer** (`visol.raster`). It is a character canvas with a depth buffer, and it can draw a rotating wire-frame cube.

## Installation

```
pip install visol
```

To run the test suite:

```
pip install "visol[test]"
pytest
```

## Commands

| Command | What it does |
|---|---|
| `visol` | Starts the sample application `ViRobot`: it opens an 800×600 window titled "ViSolEngine version 1.0.0" and traces window, key and mouse events on stdout until the window is closed. |
| `visol-log-demo [log_file]` | Runs the asynchronous logger demonstration. It writes to `log_file` (default `app_log.log`) and shows a custom formatter, a small rotation size, level filtering and error logging. |
| `visol-cube [--frames N] [--fov DEG] [--distance D] [--delay SECONDS]` | Renders a rotating wire-frame cube as ASCII art in the terminal. It runs until interrupted, or for `N` frames if `--frames` is given. The defaults are a 90° field of view, a viewer distance of 3.0 and a 0.03 s delay between frames. |

`visol` needs a display with OpenGL 4.3. If the window cannot be opened, the failure is logged and the command exits. When stdin is a terminal, the command waits for Enter before it returns.

## Events

```python
from visol.events import EventDispatcher, KeyPressedEvent, WindowResizedEvent

dispatcher = EventDispatcher()

def on_resize(event):
    print("resized:", event.width, event.height)
    return True  # handled: later listeners are not called

def on_key(event):
    print("key:", event.key_code)
    return False  # let other listeners see it too

dispatcher.add_event_listener(WindowResizedEvent, on_resize)
dispatcher.add_event_listener(KeyPressedEvent, on_key)

dispatcher.dispatch(WindowResizedEvent(1024, 768))
dispatcher.dispatch(KeyPressedEvent(65))
```

The event classes are frozen dataclasses derived from `EventContext`:

- `WindowResizedEvent`
- `KeyPressedEvent`, `KeyHeldEvent` and `KeyReleasedEvent`
- `MouseMovedEvent` and `MouseScrolledEvent`
- `MouseButtonPressedEvent`, `MouseButtonHeldEvent` and `MouseButtonReleasedEvent`

Listeners are matched by exact class. Dispatching a class that has no listeners raises `UnknownEventError`. Passing a type that is not an `EventContext` raises `TypeError`. `dispatcher.clear()` removes every listener.

Each event class is keyed by an identifier from `visol.ids.get_type_uuid`. The identifier is a random, non-zero 64-bit value that stays the same for that class across calls.

## Key and button codes

`visol.keycodes` defines the following enumerations:

- `KeyCode`: keyboard keys.
- `MouseButton`: mouse buttons.
- `KeyState`: one of `NONE`, `PRESSED`, `HELD` or `RELEASED`.

`visol.input.key_state_from_action` maps a raw window action to a `KeyState`. The actions are `ACTION_RELEASE`, `ACTION_PRESS` and `ACTION_REPEAT`.

`GlfwKeyboardInput` and `GlfwMouseInput` read those actions from any object that has `get_key` and `get_mouse_button` methods. `MouseInput` also keeps the last cursor position, the cursor offset and the scroll amounts.

## Windows and applications

`visol.window.create_window(WindowPlatformSpec.GLFW)` returns a `GlfwPlatformWindow`. The window's `on_resize`, `on_key`, `on_mouse_button`, `on_cursor_pos` and `on_scroll` methods do two things:

- They update the window's `WindowData`.
- They dispatch the matching event.

You can call these methods directly to feed the window synthetic input.

To write an application, subclass `visol.application.Application` and implement `on_init_client` and `on_shutdown_client`. Then call `init()`, `run()` and `shutdown()` on it. `create_application()` builds the sample `ViRobot`.

## Logging

```python
from visol.logger import init_loggers, core_logger, client_logger, log_info, log_error

init_loggers()
core_logger().info("engine up")
client_logger().info("client up")

log_info("Hello from installed logging library!")   # "[INFO] ..." on stdout
log_error("Oops, something went wrong.")            # "[ERROR] ..." on stderr
```

`visol.basic_logger.BasicLogger` writes each record at once. The record goes to its file and, in colour, to the console. ERROR and CRITICAL records go to stderr.

`visol.async_logger.AsyncLogger` works as follows:

- It formats each record on the caller's thread.
- A worker thread writes the records in batches.
- A CRITICAL record is written immediately.
- The file is renamed to `<name>.<timestamp>.bak` once it would grow past `max_file_size`.

You can replace the line format with the `formatter` property.

Both loggers take a `LogLevel` minimum (`min_level`). Both work as context managers and should be closed when you are done. If you do not pass `file`, `func` or `line`, the caller's location is recorded. `log_if_level(logger, level, message)` logs the message only if its level passes the logger's minimum.

## Vector math

```python
import math
from visol.vecmath import Mat4, Vec2, Vec3, perspective_rh, relative_direction

relative_direction(Vec2(1.0, 0.0), Vec2(0.0, 1.0))   # Direction.LEFT

m = Mat4.rotation_y(math.pi / 2) @ Mat4.translation(1.0, 0.0, 0.0)
m.transform(Vec3(0.0, 0.0, 0.0))

perspective_rh(Vec3(0.5, 0.5, -3.0), math.radians(90), 1.0, 0.1, 100.0)
```

Other helpers in `visol.vecmath`:

- `project_to_screen` and `direction`.
- `perspective_lh`.
- `clip_point` and `clip_line_near_far`.
- `cartesian_to_spherical`, `spherical_to_cartesian` and `spherical_to_cartesian_r`.
- `angles_to_vec3`, `angles_to_vec3_opengl` and `angles_to_vec3_directx`, which take a `ViewAngles`.

## ASCII rendering

`visol.raster.Canvas` is a character grid with a depth buffer. Its drawing methods are:

- `put_pixel` and `put_pixel_depth`.
- `draw_line` and `draw_line_depth`, which draw Bresenham lines.

`render()` returns the grid as text.

The module also provides these functions:

- `render_cube_frame(canvas, angle, fov, viewer_distance)` draws one frame of the cube.
- `clip_segment` clips a segment to the near and far planes. It returns `None` when the segment lies wholly outside them.
- `rotate_y` rotates a point about the y axis.
- `project_simple` applies a simple perspective divide.

## What it does not do

- Only the pyglet-backed window exists. Asking for `WindowPlatformSpec.SDL` or `NONE` raises `ValueError`.
- The window only clears itself each frame. There is no renderer, shader, mesh or scene support.
- The window never dispatches mouse "held" events.