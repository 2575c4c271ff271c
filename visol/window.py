"""Native windows, their factory and the input they feed."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from visol.events import (
    EventDispatcher,
    KeyHeldEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowResizedEvent,
)
from visol.input import (
    ACTION_PRESS,
    ACTION_RELEASE,
    ACTION_REPEAT,
    GlfwKeyboardInput,
    GlfwMouseInput,
    InputState,
    KeyboardInput,
    MouseInput,
)
from visol.keycodes import KeyCode, MouseButton
from visol.logger import core_logger

_CLEAR_COLOR = (0.3, 0.3, 0.6, 1.0)


class WindowPlatformSpec(Enum):
    """Which windowing back end to use."""

    GLFW = "glfw"
    SDL = "sdl"
    NONE = "none"


@dataclass
class WindowData:
    """State shared between a window and its event callbacks."""

    dispatcher: Optional[EventDispatcher] = None
    width: int = 0
    height: int = 0
    input: InputState = field(default_factory=InputState)


class NativeWindow(ABC):
    """A platform window that feeds events to a dispatcher."""

    @abstractmethod
    def init(self, config: Any, dispatcher: EventDispatcher) -> bool:
        """Open the window described by ``config``; False if that failed."""

    @abstractmethod
    def shutdown(self) -> None:
        """Close the window."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Clear and present the next frame."""

    @abstractmethod
    def poll_events(self) -> None:
        """Process pending window-system events."""

    @abstractmethod
    def should_close(self) -> bool:
        """Return whether the window has been asked to close."""

    @abstractmethod
    def input_state(self) -> InputState:
        """Return the window's keyboard and mouse."""


def _unsupported(spec: WindowPlatformSpec, what: str) -> ValueError:
    if spec is WindowPlatformSpec.SDL:
        return ValueError(f"SDL {what} not supported")
    return ValueError(f"Unknown {what} detected: {spec!r}")


def create_window(spec: WindowPlatformSpec) -> NativeWindow:
    """Create an unopened window for ``spec``."""
    if spec is WindowPlatformSpec.GLFW:
        return GlfwPlatformWindow()
    raise _unsupported(spec, "Window")


def create_keyboard(spec: WindowPlatformSpec, window: Any) -> KeyboardInput:
    """Create the keyboard input of ``window`` for ``spec``."""
    if spec is WindowPlatformSpec.GLFW:
        return GlfwKeyboardInput(window)
    raise _unsupported(spec, "Keyboard Input")


def create_mouse(spec: WindowPlatformSpec, window: Any) -> MouseInput:
    """Create the mouse input of ``window`` for ``spec``."""
    if spec is WindowPlatformSpec.GLFW:
        return GlfwMouseInput(window)
    raise _unsupported(spec, "Mouse Input")


def _key_table(key_module: Any) -> dict[int, int]:
    """Map pyglet key symbols to engine key codes."""
    pairs: list[tuple[str, KeyCode]] = [
        ("SPACE", KeyCode.SPACE),
        ("APOSTROPHE", KeyCode.APOSTROPHE),
        ("COMMA", KeyCode.COMMA),
        ("MINUS", KeyCode.MINUS),
        ("PERIOD", KeyCode.PERIOD),
        ("SLASH", KeyCode.SLASH),
        ("SEMICOLON", KeyCode.SEMICOLON),
        ("EQUAL", KeyCode.EQUAL),
        ("BRACKETLEFT", KeyCode.LEFT_BRACKET),
        ("BACKSLASH", KeyCode.BACKSLASH),
        ("BRACKETRIGHT", KeyCode.RIGHT_BRACKET),
        ("GRAVE", KeyCode.GRAVE_ACCENT),
        ("ESCAPE", KeyCode.ESCAPE),
        ("RETURN", KeyCode.ENTER),
        ("ENTER", KeyCode.ENTER),
        ("TAB", KeyCode.TAB),
        ("BACKSPACE", KeyCode.BACKSPACE),
        ("INSERT", KeyCode.INSERT),
        ("DELETE", KeyCode.DELETE),
        ("RIGHT", KeyCode.RIGHT),
        ("LEFT", KeyCode.LEFT),
        ("DOWN", KeyCode.DOWN),
        ("UP", KeyCode.UP),
        ("PAGEUP", KeyCode.PAGE_UP),
        ("PAGEDOWN", KeyCode.PAGE_DOWN),
        ("HOME", KeyCode.HOME),
        ("END", KeyCode.END),
        ("CAPSLOCK", KeyCode.CAPS_LOCK),
        ("SCROLLLOCK", KeyCode.SCROLL_LOCK),
        ("NUMLOCK", KeyCode.NUM_LOCK),
        ("PRINT", KeyCode.PRINT_SCREEN),
        ("PAUSE", KeyCode.PAUSE),
        ("NUM_DECIMAL", KeyCode.KP_DECIMAL),
        ("NUM_DIVIDE", KeyCode.KP_DIVIDE),
        ("NUM_MULTIPLY", KeyCode.KP_MULTIPLY),
        ("NUM_SUBTRACT", KeyCode.KP_SUBTRACT),
        ("NUM_ADD", KeyCode.KP_ADD),
        ("NUM_ENTER", KeyCode.KP_ENTER),
        ("NUM_EQUAL", KeyCode.KP_EQUAL),
        ("LSHIFT", KeyCode.LEFT_SHIFT),
        ("LCTRL", KeyCode.LEFT_CONTROL),
        ("LALT", KeyCode.LEFT_ALT),
        ("LWINDOWS", KeyCode.LEFT_SUPER),
        ("RSHIFT", KeyCode.RIGHT_SHIFT),
        ("RCTRL", KeyCode.RIGHT_CONTROL),
        ("RALT", KeyCode.RIGHT_ALT),
        ("RWINDOWS", KeyCode.RIGHT_SUPER),
        ("MENU", KeyCode.MENU),
    ]
    pairs += [(letter, KeyCode[letter]) for letter in string.ascii_uppercase]
    pairs += [(f"_{d}", KeyCode[f"NUM_{d}"]) for d in range(10)]
    pairs += [(f"NUM_{d}", KeyCode[f"KP_{d}"]) for d in range(10)]
    pairs += [(f"F{n}", KeyCode[f"F{n}"]) for n in range(1, 26)]
    table: dict[int, int] = {}
    for name, code in pairs:
        symbol = getattr(key_module, name, None)
        if symbol is not None:
            table.setdefault(symbol, int(code))
    return table


def _button_table(mouse_module: Any) -> dict[int, int]:
    """Map pyglet mouse buttons to engine button numbers."""
    pairs = [
        ("LEFT", MouseButton.BUTTON_LEFT),
        ("RIGHT", MouseButton.BUTTON_RIGHT),
        ("MIDDLE", MouseButton.BUTTON_MIDDLE),
        ("MOUSE4", MouseButton.BUTTON_4),
        ("MOUSE5", MouseButton.BUTTON_5),
    ]
    return {
        getattr(mouse_module, name): int(button)
        for name, button in pairs
        if getattr(mouse_module, name, None) is not None
    }


class GlfwPlatformWindow(NativeWindow):
    """A desktop window with an OpenGL 4.3 core context.

    Key and button actions are recorded as they arrive; like GLFW, a
    repeating key keeps reading as pressed.
    """

    def __init__(self) -> None:
        core_logger().info("Call constructure GLFW")
        self.data = WindowData()
        self._native: Any = None
        self._close_requested = False
        self._key_actions: dict[int, int] = {}
        self._button_actions: dict[int, int] = {}
        self._last_cursor: Optional[tuple[float, float]] = None

    # Key state queried by the GLFW-style inputs.
    def get_key(self, key_code: int) -> int:
        """Return the last recorded action of ``key_code``."""
        return self._key_actions.get(int(key_code), ACTION_RELEASE)

    def get_mouse_button(self, button: int) -> int:
        """Return the last recorded action of ``button``."""
        return self._button_actions.get(int(button), ACTION_RELEASE)

    def init(self, config: Any, dispatcher: EventDispatcher) -> bool:
        log = core_logger()
        try:
            import pyglet
            import pyglet.window
            from pyglet import gl
        except Exception as exc:  # no display or no GL available
            log.critical("GLFW Init failed: %s", exc)
            return False
        log.info("GLFW Init success")

        gl_config = gl.Config(
            major_version=4,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
        )
        try:
            native = pyglet.window.Window(
                width=config.width,
                height=config.height,
                caption=config.title,
                config=gl_config,
                resizable=True,
            )
        except Exception as exc:
            log.critical("Window created failed: %s", exc)
            return False
        log.info("Window created success")

        native.switch_to()
        self._native = native
        self._close_requested = False

        spec = getattr(config, "window_spec", WindowPlatformSpec.GLFW)
        self.data = WindowData(
            dispatcher=dispatcher,
            width=config.width,
            height=config.height,
            input=InputState(create_keyboard(spec, self), create_mouse(spec, self)),
        )
        self._attach_handlers(native, pyglet.window.key, pyglet.window.mouse)
        log.info("Glad load success")
        return True

    def _attach_handlers(self, native: Any, key_module: Any, mouse_module: Any) -> None:
        keys = _key_table(key_module)
        buttons = _button_table(mouse_module)

        def on_resize(width: int, height: int) -> None:
            self.on_resize(width, height)

        def on_key_press(symbol: int, modifiers: int) -> None:
            code = keys.get(symbol)
            if code is not None:
                self.on_key(code, ACTION_PRESS)

        def on_key_release(symbol: int, modifiers: int) -> None:
            code = keys.get(symbol)
            if code is not None:
                self.on_key(code, ACTION_RELEASE)

        def on_mouse_press(x: int, y: int, button: int, modifiers: int) -> None:
            mapped = buttons.get(button)
            if mapped is not None:
                self.on_mouse_button(mapped, ACTION_PRESS)

        def on_mouse_release(x: int, y: int, button: int, modifiers: int) -> None:
            mapped = buttons.get(button)
            if mapped is not None:
                self.on_mouse_button(mapped, ACTION_RELEASE)

        def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> None:
            self.on_cursor_pos(x, native.height - y)

        def on_mouse_drag(x: int, y: int, dx: int, dy: int, pressed: int, modifiers: int) -> None:
            self.on_cursor_pos(x, native.height - y)

        def on_mouse_scroll(x: int, y: int, scroll_x: float, scroll_y: float) -> None:
            self.on_scroll(scroll_x, scroll_y)

        def on_close() -> None:
            self._close_requested = True

        native.push_handlers(
            on_resize=on_resize,
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
            on_mouse_scroll=on_mouse_scroll,
            on_close=on_close,
        )

    def _dispatch(self, event: Any) -> None:
        if self.data.dispatcher is None:
            raise RuntimeError("window has no event dispatcher")
        self.data.dispatcher.dispatch(event)

    def on_resize(self, width: int, height: int) -> None:
        """Record the new size and dispatch a WindowResizedEvent."""
        self.data.width = width
        self.data.height = height
        self._dispatch(WindowResizedEvent(width, height))

    def on_key(self, key_code: int, action: int) -> None:
        """Record a key action and dispatch the matching key event."""
        key_code = int(key_code)
        if action == ACTION_PRESS:
            self._key_actions[key_code] = ACTION_PRESS
            self._dispatch(KeyPressedEvent(key_code))
        elif action == ACTION_REPEAT:
            self._key_actions[key_code] = ACTION_PRESS
            self._dispatch(KeyHeldEvent(key_code))
        elif action == ACTION_RELEASE:
            self._key_actions[key_code] = ACTION_RELEASE
            self._dispatch(KeyReleasedEvent(key_code))

    def on_mouse_button(self, button: int, action: int) -> None:
        """Record a button action and dispatch press or release events."""
        button = int(button)
        if action == ACTION_PRESS:
            self._button_actions[button] = ACTION_PRESS
            self._dispatch(MouseButtonPressedEvent(button))
        elif action == ACTION_RELEASE:
            self._button_actions[button] = ACTION_RELEASE
            self._dispatch(MouseButtonReleasedEvent(button))

    def on_cursor_pos(self, x: float, y: float) -> None:
        """Dispatch a MouseMovedEvent with motion since the last position."""
        if self._last_cursor is None:
            self._last_cursor = (x, y)
        last_x, last_y = self._last_cursor
        offset_x = x - last_x
        offset_y = y - last_y
        self._dispatch(MouseMovedEvent(x, y, offset_x, offset_y))
        mouse = self.data.input.mouse
        if mouse is not None:
            mouse.set_position(x, y)
            mouse.set_offset(offset_x, offset_y)
        self._last_cursor = (x, y)

    def on_scroll(self, scroll_x: float, scroll_y: float) -> None:
        """Dispatch a MouseScrolledEvent and record the scroll amounts."""
        self._dispatch(MouseScrolledEvent(scroll_x, scroll_y))
        mouse = self.data.input.mouse
        if mouse is not None:
            mouse.set_scroll(scroll_x, scroll_y)

    def shutdown(self) -> None:
        if self._native is not None:
            self._native.close()
            self._native = None

    def swap_buffers(self) -> None:
        if self._native is None:
            return
        from pyglet import gl

        gl.glClearColor(*_CLEAR_COLOR)
        self._native.clear()
        self._native.flip()

    def poll_events(self) -> None:
        if self._native is not None:
            self._native.dispatch_events()

    def should_close(self) -> bool:
        if self._native is None:
            return True
        return self._close_requested or bool(self._native.has_exit)

    def input_state(self) -> InputState:
        return self.data.input