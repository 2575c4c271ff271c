"""Keyboard and mouse input queried through a window's key state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Protocol

from visol.keycodes import KeyState

ACTION_RELEASE = 0
"""Window-system action: the key or button was released."""
ACTION_PRESS = 1
"""Window-system action: the key or button was pressed."""
ACTION_REPEAT = 2
"""Window-system action: the key is held down and repeating."""


class KeySource(Protocol):
    """What a GLFW-style input needs from its window."""

    def get_key(self, key_code: int) -> int:
        """Return the last action recorded for ``key_code``."""

    def get_mouse_button(self, button: int) -> int:
        """Return the last action recorded for ``button``."""


def key_state_from_action(action: int) -> KeyState:
    """Translate a window-system action into a KeyState."""
    if action == ACTION_PRESS:
        return KeyState.PRESSED
    if action == ACTION_REPEAT:
        return KeyState.HELD
    if action == ACTION_RELEASE:
        return KeyState.RELEASED
    return KeyState.NONE


class KeyboardInput(ABC):
    """Keyboard queries; keys may be given as KeyCode or plain int."""

    def value(self, key: int) -> int:
        """Return 1 while the key is down, else 0."""
        return 1 if self.is_pressed(key) or self.is_held(key) else 0

    @abstractmethod
    def state(self, key: int) -> KeyState:
        """Return the current state of ``key``."""

    @abstractmethod
    def is_pressed(self, key: int) -> bool:
        """Return whether ``key`` is pressed."""

    @abstractmethod
    def is_held(self, key: int) -> bool:
        """Return whether ``key`` is reported as repeating."""

    @abstractmethod
    def is_released(self, key: int) -> bool:
        """Return whether ``key`` is released."""


class MouseInput(ABC):
    """Mouse button queries plus the last cursor position, motion and scroll."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.scroll_x = 0.0
        self.scroll_y = 0.0

    def value(self, button: int) -> int:
        """Return 1 while the button is down, else 0."""
        return 1 if self.is_pressed(button) or self.is_held(button) else 0

    @abstractmethod
    def state(self, button: int) -> KeyState:
        """Return the current state of ``button``."""

    @abstractmethod
    def is_pressed(self, button: int) -> bool:
        """Return whether ``button`` is pressed."""

    @abstractmethod
    def is_held(self, button: int) -> bool:
        """Return whether ``button`` is reported as repeating."""

    @abstractmethod
    def is_released(self, button: int) -> bool:
        """Return whether ``button`` is released."""

    def set_position(self, x: float, y: float) -> None:
        """Record the cursor position."""
        self.x = float(x)
        self.y = float(y)

    def set_offset(self, offset_x: float, offset_y: float) -> None:
        """Record the cursor motion since the previous position."""
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def set_scroll(self, scroll_x: float, scroll_y: float) -> None:
        """Record the last scroll amounts."""
        self.scroll_x = float(scroll_x)
        self.scroll_y = float(scroll_y)


class GlfwKeyboardInput(KeyboardInput):
    """Keyboard input read from a window's recorded key actions.

    Like GLFW, a window reports a repeating key as pressed, so ``is_held``
    is only true for sources that report repeats themselves.
    """

    def __init__(self, window: KeySource) -> None:
        self._window = window

    def _action(self, key: int) -> int:
        return self._window.get_key(int(key))

    def state(self, key: int) -> KeyState:
        return key_state_from_action(self._action(key))

    def is_pressed(self, key: int) -> bool:
        return self._action(key) == ACTION_PRESS

    def is_held(self, key: int) -> bool:
        return self._action(key) == ACTION_REPEAT

    def is_released(self, key: int) -> bool:
        return self._action(key) == ACTION_RELEASE


class GlfwMouseInput(MouseInput):
    """Mouse input read from a window's recorded button actions."""

    def __init__(self, window: KeySource) -> None:
        super().__init__()
        self._window = window

    def _action(self, button: int) -> int:
        return self._window.get_mouse_button(int(button))

    def state(self, button: int) -> KeyState:
        return key_state_from_action(self._action(button))

    def is_pressed(self, button: int) -> bool:
        return self._action(button) == ACTION_PRESS

    def is_held(self, button: int) -> bool:
        return self._action(button) == ACTION_REPEAT

    def is_released(self, button: int) -> bool:
        return self._action(button) == ACTION_RELEASE


@dataclass
class InputState:
    """The keyboard and mouse of one window."""

    keyboard: Optional[KeyboardInput] = None
    mouse: Optional[MouseInput] = None