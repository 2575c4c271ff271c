"""The application base class, its configuration and the program entry."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from visol.events import (
    EventDispatcher,
    KeyHeldEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonHeldEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowResizedEvent,
)
from visol.input import InputState
from visol.logger import TRACE, client_logger, core_logger, init_loggers
from visol.window import NativeWindow, WindowPlatformSpec, create_window


@dataclass
class ApplicationConfiguration:
    """Size, title and windowing back end of an application's window."""

    width: int = 0
    height: int = 0
    title: str = ""
    window_spec: WindowPlatformSpec = WindowPlatformSpec.GLFW


def _key_char(key_code: int) -> str:
    return chr(key_code % 256)


class Application(ABC):
    """Owns a window and an event dispatcher and runs the frame loop.

    Subclasses supply the client hooks ``on_init_client`` and
    ``on_shutdown_client``.
    """

    def __init__(
        self,
        config: ApplicationConfiguration,
        window: Optional[NativeWindow] = None,
    ) -> None:
        self.config = config
        self.dispatcher = EventDispatcher()
        self.window = window if window is not None else create_window(config.window_spec)
        self.input_state: Optional[InputState] = None

    def init(self) -> bool:
        """Open the window and register the engine's event listeners."""
        if not self.window.init(self.config, self.dispatcher):
            core_logger().critical("Window spec created failed")
            return False

        add = self.dispatcher.add_event_listener
        add(WindowResizedEvent, self._on_window_resized)
        self.input_state = self.window.input_state()
        add(KeyPressedEvent, self._on_key_pressed)
        add(KeyHeldEvent, self._on_key_held)
        add(KeyReleasedEvent, self._on_key_released)
        add(MouseMovedEvent, self._on_mouse_moved)
        add(MouseScrolledEvent, self._on_mouse_scrolled)
        add(MouseButtonPressedEvent, self._on_mouse_button_pressed)
        add(MouseButtonHeldEvent, self._on_mouse_button_held)
        add(MouseButtonReleasedEvent, self._on_mouse_button_released)
        return True

    def run(self) -> None:
        """Run the client hooks around the frame loop until the window closes."""
        core_logger().info(
            "App is running: %s %s %s ",
            self.config.width,
            self.config.height,
            self.config.title,
        )
        self.on_init_client()
        while not self.window.should_close():
            self.window.swap_buffers()
            self.window.poll_events()
        self.on_shutdown_client()

    def shutdown(self) -> None:
        """Close the window."""
        self.window.shutdown()

    @abstractmethod
    def on_init_client(self) -> bool:
        """Called once before the frame loop starts."""

    @abstractmethod
    def on_shutdown_client(self) -> None:
        """Called once after the frame loop ends."""

    def _on_window_resized(self, event: WindowResizedEvent) -> bool:
        core_logger().log(
            TRACE, "Window resize --- width: %s --- height: %s", event.width, event.height
        )
        return True

    def _on_key_pressed(self, event: KeyPressedEvent) -> bool:
        core_logger().log(TRACE, "Key %s is pressed", _key_char(event.key_code))
        return False

    def _on_key_held(self, event: KeyHeldEvent) -> bool:
        core_logger().log(TRACE, "Key %s is held", _key_char(event.key_code))
        return False

    def _on_key_released(self, event: KeyReleasedEvent) -> bool:
        core_logger().log(TRACE, "Key %s is released", _key_char(event.key_code))
        return False

    def _on_mouse_moved(self, event: MouseMovedEvent) -> bool:
        core_logger().log(
            TRACE,
            "Mouse position: %s, %s. Mouse relative: %s, %s",
            event.x,
            event.y,
            event.offset_x,
            event.offset_y,
        )
        return False

    def _on_mouse_scrolled(self, event: MouseScrolledEvent) -> bool:
        core_logger().log(
            TRACE, "Mouse scroll X: %s, Mouse Scroll Y: %s", event.scroll_x, event.scroll_y
        )
        return False

    def _on_mouse_button_pressed(self, event: MouseButtonPressedEvent) -> bool:
        core_logger().log(TRACE, "Mouse button %s is pressed", event.button)
        return False

    def _on_mouse_button_held(self, event: MouseButtonHeldEvent) -> bool:
        core_logger().log(TRACE, "Mouse button %s is held", event.button)
        return False

    def _on_mouse_button_released(self, event: MouseButtonReleasedEvent) -> bool:
        core_logger().log(TRACE, "Mouse button %s is released", event.button)
        return False


class ViRobot(Application):
    """The sample client application."""

    def __init__(
        self,
        config: ApplicationConfiguration,
        window: Optional[NativeWindow] = None,
    ) -> None:
        super().__init__(config, window=window)
        client_logger().info("ViRobot client constructor init")

    def on_init_client(self) -> bool:
        client_logger().info("ViRobot is init")
        return True

    def on_shutdown_client(self) -> None:
        client_logger().info("ViRobot is shutdown")


def create_application() -> Application:
    """Build the sample client with an 800x600 window."""
    print("----- Start CreateApplication -----", flush=True)
    config = ApplicationConfiguration(
        width=800,
        height=600,
        title="ViSolEngine version 1.0.0",
        window_spec=WindowPlatformSpec.GLFW,
    )
    return ViRobot(config)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the loggers, run the application and shut it down."""
    init_loggers()
    application = create_application()
    client_logger().info("After Create Application")
    if application.init():
        client_logger().info("Entry init")
        application.run()
    application.shutdown()

    stdin = sys.stdin
    if stdin is not None and stdin.isatty():
        stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())