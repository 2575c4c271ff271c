"""Event types and a type-keyed event dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from visol.ids import get_type_uuid
from visol.logger import core_logger

E = TypeVar("E", bound="EventContext")


class EventContext:
    """Base class of every event."""


@dataclass(frozen=True)
class WindowResizedEvent(EventContext):
    width: int
    height: int


@dataclass(frozen=True)
class KeyPressedEvent(EventContext):
    key_code: int


@dataclass(frozen=True)
class KeyHeldEvent(EventContext):
    key_code: int


@dataclass(frozen=True)
class KeyReleasedEvent(EventContext):
    key_code: int


@dataclass(frozen=True)
class MouseMovedEvent(EventContext):
    x: float
    y: float
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class MouseScrolledEvent(EventContext):
    scroll_x: float
    scroll_y: float


@dataclass(frozen=True)
class MouseButtonPressedEvent(EventContext):
    button: int


@dataclass(frozen=True)
class MouseButtonHeldEvent(EventContext):
    button: int


@dataclass(frozen=True)
class MouseButtonReleasedEvent(EventContext):
    button: int


class UnknownEventError(LookupError):
    """Raised when an event is dispatched that has no listener registered."""


def _check_event_type(event_type: object) -> None:
    if not (isinstance(event_type, type) and issubclass(event_type, EventContext)):
        raise TypeError(f"{event_type!r} is not an EventContext type")


@dataclass(frozen=True)
class EventAction(Generic[E]):
    """A callback bound to one event type."""

    event_type: type[E]
    callback: Callable[[E], bool]

    def __post_init__(self) -> None:
        _check_event_type(self.event_type)

    def execute(self, event: EventContext) -> bool:
        """Run the callback; True means the event was handled."""
        if not isinstance(event, self.event_type):
            raise TypeError(
                f"expected {self.event_type.__name__}, got {type(event).__name__}"
            )
        return bool(self.callback(event))


class EventDispatcher:
    """Registers callbacks per event type and dispatches events to them."""

    def __init__(self) -> None:
        self._actions: dict[int, list[EventAction]] = {}

    def add_event_listener(
        self, event_type: type[E], callback: Callable[[E], bool]
    ) -> None:
        """Register ``callback`` for events of exactly ``event_type``."""
        _check_event_type(event_type)
        event_id = get_type_uuid(event_type)
        core_logger().info("Create event with ID %d", event_id)
        self._actions.setdefault(event_id, []).append(EventAction(event_type, callback))

    def dispatch(self, event: EventContext) -> None:
        """Call listeners in registration order until one returns True."""
        _check_event_type(type(event))
        actions = self._actions.get(get_type_uuid(type(event)))
        if actions is None:
            raise UnknownEventError(f"unknown event type {type(event).__name__}")
        for action in actions:
            if action.execute(event):
                break

    def clear(self) -> None:
        """Remove every registered listener."""
        for actions in self._actions.values():
            actions.clear()
        self._actions.clear()