import pytest

from visol.events import (
    EventAction,
    EventContext,
    EventDispatcher,
    KeyHeldEvent,
    KeyPressedEvent,
    MouseMovedEvent,
    UnknownEventError,
    WindowResizedEvent,
)


def test_dispatch_reaches_listener_with_event():
    dispatcher = EventDispatcher()
    seen = []
    dispatcher.add_event_listener(
        WindowResizedEvent, lambda e: seen.append((e.width, e.height)) or True
    )
    dispatcher.dispatch(WindowResizedEvent(800, 600))
    assert seen == [(800, 600)]


def test_dispatch_stops_at_first_handled():
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: calls.append("a") or False)
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: calls.append("b") or True)
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: calls.append("c") or True)
    dispatcher.dispatch(KeyPressedEvent(65))
    assert calls == ["a", "b"]


def test_dispatch_runs_all_when_none_handles():
    dispatcher = EventDispatcher()
    calls = []
    for name in "xyz":
        dispatcher.add_event_listener(
            KeyPressedEvent, lambda e, n=name: calls.append(n) or False
        )
    dispatcher.dispatch(KeyPressedEvent(32))
    assert calls == ["x", "y", "z"]


def test_listeners_are_separated_by_type():
    dispatcher = EventDispatcher()
    pressed, held = [], []
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: pressed.append(e.key_code))
    dispatcher.add_event_listener(KeyHeldEvent, lambda e: held.append(e.key_code))
    dispatcher.dispatch(KeyHeldEvent(70))
    assert pressed == []
    assert held == [70]


def test_unknown_event_raises():
    dispatcher = EventDispatcher()
    with pytest.raises(UnknownEventError):
        dispatcher.dispatch(MouseMovedEvent(1.0, 2.0, 0.0, 0.0))


def test_clear_forgets_listeners():
    dispatcher = EventDispatcher()
    dispatcher.add_event_listener(KeyPressedEvent, lambda e: True)
    dispatcher.clear()
    with pytest.raises(UnknownEventError):
        dispatcher.dispatch(KeyPressedEvent(65))


def test_non_event_type_rejected():
    dispatcher = EventDispatcher()
    with pytest.raises(TypeError):
        dispatcher.add_event_listener(int, lambda e: True)


def test_action_checks_event_type():
    action = EventAction(KeyPressedEvent, lambda e: True)
    with pytest.raises(TypeError):
        action.execute(KeyHeldEvent(1))


def test_action_returns_callback_truth():
    action = EventAction(KeyPressedEvent, lambda e: e.key_code == 10)
    assert action.execute(KeyPressedEvent(10)) is True
    assert action.execute(KeyPressedEvent(11)) is False


def test_custom_event_subclass():
    class Ping(EventContext):
        pass

    dispatcher = EventDispatcher()
    got = []
    dispatcher.add_event_listener(Ping, lambda e: got.append(e) or True)
    event = Ping()
    dispatcher.dispatch(event)
    assert got == [event]


def test_mouse_moved_fields():
    event = MouseMovedEvent(3.5, 4.5, 0.5, -1.0)
    assert (event.x, event.y, event.offset_x, event.offset_y) == (3.5, 4.5, 0.5, -1.0)