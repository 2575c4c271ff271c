import pytest

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
    UnknownEventError,
    WindowResizedEvent,
)
from visol.input import (
    ACTION_PRESS,
    ACTION_RELEASE,
    ACTION_REPEAT,
    GlfwKeyboardInput,
    GlfwMouseInput,
    InputState,
)
from visol.keycodes import KeyCode, KeyState, MouseButton
from visol.window import (
    GlfwPlatformWindow,
    NativeWindow,
    WindowData,
    WindowPlatformSpec,
    create_keyboard,
    create_mouse,
    create_window,
)

EVENT_TYPES = [
    WindowResizedEvent,
    KeyPressedEvent,
    KeyHeldEvent,
    KeyReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    MouseButtonPressedEvent,
    MouseButtonHeldEvent,
    MouseButtonReleasedEvent,
]


@pytest.fixture
def bound():
    dispatcher = EventDispatcher()
    received = []

    def record(event):
        received.append(event)
        return False

    for event_type in EVENT_TYPES:
        dispatcher.add_event_listener(event_type, record)
    window = create_window(WindowPlatformSpec.GLFW)
    window.data = WindowData(
        dispatcher=dispatcher,
        input=InputState(
            create_keyboard(WindowPlatformSpec.GLFW, window),
            create_mouse(WindowPlatformSpec.GLFW, window),
        ),
    )
    return window, received


def test_create_window_glfw():
    window = create_window(WindowPlatformSpec.GLFW)
    assert isinstance(window, GlfwPlatformWindow)
    assert isinstance(window, NativeWindow)
    assert window.should_close() is True
    assert window.data.dispatcher is None


@pytest.mark.parametrize("spec", [WindowPlatformSpec.SDL, WindowPlatformSpec.NONE])
def test_unsupported_specs_raise(spec):
    window = GlfwPlatformWindow()
    with pytest.raises(ValueError):
        create_window(spec)
    with pytest.raises(ValueError):
        create_keyboard(spec, window)
    with pytest.raises(ValueError):
        create_mouse(spec, window)


def test_factories_build_glfw_inputs(bound):
    window, _ = bound
    keyboard = create_keyboard(WindowPlatformSpec.GLFW, window)
    mouse = create_mouse(WindowPlatformSpec.GLFW, window)
    assert type(keyboard) is GlfwKeyboardInput
    assert type(mouse) is GlfwMouseInput

    window.on_key(int(KeyCode.A), ACTION_PRESS)
    window.on_mouse_button(int(MouseButton.BUTTON_RIGHT), ACTION_PRESS)
    assert keyboard.is_pressed(KeyCode.A) is True
    assert mouse.is_pressed(MouseButton.BUTTON_RIGHT) is True


def test_unopened_window_should_close():
    assert GlfwPlatformWindow().should_close() is True


def test_input_state_is_window_data_input(bound):
    window, _ = bound
    assert window.input_state() is window.data.input


def test_resize_updates_data_and_dispatches(bound):
    window, received = bound
    window.on_resize(800, 600)
    assert (window.data.width, window.data.height) == (800, 600)
    assert received == [WindowResizedEvent(800, 600)]


def test_key_press_repeat_release(bound):
    window, received = bound
    keyboard = window.input_state().keyboard
    code = int(KeyCode.A)

    window.on_key(code, ACTION_PRESS)
    assert keyboard.is_pressed(KeyCode.A)
    window.on_key(code, ACTION_REPEAT)
    assert keyboard.is_pressed(KeyCode.A)
    assert not keyboard.is_held(KeyCode.A)
    window.on_key(code, ACTION_RELEASE)
    assert keyboard.state(KeyCode.A) is KeyState.RELEASED

    assert received == [
        KeyPressedEvent(code),
        KeyHeldEvent(code),
        KeyReleasedEvent(code),
    ]


def test_unknown_key_action_dispatches_nothing(bound):
    window, received = bound
    window.on_key(int(KeyCode.B), -1)
    assert received == []
    assert window.get_key(int(KeyCode.B)) == ACTION_RELEASE


def test_mouse_button_press_and_release(bound):
    window, received = bound
    mouse = window.input_state().mouse
    left = int(MouseButton.BUTTON_LEFT)

    window.on_mouse_button(left, ACTION_PRESS)
    assert mouse.is_pressed(MouseButton.BUTTON_LEFT)
    assert mouse.value(MouseButton.BUTTON_LEFT) == 1
    window.on_mouse_button(left, ACTION_REPEAT)
    window.on_mouse_button(left, ACTION_RELEASE)
    assert mouse.is_released(MouseButton.BUTTON_LEFT)

    assert received == [MouseButtonPressedEvent(left), MouseButtonReleasedEvent(left)]


def test_cursor_motion_offsets(bound):
    window, received = bound
    mouse = window.input_state().mouse
    first = (10.0, 20.0)
    second = (15.5, 27.25)

    window.on_cursor_pos(*first)
    window.on_cursor_pos(*second)

    assert received[0] == MouseMovedEvent(first[0], first[1], 0.0, 0.0)
    assert received[1] == MouseMovedEvent(
        second[0], second[1], second[0] - first[0], second[1] - first[1]
    )
    assert (mouse.x, mouse.y) == second
    assert (mouse.offset_x, mouse.offset_y) == (
        second[0] - first[0],
        second[1] - first[1],
    )


def test_scroll_dispatches_and_records(bound):
    window, received = bound
    window.on_scroll(0.0, -2.5)
    assert received == [MouseScrolledEvent(0.0, -2.5)]
    mouse = window.input_state().mouse
    assert (mouse.scroll_x, mouse.scroll_y) == (0.0, -2.5)


def test_event_without_listener_raises():
    window = GlfwPlatformWindow()
    window.data = WindowData(dispatcher=EventDispatcher())
    with pytest.raises(UnknownEventError):
        window.on_resize(640, 480)


def test_event_without_dispatcher_raises():
    window = GlfwPlatformWindow()
    with pytest.raises(RuntimeError):
        window.on_scroll(1.0, 1.0)


def test_window_data_defaults():
    data = WindowData()
    assert data.dispatcher is None
    assert (data.width, data.height) == (0, 0)
    assert data.input == InputState()