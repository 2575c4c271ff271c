import pytest

from visol.keycodes import KeyCode, KeyState, MouseButton


def test_letters_match_ascii():
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        assert KeyCode(ord(letter)) is KeyCode[letter]
        assert chr(KeyCode[letter]) == letter


def test_digits_match_ascii():
    for digit in range(10):
        assert KeyCode(ord(str(digit))).name == f"NUM_{digit}"


def test_function_keys_are_contiguous():
    names = [KeyCode(KeyCode.F1 + n).name for n in range(25)]
    assert names == [f"F{n}" for n in range(1, 26)]


def test_keypad_digits_are_contiguous():
    names = [KeyCode(KeyCode.KP_0 + n).name for n in range(10)]
    assert names == [f"KP_{n}" for n in range(10)]


def test_last_is_alias_of_menu():
    assert KeyCode(348) is KeyCode.LAST
    assert KeyCode(348) is KeyCode.MENU
    assert max(KeyCode) is KeyCode.MENU


def test_mouse_aliases():
    assert MouseButton(0) is MouseButton.BUTTON_LEFT
    assert MouseButton(1) is MouseButton.BUTTON_RIGHT
    assert MouseButton(2) is MouseButton.BUTTON_MIDDLE
    assert MouseButton(7) is MouseButton.BUTTON_LAST
    assert MouseButton(0).name == "BUTTON_1"
    assert len(list(MouseButton)) == 8


def test_key_states_are_ordered():
    assert list(KeyState) == sorted(KeyState)
    assert KeyState(0) is KeyState.NONE


def test_unknown_key_code_raises():
    with pytest.raises(ValueError):
        KeyCode(1000)