import pytest

from okeslconf.keys import (
    KEY_NAME_COUNT,
    KeyCode,
    MouseButton,
    key_name,
    scancode_for_name,
)


@pytest.mark.parametrize(
    "value, button",
    [
        (1, "LEFT"),
        (2, "MIDDLE"),
        (3, "RIGHT"),
        (4, "WHEEL_UP"),
        (5, "WHEEL_DOWN"),
    ],
)
def test_mouse_buttons_follow_header_order(value, button):
    assert MouseButton(value).name == button


@pytest.mark.parametrize("value", [0, 6])
def test_mouse_button_outside_header_raises(value):
    with pytest.raises(ValueError):
        MouseButton(value)


def test_letters_and_digits():
    assert key_name(KeyCode.KEY_A) == "a"
    assert key_name(KeyCode.KEY_Z) == "z"
    assert key_name(KeyCode.KEY_1) == "1"
    assert key_name(KeyCode.KEY_0) == "0"


@pytest.mark.parametrize(
    "code, name",
    [
        (KeyCode.KEY_RETURN, "return"),
        (KeyCode.KEY_SPACE, "space"),
        (KeyCode.KEY_F3, "f3"),
        (KeyCode.KEY_F4, "f4"),
        (KeyCode.KEY_KP_ENTER, "kp_enter"),
        (KeyCode.KEY_NUMLOCKCLEAR, "numlockclear"),
        (KeyCode.KEY_KP_EQUALSAS400, "kp_equalsas400"),
        (KeyCode.KEY_THOUSANDSSEPARATOR, "thousandsseparator"),
        (KeyCode.KEY_KP_HEXADECIMAL, "kp_hexadecimal"),
        (KeyCode.KEY_RCTRL, "rctrl"),
        (KeyCode.KEY_RGUI, "rgui"),
    ],
)
def test_named_keys(code, name):
    assert key_name(code) == name
    assert scancode_for_name(name) == code


def test_table_starts_at_four_with_letter_a():
    assert key_name(4) == "a"
    assert [key_name(c) for c in range(4)] == ["", "", "", ""]


@pytest.mark.parametrize("code", list(range(165, 176)) + [222, 223])
def test_gaps_have_empty_names(code):
    assert key_name(code) == ""


def test_every_table_key_round_trips():
    for code in KeyCode:
        if code is KeyCode.KEY_UNKNOWN or code >= KEY_NAME_COUNT:
            continue
        name = key_name(code)
        assert name
        assert scancode_for_name(name) is code


def test_names_are_unique_and_lowercase():
    names = [key_name(c) for c in range(KEY_NAME_COUNT)]
    non_empty = [n for n in names if n]
    assert len(non_empty) == len(set(non_empty))
    assert all(n == n.lower() for n in non_empty)


def test_scancode_for_name_returns_keycode():
    result = scancode_for_name("lshift")
    assert result is KeyCode.KEY_LSHIFT


@pytest.mark.parametrize("code", [-1, KEY_NAME_COUNT, KeyCode.KEY_MODE, KeyCode.KEY_APP2])
def test_out_of_range_scancode_raises(code):
    with pytest.raises(ValueError):
        key_name(code)


@pytest.mark.parametrize("name", ["", "spacebar", "A", "mode", "nosuchkey"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        scancode_for_name(name)