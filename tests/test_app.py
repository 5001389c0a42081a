import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from okeslconf.app import EditorApp, main, tk_keysym_scancode
from okeslconf.controls import ControlsConfig
from okeslconf.cvars import CvarRegistry
from okeslconf.keys import KeyCode, key_name


@pytest.fixture
def registry(tmp_path):
    definitions = tmp_path / "cvars.json"
    definitions.write_text(
        json.dumps(
            {
                "show_fps": {"type": "bool", "default": True},
                "zoom": {"type": "float", "default": 1.5, "min": 0.5, "max": 4.0},
            }
        ),
        encoding="utf-8",
    )
    reg = CvarRegistry()
    reg.load_definitions(definitions)
    return reg


@pytest.fixture
def app(registry):
    return EditorApp(None, registry, ControlsConfig.default())


@pytest.mark.parametrize(
    "keysym, expected",
    [
        ("a", KeyCode.KEY_A),
        ("A", KeyCode.KEY_A),
        ("7", KeyCode.KEY_7),
        ("F4", KeyCode.KEY_F4),
        ("Control_R", KeyCode.KEY_RCTRL),
        ("Prior", KeyCode.KEY_PAGEUP),
        ("space", KeyCode.KEY_SPACE),
        ("KP_Add", KeyCode.KEY_KP_PLUS),
    ],
)
def test_keysym_scancode(keysym, expected):
    assert tk_keysym_scancode(keysym) == expected


def test_unknown_keysym_has_no_scancode():
    assert tk_keysym_scancode("NoSuchKey") is None


@pytest.mark.parametrize("keysym", ["q", "Up", "Shift_L", "F24", "KP_0", "Return", "slash"])
def test_mapped_keysyms_have_key_names(keysym):
    assert key_name(tk_keysym_scancode(keysym)) != ""
    assert key_name(tk_keysym_scancode(keysym)).isascii()


def test_default_paths(app):
    assert app.cvars_path == Path("cfg/cvars.cfg")
    assert app.controls_path == Path("cfg/controls.cfg")


def test_key_ignored_when_not_capturing(app):
    before = app.controls.dumps()
    assert app.on_key(SimpleNamespace(keysym="F5")) is False
    assert app.controls.dumps() == before


def test_key_binds_waiting_command(app):
    app.capture.start("ofbrake")
    assert app.capture.is_waiting_for("ofbrake")
    assert app.on_key(SimpleNamespace(keysym="F5")) is True
    assert app.controls.bindings["ofbrake"].key == key_name(KeyCode.KEY_F5)
    assert app.controls.bindings["ofbrake"].modifiers == "+"
    assert not app.capture.is_waiting_for("ofbrake")


def test_unknown_key_keeps_waiting(app):
    app.capture.start("turn")
    assert app.on_key(SimpleNamespace(keysym="NoSuchKey")) is False
    assert app.capture.is_waiting_for("turn")


def test_save_controls_writes_dump(app, tmp_path):
    app.controls_path = tmp_path / "controls.cfg"
    assert app.save_controls() is True
    assert app.controls_path.read_text(encoding="utf-8") == app.controls.dumps()


def test_saved_controls_reload(app, tmp_path):
    app.capture.start("brake")
    app.on_key(SimpleNamespace(keysym="s"))
    app.controls_path = tmp_path / "controls.cfg"
    app.save_controls()
    reloaded = ControlsConfig.default()
    reloaded.load(app.controls_path)
    assert reloaded.bindings["brake"].key == app.controls.bindings["brake"].key


def test_save_cvars_writes_dump(app, registry, tmp_path):
    app.cvars_path = tmp_path / "cvars.cfg"
    assert app.save_cvars() is True
    assert app.cvars_path.read_text(encoding="utf-8") == registry.dumps()


def test_save_into_missing_directory_fails(app, tmp_path):
    app.cvars_path = tmp_path / "missing" / "cvars.cfg"
    app.controls_path = tmp_path / "missing" / "controls.cfg"
    assert app.save_cvars() is False
    assert app.save_controls() is False
    assert not (tmp_path / "missing").exists()


def test_main_fails_without_definitions(tmp_path):
    missing = tmp_path / "nothing.json"
    assert main(["--definitions", str(missing), "--cvars", str(tmp_path / "c.cfg")]) == 1