import json

import pytest

from okeslconf.cvars import (
    Cvar,
    CvarRegistry,
    CvarType,
    format_color,
    parse_color,
)

DEFINITIONS = {
    "show_fps": {"type": "bool", "default": True},
    "zoom": {"type": "float", "default": 0.25, "min": 0.0, "max": 2.0},
    "lod": {"type": "int", "default": 3, "min": 1, "max": 8},
    "sky": {"type": "color", "default": "#FF0000FF"},
}


@pytest.fixture
def json_path(tmp_path):
    path = tmp_path / "cvars.json"
    path.write_text(json.dumps(DEFINITIONS), encoding="utf-8")
    return path


@pytest.fixture
def registry(json_path):
    reg = CvarRegistry()
    reg.load_definitions(json_path)
    return reg


def test_parse_color_pins_channels():
    assert parse_color("FF0000FF") == (1.0, 0.0, 0.0, 1.0)


def test_format_color_pins_text():
    assert format_color((1.0, 0.0, 0.0, 1.0)) == "FF0000FF"


def test_color_extremes_round_trip():
    for text in ("00000000", "FFFFFFFF", "FF00FF00"):
        assert format_color(parse_color(text)) == text


def test_parse_color_rejects_garbage():
    with pytest.raises(ValueError):
        parse_color("zz")


def test_definitions_take_defaults(registry):
    assert registry["show_fps"].bool_value is True
    assert registry["lod"].int_value == 3
    assert registry["lod"].min_value == 1.0
    assert registry["lod"].max_value == 8.0
    assert registry["zoom"].float_value == 0.25
    assert registry["sky"].type == CvarType.COLOR
    assert registry["sky"].color == parse_color("FF0000FF")


def test_missing_definitions_raise(tmp_path):
    with pytest.raises(OSError):
        CvarRegistry().load_definitions(tmp_path / "absent.json")


def test_config_overrides_values(registry, tmp_path):
    cfg = tmp_path / "cvars.cfg"
    cfg.write_text(
        "show_fps 0\nlod 5\nzoom 1.5\nsky 00FF00FF\nunknown 7\nlonely\n\n",
        encoding="utf-8",
    )
    registry.load_config(cfg)
    assert registry["show_fps"].bool_value is False
    assert registry["lod"].int_value == 5
    assert registry["zoom"].float_value == 1.5
    assert registry["sky"].color == parse_color("00FF00FF")
    assert "unknown" not in registry


def test_bad_int_in_config_raises(registry, tmp_path):
    cfg = tmp_path / "cvars.cfg"
    cfg.write_text("lod abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        registry.load_config(cfg)


def test_load_without_config_keeps_defaults(json_path, tmp_path):
    reg = CvarRegistry()
    reg.load(json_path, tmp_path / "missing.cfg")
    assert reg["lod"].int_value == DEFINITIONS["lod"]["default"]
    assert reg["show_fps"].bool_value is DEFINITIONS["show_fps"]["default"]


def test_dumps_pads_names_in_sorted_order(registry):
    lines = registry.dumps().splitlines()
    names = [line.split()[0] for line in lines]
    assert names == sorted(DEFINITIONS)
    for line, name in zip(lines, names):
        assert line.startswith(name.ljust(20))
    assert "zoom".ljust(20) + "0.250" in lines


def test_save_and_reload_round_trip(registry, json_path, tmp_path):
    registry["show_fps"].bool_value = False
    registry["lod"].int_value = 6
    registry["zoom"].float_value = 1.75
    registry["sky"].color = parse_color("00FF00FF")
    cfg = tmp_path / "out.cfg"
    registry.save(cfg)

    fresh = CvarRegistry()
    fresh.load(json_path, cfg)
    assert fresh["show_fps"].bool_value is False
    assert fresh["lod"].int_value == 6
    assert fresh["zoom"].float_value == 1.75
    assert fresh["sky"].color == parse_color("00FF00FF")
    assert fresh.dumps() == registry.dumps()


def test_sorted_by_type_orders_types(registry):
    ordered = registry.sorted_by_type()
    types = [cvar.type.value for cvar in ordered]
    assert types == sorted(types)
    assert len(ordered) == len(DEFINITIONS)


def test_unknown_type_is_kept_but_not_written(tmp_path):
    path = tmp_path / "defs.json"
    path.write_text(json.dumps({"odd": {"type": "vector"}}), encoding="utf-8")
    reg = CvarRegistry()
    reg.load_definitions(path)
    assert reg["odd"] == Cvar(name="odd", type="vector")
    assert reg.dumps() == "odd".ljust(20) + "\n"