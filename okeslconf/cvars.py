"""Console variables: definitions from JSON, values from a plain config file."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Union

__all__ = [
    "CvarType",
    "Cvar",
    "CvarRegistry",
    "parse_color",
    "format_color",
]

log = logging.getLogger(__name__)

KEY_WIDTH = 20
"""Column width the variable names are padded to in a saved config."""

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")

Color = tuple[float, float, float, float]


class CvarType(str, Enum):
    """The kinds of value a cvar can hold."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COLOR = "color"


@dataclass
class Cvar:
    """One console variable and its current value."""

    name: str
    type: Union[CvarType, str]
    bool_value: bool = False
    int_value: int = 0
    float_value: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    color: Color = (0.0, 0.0, 0.0, 0.0)


def _leading_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _leading_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def parse_color(text: str) -> Color:
    """Turn an RRGGBBAA hex string into four channel values in 0..1.

    Raises ValueError if the text does not start with a hex number.
    """
    match = _HEX_RE.match(text)
    if match is None:
        raise ValueError(f"invalid colour: {text!r}")
    value = int(match.group(1), 16) & 0xFFFFFFFF
    return (
        ((value >> 24) & 0xFF) / 255.0,
        ((value >> 16) & 0xFF) / 255.0,
        ((value >> 8) & 0xFF) / 255.0,
        (value & 0xFF) / 255.0,
    )


def format_color(rgba: Color) -> str:
    """Turn four channel values in 0..1 into an upper-case RRGGBBAA string."""
    red, green, blue, alpha = (int(channel * 255) for channel in rgba)
    value = ((red << 24) | (green << 16) | (blue << 8) | alpha) & 0xFFFFFFFF
    return f"{value:08X}"


def _as_bool(value: object) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _as_number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return value


def _cvar_type(raw: object) -> Union[CvarType, str]:
    if not isinstance(raw, str):
        raise TypeError(f"cvar type must be a string, got {raw!r}")
    try:
        return CvarType(raw)
    except ValueError:
        return raw


class CvarRegistry:
    """All known cvars, keyed by name."""

    def __init__(self) -> None:
        self.cvars: dict[str, Cvar] = {}

    def __getitem__(self, name: str) -> Cvar:
        return self.cvars[name]

    def __contains__(self, name: object) -> bool:
        return name in self.cvars

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.cvars))

    def __len__(self) -> int:
        return len(self.cvars)

    def load_definitions(self, path: Union[str, Path]) -> None:
        """Read types, defaults and ranges from a JSON definition file."""
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)

        for name, spec in document.items():
            cvar = Cvar(name=name, type=_cvar_type(spec["type"]))
            if cvar.type == CvarType.BOOL:
                cvar.bool_value = _as_bool(spec["default"])
            elif cvar.type == CvarType.INT:
                cvar.int_value = int(_as_number(spec["default"]))
                cvar.min_value = float(_as_number(spec["min"]))
                cvar.max_value = float(_as_number(spec["max"]))
            elif cvar.type == CvarType.FLOAT:
                cvar.float_value = float(_as_number(spec["default"]))
                cvar.min_value = float(_as_number(spec["min"]))
                cvar.max_value = float(_as_number(spec["max"]))
            elif cvar.type == CvarType.COLOR:
                hex_text = spec["default"]
                if not isinstance(hex_text, str):
                    raise TypeError(f"colour default must be a string, got {hex_text!r}")
                cvar.color = parse_color(hex_text.removeprefix("#"))
            self.cvars[name] = cvar

    def load_config(self, path: Union[str, Path]) -> None:
        """Apply "name value" lines from a config file to the known cvars.

        Lines with fewer than two words and unknown names are skipped.
        """
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                words = line.split()
                if len(words) < 2:
                    continue
                name, value = words[0], words[1]
                cvar = self.cvars.get(name)
                if cvar is None:
                    continue
                if cvar.type == CvarType.BOOL:
                    cvar.bool_value = value == "1"
                elif cvar.type == CvarType.INT:
                    cvar.int_value = _leading_int(value)
                elif cvar.type == CvarType.FLOAT:
                    cvar.float_value = _leading_float(value)
                elif cvar.type == CvarType.COLOR:
                    cvar.color = parse_color(value)
        log.info("Configuration loaded from %s", path)

    def load(self, json_path: Union[str, Path], config_path: Union[str, Path]) -> None:
        """Load definitions, then values; a missing config keeps the defaults."""
        self.load_definitions(json_path)
        try:
            self.load_config(config_path)
        except OSError:
            log.warning("Failed to open %s for reading. Using default values.", config_path)

    def dumps(self) -> str:
        """Render every cvar as a config file, names in sorted order."""
        lines = []
        for name in sorted(self.cvars):
            cvar = self.cvars[name]
            line = name.ljust(KEY_WIDTH)
            if cvar.type == CvarType.BOOL:
                line += "1" if cvar.bool_value else "0"
            elif cvar.type == CvarType.INT:
                line += str(cvar.int_value)
            elif cvar.type == CvarType.FLOAT:
                line += f"{cvar.float_value:.3f}"
            elif cvar.type == CvarType.COLOR:
                line += format_color(cvar.color)
            lines.append(line + "\n")
        return "".join(lines)

    def save(self, path: Union[str, Path]) -> None:
        """Write the config file for the current values."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())
        log.info("Configuration saved to %s", path)

    def sorted_by_type(self) -> list[Cvar]:
        """Return the cvars ordered by type name, then by cvar name."""
        by_name = (self.cvars[name] for name in sorted(self.cvars))
        return sorted(by_name, key=lambda cvar: str.__str__(cvar.type))