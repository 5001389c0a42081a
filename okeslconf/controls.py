"""Key bindings for game commands, read from and written to controls.cfg."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Union

from okeslconf.keys import key_name

__all__ = [
    "ControlBinding",
    "ControlSection",
    "ControlsConfig",
    "KeyCapture",
]


@dataclass
class ControlBinding:
    """A command, the key bound to it and the actions it runs."""

    command: str
    key: str = ""
    modifiers: str = ""
    actions: list[str] = field(default_factory=list)
    ui_name: str = ""


@dataclass
class ControlSection:
    """A titled group of commands, kept in file order."""

    heading: str
    commands: list[str] = field(default_factory=list)


_DEFAULT_BINDINGS = (
    ControlBinding("throttle", "up", "*", ["throttle", "spy_up"], "Throttle"),
    ControlBinding("brake", "down", "*", ["brake", "spy_down"], "Brake"),
    ControlBinding("brake_alias", "", "*", ["brake"], "Brake alias"),
    ControlBinding("ofbrake", "q", "+", ["ofbrake"], "One Frame Brake"),
    ControlBinding("left", "left", "*", ["left", "spy_left"], "Left Volt"),
    ControlBinding("right", "right", "*", ["right", "spy_right"], "Right Volt"),
    ControlBinding("left;right", "rctrl", "*", ["left", "right"], "Alovolt"),
    ControlBinding("turn", "spacebar", "*", ["turn"], "Turn"),
    ControlBinding("save", "f3", "+", ["save"], "Save"),
    ControlBinding("load", "f4", "+", ["load", "resetdata"], "Load"),
)

_DEFAULT_SECTIONS = (
    ControlSection(
        "# Elma Controls",
        ["throttle", "brake", "brake_alias", "ofbrake", "left", "right", "left;right", "turn"],
    ),
    ControlSection("# Saveload Controls", ["save", "load"]),
)


def _joined_actions(binding: ControlBinding) -> str:
    return ";".join(binding.actions)


class ControlsConfig:
    """The bindings and the sections they are written in."""

    def __init__(
        self,
        bindings: Mapping[str, ControlBinding],
        sections: Iterable[ControlSection],
    ) -> None:
        self.bindings: dict[str, ControlBinding] = dict(bindings)
        self.sections: list[ControlSection] = list(sections)

    @classmethod
    def default(cls) -> ControlsConfig:
        """Return a fresh copy of the built-in bindings."""
        bindings = {b.command: copy.deepcopy(b) for b in _DEFAULT_BINDINGS}
        return cls(bindings, copy.deepcopy(list(_DEFAULT_SECTIONS)))

    def parse_line(self, line: str) -> None:
        """Apply one 'bind <modifier><key> "<actions>"' line.

        The binding whose joined actions equal the quoted text takes the key;
        lines that do not have that shape are ignored.
        """
        words = line.split()
        if len(words) < 2:
            return
        key_token = words[1]

        start = line.find('"')
        if start < 0:
            return
        end = line.find('"', start + 1)
        if end < 0:
            return
        actions = line[start + 1 : end]

        for name in sorted(self.bindings):
            binding = self.bindings[name]
            if _joined_actions(binding) == actions:
                binding.key = key_token[1:]
                binding.modifiers = key_token[:1]
                break

    def load(self, path: Union[str, Path]) -> None:
        """Apply every binding line of a controls file; '#' lines are comments."""
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                self.parse_line(line)

    def dumps(self) -> str:
        """Render the sections and their bindings as a controls file."""
        lines: list[str] = []
        for section in self.sections:
            lines.append(section.heading)
            for command in section.commands:
                binding = self.bindings.get(command) or ControlBinding(command="")
                lines.append(
                    f'bind {binding.modifiers}{binding.key} "{_joined_actions(binding)}"'
                )
                if command == "load" and binding.key:
                    lines.append(f'bind *{binding.key} "hold"')
            lines.append("")
        return "".join(line + "\n" for line in lines)

    def save(self, path: Union[str, Path]) -> None:
        """Write the controls file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())


class KeyCapture:
    """Tracks which command, if any, is waiting for its next key press."""

    def __init__(self, controls: ControlsConfig) -> None:
        self.controls = controls
        self.active_binding = ""
        self.waiting = False

    def start(self, command: str) -> None:
        """Wait for a key to bind to ``command``."""
        self.active_binding = command
        self.waiting = True

    def is_waiting_for(self, command: str) -> bool:
        """True while ``command`` is the one waiting for a key."""
        return self.waiting and self.active_binding == command

    def handle_key(self, scancode: int) -> bool:
        """Bind a pressed key to the waiting command.

        Returns True when a binding was changed.
        """
        if not self.waiting:
            return False
        binding = self.controls.bindings.get(self.active_binding) if self.active_binding else None
        if binding is None:
            return False
        binding.key = key_name(scancode)
        self.waiting = False
        self.active_binding = ""
        return True