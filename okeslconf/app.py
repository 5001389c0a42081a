"""Desktop editor for cvars and key bindings."""

from __future__ import annotations

import argparse
import itertools
import logging
import string
from pathlib import Path
from typing import Any, Optional

from okeslconf.controls import ControlBinding, ControlsConfig, KeyCapture
from okeslconf.cvars import Cvar, CvarRegistry, CvarType, format_color
from okeslconf.keys import KeyCode

__all__ = ["EditorApp", "tk_keysym_scancode", "main"]

log = logging.getLogger(__name__)

WINDOW_TITLE = "Okesl config editor"
DEFINITIONS_PATH = Path("assets/cvars.json")
CVARS_PATH = Path("cfg/cvars.cfg")
CONTROLS_PATH = Path("cfg/controls.cfg")

_UNBOUND = "Unbound"
_WAITING = "Press a key..."

_SHIFTED_DIGITS = {
    "exclam": "1",
    "at": "2",
    "numbersign": "3",
    "dollar": "4",
    "percent": "5",
    "asciicircum": "6",
    "ampersand": "7",
    "asterisk": "8",
    "parenleft": "9",
    "parenright": "0",
}

_KEYSYMS: dict[str, KeyCode] = {
    **{ch: KeyCode[f"KEY_{ch.upper()}"] for ch in string.ascii_letters},
    **{digit: KeyCode[f"KEY_{digit}"] for digit in string.digits},
    **{sym: KeyCode[f"KEY_{digit}"] for sym, digit in _SHIFTED_DIGITS.items()},
    **{f"F{n}": KeyCode[f"KEY_F{n}"] for n in range(1, 25)},
    **{f"KP_{digit}": KeyCode[f"KEY_KP_{digit}"] for digit in string.digits},
    "Return": KeyCode.KEY_RETURN,
    "Escape": KeyCode.KEY_ESCAPE,
    "BackSpace": KeyCode.KEY_BACKSPACE,
    "Tab": KeyCode.KEY_TAB,
    "ISO_Left_Tab": KeyCode.KEY_TAB,
    "space": KeyCode.KEY_SPACE,
    "minus": KeyCode.KEY_MINUS,
    "underscore": KeyCode.KEY_MINUS,
    "equal": KeyCode.KEY_EQUALS,
    "plus": KeyCode.KEY_EQUALS,
    "bracketleft": KeyCode.KEY_LEFTBRACKET,
    "braceleft": KeyCode.KEY_LEFTBRACKET,
    "bracketright": KeyCode.KEY_RIGHTBRACKET,
    "braceright": KeyCode.KEY_RIGHTBRACKET,
    "backslash": KeyCode.KEY_BACKSLASH,
    "bar": KeyCode.KEY_BACKSLASH,
    "semicolon": KeyCode.KEY_SEMICOLON,
    "colon": KeyCode.KEY_SEMICOLON,
    "apostrophe": KeyCode.KEY_APOSTROPHE,
    "quotedbl": KeyCode.KEY_APOSTROPHE,
    "grave": KeyCode.KEY_GRAVE,
    "asciitilde": KeyCode.KEY_GRAVE,
    "comma": KeyCode.KEY_COMMA,
    "less": KeyCode.KEY_COMMA,
    "period": KeyCode.KEY_PERIOD,
    "greater": KeyCode.KEY_PERIOD,
    "slash": KeyCode.KEY_SLASH,
    "question": KeyCode.KEY_SLASH,
    "Caps_Lock": KeyCode.KEY_CAPSLOCK,
    "Print": KeyCode.KEY_PRINTSCREEN,
    "Scroll_Lock": KeyCode.KEY_SCROLLLOCK,
    "Pause": KeyCode.KEY_PAUSE,
    "Insert": KeyCode.KEY_INSERT,
    "Home": KeyCode.KEY_HOME,
    "Prior": KeyCode.KEY_PAGEUP,
    "Delete": KeyCode.KEY_DELETE,
    "End": KeyCode.KEY_END,
    "Next": KeyCode.KEY_PAGEDOWN,
    "Right": KeyCode.KEY_RIGHT,
    "Left": KeyCode.KEY_LEFT,
    "Down": KeyCode.KEY_DOWN,
    "Up": KeyCode.KEY_UP,
    "Num_Lock": KeyCode.KEY_NUMLOCKCLEAR,
    "KP_Divide": KeyCode.KEY_KP_DIVIDE,
    "KP_Multiply": KeyCode.KEY_KP_MULTIPLY,
    "KP_Subtract": KeyCode.KEY_KP_MINUS,
    "KP_Add": KeyCode.KEY_KP_PLUS,
    "KP_Enter": KeyCode.KEY_KP_ENTER,
    "KP_Decimal": KeyCode.KEY_KP_PERIOD,
    "KP_Delete": KeyCode.KEY_KP_PERIOD,
    "KP_Insert": KeyCode.KEY_KP_0,
    "KP_End": KeyCode.KEY_KP_1,
    "KP_Down": KeyCode.KEY_KP_2,
    "KP_Next": KeyCode.KEY_KP_3,
    "KP_Left": KeyCode.KEY_KP_4,
    "KP_Begin": KeyCode.KEY_KP_5,
    "KP_Right": KeyCode.KEY_KP_6,
    "KP_Home": KeyCode.KEY_KP_7,
    "KP_Up": KeyCode.KEY_KP_8,
    "KP_Prior": KeyCode.KEY_KP_9,
    "KP_Equal": KeyCode.KEY_KP_EQUALS,
    "Menu": KeyCode.KEY_APPLICATION,
    "App": KeyCode.KEY_APPLICATION,
    "Help": KeyCode.KEY_HELP,
    "Execute": KeyCode.KEY_EXEC,
    "Control_L": KeyCode.KEY_LCTRL,
    "Shift_L": KeyCode.KEY_LSHIFT,
    "Alt_L": KeyCode.KEY_LALT,
    "Super_L": KeyCode.KEY_LGUI,
    "Meta_L": KeyCode.KEY_LGUI,
    "Win_L": KeyCode.KEY_LGUI,
    "Control_R": KeyCode.KEY_RCTRL,
    "Shift_R": KeyCode.KEY_RSHIFT,
    "Alt_R": KeyCode.KEY_RALT,
    "ISO_Level3_Shift": KeyCode.KEY_RALT,
    "Super_R": KeyCode.KEY_RGUI,
    "Meta_R": KeyCode.KEY_RGUI,
    "Win_R": KeyCode.KEY_RGUI,
}


def tk_keysym_scancode(keysym: str) -> Optional[KeyCode]:
    """Return the scancode of the physical key behind a Tk keysym, or None."""
    return _KEYSYMS.get(keysym)


def _rgb_hex(color: tuple[float, float, float, float]) -> str:
    red, green, blue = (int(channel * 255) for channel in color[:3])
    return f"#{red:02x}{green:02x}{blue:02x}"


class EditorApp:
    """Window with a cvar editor and a key-binding editor.

    Widgets are built on ``root``; with ``root`` set to None the editor keeps
    its state and actions but shows nothing.
    """

    def __init__(self, root: Any, registry: CvarRegistry, controls: ControlsConfig) -> None:
        self.root = root
        self.registry = registry
        self.controls = controls
        self.capture = KeyCapture(controls)
        self.cvars_path: Path = CVARS_PATH
        self.controls_path: Path = CONTROLS_PATH
        self._key_buttons: dict[str, tuple[Any, Any]] = {}
        self._variables: list[Any] = []
        if root is not None:
            self._build_ui()

    def save_cvars(self) -> bool:
        """Write the cvar values to the cvar config file."""
        try:
            self.registry.save(self.cvars_path)
        except OSError:
            log.error("Failed to open %s for writing.", self.cvars_path)
            return False
        return True

    def save_controls(self) -> bool:
        """Write the key bindings to the controls file."""
        try:
            self.controls.save(self.controls_path)
        except OSError:
            log.error("Failed to open %s for writing.", self.controls_path)
            return False
        return True

    def on_key(self, event: Any) -> bool:
        """Bind the pressed key to the command waiting for one.

        Returns True when a binding was changed.
        """
        scancode = tk_keysym_scancode(getattr(event, "keysym", ""))
        if scancode is None:
            return False
        changed = self.capture.handle_key(scancode)
        if changed:
            self._refresh_controls()
        return changed

    def _build_ui(self) -> None:
        import tkinter as tk
        from tkinter import ttk

        root = self.root
        root.title(WINDOW_TITLE)
        root.geometry("1280x720")

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Save cvars", command=self.save_cvars)
        file_menu.add_command(label="Save controls", command=self.save_controls)
        file_menu.add_command(label="Exit", command=root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        root.config(menu=menubar)

        panes = ttk.Panedwindow(root, orient=tk.HORIZONTAL)
        panes.pack(fill=tk.BOTH, expand=True)
        cvar_frame = ttk.Labelframe(panes, text="Cvars Editor", padding=8)
        controls_frame = ttk.Labelframe(panes, text="Controls Editor", padding=8)
        panes.add(cvar_frame, weight=1)
        panes.add(controls_frame, weight=1)

        self._build_cvars(cvar_frame)
        self._build_controls(controls_frame)
        root.bind_all("<KeyPress>", self.on_key)

    def _build_cvars(self, frame: Any) -> None:
        from tkinter import ttk

        cvars = self.registry.sorted_by_type()
        for row, cvar in enumerate(cvars):
            self._cvar_widget(frame, cvar).grid(row=row, column=0, sticky="w", pady=1)
            ttk.Label(frame, text=cvar.name).grid(row=row, column=1, sticky="w", padx=6)
        ttk.Button(frame, text="Save", command=self.save_cvars).grid(
            row=len(cvars), column=0, sticky="w", pady=6
        )

    def _cvar_widget(self, frame: Any, cvar: Cvar) -> Any:
        import tkinter as tk
        from tkinter import ttk

        if cvar.type == CvarType.BOOL:
            flag = tk.BooleanVar(master=frame, value=cvar.bool_value)
            flag.trace_add("write", lambda *_: setattr(cvar, "bool_value", flag.get()))
            self._variables.append(flag)
            return ttk.Checkbutton(frame, variable=flag)

        if cvar.type in (CvarType.INT, CvarType.FLOAT):
            is_int = cvar.type == CvarType.INT
            number = tk.DoubleVar(
                master=frame, value=cvar.int_value if is_int else cvar.float_value
            )

            def store(*_: Any) -> None:
                if is_int:
                    cvar.int_value = int(round(number.get()))
                else:
                    cvar.float_value = number.get()

            number.trace_add("write", store)
            self._variables.append(number)
            return tk.Scale(
                frame,
                from_=cvar.min_value,
                to=cvar.max_value,
                resolution=1 if is_int else 0.001,
                orient=tk.HORIZONTAL,
                length=300,
                variable=number,
            )

        if cvar.type == CvarType.COLOR:
            return self._color_widget(frame, cvar)

        return ttk.Label(frame, text="")

    def _color_widget(self, frame: Any, cvar: Cvar) -> Any:
        import tkinter as tk
        from tkinter import colorchooser, ttk

        box = ttk.Frame(frame)
        swatch = tk.Label(box, width=3, background=_rgb_hex(cvar.color))
        swatch.pack(side=tk.LEFT, padx=(0, 4))
        button = ttk.Button(box, text=format_color(cvar.color))
        button.pack(side=tk.LEFT)
        alpha = tk.DoubleVar(master=frame, value=round(cvar.color[3] * 255))
        self._variables.append(alpha)

        def show() -> None:
            swatch.configure(background=_rgb_hex(cvar.color))
            button.configure(text=format_color(cvar.color))

        def pick() -> None:
            rgb, _ = colorchooser.askcolor(initialcolor=_rgb_hex(cvar.color), parent=frame)
            if rgb is None:
                return
            red, green, blue = (int(channel) / 255.0 for channel in rgb)
            cvar.color = (red, green, blue, cvar.color[3])
            show()

        def set_alpha(*_: Any) -> None:
            red, green, blue, _old = cvar.color
            cvar.color = (red, green, blue, int(round(alpha.get())) / 255.0)
            show()

        button.configure(command=pick)
        alpha.trace_add("write", set_alpha)
        tk.Scale(
            box, from_=0, to=255, resolution=1, orient=tk.HORIZONTAL,
            length=120, label="alpha", variable=alpha,
        ).pack(side=tk.LEFT, padx=4)
        return box

    def _build_controls(self, frame: Any) -> None:
        import tkinter as tk
        from tkinter import ttk

        ttk.Label(frame, text="Press a key to bind it to a command.").grid(
            row=0, column=0, columnspan=3, sticky="w"
        )
        ttk.Separator(frame).grid(row=1, column=0, columnspan=3, sticky="ew", pady=4)
        rows = itertools.count(2)
        for section in self.controls.sections:
            ttk.Label(frame, text=section.heading).grid(
                row=next(rows), column=0, columnspan=3, sticky="w", pady=(6, 0)
            )
            ttk.Separator(frame).grid(row=next(rows), column=0, columnspan=3, sticky="ew")
            for command in section.commands:
                binding = self.controls.bindings.get(command) or ControlBinding(command=command)
                row = next(rows)
                ttk.Label(frame, text=f"{binding.ui_name}:").grid(row=row, column=0, sticky="w")
                button = tk.Button(
                    frame,
                    text=binding.key or _UNBOUND,
                    takefocus=False,
                    command=lambda name=command: self._begin_capture(name),
                )
                button.grid(row=row, column=1, sticky="w", padx=4)
                status = ttk.Label(frame, text="")
                status.grid(row=row, column=2, sticky="w")
                self._key_buttons[command] = (button, status)
        ttk.Button(frame, text="Save", command=self.save_controls).grid(
            row=next(rows), column=0, sticky="w", pady=6
        )

    def _begin_capture(self, command: str) -> None:
        self.capture.start(command)
        self._refresh_controls()
        self.root.focus_set()

    def _refresh_controls(self) -> None:
        for command, (button, status) in self._key_buttons.items():
            binding = self.controls.bindings.get(command)
            button.configure(text=(binding.key if binding else "") or _UNBOUND)
            status.configure(text=_WAITING if self.capture.is_waiting_for(command) else "")


def main(argv: Optional[list[str]] = None) -> int:
    """Load the configuration and run the editor window."""
    parser = argparse.ArgumentParser(prog="okeslconf", description="Edit cvars and key bindings.")
    parser.add_argument("--definitions", type=Path, default=DEFINITIONS_PATH,
                        help="JSON file with cvar types, defaults and ranges")
    parser.add_argument("--cvars", type=Path, default=CVARS_PATH, help="cvar config file")
    parser.add_argument("--controls", type=Path, default=CONTROLS_PATH, help="controls file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    registry = CvarRegistry()
    try:
        registry.load(args.definitions, args.cvars)
    except OSError:
        log.error("Failed to open %s", args.definitions)
        return 1

    controls = ControlsConfig.default()
    try:
        controls.load(args.controls)
    except OSError:
        log.error("Failed to open %s", args.controls)

    import tkinter as tk

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        log.error("Error: %s", exc)
        return 1

    app = EditorApp(root, registry, controls)
    app.cvars_path = args.cvars
    app.controls_path = args.controls
    root.mainloop()
    return 0