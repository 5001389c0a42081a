# okeslconf

A small desktop editor for a game's configuration: console variables
(cvars) and key bindings. The window is built with Tk, so the Python
installation needs `tkinter`; the library modules work without it.

## Running

```
okesl-config-ui
```

Run it from the game directory. By default the editor reads:

- `assets/cvars.json`: cvar definitions. Each entry gives a `type` (`bool`,
  `int`, `float` or `color`) and a `default`; `int` and `float` entries also
  give a `min` and a `max`. Colour defaults are `RRGGBBAA` hex, with an
  optional leading `#`. If this file cannot be opened the editor exits with
  status 1.
- `cfg/cvars.cfg`: current cvar values, one `name value` pair per line.
  Unknown names and lines with fewer than two words are skipped. If the file
  is missing, the defaults from the definitions are kept.
- `cfg/controls.cfg`: key bindings as `bind <modifier><key> "<actions>"`.
  Lines starting with `#` are comments. A line's quoted actions select the
  binding it applies to. If the file is missing, the built-in bindings are
  used.

The paths can be changed on the command line:

```
okesl-config-ui --definitions assets/cvars.json --cvars cfg/cvars.cfg --controls cfg/controls.cfg
```

The window has a cvar editor and a controls editor:

- Booleans get a check box, numbers a slider over their range, and colours a
  colour picker with an alpha slider.
- To rebind a control, click its key button and press the new key.
- Each editor has a Save button. The File menu has "Save cvars",
  "Save controls" and "Exit".

Saved cvar files list every cvar in name order, with the name padded to 20
columns. Floats are written with three decimals and colours as upper-case
`RRGGBBAA`. Saved controls files keep the section headings. The `load`
binding also gets a `bind *<key> "hold"` line.

## Library use

```python
from okeslconf.cvars import CvarRegistry
from okeslconf.controls import ControlsConfig, KeyCapture
from okeslconf.keys import KeyCode

registry = CvarRegistry()
registry.load("assets/cvars.json", "cfg/cvars.cfg")
print(registry.dumps())
registry.save("cfg/cvars.cfg")

controls = ControlsConfig.default()
controls.load("cfg/controls.cfg")

capture = KeyCapture(controls)
capture.start("turn")
capture.handle_key(KeyCode.KEY_SPACE)   # binds "space" to the turn command
controls.save("cfg/controls.cfg")
```

- `okeslconf.cvars`: `Cvar`, `CvarType` and `CvarRegistry`, which has
  `load_definitions`, `load_config`, `load`, `dumps`, `save` and
  `sorted_by_type`. Colours are converted with `parse_color` and
  `format_color`.
- `okeslconf.controls`: `ControlBinding`, `ControlSection`, `ControlsConfig`
  (`default`, `parse_line`, `load`, `dumps`, `save`) and `KeyCapture`
  (`start`, `is_waiting_for`, `handle_key`).
- `okeslconf.keys`: `KeyCode` and `MouseButton`. `key_name` turns a scancode
  into its config-file name. `scancode_for_name` turns a name back into a
  scancode.
- `okeslconf.app`: `EditorApp`, `tk_keysym_scancode` and `main`.

## Tests

```
pip install .[test]
pytest
```