"""Editor for game cvars and key bindings, with a Tk window and library modules."""

__version__ = "1.0.0"
__all__ = ["app", "controls", "cvars", "keys"]