"""Series-based trigonometric calculator: series functions, a console menu and keypad state."""

__version__ = "1.0.0"
__all__ = ["series", "maclaurin", "console", "keypad", "classic_entry", "classic_keypad"]