"""Classic data structures and algorithms in plain Python, with interactive menus."""

__version__ = "0.1.0"