"""Building blocks for a terminal role-playing game: logging, memory pool, localization, input, screen and menus."""

__version__ = "1.0.0"