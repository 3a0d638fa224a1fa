"""Terminal falling-block puzzle game: engine, input/state interface and curses front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]