"""A terminal typing-speed game: game state, terminal screen and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]