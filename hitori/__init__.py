"""Terminal Hitori puzzle game with hints, undo and a simple solver."""

__version__ = "0.1.0"
__all__ = ["cli", "game"]