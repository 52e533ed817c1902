"""Terminal snake game with three levels, obstacles and per-level high scores."""

__version__ = "0.1.0"
__all__ = ["__version__"]