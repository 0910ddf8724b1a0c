"""A threaded simulation of the dining philosophers problem, with its command-line entry point."""

__version__ = "0.1.0"
__all__ = ["cli", "settings", "simulation", "timing"]