"""A top-down field exploration game with collision lines and map transitions."""

__version__ = "1.0.0"