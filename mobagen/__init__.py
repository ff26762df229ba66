"""2D game math, data structures and game AI for hex-grid and chess games."""

__version__ = "0.1.0"