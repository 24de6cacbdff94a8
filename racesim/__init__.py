"""Racing car simulation with procedural cone tracks, a dynamic bicycle model and a racing controller."""

__version__ = "0.1.0"