"""slidespace - sliding-block puzzle state spaces as 3D force-directed graphs."""

__version__ = "0.1.0"
