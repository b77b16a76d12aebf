"""API layer for the orbit simulation."""

from .rest import OrbitAPI

__all__ = [
    "OrbitAPI",
]
