"""Runtime components for the orbit simulation."""

from .driver import AnimationDriver, Frame

__all__ = [
    "AnimationDriver",
    "Frame",
]
