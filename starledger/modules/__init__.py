"""Domain modules and their public exports."""

from . import handles, stars

__all__ = [
    "handles",
    "stars",
]
