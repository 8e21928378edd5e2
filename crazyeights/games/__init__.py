"""Game implementations."""

from .base import Actor, Game
from .crazyeights.game import CrazyEightsGame

__all__ = [
    "Actor",
    "Game",
    "CrazyEightsGame",
]
