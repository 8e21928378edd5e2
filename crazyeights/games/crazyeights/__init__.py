"""Crazy Eights game package."""

from .game import CrazyEightsGame, CrazyEightsOptions, Phase, RoundSnapshot

__all__ = ["CrazyEightsGame", "CrazyEightsOptions", "Phase", "RoundSnapshot"]
