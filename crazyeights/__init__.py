"""Crazy Eights: one player against a scripted opponent."""

__version__ = "1.0.0"
