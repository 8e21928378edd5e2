"""Localized messages."""
