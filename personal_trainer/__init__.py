"""Personalized weekly training plans built from an exercise catalog."""

__version__ = "0.1.0"
