"""Shortcut action that reports the current PM2.5 level at the user's location."""

__version__ = "1.0.0"
