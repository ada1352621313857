"""Fuzzy Menu: an interactive fuzzy line selector for the terminal."""

__version__ = "0.1.0"
