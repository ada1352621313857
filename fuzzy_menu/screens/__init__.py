"""Screens for Fuzzy Menu."""
