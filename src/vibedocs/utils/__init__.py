"""Utility helpers for vibedocs."""
