"""Textual screens."""

from .selection import SelectionScreen

__all__ = [
    "SelectionScreen",
]
