"""Objkit model layer -- public type re-exports."""

from objkit.model.overlay import FieldOverlay, Overlayable
from objkit.model.shapes import Circle, Rectangle, create_circle, create_rectangle

__all__ = [
    # shapes
    "Rectangle",
    "Circle",
    "create_rectangle",
    "create_circle",
    # overlay
    "Overlayable",
    "FieldOverlay",
]
