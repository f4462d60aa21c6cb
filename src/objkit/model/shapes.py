"""Shape value objects: Rectangle and Circle with on-demand areas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from objkit.model.overlay import FieldOverlay


@dataclass
class Rectangle(FieldOverlay):
    """A rectangle whose area is computed from its current fields.

    Fields are not validated; ``get_area`` returns whatever ``width * height``
    produces for the stored values.
    """

    width: Any = 0
    height: Any = 0

    def get_area(self) -> Any:
        return self.width * self.height


@dataclass
class Circle(FieldOverlay):
    """A circle whose area is computed from its current radius."""

    radius: Any = 0

    def get_area(self) -> Any:
        return math.pi * self.radius**2


def create_rectangle(width: Any, height: Any) -> Rectangle:
    """Return a new rectangle with the given width and height."""
    return Rectangle(width=width, height=height)


def create_circle(radius: Any) -> Circle:
    """Return a new circle with the given radius."""
    return Circle(radius=radius)
