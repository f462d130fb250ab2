"""Shape hierarchy for the Module 6 OOP practice."""

from .base import Shape
from .circle import Circle
from .rectangle import Rectangle, Square

__all__ = ["Shape", "Rectangle", "Square", "Circle"]
