"""
Base class for every shape in the hierarchy.

A Shape only knows its color and which kind of shape it is. Subclasses
override ``area``/``perimeter`` and extend ``get_area`` by calling the base
step first, printing their own metrics, then calling ``draw_shape``.
"""


class Shape:

    def __init__(self, color):
        # Color is fixed at construction; there is no setter.
        self._color = color
        self.identity = None

    @property
    def color(self):
        return self._color

    def area(self):
        pass

    def perimeter(self):
        pass

    def get_area(self):
        """Base reporting step. Prints nothing for a plain Shape."""
        pass

    def draw_shape(self):
        """Rendering hook; nothing is drawn yet."""
        pass
