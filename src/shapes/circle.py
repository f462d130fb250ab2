"""Circle shape, using the 22/7 approximation of pi."""

from .base import Shape
from .config import PI_APPROX


class Circle(Shape):

    def __init__(self, color, radius):
        super().__init__(color)
        self._radius = radius
        # Center coordinates are stored but not used in any computation.
        self._x = None
        self._y = None
        self.identity = "Circle"

    @property
    def radius(self):
        return self._radius

    @radius.setter
    def radius(self, value):
        self._radius = value

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = value

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = value

    def area(self):
        return self.radius * self.radius * PI_APPROX

    def perimeter(self):
        return 2 * self.radius * PI_APPROX

    def get_area(self):
        """Print area and perimeter, then draw."""
        super().get_area()
        print(f"Area = {self.area()}")
        print(f"Perimeter = {self.perimeter()}")
        self.draw_shape()
