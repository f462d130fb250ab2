"""Rectangle and Square shapes."""

from .base import Shape


class Rectangle(Shape):

    def __init__(self, color, width, height):
        super().__init__(color)
        self._width = width
        self._height = height
        self.identity = "Rectangle"

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = value

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._height = value

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return False

        return self.width == other.width and self.height == other.height

    def area(self):
        return self.height * self.width

    def perimeter(self):
        return 2 * (self.height + self.width)

    def get_area(self):
        """Print area and perimeter, then draw."""
        super().get_area()
        print(f"Area = {self.area()}")
        print(f"Perimeter = {self.perimeter()}")
        self.draw_shape()


class Square(Rectangle):

    def __init__(self, color, length):
        # A square is a rectangle with equal sides, so reuse its setup.
        super().__init__(color, length, length)
        self.identity = "Square"

    @property
    def length(self):
        return self.width

    @length.setter
    def length(self, value):
        # Keep width == height.
        self.width = self.height = value
