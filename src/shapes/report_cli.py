"""
Demo driver for the shape hierarchy.

Creates one shape of each kind from ``config.DEMO_SHAPES`` and prints its
area and perimeter. Run with ``python -m shapes.report_cli``.
"""

from __future__ import annotations

from .base import Shape
from .circle import Circle
from .config import DEMO_SHAPES
from .rectangle import Rectangle, Square


SHAPE_TYPES = {
    "shape": Shape,
    "rectangle": Rectangle,
    "square": Square,
    "circle": Circle,
}


def build_shape(kind: str, color: str, *dimensions) -> Shape:
    """Instantiate the shape class registered under ``kind``."""
    cls = SHAPE_TYPES.get(str(kind).lower())
    if cls is None:
        raise ValueError(f"Unknown shape kind: {kind}")
    return cls(color, *dimensions)


def demo_shapes(specs=DEMO_SHAPES) -> list[Shape]:
    """Build the demo shapes in the order they are listed."""
    return [build_shape(*spec) for spec in specs]


def main():
    """Print the area and perimeter of every demo shape."""
    for shape in demo_shapes():
        shape.get_area()


if __name__ == "__main__":
    main()
