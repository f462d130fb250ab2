"""
Centralized configuration for the shapes practice.

Keeps the constants shared by the shape classes and the demo driver in one
place so the printed numbers stay consistent everywhere.
"""

from __future__ import annotations


# The exercise approximates pi with 22/7, not math.pi.
PI_APPROX = 22 / 7

# Demo driver: (kind, color, *dimensions), printed in this order.
DEMO_SHAPES = (
    ("shape", "yellow"),
    ("rectangle", "green", 20, 30),
    ("square", "red", 20),
    ("circle", "blue", 20),
)
