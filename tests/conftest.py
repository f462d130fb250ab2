"""
Shared pytest fixtures and helpers.

Pytest automatically discovers this file and makes the fixtures available
to all tests in this folder.
"""

import sys
from pathlib import Path

import pytest


ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
# Allow tests to import the shapes package without installing it.
sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config):
    config.addinivalue_line("markers", "shapes: shape class hierarchy tests")
    config.addinivalue_line("markers", "cli: demo driver tests")


@pytest.fixture()
def my_rectangle():
    from shapes import Rectangle

    return Rectangle("green", 10, 20)


@pytest.fixture()
def weird_rectangle():
    from shapes import Rectangle

    return Rectangle("green", 5, 6)


@pytest.fixture()
def my_square():
    from shapes import Square

    return Square("red", 20)


@pytest.fixture()
def my_circle():
    from shapes import Circle

    return Circle("blue", 20)
