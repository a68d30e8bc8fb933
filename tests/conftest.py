"""Shared fixtures for Stackloft loft tests."""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from model.plane import SketchPlane


def regular_polygon(n, radius, phase=0.0):
    """CCW regular n-gon centred at the origin."""
    ang = phase + 2.0 * np.pi * np.arange(n) / n
    return np.column_stack((radius * np.cos(ang), radius * np.sin(ang)))


@pytest.fixture
def square():
    """2x2 CCW square starting at the origin."""
    return np.array([(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)])


@pytest.fixture
def square_midpoints():
    """The same 2x2 square with a vertex at every edge midpoint (8 vertices)."""
    return np.array([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (2.0, 1.0),
                     (2.0, 2.0), (1.0, 2.0), (0.0, 2.0), (0.0, 1.0)])


@pytest.fixture
def centred_square():
    return np.array([(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)])


@pytest.fixture
def octagon():
    """Regular octagon, radius 2, vertices at 22.5 + 45k degrees."""
    return regular_polygon(8, 2.0, phase=np.pi / 8)


@pytest.fixture
def stack(square, square_midpoints):
    """Three planes supplied out of height order: (top, bottom, middle)."""
    bottom = SketchPlane(square, 0.0)
    middle = SketchPlane(square_midpoints, 3.0)
    top = SketchPlane(square * 0.5 + 0.5, 7.5)
    return top, bottom, middle


@pytest.fixture
def polygon():
    """Factory: regular_polygon(n, radius, phase=0.0)."""
    return regular_polygon
