# -*- coding: utf-8 -*-
# Stackloft/model/plane.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
A sketch plane: one closed 2D loop at one height. It is the unit the loft
orchestrator consumes (`height` + `get_vertices()`).

Notes:
------
- Vertices are stored as an (N, 2) float64 array in the order given; winding is left
  to the loft algorithms.
- `get_vertices()` returns a copy so callers cannot edit the plane behind its back.
"""

from typing import Dict
import numpy as np
from geometry.topology._validation import _as_xy


class SketchPlane:
    """
    Parameters
    ----------
    vertices : array-like
        (N, 2) loop; N < 3 is allowed (work-in-progress sketch).
    height : float
        Elevation of the plane.
    """

    def __init__(self, vertices, height: float):
        self._vertices = _as_xy(vertices, check_finite=True).copy()
        self.height = float(height)

    def get_vertices(self) -> np.ndarray:
        return self._vertices.copy()

    def set_vertex(self, index: int, position) -> None:
        p = np.asarray(position, dtype=float)
        if p.shape != (2,):
            raise ValueError(f"Expected an (x, y) position, got shape {p.shape}.")
        self._vertices[index] = p

    def set_vertices(self, vertices) -> None:
        self._vertices = _as_xy(vertices, check_finite=True).copy()

    def bounds(self) -> Dict[str, float]:
        """
        Axis-aligned bounds {xmin, xmax, ymin, ymax, width, height, cx, cy};
        all zeros for an empty sketch.
        """
        if self._vertices.shape[0] == 0:
            return dict(xmin=0.0, xmax=0.0, ymin=0.0, ymax=0.0,
                        width=0.0, height=0.0, cx=0.0, cy=0.0)
        xmin, ymin = self._vertices.min(axis=0)
        xmax, ymax = self._vertices.max(axis=0)
        return {
            "xmin": float(xmin), "xmax": float(xmax),
            "ymin": float(ymin), "ymax": float(ymax),
            "width": float(xmax - xmin), "height": float(ymax - ymin),
            "cx": float(0.5 * (xmin + xmax)), "cy": float(0.5 * (ymin + ymax)),
        }

    def __len__(self) -> int:
        return int(self._vertices.shape[0])

    def __repr__(self) -> str:
        return "SketchPlane(n={}, height={:g})".format(len(self), self.height)
