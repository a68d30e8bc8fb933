# -*- coding: utf-8 -*-
# Stackloft/loft/core/param_loop.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/17/2026

Purpose:
--------
Arc-length parameterization of a closed loop. Each vertex gets a parameter t in [0, 1]
equal to its cumulative perimeter distance divided by the total perimeter, so two
loops with unrelated vertex counts can be compared position-by-position.

Notes:
------
- The closing edge (last -> first) is part of the perimeter.
- Edge lengths are accumulated sequentially in traversal order (np.cumsum), and the
  total is the last cumulative value, so param(n-1) < 1 whenever the closing edge
  has non-zero length.
- param(n) is the exact sentinel 1.0, independent of accumulated rounding.
"""

from __future__ import division
import numpy as np
from geometry.topology.loop import ensure_ccw


class ParameterizedLoop:
    """
    A closed loop of 2D vertices with precomputed perimeter parameters.

    Parameters
    ----------
    vertices : array-like
        (N, 2) loop; normalized to CCW on construction (no-op if already CCW).

    Attributes
    ----------
    vertices : np.ndarray
        (N, 2) CCW vertices.
    params : np.ndarray
        (N,) cumulative perimeter parameter per vertex; params[0] == 0.
        All zeros when the perimeter is zero.
    total_length : float
        Perimeter length including the closing edge.
    """

    def __init__(self, vertices):
        self.vertices = ensure_ccw(vertices)
        n = self.vertices.shape[0]

        if n == 0:
            self.total_length = 0.0
            self.params = np.zeros(0)
            return

        edges = np.linalg.norm(np.roll(self.vertices, -1, axis=0) - self.vertices, axis=1)
        cum = np.cumsum(edges)
        total = float(cum[-1])
        distances = np.concatenate(([0.0], cum[:-1]))

        self.total_length = total
        self.params = distances / total if total > 0 else np.zeros(n)

    @property
    def count(self) -> int:
        """Number of vertices in the loop."""
        return int(self.vertices.shape[0])

    def param(self, i: int) -> float:
        """
        Parameter of vertex i; i >= count returns the wrap sentinel 1.0.
        """
        if i >= self.count:
            return 1.0
        return float(self.params[i])

    def vertex(self, i: int) -> np.ndarray:
        """Vertex at index i, wrapping modulo count."""
        return self.vertices[i % self.count]

    def interpolate(self, i: int, t: float) -> np.ndarray:
        """
        Point on edge (i -> i+1) at perimeter parameter t.

        t is expected in [param(i), param(i+1)]. A wrapped edge (param(i+1) < param(i))
        spans (1 - t0) + t1. A zero-length span returns a copy of vertex(i).
        """
        v0 = self.vertex(i)
        v1 = self.vertex(i + 1)

        t0 = self.param(i)
        t1 = self.param(i + 1)

        span = t1 - t0 if t1 >= t0 else (1.0 - t0) + t1
        if span == 0:
            return v0.copy()

        # u is [0,1] within this edge
        u = (t - t0) / span
        return v0 + u * (v1 - v0)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return "ParameterizedLoop(n={}, total_length={:.6g})".format(self.count, self.total_length)
