# -*- coding: utf-8 -*-
# Stackloft/loft/core/faces.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/17/2026 (Updated: 9/29/2026)

Purpose:
--------
Face value types produced by loft algorithms and the accumulator that builds them.

Main Tasks:
-----------
   1. LoftFace: ordered (k, 3) corners, k in {3, 4}, wound for an outward normal, plus
      the indices of corners that were interpolated on an edge (not original vertices).
   2. LoftResult: ordered faces of one algorithm invocation (emission order).
   3. FaceBuilder: lifts loop-A points to height A and loop-B points to height B.

Notes:
------
- Quad corner order is [a0, a1, b1, b0]. For CCW loops walked with increasing
  parameter this gives outward-facing normals; do not reorder.
- Consumers must accept both 3- and 4-corner faces.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np


@dataclass(frozen=True, eq=False)
class LoftFace:
    vertices: np.ndarray  # (k, 3) corners, k in {3, 4}
    interpolated: Tuple[int, ...] = ()  # corner indices lying on an edge, not on a vertex

    @property
    def is_quad(self) -> bool:
        return self.vertices.shape[0] == 4

    @property
    def exact(self) -> Tuple[int, ...]:
        """Corner indices that are original loop vertices."""
        return tuple(i for i in range(self.vertices.shape[0]) if i not in self.interpolated)

    def __len__(self) -> int:
        return int(self.vertices.shape[0])


@dataclass
class LoftResult:
    faces: List[LoftFace] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.faces)

    def __iter__(self):
        return iter(self.faces)


class FaceBuilder:
    """
    Builds 3D faces from 2D points on two loops at two fixed heights.

    Single use: faces accumulate and are never cleared.
    """

    def __init__(self, height_a: float, height_b: float):
        self.height_a = float(height_a)
        self.height_b = float(height_b)
        self._faces = []  # type: List[LoftFace]

    def _lift(self, p, h: float) -> np.ndarray:
        return np.array([p[0], p[1], h], dtype=float)

    def add_quad(self, a0, a1, b0, b1, *, interpolated: Tuple[int, ...] = ()) -> None:
        """
        Add a quad connecting edge (a0, a1) on loop A to edge (b0, b1) on loop B.

            a0 -------- a1
            |          |
            |   QUAD   |
            |          |
            b0 -------- b1

        Stored order is [a0, a1, b1, b0]; `interpolated` refers to that order
        (1 for a1, 2 for b1).
        """
        verts = np.vstack((
            self._lift(a0, self.height_a),
            self._lift(a1, self.height_a),
            self._lift(b1, self.height_b),
            self._lift(b0, self.height_b),
        ))
        self._faces.append(LoftFace(verts, tuple(interpolated)))

    def add_triangle(self, p0, p1, p2) -> None:
        """Add an already-3D triangle verbatim (winding preserved)."""
        verts = np.asarray([p0, p1, p2], dtype=float)
        if verts.shape != (3, 3):
            raise ValueError("Triangle corners must be three 3D points, got shape {}.".format(verts.shape))
        self._faces.append(LoftFace(verts))

    def get_faces(self) -> List[LoftFace]:
        return self._faces
