# -*- coding: utf-8 -*-
# Stackloft/geometry/topology/align.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/15/2026

Purpose:
--------
Deterministic start-vertex alignment between two loops. The loft walk pairs vertices
by index order after alignment, so loop B is rotated to start at the vertex nearest
loop A's vertex 0. Without this anchor, unrelated starting vertices twist the skin.

Notes:
------
   - Only one anchor (A[0]) is used; no further geometric correspondence is implied.
   - Tie-breaking is explicit: among equidistant candidates the lowest index wins.
   - Rotation is cyclic and preserves winding.
"""

from __future__ import division
import numpy as np
from ._validation import _as_xy


def find_closest_vertex_index(loop_a, loop_b) -> int:
    """
    Index into `loop_b` of the point nearest (Euclidean) to `loop_a[0]`.

    Ties keep the lowest index (np.argmin returns the first minimum).

    Raises
    ------
    ValueError
        If either loop is empty.
    """
    A = _as_xy(loop_a)
    B = _as_xy(loop_b)
    if A.shape[0] == 0 or B.shape[0] == 0:
        raise ValueError("Cannot align empty loops.")
    d = np.linalg.norm(B - A[0], axis=1)
    return int(np.argmin(d))


def rotate_loop(loop, start: int) -> np.ndarray:
    """
    Rotate a loop so that the vertex at `start` becomes index 0.

    A zero (or full-turn) rotation and an empty loop return the input unchanged.
    """
    P = _as_xy(loop)
    n = P.shape[0]
    if n == 0 or start % n == 0:
        return P
    return np.roll(P, -(start % n), axis=0)


def align_loop_starts(loop_a, loop_b) -> np.ndarray:
    """
    Rotate `loop_b` so its start is the vertex nearest `loop_a[0]`.
    """
    return rotate_loop(loop_b, find_closest_vertex_index(loop_a, loop_b))
