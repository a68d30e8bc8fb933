# -*- coding: utf-8 -*-
# Stackloft/geometry/topology/loop.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/14/2026

Purpose:
--------
This module owns the *winding* concerns of a sketch loop:
   - Signed area via the shoelace sum,
   - CCW predicate,
   - Canonical CCW orientation with stable, deterministic behavior.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Loops are implicitly closed: the edge last -> first is never stored. An explicitly
     repeated first vertex is tolerated (it is just a zero-length edge).
   - Functions are side-effect free; the input array is never mutated.
"""

from __future__ import division
import numpy as np
from ._validation import _as_xy


# -----------------------
# Public API
# -----------------------
def signed_area(loop) -> float:
    """
    Shoelace signed area for a closed polygonal loop.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The closing edge (last -> first) is implied.

    Parameters
    ----------
    loop : array-like
        (N, 2) points.

    Returns
    -------
    float
        Signed area (units^2). Positive for CCW, negative for CW.

    Raises
    ------
    ValueError
        If input is not (N, 2) or N < 3.
    """
    P = _as_xy(loop)
    if P.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute area.")
    x = P[:, 0]
    y = P[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def is_ccw(loop) -> bool:
    """
    True if the loop has strictly positive signed area.

    Loops with fewer than 3 points have no defined winding and report False.
    """
    P = _as_xy(loop)
    if P.shape[0] < 3:
        return False
    return signed_area(P) > 0.0


def ensure_ccw(loop) -> np.ndarray:
    """
    Return the loop in counter-clockwise order.

    Behavior
    --------
    - Negative signed area (CW): the vertex order is reversed (new array).
    - Otherwise, including zero-area loops: returned unchanged.
    - Fewer than 3 points: returned unchanged (area undefined).
    - Idempotent: ensure_ccw(ensure_ccw(L)) equals ensure_ccw(L).

    Parameters
    ----------
    loop : array-like
        (N, 2) points, open form (closing edge implied).

    Returns
    -------
    np.ndarray
        (N, 2) float64 array in CCW order.
    """
    P = _as_xy(loop)
    if P.shape[0] < 3:
        return P
    if signed_area(P) < 0.0:
        # Full reversal only; no angular re-sorting.
        return P[::-1].copy()
    return P
