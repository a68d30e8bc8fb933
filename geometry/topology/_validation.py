# -*- coding: utf-8 -*-
# Stackloft/geometry/topology/_validation.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/14/2026

Purpose:
--------
Centralized coercion and validation utilities for topology operations so every loop
entering the loft core has the same representation.

Main Tasks:
   1. Coerce sequences of (x, y) pairs into (N, 2) float64 arrays (empty input -> (0, 2)).
   2. Validate point array structure with optional finite value checking.
"""

from typing import Optional
import numpy as np


def _as_xy(points, check_finite: bool = False) -> np.ndarray:
    """
    Coerce `points` to an (N, 2) float64 array and validate it.

    Parameters
    ----------
    points : array-like
        Sequence of (x, y) pairs or an (N, 2) array. N may be 0, 1 or 2
        (degenerate loops are representable; callers decide what to do with them).
    check_finite : bool, optional
        If True, reject NaN/Inf coordinates, by default False

    Returns
    -------
    np.ndarray
        (N, 2) float64 array. An input that already is a float64 array is returned
        without copying.

    Raises
    ------
    ValueError
        If the coerced array is not (N, 2).
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    _assert_xy(arr, check_finite=check_finite)
    return arr


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")
