# -*- coding: utf-8 -*-
# Stackloft/loft/api.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/22/2026

Purpose
-------
Thin, import-only façade for loft workflows on bare arrays, for callers that have
loops and heights but no plane objects.

Main Tasks
----------
    1. `loft_loops` → wrap loops into SketchPlanes and build a LoftableModel.
    2. `loft_pair`  → run one algorithm on a single pair of loops.
"""

from typing import Any, Mapping, Optional, Sequence

from model.plane import SketchPlane
from .core.faces import LoftResult
from .registry import LoftRegistry, default_registry, resolve_algorithm
from .segments import LoftableModel, build_from_planes

__all__ = [
    "loft_loops",
    "loft_pair",
]


def loft_loops(
    loops: Sequence[Any],
    heights: Sequence[float],
    algorithm: Optional[str] = None,
    *,
    registry: Optional[LoftRegistry] = None,
    config: Optional[Mapping[str, Any]] = None,
) -> LoftableModel:
    """
    Loft a stack given as parallel sequences of loops and heights.

    Raises
    ------
    ValueError
        If `loops` and `heights` differ in length.
    """
    if len(loops) != len(heights):
        raise ValueError("loops and heights must have the same length "
                         f"(got {len(loops)} and {len(heights)}).")
    planes = [SketchPlane(loop, h) for loop, h in zip(loops, heights)]
    return build_from_planes(planes, algorithm, registry=registry, config=config)


def loft_pair(
    loop_a: Any,
    height_a: float,
    loop_b: Any,
    height_b: float,
    algorithm: Optional[str] = None,
    *,
    registry: Optional[LoftRegistry] = None,
) -> LoftResult:
    """
    Run a registered algorithm (fallback rules apply) on one pair of loops.
    """
    reg = registry if registry is not None else default_registry()
    resolution = resolve_algorithm(reg, algorithm)
    return resolution.fn(loop_a, height_a, loop_b, height_b)
