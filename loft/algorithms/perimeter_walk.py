# -*- coding: utf-8 -*-
# Stackloft/loft/algorithms/perimeter_walk.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/18/2026 (Updated: 10/6/2026)

Purpose:
--------
Connect two closed 2D loops at two heights by walking both perimeters simultaneously.

Concept:
--------
Both outlines are parameterized by normalized perimeter distance in [0, 1]. Starting
at vertex 0 of each, the walk repeatedly looks at the parameter of the NEXT vertex on
each loop and advances whichever comes first (or both on a tie), emitting one quad per
step. When only one loop advances, the corner on the other loop is interpolated on
its current edge at the same parameter.

Main Tasks:
-----------
   1. Drop degenerate pairs (< 3 vertices, or zero perimeter) -> empty result.
   2. Normalize both loops to CCW; rotate loop B to start nearest A[0].
   3. Parameterize both loops and run the synchronized walk.

Guarantees:
-----------
- Quads only; at most n_a + n_b faces; linear time.
- Every original vertex of both loops is the exact advancing corner of exactly one
  face; an interpolated corner always lies on the loop that did not advance.
- Top and bottom are left open (no caps).
"""

from __future__ import division
import logging
from geometry.topology.loop import ensure_ccw
from geometry.topology.align import align_loop_starts
from geometry.topology._validation import _as_xy
from ..core.param_loop import ParameterizedLoop
from ..core.faces import FaceBuilder, LoftResult

logger = logging.getLogger(__name__)

# Absolute tolerance on normalized parameters; fixed, not configurable.
TIE_EPS = 1e-9


def compare_params(t_a: float, t_b: float, eps: float = TIE_EPS) -> int:
    """
    Decide which loop reaches its next vertex first.

    Returns
    -------
    int
        0 if |t_a - t_b| < eps (tie, strict), -1 if A leads (t_a < t_b),
        +1 if B leads.
    """
    if abs(t_a - t_b) < eps:
        return 0
    return -1 if t_a < t_b else 1


def walk_perimeters(loop_a: ParameterizedLoop,
                    loop_b: ParameterizedLoop,
                    builder: FaceBuilder) -> None:
    """
    Walk two parameterized loops in sync, adding one quad per step to `builder`.

    Terminates because every iteration increments i_a, i_b or both, and a cursor
    only advances while below its bound.
    """
    i_a = 0
    i_b = 0
    n_a = loop_a.count
    n_b = loop_b.count

    while i_a < n_a or i_b < n_b:
        t_next_a = loop_a.param(i_a + 1)
        t_next_b = loop_b.param(i_b + 1)

        a0 = loop_a.vertex(i_a)
        b0 = loop_b.vertex(i_b)

        if i_a >= n_a:
            # A is done: hold on A's last edge, advance B only
            a1 = loop_a.interpolate(n_a - 1, t_next_b)
            b1 = loop_b.vertex(i_b + 1)
            builder.add_quad(a0, a1, b0, b1, interpolated=(1,))
            i_b += 1
            continue

        if i_b >= n_b:
            # B is done: hold on B's last edge, advance A only
            a1 = loop_a.vertex(i_a + 1)
            b1 = loop_b.interpolate(n_b - 1, t_next_a)
            builder.add_quad(a0, a1, b0, b1, interpolated=(2,))
            i_a += 1
            continue

        order = compare_params(t_next_a, t_next_b)
        if order == 0:
            # Both reach their next vertex together: clean quad
            builder.add_quad(a0, loop_a.vertex(i_a + 1), b0, loop_b.vertex(i_b + 1))
            i_a += 1
            i_b += 1
        elif order < 0:
            # A's next vertex comes first: interpolate on B's current edge
            a1 = loop_a.vertex(i_a + 1)
            b1 = loop_b.interpolate(i_b, t_next_a)
            builder.add_quad(a0, a1, b0, b1, interpolated=(2,))
            i_a += 1
        else:
            # B's next vertex comes first: interpolate on A's current edge
            a1 = loop_a.interpolate(i_a, t_next_b)
            b1 = loop_b.vertex(i_b + 1)
            builder.add_quad(a0, a1, b0, b1, interpolated=(1,))
            i_b += 1


def perimeter_walk(loop_a, height_a: float, loop_b, height_b: float) -> LoftResult:
    """
    Perimeter Walk loft algorithm.

    Parameters
    ----------
    loop_a, loop_b : array-like
        (N, 2) closed loops (closing edge implied); any winding, any start vertex,
        vertex counts may differ.
    height_a, height_b : float
        Heights assigned to loop A and loop B corners.

    Returns
    -------
    LoftResult
        Quads in walk order; empty for degenerate input.
    """
    A = _as_xy(loop_a)
    B = _as_xy(loop_b)
    if A.shape[0] < 3 or B.shape[0] < 3:
        logger.debug("[perimeter_walk] degenerate loop (n_a=%d, n_b=%d); no faces.",
                     A.shape[0], B.shape[0])
        return LoftResult([])

    A = ensure_ccw(A)
    B = align_loop_starts(A, ensure_ccw(B))

    # ParameterizedLoop re-applies ensure_ccw; a no-op here.
    param_a = ParameterizedLoop(A)
    param_b = ParameterizedLoop(B)

    if param_a.total_length == 0.0 or param_b.total_length == 0.0:
        logger.debug("[perimeter_walk] zero-perimeter loop; no faces.")
        return LoftResult([])

    builder = FaceBuilder(height_a, height_b)
    walk_perimeters(param_a, param_b, builder)
    return LoftResult(builder.get_faces())
