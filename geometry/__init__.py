# -*- coding: utf-8 -*-
# Stackloft/geometry/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/14/2026

Modules:
--------
- topology: Connectivity-level operations on closed 2D sketch loops:
              * (N, 2) array coercion and shape validation,
              * Signed area and CCW canonicalization,
              * Start-vertex alignment between two loops (nearest-vertex rotation).

            Usage:
                from geometry.topology.loop import ensure_ccw
                from geometry.topology.align import align_loop_starts
"""

__all__ = ["topology"]
