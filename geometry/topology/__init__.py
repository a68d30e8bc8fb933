# -*- coding: utf-8 -*-
# Stackloft/geometry/topology/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/14/2026

Topology Subfolder:
-------------------
Connectivity-level operations for closed 2D loops feeding the loft core.

Modules:
--------
- loop:        Shoelace signed area, CCW predicate and idempotent CCW canonicalization
               (reversal only; no re-sorting).

- align:       Nearest-vertex start alignment between two loops with explicit
               lowest-index tie-breaking and cyclic rotation.

- _validation: Shared coercion/validation of point arrays ((N, 2) float64, optional
               finiteness check).
"""

__all__ = ["align", "loop"]
