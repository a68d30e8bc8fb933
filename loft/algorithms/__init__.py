# -*- coding: utf-8 -*-
# Stackloft/loft/algorithms/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/18/2026

Algorithms Subpackage:
----------------------
Loft algorithm implementations. Every algorithm is a pure function

    fn(loop_a, height_a, loop_b, height_b) -> LoftResult

and is made available by name through `loft.registry.default_registry()`.
Importing this package registers nothing.

Modules:
--------
- perimeter_walk: Perimeter-parameterized synchronized walk (quads only, linear time).
"""

from .perimeter_walk import perimeter_walk, walk_perimeters, compare_params, TIE_EPS

__all__ = [
    "perimeter_walk",
    "walk_perimeters",
    "compare_params",
    "TIE_EPS",
]
