# -*- coding: utf-8 -*-
# Stackloft/loft/core/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/17/2026

Core Subpackage:
----------------
Per-invocation building blocks shared by loft algorithms.

Modules:
--------
- param_loop: ParameterizedLoop, a CCW loop with normalized cumulative perimeter
              parameters in [0, 1] and edge interpolation.

- faces:      LoftFace / LoftResult value types and the single-use FaceBuilder that
              lifts 2D loop points to 3D at two fixed heights.
"""

from .param_loop import ParameterizedLoop
from .faces import LoftFace, LoftResult, FaceBuilder

__all__ = [
    "ParameterizedLoop",
    "LoftFace",
    "LoftResult",
    "FaceBuilder",
]
