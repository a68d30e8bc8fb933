# -*- coding: utf-8 -*-
# Stackloft/model/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/23/2026

Modules:
--------
- plane: SketchPlane, a closed 2D loop pinned at a height (the loft input unit).

- model: Model, the editable stack of planes with per-segment lock flags, and the
         pure `resize_segment_locks` helper.
"""

from .plane import SketchPlane
from .model import Model, resize_segment_locks

__all__ = ["SketchPlane", "Model", "resize_segment_locks"]
