# -*- coding: utf-8 -*-
# Stackloft/post/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/25/2026

Modules:
--------
- export:    Loft summaries (per-segment face statistics) as JSON/CSV and the lofted
             skin as a Wavefront OBJ (one group per segment, atomic write).

- plot_loft: matplotlib quick-looks: plane outlines overlaid in 2D, and the lofted
             faces in 3D.
"""

__all__ = ["export", "plot_loft"]
