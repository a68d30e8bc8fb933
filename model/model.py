# -*- coding: utf-8 -*-
# Stackloft/model/model.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/23/2026 (Updated: 10/7/2026)

Purpose:
--------
The editable building model: a named stack of sketch planes plus one lock flag per
segment (adjacent plane pair). Lofting is delegated to `loft.segments`.

Main Tasks:
-----------
   1. Own planes and segment lock flags (len = max(0, planes - 1)).
   2. Keep flags in step with plane edits through the pure `resize_segment_locks`.
   3. Build a LoftableModel snapshot on demand (`loft`).

Notes:
------
- Out-of-range lock queries read False; out-of-range lock writes are ignored.
- Flags are positional: they follow segment indices, not specific planes.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence
from loft.registry import LoftRegistry
from loft.segments import LoftableModel, build_from_planes
from .plane import SketchPlane

logger = logging.getLogger(__name__)


def resize_segment_locks(old_flags: Sequence[bool], new_count: int) -> List[bool]:
    """
    Return lock flags for `new_count` segments, keeping overlapping indices from
    `old_flags`, padding with False and dropping extras.
    """
    n = max(0, int(new_count))
    kept = [bool(f) for f in list(old_flags)[:n]]
    return kept + [False] * (n - len(kept))


class Model:
    """
    Parameters
    ----------
    name : str
        Model name.
    planes : list of SketchPlane, optional
        Initial planes (any order).
    """

    def __init__(self, name: str, planes: Optional[List[SketchPlane]] = None):
        self.name = name
        self.planes = list(planes) if planes else []
        self.segment_locked = resize_segment_locks([], self.segment_count())

    def segment_count(self) -> int:
        return max(0, len(self.planes) - 1)

    def is_segment_locked(self, index: int) -> bool:
        if 0 <= index < len(self.segment_locked):
            return self.segment_locked[index]
        return False

    def set_segment_locked(self, index: int, locked: bool) -> None:
        if 0 <= index < len(self.segment_locked):
            self.segment_locked[index] = bool(locked)

    def add_plane(self, plane: SketchPlane) -> None:
        self.planes.append(plane)
        self.segment_locked = resize_segment_locks(self.segment_locked, self.segment_count())

    def remove_plane(self, plane: SketchPlane) -> bool:
        """Remove `plane` (by identity); False if it is not part of the model."""
        for i, p in enumerate(self.planes):
            if p is plane:
                del self.planes[i]
                self.segment_locked = resize_segment_locks(self.segment_locked, self.segment_count())
                return True
        return False

    def planes_sorted_by_height(self) -> List[SketchPlane]:
        return sorted(self.planes, key=lambda p: p.height)

    def loft(self,
             algorithm_name: Optional[str] = None,
             *,
             registry: Optional[LoftRegistry] = None,
             config: Optional[Mapping[str, Any]] = None) -> LoftableModel:
        """Build a fresh LoftableModel snapshot from the current planes."""
        logger.debug("[Model.loft] %s: %d planes", self.name, len(self.planes))
        return build_from_planes(self.planes, algorithm_name, registry=registry, config=config)
