# -*- coding: utf-8 -*-
# Stackloft/loft/segments.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/20/2026 (Updated: 10/6/2026)

Purpose
-------
Orchestrate lofting of a whole stack of sketch planes. Planes are sorted by height,
the algorithm is resolved once through the registry, and one `LoftSegment` is built
per adjacent pair. The resulting `LoftableModel` is a snapshot: it keeps references
to the planes but the faces are computed from vertex copies taken at build time.

Main Tasks
----------
    1. Return an empty model for fewer than 2 planes.
    2. Stable-sort planes by height (ties keep input order).
    3. Resolve the algorithm (explicit name -> configured default -> fallback).
    4. Run the algorithm on each adjacent pair and collect segments bottom-to-top.
    5. Derived queries: roof vertices/height, full plane list, face count.

Notes
-----
- Planes only need a `height` attribute and a `get_vertices()` method (`PlaneLike`).
- A degenerate plane (< 3 vertices) yields a segment with no faces, not an error.
- Pairs are independent; the build is sequential since total cost is linear.
"""

import logging
from typing import Any, List, Mapping, Optional, Protocol, Sequence
import numpy as np
from .config import build_config
from .core.faces import LoftFace
from .registry import AlgorithmResolution, LoftRegistry, default_registry, resolve_algorithm

logger = logging.getLogger(__name__)


class PlaneLike(Protocol):
    height: float

    def get_vertices(self) -> Any:
        ...


class LoftSegment:
    """
    A single plane-to-plane segment: two borrowed plane references and the faces
    connecting them.
    """

    def __init__(self, bottom_plane: PlaneLike, top_plane: PlaneLike, faces: List[LoftFace]):
        self.bottom_plane = bottom_plane
        self.top_plane = top_plane
        self.faces = faces

    @property
    def bottom_height(self) -> float:
        return float(self.bottom_plane.height)

    @property
    def top_height(self) -> float:
        return float(self.top_plane.height)

    def __repr__(self) -> str:
        return "LoftSegment({:g} -> {:g}, faces={})".format(
            self.bottom_height, self.top_height, len(self.faces))


class LoftableModel:
    """
    Ordered segments, bottom to top.

    Attributes
    ----------
    segments : List[LoftSegment]
    resolution : Optional[AlgorithmResolution]
        Which algorithm built the segments (None when no build happened, i.e. < 2 planes).
    """

    def __init__(self, segments: Optional[List[LoftSegment]] = None,
                 resolution: Optional[AlgorithmResolution] = None):
        self.segments = list(segments) if segments else []
        self.resolution = resolution

    def roof_vertices(self) -> Optional[np.ndarray]:
        """Current vertices of the top plane of the last segment, or None."""
        if not self.segments:
            return None
        return np.asarray(self.segments[-1].top_plane.get_vertices(), dtype=float)

    def roof_height(self) -> float:
        """Height of the top plane of the last segment, 0.0 when empty."""
        if not self.segments:
            return 0.0
        return self.segments[-1].top_height

    def all_planes(self) -> List[PlaneLike]:
        """All planes bottom to top (equals the sorted input by construction)."""
        if not self.segments:
            return []
        planes = [self.segments[0].bottom_plane]
        planes.extend(seg.top_plane for seg in self.segments)
        return planes

    def face_count(self) -> int:
        return sum(len(seg.faces) for seg in self.segments)

    def __len__(self) -> int:
        return len(self.segments)


# ---------- Public API ----------
def build_from_planes(planes: Sequence[PlaneLike],
                      algorithm_name: Optional[str] = None,
                      *,
                      registry: Optional[LoftRegistry] = None,
                      config: Optional[Mapping[str, Any]] = None) -> LoftableModel:
    """
    Loft a stack of planes into a `LoftableModel`.

    Parameters
    ----------
    planes : Sequence[PlaneLike]
        Planes in any order; read-only for the duration of the call.
    algorithm_name : str, optional
        Explicit algorithm; overrides the configured default.
    registry : LoftRegistry, optional
        Algorithm table; a fresh `default_registry()` when None.
    config : Mapping, optional
        Flat config (see `loft.config.build_config`); defaults when None.

    Returns
    -------
    LoftableModel
        N-1 segments for N >= 2 planes, ascending by height; empty otherwise.

    Raises
    ------
    NoAlgorithmError
        If no valid algorithm can be resolved. No partial model is returned.
    """
    planes = list(planes)
    if len(planes) < 2:
        return LoftableModel([])

    ordered = sorted(planes, key=lambda p: p.height)

    if registry is None:
        registry = default_registry()
    if config is None:
        config = build_config()
    resolution = resolve_algorithm(registry, algorithm_name, config.get("DEFAULT_ALGORITHM"))

    segments = []  # type: List[LoftSegment]
    for bottom, top in zip(ordered[:-1], ordered[1:]):
        # Snapshot vertices: later plane edits must not alter this segment's input
        loop_a = np.array(bottom.get_vertices(), dtype=float)
        loop_b = np.array(top.get_vertices(), dtype=float)
        result = resolution.fn(loop_a, float(bottom.height), loop_b, float(top.height))
        logger.debug("[build_from_planes] %g -> %g: %d faces",
                     bottom.height, top.height, len(result.faces))
        segments.append(LoftSegment(bottom, top, list(result.faces)))

    model = LoftableModel(segments, resolution)
    logger.info("[build_from_planes] %d segments, %d faces (algorithm=%s)",
                len(segments), model.face_count(), resolution.name)
    return model
