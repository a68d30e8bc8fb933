"""Tests for loft/segments.py (orchestrator)."""
import logging
import numpy as np
import pytest

from loft.core.faces import LoftResult
from loft.errors import NoAlgorithmError
from loft.registry import LoftRegistry, default_registry
from loft.segments import LoftableModel, LoftSegment, build_from_planes
from model.plane import SketchPlane


def _faces_equal(m1, m2):
    if len(m1.segments) != len(m2.segments):
        return False
    for s1, s2 in zip(m1.segments, m2.segments):
        if len(s1.faces) != len(s2.faces):
            return False
        for f, g in zip(s1.faces, s2.faces):
            if not np.array_equal(f.vertices, g.vertices):
                return False
    return True


# --- fewer than two planes ---

@pytest.mark.parametrize("n", [0, 1])
def test_too_few_planes_give_empty_model(square, n):
    planes = [SketchPlane(square, 0.0)][:n]
    model = build_from_planes(planes)
    assert model.segments == []
    assert len(model) == 0
    assert model.roof_height() == 0
    assert model.roof_vertices() is None
    assert model.all_planes() == []
    assert model.face_count() == 0
    assert model.resolution is None


# --- ordering ---

def test_segments_sorted_by_height(stack):
    top, bottom, middle = stack
    model = build_from_planes([top, bottom, middle])
    assert len(model.segments) == 2
    assert model.segments[0].bottom_plane is bottom
    assert model.segments[0].top_plane is middle
    assert model.segments[1].bottom_plane is middle
    assert model.segments[1].top_plane is top
    assert [s.bottom_height for s in model.segments] == [0.0, 3.0]
    assert [s.top_height for s in model.segments] == [3.0, 7.5]


def test_all_planes_equals_sorted_input(stack):
    top, bottom, middle = stack
    model = build_from_planes(stack)
    planes = model.all_planes()
    assert len(planes) == 3
    assert all(p is q for p, q in zip(planes, [bottom, middle, top]))


def test_equal_heights_keep_input_order(square):
    p1 = SketchPlane(square, 1.0)
    p2 = SketchPlane(square * 2, 1.0)
    p0 = SketchPlane(square, 0.0)
    model = build_from_planes([p1, p2, p0])
    assert [p for p in model.all_planes()] == [p0, p1, p2]


def test_roof_queries(stack):
    top, _, _ = stack
    model = build_from_planes(stack)
    assert model.roof_height() == 7.5
    assert np.array_equal(model.roof_vertices(), top.get_vertices())


def test_face_counts(stack):
    model = build_from_planes(stack)
    assert [len(s.faces) for s in model.segments] == [8, 8]
    assert model.face_count() == 16
    assert all(f.is_quad for s in model.segments for f in s.faces)


# --- snapshot semantics ---

def test_model_is_a_snapshot(square):
    bottom = SketchPlane(square, 0.0)
    top = SketchPlane(square, 2.0)
    model = build_from_planes([bottom, top])
    before = model.segments[0].faces[0].vertices.copy()
    top.set_vertices(square * 10)
    assert np.array_equal(model.segments[0].faces[0].vertices, before)
    # planes are borrowed, so derived queries see the live plane
    assert np.array_equal(model.roof_vertices(), square * 10)


def test_faces_use_plane_heights(square):
    model = build_from_planes([SketchPlane(square, 5.0), SketchPlane(square, -2.0)])
    seg = model.segments[0]
    assert seg.bottom_height == -2.0
    for f in seg.faces:
        assert np.allclose(f.vertices[:2, 2], -2.0)
        assert np.allclose(f.vertices[2:, 2], 5.0)


# --- degenerate planes ---

def test_degenerate_plane_gives_empty_segment(square):
    sketch = SketchPlane([(0, 0), (1, 1)], 1.0)
    model = build_from_planes([SketchPlane(square, 0.0), sketch, SketchPlane(square, 2.0)])
    assert len(model.segments) == 2
    assert model.segments[0].faces == []
    assert model.segments[1].faces == []


# --- algorithm resolution ---

def test_unknown_algorithm_matches_default(stack, caplog):
    default = build_from_planes(stack)
    with caplog.at_level(logging.WARNING, logger="loft.registry"):
        unknown = build_from_planes(stack, "does-not-exist")
    assert _faces_equal(default, unknown)
    assert unknown.resolution.fell_back
    assert not default.resolution.fell_back
    assert "Unknown loft algorithm: does-not-exist" in caplog.text


def test_custom_algorithm_receives_pairs(stack):
    calls = []

    def recorder(loop_a, height_a, loop_b, height_b):
        calls.append((len(loop_a), height_a, len(loop_b), height_b))
        return LoftResult([])

    reg = default_registry()
    reg.register("recorder", recorder)
    model = build_from_planes(stack, "recorder", registry=reg)
    assert calls == [(4, 0.0, 8, 3.0), (8, 3.0, 4, 7.5)]
    assert model.resolution.name == "recorder"
    assert model.face_count() == 0


def test_configured_default_algorithm(stack):
    reg = default_registry()
    reg.register("flat", lambda a, ha, b, hb: LoftResult([]))
    model = build_from_planes(stack, registry=reg, config={"DEFAULT_ALGORITHM": "flat"})
    assert model.resolution.name == "flat"


def test_configured_none_uses_fallback(stack):
    model = build_from_planes(stack, config={"DEFAULT_ALGORITHM": None})
    assert model.resolution.name == "perimeter-walk"
    assert not model.resolution.fell_back


def test_no_valid_algorithm_is_fatal(stack):
    with pytest.raises(NoAlgorithmError):
        build_from_planes(stack, "anything", registry=LoftRegistry())


def test_algorithm_sees_vertex_copies(square):
    seen = []

    def grab(loop_a, height_a, loop_b, height_b):
        seen.append(loop_a)
        return LoftResult([])

    reg = LoftRegistry()
    reg.register("perimeter-walk", grab)
    plane = SketchPlane(square, 0.0)
    build_from_planes([plane, SketchPlane(square, 1.0)], registry=reg)
    seen[0][0, 0] = 123.0
    assert plane.get_vertices()[0, 0] == 0.0


# --- value types ---

def test_segment_repr(square):
    seg = LoftSegment(SketchPlane(square, 0.0), SketchPlane(square, 1.0), [])
    assert "0 -> 1" in repr(seg)


def test_empty_loftable_model():
    assert LoftableModel().segments == []
