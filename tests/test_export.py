"""Tests for post/export.py."""
import csv
import json

from loft.segments import build_from_planes
from model.plane import SketchPlane
from post.export import (
    model_to_obj, summarize_model, write_obj, write_summary_csv, write_summary_json,
)


def _box(square):
    return build_from_planes([SketchPlane(square, 0.0), SketchPlane(square, 1.0)])


def test_summary(stack):
    s = summarize_model(build_from_planes(stack))
    assert s["n_segments"] == 2
    assert s["n_faces"] == 16
    assert s["roof_height"] == 7.5
    assert s["algorithm"] == "perimeter-walk"
    assert s["requested_algorithm"] == "perimeter-walk"
    assert s["fell_back"] is False
    first = s["segments"][0]
    assert (first["bottom_height"], first["top_height"]) == (0.0, 3.0)
    assert first["quads"] == 8 and first["triangles"] == 0
    assert first["interpolated_corners"] == 4


def test_summary_empty_model():
    s = summarize_model(build_from_planes([]))
    assert s["n_segments"] == 0
    assert s["algorithm"] is None
    assert s["segments"] == []


def test_obj_identical_squares(square):
    text = model_to_obj(_box(square))
    lines = text.splitlines()
    assert lines[0] == "# Stackloft OBJ export"
    assert "o segment_0" in lines
    verts = [ln for ln in lines if ln.startswith("v ")]
    faces = [ln for ln in lines if ln.startswith("f ")]
    assert len(verts) == 8
    assert len(faces) == 4
    assert faces[0] == "f 1 2 3 4"
    assert verts[0] == "v 0.000000 0.000000 0.000000"
    used = {int(k) for f in faces for k in f.split()[1:]}
    assert used == set(range(1, 9))


def test_obj_indices_are_global(stack):
    text = model_to_obj(build_from_planes(stack), precision=3)
    lines = text.splitlines()
    n_verts = sum(1 for ln in lines if ln.startswith("v "))
    ids = [int(k) for ln in lines if ln.startswith("f ") for k in ln.split()[1:]]
    assert min(ids) == 1
    assert max(ids) == n_verts
    assert lines.count("o segment_1") == 1
    assert "v 0.000 0.000 0.000" in lines


def test_write_obj(tmp_path, square):
    path = tmp_path / "sub" / "box.obj"
    out = write_obj(_box(square), str(path))
    assert out == str(path)
    assert path.read_text(encoding="utf-8") == model_to_obj(_box(square))
    assert [p.name for p in path.parent.iterdir()] == ["box.obj"]


def test_write_summary_json(tmp_path, stack):
    summary = summarize_model(build_from_planes(stack))
    path = write_summary_json(summary, str(tmp_path / "s.json"))
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data == summary


def test_write_summary_csv(tmp_path, stack):
    summary = summarize_model(build_from_planes(stack))
    summary["locked"] = [0, 1]
    path = write_summary_csv(summary, str(tmp_path / "s.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["key", "value"]
    table = dict(rows[1:])
    assert table["segments.0.quads"] == "8"
    assert table["segments.1.top_height"] == "7.5"
    assert table["n_segments"] == "2"
    assert table["locked"] == "[0, 1]"
