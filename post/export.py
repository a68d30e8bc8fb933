# -*- coding: utf-8 -*-
# Stackloft/post/export.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/25/2026 (Updated: 10/8/2026)

Purpose:
--------
Export a LoftableModel for inspection and for downstream geometry tools. Summaries
(arbitrary nested dicts) go to JSON or a flat "key,value" CSV; the faces go to a
Wavefront OBJ file.

Main Tasks:
-----------
    1. `summarize_model`: per-segment heights, quad/triangle counts, interpolated
       corner counts, plus roof height and algorithm resolution.
    2. Flatten nested summaries into ("dot.path.key", value) rows for CSV.
    3. `write_obj`: per-segment vertex de-duplication, 1-based indices, `o segment_i`
       groups, atomic replace of the target file.

Notes:
------
- OBJ vertices are written as (x, y, height); consumers wanting y-up must swap axes.
- Faces keep the loft winding (outward normals for CCW loops).
"""

from typing import Any, Dict, List, Tuple
import csv
import json
import os
import tempfile
import numpy as np


# ------------------------------
# Internal helpers
# ------------------------------
def _is_scalar(x: Any) -> bool:
    """
    Check if `x` is a scalar-like type (None, str, bool, int, float, or numpy scalar).
    """
    return x is None or isinstance(x, (str, bool, int, float, np.generic))


def _json_default(o):
    """json.dumps `default` hook for numpy scalars/arrays."""
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _to_json_str(x: Any) -> str:
    """
    Convert an object to a JSON string, handling numpy scalars/arrays cleanly.
    """
    return json.dumps(x, default=_json_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Recursively flatten nested dictionaries into (key_path, value) rows.

    Rules:
    ------
    - Scalars are stored as-is.
    - dicts: recurse into sorted keys, joined with '.'.
    - lists of dicts: recurse with the index as key ("segments.0.quads").
    - other lists/tuples/arrays: stored as JSON string.
    """
    if _is_scalar(obj):
        out.append((prefix, obj))
        return

    if isinstance(obj, dict):
        for k in sorted(obj.keys()):
            key = str(k)
            p2 = key if prefix == "" else "{}.{}".format(prefix, key)
            _flatten(p2, obj[k], out)
        return

    if isinstance(obj, (list, tuple)) and obj and all(isinstance(v, dict) for v in obj):
        for i, v in enumerate(obj):
            _flatten("{}.{}".format(prefix, i) if prefix else str(i), v, out)
        return

    out.append((prefix, _to_json_str(obj)))


def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


# ------------------------------
# Public API: summary
# ------------------------------
def summarize_model(model) -> Dict[str, Any]:
    """
    Build a JSON-ready summary of a LoftableModel.

    Returns
    -------
    dict
        {"n_segments", "n_faces", "roof_height", "algorithm", "requested_algorithm",
         "fell_back", "segments": [{"index", "bottom_height", "top_height",
         "faces", "quads", "triangles", "interpolated_corners"}, ...]}
    """
    res = model.resolution
    segs = []
    for i, seg in enumerate(model.segments):
        quads = sum(1 for f in seg.faces if len(f) == 4)
        segs.append({
            "index": i,
            "bottom_height": seg.bottom_height,
            "top_height": seg.top_height,
            "faces": len(seg.faces),
            "quads": quads,
            "triangles": len(seg.faces) - quads,
            "interpolated_corners": sum(len(f.interpolated) for f in seg.faces),
        })
    return {
        "n_segments": len(model.segments),
        "n_faces": model.face_count(),
        "roof_height": model.roof_height(),
        "algorithm": res.name if res is not None else None,
        "requested_algorithm": res.requested if res is not None else None,
        "fell_back": bool(res.fell_back) if res is not None else False,
        "segments": segs,
    }


# ------------------------------
# Public API: Writers
# ------------------------------
def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write summary dictionary to a 2-column CSV file ("key,value").

    Returns
    -------
    str
        Written file path.
    """
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)

    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in rows:
            if not _is_scalar(v):
                v = _to_json_str(v)
            w.writerow([k, v])

    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write summary dictionary to a JSON file.

    Returns
    -------
    str
        Written file path.
    """
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, ensure_ascii=False, default=_json_default)
    return path


def model_to_obj(model, precision: int = 6) -> str:
    """
    Render a LoftableModel as Wavefront OBJ text.

    Vertices are de-duplicated per segment after rounding to `precision` decimals;
    indices are 1-based and global across segments.
    """
    fmt = "v {{:.{p}f}} {{:.{p}f}} {{:.{p}f}}".format(p=int(precision))
    lines = ["# Stackloft OBJ export",
             "# segments: {}, faces: {}".format(len(model.segments), model.face_count())]
    offset = 0
    for i, seg in enumerate(model.segments):
        lines.append("o segment_{}".format(i))
        index = {}  # type: Dict[Tuple[float, float, float], int]
        verts = []  # type: List[Tuple[float, float, float]]
        faces = []  # type: List[List[int]]
        for face in seg.faces:
            ids = []
            for p in np.round(face.vertices, int(precision)):
                key = (float(p[0]) + 0.0, float(p[1]) + 0.0, float(p[2]) + 0.0)  # +0.0 folds -0.0
                if key not in index:
                    index[key] = len(verts)
                    verts.append(key)
                ids.append(index[key] + 1 + offset)
            faces.append(ids)
        lines.extend(fmt.format(*v) for v in verts)
        lines.extend("f " + " ".join(str(k) for k in ids) for ids in faces)
        offset += len(verts)
    return "\n".join(lines) + "\n"


def write_obj(model, path: str, precision: int = 6) -> str:
    """
    Atomic UTF-8 write of `model_to_obj(model, precision)` to `path`.

    Returns
    -------
    str
        Written file path.
    """
    text = model_to_obj(model, precision)
    _ensure_parent(path)
    folder = os.path.dirname(os.path.abspath(path))
    tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=folder, delete=False)
    try:
        tf.write(text)
        tmp_name = tf.name
    finally:
        tf.close()
    os.replace(tmp_name, path)
    return path
