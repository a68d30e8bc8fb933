# -*- coding: utf-8 -*-
# Stackloft/main.py

"""
End-to-end driver:
  1) Configure logging from config (optional JSON overrides via argv[1])
  2) Build a small stack of sketch planes (square footprint, octagonal mid floor,
     clockwise rotated roof outline)
  3) Loft the stack into segments
  4) Summary (JSON/CSV) + OBJ export
  5) Quick plots (plan view + 3D skin)
"""

import os
import sys
import logging

import numpy as np

from loft.config import build_config, load_config, configure_logging
from model.model import Model
from model.plane import SketchPlane
from post.export import summarize_model, write_summary_json, write_summary_csv, write_obj
from post.plot_loft import plot_loops, plot_loft


def _regular_polygon(n, radius, phase=0.0):
    ang = phase + 2.0 * np.pi * np.arange(n) / n
    return np.column_stack((radius * np.cos(ang), radius * np.sin(ang)))


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Config + logging
    # ------------------------------------------------------------------
    cfg = load_config(sys.argv[1]) if len(sys.argv) > 1 else build_config()
    configure_logging(cfg)
    log = logging.getLogger("Stackloft")

    os.makedirs("out", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Sketch planes
    # ------------------------------------------------------------------
    ground = SketchPlane([(-10, -10), (10, -10), (10, 10), (-10, 10)], 0.0)
    mid = SketchPlane(_regular_polygon(8, 12.0, phase=np.pi / 8), 4.0)
    # Clockwise and rotated on purpose: the loft normalizes winding and start vertex
    roof = SketchPlane(_regular_polygon(4, 9.0, phase=np.pi / 6)[::-1], 9.0)

    building = Model("demo", [roof, ground, mid])
    building.set_segment_locked(0, True)

    # ------------------------------------------------------------------
    # 2) Loft
    # ------------------------------------------------------------------
    lofted = building.loft(config=cfg)
    log.info("Roof height: %g, roof vertices: %d", lofted.roof_height(), len(lofted.roof_vertices()))

    # ------------------------------------------------------------------
    # 3) Summary + OBJ
    # ------------------------------------------------------------------
    summary = summarize_model(lofted)
    summary["locked_segments"] = [i for i in range(building.segment_count())
                                  if building.is_segment_locked(i)]
    json_path = write_summary_json(summary, os.path.join("out", "loft_summary.json"))
    csv_path = write_summary_csv(summary, os.path.join("out", "loft_summary.csv"))
    obj_path = write_obj(lofted, os.path.join("out", "loft.obj"), precision=cfg["OBJ_PRECISION"])
    log.info("Artifacts written: %s, %s, %s", json_path, csv_path, obj_path)

    # ------------------------------------------------------------------
    # 4) Quick plots (optional)
    # ------------------------------------------------------------------
    try:
        plot_loops(building.planes, show=False, save_path=os.path.join("out", "planes.png"))
        plot_loft(lofted, show=True, save_path=os.path.join("out", "loft.png"))
    except Exception as e:
        log.warning("Skipping plots: %s", e)
