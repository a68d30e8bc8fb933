# -*- coding: utf-8 -*-
# Stackloft/post/plot_loft.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/26/2026

Purpose:
--------
Quick-look plotting for sketch stacks and lofted skins using matplotlib. `plot_loops`
overlays every plane outline in plan view (start vertex marked, so alignment issues
are visible); `plot_loft` draws all loft faces in 3D.
"""

from typing import Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from mpl_toolkits.mplot3d.art3d import Poly3DCollection


def plot_loops(planes: Sequence,
               *,
               show: bool = True,
               save_path: Optional[str] = None,
               ax: Optional[Axes] = None) -> None:
    """
    Overlay plane outlines in plan view.

    Parameters
    ----------
    planes : sequence of PlaneLike
        Objects with `height` and `get_vertices()`.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    """
    planes = list(planes)
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    for plane in sorted(planes, key=lambda p: p.height):
        P = np.asarray(plane.get_vertices(), dtype=float)
        if P.shape[0] == 0:
            continue
        closed = np.vstack((P, P[:1]))
        line, = ax.plot(closed[:, 0], closed[:, 1], lw=1.5, label="z = {:g}".format(plane.height))
        ax.plot(P[0, 0], P[0, 1], 'o', color=line.get_color(), ms=5)

    ax.set_aspect('equal', adjustable='box')
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Sketch planes (plan view)")
    ax.grid(True)
    if planes:
        ax.legend()

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def plot_loft(model,
              *,
              show: bool = True,
              save_path: Optional[str] = None,
              ax=None,
              edgecolor: str = "k",
              alpha: float = 0.6) -> None:
    """
    Draw all faces of a LoftableModel in 3D (x, y, height).

    Parameters
    ----------
    model : LoftableModel
        Result of `build_from_planes`.
    ax : Optional[mpl_toolkits.mplot3d.Axes3D]
        Existing 3D Axes; if None, a figure is created.
    show, save_path
        Same semantics as `plot_loops`.
    """
    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(7, 6))
        ax = fig.add_subplot(111, projection="3d")
        created_fig = True

    cmap = plt.get_cmap("viridis")
    n_seg = max(1, len(model.segments))
    all_pts = []
    for i, seg in enumerate(model.segments):
        polys = [f.vertices for f in seg.faces]
        if not polys:
            continue
        coll = Poly3DCollection(polys, facecolor=cmap(i / n_seg), edgecolor=edgecolor,
                                linewidths=0.5, alpha=alpha)
        ax.add_collection3d(coll)
        all_pts.extend(polys)

    if all_pts:
        pts = np.vstack(all_pts)
        lo, hi = pts.min(axis=0), pts.max(axis=0)
        ax.set_xlim(lo[0], hi[0] if hi[0] > lo[0] else lo[0] + 1.0)
        ax.set_ylim(lo[1], hi[1] if hi[1] > lo[1] else lo[1] + 1.0)
        ax.set_zlim(lo[2], hi[2] if hi[2] > lo[2] else lo[2] + 1.0)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("height")
    ax.set_title("Loft: {} segments, {} faces".format(len(model.segments), model.face_count()))

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
