"""Render solved triangles with matplotlib."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Union

from .coordinates import VERTEX_NAMES, solve_points
from .model import PointSolveResult, Solution, SolveResult
from .primitives import Point
from .units import AngleUnit

logger = logging.getLogger(__name__)


def layout_vertices(solution: Solution, unit: AngleUnit) -> Dict[str, Point]:
    """Place a solved triangle with A at the origin and B on the positive x axis."""

    alpha = unit.to_radians(solution.alpha)
    return {
        "A": Point(0.0, 0.0),
        "B": Point(solution.c, 0.0),
        "C": Point(solution.b * math.cos(alpha), solution.b * math.sin(alpha)),
    }


def _as_point_result(result: Union[SolveResult, PointSolveResult], index: int) -> PointSolveResult:
    if isinstance(result, PointSolveResult):
        return result
    solution = result.solutions[index]
    vertices = layout_vertices(solution, AngleUnit.parse(result.mode))
    return solve_points(vertices["A"], vertices["B"], vertices["C"], mode=result.mode)


def render_solution(
    result: Union[SolveResult, PointSolveResult],
    path: Union[str, Path],
    *,
    index: int = 0,
    title: str = "",
) -> Path:
    """Draw the triangle, its incircle, circumcircle and centroid into a PNG at ``path``."""

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    if not result.solutions:
        raise ValueError("cannot plot a result without solutions")
    point_result = _as_point_result(result, index)
    solution = point_result.solutions[0]
    vertices = point_result.vertices

    xs = [vertices[name].x for name in VERTEX_NAMES]
    ys = [vertices[name].y for name in VERTEX_NAMES]

    fig, ax = plt.subplots(figsize=(5, 5))
    ax.fill(xs, ys, alpha=0.15, color="#1f77b4")
    ax.plot(xs + xs[:1], ys + ys[:1], color="#1f77b4", linewidth=1.5)
    for name in VERTEX_NAMES:
        vertex = vertices[name]
        ax.text(vertex.x, vertex.y, name, fontsize=10, ha="left", va="bottom")

    for circle, color in ((solution.incircle, "green"), (solution.circumcircle, "orange")):
        center = circle.center
        if center is None:
            continue
        ax.add_patch(plt.Circle(center.as_tuple(), circle.radius, fill=False, color=color))
        ax.scatter([center.x], [center.y], c=color, s=12)

    centroid = getattr(solution, "centroid", None)
    if centroid is not None:
        ax.scatter([centroid.x], [centroid.y], c="red", s=16, marker="x")

    span = 2 * solution.circumcircle.radius
    center = solution.circumcircle.center or Point(sum(xs) / 3, sum(ys) / 3)
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(center.x - 0.6 * span, center.x + 0.6 * span)
    ax.set_ylim(center.y - 0.6 * span, center.y + 0.6 * span)
    ax.set_title(title or "a={:.3g} b={:.3g} c={:.3g}".format(*solution.sides))
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)
    fig.tight_layout()

    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output)
    plt.close(fig)
    logger.info("Wrote triangle plot to %s", output)
    return output
