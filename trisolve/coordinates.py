"""Solve a triangle given by the cartesian coordinates of its vertices."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from .cases import law_of_cosines_angle
from .config import get_solver_config
from .enrich import derive
from .errors import DuplicateCoordinate, TriangleError, Unsolvable
from .model import Circle, PointSolution, PointSolveResult
from .primitives import (
    Point,
    barycentric_to_cartesian,
    compact_raw_point,
    format_number,
    normalize_point,
)
from .units import AngleUnit

logger = logging.getLogger(__name__)

VERTEX_NAMES = ("A", "B", "C")


def _read_vertices(raw: Dict[str, Any]) -> Dict[str, Point]:
    vertices = {name: normalize_point(raw[name], name) for name in VERTEX_NAMES}
    for idx, name in enumerate(VERTEX_NAMES):
        other = VERTEX_NAMES[(idx + 1) % 3]
        p, q = vertices[name], vertices[other]
        if math.hypot(p.x - q.x, p.y - q.y) == 0:
            raise DuplicateCoordinate(
                f"Repeated Coordinates: {name}: {compact_raw_point(raw[name])} and "
                f"{other}: {compact_raw_point(raw[other])} - Coordinates must be unique.",
                points=(name, other),
            )
    return vertices


def _solve_vertices(vertices: Dict[str, Point], unit: AngleUnit) -> PointSolution:
    pa, pb, pc = (vertices[name] for name in VERTEX_NAMES)
    side_ab = math.hypot(pa.x - pb.x, pa.y - pb.y)
    side_bc = math.hypot(pb.x - pc.x, pb.y - pc.y)
    side_ca = math.hypot(pc.x - pa.x, pc.y - pa.y)

    angle_a = law_of_cosines_angle(side_ca, side_ab, side_bc)
    angle_b = law_of_cosines_angle(side_bc, side_ab, side_ca)
    angle_c = math.pi - angle_a - angle_b
    if any(math.isnan(angle) or angle <= 0.0 for angle in (angle_a, angle_b, angle_c)):
        raise Unsolvable(
            "Unsolvable: Impossible combination of side lengths: "
            + ", ".join(format_number(side) for side in (side_bc, side_ca, side_ab)),
            sides=(side_bc, side_ca, side_ab),
        )

    derived = derive(side_bc, side_ca, side_ab, angle_a, angle_c)
    corners = (pa, pb, pc)
    return PointSolution(
        a=side_bc,
        b=side_ca,
        c=side_ab,
        alpha=unit.from_radians(angle_a),
        beta=unit.from_radians(angle_b),
        gamma=unit.from_radians(angle_c),
        area=derived.area,
        ha=derived.ha,
        hb=derived.hb,
        hc=derived.hc,
        incircle=Circle(
            radius=derived.inradius,
            center=barycentric_to_cartesian(corners, (side_bc, side_ca, side_ab)),
        ),
        circumcircle=Circle(
            radius=derived.circumradius,
            center=barycentric_to_cartesian(
                corners,
                (math.sin(2 * angle_a), math.sin(2 * angle_b), math.sin(2 * angle_c)),
            ),
        ),
        centroid=barycentric_to_cartesian(corners, (1 / 3, 1 / 3, 1 / 3)),
    )


def solve_points(A: Any, B: Any, C: Any, mode: Optional[str] = None) -> PointSolveResult:
    """Solve the triangle with vertices ``A``, ``B`` and ``C``.

    Each vertex may be ``[x, y]``, ``{"x": .., "y": ..}``, ``{"X": .., "Y": ..}``
    or a :class:`~trisolve.primitives.Point`. Exactly one solution is returned
    unless the input is rejected, in which case ``error`` is set.
    """

    raw = {"A": A, "B": B, "C": C}
    if mode is None:
        mode = get_solver_config().default_mode
    mode = getattr(mode, "value", mode)
    try:
        vertices = _read_vertices(raw)
        unit = AngleUnit.parse(mode)
        solution = _solve_vertices(vertices, unit)
    except TriangleError as exc:
        logger.info("No solution for points %s: %s", raw, exc.message)
        return PointSolveResult(points=raw, mode=mode, error=exc.report())

    logger.info(
        "Solved points: sides=(%.6g, %.6g, %.6g) area=%.6g",
        solution.a,
        solution.b,
        solution.c,
        solution.area,
    )
    return PointSolveResult(
        points=raw,
        mode=mode,
        solutions=(solution,),
        vertices=vertices,
    )
