"""Immutable result types returned by :func:`trisolve.solve` and :func:`trisolve.solve_points`."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import SolveError
from .primitives import Point, round_to_precision


@dataclass(frozen=True)
class Circle:
    radius: float
    center: Optional[Point] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"radius": self.radius}
        if self.center is not None:
            data["center"] = asdict(self.center)
        return data


@dataclass(frozen=True)
class Solution:
    """A fully determined triangle. Angles are in the unit of the enclosing result."""

    a: float
    b: float
    c: float
    alpha: float
    beta: float
    gamma: float
    area: float
    ha: float
    hb: float
    hc: float
    incircle: Circle
    circumcircle: Circle

    @property
    def sides(self) -> Tuple[float, float, float]:
        return self.a, self.b, self.c

    @property
    def angles(self) -> Tuple[float, float, float]:
        return self.alpha, self.beta, self.gamma

    def to_dict(self) -> Dict[str, Any]:
        return {
            "a": self.a,
            "b": self.b,
            "c": self.c,
            "alpha": self.alpha,
            "beta": self.beta,
            "gamma": self.gamma,
            "area": self.area,
            "ha": self.ha,
            "hb": self.hb,
            "hc": self.hc,
            "incircle": self.incircle.to_dict(),
            "circumcircle": self.circumcircle.to_dict(),
        }


@dataclass(frozen=True)
class PointSolution(Solution):
    """Solution of a triangle given by its vertices A, B and C."""

    centroid: Point

    @property
    def angle_a(self) -> float:
        return self.alpha

    @property
    def angle_b(self) -> float:
        return self.beta

    @property
    def angle_c(self) -> float:
        return self.gamma

    @property
    def side_bc(self) -> float:
        return self.a

    @property
    def side_ca(self) -> float:
        return self.b

    @property
    def side_ab(self) -> float:
        return self.c

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "angle_a": self.angle_a,
                "angle_b": self.angle_b,
                "angle_c": self.angle_c,
                "side_bc": self.side_bc,
                "side_ca": self.side_ca,
                "side_ab": self.side_ab,
                "centroid": asdict(self.centroid),
            }
        )
        return data


def _round_floats(value: Any, precision: int) -> Any:
    if isinstance(value, float):
        return round_to_precision(value, precision)
    if isinstance(value, dict):
        return {key: _round_floats(item, precision) for key, item in value.items()}
    if isinstance(value, list):
        return [_round_floats(item, precision) for item in value]
    return value


@dataclass(frozen=True)
class SolveResult:
    """Envelope for :func:`trisolve.solve`.

    ``params`` echoes the populated inputs exactly as supplied. ``solutions``
    holds zero, one or two triangles; ``error`` is set whenever it is empty.
    """

    params: Mapping[str, Any]
    mode: Any
    solutions: Tuple[Solution, ...] = ()
    error: Optional[SolveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.solutions)

    def to_dict(self, precision: Optional[int] = None) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.params)
        data["mode"] = self.mode
        data["solutions"] = [solution.to_dict() for solution in self.solutions]
        if self.error is not None:
            data["error"] = self.error.to_dict()
        if precision is not None:
            data["solutions"] = _round_floats(data["solutions"], precision)
        return data


@dataclass(frozen=True)
class PointSolveResult:
    """Envelope for :func:`trisolve.solve_points`; ``points`` echoes A, B and C as given."""

    points: Mapping[str, Any]
    mode: Any
    solutions: Tuple[PointSolution, ...] = ()
    error: Optional[SolveError] = None
    vertices: Dict[str, Point] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.solutions)

    def to_dict(self, precision: Optional[int] = None) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.points)
        data["mode"] = self.mode
        data["solutions"] = [solution.to_dict() for solution in self.solutions]
        if self.error is not None:
            data["error"] = self.error.to_dict()
        if precision is not None:
            data["solutions"] = _round_floats(data["solutions"], precision)
        return data
