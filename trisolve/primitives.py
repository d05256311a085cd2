"""Small geometric helpers shared by both solvers."""

from __future__ import annotations

import json
import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from .errors import InvalidCoordinate


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


def to_float(value: Any) -> float:
    """Coerce ``value`` to ``float``; anything that is not a real number or a numeric string gives NaN."""

    if isinstance(value, bool):
        return math.nan
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return math.nan


def format_number(value: float) -> str:
    return f"{value:.15g}"


def equal_float(f1: float, f2: float, max_difference: float = 1e-3) -> bool:
    return abs(f1 - f2) <= max_difference


def round_to_precision(value: float, precision: float) -> float:
    """Round ``value`` to at most ``precision`` decimals (halves round up).

    A negative ``precision`` leaves the value untouched and fractional
    precisions are floored.
    """

    if precision < 0 or not math.isfinite(value):
        return value
    mul = 10.0 ** min(math.floor(precision), 300)
    shifted = value * mul + 0.5
    if not math.isfinite(shifted):
        return value
    return math.floor(shifted) / mul


def describe_raw_point(raw: Any) -> str:
    """Render a point exactly as the caller supplied it, for error messages."""

    return json.dumps(raw, default=repr).replace('"', "'")


def compact_raw_point(raw: Any) -> str:
    if isinstance(raw, Point):
        raw = {"x": raw.x, "y": raw.y}
    if isinstance(raw, Mapping):
        return "{" + ",".join(f"{key}:{value}" for key, value in raw.items()) + "}"
    if isinstance(raw, (Sequence, np.ndarray)) and not isinstance(raw, str):
        return "[" + ",".join(str(value) for value in raw) + "]"
    return str(raw)


def _coordinate_pair(raw: Any) -> Tuple[Any, Any]:
    if isinstance(raw, Point):
        return raw.x, raw.y
    if isinstance(raw, Mapping):
        if "x" in raw and "y" in raw:
            return raw["x"], raw["y"]
        if "X" in raw and "Y" in raw:
            return raw["X"], raw["Y"]
        raise KeyError("no x/y or X/Y keys")
    if isinstance(raw, (str, bytes)):
        raise TypeError("strings are not coordinates")
    if isinstance(raw, (Sequence, np.ndarray)) and len(raw) >= 2:
        return raw[0], raw[1]
    raise TypeError(f"unsupported coordinate {type(raw).__name__}")


def normalize_point(raw: Any, name: str = "point") -> Point:
    """Convert ``[x, y]``, ``{x, y}``, ``{X, Y}`` or :class:`Point` into a :class:`Point`."""

    try:
        x_raw, y_raw = _coordinate_pair(raw)
    except (KeyError, TypeError) as exc:
        raise InvalidCoordinate(
            f"Illegal Parameter: {name}:{describe_raw_point(raw)} - Must be [x,y], {{x,y}} or {{X,Y}}.",
            point=name,
            raw=raw,
        ) from exc
    x = to_float(x_raw)
    y = to_float(y_raw)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidCoordinate(
            f"Illegal Parameter: {name}:{describe_raw_point(raw)} - Must be [x,y], {{x,y}} or {{X,Y}}.",
            point=name,
            raw=raw,
        )
    return Point(x, y)


def distance(p1: Any, p2: Any) -> float:
    """Euclidean distance between two points in any accepted representation."""

    first = normalize_point(p1, "p1")
    second = normalize_point(p2, "p2")
    return math.hypot(first.x - second.x, first.y - second.y)


def incircle_radius(a: float, b: float, c: float) -> float:
    # Heron on lengths scaled by the longest side
    scale = max(a, b, c)
    x, y, z = a / scale, b / scale, c / scale
    s = 0.5 * (x + y + z)
    return scale * math.sqrt(max((s - x) * (s - y) * (s - z) / s, 0.0))


def barycentric_to_cartesian(vertices: Sequence[Point], weights: Sequence[float]) -> Point:
    """Return the point with (unnormalised) barycentric ``weights`` on ``vertices``."""

    w = np.asarray(weights, dtype=float)
    w = w / w.sum()
    coords = np.array([p.as_tuple() for p in vertices], dtype=float)
    x, y = w @ coords
    return Point(float(x), float(y))


__all__ = [
    "Point",
    "barycentric_to_cartesian",
    "compact_raw_point",
    "describe_raw_point",
    "distance",
    "equal_float",
    "format_number",
    "incircle_radius",
    "normalize_point",
    "round_to_precision",
    "to_float",
]
