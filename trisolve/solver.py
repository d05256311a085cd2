"""Solve a triangle from a partial set of side lengths and angles."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .cases import solve_case
from .classifier import classify
from .config import get_solver_config
from .enrich import build_solution, check_consistency
from .errors import IllegalValue, TriangleError
from .model import Solution, SolveResult
from .primitives import to_float
from .slots import SLOT_INDEX, SLOT_NAMES, SlotRing, is_side_slot
from .units import AngleUnit

logger = logging.getLogger(__name__)

PARAMETER_NAMES = ("a", "b", "c", "alpha", "beta", "gamma")

# validation visits sides first, each group in ring order
_VALIDATION_ORDER = tuple(SLOT_NAMES[i] for i in range(0, 6, 2)) + tuple(
    SLOT_NAMES[i] for i in range(1, 6, 2)
)


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _read_parameters(
    params: Mapping[str, Any], unit: AngleUnit
) -> Tuple[SlotRing, Dict[str, float]]:
    """Coerce and range check every populated parameter.

    Returns the ring in radians and the coerced values in ``unit``.
    """

    ring = SlotRing()
    supplied: Dict[str, float] = {}
    for name in _VALIDATION_ORDER:
        if name not in params:
            continue
        raw = params[name]
        value = to_float(raw)
        index = SLOT_INDEX[name]
        if is_side_slot(index):
            if not (math.isfinite(value) and value > 0.0):
                raise IllegalValue(
                    f"Illegal value: {name} = {raw} - All side lengths must be numbers >0",
                    property=name,
                    input=raw,
                )
            ring[index] = value
        else:
            radians = unit.to_radians(value)
            if math.isnan(radians) or radians <= 0.0 or radians >= math.pi:
                raise IllegalValue(
                    f"Illegal value: {name} = {raw} - All angle values must be numbers "
                    ">0 and <180(deg) | <Pi(rad)",
                    property=name,
                    input=raw,
                )
            ring[index] = radians
        supplied[name] = value
    return ring, supplied


def solve(values: Optional[Mapping[str, Any]] = None, **params: Any) -> SolveResult:
    """Find every triangle matching the given sides and angles.

    ``values`` (or keyword arguments) may hold ``a``, ``b``, ``c``, ``alpha``,
    ``beta``, ``gamma`` and ``mode`` (``"deg"`` or ``"rad"``). At least three
    values, one of them a side, are needed; further values are checked
    against the solution. Failures are reported in ``SolveResult.error``.
    """

    merged: Dict[str, Any] = dict(values or {})
    merged.update(params)
    config = get_solver_config()
    mode = merged.get("mode")
    if mode is None:
        mode = config.default_mode
    mode = getattr(mode, "value", mode)
    echo = {
        name: merged[name]
        for name in PARAMETER_NAMES
        if name in merged and not _is_unset(merged[name])
    }

    try:
        unit = AngleUnit.parse(mode)
        ring, supplied = _read_parameters(echo, unit)
        classification = classify(ring)
        logger.info("Solving %s from %d parameter(s)", classification, len(supplied))
        candidates = solve_case(ring, classification)
        solutions: List[Solution] = []
        for candidate in candidates:
            if len(supplied) > 3:
                check_consistency(candidate, supplied, unit, config.tolerance, raw=echo)
            solutions.append(build_solution(candidate, unit))
    except TriangleError as exc:
        logger.info("No solution for %s: %s", echo, exc.message)
        return SolveResult(params=echo, mode=mode, error=exc.report())

    logger.info("Found %d solution(s)", len(solutions))
    return SolveResult(params=echo, mode=mode, solutions=tuple(solutions))
