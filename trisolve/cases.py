"""Formula sets for each classical solving case.

Every function receives a ring with the known slots populated and the
reference slot picked by :func:`trisolve.classifier.classify`, and returns the
fully populated candidate rings (one, or two for the ambiguous case). Inputs
are never mutated.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Callable, Dict, Tuple

from .classifier import Classification, TriangleCase
from .errors import Unsolvable
from .logging_utils import apply_debug_logging
from .primitives import format_number
from .slots import SlotRing

logger = logging.getLogger(__name__)

Candidates = Tuple[SlotRing, ...]

NO_SOLUTION = "Unsolvable: No solution is possible for given parameters."

# sin(angle) * s2 / s1 this close to 1 is a right angle, not two triangles
_RIGHT_ANGLE_EPS = 100 * sys.float_info.epsilon


def law_of_cosines_angle(adjacent1: float, adjacent2: float, opposite: float) -> float:
    """Angle between two sides; NaN when the three lengths cannot close.

    Evaluated in half-angle form on lengths brought below 1 by an exact power
    of two. Thin triangles keep their small angles and extreme lengths can
    neither overflow nor divide by zero.
    """

    longest = max(adjacent1, adjacent2, opposite)
    if not (longest > 0.0 and math.isfinite(longest)):
        return math.nan
    exponent = math.frexp(longest)[1]
    x, y, z = (math.ldexp(side, -exponent) for side in (adjacent1, adjacent2, opposite))
    s = 0.5 * (x + y + z)
    if not min(s - x, s - y, s - z) >= 0.0:
        return math.nan
    return 2 * math.atan2(math.sqrt((s - x) * (s - y)), math.sqrt(s * (s - z)))


def law_of_cosines_side(side1: float, side2: float, included: float) -> float:
    # (s1 - s2)^2 + 4 s1 s2 sin^2(C/2), exact for included angles near 0
    return math.hypot(side1 - side2, 2 * math.sqrt(side1) * math.sqrt(side2) * math.sin(included / 2))


def _angle_opposite(side: float, other: float, included: float) -> float:
    """Angle opposite ``side`` when ``side`` and ``other`` enclose ``included``."""

    half = math.sin(included / 2)
    # other - side * cos(included), without cancellation near 0
    return math.atan2(side * math.sin(included), (other - side) + 2 * side * half * half)


def law_of_sines_side(known_side: float, known_opposite: float, angle: float) -> float:
    """Side opposite ``angle`` given another side and the angle opposite it."""

    return known_side * (math.sin(angle) / math.sin(known_opposite))


def _remaining_angle(first: float, second: float) -> float:
    angle = math.pi - first - second
    if not angle > 0.0:
        raise Unsolvable(NO_SOLUTION)
    return angle


def solve_sss(ring: SlotRing, reference=None) -> Candidates:
    a, b, c = ring.sides()
    alpha = law_of_cosines_angle(b, c, a)
    beta = law_of_cosines_angle(a, c, b)
    gamma = math.pi - alpha - beta
    if any(math.isnan(angle) or angle <= 0.0 for angle in (alpha, beta, gamma)):
        raise Unsolvable(
            "Unsolvable: Impossible combination of side lengths: "
            + ", ".join(format_number(side) for side in (a, b, c)),
            sides=(a, b, c),
        )
    solved = ring.copy()
    solved[3] = alpha
    solved[5] = beta
    solved[1] = gamma
    return (solved,)


def solve_asa(ring: SlotRing, f: int) -> Candidates:
    side = ring.value(f)
    left, right = ring.value(f + 5), ring.value(f + 1)
    opposite = _remaining_angle(left, right)
    solved = ring.copy()
    solved[f + 3] = opposite
    solved[f + 2] = law_of_sines_side(side, opposite, left)
    solved[f + 4] = law_of_sines_side(side, opposite, right)
    return (solved,)


def solve_sas(ring: SlotRing, g: int) -> Candidates:
    included = ring.value(g)
    side1, side2 = ring.value(g + 5), ring.value(g + 1)
    solved = ring.copy()
    solved[g + 3] = law_of_cosines_side(side1, side2, included)
    solved[g + 2] = _angle_opposite(side1, side2, included)
    solved[g + 4] = _angle_opposite(side2, side1, included)
    return (solved,)


def _solve_two_angles(ring: SlotRing, f: int, missing: int) -> Candidates:
    """SAA and AAS: the angle opposite the known side (``f + 3``) is always known."""

    side = ring.value(f)
    opposite = ring.value(f + 3)
    other = ring.value(f + 6 - missing)
    solved = ring.copy()
    solved[f + missing] = _remaining_angle(opposite, other)
    solved[f + 2] = law_of_sines_side(side, opposite, solved.value(f + 5))
    solved[f + 4] = law_of_sines_side(side, opposite, solved.value(f + 1))
    return (solved,)


def solve_saa(ring: SlotRing, f: int) -> Candidates:
    return _solve_two_angles(ring, f, missing=5)


def solve_aas(ring: SlotRing, f: int) -> Candidates:
    return _solve_two_angles(ring, f, missing=1)


def _solve_ambiguous(ring: SlotRing, g: int, near: int) -> Candidates:
    """Two sides and a non-included angle.

    ``g + 3`` is the side opposite the known angle, ``g + near`` the other known
    side. The angle opposite ``g + near`` follows from the law of sines and may
    be acute or obtuse when the opposite side is the shorter one.
    """

    angle = ring.value(g)
    s1 = ring.value(g + 3)
    s2 = ring.value(g + near)
    derived = (near + 3) % 6
    last = 6 - derived
    missing_side = (last + 3) % 6

    d = (s2 / s1) * math.sin(angle)
    logger.debug("Ambiguous case: s1=%s s2=%s sin ratio=%s", s1, s2, d)
    right = abs(d - 1.0) <= _RIGHT_ANGLE_EPS
    if d > 1.0 and not right:
        raise Unsolvable(NO_SOLUTION)

    if right:
        alternatives: Tuple[float, ...] = (math.pi / 2,)
    elif s1 >= s2:
        alternatives = (math.asin(d),)
    else:
        acute = math.asin(d)
        alternatives = (acute, math.pi - acute)

    candidates = []
    for derived_angle in alternatives:
        solved = ring.copy()
        solved[g + derived] = derived_angle
        solved[g + last] = _remaining_angle(angle, derived_angle)
        solved[g + missing_side] = law_of_sines_side(s1, angle, solved.value(g + last))
        candidates.append(solved)
    return tuple(candidates)


def solve_ssa(ring: SlotRing, g: int) -> Candidates:
    return _solve_ambiguous(ring, g, near=5)


def solve_ass(ring: SlotRing, g: int) -> Candidates:
    return _solve_ambiguous(ring, g, near=1)


_SOLVERS: Dict[TriangleCase, Callable[..., Candidates]] = {
    TriangleCase.SSS: solve_sss,
    TriangleCase.ASA: solve_asa,
    TriangleCase.SAS: solve_sas,
    TriangleCase.SAA: solve_saa,
    TriangleCase.AAS: solve_aas,
    TriangleCase.SSA: solve_ssa,
    TriangleCase.ASS: solve_ass,
}


def solve_case(ring: SlotRing, classification: Classification) -> Candidates:
    """Run the formula set for ``classification`` and return every candidate ring."""

    candidates = _SOLVERS[classification.case](ring, classification.reference)
    logger.debug("%s produced %d candidate(s)", classification.case.value, len(candidates))
    return candidates


apply_debug_logging(globals(), logger=logger)
