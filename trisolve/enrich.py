"""Accept or reject solved rings and derive area, altitudes and circles."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .cases import NO_SOLUTION
from .errors import InputConflict, Unsolvable
from .logging_utils import apply_debug_logging
from .model import Circle, Solution
from .primitives import equal_float, incircle_radius
from .slots import SLOT_NAMES, SlotRing, is_angle_slot
from .units import AngleUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Derived:
    area: float
    ha: float
    hb: float
    hc: float
    inradius: float
    circumradius: float


def check_consistency(
    ring: SlotRing,
    supplied: Mapping[str, float],
    unit: AngleUnit,
    tolerance: float,
    raw: Optional[Mapping[str, Any]] = None,
) -> None:
    """Raise :class:`InputConflict` for the first supplied value the solved ring disagrees with.

    ``supplied`` holds the coerced inputs in the caller's unit; ``raw`` the
    values as originally given, used only for the message.
    """

    raw = raw or supplied
    for index, name in enumerate(SLOT_NAMES):
        if name not in supplied:
            continue
        calculated = ring.value(index)
        if is_angle_slot(index):
            calculated = unit.from_radians(calculated)
        if not equal_float(supplied[name], calculated, tolerance):
            logger.warning("Input %s=%s conflicts with calculated %s", name, raw[name], calculated)
            raise InputConflict(name, raw[name], calculated)


def check_valid(ring: SlotRing) -> None:
    """Reject rings with NaN, non-positive sides or angles outside (0, pi)."""

    for index, value in enumerate(ring):
        if value is None or math.isnan(value):
            raise Unsolvable(NO_SOLUTION)
        if is_angle_slot(index):
            if value <= 0.0 or value >= math.pi:
                raise Unsolvable(NO_SOLUTION)
        elif value <= 0.0 or math.isinf(value):
            raise Unsolvable(NO_SOLUTION)


def derive(a: float, b: float, c: float, alpha: float, gamma: float) -> Derived:
    """Area, altitudes and circle radii of a valid triangle (angles in radians)."""

    circumradius = (a / math.sin(alpha)) / 2
    return Derived(
        area=0.5 * a * b * math.sin(gamma),
        ha=b * math.sin(gamma),
        hb=a * math.sin(gamma),
        hc=b * math.sin(alpha),
        inradius=incircle_radius(a, b, c),
        circumradius=circumradius,
    )


def build_solution(ring: SlotRing, unit: AngleUnit) -> Solution:
    check_valid(ring)
    a, b, c = ring.sides()
    alpha, beta, gamma = ring.angles()
    derived = derive(a, b, c, alpha, gamma)
    return Solution(
        a=a,
        b=b,
        c=c,
        alpha=unit.from_radians(alpha),
        beta=unit.from_radians(beta),
        gamma=unit.from_radians(gamma),
        area=derived.area,
        ha=derived.ha,
        hb=derived.hb,
        hc=derived.hc,
        incircle=Circle(radius=derived.inradius),
        circumcircle=Circle(radius=derived.circumradius),
    )


apply_debug_logging(globals(), logger=logger)
