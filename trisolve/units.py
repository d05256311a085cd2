"""Angle units accepted at the public boundary."""

from __future__ import annotations

import math
from enum import Enum

from .errors import UnknownUnit

TO_RAD = math.pi / 180.0
TO_DEG = 180.0 / math.pi


class AngleUnit(str, Enum):
    DEG = "deg"
    RAD = "rad"

    @classmethod
    def parse(cls, mode: object) -> "AngleUnit":
        """Return the unit named by ``mode``; only the exact literals are accepted."""

        if isinstance(mode, cls):
            return mode
        for unit in cls:
            if mode == unit.value:
                return unit
        raise UnknownUnit(f'Unknown mode: {mode} - Must be "deg" or "rad"', mode=mode)

    def to_radians(self, value: float) -> float:
        return value * TO_RAD if self is AngleUnit.DEG else value

    def from_radians(self, value: float) -> float:
        return value * TO_DEG if self is AngleUnit.DEG else value
