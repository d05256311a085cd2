"""Pick the classical solving case for a partially known triangle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InsufficientParameters, MissingSideLength, Unsolvable
from .logging_utils import apply_debug_logging
from .slots import SLOT_NAMES, SlotRing

logger = logging.getLogger(__name__)


class TriangleCase(str, Enum):
    SSS = "SSS"
    ASA = "ASA"
    SAS = "SAS"
    SAA = "SAA"
    AAS = "AAS"
    SSA = "SSA"
    ASS = "ASS"


@dataclass(frozen=True)
class Classification:
    case: TriangleCase
    # slot the case formulas are rotated around; None for SSS
    reference: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        if self.reference is None:
            return self.case.value
        return f"{self.case.value}@{SLOT_NAMES[self.reference]}"


# (case, anchor, offsets) in match priority order. The anchor is the first
# known side ("side") or first known angle ("angle"); the case matches when
# both offsets from the anchor are populated.
_PATTERNS = (
    (TriangleCase.ASA, "side", (5, 1)),
    (TriangleCase.SAS, "angle", (5, 1)),
    (TriangleCase.SAA, "side", (1, 3)),
    (TriangleCase.AAS, "side", (5, 3)),
    (TriangleCase.SSA, "angle", (5, 3)),
    (TriangleCase.ASS, "angle", (1, 3)),
)


def classify(ring: SlotRing) -> Classification:
    """Return the solving case for ``ring`` and the slot its formulas start from.

    Extra populated slots never change the outcome beyond the first pattern
    that matches; they are only checked against the solution afterwards.
    """

    sides = ring.side_indices()
    angles = ring.angle_indices()

    if len(sides) + len(angles) < 3:
        raise InsufficientParameters(
            "Unsolvable: At least 3 parameters must be given, including one side length."
        )
    if not sides:
        raise MissingSideLength("Unsolvable: At least one parameter must be a side length")

    if len(sides) == 3:
        return Classification(TriangleCase.SSS)

    anchors = {"side": sides[0], "angle": angles[0] if angles else None}
    for case, anchor_kind, offsets in _PATTERNS:
        anchor = anchors[anchor_kind]
        if anchor is None:
            continue
        if all(ring.known(anchor + offset) for offset in offsets):
            logger.debug("Matched %s around slot %s", case.value, SLOT_NAMES[anchor])
            return Classification(case, anchor)

    # every combination of >= 3 knowns with a side matches one of the patterns
    raise Unsolvable("Unsolvable: No solution is possible for given parameters.")


apply_debug_logging(globals(), logger=logger)
