"""Six-slot ring holding the sides and angles of a triangle.

Slots alternate side/angle in the order ``a, gamma, b, alpha, c, beta``: the
angle between two sides sits between them, and the side opposite the slot at
``i`` is at ``i + 3``. Every case formula is written against offsets from a
reference slot, so one formula covers all rotations of the triangle.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

SLOT_NAMES: Tuple[str, ...] = ("a", "gamma", "b", "alpha", "c", "beta")
SIDE_NAMES: Tuple[str, ...] = ("a", "b", "c")
ANGLE_NAMES: Tuple[str, ...] = ("alpha", "beta", "gamma")
SLOT_INDEX = {name: idx for idx, name in enumerate(SLOT_NAMES)}
RING_SIZE = len(SLOT_NAMES)


def is_side_slot(index: int) -> bool:
    return index % 2 == 0


def is_angle_slot(index: int) -> bool:
    return index % 2 == 1


def opposite(index: int) -> int:
    return (index + 3) % RING_SIZE


class SlotRing:
    """Fixed-size ring of optional floats with wrap-around indexing.

    ``None`` marks an unknown slot; a populated slot always holds a float
    (which may be NaN when a formula left its domain).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Sequence[Optional[float]]] = None) -> None:
        if values is None:
            values = [None] * RING_SIZE
        if len(values) != RING_SIZE:
            raise ValueError(f"slot ring needs exactly {RING_SIZE} values, got {len(values)}")
        self._values: List[Optional[float]] = [None if v is None else float(v) for v in values]

    @classmethod
    def from_named(cls, **named: Optional[float]) -> "SlotRing":
        ring = cls()
        for name, value in named.items():
            ring[SLOT_INDEX[name]] = value
        return ring

    def __getitem__(self, index: int) -> Optional[float]:
        return self._values[index % RING_SIZE]

    def __setitem__(self, index: int, value: Optional[float]) -> None:
        self._values[index % RING_SIZE] = None if value is None else float(value)

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self._values)

    def __len__(self) -> int:
        return RING_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlotRing):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in zip(SLOT_NAMES, self._values))
        return f"SlotRing({body})"

    def known(self, index: int) -> bool:
        return self[index] is not None

    def value(self, index: int) -> float:
        """Return the populated slot at ``index``; reading an unknown slot is a programming error."""

        found = self[index]
        if found is None:
            raise LookupError(f"slot {SLOT_NAMES[index % RING_SIZE]} is not populated")
        return found

    def get(self, name: str) -> Optional[float]:
        return self._values[SLOT_INDEX[name]]

    def copy(self) -> "SlotRing":
        return SlotRing(self._values)

    def side_indices(self) -> List[int]:
        return [idx for idx in range(0, RING_SIZE, 2) if self.known(idx)]

    def angle_indices(self) -> List[int]:
        return [idx for idx in range(1, RING_SIZE, 2) if self.known(idx)]

    def is_complete(self) -> bool:
        return all(value is not None for value in self._values)

    def sides(self) -> Tuple[float, ...]:
        return tuple(self.value(SLOT_INDEX[name]) for name in SIDE_NAMES)

    def angles(self) -> Tuple[float, ...]:
        return tuple(self.value(SLOT_INDEX[name]) for name in ANGLE_NAMES)
