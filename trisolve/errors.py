"""Failure kinds reported by the solvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    UNKNOWN_UNIT = "UnknownUnit"
    ILLEGAL_VALUE = "IllegalValue"
    INSUFFICIENT_PARAMETERS = "InsufficientParameters"
    MISSING_SIDE_LENGTH = "MissingSideLength"
    UNSOLVABLE = "Unsolvable"
    INPUT_CONFLICT = "InputConflict"
    INVALID_COORDINATE = "InvalidCoordinate"
    DUPLICATE_COORDINATE = "DuplicateCoordinate"


@dataclass(frozen=True)
class SolveError:
    """Error attached to a result envelope instead of being raised."""

    kind: ErrorKind
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.details:
            data["details"] = dict(self.details)
        return data


class TriangleError(ValueError):
    """Base class for every input or geometry failure."""

    kind: ErrorKind = ErrorKind.UNSOLVABLE

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def report(self) -> SolveError:
        return SolveError(kind=self.kind, message=self.message, details=dict(self.details))


class UnknownUnit(TriangleError):
    kind = ErrorKind.UNKNOWN_UNIT


class IllegalValue(TriangleError):
    kind = ErrorKind.ILLEGAL_VALUE


class InsufficientParameters(TriangleError):
    kind = ErrorKind.INSUFFICIENT_PARAMETERS


class MissingSideLength(TriangleError):
    kind = ErrorKind.MISSING_SIDE_LENGTH


class Unsolvable(TriangleError):
    kind = ErrorKind.UNSOLVABLE


class InputConflict(TriangleError):
    """A redundant input disagrees with the value derived from the others."""

    kind = ErrorKind.INPUT_CONFLICT

    def __init__(self, prop: str, supplied: Any, calculated: float) -> None:
        super().__init__(
            f'Calculated value for "{prop}" different from input: '
            f"input: {supplied} calculated: {calculated:.15g}",
            property=prop,
            input=supplied,
            calculated=calculated,
        )
        self.property = prop
        self.input = supplied
        self.calculated = calculated


class InvalidCoordinate(TriangleError):
    kind = ErrorKind.INVALID_COORDINATE


class DuplicateCoordinate(TriangleError):
    kind = ErrorKind.DUPLICATE_COORDINATE


__all__ = [
    "ErrorKind",
    "SolveError",
    "TriangleError",
    "UnknownUnit",
    "IllegalValue",
    "InsufficientParameters",
    "MissingSideLength",
    "Unsolvable",
    "InputConflict",
    "InvalidCoordinate",
    "DuplicateCoordinate",
]
