from .solver import solve
from .coordinates import solve_points
from .primitives import (
    Point,
    barycentric_to_cartesian,
    distance,
    incircle_radius,
    normalize_point,
    round_to_precision,
)
from .classifier import Classification, TriangleCase, classify
from .cases import solve_case
from .slots import SlotRing
from .units import AngleUnit
from .model import Circle, PointSolution, PointSolveResult, Solution, SolveResult
from .errors import (
    DuplicateCoordinate,
    ErrorKind,
    IllegalValue,
    InputConflict,
    InsufficientParameters,
    InvalidCoordinate,
    MissingSideLength,
    SolveError,
    TriangleError,
    UnknownUnit,
    Unsolvable,
)
from .config import SolverConfig, get_solver_config, set_solver_config

__all__ = [
    'solve',
    'solve_points',
    'distance',
    'round_to_precision',
    'barycentric_to_cartesian',
    'incircle_radius',
    'normalize_point',
    'Point',
    'classify',
    'Classification',
    'TriangleCase',
    'solve_case',
    'SlotRing',
    'AngleUnit',
    'Circle',
    'Solution',
    'PointSolution',
    'SolveResult',
    'PointSolveResult',
    'ErrorKind',
    'SolveError',
    'TriangleError',
    'UnknownUnit',
    'IllegalValue',
    'InsufficientParameters',
    'MissingSideLength',
    'Unsolvable',
    'InputConflict',
    'InvalidCoordinate',
    'DuplicateCoordinate',
    'SolverConfig',
    'get_solver_config',
    'set_solver_config',
]
