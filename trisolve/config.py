"""Process-wide solver settings."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class SolverConfig:
    # absolute tolerance when comparing redundant inputs with derived values
    tolerance: float = 1e-3
    default_mode: str = "deg"


_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    return copy.deepcopy(_SOLVER_CONFIG)


def set_solver_config(config: SolverConfig) -> None:
    global _SOLVER_CONFIG
    _SOLVER_CONFIG = copy.deepcopy(config)
