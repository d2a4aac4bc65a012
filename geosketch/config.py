"""Configuration helpers for solver sessions and solution extraction."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Knobs applied to each sketch's solver session and to its solutions."""

    timeout_ms: Optional[int] = None
    # A value num/den with a small denominator and a huge numerator triggers a
    # precision warning during extraction.
    precision_denominator_limit: int = 1000
    precision_numerator_limit: int = 1_000_000_000
    # Irrational model values are approximated within 10**-algebraic_precision.
    algebraic_precision: int = 20


_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    return copy.deepcopy(_SOLVER_CONFIG)


def set_solver_config(config: SolverConfig) -> None:
    global _SOLVER_CONFIG
    _SOLVER_CONFIG = copy.deepcopy(config)


__all__ = ["SolverConfig", "get_solver_config", "set_solver_config"]
