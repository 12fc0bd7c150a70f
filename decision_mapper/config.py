"""Tunable constants and the module-level scoring configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass

MAX_CANDIDATES = 8
DEFAULT_COORDINATE = 0.5
CANVAS_SIZE = 420.0
CANVAS_PAD = 26.0
POLYGON_EPSILON = 1e-9


@dataclass
class ScoringConfig:
    """Region multipliers applied to ``1 - distance``."""

    inside_factor: float = 1.0
    outside_factor: float = 0.75


_SCORING_CONFIG = ScoringConfig()


def get_scoring_config() -> ScoringConfig:
    return copy.deepcopy(_SCORING_CONFIG)


def set_scoring_config(config: ScoringConfig) -> None:
    global _SCORING_CONFIG
    _SCORING_CONFIG = copy.deepcopy(config)
