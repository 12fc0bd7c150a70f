"""Distance, region membership and composite scoring of options."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_COORDINATE, ScoringConfig, get_scoring_config
from .geometry import Point, point_in_polygon
from .model import Dimension, Option, OptionStatus, check_scores
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def option_distance(option: Option, dimensions: Sequence[Dimension]) -> float:
    """Root-mean-square gap between ``option`` and the preference on every dimension."""

    coords = np.array([option.coordinate(dim.id) for dim in dimensions], dtype=float)
    prefs = np.array([dim.preference for dim in dimensions], dtype=float)
    diff = coords - prefs
    return float(np.sqrt(np.sum(diff * diff) / max(1, len(dimensions))))


def option_inside(option: Option, dimensions: Sequence[Dimension], polygon: Sequence[Point]) -> bool:
    if len(polygon) < 3:
        return True
    x = option.coordinate(dimensions[0].id) if len(dimensions) > 0 else DEFAULT_COORDINATE
    y = option.coordinate(dimensions[1].id) if len(dimensions) > 1 else DEFAULT_COORDINATE
    return point_in_polygon((x, y), polygon)


def composite_score(distance: float, inside: bool, config: Optional[ScoringConfig] = None) -> float:
    cfg = config or get_scoring_config()
    return (1.0 - distance) * (cfg.inside_factor if inside else cfg.outside_factor)


def compute_status(
    dimensions: Sequence[Dimension],
    options: Sequence[Option],
    polygon: Sequence[Point],
    config: Optional[ScoringConfig] = None,
) -> Dict[str, OptionStatus]:
    cfg = config or get_scoring_config()
    out: Dict[str, OptionStatus] = {}
    for option in options:
        check_scores(option, dimensions)
        distance = option_distance(option, dimensions)
        inside = option_inside(option, dimensions, polygon)
        out[option.id] = OptionStatus(distance, inside, composite_score(distance, inside, cfg))

    logger.debug(
        "Computed status for %d option(s) over %d dimension(s), polygon=%d vertices",
        len(options),
        len(dimensions),
        len(polygon),
    )
    return out


def _order_by_score(options: Sequence[Option], status: Mapping[str, OptionStatus]) -> List[int]:
    scores = np.array(
        [status[option.id].score if option.id in status else 0.0 for option in options],
        dtype=float,
    )
    return [int(idx) for idx in np.argsort(-scores, kind="stable")]


def top_n(options: Sequence[Option], status: Mapping[str, OptionStatus], n: int = 3) -> List[Option]:
    """Return the ``n`` best options; equal scores keep their input order."""

    return [options[idx] for idx in _order_by_score(options, status)[:n]]


def ranked(
    options: Sequence[Option], status: Mapping[str, OptionStatus], n: Optional[int] = None
) -> List[Tuple[Option, Optional[OptionStatus]]]:
    order = _order_by_score(options, status)
    if n is not None:
        order = order[:n]
    return [(options[idx], status.get(options[idx].id)) for idx in order]


apply_debug_logging(globals(), logger=logger)
