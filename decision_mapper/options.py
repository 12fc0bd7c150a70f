"""Option construction and the 2D projection of options onto the map axes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .config import DEFAULT_COORDINATE
from .geometry import Point
from .model import Dimension, Option, new_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionTemplate:
    name: str = ""
    notes: str = ""
    id: Optional[str] = None


DEFAULT_OPTION_TEMPLATES = (OptionTemplate(), OptionTemplate(), OptionTemplate())


@dataclass(frozen=True)
class MapPoint:
    id: str
    display_name: str
    is_named: bool
    x: float
    y: float


def away_from_preference(preference: float) -> float:
    """Return the pole opposite ``preference`` on a single axis."""

    return 0.9 if preference < 0.5 else 0.1


def default_scores(dimensions: Sequence[Dimension]) -> Dict[str, float]:
    scores: Dict[str, float] = {}
    for idx, dim in enumerate(dimensions):
        scores[dim.id] = away_from_preference(dim.preference) if idx < 2 else DEFAULT_COORDINATE
    return scores


def new_option(dimensions: Sequence[Dimension], name: str = "", notes: str = "") -> Option:
    return Option(new_id(), name, notes, default_scores(dimensions))


def init_options(
    dimensions: Sequence[Dimension], templates: Optional[Sequence[OptionTemplate]] = None
) -> List[Option]:
    """Build one option per template, each starting away from the preference point."""

    if templates is None:
        templates = DEFAULT_OPTION_TEMPLATES
    options = [
        Option(template.id or new_id(), template.name, template.notes, default_scores(dimensions))
        for template in templates
    ]
    logger.info("Initialized %d option(s) over %d dimension(s)", len(options), len(dimensions))
    return options


def preference_point(dimensions: Sequence[Dimension]) -> Point:
    x = dimensions[0].preference if len(dimensions) > 0 else DEFAULT_COORDINATE
    y = dimensions[1].preference if len(dimensions) > 1 else DEFAULT_COORDINATE
    return x, y


def map_points(dimensions: Sequence[Dimension], options: Sequence[Option]) -> List[MapPoint]:
    x_id = dimensions[0].id if len(dimensions) > 0 else None
    y_id = dimensions[1].id if len(dimensions) > 1 else None
    points = []
    for option in options:
        x = option.coordinate(x_id) if x_id is not None else DEFAULT_COORDINATE
        y = option.coordinate(y_id) if y_id is not None else DEFAULT_COORDINATE
        points.append(MapPoint(option.id, option.display_name, option.is_named, x, y))
    return points
