"""Stateful owner of one decision map.

``DecisionMap`` holds the authoritative dimensions, options, region and
selection, and hands snapshots to the pure intake/scoring/interaction
functions. Records are replaced rather than edited in place so any snapshot
handed out earlier stays unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .geometry import DEFAULT_FRAME, MapFrame, Point, clamp01, clamp_point, make_default_polygon
from .intake import build_dimensions_from_considerations, default_dimensions
from .interaction import (
    IDLE,
    DraggingOption,
    DragState,
    DragUpdate,
    OptionMoved,
    VertexMoved,
    drag_update,
    press_option,
    press_vertex,
    release,
)
from .model import Dimension, ModelConsistencyError, Option, OptionStatus
from .options import MapPoint, OptionTemplate, init_options, map_points, new_option, preference_point
from .scoring import compute_status, ranked

logger = logging.getLogger(__name__)


class DecisionMap:
    def __init__(self, title: str = "My decision", frame: MapFrame = DEFAULT_FRAME) -> None:
        self.title = title
        self.considerations = ""
        self.frame = frame
        self.dimensions: List[Dimension] = default_dimensions()
        self.options: List[Option] = init_options(self.dimensions)
        self.polygon: List[Point] = make_default_polygon()
        self.selected_option_id: Optional[str] = self.options[0].id if self.options else None
        self.drag: DragState = IDLE

    # ------------------------------------------------------------------
    # Intake

    def start_from_intake(
        self,
        considerations: str,
        title: Optional[str] = None,
        templates: Optional[List[OptionTemplate]] = None,
    ) -> List[Dimension]:
        """Rebuild the whole map from ``considerations``.

        Falls back to the built-in dimension set when nothing can be inferred.
        """

        if title is not None:
            self.title = title
        self.considerations = considerations
        built = build_dimensions_from_considerations(considerations)
        if built is None:
            logger.info("Falling back to default dimensions")
            built = default_dimensions()
        self.dimensions = built
        self.options = init_options(self.dimensions, templates)
        self.polygon = make_default_polygon()
        self.selected_option_id = self.options[0].id if self.options else None
        self.drag = IDLE
        logger.info(
            "Started map %r with %d dimension(s) and %d option(s)",
            self.title,
            len(self.dimensions),
            len(self.options),
        )
        return self.dimensions

    # ------------------------------------------------------------------
    # Dimensions

    def _dimension_index(self, dim_id: str) -> int:
        for idx, dim in enumerate(self.dimensions):
            if dim.id == dim_id:
                return idx
        raise ModelConsistencyError(f"unknown dimension {dim_id!r}")

    def dimension(self, dim_id: str) -> Dimension:
        return self.dimensions[self._dimension_index(dim_id)]

    def _replace_dimension(self, dim_id: str, **changes: object) -> Dimension:
        idx = self._dimension_index(dim_id)
        dims = list(self.dimensions)
        dims[idx] = replace(dims[idx], **changes)
        self.dimensions = dims
        return dims[idx]

    def set_preference(self, dim_id: str, value: float) -> Dimension:
        return self._replace_dimension(dim_id, preference=clamp01(float(value)))

    def rename_dimension(self, dim_id: str, name: str) -> Dimension:
        return self._replace_dimension(dim_id, name=name)

    def set_pole_labels(self, dim_id: str, left: str, right: str) -> Dimension:
        return self._replace_dimension(dim_id, left_label=left, right_label=right)

    # ------------------------------------------------------------------
    # Options

    def _option_index(self, option_id: str) -> int:
        for idx, option in enumerate(self.options):
            if option.id == option_id:
                return idx
        raise KeyError(f"unknown option {option_id!r}")

    def option(self, option_id: str) -> Option:
        return self.options[self._option_index(option_id)]

    def _replace_option(self, option_id: str, **changes: object) -> Option:
        idx = self._option_index(option_id)
        options = list(self.options)
        options[idx] = replace(options[idx], **changes)
        self.options = options
        return options[idx]

    def _with_scores(self, option_id: str, updates: Dict[str, float]) -> Option:
        scores = dict(self.option(option_id).scores)
        scores.update(updates)
        return self._replace_option(option_id, scores=scores)

    def set_option_score(self, option_id: str, dim_id: str, value: float) -> Option:
        self._dimension_index(dim_id)
        return self._with_scores(option_id, {dim_id: clamp01(float(value))})

    def rename_option(self, option_id: str, name: str) -> Option:
        return self._replace_option(option_id, name=name)

    def set_option_notes(self, option_id: str, notes: str) -> Option:
        return self._replace_option(option_id, notes=notes)

    def add_option(self, name: str = "", notes: str = "") -> Option:
        option = new_option(self.dimensions, name, notes)
        self.options = self.options + [option]
        self.selected_option_id = option.id
        logger.info("Added option %s", option.id)
        return option

    def remove_option(self, option_id: str) -> None:
        remaining = [option for option in self.options if option.id != option_id]
        if len(remaining) == len(self.options):
            raise KeyError(f"unknown option {option_id!r}")
        self.options = remaining
        if self.selected_option_id == option_id:
            self.selected_option_id = remaining[0].id if remaining else None
        if isinstance(self.drag, DraggingOption) and self.drag.option_id == option_id:
            self.drag = IDLE
        logger.info("Removed option %s, selection now %s", option_id, self.selected_option_id)

    def select(self, option_id: Optional[str]) -> None:
        if option_id is not None:
            self._option_index(option_id)
        self.selected_option_id = option_id

    @property
    def selected(self) -> Optional[Option]:
        if self.selected_option_id is not None:
            for option in self.options:
                if option.id == self.selected_option_id:
                    return option
        return self.options[0] if self.options else None

    # ------------------------------------------------------------------
    # Region

    def _check_vertex(self, index: int) -> None:
        if not 0 <= index < len(self.polygon):
            raise IndexError(f"polygon has no vertex {index}")

    def move_vertex(self, index: int, point: Point) -> None:
        self._check_vertex(index)
        polygon = list(self.polygon)
        polygon[index] = clamp_point(point)
        self.polygon = polygon

    # ------------------------------------------------------------------
    # Pointer

    def pointer_down_vertex(self, index: int) -> None:
        self._check_vertex(index)
        self.drag = press_vertex(self.drag, index)

    def pointer_down_option(self, option_id: str) -> None:
        self.drag, self.selected_option_id = press_option(self.drag, self.option(option_id))

    def pointer_move(self, canvas_point: Point) -> Optional[DragUpdate]:
        update = drag_update(self.drag, canvas_point, self.frame)
        if update is not None:
            self._apply(update)
        return update

    def pointer_up(self) -> None:
        self.drag = release(self.drag)

    def pointer_leave(self) -> None:
        self.drag = release(self.drag)

    def _apply(self, update: DragUpdate) -> None:
        if isinstance(update, VertexMoved):
            self.move_vertex(update.index, update.point)
        elif isinstance(update, OptionMoved):
            if len(self.dimensions) < 2:
                return
            if not any(option.id == update.option_id for option in self.options):
                return
            x_id, y_id = self.dimensions[0].id, self.dimensions[1].id
            self._with_scores(update.option_id, {x_id: update.point[0], y_id: update.point[1]})

    # ------------------------------------------------------------------
    # Derived

    def status(self) -> Dict[str, OptionStatus]:
        return compute_status(self.dimensions, self.options, self.polygon)

    def top(self, n: int = 3) -> List[Tuple[Option, Optional[OptionStatus]]]:
        return ranked(self.options, self.status(), n)

    def points(self) -> List[MapPoint]:
        return map_points(self.dimensions, self.options)

    def preference(self) -> Point:
        return preference_point(self.dimensions)
