"""Drag state machine for the interactive map.

The machine only tracks what is being dragged. Pointer moves are turned into
update records; applying them to the polygon or options is left to the owner
of that state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .geometry import DEFAULT_FRAME, MapFrame, Point, from_canvas
from .model import Option


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class DraggingVertex:
    index: int


@dataclass(frozen=True)
class DraggingOption:
    option_id: str


DragState = Union[Idle, DraggingVertex, DraggingOption]

IDLE = Idle()


@dataclass(frozen=True)
class VertexMoved:
    index: int
    point: Point


@dataclass(frozen=True)
class OptionMoved:
    option_id: str
    point: Point


DragUpdate = Union[VertexMoved, OptionMoved]


def press_vertex(state: DragState, index: int) -> DragState:
    return DraggingVertex(index)


def press_option(state: DragState, option: Option) -> Tuple[DragState, str]:
    """Select ``option`` and start dragging it if it has a name.

    Unnamed options can be selected but never dragged, so the state is left
    as it was.
    """

    if not option.is_named:
        return state, option.id
    return DraggingOption(option.id), option.id


def release(state: DragState) -> DragState:
    return IDLE


def drag_update(state: DragState, canvas_point: Point, frame: MapFrame = DEFAULT_FRAME) -> Optional[DragUpdate]:
    if isinstance(state, DraggingVertex):
        return VertexMoved(state.index, from_canvas(canvas_point, frame))
    if isinstance(state, DraggingOption):
        return OptionMoved(state.option_id, from_canvas(canvas_point, frame))
    return None
