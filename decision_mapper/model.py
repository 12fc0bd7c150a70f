"""Core records shared by the intake, scoring and session layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable
from uuid import uuid4

from .config import DEFAULT_COORDINATE

DimensionId = str
OptionId = str


class ModelConsistencyError(RuntimeError):
    """Raised when option coordinates reference a dimension that does not exist."""


def new_id() -> str:
    return uuid4().hex[:8]


@dataclass
class AxisCandidate:
    name: str
    left: str
    right: str


@dataclass
class Dimension:
    id: DimensionId
    name: str
    left_label: str = "Lower"
    right_label: str = "Higher"
    preference: float = 0.5


@dataclass
class Option:
    id: OptionId
    name: str = ""
    notes: str = ""
    scores: Dict[DimensionId, float] = field(default_factory=dict)

    @property
    def is_named(self) -> bool:
        return bool(self.name.strip())

    @property
    def display_name(self) -> str:
        return self.name if self.is_named else "New option"

    def coordinate(self, dim_id: DimensionId) -> float:
        """Return the stored coordinate for ``dim_id`` or the midpoint when unset."""

        return self.scores.get(dim_id, DEFAULT_COORDINATE)


@dataclass(frozen=True)
class OptionStatus:
    distance: float
    inside: bool
    score: float


def check_scores(option: Option, dimensions: Iterable[Dimension]) -> None:
    known = {dim.id for dim in dimensions}
    orphaned = sorted(key for key in option.scores if key not in known)
    if orphaned:
        raise ModelConsistencyError(
            f"option {option.id!r} has coordinates for unknown dimension(s): {', '.join(orphaned)}"
        )
