"""Heuristic intake: free-text considerations to trade-off dimensions."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .config import MAX_CANDIDATES
from .logging_utils import apply_debug_logging
from .model import AxisCandidate, Dimension, new_id

logger = logging.getLogger(__name__)

_BULLET_RE = re.compile("[•·]")
_CHUNK_RE = re.compile(r"[;,]")

VS_SEPARATOR = " vs "
SLASH_SEPARATOR = "/"

# Ordered: the first group with a keyword contained in the phrase wins.
AXIS_RULES: Tuple[Tuple[Tuple[str, ...], AxisCandidate], ...] = (
    (("money", "salary", "pay"), AxisCandidate("Money", "Lower", "Higher")),
    (("time", "balance", "burnout", "life"), AxisCandidate("Work-life", "All work", "All life")),
    (("growth", "learning", "skills"), AxisCandidate("Growth", "Stable", "Expansive")),
    (("meaning", "purpose", "impact"), AxisCandidate("Meaning", "Instrumental", "Purposeful")),
    (("risk", "security", "stability"), AxisCandidate("Risk", "Safer", "Riskier")),
)

# (name, left, right, preference)
DEFAULT_DIMENSION_SPECS: Tuple[Tuple[str, str, str, float], ...] = (
    ("Work-life", "All work", "All life", 0.65),
    ("Money", "Lower", "Higher", 0.7),
    ("Growth", "Stable", "Expansive", 0.6),
    ("Meaning", "Instrumental", "Purposeful", 0.7),
)


def normalize_text(raw: Optional[str]) -> str:
    text = _BULLET_RE.sub("\n", raw or "")
    return text.replace("\r", "").strip()


def split_candidates(raw: Optional[str]) -> List[str]:
    text = normalize_text(raw)
    if not text:
        return []

    out: List[str] = []
    seen = set()
    for line in text.split("\n"):
        for chunk in _CHUNK_RE.split(line):
            phrase = chunk.strip()
            if not phrase:
                continue
            key = phrase.lower()
            if key in seen:
                continue
            seen.add(key)
            out.append(phrase)
    return out


def _split_pair(phrase: str, index: int, width: int) -> Optional[AxisCandidate]:
    if index <= 0:
        return None
    left = phrase[:index].strip()
    right = phrase[index + width:].strip()
    if not left or not right:
        return None
    return AxisCandidate(f"{left} ↔ {right}", left, right)


def match_axis_rule(phrase: str) -> Optional[AxisCandidate]:
    lower = phrase.lower()
    for keywords, template in AXIS_RULES:
        if any(keyword in lower for keyword in keywords):
            return AxisCandidate(template.name, template.left, template.right)
    return None


def infer_axis(phrase: Optional[str]) -> AxisCandidate:
    text = (phrase or "").strip()

    axis = _split_pair(text, text.lower().find(VS_SEPARATOR), len(VS_SEPARATOR))
    if axis is None:
        axis = _split_pair(text, text.find(SLASH_SEPARATOR), len(SLASH_SEPARATOR))
    if axis is None:
        axis = match_axis_rule(text)
    if axis is None:
        axis = AxisCandidate(text or "Dimension", "Lower", "Higher")
    return axis


def parse_considerations(raw: Optional[str], max_candidates: int = MAX_CANDIDATES) -> List[AxisCandidate]:
    candidates = split_candidates(raw)
    if len(candidates) > max_candidates:
        logger.info("Discarding %d candidate(s) beyond the cap of %d", len(candidates) - max_candidates, max_candidates)
    return [infer_axis(phrase) for phrase in candidates[:max_candidates]]


def build_dimensions_from_considerations(
    raw: Optional[str], max_candidates: int = MAX_CANDIDATES
) -> Optional[List[Dimension]]:
    """Return one dimension per inferred axis, or ``None`` when nothing was inferred.

    At least two dimensions are always returned for non-empty input so the
    first two can serve as the map axes.
    """

    axes = parse_considerations(raw, max_candidates)
    if not axes:
        logger.info("No axes inferred from considerations")
        return None

    dims = [Dimension(new_id(), axis.name, axis.left, axis.right, 0.5) for axis in axes]
    while len(dims) < 2:
        dims.append(Dimension(new_id(), f"Dimension {len(dims) + 1}", "Lower", "Higher", 0.5))

    logger.info("Inferred %d dimension(s) from %d axis candidate(s)", len(dims), len(axes))
    return dims


def default_dimensions(specs: Sequence[Tuple[str, str, str, float]] = DEFAULT_DIMENSION_SPECS) -> List[Dimension]:
    return [Dimension(new_id(), name, left, right, preference) for name, left, right, preference in specs]


apply_debug_logging(globals(), logger=logger)
