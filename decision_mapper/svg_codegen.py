"""Standalone SVG rendering of a decision map."""

from __future__ import annotations

import logging
from typing import List
from xml.sax.saxutils import escape

from .geometry import polygon_path, to_canvas

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{value:.1f}"


def generate_svg_document(decision_map) -> str:
    """Return an SVG document with the region, preference dot and option markers."""

    frame = decision_map.frame
    size = frame.size
    status = decision_map.status()
    dims = decision_map.dimensions

    lines: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(size)}" height="{_fmt(size)}" '
        f'viewBox="0 0 {_fmt(size)} {_fmt(size)}">'
    ]

    half = size / 2
    lines.append(
        f'  <line x1="{_fmt(frame.pad)}" y1="{_fmt(half)}" x2="{_fmt(size - frame.pad)}" y2="{_fmt(half)}" '
        'stroke="black" stroke-opacity="0.2"/>'
    )
    lines.append(
        f'  <line x1="{_fmt(half)}" y1="{_fmt(frame.pad)}" x2="{_fmt(half)}" y2="{_fmt(size - frame.pad)}" '
        'stroke="black" stroke-opacity="0.2"/>'
    )

    if decision_map.polygon:
        lines.append(
            f'  <path d="{polygon_path(decision_map.polygon, frame)}" fill="black" fill-opacity="0.08" stroke="black"/>'
        )

    px, py = to_canvas(decision_map.preference(), frame)
    lines.append(f'  <circle cx="{_fmt(px)}" cy="{_fmt(py)}" r="5" fill="none" stroke="black"/>')

    for point in decision_map.points():
        cx, cy = to_canvas((point.x, point.y), frame)
        selected = point.id == decision_map.selected_option_id
        opacity = 1 if selected else 0.9 if point.is_named else 0.35
        inside = status[point.id].inside if point.id in status else False
        lines.append(
            f'  <circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{8 if selected else 6}" '
            f'opacity="{opacity}" data-inside="{str(inside).lower()}"/>'
        )
        lines.append(f'  <text x="{_fmt(cx + 10)}" y="{_fmt(cy + 4)}">{escape(point.display_name)}</text>')

    for idx, (x, y, anchor) in enumerate(
        ((size - frame.pad, size - 6, "end"), (frame.pad, frame.pad - 10, "start"))
    ):
        label = dims[idx].name if len(dims) > idx and dims[idx].name else ("X" if idx == 0 else "Y")
        lines.append(f'  <text x="{_fmt(x)}" y="{_fmt(y)}" text-anchor="{anchor}">{escape(label)}</text>')

    lines.append("</svg>")
    logger.info("Rendered SVG map with %d option marker(s)", len(decision_map.options))
    return "\n".join(lines) + "\n"
