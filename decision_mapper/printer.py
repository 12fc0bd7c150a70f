from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .model import Dimension, Option, OptionStatus


def format_dimension(dim: Dimension) -> str:
    return f"{dim.name}: {dim.left_label} ↔ {dim.right_label} (pref {dim.preference:.2f})"


def format_status(status: Optional[OptionStatus]) -> str:
    if status is None:
        return "Outside • dist 0.00 • score 0.00"
    region = "Inside" if status.inside else "Outside"
    return f"{region} • dist {status.distance:.2f} • score {status.score:.2f}"


def _format_coords(option: Option, dims: Sequence[Dimension]) -> str:
    return ", ".join(f"{dim.name}={option.coordinate(dim.id):.2f}" for dim in dims)


def print_dimensions(dims: Iterable[Dimension]) -> str:
    lines = []
    for idx, dim in enumerate(dims):
        axis = "X" if idx == 0 else "Y" if idx == 1 else " "
        lines.append(f"  [{axis}] {format_dimension(dim)}")
    return "\n".join(lines) + ("\n" if lines else "")


def print_ranking(ranking: Sequence[Tuple[Option, Optional[OptionStatus]]]) -> str:
    lines = [
        f"  {idx}. {option.display_name} ({format_status(status)})"
        for idx, (option, status) in enumerate(ranking, start=1)
    ]
    return "\n".join(lines) + ("\n" if lines else "")


def print_map(decision_map, top: int = 3) -> str:
    """Render the title, dimensions, options and the current top picks as text."""

    status: Mapping[str, OptionStatus] = decision_map.status()
    out = [f"Decision: {decision_map.title}\n", "Dimensions:\n", print_dimensions(decision_map.dimensions)]

    out.append("Options:\n")
    for option in decision_map.options:
        marker = "*" if option.id == decision_map.selected_option_id else "-"
        out.append(f"  {marker} {option.display_name}: {format_status(status.get(option.id))}\n")
        out.append(f"      {_format_coords(option, decision_map.dimensions)}\n")
        if option.notes:
            out.append(f"      notes: {option.notes}\n")

    out.append("Top picks:\n")
    out.append(print_ranking(decision_map.top(top)) or "  (none)\n")
    return "".join(out)
