import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from decision_mapper import DecisionMap, OptionTemplate, generate_svg_document, print_map

logger = logging.getLogger(__name__)

OptionSpec = Tuple[str, List[float]]


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_values(text: str) -> List[float]:
    values = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(float(part))
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"not a number: {part!r}") from exc
    return values


def _parse_option(text: str) -> OptionSpec:
    name, sep, coords = text.partition("=")
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"option needs a name: {text!r}")
    return name, _parse_values(coords) if sep else []


def _parse_top(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return value


def _read_considerations(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Map a decision onto inferred trade-off dimensions")
    parser.add_argument("path", help="Path to a considerations text file, or '-' for stdin")
    parser.add_argument("--title", default="My decision", help="Decision title (default: 'My decision')")
    parser.add_argument(
        "--prefer",
        type=_parse_values,
        default=[],
        help="Comma-separated preferences in dimension order, e.g. 0.7,0.3",
    )
    parser.add_argument(
        "--option",
        dest="options",
        action="append",
        type=_parse_option,
        default=[],
        help="Named option with coordinates in dimension order, e.g. 'Startup=0.3,0.8' (repeatable)",
    )
    parser.add_argument("--top", type=_parse_top, default=3, help="Number of top picks to list (default: 3)")
    parser.add_argument("--svg-output-path", help="Write a standalone SVG of the map to the given path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    text = _read_considerations(args.path)
    logger.info("Read %d character(s) of considerations from %s", len(text), args.path)

    decision_map = DecisionMap()
    templates = [OptionTemplate(name=name) for name, _ in args.options] or None
    dims = decision_map.start_from_intake(text, title=args.title, templates=templates)

    if len(args.prefer) > len(dims):
        logger.warning("Ignoring %d preference value(s) beyond %d dimension(s)", len(args.prefer) - len(dims), len(dims))
    for dim, value in zip(dims, args.prefer):
        decision_map.set_preference(dim.id, value)

    for option, (name, coords) in zip(list(decision_map.options), args.options):
        if len(coords) > len(decision_map.dimensions):
            logger.warning("Option %r: ignoring coordinates beyond %d dimension(s)", name, len(decision_map.dimensions))
        for dim, value in zip(decision_map.dimensions, coords):
            decision_map.set_option_score(option.id, dim.id, value)

    print(print_map(decision_map, top=args.top), end="")

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(generate_svg_document(decision_map), encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
