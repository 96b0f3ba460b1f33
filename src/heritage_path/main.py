"""
Command-line entry point.

1) Read the relationship dataset (CSV) into records.
2) Fold the records into an ancestry graph.
3) Optionally validate the graph and log any warnings.
4) Find the shortest path from the ancestor to the descendant.
5) Print the path, one line per hop.
"""

import argparse
import logging
import sys
from contextlib import closing

from .config import (
    LAYOUTS,
    RELATIONSHIPS,
    DatasetLayout,
    env_settings,
    make_layout,
    parse_column_overrides,
)
from .errors import HeritageError, NoPathFound, UnknownIdentifier
from .graph import build_graph
from .parsing import read_records
from .pathfinding import find_path
from .rendering import render_path
from .validation import validate_graph

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 1
EXIT_UNKNOWN_ID = 3
EXIT_NO_PATH = 4

MAX_WARNINGS_SHOWN = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heritage-path",
        description="Find how two people in a relationship dataset are related.",
        epilog="Example: heritage-path family.csv -a 20 -c 1",
    )
    parser.add_argument("csv_path", help="Path to the relationship dataset (UTF-8 CSV)")
    parser.add_argument("-a", "--ancestor", required=True, help="Id of the ancestor (path start)")
    parser.add_argument("-c", "--child", required=True, help="Id of the descendant (path end)")
    parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        default=None,
        help="One row per relationship (default) or one row per person with parent/spouse ids",
    )
    parser.add_argument("-d", "--delimiter", default=None, help="Field separator (default ',' for relationships, ';' for persons)")
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        metavar="FIELD=HEADER",
        help="Read a logical field from a differently named header column (repeatable)",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Report cycles and implausible ages before searching"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_layout(args: argparse.Namespace, environ=None) -> DatasetLayout:
    """Defaults, then environment, then command-line flags."""
    env_name, env_delimiter = env_settings(environ)
    layout = make_layout(args.layout or env_name or RELATIONSHIPS, args.delimiter or env_delimiter)
    if args.column:
        layout = layout.with_columns(parse_column_overrides(args.column))
    return layout


def report_warnings(warnings: list[str]) -> None:
    if not warnings:
        logger.info("No validation issues found")
        return
    logger.warning("Found %d validation warnings:", len(warnings))
    for w in warnings[:MAX_WARNINGS_SHOWN]:
        logger.warning("  - %s", w)
    if len(warnings) > MAX_WARNINGS_SHOWN:
        logger.warning("  ... and %d more", len(warnings) - MAX_WARNINGS_SHOWN)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        layout = load_layout(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        with closing(read_records(args.csv_path, layout)) as records:
            graph = build_graph(records)
    except (HeritageError, OSError) as exc:
        logger.error("Could not load %s: %s", args.csv_path, exc)
        return EXIT_DATA_ERROR

    if args.validate:
        report_warnings(validate_graph(graph))

    try:
        path = find_path(graph, args.ancestor, args.child)
    except UnknownIdentifier as exc:
        logger.error("%s", exc)
        return EXIT_UNKNOWN_ID
    except NoPathFound as exc:
        logger.error("%s", exc)
        return EXIT_NO_PATH

    for line in render_path(path):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
