"""
Adventure Path CLI

Без аргументов — интерактивное меню в консоли.
С --path — однократный расчёт; --json печатает отчёт path_report.

Exit status: 0 — маршрут принят, 1 — маршрут отклонён.
"""

import argparse
import json
import logging
import os
import sys

from src.core.contracts import build_path_report, validate_path_report
from src.core.math.displacement import calculate_path_distance
from src.core.parsing.errors import PathInputError
from src.journey.menu import AdventureMenu
from src.journey.messages import distance_message
from src.journey.views import ConsoleView

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ADVENTURE_PATH_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventure-path",
        description="Euclidean distance from the starting point of a step path",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
A path is a sequence of {steps}{direction} groups with no separators.
Directions: F(orward), B(ack), L(eft), R(ight), either case.

Examples:
  adventure-path                      # interactive menu
  adventure-path --path 3F4R          # There are 5 steps from the starting point.
  adventure-path --path 1B2F3L4R --json
""",
    )
    parser.add_argument("-p", "--path", help="Path to evaluate once, without the menu")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON path report (requires --path)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def run_once(path: str, as_json: bool = False) -> int:
    """
    Однократный расчёт маршрута.

    Returns:
        Exit status: 0 если маршрут принят, 1 если отклонён
    """
    if as_json:
        report = build_path_report(path)
        validate_path_report(report)
        print(json.dumps(report, allow_nan=False))
        return 0 if report["accepted"] else 1

    try:
        distance = calculate_path_distance(path)
    except PathInputError as e:
        print(e.user_message, file=sys.stderr)
        return 1

    print(distance_message(distance))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.json and args.path is None:
        parser.error("--json requires --path")
    if args.log_level not in LOG_LEVELS:
        # default из окружения argparse не сверяет с choices
        parser.error(
            f"invalid {LOG_LEVEL_ENV} value '{args.log_level}' "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    if args.path is not None:
        return run_once(args.path, as_json=args.json)

    logger.debug("Starting interactive menu")
    AdventureMenu(ConsoleView()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
