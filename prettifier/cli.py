"""Command-line front end for the Itinerary Prettifier.

Usage:
    prettifier ./input.txt ./output.txt ./airport-lookup.csv [--print]
    prettifier --help
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_config
from .domain.errors import PrettifierError
from .logging_setup import configure_logging
from .services import PrettifierService
from .text.ansi import BLUE, RED, YELLOW, colorize

logger = logging.getLogger(__name__)

USAGE = (
    "itinerary usage:\n"
    "$ prettifier ./input.txt ./output.txt ./airport-lookup.csv [--print]"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prettifier",
        description="Convert airport codes into airport names and format "
        "ISO 8601 dates and times in an itinerary.",
        add_help=False,
    )
    parser.add_argument("input", nargs="?", help="Itinerary text file")
    parser.add_argument("output", nargs="?", help="Where to write the result")
    parser.add_argument("lookup", nargs="?", help="Airport lookup CSV file")
    parser.add_argument(
        "--print",
        dest="print_output",
        action="store_true",
        help="Also print the result to the console",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help")
    return parser


def help_text() -> str:
    lines = [
        colorize(
            "The program converts airport codes into airport names and formats "
            "dates and times into a human-readable form.",
            BLUE,
        ),
        colorize(
            "Write the itinerary into the input file using the following markup:",
            BLUE,
        ),
        "  - IATA airport codes:" + colorize(" #LHR", YELLOW),
        "  - ICAO airport codes:" + colorize(" ##EGLL", YELLOW),
        "  - City of an airport:" + colorize(" *#LHR or *##EGLL", YELLOW),
        "  - Dates in ISO 8601 form:" + colorize(" D(2031-12-03T13:15:30+01:00)", YELLOW),
        "  - 12-hour times:" + colorize(" T12(2031-12-03T13:15+01:00)", YELLOW),
        "  - 24-hour times:" + colorize(" T24(2031-12-03T13:15Z)", YELLOW),
        "",
        USAGE,
        colorize("\nThe results are saved in the output file.\n", RED),
    ]
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the prettifier from the command line.

    Returns:
        0 on success, 1 on a run failure, 2 on missing arguments.
    """
    args = build_parser().parse_args(argv)

    if args.help:
        print(help_text())
        return 0

    if not (args.input and args.output and args.lookup):
        print(colorize(USAGE, RED))
        return 2

    config = get_config()
    configure_logging(config.observability)
    service = PrettifierService.create_default(config)

    try:
        result = service.prettify(args.input, args.output, args.lookup)
    except PrettifierError as e:
        logger.debug("Prettify run failed: %s", e, exc_info=True)
        print(colorize(e.message, RED))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(colorize(f"Error: {e}", RED))
        return 1

    if args.print_output:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
