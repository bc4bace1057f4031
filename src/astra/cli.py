"""Command line entry point: decode a TLE file and report the outcome."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from astra.core.catalog import Catalog
from astra.core.errors import TLEError
from astra.data.source import CatalogSourceError

LOGGER = logging.getLogger("astra.cli")

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_SOURCE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astra",
        description="Decode and validate a three-line TLE catalog.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("path", help="TLE file, three lines per satellite.")
    parser.add_argument("--json", action="store_true", help="Print every record's description as JSON.")
    parser.add_argument(
        "--current-year",
        type=int,
        default=None,
        help="Year used to expand two-digit launch years (default: this year).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=sorted(LOG_LEVELS),
        help="Logging verbosity.",
    )
    return parser


def configure_logging(level_name: str) -> None:
    """Configure :mod:`logging` according to the CLI flag."""

    level = LOG_LEVELS.get(level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    configure_logging(ns.log_level)

    try:
        catalog = Catalog.from_file(ns.path, current_year=ns.current_year)
    except TLEError as exc:
        print(f"{ns.path}: {exc.message} (offset {exc.offset})", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except (CatalogSourceError, ValueError) as exc:
        print(f"{ns.path}: {exc}", file=sys.stderr)
        return EXIT_SOURCE_ERROR

    if ns.json:
        print(json.dumps([catalog.describe(r) for r in catalog], indent=2))
    else:
        for record in catalog:
            print(f"{record.catalog_number:>5}  {record.name}")
        LOGGER.info("Decoded %d records from %s", len(catalog), ns.path)
    return EXIT_OK


def entrypoint() -> None:
    sys.exit(main())
