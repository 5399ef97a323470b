"""CLI entry point and command dispatch."""

import argparse
import logging
import sys
import time
from pathlib import Path

from f1data.fetch import DEFAULT_TIMEOUT, Fetcher
from f1data.models import Record
from f1data.output import format_page, write_records_csv
from f1data.scrape import (
    ENTITIES,
    YEAR_MAX,
    YEAR_MIN,
    iter_results,
    iter_summaries,
    year_range,
)
from f1data.util import F1dataError

logger = logging.getLogger("f1data")

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _year_flags() -> argparse.ArgumentParser:
    flags = argparse.ArgumentParser(add_help=False)
    flags.add_argument(
        "--year", type=int, default=None,
        help="Only scrape the page for this season (overrides the range)",
    )
    flags.add_argument(
        "--year-min", type=int, default=YEAR_MIN,
        help=f"First season of the range (default: {YEAR_MIN})",
    )
    flags.add_argument(
        "--year-max", type=int, default=YEAR_MAX,
        help=f"Last season of the range, inclusive (default: {YEAR_MAX})",
    )
    flags.add_argument(
        "--output", type=Path, default=None,
        help="Also write all decoded records to this CSV file",
    )
    return flags


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f1data",
        description="Scrape Formula 1 results archive tables.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Increase logging (-v info, -vv debug)",
    )
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--user-agent", default=None,
        help="User-Agent header to send (default: client default)",
    )

    year_flags = _year_flags()
    entities = parser.add_subparsers(dest="entity", required=True)
    for name, spec in ENTITIES.items():
        entity_parser = entities.add_parser(name, help=f"Scrape {name} pages")
        ops = entity_parser.add_subparsers(dest="operation", required=True)
        ops.add_parser(
            "summary", parents=[year_flags],
            help=f"Scrape {name} summaries",
        )
        if spec.has_detail:
            result = ops.add_parser(
                "result", parents=[year_flags],
                help=f"Scrape {name} results",
            )
            result.add_argument(
                "name", nargs="?", default=None,
                help=f"Only scrape the {name} with this name (slug or display name)",
            )
    return parser


def _setup_logging(verbose: int) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def run(args: argparse.Namespace, fetcher: Fetcher) -> list[Record]:
    """Run one entity/operation command, printing rows as they are decoded."""
    entity = ENTITIES[args.entity]
    years = year_range(args.year, args.year_min, args.year_max)

    if args.operation == "summary":
        pages = iter_summaries(fetcher, entity, years)
    else:
        pages = iter_results(fetcher, entity, years, args.name)

    records: list[Record] = []
    for page in pages:
        for line in format_page(page):
            print(line)
        records.extend(page.records)

    if args.output is not None:
        write_records_csv(records, args.output)
    return records


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    cmd_name = f"{args.entity} {args.operation}"
    start_time = time.time()

    try:
        with Fetcher(timeout=args.timeout, user_agent=args.user_agent) as fetcher:
            records = run(args, fetcher)
    except F1dataError as e:
        logger.error("process command `%s`: %s", cmd_name, e)
        sys.exit(1)
    except Exception as e:
        logger.error("process command `%s`: %s", cmd_name, e, exc_info=True)
        sys.exit(1)

    logger.info(
        "%s: %d records in %.1fs", cmd_name, len(records), time.time() - start_time,
    )
