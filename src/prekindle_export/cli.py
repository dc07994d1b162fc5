# src/prekindle_export/cli.py
"""
Command line entry point: fetch every feed, then print or save the CSV.
Examples:
  prekindle-export
  prekindle-export --output data/prekindle_events.csv
  prekindle-export --url "https://www.prekindle.com/api/events/organizer/123&callback=widgetCallback" \
                   --columns id,title,lineup/0
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from .config import ExportConfig
from .errors import ConfigError
from .feeds import FeedCollector, combine_records, failed_sources
from .projection import render_table
from .utils.logging_utils import get_logger, set_level

LOG = get_logger("prekindle_export.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prekindle-export",
        description="Fetch Prekindle JSONP event feeds and export them as CSV.",
    )
    parser.add_argument("--url", dest="urls", action="append", default=None,
                        help="Feed URL (repeatable); replaces the configured list")
    parser.add_argument("--columns", type=str, default=None,
                        help="Comma separated column paths, e.g. id,title,lineup/0")
    parser.add_argument("--callback", type=str, default=None,
                        help="JSONP callback name (default: widgetCallback)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--retries", type=int, default=None, help="HTTP retries per feed (default: 0)")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Write the CSV to this file instead of stdout")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def load_config(args: argparse.Namespace) -> ExportConfig:
    columns = None
    if args.columns:
        columns = [c.strip() for c in args.columns.split(",") if c.strip()]
    return ExportConfig.from_env().with_overrides(
        feed_urls=args.urls,
        columns=columns,
        callback=args.callback,
        timeout=args.timeout,
        retries=args.retries,
        output_path=args.output,
    )


def write_table(table: str, output_path: Optional[str]) -> None:
    if output_path is None:
        sys.stdout.write(table + "\n")
        sys.stdout.flush()
        LOG.info("Wrote CSV to stdout")
        return
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(table + "\n", encoding="utf-8")
    LOG.info("Saved CSV → %s", out)


def run(config: ExportConfig, session=None) -> str:
    """Collect every feed and return the rendered table."""
    results = FeedCollector(config, session=session).collect()
    records = combine_records(results)
    failures = failed_sources(results)

    LOG.info(
        "Collected %d events from %d/%d sources",
        len(records),
        len(results) - len(failures),
        len(results),
    )
    if failures:
        LOG.warning("Skipped %d source(s): %s", len(failures), ", ".join(f.url for f in failures))

    return render_table(records, config.columns)


def main(argv: Optional[list[str]] = None, session=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_level(args.log_level, "prekindle_export.cli", "prekindle_export.feeds")

    try:
        config = load_config(args)
    except ConfigError as e:
        parser.error(str(e))

    try:
        table = run(config, session=session)
        write_table(table, config.output_path)
    except Exception:
        LOG.exception("Export failed")
        return 1

    LOG.info("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
