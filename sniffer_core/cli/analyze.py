"""
Analyzer CLI

Loads a page, extracts deduplicated component styles and writes the artifacts
the viewer reads.

Usage:
    design-sniffer https://example.com
    design-sniffer https://example.com --category Button --category Card --print-report
"""

import argparse
import asyncio
import logging
import shlex
import sys
import time
from pathlib import Path
from typing import List, Optional

from sniffer_core.config import config as default_config
from sniffer_core.error_handler import format_error_for_logging, format_user_friendly_error
from sniffer_core.errors import NavigationError
from sniffer_core.extractor import analyze_url
from sniffer_core.report import format_report
from sniffer_core.result_store import write_artifacts
from sniffer_core.taxonomy import DEFAULT_CATEGORIES, select_categories
from sniffer_logs import create_run_logger

logger = logging.getLogger("sniffer_core.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="design-sniffer",
        description="Extract the visually distinct UI components of a web page"
    )
    parser.add_argument("url", help="Address of the page to analyze")
    parser.add_argument("--public-dir", type=Path,
                        help=f"Directory for computed-styles.json (default: {default_config.public_dir})")
    parser.add_argument("--archive-dir", type=Path,
                        help=f"Directory for old snapshots and the text report (default: {default_config.archive_dir})")
    parser.add_argument("--log-dir", type=Path,
                        help=f"Directory for run logs (default: {default_config.log_dir})")
    parser.add_argument("--headed", action="store_true",
                        help="Show the browser window")
    parser.add_argument("--navigation-timeout", type=int, metavar="MS",
                        help="Page load timeout in milliseconds")
    parser.add_argument("--selector-timeout", type=int, metavar="MS",
                        help="Per-selector wait in milliseconds")
    parser.add_argument("-c", "--category", action="append", default=[],
                        help="Only analyze this category (repeatable)")
    parser.add_argument("--print-report", action="store_true",
                        help="Print the text report to stdout")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = default_config.with_overrides(
        public_dir=args.public_dir,
        archive_dir=args.archive_dir,
        log_dir=args.log_dir,
        navigation_timeout_ms=args.navigation_timeout,
        selector_timeout_ms=args.selector_timeout,
        headless=False if args.headed else None,
    )

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, cfg.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    categories = list(DEFAULT_CATEGORIES)
    if args.category:
        try:
            categories = select_categories(args.category)
        except KeyError as e:
            parser.error(e.args[0])

    command_line = shlex.join(["design-sniffer"] + list(argv if argv is not None else sys.argv[1:]))
    run_logger = create_run_logger(url=args.url, command_line=command_line, log_dir=str(cfg.log_dir))

    print("🚀 Starting computed style analysis...")
    print(f"🌐 Analyzing URL: {args.url}")
    started = time.monotonic()

    try:
        result = asyncio.run(analyze_url(args.url, categories, config=cfg, run_logger=run_logger))
        paths = write_artifacts(result, cfg.public_dir, cfg.archive_dir)
    except Exception as e:
        duration_ms = int((time.monotonic() - started) * 1000)
        if isinstance(e, NavigationError):
            logger.error(format_error_for_logging(e, context="analyze"))
        else:
            logger.exception(format_error_for_logging(e, context="analyze"))
        friendly = format_user_friendly_error(e, context="analyze")
        print(f"❌ {friendly['message']}", file=sys.stderr)
        print(f"💡 {friendly['suggestion']}", file=sys.stderr)
        run_logger.log_error(str(e))
        run_logger.finalize(success=False, duration_ms=duration_ms, error=str(e))
        return 1

    duration_ms = int((time.monotonic() - started) * 1000)
    run_logger.log_heading("Result")
    run_logger.log_json(result.stats.to_dict(), title="Extraction stats")
    run_logger.log_kv("Data", str(paths.data))
    run_logger.log_kv("Report", str(paths.report))
    if paths.previous:
        run_logger.log_kv("Previous snapshot", str(paths.previous))
    run_logger.finalize(success=True, duration_ms=duration_ms)

    if args.print_report:
        print(format_report(result))

    print("✅ Analysis complete!")
    for category in result:
        print(f"   {category.name}: {len(category.elements)} unique")
    print(f"📊 New computed-styles.json saved to: {paths.data}")
    print(f"📝 Text report saved to: {paths.report}")
    print(f"🗒️  Run log: {run_logger.log_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
