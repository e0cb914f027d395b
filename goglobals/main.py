"""Command line entry point."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional
import logging

from .config import Config, OUTPUT_FORMATS
from .analyzer.declaration_scanner import MalformedTreeError
from .io.excel_writer import ExcelWriter
from .io.report import write_report
from .runner import GlobalsChecker
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goglobals",
        description="Report package-level variables in Go source files"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Go files or directories (default: source_directories from config)"
    )
    parser.add_argument(
        "-c", "--config",
        help="YAML config file"
    )
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        help="Output format"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (stdout if omitted; required for excel)"
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        help="Number of worker threads"
    )
    parser.add_argument(
        "--include-tests",
        action="store_true",
        help="Also scan *_test.go files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def _load_config(args: argparse.Namespace) -> Optional[Config]:
    if args.config:
        if not Path(args.config).exists():
            print(f"Error: config file not found: {args.config}", file=sys.stderr)
            return None
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # command line overrides the file
    if args.format:
        config.output_format = args.format
    if args.output:
        config.output_file = args.output
    if args.jobs is not None:
        config.max_workers = args.jobs
    if args.include_tests:
        config.include_tests = True
    if args.verbose:
        config.log_level = "DEBUG"

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (sys.argv if None)

    Returns:
        Exit code: 0 clean, 1 findings reported, 2 error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = _load_config(args)
    if config is None:
        return EXIT_ERROR

    setup_logging(level=config.log_level, log_file=config.log_file)

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        return EXIT_ERROR

    if not args.paths and not config.source_directories:
        parser.error("no paths given and no source_directories configured")

    checker = GlobalsChecker(config)
    try:
        findings = checker.run(args.paths or None)
    except MalformedTreeError as e:
        logger.exception(f"Internal error: {e}")
        return EXIT_ERROR

    stats = checker.stats
    if config.output_format == "excel":
        ExcelWriter(config.output_file).write(findings, stats.files_scanned)
    elif config.output_file:
        with open(config.output_file, "w", encoding="utf-8") as f:
            write_report(f, findings, config.output_format, stats.files_scanned, stats.errors)
        logger.info(f"Report written to {config.output_file}")
    else:
        write_report(sys.stdout, findings, config.output_format, stats.files_scanned, stats.errors)

    return EXIT_FINDINGS if findings else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
