#!/usr/bin/env python3
"""
Main entry point for Swift style checking.

Usage:
    python3 -m swiftstyle.main [paths...]
    swiftstyle [paths...] --include-warnings
"""

import argparse
import logging
import sys
from pathlib import Path

from .checker import SwiftStyleChecker
from .reporter import LintReporter
from .utils.config_loader import ConfigLoader


def main(argv=None):
    """Main entry point for Swift style checking."""
    parser = argparse.ArgumentParser(description="Check Swift sources for style and quality issues")
    parser.add_argument('paths', nargs='*', default=['.'], help='Files or directories to check (default: .)')
    parser.add_argument('--format', choices=['console', 'json'], default='console', help='Output format')
    parser.add_argument('--include-warnings', action='store_true', help='Include warnings in output (default: errors only)')
    parser.add_argument('--output', '-o', default='test-results/swiftstyle.json', help='Output file for detailed JSON report')
    parser.add_argument('--config', help='Exceptions file applied on top of discovered .swiftstyle-exceptions files')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = [Path(p) for p in args.paths]

    extra_config = None
    if args.config:
        extra_config = ConfigLoader(Path.cwd()).load_file(Path(args.config))

    # Run checks
    checker = SwiftStyleChecker()
    results = checker.check_paths(paths, config=extra_config)
    results.include_warnings = args.include_warnings

    # Report results
    reporter = LintReporter(args.output)
    success = reporter.report_results(results, format_type=args.format)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
