#!/usr/bin/env python3
"""
Lint result reporting.

Handles console summaries, JSON output and the JSON report file.
"""

import json
from datetime import datetime
from pathlib import Path

from .models import Diagnostic, LintResults

MAX_LISTED_DIAGNOSTICS = 50


class LintReporter:
    """Handles reporting of lint results."""

    def __init__(self, output_file: str = "test-results/swiftstyle.json"):
        self.output_file = Path(output_file)

    def report_results(self, results: LintResults, format_type: str = "console") -> bool:
        """Report results to both JSON file and console. Returns True if no errors."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self._write_json_report(results)

        if format_type == "json":
            self._display_json_output(results)
        else:
            self._display_console_summary(results)

        return not results.has_errors()

    def _report_data(self, results: LintResults) -> dict:
        report_data = results.to_dict()
        report_data["timestamp"] = datetime.now().isoformat()
        return report_data

    def _write_json_report(self, results: LintResults) -> None:
        """Write detailed JSON report to file."""
        with open(self.output_file, 'w') as f:
            json.dump(self._report_data(results), f, indent=2, default=str)

    def _display_json_output(self, results: LintResults) -> None:
        print(json.dumps(self._report_data(results), indent=2, default=str))

    def _display_console_summary(self, results: LintResults) -> None:
        """Display summary information on console."""
        total_errors = len(results.errors)
        total_warnings = len(results.warnings)
        suppressed_warnings = 0 if results.include_warnings else total_warnings

        listed = 0
        for file_result in results.files:
            for diagnostic in results.visible_diagnostics(file_result):
                if listed < MAX_LISTED_DIAGNOSTICS:
                    print(format_diagnostic(file_result.file_path, diagnostic))
                listed += 1

        if listed > MAX_LISTED_DIAGNOSTICS:
            print(f"... and {listed - MAX_LISTED_DIAGNOSTICS} more")

        if listed:
            print()
            print("Summary:")
            print("=" * 72)
            print(f"• Files checked: {len(results.files)}")
            print(f"• Total errors: {total_errors}")
            print(f"• Total warnings: {total_warnings}")
            print()

            rule_summary = results.get_summary_by_rule()
            print("By rule:")
            for rule, count in sorted(rule_summary.items(), key=lambda x: x[1], reverse=True):
                print(f"  • {rule}: {count}")
            print()
        else:
            print(f"Swift style check passed! ({len(results.files)} files checked)")

        if suppressed_warnings > 0:
            print(f"{suppressed_warnings} warning(s) suppressed - run with --include-warnings to see them")
        print(f"Detailed report: {self.output_file}")


def format_diagnostic(file_path: str, diagnostic: Diagnostic) -> str:
    """Format a diagnostic as file:line:col with 1-based display positions."""
    return (f"{file_path}:{diagnostic.start.line + 1}:{diagnostic.start.column + 1}: "
            f"{diagnostic.severity.value} [{diagnostic.rule_id.value}] {diagnostic.message}")
