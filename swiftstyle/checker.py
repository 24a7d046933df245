#!/usr/bin/env python3
"""
Main lint orchestration.

Builds a fresh analysis context for every call, runs the pattern, function
and type rule families in that order, and resolves raw findings into
positioned diagnostics.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from .context import AnalysisContext
from .models import Diagnostic, FileResult, LintResults, RawFinding, RuleId
from .rules import FunctionRuleChecker, PatternRuleChecker, TypeRuleChecker
from .shared import PositionIndex, SwiftParser
from .utils.config_loader import ConfigLoader, LintConfig
from .utils.file_utils import find_swift_files, get_file_content

logger = logging.getLogger(__name__)


class SwiftStyleChecker:
    """Runs every rule family over a block of Swift source text."""

    def __init__(self, parser: Optional[SwiftParser] = None):
        self.parser = parser or SwiftParser()
        self.pattern_checker = PatternRuleChecker()
        self.function_checker = FunctionRuleChecker()
        self.type_checker = TypeRuleChecker()

    def analyze(self, text: str, config: Optional[LintConfig] = None) -> List[Diagnostic]:
        """Lint one text and return its diagnostics in rule-family order."""
        context = AnalysisContext.build(text, config, self.parser)
        diagnostics: List[Diagnostic] = []

        # Pattern rules
        for rule in self.pattern_checker.rules:
            findings = self._run_rule(
                rule.rule_id, context,
                lambda ctx, rule=rule: self.pattern_checker.check_rule(ctx.text, rule),
            )
            diagnostics.extend(resolve_findings(findings, context.positions))

        # Function rules
        for rule in self.function_checker.rules():
            findings = self._run_rule(rule.rule_id, context, rule.check)
            diagnostics.extend(resolve_findings(findings, context.positions))

        # Type rules
        for rule in self.type_checker.rules():
            findings = self._run_rule(rule.rule_id, context, rule.check)
            diagnostics.extend(resolve_findings(findings, context.positions))

        return diagnostics

    def _run_rule(self, rule_id: RuleId, context: AnalysisContext,
                  check: Callable[[AnalysisContext], List[RawFinding]]) -> List[RawFinding]:
        """Run one rule in isolation; a failing rule contributes nothing."""
        if not context.config.is_enabled(rule_id):
            return []

        try:
            return check(context)
        except Exception:
            logger.warning("Rule %s failed and was skipped", rule_id.value, exc_info=True)
            return []

    def check_paths(self, paths: List[Path], config: Optional[LintConfig] = None,
                    project_root: Optional[Path] = None) -> LintResults:
        """Lint every Swift file under the given paths."""
        start_time = time.time()
        results = LintResults()
        if project_root is None:
            project_root = find_project_root(paths[0]) if paths else Path.cwd()
        loader = ConfigLoader(project_root)

        for file_path in find_swift_files(paths):
            content = get_file_content(file_path)
            if content is None:
                continue

            file_config = loader.load_for(file_path)
            if config is not None:
                file_config.merge(config)

            results.add_file(FileResult(
                file_path=str(file_path),
                diagnostics=self.analyze(content, file_config),
            ))

        results.execution_time = time.time() - start_time
        return results


def find_project_root(target_path: Path) -> Path:
    """Find project root by looking for common markers."""
    current = target_path.resolve()
    root_markers = {'Package.swift', '.git', 'Podfile'}
    max_depth = 10

    for _ in range(max_depth):
        if any((current / marker).exists() for marker in root_markers):
            return current
        if current == current.parent:
            break
        current = current.parent

    return Path.cwd()


def resolve_findings(findings: List[RawFinding], positions: PositionIndex) -> List[Diagnostic]:
    """Map findings to start/end positions, dropping any that cannot be placed."""
    diagnostics = []
    for finding in findings:
        start = positions.resolve(finding.start_offset)
        end = positions.resolve(finding.end_offset)

        if start is None or end is None:
            logger.debug("Dropping %s finding at unresolvable offset %d",
                         finding.rule_id.value, finding.start_offset)
            continue

        diagnostics.append(Diagnostic(
            severity=finding.severity,
            message=finding.message,
            start=start,
            end=end,
            rule_id=finding.rule_id,
        ))
    return diagnostics


def analyze(text: str, config: Optional[LintConfig] = None) -> List[Diagnostic]:
    """Lint a block of Swift source text."""
    return SwiftStyleChecker().analyze(text, config)
