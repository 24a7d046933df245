#!/usr/bin/env python3
"""
Function-based style rules.

Rules that measure each extracted function: cyclomatic complexity, body
length, parameter count, nesting depth and binding names, plus line length
which only needs the text.
"""

import re
from dataclasses import dataclass
from typing import Callable, List

from ..context import AnalysisContext
from ..models import RawFinding, RuleId, RuleThreshold, Severity
from .naming import check_binding_name

# Default limits
COMPLEXITY_LIMITS = RuleThreshold(warning=10, error=20)
FUNCTION_BODY_LIMITS = RuleThreshold(warning=40, error=100)
PARAMETER_COUNT_LIMITS = RuleThreshold(warning=5, error=8)
LINE_LENGTH_LIMITS = RuleThreshold(warning=100, error=200)
FUNCTION_NESTING_LIMITS = RuleThreshold(warning=5)

COMPLEXITY_KEYWORD_PATTERN = re.compile(r'\b(if|func|while|for|guard|case|switch|fallthrough)\b')
BRANCH_KEYWORDS = ('if', 'func', 'while', 'for', 'guard')


@dataclass(frozen=True)
class FunctionRule:
    """A rule evaluated over the functions of an analysis context."""
    rule_id: RuleId
    check: Callable[[AnalysisContext], List[RawFinding]]


class FunctionRuleChecker:
    """Checker for function-level style rules."""

    def rules(self) -> List[FunctionRule]:
        """All function rules in evaluation order."""
        return [
            FunctionRule(RuleId.CYCLOMATIC_COMPLEXITY, self.check_cyclomatic_complexity),
            FunctionRule(RuleId.FUNCTION_BODY_LENGTH, self.check_function_body_length),
            FunctionRule(RuleId.FUNCTION_PARAMETER_COUNT, self.check_parameter_count),
            FunctionRule(RuleId.LINE_LENGTH, self.check_line_length),
            FunctionRule(RuleId.FUNCTION_NESTING, self.check_function_nesting),
            FunctionRule(RuleId.VARIABLE_NAME, self.check_variable_names),
        ]

    def check_cyclomatic_complexity(self, context: AnalysisContext) -> List[RawFinding]:
        """
        Approximate cyclomatic complexity from keyword counts.

        Branch keywords count once each; a switch adds its cases minus its
        fallthroughs when that is positive.
        """
        findings = []
        limits = context.threshold(RuleId.CYCLOMATIC_COMPLEXITY, COMPLEXITY_LIMITS)

        for function in context.functions:
            complexity = measure_complexity(function.body)
            severity = limits.severity_for(complexity)
            if severity is None:
                continue

            findings.append(RawFinding(
                matched_text=function.body,
                start_offset=function.start_offset,
                severity=severity,
                message=(f"Cyclomatic complexity should have complexity of {limits.warning} or less; "
                         f"the current complexity of the function {function.name} is {complexity}."),
                rule_id=RuleId.CYCLOMATIC_COMPLEXITY,
            ))

        return findings

    def check_function_body_length(self, context: AnalysisContext) -> List[RawFinding]:
        """Function bodies should not span too many lines."""
        findings = []
        limits = context.threshold(RuleId.FUNCTION_BODY_LENGTH, FUNCTION_BODY_LIMITS)

        for function in context.functions:
            line_count = len(function.body.split('\n'))
            severity = limits.severity_for(line_count)
            if severity is None:
                continue

            findings.append(RawFinding(
                matched_text=function.body,
                start_offset=function.start_offset,
                severity=severity,
                message=(f"Functions bodies should not span too many lines. "
                         f"The function {function.name} currently has {line_count} lines."),
                rule_id=RuleId.FUNCTION_BODY_LENGTH,
            ))

        return findings

    def check_parameter_count(self, context: AnalysisContext) -> List[RawFinding]:
        """Functions should not take too many parameters."""
        findings = []
        limits = context.threshold(RuleId.FUNCTION_PARAMETER_COUNT, PARAMETER_COUNT_LIMITS)

        for function in context.functions:
            severity = limits.severity_for(function.param_count)
            if severity is None:
                continue

            findings.append(RawFinding(
                matched_text=function.body,
                start_offset=function.start_offset,
                severity=severity,
                message=(f"Number of function parameters should be low. "
                         f"The function {function.name} currently has {function.param_count} parameters."),
                rule_id=RuleId.FUNCTION_PARAMETER_COUNT,
            ))

        return findings

    def check_line_length(self, context: AnalysisContext) -> List[RawFinding]:
        """Lines should not span too many characters."""
        findings = []
        limits = context.threshold(RuleId.LINE_LENGTH, LINE_LENGTH_LIMITS)

        for line_start, line in zip(context.positions.line_starts, context.text.split('\n')):
            severity = limits.severity_for(len(line))
            if severity is None:
                continue

            findings.append(RawFinding(
                matched_text=line,
                start_offset=line_start,
                severity=severity,
                message=(f"Lines should not span too many characters. "
                         f"This line currently has {len(line)} characters."),
                rule_id=RuleId.LINE_LENGTH,
            ))

        return findings

    def check_function_nesting(self, context: AnalysisContext) -> List[RawFinding]:
        """Functions should not be nested too deeply."""
        findings = []
        limits = context.threshold(RuleId.FUNCTION_NESTING, FUNCTION_NESTING_LIMITS)

        for function in context.functions:
            if function.max_depth <= limits.warning:
                continue

            findings.append(RawFinding(
                matched_text=function.body,
                start_offset=function.start_offset,
                severity=Severity.WARNING,
                message=(f"Functions should not be nested more than {limits.warning} levels deep. "
                         f"The function {function.name} has a maximum depth of {function.max_depth} levels."),
                rule_id=RuleId.FUNCTION_NESTING,
            ))

        return findings

    def check_variable_names(self, context: AnalysisContext) -> List[RawFinding]:
        """Check every declared binding, then every function parameter."""
        bindings = list(context.bindings)
        for function in context.functions:
            bindings.extend(context.parser.extract_parameter_bindings(function))

        findings = []
        for binding in bindings:
            finding = check_binding_name(binding)
            if finding:
                findings.append(finding)

        return findings


def measure_complexity(body: str) -> int:
    """Count branching keywords in a function body."""
    keyword_count = {keyword: 0 for keyword in BRANCH_KEYWORDS + ('case', 'switch', 'fallthrough')}
    for match in COMPLEXITY_KEYWORD_PATTERN.finditer(body):
        keyword_count[match.group(1)] += 1

    complexity = sum(keyword_count[keyword] for keyword in BRANCH_KEYWORDS)
    if keyword_count['switch'] > 0:
        switch_complexity = keyword_count['case'] - keyword_count['fallthrough']
        if switch_complexity > 0:
            complexity += switch_complexity

    return complexity
