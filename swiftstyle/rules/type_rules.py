#!/usr/bin/env python3
"""
Type-based style rules.

Rules over extracted enums, structs and classes: nesting depth, body
length and name shape (type aliases included).
"""

from dataclasses import dataclass
from typing import Callable, List

from ..context import AnalysisContext
from ..models import RawFinding, RuleId, RuleThreshold, Severity
from .naming import TYPE_NAME_MESSAGE, is_valid_type_name

# Default limits
TYPE_NESTING_LIMITS = RuleThreshold(warning=1)
TYPE_BODY_LIMITS = RuleThreshold(warning=200, error=350)


@dataclass(frozen=True)
class TypeRule:
    """A rule evaluated over the types of an analysis context."""
    rule_id: RuleId
    check: Callable[[AnalysisContext], List[RawFinding]]


class TypeRuleChecker:
    """Checker for type-level style rules."""

    def rules(self) -> List[TypeRule]:
        """All type rules in evaluation order."""
        return [
            TypeRule(RuleId.TYPE_NESTING, self.check_type_nesting),
            TypeRule(RuleId.TYPE_BODY_LENGTH, self.check_type_body_length),
            TypeRule(RuleId.TYPE_NAME, self.check_type_names),
        ]

    def check_type_nesting(self, context: AnalysisContext) -> List[RawFinding]:
        """Types should not be nested."""
        findings = []
        limits = context.threshold(RuleId.TYPE_NESTING, TYPE_NESTING_LIMITS)

        for type_decl in context.types:
            if type_decl.max_depth <= limits.warning:
                continue

            findings.append(RawFinding(
                matched_text=type_decl.body,
                start_offset=type_decl.start_offset,
                severity=Severity.WARNING,
                message=(f"Types should not be nested more than {limits.warning} level deep. "
                         f"The {type_decl.kind} {type_decl.name} has a maximum depth of "
                         f"{type_decl.max_depth} levels."),
                rule_id=RuleId.TYPE_NESTING,
            ))

        return findings

    def check_type_body_length(self, context: AnalysisContext) -> List[RawFinding]:
        """Type bodies should not span too many lines."""
        findings = []
        limits = context.threshold(RuleId.TYPE_BODY_LENGTH, TYPE_BODY_LIMITS)

        for type_decl in context.types:
            line_count = len(type_decl.body.split('\n'))
            severity = limits.severity_for(line_count)
            if severity is None:
                continue

            findings.append(RawFinding(
                matched_text=type_decl.body,
                start_offset=type_decl.start_offset,
                severity=severity,
                message=(f"Type bodies should not span too many lines. The {type_decl.kind} "
                         f"{type_decl.name} currently has {line_count} lines."),
                rule_id=RuleId.TYPE_BODY_LENGTH,
            ))

        return findings

    def check_type_names(self, context: AnalysisContext) -> List[RawFinding]:
        """Type and typealias names must be capitalized and alphanumeric."""
        named = [(t.name, t.body, t.start_offset) for t in context.types]
        named.extend(
            (alias.name, alias.text, alias.start_offset)
            for alias in context.parser.extract_typealiases(context.text)
        )

        findings = []
        for name, matched_text, start_offset in named:
            if is_valid_type_name(name):
                continue
            findings.append(RawFinding(
                matched_text=matched_text,
                start_offset=start_offset,
                severity=Severity.WARNING,
                message=TYPE_NAME_MESSAGE,
                rule_id=RuleId.TYPE_NAME,
            ))

        return findings
