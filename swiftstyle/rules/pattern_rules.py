#!/usr/bin/env python3
"""
Pattern-based style rules.

Each rule is a set of regular expressions evaluated against the full text,
with optional exception patterns whose match ranges suppress findings that
start inside them.
"""

import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from ..models import RawFinding, RuleId, Severity


@dataclass(frozen=True)
class PatternRule:
    """A whole-text rule made of ordered patterns and exception patterns."""
    rule_id: RuleId
    patterns: Tuple[Pattern, ...]
    severity: Severity
    message: str
    exceptions: Tuple[Pattern, ...] = ()


LEGACY_GEOMETRY_FUNCTIONS = [
    'NSWidth', 'NSHeight', 'NSMinX', 'NSMidX', 'NSMaxX', 'NSMinY',
    'NSMidY', 'NSMaxY', 'NSEqualRects', 'NSEqualSizes', 'NSEqualPoints',
    'NSEdgeInsetsEqual', 'NSIsEmptyRect', 'NSIntegralRect',
    'NSInsetRect', 'NSOffsetRect', 'NSUnionRect', 'NSIntersectionRect',
    'NSContainsRect', 'NSPointInRect', 'NSIntersectsRect',
]

# Horizontal whitespace, and "none or too much" of it, around a return arrow
_SPACE = r'[ \f\r\t]'
_BAD_SPACE = r'(?:' + _SPACE + r'{0}|' + _SPACE + r'{2,})'
_RETURN_ARROW_SHAPES = [
    _BAD_SPACE + r'->' + _SPACE + r'*',
    _SPACE + r'->' + _BAD_SPACE,
    r'\n' + _SPACE + r'*->' + _BAD_SPACE,
    _BAD_SPACE + r'->\n' + _SPACE + r'*',
]


PATTERN_RULES: List[PatternRule] = [
    PatternRule(
        rule_id=RuleId.CLOSING_BRACE_SPACING,
        patterns=(re.compile(r'\}[ \t]+\)'),),
        severity=Severity.WARNING,
        message='Closing brace with closing parenthesis should not have any whitespace in the middle.',
    ),
    PatternRule(
        rule_id=RuleId.COLON_SPACING,
        patterns=(re.compile(r'(\w)(?:\s+:\s*|:)([\[(]*\S)'),),
        severity=Severity.WARNING,
        message=('Colons should be next to the identifier when specifying a type '
                 'and the type should not be immediately next to the colon.'),
    ),
    PatternRule(
        rule_id=RuleId.COMMA_SPACING,
        # A comma ending a line is fine; one followed by 0 or 2+ spaces is not
        patterns=(re.compile(r'\S(\s+,\s*|,(?:[ \t]{2,})?)(\S)'),),
        severity=Severity.WARNING,
        message='There should be no space before and one after any comma.',
    ),
    PatternRule(
        rule_id=RuleId.CONDITIONAL_RETURN_NEWLINE,
        patterns=(re.compile(r'\b(?:guard|if)\b[^\n]*\breturn\b[^\n]*'),),
        severity=Severity.WARNING,
        message='Conditional statements should always return on the next line.',
    ),
    PatternRule(
        rule_id=RuleId.CONTROL_STATEMENT_PARENS,
        patterns=(
            re.compile(r'\bguard\s*\([^,{]*\)\s*else\s*\{'),
            re.compile(r'\bif\s*\([^,{]*\)\s*\{'),
            re.compile(r'\bfor\s*\([^,{]*\)\s*\{'),
            re.compile(r'\bswitch\s*\([^,{]*\)\s*\{'),
            re.compile(r'\bwhile\s*\([^,{]*\)\s*\{'),
        ),
        severity=Severity.WARNING,
        message='Conditional statements should not wrap their conditionals in parentheses.',
    ),
    PatternRule(
        rule_id=RuleId.EMPTY_COUNT_COMPARISON,
        patterns=(re.compile(r'\.count\s*(?:==|!=|<=|>=|<|>)\s*0\b'),),
        severity=Severity.ERROR,
        message="Prefer checking 'isEmpty' over comparing 'count' to zero.",
    ),
    PatternRule(
        rule_id=RuleId.FORCE_CAST,
        patterns=(re.compile(r'\bas!'),),
        severity=Severity.ERROR,
        message='Force casts should be avoided.',
    ),
    PatternRule(
        rule_id=RuleId.FORCE_TRY,
        patterns=(re.compile(r'\btry!'),),
        severity=Severity.ERROR,
        message='Force tries should be avoided.',
    ),
    PatternRule(
        rule_id=RuleId.LEADING_WHITESPACE,
        patterns=(re.compile(r'\A\s+'),),
        severity=Severity.WARNING,
        message='Files should not contain leading whitespace.',
    ),
    PatternRule(
        rule_id=RuleId.LEGACY_GEOMETRY_FUNCTIONS,
        patterns=(re.compile(r'\b(?:' + '|'.join(LEGACY_GEOMETRY_FUNCTIONS) + r')\b'),),
        severity=Severity.WARNING,
        message='Struct extension properties and methods are preferred over legacy functions.',
    ),
    PatternRule(
        rule_id=RuleId.OPENING_BRACE_STYLE,
        patterns=(re.compile(r'(?:[^( ]|[\s(]\s+)\{'),),
        # A conditional whose header continues onto following lines may open
        # its body on a line of its own
        exceptions=(re.compile(r'\b(?:if|guard|while)\b[^\n{]*\n[^{]+?\s\{'),),
        severity=Severity.WARNING,
        message='Opening braces should be preceded by a single space and on the same line as the declaration.',
    ),
    PatternRule(
        rule_id=RuleId.REDUNDANT_NIL_COALESCING,
        patterns=(re.compile(r'\?\?\s*nil\b'),),
        severity=Severity.WARNING,
        message=('nil coalescing operator is only evaluated if the left hand side is nil; '
                 'coalescing operator with nil as right hand side is redundant.'),
    ),
    PatternRule(
        rule_id=RuleId.RETURN_ARROW_SPACING,
        patterns=(re.compile(r'\)(?:' + '|'.join(_RETURN_ARROW_SHAPES) + r')\S+'),),
        severity=Severity.WARNING,
        message='Return arrow and return type should be separated by a single space or on a separate line.',
    ),
    PatternRule(
        rule_id=RuleId.TRAILING_NEWLINE,
        patterns=(re.compile(r'[^\n]+\Z|\n{2,}\Z'),),
        severity=Severity.WARNING,
        message='Files should have a single trailing newline.',
    ),
    PatternRule(
        rule_id=RuleId.TRAILING_SEMICOLON,
        patterns=(re.compile(r';(?=\r?\n|\Z)'),),
        severity=Severity.WARNING,
        message='Lines should not end with a trailing semicolon.',
    ),
    PatternRule(
        rule_id=RuleId.TRAILING_WHITESPACE,
        patterns=(re.compile(r'[^\S\r\n]+(?=\r?\n|\Z)'),),
        severity=Severity.WARNING,
        message='Lines should not end with trailing whitespace.',
    ),
    PatternRule(
        rule_id=RuleId.EXCESS_VERTICAL_WHITESPACE,
        patterns=(re.compile(r'\n(?:[^\S\n]*\n){2,}'),),
        severity=Severity.WARNING,
        message='Vertical whitespace should not be longer than one line.',
    ),
]


class PatternRuleChecker:
    """Evaluates pattern rules against raw text."""

    def __init__(self, rules: List[PatternRule] = None):
        self.rules = rules if rules is not None else PATTERN_RULES

    def exception_ranges(self, text: str, rule: PatternRule) -> List[Tuple[int, int]]:
        """Collect the [start, end) ranges matched by a rule's exception patterns."""
        ranges = []
        for exception in rule.exceptions:
            for match in exception.finditer(text):
                ranges.append((match.start(), match.end()))
        return ranges

    def check_rule(self, text: str, rule: PatternRule) -> List[RawFinding]:
        """Run one rule's patterns, in order, dropping matches inside exception ranges."""
        findings = []
        ranges = self.exception_ranges(text, rule)

        for pattern in rule.patterns:
            for match in pattern.finditer(text):
                if _in_ranges(match.start(), ranges):
                    continue
                findings.append(RawFinding(
                    matched_text=match.group(0),
                    start_offset=match.start(),
                    severity=rule.severity,
                    message=rule.message,
                    rule_id=rule.rule_id,
                ))

        return findings


def _in_ranges(offset: int, ranges: List[Tuple[int, int]]) -> bool:
    return any(start <= offset < end for start, end in ranges)
