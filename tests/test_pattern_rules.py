"""
Tests for pattern-based rules.

Each rule is exercised with one violating and one clean sample.
"""

import re

import pytest

from swiftstyle.models import RuleId, Severity
from swiftstyle.rules import PATTERN_RULES, PatternRule, PatternRuleChecker


def _rule(rule_id):
    return next(rule for rule in PATTERN_RULES if rule.rule_id == rule_id)


def _matches(rule_id, text):
    return [f.matched_text for f in PatternRuleChecker().check_rule(text, _rule(rule_id))]


class TestPatternCatalog:
    """Test suite for the rule catalog itself."""

    def test_catalog_order(self):
        """Rules are evaluated in a fixed order."""
        assert [rule.rule_id for rule in PATTERN_RULES] == [
            RuleId.CLOSING_BRACE_SPACING,
            RuleId.COLON_SPACING,
            RuleId.COMMA_SPACING,
            RuleId.CONDITIONAL_RETURN_NEWLINE,
            RuleId.CONTROL_STATEMENT_PARENS,
            RuleId.EMPTY_COUNT_COMPARISON,
            RuleId.FORCE_CAST,
            RuleId.FORCE_TRY,
            RuleId.LEADING_WHITESPACE,
            RuleId.LEGACY_GEOMETRY_FUNCTIONS,
            RuleId.OPENING_BRACE_STYLE,
            RuleId.REDUNDANT_NIL_COALESCING,
            RuleId.RETURN_ARROW_SPACING,
            RuleId.TRAILING_NEWLINE,
            RuleId.TRAILING_SEMICOLON,
            RuleId.TRAILING_WHITESPACE,
            RuleId.EXCESS_VERTICAL_WHITESPACE,
        ]

    def test_error_severities(self):
        """Only the forced operators and count comparison are errors."""
        errors = {rule.rule_id for rule in PATTERN_RULES if rule.severity == Severity.ERROR}
        assert errors == {RuleId.EMPTY_COUNT_COMPARISON, RuleId.FORCE_CAST, RuleId.FORCE_TRY}


class TestPatternRules:
    """Test suite for individual pattern rules."""

    @pytest.mark.parametrize("rule_id, text, expected", [
        (RuleId.CLOSING_BRACE_SPACING, "run({ work() } )", ["} )"]),
        (RuleId.CLOSING_BRACE_SPACING, "run({ work() })", []),
        (RuleId.COLON_SPACING, "let value:Int = 1", ["e:I"]),
        (RuleId.COLON_SPACING, "let value : Int = 1", ["e : I"]),
        (RuleId.COLON_SPACING, "let value: Int = 1", []),
        (RuleId.COMMA_SPACING, "run(first,second)", ["t,s"]),
        (RuleId.COMMA_SPACING, "run(first ,second)", ["t ,s"]),
        (RuleId.COMMA_SPACING, "run(first,  second)", ["t,  s"]),
        (RuleId.COMMA_SPACING, "run(first, second)", []),
        (RuleId.COMMA_SPACING, "run(first,\n    second)", []),
        (RuleId.CONDITIONAL_RETURN_NEWLINE, "if done { return }", ["if done { return }"]),
        (RuleId.CONDITIONAL_RETURN_NEWLINE, "guard ready else { return }", ["guard ready else { return }"]),
        (RuleId.CONDITIONAL_RETURN_NEWLINE, "if done {\n    return\n}", []),
        (RuleId.CONTROL_STATEMENT_PARENS, "if (done) {", ["if (done) {"]),
        (RuleId.CONTROL_STATEMENT_PARENS, "guard (ready) else {", ["guard (ready) else {"]),
        (RuleId.CONTROL_STATEMENT_PARENS, "while (running) {", ["while (running) {"]),
        (RuleId.CONTROL_STATEMENT_PARENS, "if done {", []),
        (RuleId.EMPTY_COUNT_COMPARISON, "if items.count == 0 {", [".count == 0"]),
        (RuleId.EMPTY_COUNT_COMPARISON, "if items.count <= 0 {", [".count <= 0"]),
        (RuleId.EMPTY_COUNT_COMPARISON, "if items.count == 10 {", []),
        (RuleId.FORCE_CAST, "let view = item as! View", ["as!"]),
        (RuleId.FORCE_CAST, "let view = item as? View", []),
        (RuleId.FORCE_TRY, "let data = try! load()", ["try!"]),
        (RuleId.FORCE_TRY, "let data = try load()", []),
        (RuleId.LEADING_WHITESPACE, "\n  let value = 1", ["\n  "]),
        (RuleId.LEADING_WHITESPACE, "let value = 1\n  ", []),
        (RuleId.LEGACY_GEOMETRY_FUNCTIONS, "let width = NSWidth(frame)", ["NSWidth"]),
        (RuleId.LEGACY_GEOMETRY_FUNCTIONS, "let width = NSWidthValue", []),
        (RuleId.OPENING_BRACE_STYLE, "func run(){\n}", "){"),
        (RuleId.OPENING_BRACE_STYLE, "func run()  {\n}", "  {"),
        (RuleId.OPENING_BRACE_STYLE, "func run()\n{\n}", "\n{"),
        (RuleId.OPENING_BRACE_STYLE, "func run() {\n}", []),
        (RuleId.REDUNDANT_NIL_COALESCING, "let name = value ?? nil", ["?? nil"]),
        (RuleId.REDUNDANT_NIL_COALESCING, "let name = value ?? nilName", []),
        (RuleId.RETURN_ARROW_SPACING, "func run()->Int {", [")->Int"]),
        (RuleId.RETURN_ARROW_SPACING, "func run() ->  Int {", [") ->  Int"]),
        (RuleId.RETURN_ARROW_SPACING, "func run() -> Int {", []),
        (RuleId.RETURN_ARROW_SPACING, "func run()\n    -> Int {", []),
        (RuleId.TRAILING_NEWLINE, "let value = 1", ["let value = 1"]),
        (RuleId.TRAILING_NEWLINE, "let value = 1\n\n", ["\n\n"]),
        (RuleId.TRAILING_NEWLINE, "let value = 1\n", []),
        (RuleId.TRAILING_SEMICOLON, "let value = 1;\n", [";"]),
        (RuleId.TRAILING_SEMICOLON, "let value = 1;", [";"]),
        (RuleId.TRAILING_SEMICOLON, "let value = 1; let other = 2\n", []),
        (RuleId.TRAILING_WHITESPACE, "let value = 1  \nlet other = 2\n", ["  "]),
        (RuleId.TRAILING_WHITESPACE, "let value = 1\r\n", []),
        (RuleId.EXCESS_VERTICAL_WHITESPACE, "let value = 1\n\n\nlet other = 2\n", ["\n\n\n"]),
        (RuleId.EXCESS_VERTICAL_WHITESPACE, "let value = 1\n\nlet other = 2\n", []),
    ])
    def test_rule(self, rule_id, text, expected):
        """Each rule flags exactly the violating spans."""
        if isinstance(expected, str):
            expected = [expected]
        assert _matches(rule_id, text) == expected


class TestExceptionRanges:
    """Test suite for exception-based suppression."""

    def test_multiline_conditional_header_is_allowed(self):
        """A brace on its own line after a multi-line condition is not flagged."""
        text = "if first &&\n    second\n{\n    run()\n}\n"
        assert _matches(RuleId.OPENING_BRACE_STYLE, text) == []

    def test_single_line_conditional_is_flagged(self):
        """Without a matching exception range the brace is flagged."""
        assert _matches(RuleId.OPENING_BRACE_STYLE, "if (x){\n}\n") == ["){"]

    def test_findings_inside_range_are_dropped(self):
        """Only matches that start inside an exception range are suppressed."""
        rule = PatternRule(
            rule_id=RuleId.FORCE_CAST,
            patterns=(re.compile(r'x'),),
            exceptions=(re.compile(r'ax'),),
            severity=Severity.WARNING,
            message='x',
        )
        findings = PatternRuleChecker([rule]).check_rule("ax x", rule)
        assert [f.start_offset for f in findings] == [3]

    def test_range_end_is_exclusive(self):
        """A match starting right at the end of a range is kept."""
        rule = PatternRule(
            rule_id=RuleId.FORCE_CAST,
            patterns=(re.compile(r'b'),),
            exceptions=(re.compile(r'a'),),
            severity=Severity.WARNING,
            message='b',
        )
        findings = PatternRuleChecker([rule]).check_rule("ab", rule)
        assert [f.start_offset for f in findings] == [1]
