"""Swift style rules."""

from .pattern_rules import PATTERN_RULES, PatternRule, PatternRuleChecker
from .function_rules import FunctionRule, FunctionRuleChecker
from .type_rules import TypeRule, TypeRuleChecker

__all__ = [
    "PATTERN_RULES",
    "PatternRule",
    "PatternRuleChecker",
    "FunctionRule",
    "FunctionRuleChecker",
    "TypeRule",
    "TypeRuleChecker",
]
