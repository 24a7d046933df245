"""Swift style linting package."""

from .checker import SwiftStyleChecker, analyze
from .models import Diagnostic, LintResults, Position, RawFinding, RuleId, Severity
from .utils.config_loader import LintConfig

__all__ = [
    "analyze",
    "SwiftStyleChecker",
    "Diagnostic",
    "LintConfig",
    "LintResults",
    "Position",
    "RawFinding",
    "RuleId",
    "Severity",
]
