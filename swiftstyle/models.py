#!/usr/bin/env python3
"""
Data models for Swift style linting.

Contains all data structures used throughout the linting system: rule
identifiers, raw findings, resolved diagnostics, recovered declarations
and bindings, and aggregated results for reporting.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Severity(Enum):
    """Diagnostic severity levels."""
    WARNING = "warning"
    ERROR = "error"


class RuleId(Enum):
    """Identifiers of every rule in the catalog."""
    # Pattern rules
    CLOSING_BRACE_SPACING = "closing_brace_spacing"
    COLON_SPACING = "colon_spacing"
    COMMA_SPACING = "comma_spacing"
    CONDITIONAL_RETURN_NEWLINE = "conditional_return_newline"
    CONTROL_STATEMENT_PARENS = "control_statement_parens"
    EMPTY_COUNT_COMPARISON = "empty_count_comparison"
    FORCE_CAST = "force_cast"
    FORCE_TRY = "force_try"
    LEADING_WHITESPACE = "leading_whitespace"
    LEGACY_GEOMETRY_FUNCTIONS = "legacy_geometry_functions"
    OPENING_BRACE_STYLE = "opening_brace_style"
    REDUNDANT_NIL_COALESCING = "redundant_nil_coalescing"
    RETURN_ARROW_SPACING = "return_arrow_spacing"
    TRAILING_NEWLINE = "trailing_newline"
    TRAILING_SEMICOLON = "trailing_semicolon"
    TRAILING_WHITESPACE = "trailing_whitespace"
    EXCESS_VERTICAL_WHITESPACE = "excess_vertical_whitespace"

    # Function rules
    CYCLOMATIC_COMPLEXITY = "cyclomatic_complexity"
    FUNCTION_BODY_LENGTH = "function_body_length"
    FUNCTION_PARAMETER_COUNT = "function_parameter_count"
    LINE_LENGTH = "line_length"
    FUNCTION_NESTING = "function_nesting"
    VARIABLE_NAME = "variable_name"

    # Type rules
    TYPE_NESTING = "type_nesting"
    TYPE_BODY_LENGTH = "type_body_length"
    TYPE_NAME = "type_name"


@dataclass(frozen=True)
class RuleThreshold:
    """Warning and optional error limits for a measured rule."""
    warning: int
    error: Optional[int] = None

    def severity_for(self, value: int) -> Optional[Severity]:
        """Return the severity for a measured value, or None within limits."""
        if value <= self.warning:
            return None
        if self.error is not None and value > self.error:
            return Severity.ERROR
        return Severity.WARNING


@dataclass(frozen=True)
class Position:
    """A 0-based line/column location in the analyzed text."""
    line: int
    column: int


@dataclass(frozen=True)
class RawFinding:
    """A rule violation located by byte offset, before position mapping."""
    matched_text: str
    start_offset: int
    severity: Severity
    message: str
    rule_id: RuleId

    @property
    def end_offset(self) -> int:
        return self.start_offset + len(self.matched_text)


@dataclass(frozen=True)
class Diagnostic:
    """A finding resolved to a half-open [start, end) position range."""
    severity: Severity
    message: str
    start: Position
    end: Position
    rule_id: RuleId

    def to_dict(self) -> Dict:
        """Convert diagnostic to dictionary for JSON serialization."""
        return {
            "rule": self.rule_id.value,
            "severity": self.severity.value,
            "message": self.message,
            "from": {"line": self.start.line, "column": self.start.column},
            "to": {"line": self.end.line, "column": self.end.column},
        }


@dataclass(frozen=True)
class FunctionDeclaration:
    """A function recovered by brace-depth scanning."""
    name: str
    start_offset: int
    body: str
    max_depth: int
    param_count: int = 0
    params: Optional[str] = None
    params_offset: Optional[int] = None
    kind: str = "func"


@dataclass(frozen=True)
class TypeDeclaration:
    """An enum, struct or class recovered by brace-depth scanning."""
    kind: str  # 'enum', 'struct' or 'class'
    name: str
    start_offset: int
    body: str
    max_depth: int


@dataclass(frozen=True)
class AliasDeclaration:
    """A typealias declaration (name only, no body)."""
    name: str
    start_offset: int
    text: str


@dataclass(frozen=True)
class Binding:
    """A named variable, constant or parameter."""
    name: str
    start_offset: int
    constant_eligible: bool = False


@dataclass
class FileResult:
    """Diagnostics produced for one linted file."""
    file_path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class LintResults:
    """Results of linting one or more files."""
    files: List[FileResult] = field(default_factory=list)
    execution_time: float = 0.0
    include_warnings: bool = False

    def add_file(self, file_result: FileResult) -> None:
        self.files.append(file_result)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for f in self.files for d in f.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for f in self.files for d in f.diagnostics if d.severity == Severity.WARNING]

    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return len(self.errors) > 0

    def visible_diagnostics(self, file_result: FileResult) -> List[Diagnostic]:
        """Diagnostics of a file, honouring the warning filter."""
        if self.include_warnings:
            return list(file_result.diagnostics)
        return [d for d in file_result.diagnostics if d.severity == Severity.ERROR]

    def get_summary_by_rule(self) -> Dict[str, int]:
        """Get count of visible issues by rule."""
        summary: Dict[str, int] = {}
        for file_result in self.files:
            for diagnostic in self.visible_diagnostics(file_result):
                rule = diagnostic.rule_id.value
                summary[rule] = summary.get(rule, 0) + 1
        return summary

    def get_summary_by_file(self) -> Dict[str, int]:
        """Get count of visible issues by file."""
        summary = {}
        for file_result in self.files:
            count = len(self.visible_diagnostics(file_result))
            if count:
                summary[file_result.file_path] = count
        return summary

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        return {
            "timestamp": None,  # Will be set by reporter
            "execution_time": self.execution_time,
            "summary": {
                "files_checked": len(self.files),
                "total_errors": len(self.errors),
                "total_warnings": len(self.warnings),
                "by_rule": self.get_summary_by_rule(),
                "by_file": self.get_summary_by_file(),
            },
            "diagnostics": [
                dict(diagnostic.to_dict(), file=file_result.file_path)
                for file_result in self.files
                for diagnostic in self.visible_diagnostics(file_result)
            ],
        }
