"""Utility modules for Swift style linting."""

from .config_loader import ConfigLoader, LintConfig, parse_exception_line
from .file_utils import find_swift_files, get_file_content

__all__ = [
    "ConfigLoader",
    "LintConfig",
    "parse_exception_line",
    "find_swift_files",
    "get_file_content",
]
