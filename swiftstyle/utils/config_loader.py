#!/usr/bin/env python3
"""
Configuration for Swift style linting.

Handles the LintConfig options object and parsing of .swiftstyle-exceptions
files, which disable rules or override their limits.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set

from ..models import RuleId, RuleThreshold

logger = logging.getLogger(__name__)

EXCEPTIONS_FILE_NAME = ".swiftstyle-exceptions"
MIN_JUSTIFICATION_LENGTH = 10


@dataclass
class LintConfig:
    """Options for one analysis call. The default runs every rule."""
    disabled_rules: Set[RuleId] = field(default_factory=set)
    thresholds: Dict[RuleId, RuleThreshold] = field(default_factory=dict)
    justifications: Dict[RuleId, str] = field(default_factory=dict)

    def is_enabled(self, rule_id: RuleId) -> bool:
        return rule_id not in self.disabled_rules

    def merge(self, other: "LintConfig") -> None:
        """Layer another config over this one; the other config wins."""
        self.disabled_rules |= other.disabled_rules
        self.thresholds.update(other.thresholds)
        self.justifications.update(other.justifications)


class ConfigLoader:
    """Finds and loads .swiftstyle-exceptions files."""

    def __init__(self, project_root: Path):
        self.project_root = project_root
        self._loaded_files: List[str] = []

    def load_for(self, target_path: Path) -> LintConfig:
        """
        Load every exceptions file from the project root down to the target.

        Files closer to the target override settings from files further up.
        """
        current_path = target_path.resolve()
        if current_path.is_file():
            current_path = current_path.parent
        project_root_resolved = self.project_root.resolve()

        found: List[Path] = []
        max_depth = 20
        depth = 0
        while depth < max_depth:
            exception_file = current_path / EXCEPTIONS_FILE_NAME
            if exception_file.exists():
                found.append(exception_file)

            if current_path == project_root_resolved or current_path == current_path.parent:
                break
            current_path = current_path.parent
            depth += 1

        config = LintConfig()
        for exception_file in reversed(found):
            config.merge(self.load_file(exception_file))
        return config

    def load_file(self, exception_file: Path) -> LintConfig:
        """Parse one exceptions file. Bad lines are logged and skipped."""
        config = LintConfig()
        try:
            with open(exception_file, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", exception_file, e)
            return config

        self._loaded_files.append(str(exception_file))

        for line_num, line in enumerate(content.splitlines(), 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue

            try:
                rule_id, setting, justification = parse_exception_line(line)
            except ValueError as e:
                logger.warning("Error parsing %s:%d: %s", exception_file, line_num, e)
                continue

            if len(justification) < MIN_JUSTIFICATION_LENGTH:
                logger.warning("Insufficient justification for %s in %s:%d",
                               rule_id.value, exception_file, line_num)

            if setting is None:
                config.disabled_rules.add(rule_id)
            else:
                config.thresholds[rule_id] = setting
            config.justifications[rule_id] = justification

        return config

    def get_loaded_files(self) -> List[str]:
        return list(self._loaded_files)


def parse_exception_line(line: str):
    """
    Parse `rule_id: off|WARN[/ERROR] # justification`.

    Returns (rule_id, threshold_or_None, justification); None means the
    rule is disabled.
    """
    if ':' not in line:
        raise ValueError("Missing ':' separator")

    rule_part, rest = line.split(':', 1)
    justification = ""
    if '#' in rest:
        rest, justification = rest.split('#', 1)
    else:
        logger.warning("Missing justification: %s", line)

    rule_name = rule_part.strip()
    setting = rest.strip()
    justification = justification.strip()

    try:
        rule_id = RuleId(rule_name)
    except ValueError:
        raise ValueError(f"Unknown rule: {rule_name}")

    if setting.lower() == 'off':
        return rule_id, None, justification

    return rule_id, _parse_threshold(setting), justification


def _parse_threshold(setting: str) -> RuleThreshold:
    """Parse `WARN` or `WARN/ERROR` into a RuleThreshold."""
    parts = setting.split('/')
    if len(parts) > 2:
        raise ValueError(f"Invalid threshold value: {setting}")

    try:
        values = [int(part.strip()) for part in parts]
    except ValueError:
        raise ValueError(f"Invalid threshold value: {setting}")

    if any(value < 0 for value in values):
        raise ValueError(f"Threshold must not be negative: {setting}")

    warning = values[0]
    error: Optional[int] = values[1] if len(values) == 2 else None
    if error is not None and error < warning:
        raise ValueError(f"Error limit below warning limit: {setting}")

    return RuleThreshold(warning=warning, error=error)
