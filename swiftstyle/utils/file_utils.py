#!/usr/bin/env python3
"""
File utility functions for Swift style linting.

Handles Swift file discovery and reading for the command-line front end.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

SWIFT_SUFFIX = ".swift"
SKIPPED_DIRECTORIES = {".build", ".git", "Pods", "Carthage", "DerivedData"}


def get_file_content(file_path: Path) -> Optional[str]:
    """Get file content, or None if the file cannot be read as UTF-8."""
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (UnicodeDecodeError, OSError) as e:
        logger.warning("Skipping unreadable file %s: %s", file_path, e)
        return None


def is_skipped_path(file_path: Path) -> bool:
    """Check if a path lies inside a build or dependency directory."""
    return any(part in SKIPPED_DIRECTORIES for part in file_path.parts)


def find_swift_files(paths: Iterable[Path]) -> List[Path]:
    """Expand files and directories into a sorted, de-duplicated list of Swift files."""
    files = set()

    for path in paths:
        if path.is_file():
            files.add(path)
        elif path.is_dir():
            for swift_file in path.rglob(f"*{SWIFT_SUFFIX}"):
                if not is_skipped_path(swift_file.relative_to(path)):
                    files.add(swift_file)
        else:
            logger.warning("Path does not exist: %s", path)

    return sorted(files)
