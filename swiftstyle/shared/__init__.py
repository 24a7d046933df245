#!/usr/bin/env python3
"""
Shared utilities for Swift source analysis.

This module provides the structural extraction and position mapping used by
every rule family: function/type recovery, parameter and binding
extraction, and offset to line/column resolution.
"""

from .positions import PositionIndex
from .swift_parser import SwiftParser

__all__ = [
    "PositionIndex",
    "SwiftParser",
]
