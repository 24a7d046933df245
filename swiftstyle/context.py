#!/usr/bin/env python3
"""
Per-call analysis context.

Everything one analysis pass needs is built here, fresh for every call,
and threaded explicitly through every rule family.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .models import Binding, FunctionDeclaration, RuleId, RuleThreshold, TypeDeclaration
from .shared import PositionIndex, SwiftParser
from .utils.config_loader import LintConfig


@dataclass
class AnalysisContext:
    """Text, extracted structures and configuration for one analysis pass."""
    text: str
    positions: PositionIndex
    parser: SwiftParser
    config: LintConfig
    functions: List[FunctionDeclaration] = field(default_factory=list)
    types: List[TypeDeclaration] = field(default_factory=list)
    bindings: List[Binding] = field(default_factory=list)

    @classmethod
    def build(cls, text: str, config: Optional[LintConfig] = None,
              parser: Optional[SwiftParser] = None) -> "AnalysisContext":
        """Index the text and extract its structures once."""
        parser = parser or SwiftParser()
        return cls(
            text=text,
            positions=PositionIndex(text),
            parser=parser,
            config=config or LintConfig(),
            functions=parser.extract_functions(text),
            types=parser.extract_types(text),
            bindings=parser.extract_bindings(text),
        )

    def threshold(self, rule_id: RuleId, default: RuleThreshold) -> RuleThreshold:
        """Configured limits for a rule, falling back to its defaults."""
        return self.config.thresholds.get(rule_id, default)
