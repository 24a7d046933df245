"""Shared fixtures for swiftstyle tests."""

import pytest

from swiftstyle import analyze


@pytest.fixture
def lint():
    """Lint text, optionally keeping only one rule's diagnostics."""
    def _lint(text, rule_id=None, config=None):
        diagnostics = analyze(text, config)
        if rule_id is None:
            return diagnostics
        return [d for d in diagnostics if d.rule_id == rule_id]
    return _lint
