"""
Tests for .swiftstyle-exceptions parsing and discovery.
"""

import logging

import pytest

from swiftstyle.models import RuleId, RuleThreshold
from swiftstyle.utils.config_loader import ConfigLoader, LintConfig, parse_exception_line


class TestParseExceptionLine:
    """Test suite for single exception lines."""

    def test_disable_rule(self):
        rule_id, setting, justification = parse_exception_line(
            "force_cast: off # Generated bindings cast from Any")
        assert rule_id == RuleId.FORCE_CAST
        assert setting is None
        assert justification == "Generated bindings cast from Any"

    def test_warning_and_error_limits(self):
        rule_id, setting, _ = parse_exception_line(
            "cyclomatic_complexity: 15/25 # Parser state machine")
        assert rule_id == RuleId.CYCLOMATIC_COMPLEXITY
        assert setting == RuleThreshold(warning=15, error=25)

    def test_warning_limit_only(self):
        _, setting, _ = parse_exception_line("function_nesting: 8 # Deep builders")
        assert setting == RuleThreshold(warning=8)

    def test_missing_justification_is_allowed(self, caplog):
        """A line without a justification still parses, with a warning."""
        with caplog.at_level(logging.WARNING):
            rule_id, setting, justification = parse_exception_line("force_try: off")
        assert rule_id == RuleId.FORCE_TRY
        assert setting is None
        assert justification == ""
        assert "Missing justification" in caplog.text

    @pytest.mark.parametrize("line", [
        "no separator here",
        "not_a_rule: off # whatever reason",
        "line_length: many # not a number",
        "line_length: 1/2/3 # too many parts",
        "line_length: -1 # negative",
        "line_length: 200/100 # error below warning",
    ])
    def test_invalid_lines(self, line):
        with pytest.raises(ValueError):
            parse_exception_line(line)


class TestConfigLoader:
    """Test suite for exceptions file discovery."""

    def test_nested_file_overrides_root(self, tmp_path):
        """Files closer to the target win over files further up."""
        (tmp_path / ".swiftstyle-exceptions").write_text(
            "line_length: 120/220 # Wide generated tables\n"
            "force_cast: off # Legacy Objective-C bridge\n"
        )
        module_dir = tmp_path / "Sources" / "Module"
        module_dir.mkdir(parents=True)
        (module_dir / ".swiftstyle-exceptions").write_text(
            "line_length: 150 # Long localized strings\n"
        )
        source = module_dir / "View.swift"
        source.write_text("let value = 1\n")

        loader = ConfigLoader(tmp_path)
        config = loader.load_for(source)

        assert config.thresholds[RuleId.LINE_LENGTH] == RuleThreshold(warning=150)
        assert RuleId.FORCE_CAST in config.disabled_rules
        assert len(loader.get_loaded_files()) == 2

    def test_no_files_gives_default_config(self, tmp_path):
        source = tmp_path / "main.swift"
        source.write_text("let value = 1\n")
        assert ConfigLoader(tmp_path).load_for(source) == LintConfig()

    def test_bad_lines_are_skipped(self, tmp_path, caplog):
        exception_file = tmp_path / ".swiftstyle-exceptions"
        exception_file.write_text(
            "# comment line\n"
            "\n"
            "unknown_rule: off # this rule does not exist\n"
            "force_try: off # Test fixtures only\n"
        )

        with caplog.at_level(logging.WARNING):
            config = ConfigLoader(tmp_path).load_file(exception_file)

        assert config.disabled_rules == {RuleId.FORCE_TRY}
        assert "unknown_rule" in caplog.text

    def test_short_justification_is_logged(self, tmp_path, caplog):
        exception_file = tmp_path / ".swiftstyle-exceptions"
        exception_file.write_text("force_try: off # short\n")

        with caplog.at_level(logging.WARNING):
            config = ConfigLoader(tmp_path).load_file(exception_file)

        assert RuleId.FORCE_TRY in config.disabled_rules
        assert "Insufficient justification" in caplog.text


class TestLintConfig:
    """Test suite for LintConfig merging."""

    def test_merge_prefers_other(self):
        base = LintConfig(thresholds={RuleId.LINE_LENGTH: RuleThreshold(warning=120)})
        override = LintConfig(
            disabled_rules={RuleId.FORCE_CAST},
            thresholds={RuleId.LINE_LENGTH: RuleThreshold(warning=80, error=90)},
        )
        base.merge(override)
        assert base.thresholds[RuleId.LINE_LENGTH] == RuleThreshold(warning=80, error=90)
        assert base.is_enabled(RuleId.FORCE_CAST) is False
        assert base.is_enabled(RuleId.FORCE_TRY) is True
