"""Tests for reporter configuration."""

from boostsec.report_normalizer.models.config import ReporterConfig


def test_reporter_config_defaults() -> None:
    """ReporterConfig defaults to unified diffs with logging enabled."""
    config = ReporterConfig()

    assert config.quiet is False
    assert config.use_inline_diffs is False


def test_reporter_config_from_dict() -> None:
    """ReporterConfig accepts its options from a mapping."""
    config = ReporterConfig.model_validate({"quiet": True, "use_inline_diffs": True})

    assert config.quiet is True
    assert config.use_inline_diffs is True
