"""Tests for onerepmax.config module."""
import pytest

from onerepmax.config import CalculatorConfig, calculator_config, log_file, log_level


class TestCalculatorConfig:
    """Environment-driven calculator defaults."""

    def test_defaults(self, clean_env):
        assert calculator_config() == CalculatorConfig(
            decimals=2, max_reps=12, default_weight=100.0, default_reps=5
        )

    def test_overrides(self, clean_env):
        clean_env.setenv("ONEREPMAX_DECIMALS", "1")
        clean_env.setenv("ONEREPMAX_MAX_REPS", "20")
        clean_env.setenv("ONEREPMAX_DEFAULT_WEIGHT", "82,5")
        clean_env.setenv("ONEREPMAX_DEFAULT_REPS", "8")
        cfg = calculator_config()
        assert cfg.decimals == 1
        assert cfg.max_reps == 20
        assert cfg.default_weight == 82.5
        assert cfg.default_reps == 8

    def test_blank_value_uses_default(self, clean_env):
        clean_env.setenv("ONEREPMAX_DECIMALS", "  ")
        assert calculator_config().decimals == 2

    def test_malformed_value_names_variable(self, clean_env):
        clean_env.setenv("ONEREPMAX_MAX_REPS", "lots")
        with pytest.raises(ValueError, match="ONEREPMAX_MAX_REPS"):
            calculator_config()


class TestLogSettings:
    """Log level and file from the environment."""

    def test_defaults(self, clean_env):
        assert log_level() == "INFO"
        assert log_file() is None

    def test_overrides(self, clean_env, tmp_path):
        path = str(tmp_path / "onerepmax.log")
        clean_env.setenv("ONEREPMAX_LOG_LEVEL", "DEBUG")
        clean_env.setenv("ONEREPMAX_LOG_FILE", path)
        assert log_level() == "DEBUG"
        assert log_file() == path

    def test_level_is_case_insensitive(self, clean_env):
        clean_env.setenv("ONEREPMAX_LOG_LEVEL", " warning ")
        assert log_level() == "WARNING"

    def test_unknown_level_names_variable(self, clean_env):
        clean_env.setenv("ONEREPMAX_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="ONEREPMAX_LOG_LEVEL"):
            log_level()
