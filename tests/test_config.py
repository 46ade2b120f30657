"""
Tests for host configuration.
"""

import pytest
from pydantic import ValidationError

from lox.config import LoxConfig


class TestDefaults:
    def test_defaults(self):
        config = LoxConfig()
        assert config.number_precision == 6
        assert config.prompt == "> "
        assert config.log_level == "WARNING"


class TestFromEnv:
    """Settings come from LOX_* variables."""

    def test_empty_environment(self):
        assert LoxConfig.from_env({}) == LoxConfig()

    def test_reads_variables(self):
        config = LoxConfig.from_env({
            "LOX_NUMBER_PRECISION": "2",
            "LOX_PROMPT": "lox> ",
            "LOX_LOG_LEVEL": "debug",
        })
        assert config.number_precision == 2
        assert config.prompt == "lox> "
        assert config.log_level == "DEBUG"

    def test_ignores_unrelated_variables(self):
        assert LoxConfig.from_env({"PROMPT": "x"}).prompt == "> "

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("LOX_NUMBER_PRECISION", "3")
        assert LoxConfig.from_env().number_precision == 3


class TestValidation:
    @pytest.mark.parametrize("precision", ["-1", "18", "many"])
    def test_bad_precision(self, precision):
        with pytest.raises(ValidationError):
            LoxConfig.from_env({"LOX_NUMBER_PRECISION": precision})

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            LoxConfig(log_level="LOUD")
