"""
Configuration Tests
"""

import pytest

from deplint.config import DEFAULT_DOC_URI_BASE, DepLintConfig, RuleConfig, get_config
from deplint.diagnostics import DiagnosticLevel
from deplint.errors import ConfigurationError


@pytest.fixture
def clean_config(monkeypatch):
    """Isolate get_config() from the caller's environment."""
    for name in ("DEPLINT_RULE__LEVEL", "DEPLINT_RULE__DOC_URI_BASE", "DEPLINT_LOGGING__FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()


class TestRuleConfig:
    def test_defaults(self):
        config = RuleConfig()

        assert config.level == DiagnosticLevel.WARNING
        assert config.doc_uri_base == DEFAULT_DOC_URI_BASE

    @pytest.mark.parametrize("level", ["off", "info", "warning", "error"])
    def test_from_level(self, level):
        assert RuleConfig.from_level(level).level == DiagnosticLevel(level)

    def test_unknown_level_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RuleConfig.from_level("loud")

        assert exc_info.value.code == "CONFIGURATION_ERROR"
        assert exc_info.value.context["level"] == "loud"

    def test_frozen(self):
        config = RuleConfig()

        with pytest.raises(Exception):
            config.level = DiagnosticLevel.ERROR


class TestDepLintConfig:
    def test_defaults(self, clean_config):
        config = get_config()

        assert config.rule.level == DiagnosticLevel.WARNING
        assert config.logging.format == "console"

    def test_cached(self, clean_config):
        assert get_config() is get_config()

    def test_env_override(self, clean_config):
        clean_config.setenv("DEPLINT_RULE__LEVEL", "error")
        clean_config.setenv("DEPLINT_LOGGING__FORMAT", "json")

        config = get_config()

        assert config.rule.level == DiagnosticLevel.ERROR
        assert config.logging.format == "json"

    def test_invalid_env_raises(self, clean_config):
        clean_config.setenv("DEPLINT_RULE__LEVEL", "loud")

        with pytest.raises(ConfigurationError):
            get_config()

    def test_direct_instantiation(self):
        config = DepLintConfig(rule=RuleConfig(level="info"))

        assert config.rule.level == DiagnosticLevel.INFO
