"""
deplint Configuration

Can be configured via:
- Environment variables (prefixed with DEPLINT_)
- Direct instantiation

Examples:
    # Environment variable
    DEPLINT_RULE__LEVEL=error
    DEPLINT_LOGGING__FORMAT=json

    # Direct
    config = DepLintConfig(rule=RuleConfig(level="info"))
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from deplint.diagnostics import DiagnosticLevel
from deplint.errors import ConfigurationError

DEFAULT_DOC_URI_BASE = "https://aka.ms/bicep/linter"


class RuleConfig(BaseModel):
    """Per-rule settings."""

    level: DiagnosticLevel = Field(DiagnosticLevel.WARNING, description="off | info | warning | error")
    doc_uri_base: str = Field(DEFAULT_DOC_URI_BASE, description="Prefix of rule documentation links")

    model_config = {"frozen": True}

    @classmethod
    def from_level(cls, level: str, **overrides: str) -> "RuleConfig":
        """Build a RuleConfig from a raw level string.

        Raises:
            ConfigurationError: Unknown level or invalid override
        """
        try:
            return cls(level=level, **overrides)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid rule configuration: level={level!r}",
                level=level,
                errors=e.errors(),
            ) from e


class LoggingConfig(BaseModel):
    """Logging settings (see deplint.logging.setup_logging)."""

    level: str = "INFO"
    format: Literal["json", "console"] = "console"


class DepLintConfig(BaseSettings):
    """Root configuration for deplint."""

    rule: RuleConfig = Field(default_factory=RuleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="DEPLINT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_config() -> DepLintConfig:
    """
    Get the global configuration instance.

    The configuration is cached. To reload, call get_config.cache_clear() first.

    Raises:
        ConfigurationError: Environment holds invalid values
    """
    try:
        return DepLintConfig()
    except ValidationError as e:
        raise ConfigurationError("Invalid DEPLINT_* environment configuration", errors=e.errors()) from e
