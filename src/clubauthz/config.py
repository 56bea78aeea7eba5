"""Engine configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import ValidationError, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clubauthz.core.constants import ENV_PREFIX, VALID_ENVIRONMENTS, VALID_LOG_LEVELS
from clubauthz.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Settings loaded from ``CLUBAUTHZ_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Audit
    audit_decisions: bool = True
    audit_allowed: bool = False  # also record granted decisions, not only denials

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return level

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        env = v.lower()
        if env not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {', '.join(VALID_ENVIRONMENTS)}, got {v!r}"
            )
        return env

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid clubauthz settings",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
