import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class CustomSettings(BaseSettings):
    """Application settings loaded from environment variables.

    Validates configuration at startup to catch misconfiguration early.
    """

    base_url: str = "http://www.setasia.tv"
    request_method: str = "POST"  # The schedule site has always been queried with POST
    request_timeout_sec: float = 30.0
    user_agent: str = "sony-schedules/0.1.0"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Validate base URL is HTTP/HTTPS and drop any trailing slash."""
        value = value.strip()
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError(f"base_url must be HTTP/HTTPS: {value}")
        return value.rstrip("/")

    @field_validator("request_method")
    @classmethod
    def validate_request_method(cls, value: str) -> str:
        """Validate HTTP method used for the schedule request."""
        normalized = value.upper()
        allowed = {"GET", "POST"}
        if normalized not in allowed:
            raise ValueError(f"request_method must be one of {sorted(allowed)}")
        return normalized

    @field_validator("request_timeout_sec")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Validate HTTP timeout (seconds)."""
        if value <= 0:
            raise ValueError("request_timeout_sec must be > 0")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level name."""
        normalized = value.upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.info("Configuration loaded:")
        logger.info("  Base URL: %s", self.base_url)
        logger.info("  Request Method: %s", self.request_method)
        logger.info("  Request Timeout: %ss", self.request_timeout_sec)
        logger.info("  Log Level: %s", self.log_level)


settings = CustomSettings()


def setup_logging() -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
