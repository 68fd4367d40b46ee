"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from confessional.domain.confessions.errors import StartupConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        database_url: SQLAlchemy connection URL. Required.
        connection_pool_size: Number of pooled database connections. Required.
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_sql: Log SQL statements and connection-pool activity.
        pool_timeout: Seconds to wait for a free pooled connection.
        static_root: Directory served for non-API GET requests.
        host: Interface the server binds to.
        port: Port the server listens on.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    database_url: str
    connection_pool_size: int = Field(..., ge=1)

    project_name: str = "Confessional"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_sql: bool = False
    pool_timeout: float = Field(30.0, gt=0)
    static_root: Path = Path("site")
    host: str = "127.0.0.1"
    port: int = 8000


def _describe(exc: ValidationError) -> list[str]:
    """Turn pydantic validation errors into one message per variable."""
    problems = []
    for error in exc.errors():
        variable = str(error["loc"][0]).upper() if error["loc"] else "SETTINGS"
        if error["type"] == "missing":
            problems.append(f"{variable} is not set in the environment")
        else:
            problems.append(
                f"{variable} is set but could not be parsed: {error['msg']}"
            )
    return problems


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Load settings from the environment, failing fast on bad configuration.

    Args:
        env_file: Optional dotenv file to read in addition to the environment.

    Returns:
        The validated settings.

    Raises:
        StartupConfigError: If a required variable is missing or unparsable.
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as exc:
        raise StartupConfigError(_describe(exc)) from exc
