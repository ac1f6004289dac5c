"""Pydantic models for parsing the config.yaml configuration file.

These models mirror the structure of the ``config:`` section of config.yaml
and handle validation and type conversion of the YAML data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field
from sqlalchemy.engine import make_url


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    title: str = Field(default="Contact Form", description="Application title")
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=3000, description="Application port")

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log file format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class AccessLogConfig(BaseModel):
    """Append-only access log configuration."""

    enabled: bool = Field(default=True, description="Append one line per request")
    file: str = Field(default="access.log", description="Access log file path")


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./contacts.db",
        description="Database connection URL",
    )
    url_env_var: str | None = Field(
        default=None,
        description="Environment variable holding the full connection URL",
    )
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    create_tables: bool = Field(
        default=False, description="Create missing tables at startup"
    )

    @property
    def resolved_url(self) -> str:
        """The connection URL, read from ``url_env_var`` when one is configured."""
        if self.url_env_var:
            value = os.getenv(self.url_env_var)
            if not value:
                raise ValueError(f"Environment variable {self.url_env_var} not set")
            return value
        return self.url

    @property
    def password(self) -> str | None:
        """The database password from a secrets file or environment variable."""
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if not password:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return password
        return None

    @property
    def connection_string(self) -> str:
        """Construct the connection string, injecting the password when the URL has none."""
        base_url = make_url(self.resolved_url)

        if base_url.get_backend_name() == "sqlite":
            return self.resolved_url

        if base_url.password:
            if self.password_file or self.password_env_var:
                logger.warning(
                    "Database URL already contains a password; ignoring the configured password source."
                )
            return base_url.render_as_string(hide_password=False)

        resolved_password = self.password
        if resolved_password:
            base_url = base_url.set(password=resolved_password)
        return base_url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.resolved_url).get_backend_name() == "sqlite"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    access_log: AccessLogConfig = Field(
        default_factory=AccessLogConfig, description="Access log configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
