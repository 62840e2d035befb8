"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

The engine selector (SQL_CLIENT) is validated separately by
get_service_config() so that an invalid value surfaces as a
ConfigurationError with a stable message, before any database client or
listener is created.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from visitlog.core.exceptions import ConfigurationError

__all__ = [
    "ConnectionParams",
    "EnvSettingsOptions",
    "ServiceConfig",
    "Settings",
    "SqlClient",
    "SQL_CLIENT_ERROR",
    "get_service_config",
]

SQL_CLIENT_ERROR = "The SQL_CLIENT environment variable must be set to 'pg' or 'mysql'."

CLOUD_SQL_SOCKET_DIR = "/cloudsql"


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class SqlClient(str, Enum):
    """Supported database engines."""
    mysql = "mysql"
    pg = "pg"


class ConnectionParams(BaseModel):
    """Credentials (and optional location) for the database connection."""
    model_config = ConfigDict(frozen=True)

    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    host: Optional[str] = None
    socket_path: Optional[str] = None


class ServiceConfig(BaseModel):
    """Validated configuration used to build the database client."""
    model_config = ConfigDict(frozen=True)

    client: SqlClient
    connection: ConnectionParams


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Project Configuration
    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )

    # Database engine selector: 'mysql' or 'pg'
    SQL_CLIENT: Optional[str] = Field(
        default=None,
        description="Database engine to use ('mysql' or 'pg')"
    )

    # MySQL credentials (used when SQL_CLIENT=mysql)
    MYSQL_USER: Optional[str] = None
    MYSQL_PASSWORD: Optional[str] = None
    MYSQL_DATABASE: Optional[str] = None

    # Postgres credentials (used when SQL_CLIENT=pg)
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DATABASE: Optional[str] = None

    INSTANCE_CONNECTION_NAME: Optional[str] = Field(
        default=None,
        description="Cloud SQL instance; connects over its Unix socket in production"
    )
    DB_HOST: Optional[str] = Field(
        default=None,
        description="Database host when not using a Cloud SQL socket (localhost if unset)"
    )

    # Server Configuration
    HOST: str = Field(default="0.0.0.0", description="Interface to listen on")
    PORT: int = Field(default=8080, description="Port to listen on")
    LOG_LEVEL: str = Field(default="info", description="Log level passed to uvicorn")


def get_service_config(settings: Settings) -> ServiceConfig:
    """
    Validate the engine selector and build the service configuration.

    Args:
        settings: Loaded application settings

    Returns:
        ServiceConfig for the selected engine

    Raises:
        ConfigurationError: If SQL_CLIENT is not exactly 'mysql' or 'pg'
    """
    try:
        client = SqlClient(settings.SQL_CLIENT)
    except ValueError:
        raise ConfigurationError(SQL_CLIENT_ERROR) from None

    if client is SqlClient.mysql:
        user = settings.MYSQL_USER
        password = settings.MYSQL_PASSWORD
        database = settings.MYSQL_DATABASE
    else:
        user = settings.POSTGRES_USER
        password = settings.POSTGRES_PASSWORD
        database = settings.POSTGRES_DATABASE

    socket_path = None
    if (
        settings.INSTANCE_CONNECTION_NAME
        and settings.ENV_SETTING is EnvSettingsOptions.production
    ):
        socket_path = f"{CLOUD_SQL_SOCKET_DIR}/{settings.INSTANCE_CONNECTION_NAME}"

    return ServiceConfig(
        client=client,
        connection=ConnectionParams(
            user=user,
            password=password,
            database=database,
            host=settings.DB_HOST,
            socket_path=socket_path,
        ),
    )
