"""Tests for settings loading and SQL_CLIENT validation."""

from __future__ import annotations

import re

import pytest

from visitlog.core.exceptions import ConfigurationError
from visitlog.core.setting import (
    SQL_CLIENT_ERROR,
    ConnectionParams,
    EnvSettingsOptions,
    Settings,
    SqlClient,
    get_service_config,
)


def test_error_message():
    assert SQL_CLIENT_ERROR == "The SQL_CLIENT environment variable must be set to 'pg' or 'mysql'."


def test_mysql_uses_mysql_credentials(sql_env):
    sql_env.setenv("SQL_CLIENT", "mysql")

    config = get_service_config(Settings(_env_file=None))

    assert config.client is SqlClient.mysql
    assert config.model_dump(mode="json", exclude_none=True) == {
        "client": "mysql",
        "connection": {
            "user": "mysql_user",
            "password": "mysql_password",
            "database": "mysql_database",
        },
    }


def test_pg_uses_postgres_credentials(sql_env):
    sql_env.setenv("SQL_CLIENT", "pg")

    config = get_service_config(Settings(_env_file=None))

    assert config.client is SqlClient.pg
    assert config.model_dump(mode="json", exclude_none=True) == {
        "client": "pg",
        "connection": {
            "user": "postgres_user",
            "password": "postgres_password",
            "database": "postgres_database",
        },
    }


@pytest.mark.parametrize("value", [None, "", "foo", "MYSQL", "postgres", " pg"])
def test_rejects_invalid_sql_client(value):
    settings = Settings(_env_file=None, SQL_CLIENT=value)

    with pytest.raises(ConfigurationError, match=re.escape(SQL_CLIENT_ERROR)):
        get_service_config(settings)


def test_rejects_missing_sql_client(sql_env):
    with pytest.raises(ConfigurationError) as exc_info:
        get_service_config(Settings(_env_file=None))

    assert str(exc_info.value) == SQL_CLIENT_ERROR


def test_socket_path_in_production(sql_env):
    sql_env.setenv("SQL_CLIENT", "pg")
    sql_env.setenv("ENV_SETTING", "production")
    sql_env.setenv("INSTANCE_CONNECTION_NAME", "project:region:instance")

    config = get_service_config(Settings(_env_file=None))

    assert config.connection.socket_path == "/cloudsql/project:region:instance"


def test_no_socket_path_outside_production(sql_env):
    sql_env.setenv("SQL_CLIENT", "mysql")
    sql_env.setenv("INSTANCE_CONNECTION_NAME", "project:region:instance")

    settings = Settings(_env_file=None)
    config = get_service_config(settings)

    assert settings.ENV_SETTING is EnvSettingsOptions.development
    assert config.connection.socket_path is None


def test_db_host_is_carried(sql_env):
    sql_env.setenv("SQL_CLIENT", "mysql")
    sql_env.setenv("DB_HOST", "10.0.0.5")

    config = get_service_config(Settings(_env_file=None))

    assert config.connection == ConnectionParams(
        user="mysql_user",
        password="mysql_password",
        database="mysql_database",
        host="10.0.0.5",
    )


def test_server_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.LOG_LEVEL == "info"
