"""Engine Factory for Schema Reset

Builds SQLAlchemy connection URLs for each supported database type and creates
engines from named connection configurations.
"""

import os
import tempfile
from urllib.parse import quote_plus

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from .config.settings import ConnectionConfig

DEFAULT_PORTS = {
    "postgres": 5432,
    "mysql": 3306,
    "mssql": 1433,
}

DEFAULT_MSSQL_DRIVER = "ODBC Driver 18 for SQL Server"


def get_sqlite_url(database: str, in_memory: bool = False, path: str | None = None) -> str:
    """Build SQLite connection URL.

    Args:
        database: Database name (used for the file name when no path is given)
        in_memory: If True, use an in-memory database
        path: Optional explicit database file path

    Returns:
        SQLite connection URL string
    """
    if in_memory:
        return "sqlite://"

    if path is None:
        path = os.path.join(tempfile.gettempdir(), f"{database}.db")

    return f"sqlite:///{path}"


def get_postgres_url(
    database: str,
    user: str,
    password: str | None = None,
    host: str = "localhost",
    port: int = 5432,
) -> str:
    """Build PostgreSQL connection URL (psycopg2 driver)."""
    credentials = _credentials(user, password)
    return f"postgresql+psycopg2://{credentials}@{host}:{port}/{database}"


def get_mysql_url(
    database: str,
    user: str,
    password: str | None = None,
    host: str = "localhost",
    port: int = 3306,
) -> str:
    """Build MySQL connection URL (PyMySQL driver)."""
    credentials = _credentials(user, password)
    return f"mysql+pymysql://{credentials}@{host}:{port}/{database}"


def get_mssql_url(
    database: str,
    user: str | None = None,
    password: str | None = None,
    host: str = "localhost",
    port: int = 1433,
    driver: str = DEFAULT_MSSQL_DRIVER,
) -> str:
    """Build SQL Server connection URL (pyodbc driver).

    Without a user the URL requests integrated (trusted) authentication.
    """
    query = f"driver={quote_plus(driver)}"
    if user is None:
        return f"mssql+pyodbc://@{host}:{port}/{database}?{query}&trusted_connection=yes"

    credentials = _credentials(user, password)
    return f"mssql+pyodbc://{credentials}@{host}:{port}/{database}?{query}"


def _credentials(user: str, password: str | None) -> str:
    if password is None:
        return quote_plus(user)
    return f"{quote_plus(user)}:{quote_plus(password)}"


def get_connection_url(config: ConnectionConfig) -> str:
    """Resolve the SQLAlchemy URL for a connection configuration.

    Args:
        config: Named connection configuration

    Returns:
        SQLAlchemy connection URL string

    Raises:
        ValueError: If the configuration has neither a URL nor a supported type
    """
    if config.url:
        return config.url

    db_type = config.type
    database = config.database or "schema_reset"

    if db_type == "sqlite":
        return get_sqlite_url(database, config.in_memory, config.path)
    elif db_type == "postgres":
        return get_postgres_url(
            database,
            config.user or "postgres",
            config.password,
            config.host,
            config.port or DEFAULT_PORTS["postgres"],
        )
    elif db_type == "mysql":
        return get_mysql_url(
            database,
            config.user or "root",
            config.password,
            config.host,
            config.port or DEFAULT_PORTS["mysql"],
        )
    elif db_type == "mssql":
        return get_mssql_url(
            database,
            config.user,
            config.password,
            config.host,
            config.port or DEFAULT_PORTS["mssql"],
            config.driver or DEFAULT_MSSQL_DRIVER,
        )
    else:
        raise ValueError(f"Unsupported database type: {db_type}")


def create_engine_for_connection(config: ConnectionConfig) -> Engine:
    """Create SQLAlchemy engine for a named connection configuration.

    Args:
        config: Connection configuration

    Returns:
        SQLAlchemy engine instance
    """
    return create_engine(get_connection_url(config), echo=config.echo)
