"""Configuration for Schema Reset

- ResetSettings: Environment-driven settings (SCHEMA_RESET_* variables)
- ConnectionConfig: One named database connection
- ConnectionProvider: Resolves a connection name to a SQLAlchemy engine
"""

from .settings import ConnectionConfig, ConnectionsFile, ResetSettings, load_connections_file
from .connections import ConnectionProvider

__all__ = [
    "ConnectionConfig",
    "ConnectionProvider",
    "ConnectionsFile",
    "ResetSettings",
    "load_connections_file",
]
