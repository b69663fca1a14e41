"""Connection provider.

Resolves a connection name (or the default connection) to a SQLAlchemy engine
using the connections file and environment settings.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine

from .. import engines
from ..exceptions import ConnectionNotConfiguredError
from .settings import ConnectionConfig, ResetSettings, load_connections_file

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """Named database connections available to the reset command."""

    def __init__(self, connections: dict[str, ConnectionConfig], default_connection: str = "default"):
        self.connections = connections
        self.default_connection = default_connection

    @classmethod
    def from_settings(cls, settings: ResetSettings) -> "ConnectionProvider":
        """Build a provider from the connections file and environment.

        The default connection name is taken from SCHEMA_RESET_DEFAULT_CONNECTION
        when set, then from the file's ``default`` key. A configured
        database URL fills in the default connection if the file does not
        declare it.

        Args:
            settings: Process settings

        Returns:
            ConnectionProvider instance
        """
        connections: dict[str, ConnectionConfig] = {}
        default_connection = settings.default_connection

        if settings.config_file.exists():
            logger.debug(f"Loading connections from {settings.config_file}")
            connections_file = load_connections_file(settings.config_file)
            connections.update(connections_file.connections)
            if connections_file.default and "default_connection" not in settings.model_fields_set:
                default_connection = connections_file.default
        else:
            logger.debug(f"No connections file at {settings.config_file}")

        if settings.database_url and default_connection not in connections:
            connections[default_connection] = ConnectionConfig(url=settings.database_url)

        return cls(connections, default_connection)

    def available_connections(self) -> list[str]:
        """List configured connection names."""
        return sorted(self.connections)

    def get_config(self, connection_name: Optional[str] = None) -> ConnectionConfig:
        """Get configuration for a named connection.

        Args:
            connection_name: Connection name, or None for the default connection

        Returns:
            ConnectionConfig for the connection

        Raises:
            ConnectionNotConfiguredError: If the name is not configured
        """
        name = connection_name or self.default_connection
        if name not in self.connections:
            raise ConnectionNotConfiguredError(name, self.available_connections())

        return self.connections[name]

    def get_for_connection(self, connection_name: Optional[str] = None) -> Engine:
        """Create an engine for a named connection.

        Args:
            connection_name: Connection name, or None for the default connection

        Returns:
            SQLAlchemy engine instance
        """
        config = self.get_config(connection_name)
        logger.info(f"Using connection: {connection_name or self.default_connection}")
        return engines.create_engine_for_connection(config)
