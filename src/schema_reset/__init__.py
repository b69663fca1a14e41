# schema_reset - Drop every table and sequence of a database schema
#
# - Platform profiles (drop statement, constraint toggles, sequence handling)
# - SchemaResetter driving the drops over a SchemaConnection
# - SQLAlchemy adapter, connection provider and engine factory
# - `schema-reset migrations reset` command line entry point
#

from .config import ConnectionConfig, ConnectionProvider, ResetSettings
from .connectors import SchemaConnection, SqlAlchemyConnection
from .exceptions import ConnectionNotConfiguredError, SchemaResetError, UnsupportedPlatformError
from .platforms import (
    PLATFORM_REGISTRY,
    IsolationStatements,
    PlatformProfile,
    get_platform_profile,
    list_supported_platforms,
)
from .resetter import ResetResult, SchemaResetter, drop_table_safely

__version__ = "1.0.0"

__all__ = [
    # Platforms
    "PLATFORM_REGISTRY",
    "IsolationStatements",
    "PlatformProfile",
    "get_platform_profile",
    "list_supported_platforms",
    # Reset
    "ResetResult",
    "SchemaResetter",
    "drop_table_safely",
    # Connections
    "SchemaConnection",
    "SqlAlchemyConnection",
    "ConnectionConfig",
    "ConnectionProvider",
    "ResetSettings",
    # Errors
    "SchemaResetError",
    "UnsupportedPlatformError",
    "ConnectionNotConfiguredError",
]
