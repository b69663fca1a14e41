"""Exceptions raised by schema_reset."""


class SchemaResetError(Exception):
    """Base class for schema reset errors."""


class UnsupportedPlatformError(SchemaResetError):
    """The connected database platform has no registered reset profile."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"The platform {platform_name} is not supported")


class ConnectionNotConfiguredError(SchemaResetError):
    """A connection name could not be resolved from configuration."""

    def __init__(self, connection_name: str, available: list[str]):
        self.connection_name = connection_name
        self.available = available
        super().__init__(
            f"Unknown connection '{connection_name}'. Available: {available}"
        )
