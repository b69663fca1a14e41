"""Platform Profiles for Schema Reset

Declarative per-engine instructions used when dropping a schema:
- whether sequences exist and must be dropped
- which statements toggle constraint checking around each table drop
- the exact DROP statement for a table
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import UnsupportedPlatformError


@dataclass(frozen=True)
class IsolationStatements:
    """Statement templates issued before (enable) and after (disable) a drop.

    Either side may be missing. Templates are rendered with ``%`` and the table
    name; templates without a placeholder (global pragmas) render unchanged.
    """

    enable: Optional[str] = None
    disable: Optional[str] = None


@dataclass(frozen=True)
class PlatformProfile:
    """Reset behaviour for one database engine."""

    name: str
    drop_sequences: bool
    drop_statement_template: str
    isolation: Optional[IsolationStatements] = None

    def drop_statement(self, table: str) -> str:
        return _render(self.drop_statement_template, table)

    def enable_statement(self, table: str) -> Optional[str]:
        if self.isolation is None or self.isolation.enable is None:
            return None
        return _render(self.isolation.enable, table)

    def disable_statement(self, table: str) -> Optional[str]:
        if self.isolation is None or self.isolation.disable is None:
            return None
        return _render(self.isolation.disable, table)


def _render(template: str, table: str) -> str:
    # Table names are trusted driver output and substituted verbatim
    if "%s" not in template:
        return template
    return template % table


PLATFORM_REGISTRY: Mapping[str, PlatformProfile] = MappingProxyType(
    {
        "mssql": PlatformProfile(
            name="mssql",
            drop_sequences=True,
            isolation=IsolationStatements(disable="ALTER TABLE %s CHECK CONSTRAINT ALL"),
            drop_statement_template="DROP TABLE %s",
        ),
        "mysql": PlatformProfile(
            name="mysql",
            drop_sequences=False,
            isolation=IsolationStatements(
                enable="SET FOREIGN_KEY_CHECKS = 1",
                disable="SET FOREIGN_KEY_CHECKS = 0",
            ),
            drop_statement_template="DROP TABLE %s",
        ),
        "postgresql": PlatformProfile(
            name="postgresql",
            drop_sequences=True,
            drop_statement_template="DROP TABLE IF EXISTS %s CASCADE",
        ),
        "sqlite": PlatformProfile(
            name="sqlite",
            drop_sequences=False,
            isolation=IsolationStatements(
                enable="PRAGMA foreign_keys = ON",
                disable="PRAGMA foreign_keys = OFF",
            ),
            drop_statement_template="DROP TABLE %s",
        ),
    }
)


def get_platform_profile(
    platform_name: str, registry: Mapping[str, PlatformProfile] = PLATFORM_REGISTRY
) -> PlatformProfile:
    """Look up the reset profile for a platform.

    Args:
        platform_name: Platform identifier reported by the connection
        registry: Mapping to search (defaults to the built-in registry)

    Returns:
        The matching PlatformProfile

    Raises:
        UnsupportedPlatformError: If no profile is registered for the platform
    """
    if platform_name not in registry:
        raise UnsupportedPlatformError(platform_name)

    return registry[platform_name]


def list_supported_platforms(
    registry: Mapping[str, PlatformProfile] = PLATFORM_REGISTRY,
) -> list[str]:
    """List the platform names that can be reset."""
    return sorted(registry)
