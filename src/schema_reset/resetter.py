"""Schema Resetter

Drops every table (and, where the platform has them, every sequence) reachable
through a connection, using the platform's profile to pick the DROP statement
and the constraint toggles issued around it.

The resetter does no recovery: a failing statement propagates to the caller
and objects already dropped stay dropped.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping

from .connectors.base import SchemaConnection
from .platforms import PLATFORM_REGISTRY, PlatformProfile, get_platform_profile

logger = logging.getLogger(__name__)


@dataclass
class ResetResult:
    """Summary of a completed reset."""

    platform: str
    tables_dropped: list[str] = field(default_factory=list)
    sequences_dropped: list[str] = field(default_factory=list)


def drop_table_safely(connection: SchemaConnection, table: str, profile: PlatformProfile) -> None:
    """Drop one table wrapped in the platform's isolation statements.

    Args:
        connection: Connection to issue statements on
        table: Table name, substituted verbatim
        profile: Platform profile providing the statement templates
    """
    enable_statement = profile.enable_statement(table)
    if enable_statement is not None:
        connection.execute(enable_statement)

    connection.execute(profile.drop_statement(table))

    disable_statement = profile.disable_statement(table)
    if disable_statement is not None:
        connection.execute(disable_statement)


class SchemaResetter:
    """Reset a database schema by dropping all of its tables and sequences."""

    def __init__(self, registry: Mapping[str, PlatformProfile] = PLATFORM_REGISTRY):
        self.registry = registry

    def resolve_profile(self, connection: SchemaConnection) -> PlatformProfile:
        """Find the profile for the connected platform.

        Raises:
            UnsupportedPlatformError: If the platform is not registered
        """
        return get_platform_profile(connection.platform_name(), self.registry)

    def reset(self, connection: SchemaConnection) -> ResetResult:
        """Drop all tables, then all sequences when the platform uses them.

        Args:
            connection: Connection to the database being reset

        Returns:
            ResetResult listing what was dropped

        Raises:
            UnsupportedPlatformError: Before any statement is issued, if the
                platform has no registered profile
        """
        profile = self.resolve_profile(connection)
        result = ResetResult(platform=profile.name)
        logger.info(f"Resetting {profile.name} schema")

        for table in connection.list_table_names():
            drop_table_safely(connection, table, profile)
            result.tables_dropped.append(table)
            logger.info(f"Dropped table: {table}")

        if profile.drop_sequences:
            for sequence in connection.list_sequence_names():
                connection.drop_sequence(sequence)
                result.sequences_dropped.append(sequence)
                logger.info(f"Dropped sequence: {sequence}")

        logger.info(
            f"Reset complete: {len(result.tables_dropped)} tables, "
            f"{len(result.sequences_dropped)} sequences dropped"
        )
        return result
