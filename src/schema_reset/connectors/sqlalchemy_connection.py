"""SQLAlchemy connection adapter.

Wraps an open SQLAlchemy connection so the resetter can identify the platform,
introspect tables and sequences, and issue DDL on a single session.
"""

import logging

from sqlalchemy import Sequence, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.schema import DropSequence

from .base import SchemaConnection

logger = logging.getLogger(__name__)

# Dialects that share another platform's reset instructions
DIALECT_ALIASES = {
    "mariadb": "mysql",
}


class SqlAlchemyConnection(SchemaConnection):
    """Schema connection backed by a SQLAlchemy ``Connection``.

    The wrapped connection stays under the caller's control; transaction
    boundaries (``engine.begin()``) belong to whoever opened it.
    """

    def __init__(self, connection: Connection):
        """Initialize adapter.

        Args:
            connection: Open SQLAlchemy connection
        """
        self.connection = connection

    def platform_name(self) -> str:
        dialect_name = self.connection.dialect.name
        return DIALECT_ALIASES.get(dialect_name, dialect_name)

    def list_table_names(self) -> list[str]:
        # Fresh inspector per call, an Inspector caches reflected names
        return list(inspect(self.connection).get_table_names())

    def list_sequence_names(self) -> list[str]:
        return list(inspect(self.connection).get_sequence_names())

    def drop_sequence(self, name: str) -> None:
        logger.debug(f"Dropping sequence via DDL construct: {name}")
        self.connection.execute(DropSequence(Sequence(name)))

    def execute(self, statement: str) -> None:
        logger.debug(f"Executing: {statement}")
        self.connection.exec_driver_sql(statement)
