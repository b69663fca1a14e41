"""Database Connections for Schema Reset

The seam between the reset logic and a live database:
- SchemaConnection: Abstract interface the resetter talks to
- SqlAlchemyConnection: Adapter over an open SQLAlchemy connection
"""

from .base import SchemaConnection
from .sqlalchemy_connection import SqlAlchemyConnection

__all__ = [
    "SchemaConnection",
    "SqlAlchemyConnection",
]
