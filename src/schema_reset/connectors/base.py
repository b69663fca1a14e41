"""Base connection class for schema reset.

Defines the small set of operations the resetter needs from a database:
platform identification, schema introspection and statement execution.
"""

from abc import ABC, abstractmethod


class SchemaConnection(ABC):
    """Abstract base class for connections a schema can be reset through.

    The connection is owned by the caller. Implementations issue statements
    against it but never open, commit or close it.

    Subclasses must implement:
    - platform_name(): Identify the database engine
    - list_table_names(): List existing tables
    - list_sequence_names(): List existing sequences
    - drop_sequence(): Drop one sequence natively
    - execute(): Run a literal SQL statement
    """

    @abstractmethod
    def platform_name(self) -> str:
        """Get the platform identifier for the connected database.

        Returns:
            Platform name such as 'mysql', 'postgresql', 'mssql' or 'sqlite'
        """
        pass

    @abstractmethod
    def list_table_names(self) -> list[str]:
        """List tables currently present in the database.

        Returns:
            Table names in the order the driver reports them
        """
        pass

    @abstractmethod
    def list_sequence_names(self) -> list[str]:
        """List sequences currently present in the database.

        Returns:
            Sequence names in the order the driver reports them
        """
        pass

    @abstractmethod
    def drop_sequence(self, name: str) -> None:
        """Drop a sequence using the driver's own DDL for it.

        Args:
            name: Sequence name as reported by list_sequence_names()
        """
        pass

    @abstractmethod
    def execute(self, statement: str) -> None:
        """Execute a literal SQL statement.

        Args:
            statement: Fully rendered SQL, executed without parameter binding
        """
        pass
