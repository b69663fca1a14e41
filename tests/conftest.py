"""Pytest configuration and shared fixtures for schema_reset tests."""

import pytest

from schema_reset.connectors.base import SchemaConnection


class RecordingConnection(SchemaConnection):
    """In-memory connection that records every operation issued against it."""

    def __init__(self, platform: str, tables=None, sequences=None):
        self.platform = platform
        self.tables = list(tables or [])
        self.sequences = list(sequences or [])
        self.statements: list[str] = []
        self.dropped_sequences: list[str] = []
        self.sequence_listings = 0
        self.table_listings = 0

    def platform_name(self) -> str:
        return self.platform

    def list_table_names(self) -> list[str]:
        self.table_listings += 1
        return list(self.tables)

    def list_sequence_names(self) -> list[str]:
        self.sequence_listings += 1
        return list(self.sequences)

    def drop_sequence(self, name: str) -> None:
        self.dropped_sequences.append(name)

    def execute(self, statement: str) -> None:
        self.statements.append(statement)


@pytest.fixture
def recording_connection():
    """Factory for RecordingConnection instances."""

    def _make(platform: str, tables=None, sequences=None) -> RecordingConnection:
        return RecordingConnection(platform, tables, sequences)

    return _make


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that would change settings resolution."""
    for name in (
        "DATABASE_URL",
        "SCHEMA_RESET_DATABASE_URL",
        "SCHEMA_RESET_CONFIG_FILE",
        "SCHEMA_RESET_DEFAULT_CONNECTION",
        "SCHEMA_RESET_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
