"""Tests for the schema-reset command line interface.

Runs `migrations reset` end to end against file-based SQLite databases.
"""

import sqlite3
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from schema_reset.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("schema_reset.cli.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def database(tmp_path) -> Path:
    path = tmp_path / "app.db"
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE authors (id INTEGER PRIMARY KEY, name TEXT);
        CREATE TABLE books (id INTEGER PRIMARY KEY, author_id INTEGER REFERENCES authors(id));
        CREATE TABLE audit_log (id INTEGER PRIMARY KEY, message TEXT);
        INSERT INTO audit_log (message) VALUES ('created');
        """
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def config_file(tmp_path, database) -> Path:
    path = tmp_path / "schema_reset.yaml"
    path.write_text(
        "default: main\n"
        "connections:\n"
        "  main:\n"
        "    type: sqlite\n"
        f"    path: {database}\n"
        "  other:\n"
        "    url: sqlite://\n"
    )
    return path


def table_names(database: Path) -> list[str]:
    conn = sqlite3.connect(database)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name").fetchall()
    finally:
        conn.close()
    return [row[0] for row in rows]


class TestResetCommand:
    """Test `migrations reset`"""

    def test_force_resets_default_connection(self, clean_env, config_file, database):
        """Test --force drops every table of the default connection"""
        result = runner.invoke(app, ["migrations", "reset", "--force", "--config", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "Database was reset" in result.output
        assert table_names(database) == []

    def test_confirmation_accepted(self, clean_env, config_file, database):
        """Test answering yes to the prompt performs the reset"""
        result = runner.invoke(app, ["migrations", "reset", "--config", str(config_file)], input="y\n")

        assert result.exit_code == 0, result.output
        assert "Do you really wish to run this command?" in result.output
        assert table_names(database) == []

    def test_confirmation_declined(self, clean_env, config_file, database):
        """Test answering no leaves the database untouched"""
        result = runner.invoke(app, ["migrations", "reset", "--config", str(config_file)], input="n\n")

        assert result.exit_code == 0
        assert "Command cancelled." in result.output
        assert "Database was reset" not in result.output
        assert table_names(database) == ["audit_log", "authors", "books"]

    def test_named_connection(self, clean_env, config_file, database):
        """Test --connection selects a non-default connection"""
        result = runner.invoke(
            app, ["migrations", "reset", "--force", "--config", str(config_file), "--connection", "other"]
        )

        assert result.exit_code == 0, result.output
        assert table_names(database) == ["audit_log", "authors", "books"]

    def test_unknown_connection(self, clean_env, config_file, database):
        """Test an unknown connection exits non-zero without touching the database"""
        result = runner.invoke(
            app, ["migrations", "reset", "--force", "--config", str(config_file), "--connection", "missing"]
        )

        assert result.exit_code == 1
        assert "Unknown connection 'missing'" in result.output
        assert table_names(database) == ["audit_log", "authors", "books"]

    def test_unsupported_platform(self, clean_env, config_file, database):
        """Test an unsupported platform exits non-zero with zero mutations"""
        with patch(
            "schema_reset.connectors.sqlalchemy_connection.SqlAlchemyConnection.platform_name",
            return_value="oracle",
        ):
            result = runner.invoke(app, ["migrations", "reset", "--force", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "The platform oracle is not supported" in result.output
        assert "Database was reset" not in result.output
        assert table_names(database) == ["audit_log", "authors", "books"]

    def test_database_url_fallback(self, clean_env, tmp_path, database):
        """Test DATABASE_URL is used when no connections file exists"""
        clean_env.setenv("DATABASE_URL", f"sqlite:///{database}")

        result = runner.invoke(
            app, ["migrations", "reset", "--force", "--config", str(tmp_path / "missing.yaml")]
        )

        assert result.exit_code == 0, result.output
        assert table_names(database) == []

    def test_log_level_option(self, clean_env, config_file, no_logging_setup):
        """Test --log-level is passed to logging setup"""
        runner.invoke(
            app, ["migrations", "reset", "--config", str(config_file), "--log-level", "DEBUG"], input="n\n"
        )

        no_logging_setup.assert_called_once_with("DEBUG")


class TestConnectionsCommand:
    """Test `migrations connections`"""

    def test_lists_connections(self, clean_env, config_file):
        """Test configured connections are listed with the default marked"""
        result = runner.invoke(app, ["migrations", "connections", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "main (default)" in result.output
        assert "other" in result.output

    def test_no_connections(self, clean_env, tmp_path):
        """Test a helpful message when nothing is configured"""
        result = runner.invoke(app, ["migrations", "connections", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 0
        assert "No connections configured." in result.output

    def test_invalid_file(self, clean_env, tmp_path):
        """Test an invalid connections file exits non-zero"""
        path = tmp_path / "bad.yaml"
        path.write_text("connections:\n  broken:\n    host: localhost\n")

        result = runner.invoke(app, ["migrations", "connections", "--config", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output
