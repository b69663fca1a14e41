"""Settings and connection configuration models.

Connections are declared in a YAML file:

    default: main
    connections:
      main:
        url: postgresql+psycopg2://app@localhost/app
      legacy:
        type: mysql
        host: db.internal
        database: legacy
        user: root

Process-level settings come from SCHEMA_RESET_* environment variables.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionConfig(BaseModel):
    """Configuration for one named database connection.

    Either ``url`` is given, or ``type`` plus the fields that type needs.
    """

    model_config = ConfigDict(extra="forbid")

    url: Optional[str] = None
    type: Optional[Literal["sqlite", "postgres", "mysql", "mssql"]] = None
    host: str = "localhost"
    port: Optional[int] = None
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    driver: Optional[str] = Field(default=None, description="ODBC driver name (mssql)")
    in_memory: bool = False
    path: Optional[str] = Field(default=None, description="Database file (sqlite)")
    echo: bool = False

    @model_validator(mode="after")
    def check_url_or_type(self) -> "ConnectionConfig":
        if not self.url and not self.type:
            raise ValueError("A connection needs either 'url' or 'type'")
        return self


class ConnectionsFile(BaseModel):
    """Parsed contents of the connections YAML file."""

    model_config = ConfigDict(extra="forbid")

    default: Optional[str] = None
    connections: dict[str, ConnectionConfig] = Field(default_factory=dict)


class ResetSettings(BaseSettings):
    """Process settings read from the environment."""

    model_config = SettingsConfigDict(env_prefix="SCHEMA_RESET_", extra="ignore")

    config_file: Path = Path("schema_reset.yaml")
    default_connection: str = "default"
    database_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SCHEMA_RESET_DATABASE_URL", "DATABASE_URL"),
    )
    log_level: str = "INFO"


def load_connections_file(path: Path) -> ConnectionsFile:
    """Load and validate a connections YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        ConnectionsFile with every connection validated
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return ConnectionsFile(**raw)
