"""
Trello Reports MCP Server Configuration

Server identity, logging settings and the Trello credentials handed to the
API client.
"""

import logging
import os
from dataclasses import dataclass, field

from trello_reports.providers.config import TrelloCredentials
from trello_reports.utils.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TrelloServerConfig:
    """Configuration for the Trello Reports MCP Server."""

    # Server identity
    server_name: str = "trello-reports"
    server_version: str = "1.0.0"

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )
    log_file: str | None = None

    # Upstream
    credentials: TrelloCredentials = field(default_factory=TrelloCredentials)

    @classmethod
    def from_env(cls) -> "TrelloServerConfig":
        """Create config from environment variables."""
        return cls(
            server_name=os.getenv("MCP_SERVER_NAME", "trello-reports"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            credentials=TrelloCredentials.from_env(),
        )

    def validate(self) -> None:
        """
        Validate configuration.

        Raises:
            ConfigurationError: Missing credentials or an unknown log level
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid LOG_LEVEL: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}"
            )

        if not self.server_name:
            raise ConfigurationError("MCP_SERVER_NAME must not be empty")

        self.credentials.validate()

        logging.getLogger(__name__).debug(
            f"Configuration valid: {self.server_name} v{self.server_version}, "
            f"Trello API at {self.credentials.base_url}"
        )
