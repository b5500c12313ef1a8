"""
Trello API credentials

Built once by the process entry point and handed to the API client.
"""

import os
from dataclasses import dataclass, field

from ..utils.errors import ConfigurationError

TRELLO_API_BASE_URL = "https://api.trello.com/1"


@dataclass(frozen=True)
class TrelloCredentials:
    """Static key + token pair used to authenticate every request"""

    api_key: str = ""
    api_token: str = field(default="", repr=False)
    base_url: str = TRELLO_API_BASE_URL
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "TrelloCredentials":
        """Create credentials from TRELLO_* environment variables."""
        raw_timeout = os.getenv("TRELLO_REQUEST_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"TRELLO_REQUEST_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from e

        return cls(
            api_key=os.getenv("TRELLO_API_KEY", ""),
            api_token=os.getenv("TRELLO_API_TOKEN", ""),
            base_url=os.getenv("TRELLO_API_BASE_URL", TRELLO_API_BASE_URL),
            timeout=timeout,
        )

    def validate(self) -> None:
        if not self.api_key or not self.api_token:
            raise ConfigurationError(
                "Trello API credentials not found. Please set TRELLO_API_KEY and "
                "TRELLO_API_TOKEN in your environment."
            )
        if self.timeout <= 0:
            raise ConfigurationError("TRELLO_REQUEST_TIMEOUT must be positive")

    def auth_params(self) -> dict[str, str]:
        return {"key": self.api_key, "token": self.api_token}
