"""Shared utilities: error taxonomy and logging setup."""

from .errors import (
    ErrorCode,
    TrelloReportsError,
    ConfigurationError,
    ValidationError,
    NotFoundError,
    UpstreamError,
    PartialFetchWarning,
    error_handler,
)
from .logger import setup_logging, log_api_call

__all__ = [
    "ErrorCode",
    "TrelloReportsError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "UpstreamError",
    "PartialFetchWarning",
    "error_handler",
    "setup_logging",
    "log_api_call",
]
