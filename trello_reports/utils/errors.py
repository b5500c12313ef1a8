"""
Error handling system for Trello Reports
Provides the exception taxonomy shared by the client, service and MCP tools
"""

import traceback
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for different types of errors"""
    CONFIGURATION_ERROR = "CONFIG_001"
    VALIDATION_ERROR = "VAL_001"
    NOT_FOUND_ERROR = "NF_001"
    UPSTREAM_ERROR = "API_001"
    PARTIAL_FETCH = "API_002"
    UNKNOWN_ERROR = "UNKNOWN_001"


class TrelloReportsError(Exception):
    """Base exception for Trello Reports"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary"""
        return {
            'error_code': self.error_code.value,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(TrelloReportsError):
    """Missing or invalid configuration (fatal at startup)"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class ValidationError(TrelloReportsError):
    """Malformed period, format or board reference"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class NotFoundError(TrelloReportsError):
    """Requested board could not be located"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_FOUND_ERROR, details)


class UpstreamError(TrelloReportsError):
    """Transport or HTTP failure talking to the Trello API"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.UPSTREAM_ERROR, details)


class PartialFetchWarning(TrelloReportsError):
    """
    A secondary fetch (card checklists) failed for a single card.

    Logged by the caller and never raised out of the report pipeline.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.PARTIAL_FETCH, details)


def error_handler(error: Exception) -> Dict[str, Any]:
    """
    Convert an exception to the standardized error dictionary

    Args:
        error: Exception to handle

    Returns:
        Dictionary with error information
    """
    if isinstance(error, TrelloReportsError):
        return {
            'error': True,
            'error_code': error.error_code.value,
            'message': error.message,
            'details': error.details,
            'type': error.__class__.__name__
        }
    return {
        'error': True,
        'error_code': ErrorCode.UNKNOWN_ERROR.value,
        'message': str(error),
        'details': {
            'traceback': traceback.format_exc()
        },
        'type': error.__class__.__name__
    }
