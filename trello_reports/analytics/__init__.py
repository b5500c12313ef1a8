"""Board activity analytics: period resolution and the activity aggregate."""

from .calculators import BoardActivityCalculator, calculate_board_activity
from .models import BoardActivity
from .period import (
    describe_period,
    format_date,
    format_range,
    resolve_date_range,
    validate_period,
)

__all__ = [
    "BoardActivity",
    "BoardActivityCalculator",
    "calculate_board_activity",
    "describe_period",
    "format_date",
    "format_range",
    "resolve_date_range",
    "validate_period",
]
