"""Utility functions for Drillo."""

from .date_utils import (
    NOT_TESTED,
    TIMESTAMP_FORMAT,
    days_since,
    format_last_activity,
    format_timestamp,
    parse_last_activity,
    parse_timestamp,
)

__all__ = [
    "NOT_TESTED",
    "TIMESTAMP_FORMAT",
    "days_since",
    "format_last_activity",
    "format_timestamp",
    "parse_last_activity",
    "parse_timestamp",
]
