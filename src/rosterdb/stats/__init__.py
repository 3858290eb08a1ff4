"""Roster statistics."""

from .summary import (
    HOME_NT,
    NO_NT,
    OTHER_NT,
    WITH_CLUB,
    WITHOUT_CLUB,
    StatsSummary,
    aggregate,
    categorize_position,
)
from .updated import latest_update, latest_update_label, parse_update_date

__all__ = [
    "HOME_NT",
    "NO_NT",
    "OTHER_NT",
    "WITH_CLUB",
    "WITHOUT_CLUB",
    "StatsSummary",
    "aggregate",
    "categorize_position",
    "latest_update",
    "latest_update_label",
    "parse_update_date",
]
