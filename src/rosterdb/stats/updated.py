"""Find the most recent "last updated" date across loaded rosters."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from rosterdb.models import PlayerRecord, is_sentinel


logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "Unknown"


def parse_update_date(value: str | None) -> Optional[date]:
    """Parse ``MM/DD/YYYY``, ``MM/DD/YY`` (as 20YY) or ``YYYY-MM-DD``.

    Returns None for sentinels and for anything that is not a real calendar date.
    """

    if is_sentinel(value):
        return None
    text = value.strip()

    if "/" in text:
        parts = text.split("/")
        if len(parts) != 3:
            return None
        month, day, year = parts
        if len(year) == 2:
            year = "20" + year
    elif "-" in text:
        parts = text.split("-")
        if len(parts) != 3:
            return None
        year, month, day = parts
    else:
        return None

    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        logger.debug("Skipping invalid update date %r", value)
        return None


def latest_update(*datasets: Iterable[PlayerRecord]) -> Optional[date]:
    latest: Optional[date] = None
    for dataset in datasets:
        for player in dataset:
            parsed = parse_update_date(player.last_updated)
            if parsed is not None and (latest is None or parsed > latest):
                latest = parsed
    return latest


def format_long_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def latest_update_label(
    *datasets: Iterable[PlayerRecord], fallback: str = DEFAULT_FALLBACK
) -> str:
    """Long-form label for the newest update date, e.g. ``March 4, 2025``."""

    latest = latest_update(*datasets)
    return format_long_date(latest) if latest is not None else fallback
