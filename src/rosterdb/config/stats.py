"""Position categories and options for roster statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple


# Checked in this order; a position token maps to the first category that matches.
POSITION_CATEGORIES: Mapping[str, Tuple[str, ...]] = {
    "Forwards": ("ST", "CF", "FW"),
    "Midfielders": ("LM", "CM", "CAM", "CDM", "RM", "MF"),
    "Defenders": ("LB", "CB", "RB", "DF"),
    "Wingers": ("LW", "RW", "LWB", "RWB"),
    "Goalkeepers": ("GK",),
}

OTHER_CATEGORY = "Other"
UNKNOWN_CATEGORY = "Unknown"

# Display order of the statistics position table.
POSITION_REPORT_ORDER: Tuple[str, ...] = (
    "Forwards",
    "Wingers",
    "Midfielders",
    "Defenders",
    "Goalkeepers",
    OTHER_CATEGORY,
)


@dataclass(frozen=True)
class StatsOptions:
    home_nt_code: str = "BAN"
    home_nt_label: str = "Bangladesh"
    unattached_marker: str = "Unattached"
    include_club_status: bool = True
    include_nt_status: bool = True
    exact_positions: bool = False
    last_updated_fallback: str = "Unknown"
