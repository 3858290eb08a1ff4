"""Configuration helpers for cohorts and statistics."""

from .cohorts import (
    CohortConfig,
    apply_source_overrides,
    get_cohort,
    iter_cohorts,
    resolve_source,
)
from .stats import POSITION_CATEGORIES, POSITION_REPORT_ORDER, StatsOptions

PAGE_SIZE = 15

__all__ = [
    "PAGE_SIZE",
    "POSITION_CATEGORIES",
    "POSITION_REPORT_ORDER",
    "CohortConfig",
    "StatsOptions",
    "apply_source_overrides",
    "get_cohort",
    "iter_cohorts",
    "resolve_source",
]
