"""Input adapters that turn raw roster sheets into datasets."""

from .parser import parse_rows, split_line
from .roster import (
    HEADER_LABEL,
    CohortLoad,
    SourceUnavailable,
    build_dataset,
    mismatch_notice,
    fetch_text,
    load_all_cohorts,
    load_cohorts,
    load_dataset,
    strip_header,
)

__all__ = [
    "HEADER_LABEL",
    "CohortLoad",
    "SourceUnavailable",
    "build_dataset",
    "fetch_text",
    "load_all_cohorts",
    "load_cohorts",
    "load_dataset",
    "mismatch_notice",
    "parse_rows",
    "split_line",
    "strip_header",
]
