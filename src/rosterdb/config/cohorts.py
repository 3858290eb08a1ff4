"""Cohort registry: which source feeds each roster division."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Iterable, Mapping


DATA_DIR_ENV = "ROSTERDB_DATA_DIR"
DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True)
class CohortConfig:
    key: str
    label: str
    source: str
    strict: bool = False

    def with_source(self, source: str) -> "CohortConfig":
        return replace(self, source=source)


_COHORTS: Dict[str, CohortConfig] = {
    "MENS": CohortConfig(key="MENS", label="Men", source="mens.csv"),
    "WOMENS": CohortConfig(key="WOMENS", label="Women", source="women.csv"),
}


def iter_cohorts() -> Iterable[CohortConfig]:
    """Return an iterator of all configured cohorts."""

    return _COHORTS.values()


def get_cohort(key: str) -> CohortConfig:
    """Fetch a cohort by key, raising KeyError if missing."""

    normalized = key.upper()
    if normalized not in _COHORTS:
        raise KeyError(f"No cohort configured for key={key!r}")
    return _COHORTS[normalized]


def apply_source_overrides(
    cohorts: Iterable[CohortConfig], sources: Mapping[str, str]
) -> list[CohortConfig]:
    overrides = {key.upper(): value for key, value in sources.items()}
    return [
        cohort.with_source(overrides[cohort.key]) if cohort.key in overrides else cohort
        for cohort in cohorts
    ]


def resolve_source(source: str, data_dir: str | Path | None = None) -> str:
    """Resolve relative file sources against the configured data directory.

    URLs and absolute paths are returned untouched.
    """

    if source.startswith(("http://", "https://")):
        return source
    path = Path(source)
    if path.is_absolute():
        return source
    base = data_dir if data_dir is not None else os.getenv(DATA_DIR_ENV, DEFAULT_DATA_DIR)
    return str(Path(base) / path)
