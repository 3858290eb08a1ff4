"""Stateful browsing session over one cohort's roster."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from rosterdb.config import PAGE_SIZE, CohortConfig, resolve_source
from rosterdb.ingest import SourceUnavailable, load_dataset, mismatch_notice
from rosterdb.models import Dataset, PlayerRecord, SchemaMismatch
from rosterdb.query.filtering import (
    FilterCriteria,
    FilterVocabulary,
    extract_vocabulary,
    filter_players,
)
from rosterdb.query.paging import Page, paginate, total_pages


logger = logging.getLogger(__name__)


class RosterBrowser:
    """Owns the loaded dataset plus the current filter and page for one cohort."""

    def __init__(
        self,
        dataset: Dataset,
        *,
        cohort: CohortConfig | None = None,
        data_dir: str | Path | None = None,
        page_size: int = PAGE_SIZE,
    ):
        self.cohort = cohort
        self.data_dir = data_dir
        self.page_size = page_size
        self.notice: Optional[str] = None
        self._set_dataset(dataset)

    @classmethod
    def for_cohort(
        cls,
        cohort: CohortConfig,
        *,
        data_dir: str | Path | None = None,
        page_size: int = PAGE_SIZE,
    ) -> "RosterBrowser":
        browser = cls(
            Dataset.empty(cohort.key), cohort=cohort, data_dir=data_dir, page_size=page_size
        )
        browser.reload()
        return browser

    def _set_dataset(self, dataset: Dataset) -> None:
        self.dataset = dataset
        self.vocabulary: FilterVocabulary = extract_vocabulary(dataset)
        self.criteria = FilterCriteria()
        self.filtered: List[PlayerRecord] = list(dataset.players)
        self.page = 1

    def reload(self) -> Dataset:
        """Replace the dataset wholesale from the cohort source."""

        if self.cohort is None:
            raise RuntimeError("browser was not created for a cohort; nothing to reload")
        source = resolve_source(self.cohort.source, self.data_dir)
        try:
            dataset = load_dataset(
                source,
                cohort=self.cohort.key,
                label=self.cohort.label,
                strict=self.cohort.strict,
            )
            self.notice = None
        except SourceUnavailable as exc:
            logger.warning("%s", exc)
            dataset = Dataset.empty(self.cohort.key, source)
            self.notice = exc.notice
        except SchemaMismatch as exc:
            logger.warning("%s data rejected: %s", self.cohort.label, exc)
            dataset = Dataset.empty(self.cohort.key, source)
            self.notice = mismatch_notice(self.cohort.label, source, exc)
        self._set_dataset(dataset)
        return dataset

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered), self.page_size)

    def apply(self, criteria: FilterCriteria) -> Page:
        self.criteria = criteria
        self.filtered = filter_players(self.dataset, criteria)
        self.page = 1
        return self.current_page()

    def reset(self) -> Page:
        return self.apply(FilterCriteria())

    def current_page(self) -> Page:
        return paginate(self.filtered, self.page, page_size=self.page_size)

    def next_page(self) -> Page:
        if self.page < self.total_pages:
            self.page += 1
        return self.current_page()

    def previous_page(self) -> Page:
        if self.page > 1:
            self.page -= 1
        return self.current_page()

    def go_to(self, page: int) -> Page:
        result = paginate(self.filtered, page, page_size=self.page_size)
        self.page = result.page
        return result
