"""Helpers to retrieve roster sheets and emit sorted datasets."""

from __future__ import annotations

import asyncio
import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import httpx

from rosterdb.config import CohortConfig, resolve_source
from rosterdb.ingest.parser import DEFAULT_SEPARATOR, parse_rows
from rosterdb.models import SCHEMA_WIDTH, Dataset, PlayerRecord, SchemaMismatch


logger = logging.getLogger(__name__)

HEADER_LABEL = "Given Names(s)"
_HEADER_TOKEN = "Given Names"
DEFAULT_TIMEOUT = 10.0


class SourceUnavailable(RuntimeError):
    """Raised when a roster source cannot be retrieved."""

    def __init__(self, source: str, reason: str, *, label: str | None = None):
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason
        self.label = label

    @property
    def notice(self) -> str:
        name = Path(self.source).name or self.source
        prefix = f"{self.label} data file" if self.label else "Data file"
        return f"{prefix} ({name}) not found. Showing an empty table."


def mismatch_notice(label: str | None, source: str, exc: SchemaMismatch) -> str:
    prefix = f"{label} data file" if label else "Data file"
    return f"{prefix} ({Path(source).name}) does not match the roster schema: {exc}"


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_text(
    source: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> str:
    """Read raw sheet text from a local path or an http(s) URL."""

    if not _is_url(source):
        try:
            return Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(source, str(exc)) from exc

    try:
        if client is not None:
            resp = client.get(source, timeout=timeout)
        else:
            resp = httpx.get(source, timeout=timeout)
        resp.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise SourceUnavailable(source, str(exc)) from exc
    return resp.text


async def fetch_text_async(
    source: str,
    *,
    client: httpx.AsyncClient,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    if not _is_url(source):
        return await asyncio.to_thread(fetch_text, source, timeout=timeout)

    try:
        resp = await client.get(source, timeout=timeout)
        resp.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise SourceUnavailable(source, str(exc)) from exc
    return resp.text


def is_header_row(row: Sequence[str]) -> bool:
    if not row:
        return False
    first = row[0]
    return first == HEADER_LABEL or _HEADER_TOKEN in first


def strip_header(rows: List[List[str]]) -> List[List[str]]:
    if rows and is_header_row(rows[0]):
        logger.debug("Dropping header row %r", rows[0][:3])
        return rows[1:]
    return rows


def collation_key(value: str) -> tuple[str, str]:
    """Accent- and case-insensitive ordering key with the raw value as tie-break."""

    decomposed = unicodedata.normalize("NFKD", value)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, value


def rows_to_records(rows: Iterable[Sequence[str]], *, strict: bool = False) -> List[PlayerRecord]:
    return [PlayerRecord.from_fields(row, strict=strict) for row in rows]


def build_dataset(
    text: str,
    *,
    cohort: str = "",
    source: str | None = None,
    separator: str = DEFAULT_SEPARATOR,
    strict: bool = False,
) -> Dataset:
    """Parse sheet text into a dataset sorted by each row's sort key."""

    rows = strip_header(parse_rows(text, separator))
    records = rows_to_records(rows, strict=strict)
    records.sort(key=lambda record: collation_key(record.sort_key))

    padded = sum(1 for row in rows if len(row) < SCHEMA_WIDTH)
    if padded:
        logger.warning(
            "%d of %d rows in %s have fewer than %d fields; missing columns left blank",
            padded,
            len(rows),
            source or cohort or "<text>",
            SCHEMA_WIDTH,
        )
    return Dataset(cohort=cohort, players=tuple(records), source=source, padded_rows=padded)


def load_dataset(
    source: str,
    *,
    cohort: str = "",
    label: str | None = None,
    separator: str = DEFAULT_SEPARATOR,
    strict: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.Client | None = None,
) -> Dataset:
    """Retrieve, parse and sort one roster source.

    Raises ``SourceUnavailable`` when the source cannot be read; callers are
    expected to fall back to ``Dataset.empty``.
    """

    try:
        text = fetch_text(source, timeout=timeout, client=client)
    except SourceUnavailable as exc:
        exc.label = label
        raise
    dataset = build_dataset(text, cohort=cohort, source=source, separator=separator, strict=strict)
    logger.info("Loaded %d %s players from %s", len(dataset), label or cohort or "roster", source)
    return dataset


@dataclass(frozen=True)
class CohortLoad:
    cohort: CohortConfig
    dataset: Dataset
    notice: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.notice is None


async def _load_one(
    cohort: CohortConfig,
    *,
    client: httpx.AsyncClient,
    data_dir: str | Path | None,
    separator: str,
    timeout: float,
) -> CohortLoad:
    source = resolve_source(cohort.source, data_dir)
    try:
        text = await fetch_text_async(source, client=client, timeout=timeout)
        dataset = build_dataset(
            text,
            cohort=cohort.key,
            source=source,
            separator=separator,
            strict=cohort.strict,
        )
    except SourceUnavailable as exc:
        exc.label = cohort.label
        logger.warning("%s data unavailable: %s", cohort.label, exc)
        return CohortLoad(cohort=cohort, dataset=Dataset.empty(cohort.key, source), notice=exc.notice)
    except SchemaMismatch as exc:
        logger.warning("%s data rejected: %s", cohort.label, exc)
        notice = mismatch_notice(cohort.label, source, exc)
        return CohortLoad(cohort=cohort, dataset=Dataset.empty(cohort.key, source), notice=notice)

    logger.info("Loaded %d %s players from %s", len(dataset), cohort.label, source)
    return CohortLoad(cohort=cohort, dataset=dataset)


async def load_cohorts(
    cohorts: Sequence[CohortConfig],
    *,
    data_dir: str | Path | None = None,
    separator: str = DEFAULT_SEPARATOR,
    timeout: float = DEFAULT_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> List[CohortLoad]:
    """Load every cohort concurrently; a failed source degrades to an empty dataset."""

    async def _run(active: httpx.AsyncClient) -> List[CohortLoad]:
        tasks = [
            _load_one(
                cohort,
                client=active,
                data_dir=data_dir,
                separator=separator,
                timeout=timeout,
            )
            for cohort in cohorts
        ]
        return list(await asyncio.gather(*tasks))

    if client is not None:
        return await _run(client)
    async with httpx.AsyncClient() as active:
        return await _run(active)


def load_all_cohorts(cohorts: Sequence[CohortConfig], **kwargs) -> List[CohortLoad]:
    return asyncio.run(load_cohorts(cohorts, **kwargs))
