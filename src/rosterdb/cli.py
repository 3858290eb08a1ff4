"""Command-line interface for browsing and summarizing roster sheets."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from rosterdb.config import (
    POSITION_REPORT_ORDER,
    CohortConfig,
    StatsOptions,
    apply_source_overrides,
    get_cohort,
    iter_cohorts,
)
from rosterdb.config_loader import SourceProfile
from rosterdb.ingest import load_all_cohorts
from rosterdb.query import FilterCriteria, PageOutOfRange, RosterBrowser
from rosterdb.stats import (
    HOME_NT,
    NO_NT,
    OTHER_NT,
    WITH_CLUB,
    WITHOUT_CLUB,
    aggregate,
    latest_update_label,
)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and summarize athlete rosters")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory holding roster CSVs")
    parser.add_argument("--profile", type=Path, default=None, help="Load source profile JSON")
    parser.add_argument("--save-profile", type=Path, default=None, help="Save source profile JSON")
    parser.add_argument(
        "--source",
        action="append",
        default=[],
        help="Override a cohort source (e.g., MENS=https://example.org/mens.csv)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log loader progress")
    sub = parser.add_subparsers(dest="command", required=True)

    browse = sub.add_parser("browse", help="Filter and page through one cohort")
    browse.add_argument("cohort", help="Cohort key (e.g., MENS, WOMENS)")
    browse.add_argument("--name", default="", help="Case-insensitive name substring")
    browse.add_argument("--position", default=None, help="Exact position code")
    browse.add_argument("--year", default=None, help="Exact birth year")
    browse.add_argument("--country", default=None, help="Exact country")
    browse.add_argument("--page", type=int, default=1, help="1-based page number")
    browse.add_argument("--json", action="store_true", help="Emit JSON instead of a table")

    options = sub.add_parser("options", help="List filter choices for one cohort")
    options.add_argument("cohort", help="Cohort key (e.g., MENS, WOMENS)")

    stats = sub.add_parser("stats", help="Summarize every cohort")
    stats.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid source entry '{entry}', expected COHORT=source")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _resolve_cohort(key: str, cohorts: Sequence[CohortConfig]) -> CohortConfig:
    try:
        base = get_cohort(key)
    except KeyError:
        known = ", ".join(cohort.key for cohort in iter_cohorts())
        raise SystemExit(f"unknown cohort {key!r} (choose from {known})") from None
    return next(cohort for cohort in cohorts if cohort.key == base.key)


def _run_browse(args: argparse.Namespace, cohort: CohortConfig) -> None:
    browser = RosterBrowser.for_cohort(cohort, data_dir=args.data_dir)
    if browser.notice:
        print(browser.notice, file=sys.stderr)
    browser.apply(
        FilterCriteria(
            name=args.name,
            position=args.position or None,
            birth_year=args.year or None,
            country=args.country or None,
        )
    )
    try:
        page = browser.go_to(args.page)
    except PageOutOfRange as exc:
        raise SystemExit(f"page {exc.page} not found (1-{exc.total_pages})") from None

    if args.json:
        payload = {
            "cohort": cohort.key,
            "page": page.page,
            "total_pages": page.total_pages,
            "total_players": page.total_items,
            "notice": browser.notice,
            "players": [player.display_fields() for player in page.players],
        }
        print(json.dumps(payload, indent=2))
        return

    if not page.players:
        print("No players found matching your filters")
    for player in page.players:
        print(" | ".join(player.display_fields()))
    print(page.summary_line())
    print(f"Page {page.page} of {page.total_pages}")


def _run_options(args: argparse.Namespace, cohort: CohortConfig) -> None:
    browser = RosterBrowser.for_cohort(cohort, data_dir=args.data_dir)
    if browser.notice:
        print(browser.notice, file=sys.stderr)
    vocabulary = browser.vocabulary
    print("Positions: " + ", ".join(vocabulary.positions))
    print("Birth years: " + ", ".join(vocabulary.birth_years))
    print("Countries: " + ", ".join(vocabulary.country_choices()))


def _run_stats(args: argparse.Namespace, cohorts: Sequence[CohortConfig], options: StatsOptions) -> None:
    loads = load_all_cohorts(cohorts, data_dir=args.data_dir)
    for load in loads:
        if load.notice:
            print(load.notice, file=sys.stderr)

    summaries = [aggregate(load.dataset, options) for load in loads]
    updated = latest_update_label(
        *(load.dataset for load in loads), fallback=options.last_updated_fallback
    )

    if args.json:
        payload = {
            "last_updated": updated,
            "notices": [load.notice for load in loads if load.notice],
            "cohorts": [summary.as_dict() for summary in summaries],
        }
        print(json.dumps(payload, indent=2))
        return

    labels = [load.cohort.label for load in loads]

    def row(title: str, values: Sequence[int]) -> str:
        cells = "".join(f"{value:>10,}" for value in values)
        return f"{title:<22}{cells}"

    print(f"{'':<22}" + "".join(f"{label:>10}" for label in labels))
    print(row("Players", [summary.total for summary in summaries]))
    print(row("Countries", [summary.country_count for summary in summaries]))
    for category in POSITION_REPORT_ORDER:
        print(row(category, [summary.positions.get(category, 0) for summary in summaries]))
    if options.include_club_status:
        print(row("With Club", [summary.club_status[WITH_CLUB] for summary in summaries]))
        print(row("Without Club", [summary.club_status[WITHOUT_CLUB] for summary in summaries]))
    if options.include_nt_status:
        print(row(f"NT: {options.home_nt_label}", [summary.nt_status[HOME_NT] for summary in summaries]))
        print(row("NT: Other Countries", [summary.nt_status[OTHER_NT] for summary in summaries]))
        print(row("NT: None", [summary.nt_status[NO_NT] for summary in summaries]))
    print(f"Last updated: {updated}")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    profile = SourceProfile.load(args.profile) if args.profile else SourceProfile()
    sources = profile.sources | _parse_mapping(args.source)
    options = profile.stats_options(StatsOptions())

    if args.save_profile:
        profile.sources = sources
        profile.save(args.save_profile)
        print(f"Saved source profile to {args.save_profile}", file=sys.stderr)

    cohorts = apply_source_overrides(iter_cohorts(), sources)

    if args.command == "browse":
        _run_browse(args, _resolve_cohort(args.cohort, cohorts))
    elif args.command == "options":
        _run_options(args, _resolve_cohort(args.cohort, cohorts))
    elif args.command == "stats":
        _run_stats(args, cohorts, options)


if __name__ == "__main__":
    main()
