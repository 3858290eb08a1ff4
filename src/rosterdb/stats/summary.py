"""Per-cohort roster statistics: positions, countries, club and NT status."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from rosterdb.config import POSITION_CATEGORIES, StatsOptions
from rosterdb.config.stats import OTHER_CATEGORY, UNKNOWN_CATEGORY
from rosterdb.models import PLACEHOLDER, Dataset, PlayerRecord, is_sentinel


WITH_CLUB = "WithClub"
WITHOUT_CLUB = "WithoutClub"
HOME_NT = "HomeNT"
OTHER_NT = "OtherNT"
NO_NT = "NoNT"

# Club and NT values that mean "none"; other sentinels such as "??" still count as set.
_NO_VALUE = ("", PLACEHOLDER)


@dataclass(frozen=True)
class StatsSummary:
    """Aggregate counts for one cohort.

    Position counts can sum past ``total`` since a player listed in two
    categories counts once in each. Club and NT counts each partition the
    cohort exactly.
    """

    cohort: str
    total: int
    countries: FrozenSet[str]
    positions: Mapping[str, int]
    club_status: Optional[Mapping[str, int]] = None
    nt_status: Optional[Mapping[str, int]] = None
    options: StatsOptions = field(default_factory=StatsOptions, compare=False)

    @property
    def country_count(self) -> int:
        return len(self.countries)

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "cohort": self.cohort,
            "total": self.total,
            "countries": self.country_count,
            "positions": dict(self.positions),
        }
        if self.club_status is not None:
            payload["club_status"] = dict(self.club_status)
        if self.nt_status is not None:
            payload["nt_status"] = dict(self.nt_status)
        return payload


def categorize_position(position: str, *, exact: bool = False) -> str:
    """Map one position token to its category.

    Matching is by containment unless ``exact`` is set, so ``CM2`` counts as a
    midfielder. Categories are tried in table order and the first hit wins.
    """

    if not position or not position.strip():
        return UNKNOWN_CATEGORY
    token = position.strip().upper()
    for category, codes in POSITION_CATEGORIES.items():
        for code in codes:
            if token == code or (not exact and code in token):
                return category
    return OTHER_CATEGORY


def player_categories(player: PlayerRecord, *, exact: bool = False) -> set[str]:
    categories: set[str] = set()
    for token in player.position_list:
        if is_sentinel(token):
            continue
        category = categorize_position(token, exact=exact)
        if category not in (OTHER_CATEGORY, UNKNOWN_CATEGORY):
            categories.add(category)
    return categories


def club_status(player: PlayerRecord, options: StatsOptions) -> str:
    club = player.club.strip()
    if club == options.unattached_marker or club in _NO_VALUE:
        return WITHOUT_CLUB
    return WITH_CLUB


def nt_status(player: PlayerRecord, options: StatsOptions) -> str:
    code = player.nt_code.strip()
    if code == options.home_nt_code:
        return HOME_NT
    if code in _NO_VALUE:
        return NO_NT
    return OTHER_NT


def aggregate(
    players: Dataset | Iterable[PlayerRecord],
    options: StatsOptions | None = None,
    *,
    cohort: str | None = None,
) -> StatsSummary:
    """Compute the statistics summary for a single cohort."""

    options = options or StatsOptions()
    if cohort is None:
        cohort = players.cohort if isinstance(players, Dataset) else ""

    total = 0
    countries: set[str] = set()
    positions: Dict[str, int] = {name: 0 for name in POSITION_CATEGORIES}
    positions[OTHER_CATEGORY] = 0
    positions[UNKNOWN_CATEGORY] = 0
    clubs: Dict[str, int] = {WITH_CLUB: 0, WITHOUT_CLUB: 0}
    call_ups: Dict[str, int] = {HOME_NT: 0, OTHER_NT: 0, NO_NT: 0}

    for player in players:
        total += 1
        if not is_sentinel(player.country):
            countries.add(player.country)

        usable = [token for token in player.position_list if not is_sentinel(token)]
        if not usable:
            positions[UNKNOWN_CATEGORY] += 1
        else:
            matched = player_categories(player, exact=options.exact_positions)
            if matched:
                for category in matched:
                    positions[category] += 1
            else:
                positions[OTHER_CATEGORY] += 1

        clubs[club_status(player, options)] += 1
        call_ups[nt_status(player, options)] += 1

    return StatsSummary(
        cohort=cohort,
        total=total,
        countries=frozenset(countries),
        positions=positions,
        club_status=clubs if options.include_club_status else None,
        nt_status=call_ups if options.include_nt_status else None,
        options=options,
    )
