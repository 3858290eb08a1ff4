"""Helpers for narrowing a roster by name, position, birth year and country."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from rosterdb.models import PlayerRecord, is_sentinel


@dataclass(frozen=True)
class FilterCriteria:
    """Filter configuration; empty or ``None`` values mean "no constraint"."""

    name: str = ""
    position: str | None = None
    birth_year: str | None = None
    country: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.position or self.birth_year or self.country)


@dataclass(frozen=True)
class FilterVocabulary:
    """Distinct values offered as filter choices for one dataset."""

    positions: Tuple[str, ...] = ()
    birth_years: Tuple[str, ...] = ()
    countries: Tuple[str, ...] = ()

    def country_choices(self) -> Tuple[str, ...]:
        return tuple(country for country in self.countries if not is_sentinel(country))


def _year_sort_key(year: str) -> tuple[int, int, str]:
    try:
        return 0, -int(year), year
    except ValueError:
        return 1, 0, year


def extract_vocabulary(players: Iterable[PlayerRecord]) -> FilterVocabulary:
    positions: set[str] = set()
    years: set[str] = set()
    countries: set[str] = set()

    for player in players:
        if not is_sentinel(player.position):
            positions.update(token for token in player.position_list if not is_sentinel(token))
        if not is_sentinel(player.birth_year):
            years.add(player.birth_year)
        # Kept even when blank; renderers drop sentinels via country_choices().
        countries.add(player.country)

    return FilterVocabulary(
        positions=tuple(sorted(positions)),
        birth_years=tuple(sorted(years, key=_year_sort_key)),
        countries=tuple(sorted(countries)),
    )


def _passes_criteria(player: PlayerRecord, criteria: FilterCriteria, name: str) -> bool:
    if name and name not in player.full_name.lower():
        return False
    if criteria.position and criteria.position not in player.position_list:
        return False
    if criteria.birth_year and player.birth_year != criteria.birth_year:
        return False
    if criteria.country and player.country != criteria.country:
        return False
    return True


def filter_players(
    players: Sequence[PlayerRecord] | Iterable[PlayerRecord],
    criteria: FilterCriteria,
) -> List[PlayerRecord]:
    """Return players matching every set constraint, in their original order."""

    name = criteria.name.lower()
    return [player for player in players if _passes_criteria(player, criteria, name)]


__all__ = [
    "FilterCriteria",
    "FilterVocabulary",
    "extract_vocabulary",
    "filter_players",
]
