"""Shared builders for roster rows and sheets."""

from __future__ import annotations

from rosterdb.models import SCHEMA_WIDTH, PlayerRecord

HEADER = [
    "Given Names(s)", "Family Name", "Position", "YYYY", "DOB", "Height", "Foot", "Region",
    "Club Name", "Country", "League", "Tier", "NT", "Source", "Notes", "Contact",
    "Last Update", "Sorting String",
]


def row(
    given: str = "John",
    family: str = "Doe",
    position: str = "CM",
    year: str = "2001",
    club: str = "Abahani",
    country: str = "BAN",
    nt: str = "BAN",
    updated: str = "",
    sort_key: str | None = None,
) -> list[str]:
    fields = [""] * SCHEMA_WIDTH
    fields[0] = given
    fields[1] = family
    fields[2] = position
    fields[3] = year
    fields[8] = club
    fields[9] = country
    fields[12] = nt
    fields[16] = updated
    fields[17] = sort_key if sort_key is not None else f"{family} {given}"
    return fields


def player(**kwargs) -> PlayerRecord:
    return PlayerRecord.from_fields(row(**kwargs))


def _quote(value: str) -> str:
    if any(ch in value for ch in ',"'):
        return '"' + value.replace('"', '""') + '"'
    return value


def sheet(rows: list[list[str]], *, header: bool = True) -> str:
    lines = [HEADER] + rows if header else rows
    return "\n".join(",".join(_quote(value) for value in line) for line in lines) + "\n"
