"""Canonical player models shared across ingestion, query and stats layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from pydantic import BaseModel
from pydantic.config import ConfigDict


PLACEHOLDER = "-"

# Values the source sheets use for "unknown".
SENTINELS = frozenset({"??", "Unknown", "Status Unknown", PLACEHOLDER})

# Column positions in the source sheet. The sort key is always the last column.
GIVEN_NAME = 0
FAMILY_NAME = 1
POSITION = 2
BIRTH_YEAR = 3
CLUB = 8
COUNTRY = 9
NT_CODE = 12
LAST_UPDATED = 16
SCHEMA_WIDTH = 18


def is_sentinel(value: str | None) -> bool:
    """Return True for blank values and placeholders meaning "unknown"."""

    if value is None:
        return True
    text = value.strip()
    return not text or text in SENTINELS


class SchemaMismatch(ValueError):
    """Raised when a row has fewer columns than the roster schema requires."""

    def __init__(self, width: int, required: int = SCHEMA_WIDTH):
        super().__init__(f"row has {width} fields, schema requires {required}")
        self.width = width
        self.required = required


class PlayerRecord(BaseModel):
    """One athlete row with named accessors over the positional sheet columns."""

    given_name: str
    family_name: str
    position: str
    birth_year: str
    club: str
    country: str
    nt_code: str
    last_updated: str
    sort_key: str
    columns: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_fields(cls, fields: Sequence[str], *, strict: bool = False) -> "PlayerRecord":
        values = list(fields)
        if len(values) < SCHEMA_WIDTH:
            if strict:
                raise SchemaMismatch(len(values))
            sort_key = values[-1] if values else ""
            values += [""] * (SCHEMA_WIDTH - len(values))
        else:
            sort_key = values[-1]
        return cls(
            given_name=values[GIVEN_NAME],
            family_name=values[FAMILY_NAME],
            position=values[POSITION],
            birth_year=values[BIRTH_YEAR],
            club=values[CLUB],
            country=values[COUNTRY],
            nt_code=values[NT_CODE],
            last_updated=values[LAST_UPDATED],
            sort_key=sort_key,
            columns=tuple(fields),
        )

    @property
    def full_name(self) -> str:
        return f"{self.given_name} {self.family_name}"

    @property
    def position_list(self) -> List[str]:
        return [token.strip() for token in self.position.split(",") if token.strip()]

    def display_fields(self) -> List[str]:
        """Visible columns (sort key dropped) with blanks shown as the placeholder."""

        visible = self.columns[:-1] if len(self.columns) > 1 else self.columns
        return [value or PLACEHOLDER for value in visible]


@dataclass(frozen=True)
class Dataset:
    """Ordered, immutable collection of one cohort's players."""

    cohort: str
    players: Tuple[PlayerRecord, ...] = ()
    source: str | None = None
    padded_rows: int = field(default=0, compare=False)

    @classmethod
    def empty(cls, cohort: str, source: str | None = None) -> "Dataset":
        return cls(cohort=cohort, players=(), source=source)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self.players)

    def __getitem__(self, index):
        return self.players[index]
