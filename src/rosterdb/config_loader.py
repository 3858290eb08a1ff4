"""Persist and load source profiles for the CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Optional

from rosterdb.config import StatsOptions


@dataclass
class SourceProfile:
    sources: Dict[str, str] = field(default_factory=dict)
    home_nt_code: Optional[str] = None
    unattached_marker: Optional[str] = None

    @classmethod
    def load(cls, path: Path) -> "SourceProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            sources=data.get("sources", {}),
            home_nt_code=data.get("home_nt_code"),
            unattached_marker=data.get("unattached_marker"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "sources": self.sources,
            "home_nt_code": self.home_nt_code,
            "unattached_marker": self.unattached_marker,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def stats_options(self, base: StatsOptions | None = None) -> StatsOptions:
        options = base or StatsOptions()
        update = {}
        if self.home_nt_code:
            update["home_nt_code"] = self.home_nt_code
        if self.unattached_marker:
            update["unattached_marker"] = self.unattached_marker
        return replace(options, **update) if update else options
