import json
from pathlib import Path

import pytest

from rosterdb.cli import main
from rosterdb.config_loader import SourceProfile

from tests.helpers import row, sheet


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    men = [
        row(given=f"Man{i:02d}", family="Khan", position="ST" if i % 2 else "CB", country="BAN", updated="05/01/2024")
        for i in range(17)
    ]
    (tmp_path / "mens.csv").write_text(sheet(men), encoding="utf-8")
    return tmp_path


def test_browse_prints_page_and_counts(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "browse", "mens", "--page", "2"])

    out = capsys.readouterr().out
    assert "Showing 16-17 of 17 players" in out
    assert "Page 2 of 2" in out


def test_browse_json_with_filters(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "browse", "MENS", "--position", "ST", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["total_players"] == 8
    assert payload["total_pages"] == 1
    assert all(fields[2] == "ST" for fields in payload["players"])


def test_browse_page_out_of_range_exits(data_dir: Path):
    with pytest.raises(SystemExit, match="page 5 not found"):
        main(["--data-dir", str(data_dir), "browse", "MENS", "--page", "5"])


def test_unknown_cohort_exits(data_dir: Path):
    with pytest.raises(SystemExit, match="unknown cohort"):
        main(["--data-dir", str(data_dir), "browse", "SENIORS"])


def test_options_lists_vocabulary(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "options", "MENS"])

    out = capsys.readouterr().out
    assert "Positions: CB, ST" in out
    assert "Countries: BAN" in out


def test_stats_reports_missing_cohort_and_totals(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "stats", "--json"])

    captured = capsys.readouterr()
    assert "Women data file (women.csv) not found" in captured.err
    payload = json.loads(captured.out)
    assert len(payload["notices"]) == 1
    assert payload["notices"][0].startswith("Women data file (women.csv) not found")
    men, women = payload["cohorts"]
    assert men["total"] == 17
    assert men["positions"]["Forwards"] == 8
    assert men["positions"]["Defenders"] == 9
    assert women["total"] == 0
    assert payload["last_updated"] == "May 1, 2024"


def test_stats_table(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "stats"])

    out = capsys.readouterr().out
    assert "Players" in out
    assert "NT: Bangladesh" in out
    assert "Last updated: May 1, 2024" in out


def test_profile_overrides_sources(tmp_path: Path, data_dir: Path, capsys):
    profile_path = tmp_path / "profile.json"
    SourceProfile(sources={"WOMENS": str(data_dir / "mens.csv")}, home_nt_code="IND").save(profile_path)

    main(["--data-dir", str(data_dir), "--profile", str(profile_path), "stats", "--json"])

    payload = json.loads(capsys.readouterr().out)
    women = payload["cohorts"][1]
    assert women["total"] == 17
    assert women["nt_status"]["HomeNT"] == 0
    assert women["nt_status"]["OtherNT"] == 17


def test_save_profile_round_trips_sources(tmp_path: Path, data_dir: Path, capsys):
    saved = tmp_path / "saved.json"

    main([
        "--data-dir", str(data_dir),
        "--source", "WOMENS=women-2025.csv",
        "--save-profile", str(saved),
        "options", "MENS",
    ])

    profile = SourceProfile.load(saved)
    assert profile.sources == {"WOMENS": "women-2025.csv"}
    assert "Saved source profile" in capsys.readouterr().err


def test_browse_json_for_missing_cohort_stays_valid(data_dir: Path, capsys):
    main(["--data-dir", str(data_dir), "browse", "WOMENS", "--json"])

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["total_players"] == 0
    assert payload["total_pages"] == 1
    assert payload["notice"].startswith("Women data file (women.csv) not found")
    assert "Women data file" in captured.err


def test_stats_with_malformed_source_url_keeps_other_cohort(data_dir: Path, capsys):
    main([
        "--data-dir", str(data_dir),
        "--source", "WOMENS=https://example.org:notaport/w.csv",
        "stats", "--json",
    ])

    payload = json.loads(capsys.readouterr().out)
    men, women = payload["cohorts"]
    assert men["total"] == 17
    assert women["total"] == 0
    assert len(payload["notices"]) == 1
