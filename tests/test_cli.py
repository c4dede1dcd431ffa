"""Tests for the npd-analyze and live-pulse CLIs."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from live_pulse import cli as live_cli
from npd_engine.assembler import run_analysis
from npd_engine.cli import format_output, main, parse_args
from npd_engine.csv_input import parse_csv
from npd_engine.models import BrandName

CSV_TEXT = (
    "title,upvotes\n"
    "hard water hair fall,10\n"
    "patchy beard will not fill,4\n"
    "dandruff flakes everywhere,22\n"
)


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **kw: None)


def _write_csv(tmp_path: Path, text: str = CSV_TEXT) -> Path:
    path = tmp_path / "export.csv"
    path.write_text(text, encoding="utf-8")
    return path


# ── npd-analyze ──────────────────────────────────────────────────


def test_parse_args_defaults() -> None:
    args = parse_args(["--brand", "Man Matters", "--csv", "x.csv"])
    assert args.brand == "Man Matters"
    assert args.json_mode is False
    assert args.out is None
    assert args.verbose is False


def test_parse_args_rejects_unknown_brand() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--brand", "Acme", "--csv", "x.csv"])


def test_missing_csv_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--brand", "Man Matters", "--csv", str(tmp_path / "nope.csv")])
    assert exc.value.code == 2


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--brand", "Man Matters", "--csv", str(_write_csv(tmp_path)), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["brand"] == "Man Matters"
    assert data["mode"] == "batch"
    assert data["noData"] is False
    assert 5 <= len(data["briefs"]) <= 18
    first = data["briefs"][0]
    for key in ("conceptName", "dynamicName", "whiteSpace", "opportunityScore", "opportunityType", "evidence"):
        assert key in first
    assert "marketplaceHits" in first["evidence"]


def test_markdown_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--brand", "Man Matters", "--csv", str(_write_csv(tmp_path))])
    out = capsys.readouterr().out
    assert out.startswith("# Man Matters — NPD Decision Pipeline Report")
    assert "Hard Water Hairfall" in out


def test_bom_prefixed_csv(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bom.csv"
    path.write_text("\ufeff" + CSV_TEXT, encoding="utf-8")
    main(["--brand", "Man Matters", "--csv", str(path), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert any(b["whiteSpace"] == "Hard Water Hairfall" for b in data["briefs"])


def test_out_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "reports" / "mm.json"
    main(["--brand", "Man Matters", "--csv", str(_write_csv(tmp_path)), "--json", "--out", str(out)])
    assert capsys.readouterr().out == ""
    assert json.loads(out.read_text(encoding="utf-8"))["brand"] == "Man Matters"


def test_format_output_no_data() -> None:
    result = run_analysis(BrandName.BE_BODYWISE, parse_csv("content,score\nlaptop battery,3\n"))
    assert "No signals passed" in format_output(result, mode="md")
    assert json.loads(format_output(result, mode="json"))["briefs"] == []


# ── live-pulse ───────────────────────────────────────────────────


def test_live_offline_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def fail_post(*args: object, **kwargs: object) -> httpx.Response:
        raise AssertionError("offline run must not hit the network")

    monkeypatch.setattr(httpx, "post", fail_post)
    live_cli.main(["--brand", "Man Matters", "--offline", "--seed", "1", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "live"
    assert 5 <= len(data["briefs"]) <= 7
    for brief in data["briefs"]:
        assert 3.0 <= brief["opportunityScore"] <= 9.9


def test_live_seed_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    live_cli.main(["--brand", "Little Joys", "--offline", "--seed", "4", "--json"])
    first = json.loads(capsys.readouterr().out)
    live_cli.main(["--brand", "Little Joys", "--offline", "--seed", "4", "--json"])
    second = json.loads(capsys.readouterr().out)
    assert first["briefs"] == second["briefs"]


def test_live_without_token_falls_back(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("TAVILY_API_KEY", raising=False)
    live_cli.main(["--brand", "Be Bodywise", "--seed", "2", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["brand"] == "Be Bodywise"
    assert data["briefs"]


def test_live_http_error_falls_back(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("TAVILY_API_KEY", "test-token")

    def mock_post(*args: object, **kwargs: object) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    monkeypatch.setattr(httpx, "post", mock_post)
    live_cli.main(["--brand", "Man Matters", "--seed", "3"])
    out = capsys.readouterr().out
    assert out.startswith("# Man Matters — NPD Decision Pipeline Report")
