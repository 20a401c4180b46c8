import csv
import datetime as dt
import json
from pathlib import Path

from codebreaker.engine import ProblemSpace
from codebreaker.harness import run_batch, summarize, write_csv, write_manifest
from codebreaker.harness.io import build_manifest, new_run_id


def test_write_csv(tmp_path: Path):
    results = run_batch("entropy", ProblemSpace(1))
    p = write_csv(results, str(tmp_path / "out" / "run.csv"), length=1)

    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["secret"] for r in rows] == ["r", "g", "b", "y"]
    assert rows[0]["guess_1"] == "r" and rows[0]["feedback_1"] == "1"
    assert rows[0]["guess_2"] == ""
    assert rows[3]["left_3"] == "1"


def test_manifest_round_trip(tmp_path: Path):
    summary = summarize(run_batch("entropy", ProblemSpace(1)))
    manifest = build_manifest("20260101T000000Z", summary,
                              settings={"length": 1, "solver": "entropy"}, elapsed_s=0.12345)
    assert set(manifest) >= {"run_id", "revision", "settings", "summary", "num_cases", "elapsed_s"}
    assert manifest["elapsed_s"] == 0.123

    m = write_manifest(manifest, str(tmp_path / "nested" / "run_manifest.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["summary"]["worst_secret"] == "b"
    assert data["summary"]["distribution"] == {"1": 1, "2": 1, "3": 2}
    assert data["num_cases"] == 4 and data["settings"]["solver"] == "entropy"


def test_run_id_is_utc():
    local = dt.datetime(2026, 10, 19, 11, 42, 0, tzinfo=dt.timezone(dt.timedelta(hours=2)))
    assert new_run_id(local) == "20261019T094200Z"
