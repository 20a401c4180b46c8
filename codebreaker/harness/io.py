"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:      flatten per-secret results into a tidy CSV (one row per secret).
- build_manifest: run id, source revision, settings and summary as a dict.
- write_manifest: dump that dict as JSON.
- new_run_id:     UTC timestamp id for report file names.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional
import csv
import json
import subprocess
import datetime as dt

from .core import BatchSummary


def write_csv(results: List[Dict], path: str, length: int) -> str:
    """
    Serialize a batch of results to CSV.

    Schema (columns):
      solver, length, index, secret, guesses, time_ms,
      guess_1, feedback_1, left_1, ..., guess_K, feedback_K, left_K

    K is the largest guess count in the batch; shorter runs leave the
    trailing columns blank.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    rounds = max((r["guesses"] for r in results), default=0)
    fields = ["solver", "length", "index", "secret", "guesses", "time_ms"]
    for i in range(1, rounds + 1):
        fields += [f"guess_{i}", f"feedback_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "length": length,
                "index": r.get("index", ""),
                "secret": str(r["secret"]),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            hist = r.get("history", [])
            for i in range(1, rounds + 1):
                if i <= len(hist):
                    g, fb, left = hist[i - 1]
                    row[f"guess_{i}"] = str(g)
                    row[f"feedback_{i}"] = fb
                    row[f"left_{i}"] = left
                else:
                    row[f"guess_{i}"] = ""
                    row[f"feedback_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def summary_dict(summary: BatchSummary) -> Dict:
    """JSON-friendly view of a BatchSummary (candidates as strings)."""
    d = asdict(summary)
    d["worst_secret"] = str(summary.worst_secret)
    d["distribution"] = {str(k): v for k, v in summary.distribution.items()}
    return d


def new_run_id(now: Optional[dt.datetime] = None) -> str:
    """UTC second-resolution id used in report file names, e.g. 20261019T094200Z."""
    now = now or dt.datetime.now(dt.timezone.utc)
    return now.astimezone(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _source_revision() -> Optional[str]:
    """`git describe` of the checkout holding this package, or None outside git."""
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.run(
            ["git", "describe", "--always", "--dirty"],
            cwd=here, capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.stdout.strip() or None


def build_manifest(run_id: str, summary: BatchSummary, *, settings: Dict,
                   elapsed_s: float) -> Dict:
    """
    Everything needed to reproduce or compare a batch run: the run id,
    source revision, CLI settings, the summary and wall time.
    """
    return {
        "run_id": run_id,
        "revision": _source_revision(),
        "settings": dict(settings),
        "num_cases": summary.num_cases,
        "summary": summary_dict(summary),
        "elapsed_s": round(elapsed_s, 3),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` as indented JSON, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return str(p)
