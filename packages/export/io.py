"""
Export utilities for search results.

Responsibilities:
- write_results_csv: one row per result pair (primary[, secondary]).
- write_manifest:    dump a JSON manifest with the search settings and word list report.
- describe_state:    JSON-friendly view of the criteria/options behind a search.
- timestamp_id:      stable UTC run ID string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence
import csv
import json
import datetime as dt

from packages.session.state import SearchState


def write_results_csv(results: Sequence[Sequence[str]], path: str) -> str:
    """
    Serialize search results to CSV.

    Schema (columns):
      primary                (plain search)
      primary, secondary     (chained search)

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    chained = any(len(r) > 1 for r in results)
    fields = ["primary", "secondary"] if chained else ["primary"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(fields)
        for r in results:
            w.writerow(list(r[: len(fields)]))

    return str(p)


def describe_state(state: SearchState) -> Dict:
    """Criteria and options of a search, ready for json.dump."""
    out = {
        "criteria": [
            {"letter": c.letter, "positions": list(c.positions),
             "exclusive_positions": c.exclusive_positions}
            for c in state.criteria
        ],
        "exact_length": state.exact_length,
        "excluded_letters": "".join(sorted(state.excluded_letters)),
        "chained_enabled": state.chained_enabled,
    }
    if state.chained_enabled:
        cfg = state.chained
        out["chained"] = {
            "target_position": cfg.target_position,
            "exclusive_target_position": cfg.exclusive_target_position,
            "secondary_length": cfg.secondary_length,
            "secondary_match_position": cfg.secondary_match_position,
        }
    return out


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest next to an exported result file.

    Typical keys:
      - run_id
      - search: describe_state(...)
      - wordlist: output of datasets.summarize_word_list(...)
      - num_results
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
