from __future__ import annotations

from typing import Dict, List

import pandas as pd

SUMMARY_COLUMNS = [
    "athlete",
    "date",
    "attempts",
    "valid_sprints",
    "pass_rate_pct",
    "mean_validation_score",
    "best_validation_score",
    "mean_hr_score",
    "mean_cadence_score",
    "mean_hrd_score",
]


def summarize_results(rows: List[Dict]) -> pd.DataFrame:
    """Per-athlete, per-day sprint validation summary.

    Expects rows shaped like ``storage.export.results_to_rows``. Sprints with no
    start time are grouped under a missing date.
    """
    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df["athlete"] = df["athlete"].fillna("unknown")
    df["date"] = pd.to_datetime(df["start_time"], errors="coerce").dt.date
    df["is_valid"] = df["is_valid"].astype(bool)
    grouped = df.groupby(["athlete", "date"], dropna=False).agg(
        attempts=("sprint_id", "count"),
        valid_sprints=("is_valid", "sum"),
        mean_validation_score=("validation_score", "mean"),
        best_validation_score=("validation_score", "max"),
        mean_hr_score=("hr_score", "mean"),
        mean_cadence_score=("cadence_score", "mean"),
        mean_hrd_score=("hrd_score", "mean"),
    ).reset_index()
    grouped["valid_sprints"] = grouped["valid_sprints"].astype(int)
    grouped["pass_rate_pct"] = grouped["valid_sprints"] / grouped["attempts"] * 100.0
    return grouped[SUMMARY_COLUMNS]
