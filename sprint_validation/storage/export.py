from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pandas as pd

from ..models.types import ValidationResult

RESULT_COLUMNS = [
    "sprint_id",
    "athlete",
    "start_time",
    "end_time",
    "duration_s",
    "baseline_hr",
    "peak_hr",
    "peak_cadence",
    "average_cadence",
    "hr_score",
    "cadence_score",
    "hrd_score",
    "validation_score",
    "is_valid",
]


def results_to_rows(
    results: Sequence[ValidationResult],
    athletes: Optional[Sequence[Optional[str]]] = None,
) -> List[Dict]:
    rows: List[Dict] = []
    for idx, r in enumerate(results):
        rows.append(
            {
                "sprint_id": r.sprint_id,
                "athlete": athletes[idx] if athletes is not None else None,
                "start_time": r.start_time,
                "end_time": r.end_time,
                "duration_s": r.duration_s,
                "baseline_hr": r.baseline_hr,
                "peak_hr": r.peak_hr,
                "peak_cadence": r.peak_cadence,
                "average_cadence": r.average_cadence,
                "hr_score": r.hr_score,
                "cadence_score": r.cadence_score,
                "hrd_score": r.hrd_score,
                "validation_score": r.validation_score,
                "is_valid": r.is_valid,
            }
        )
    return rows


def export_results_csv(
    results: Sequence[ValidationResult],
    path: str,
    athletes: Optional[Sequence[Optional[str]]] = None,
) -> pd.DataFrame:
    df = pd.DataFrame(results_to_rows(results, athletes), columns=RESULT_COLUMNS)
    df.to_csv(path, index=False)
    return df
