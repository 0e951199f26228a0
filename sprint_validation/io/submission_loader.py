from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd

from ..config import DEFAULT_MAX_HR
from ..models.athlete_profile import estimate_max_hr
from ..models.types import SprintData

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".jsonl", ".csv")


@dataclass(frozen=True)
class SprintSubmission:
    sprint_id: str
    athlete: Optional[str]
    data: SprintData
    max_hr: int


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _normalize_ts(value: Any) -> Optional[datetime]:
    """Parse a timestamp to naive UTC, matching how sample timelines are stored."""
    if _is_missing(value):
        return None
    ts = pd.to_datetime(value, utc=True)
    return ts.tz_localize(None).to_pydatetime()


def _parse_samples(value: Any) -> List[float]:
    if _is_missing(value):
        return []
    if isinstance(value, str):
        parts = [p.strip() for p in value.replace(",", ";").split(";")]
        return [float(p) for p in parts if p]
    if np.isscalar(value):
        return [float(value)]
    return [float("nan") if v is None else float(v) for v in value]


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix == ".jsonl":
        with open(path, "r") as f:
            records = [json.loads(line) for line in f if line.strip()]
        return pd.DataFrame.from_records(records)
    if suffix == ".json":
        with open(path, "r") as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            payload = payload.get("submissions", [payload])
        return pd.DataFrame.from_records(payload)
    raise ValueError(f"Unsupported submission file type: {path.suffix} (expected one of {SUPPORTED_SUFFIXES})")


def _resolve_max_hr(
    row: Dict[str, Any],
    athlete: Optional[str],
    default_max_hr: int,
    max_hr_for_athlete: Optional[Callable[[str], int]],
) -> int:
    if not _is_missing(row.get("max_hr")):
        return int(row["max_hr"])
    if not _is_missing(row.get("age")):
        return estimate_max_hr(float(row["age"]))
    if athlete and max_hr_for_athlete is not None:
        return int(max_hr_for_athlete(athlete))
    return int(default_max_hr)


def row_to_submission(
    row: Dict[str, Any],
    default_max_hr: int = DEFAULT_MAX_HR,
    max_hr_for_athlete: Optional[Callable[[str], int]] = None,
) -> SprintSubmission:
    """Build a submission from one flat record.

    Recognized keys: sprint_id, athlete, start_time, end_time, target_duration_s,
    baseline_hr, hr_samples, cadence_samples, max_hr, age.
    """
    athlete = None if _is_missing(row.get("athlete")) else str(row["athlete"])
    sprint_id = uuid.uuid4().hex if _is_missing(row.get("sprint_id")) else str(row["sprint_id"])
    baseline = row.get("baseline_hr")
    target = row.get("target_duration_s")
    data = SprintData(
        start_time=_normalize_ts(row.get("start_time")),
        end_time=_normalize_ts(row.get("end_time")),
        target_duration_s=0.0 if _is_missing(target) else float(target),
        baseline_hr=0 if _is_missing(baseline) else int(float(baseline)),
        hr_samples=_parse_samples(row.get("hr_samples")),
        cadence_samples=_parse_samples(row.get("cadence_samples")),
    )
    max_hr = _resolve_max_hr(row, athlete, default_max_hr, max_hr_for_athlete)
    return SprintSubmission(sprint_id=sprint_id, athlete=athlete, data=data, max_hr=max_hr)


def load_submissions(
    file_path: str,
    default_max_hr: int = DEFAULT_MAX_HR,
    max_hr_for_athlete: Optional[Callable[[str], int]] = None,
) -> List[SprintSubmission]:
    """Load sprint submissions from a .json, .jsonl or .csv file.

    CSV sample columns hold ';'-separated readings. Records that cannot be
    parsed are logged and skipped.
    """
    path = Path(file_path)
    df = _read_frame(path)
    submissions: List[SprintSubmission] = []
    for idx, row in enumerate(df.to_dict(orient="records")):
        try:
            submissions.append(row_to_submission(row, default_max_hr, max_hr_for_athlete))
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping record {idx} in {path.name}: {e}")
    logger.info(f"Loaded {len(submissions)} submissions from {path}")
    return submissions
