from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple

import numpy as np


def _clean_samples(samples: Optional[Iterable[Any]]) -> Tuple[float, ...]:
    """Coerce a sample sequence to a tuple of finite floats.

    Missing readings (None, NaN, inf) are dropped rather than propagated.
    """
    if samples is None:
        return ()
    arr = np.asarray(list(samples), dtype=float).ravel()
    if arr.size == 0:
        return ()
    arr = arr[np.isfinite(arr)]
    return tuple(float(v) for v in arr)


def to_naive_utc(dt_val: Optional[datetime]) -> Optional[datetime]:
    """Convert aware datetimes to naive UTC; naive values are taken as UTC."""
    if dt_val is None:
        return None
    if dt_val.tzinfo is not None:
        return dt_val.astimezone(timezone.utc).replace(tzinfo=None)
    return dt_val


def _peak(samples: Tuple[float, ...]) -> float:
    return float(max(samples)) if samples else 0.0


def _mean(samples: Tuple[float, ...]) -> float:
    return float(np.mean(samples)) if samples else 0.0


@dataclass(frozen=True)
class SprintData:
    """One sprint attempt as captured on the device.

    ``peak_hr`` and ``peak_cadence`` are derived from the samples when left as
    None. Passing them explicitly is meant for tests and mocks only.
    """
    start_time: datetime
    target_duration_s: float
    baseline_hr: int
    hr_samples: Tuple[float, ...] = ()
    cadence_samples: Tuple[float, ...] = ()
    peak_hr: Optional[float] = None
    peak_cadence: Optional[float] = None
    end_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        hr = _clean_samples(self.hr_samples)
        cad = _clean_samples(self.cadence_samples)
        object.__setattr__(self, "hr_samples", hr)
        object.__setattr__(self, "cadence_samples", cad)
        object.__setattr__(self, "start_time", to_naive_utc(self.start_time))
        object.__setattr__(self, "end_time", to_naive_utc(self.end_time))
        baseline = self.baseline_hr
        if baseline is None or (isinstance(baseline, float) and not math.isfinite(baseline)):
            baseline = 0
        object.__setattr__(self, "baseline_hr", int(baseline))
        object.__setattr__(self, "target_duration_s", float(self.target_duration_s or 0.0))
        if self.peak_hr is None:
            object.__setattr__(self, "peak_hr", _peak(hr))
        else:
            object.__setattr__(self, "peak_hr", float(self.peak_hr))
        if self.peak_cadence is None:
            object.__setattr__(self, "peak_cadence", _peak(cad))
        else:
            object.__setattr__(self, "peak_cadence", float(self.peak_cadence))

    @property
    def average_cadence(self) -> float:
        return _mean(self.cadence_samples)

    @property
    def average_hr(self) -> float:
        return _mean(self.hr_samples)

    @property
    def duration_s(self) -> float:
        """Measured duration when the end is known, else the planned duration."""
        if self.end_time is not None and self.start_time is not None:
            return max(0.0, (self.end_time - self.start_time).total_seconds())
        return self.target_duration_s


@dataclass(frozen=True)
class ValidationResult:
    hr_score: float
    cadence_score: float
    hrd_score: float
    validation_score: float
    is_valid: bool
    baseline_hr: int
    peak_hr: float
    peak_cadence: float
    average_cadence: float
    duration_s: float
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    # Identity only; two evaluations of the same input compare equal
    sprint_id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
