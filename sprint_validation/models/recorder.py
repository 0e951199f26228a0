from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional

from .types import SprintData, to_naive_utc


def _utcnow() -> datetime:
    # Naive UTC, same convention as loaded submissions
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SprintRecorder:
    """Accumulates live sensor readings for one sprint.

    The recorder is the only mutable piece; ``freeze()`` hands back an
    immutable SprintData for validation. All timestamps are kept as naive UTC.
    """

    def __init__(
        self,
        baseline_hr: int,
        target_duration_s: float,
        start_time: Optional[datetime] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._clock = clock
        self.baseline_hr = int(baseline_hr)
        self.target_duration_s = float(target_duration_s)
        self.start_time = to_naive_utc(start_time) if start_time is not None else self._now()
        self.hr_samples: List[float] = []
        self.cadence_samples: List[float] = []

    def _now(self) -> datetime:
        return to_naive_utc(self._clock())

    def add_sample(self, hr: Optional[float] = None, cadence: Optional[float] = None) -> None:
        # Streams are independent; a missing reading only skips that stream
        if hr is not None:
            self.hr_samples.append(float(hr))
        if cadence is not None:
            self.cadence_samples.append(float(cadence))

    @property
    def peak_hr(self) -> float:
        return max(self.hr_samples, default=0.0)

    @property
    def peak_cadence(self) -> float:
        return max(self.cadence_samples, default=0.0)

    @property
    def elapsed_s(self) -> float:
        return max(0.0, (self._now() - self.start_time).total_seconds())

    @property
    def remaining_s(self) -> float:
        return max(0.0, self.target_duration_s - self.elapsed_s)

    @property
    def progress(self) -> float:
        if self.target_duration_s <= 0:
            return 1.0
        return min(1.0, self.elapsed_s / self.target_duration_s)

    def is_in_final_seconds(self, seconds: float = 5.0) -> bool:
        remaining = self.remaining_s
        return 0.0 < remaining <= seconds

    def freeze(self, end_time: Optional[datetime] = None) -> SprintData:
        # Peaks are re-derived from the samples by SprintData
        return SprintData(
            start_time=self.start_time,
            target_duration_s=self.target_duration_s,
            baseline_hr=self.baseline_hr,
            hr_samples=tuple(self.hr_samples),
            cadence_samples=tuple(self.cadence_samples),
            end_time=end_time if end_time is not None else self._now(),
        )
