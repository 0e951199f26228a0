from __future__ import annotations

import logging
import uuid
from typing import Optional

from ..config import DEFAULT_CONFIG, SprintConfig
from ..metrics.scores import cadence_score, hr_score, hrd_score
from ..models.types import SprintData, ValidationResult

logger = logging.getLogger(__name__)


def _to_points(fraction: float) -> float:
    return float(min(100.0, max(0.0, fraction * 100.0)))


class SprintValidator:
    """Decide whether a sprint attempt shows genuine sprint-level effort.

    Holds only its (immutable) config, so one instance can be shared freely
    across threads or created per call.
    """

    def __init__(self, config: Optional[SprintConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG

    def composite_score(self, hr_points: float, cadence_points: float, hrd_points: float) -> float:
        cfg = self.config
        total = hr_points * cfg.hr_weight + cadence_points * cfg.cadence_weight + hrd_points * cfg.hrd_weight
        return float(min(100.0, max(0.0, total)))

    def validate(self, sprint_data: SprintData, max_hr: int, sprint_id: Optional[str] = None) -> ValidationResult:
        cfg = self.config
        hr_points = _to_points(hr_score(sprint_data, max_hr, cfg))
        cadence_points = _to_points(cadence_score(sprint_data, cfg))
        hrd_points = _to_points(hrd_score(sprint_data, cfg))

        total = self.composite_score(hr_points, cadence_points, hrd_points)
        is_valid = total >= cfg.validation_threshold

        logger.debug(
            f"Sprint scores hr={hr_points:.1f} cadence={cadence_points:.1f} hrd={hrd_points:.1f} "
            f"total={total:.1f} valid={is_valid} (samples hr={len(sprint_data.hr_samples)}, "
            f"cadence={len(sprint_data.cadence_samples)}, max_hr={max_hr})"
        )

        return ValidationResult(
            hr_score=hr_points,
            cadence_score=cadence_points,
            hrd_score=hrd_points,
            validation_score=total,
            is_valid=is_valid,
            baseline_hr=sprint_data.baseline_hr,
            peak_hr=sprint_data.peak_hr,
            peak_cadence=sprint_data.peak_cadence,
            average_cadence=sprint_data.average_cadence,
            duration_s=sprint_data.duration_s,
            start_time=sprint_data.start_time,
            end_time=sprint_data.end_time,
            sprint_id=sprint_id or uuid.uuid4().hex,
        )


def validate_sprint(sprint_data: SprintData, max_hr: int, config: Optional[SprintConfig] = None) -> ValidationResult:
    return SprintValidator(config).validate(sprint_data, max_hr)
