"""Central config for sprint validation thresholds and sprint scheduling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

# Heart rate
MIN_HR_INCREASE_BPM: float = 20.0
ELEVATED_HR_OFFSET_BPM: float = 10.0
MIN_TIME_ELEVATED_FRACTION: float = 0.70
TARGET_HR_ZONE_FRACTION: float = 0.80  # Zone 4-5 = >80% max HR

# Cadence
MIN_CADENCE_INCREASE_FRACTION: float = 0.15
TARGET_PEAK_CADENCE_SPM: float = 160.0
PRE_CADENCE_SAMPLES: int = 3

# HR derivative
MIN_HR_DERIVATIVE_BPM: float = 3.0  # per sample interval (~1 Hz)
HRD_WINDOW_SAMPLES: int = 10
HRD_MIN_SAMPLES: int = 3

# Composite
HR_WEIGHT: float = 0.50
CADENCE_WEIGHT: float = 0.35
HRD_WEIGHT: float = 0.15
VALIDATION_THRESHOLD: float = 60.0

# Sprint scheduling (seconds)
MIN_SPRINT_DURATION_S: float = 30.0
MAX_SPRINT_DURATION_S: float = 45.0
COUNTDOWN_DURATION_S: float = 3.0
RECOVERY_DURATION_S: float = 45.0

DEFAULT_MAX_HR: int = 190


@dataclass(frozen=True)
class SprintConfig:
    """Tunable thresholds and weights for sprint validation.

    HR score split: increase and zone components weigh ``hr_component_weight``
    each, the elevated-time term takes the remainder.
    """
    min_hr_increase_bpm: float = MIN_HR_INCREASE_BPM
    elevated_hr_offset_bpm: float = ELEVATED_HR_OFFSET_BPM
    min_time_elevated_fraction: float = MIN_TIME_ELEVATED_FRACTION
    target_hr_zone_fraction: float = TARGET_HR_ZONE_FRACTION
    hr_component_weight: float = 0.40

    min_cadence_increase_fraction: float = MIN_CADENCE_INCREASE_FRACTION
    target_peak_cadence_spm: float = TARGET_PEAK_CADENCE_SPM
    pre_cadence_samples: int = PRE_CADENCE_SAMPLES

    min_hr_derivative_bpm: float = MIN_HR_DERIVATIVE_BPM
    hrd_window_samples: int = HRD_WINDOW_SAMPLES
    hrd_min_samples: int = HRD_MIN_SAMPLES

    hr_weight: float = HR_WEIGHT
    cadence_weight: float = CADENCE_WEIGHT
    hrd_weight: float = HRD_WEIGHT
    validation_threshold: float = VALIDATION_THRESHOLD

    min_sprint_duration_s: float = MIN_SPRINT_DURATION_S
    max_sprint_duration_s: float = MAX_SPRINT_DURATION_S
    countdown_duration_s: float = COUNTDOWN_DURATION_S
    recovery_duration_s: float = RECOVERY_DURATION_S

    def __post_init__(self) -> None:
        total = self.hr_weight + self.cadence_weight + self.hrd_weight
        if not np.isclose(total, 1.0):
            raise ValueError(f"Score weights must sum to 1.0, got {total:.4f}")
        if not 0.0 <= self.hr_component_weight <= 0.5:
            raise ValueError("hr_component_weight must be within [0, 0.5]")
        positives = {
            "min_hr_increase_bpm": self.min_hr_increase_bpm,
            "min_time_elevated_fraction": self.min_time_elevated_fraction,
            "target_hr_zone_fraction": self.target_hr_zone_fraction,
            "min_cadence_increase_fraction": self.min_cadence_increase_fraction,
            "target_peak_cadence_spm": self.target_peak_cadence_spm,
            "min_hr_derivative_bpm": self.min_hr_derivative_bpm,
        }
        for name, value in positives.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.pre_cadence_samples < 1 or self.hrd_window_samples < 2 or self.hrd_min_samples < 2:
            raise ValueError("Sample window sizes are too small")
        if self.min_sprint_duration_s > self.max_sprint_duration_s:
            raise ValueError("min_sprint_duration_s must not exceed max_sprint_duration_s")

    @property
    def elevated_time_weight(self) -> float:
        return 1.0 - 2.0 * self.hr_component_weight

    def random_sprint_duration(self, rng: Optional[np.random.Generator] = None) -> float:
        """Draw a sprint length uniformly between the configured bounds."""
        rng = rng if rng is not None else np.random.default_rng()
        return float(rng.uniform(self.min_sprint_duration_s, self.max_sprint_duration_s))


DEFAULT_CONFIG = SprintConfig()
