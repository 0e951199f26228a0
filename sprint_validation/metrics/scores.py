from __future__ import annotations

from typing import Sequence

import numpy as np

from ..config import DEFAULT_CONFIG, SprintConfig
from ..models.types import SprintData


def _clamp01(value: float) -> float:
    if not np.isfinite(value):
        return 0.0
    return float(min(1.0, max(0.0, value)))


def elevated_fraction(hr_samples: Sequence[float], baseline_hr: float, offset_bpm: float) -> float:
    """Share of HR samples at or above baseline + offset."""
    if len(hr_samples) == 0:
        return 0.0
    arr = np.asarray(hr_samples, dtype=float)
    return float(np.mean(arr >= float(baseline_hr) + offset_bpm))


def hr_increase_component(peak_hr: float, baseline_hr: float, config: SprintConfig = DEFAULT_CONFIG) -> float:
    """Rise over baseline as a share of the required increase, capped at 1.

    Not floored: a peak below baseline goes negative and pulls the HR score
    down. Only the combined HR score is clamped.
    """
    # Denominator is a constant, so a zero baseline is safe
    return float(min(1.0, (peak_hr - baseline_hr) / config.min_hr_increase_bpm))


def hr_zone_component(peak_hr: float, max_hr: float, config: SprintConfig = DEFAULT_CONFIG) -> float:
    """Credit for reaching the target zone, partial credit as peak / target."""
    target = config.target_hr_zone_fraction * float(max_hr or 0)
    if target <= 0:
        return 0.0
    if peak_hr >= target:
        return 1.0
    return _clamp01(peak_hr / target)


def hr_score(data: SprintData, max_hr: float, config: SprintConfig = DEFAULT_CONFIG) -> float:
    """Heart-rate score in [0, 1].

    Increase over baseline and target-zone credit are weighted equally; the
    time spent elevated (baseline + offset) fills the rest, so sustained effort
    beats a single spike with the same peak.
    """
    if not data.hr_samples:
        return 0.0
    increase = hr_increase_component(data.peak_hr, data.baseline_hr, config)
    zone = hr_zone_component(data.peak_hr, max_hr, config)
    elevated = elevated_fraction(data.hr_samples, data.baseline_hr, config.elevated_hr_offset_bpm)
    elevated_score = _clamp01(elevated / config.min_time_elevated_fraction)
    w = config.hr_component_weight
    return _clamp01(increase * w + zone * w + elevated_score * config.elevated_time_weight)


def pre_sprint_cadence(cadence_samples: Sequence[float], n_samples: int) -> float:
    head = list(cadence_samples[:n_samples])
    return float(np.mean(head)) if head else 0.0


def cadence_score(data: SprintData, config: SprintConfig = DEFAULT_CONFIG) -> float:
    """Cadence score in [0, 1]: relative increase and peak target, half each.

    The increase half is skipped (not penalized) when the opening cadence is 0.
    """
    if not data.cadence_samples:
        return 0.0
    score = 0.0
    pre = pre_sprint_cadence(data.cadence_samples, config.pre_cadence_samples)
    if pre > 0:
        increase_pct = (data.peak_cadence - pre) / pre
        score += _clamp01(increase_pct / config.min_cadence_increase_fraction) * 0.5
    score += _clamp01(data.peak_cadence / config.target_peak_cadence_spm) * 0.5
    return _clamp01(score)


def max_hr_rise(hr_samples: Sequence[float], window: int) -> float:
    """Largest consecutive-sample rise within the first ``window`` samples."""
    head = np.asarray(hr_samples[:window], dtype=float)
    if head.size < 2:
        return 0.0
    return float(max(0.0, np.diff(head).max()))


def hrd_score(data: SprintData, config: SprintConfig = DEFAULT_CONFIG) -> float:
    """Rate-of-rise score in [0, 1] over the opening window of HR samples."""
    if len(data.hr_samples) < config.hrd_min_samples:
        return 0.0
    rise = max_hr_rise(data.hr_samples, config.hrd_window_samples)
    return _clamp01(rise / config.min_hr_derivative_bpm)
