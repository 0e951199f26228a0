from datetime import datetime

import numpy as np
import pytest

from sprint_validation.models.types import SprintData
from sprint_validation.validation.validator import SprintValidator

START = datetime(2025, 1, 1, 6, 0, 0)


def make_sprint(hr=(), cadence=(), baseline_hr=120, target_duration_s=35.0, **kwargs) -> SprintData:
    return SprintData(
        start_time=kwargs.pop("start_time", START),
        target_duration_s=target_duration_s,
        baseline_hr=baseline_hr,
        hr_samples=tuple(hr),
        cadence_samples=tuple(cadence),
        **kwargs,
    )


@pytest.fixture
def validator():
    return SprintValidator()


@pytest.fixture
def genuine_sprint():
    # 20 s at 1 Hz: HR climbs from 120 to 175, cadence from ~150 to ~180
    hr = np.round(np.linspace(120, 175, 20)).astype(int)
    cadence = [150, 151, 149] + list(np.round(np.linspace(155, 180, 17)).astype(int))
    return make_sprint(hr=hr, cadence=cadence, baseline_hr=120)


@pytest.fixture
def flat_sprint():
    return make_sprint(hr=[125] * 20, cadence=[150] * 20, baseline_hr=120)


@pytest.fixture
def random_sprints():
    rng = np.random.default_rng(42)
    sprints = []
    for _ in range(200):
        n_hr = int(rng.integers(0, 40))
        n_cad = int(rng.integers(0, 40))
        hr = rng.normal(140, 30, n_hr)
        cad = rng.normal(150, 40, n_cad)
        baseline = int(rng.integers(0, 200))
        sprints.append(make_sprint(hr=hr, cadence=cad, baseline_hr=baseline))
    return sprints


@pytest.fixture
def sprint_factory():
    return make_sprint
