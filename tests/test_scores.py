import pytest

from sprint_validation.config import SprintConfig
from sprint_validation.metrics.scores import (
    cadence_score,
    elevated_fraction,
    hr_increase_component,
    hr_score,
    hr_zone_component,
    hrd_score,
    max_hr_rise,
    pre_sprint_cadence,
)


def test_hr_increase_component_caps_but_goes_negative():
    assert hr_increase_component(130, 120) == pytest.approx(0.5)
    assert hr_increase_component(160, 120) == 1.0
    assert hr_increase_component(110, 120) == pytest.approx(-0.5)
    assert hr_increase_component(15, 0) == pytest.approx(0.75)


def test_hr_zone_component():
    # target = 0.8 * 190 = 152
    assert hr_zone_component(152, 190) == 1.0
    assert hr_zone_component(114, 190) == pytest.approx(0.75)
    assert hr_zone_component(150, 0) == 0.0
    assert hr_zone_component(-5, 190) == 0.0


def test_elevated_fraction_uses_inclusive_threshold():
    assert elevated_fraction([129, 130, 131, 100], 120, 10) == pytest.approx(0.5)
    assert elevated_fraction([], 120, 10) == 0.0


def test_hr_score_weights_components(sprint_factory):
    # increase 10/20, zone full, no elevated samples
    sprint = sprint_factory(hr=[120, 129, 129], baseline_hr=120, peak_hr=130)
    assert hr_score(sprint, max_hr=150) == pytest.approx(0.5 * 0.4 + 1.0 * 0.4)


def test_pre_sprint_cadence_uses_available_samples():
    assert pre_sprint_cadence([150, 160, 170, 200], 3) == pytest.approx(160.0)
    assert pre_sprint_cadence([140], 3) == pytest.approx(140.0)
    assert pre_sprint_cadence([], 3) == 0.0


def test_cadence_increase_skipped_when_opening_is_zero(sprint_factory):
    sprint = sprint_factory(cadence=[0, 0, 0, 160])
    # Only the peak half contributes
    assert cadence_score(sprint) == pytest.approx(0.5)


def test_cadence_partial_increase(sprint_factory):
    # pre 100, peak 110 -> 10% of the 15% required; peak 110/160
    sprint = sprint_factory(cadence=[100, 100, 100, 110])
    expected = (0.10 / 0.15) * 0.5 + (110 / 160) * 0.5
    assert cadence_score(sprint) == pytest.approx(expected)


def test_cadence_drop_not_negative(sprint_factory):
    sprint = sprint_factory(cadence=[170, 170, 170, 100])
    assert cadence_score(sprint) == pytest.approx(0.5)


def test_max_hr_rise_only_counts_rises():
    assert max_hr_rise([150, 140, 130], 10) == 0.0
    assert max_hr_rise([120, 121, 126, 127], 10) == pytest.approx(5.0)
    assert max_hr_rise([120, 121, 122, 150], 3) == pytest.approx(1.0)
    assert max_hr_rise([120], 10) == 0.0


def test_hrd_score_respects_config(sprint_factory):
    sprint = sprint_factory(hr=[120, 122, 124, 126])
    assert hrd_score(sprint) == pytest.approx(2.0 / 3.0)
    strict = SprintConfig(min_hr_derivative_bpm=4.0)
    assert hrd_score(sprint, strict) == pytest.approx(0.5)
    needs_five = SprintConfig(hrd_min_samples=5)
    assert hrd_score(sprint, needs_five) == 0.0
