import math

import pytest

from navigation.fluvial.eta_estimator import ETAEstimator
from navigation.fluvial.nav_config import NavConfig


NOW = 1_700_000_000.0


@pytest.fixture
def estimator():
    return ETAEstimator(NavConfig(min_moving_speed_mps=0.3))


def test_progress_fraction(estimator):
    assert estimator.estimate(7_500, None, 10_000, now=NOW).progress_fraction == pytest.approx(0.25)
    assert estimator.estimate(10_000, None, 10_000, now=NOW).progress_fraction == 0.0
    assert estimator.estimate(0, None, 10_000, now=NOW).progress_fraction == 1.0


def test_zero_length_route_has_no_progress_or_eta(estimator):
    result = estimator.estimate(0.0, 5.0, 0.0, now=NOW)
    assert result.progress_fraction == 0.0
    assert result.eta is None


@pytest.mark.parametrize("speed", [None, 0.0, 0.29])
def test_eta_unknown_when_not_moving(estimator, speed):
    result = estimator.estimate(5_000, speed, 10_000, now=NOW)
    assert result.eta is None
    assert result.time_remaining_s is None


def test_eta_uses_latest_speed(estimator):
    result = estimator.estimate(5_000, 5.0, 10_000, now=NOW)
    assert result.time_remaining_s == pytest.approx(1_000)
    assert result.eta == pytest.approx(NOW + 1_000)
    assert math.isfinite(result.eta) and result.eta > NOW


def test_eta_defaults_to_wall_clock(estimator):
    import time
    before = time.time()
    result = estimator.estimate(100, 1.0, 1_000)
    assert result.eta >= before + 100
