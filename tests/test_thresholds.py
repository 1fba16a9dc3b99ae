import pytest

from tenancyscore.models.taxonomy import SeverityLevel
from tenancyscore.scoring import thresholds as thresholds_module
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG
from tenancyscore.scoring.thresholds import (
    BASE_THRESHOLDS,
    THRESHOLD_FLOORS,
    calibrate_thresholds,
    get_recommended_severity,
)
from tenancyscore.scoring.utils import round_half_up


def _as_tuple(thresholds):
    return (thresholds.critical, thresholds.serious, thresholds.moderate, thresholds.minor)


def test_neutral_settings_return_base_thresholds():
    config = DEFAULT_SCORING_CONFIG.with_overrides(
        tenant_protection_bias=50, conservatism_factor=50
    )
    assert calibrate_thresholds(config) == BASE_THRESHOLDS


def test_default_settings_lower_thresholds():
    # adjustment = (0.5 + 0.6) x 0.1 = 0.11
    thresholds = calibrate_thresholds()

    assert thresholds.critical == pytest.approx(75.65)
    assert thresholds.serious == pytest.approx(62.3)
    assert thresholds.moderate == pytest.approx(35.6)
    assert thresholds.minor == pytest.approx(13.35)


def test_maximum_bias_and_conservatism_respect_floors():
    config = DEFAULT_SCORING_CONFIG.with_overrides(
        tenant_protection_bias=100, conservatism_factor=100
    )
    thresholds = calibrate_thresholds(config)

    for value, floor, base in zip(
        _as_tuple(thresholds), _as_tuple(THRESHOLD_FLOORS), _as_tuple(BASE_THRESHOLDS)
    ):
        assert floor <= value < base

    assert _as_tuple(thresholds) == pytest.approx((75.0, 60.0, 32.0, 12.0))


def test_minimum_settings_raise_thresholds_but_cap_at_100():
    config = DEFAULT_SCORING_CONFIG.with_overrides(
        tenant_protection_bias=0, conservatism_factor=0
    )
    thresholds = calibrate_thresholds(config)

    assert thresholds.critical == 100.0
    assert thresholds.serious == pytest.approx(84.0)
    assert thresholds.moderate == pytest.approx(48.0)
    assert thresholds.minor == pytest.approx(18.0)


def test_thresholds_stay_ordered_across_settings():
    for bias in (0, 25, 50, 75, 100):
        for conservatism in (0, 50, 100):
            config = DEFAULT_SCORING_CONFIG.with_overrides(
                tenant_protection_bias=bias, conservatism_factor=conservatism
            )
            t = calibrate_thresholds(config)
            assert t.critical > t.serious > t.moderate > t.minor


def test_recommended_severity_uses_base_thresholds_by_default():
    assert get_recommended_severity(90) == SeverityLevel.CRITICAL
    assert get_recommended_severity(85) == SeverityLevel.CRITICAL
    assert get_recommended_severity(70) == SeverityLevel.SERIOUS
    assert get_recommended_severity(50) == SeverityLevel.MODERATE
    assert get_recommended_severity(15) == SeverityLevel.MINOR
    assert get_recommended_severity(5) == SeverityLevel.INFORMATIONAL


def test_recommended_severity_with_calibrated_thresholds():
    thresholds = calibrate_thresholds()
    # 80 is serious on the base scale but critical once calibrated
    assert get_recommended_severity(80) == SeverityLevel.SERIOUS
    assert get_recommended_severity(80, thresholds) == SeverityLevel.CRITICAL


def test_cut_points_round_half_up(monkeypatch):
    # Exact binary ties: builtin round() would give 39.62
    assert round_half_up(39.625, 2) == 39.63
    assert round_half_up(13.125, 2) == 13.13

    calls = []

    def recording(value, digits=0):
        calls.append(digits)
        return round_half_up(value, digits)

    monkeypatch.setattr(thresholds_module, "round_half_up", recording)
    calibrate_thresholds()

    assert calls == [2, 2, 2, 2]
