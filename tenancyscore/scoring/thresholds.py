# Severity cut points.
# The scorer and the classifier read the same WeightedScoringConfig, so a
# score produced by calculate_violation_score maps back onto a severity
# consistently.

from typing import Optional

from tenancyscore.models.scores import SeverityThresholds
from tenancyscore.models.taxonomy import SeverityLevel
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG, WeightedScoringConfig
from tenancyscore.scoring.utils import round_half_up

BASE_THRESHOLDS = SeverityThresholds(critical=85.0, serious=70.0, moderate=40.0, minor=15.0)
THRESHOLD_FLOORS = SeverityThresholds(critical=75.0, serious=60.0, moderate=30.0, minor=10.0)

MAX_ADJUSTMENT = 0.2

# Interpretation (base):
# 85+      -> critical
# 70 - 85  -> serious
# 40 - 70  -> moderate
# 15 - 40  -> minor
# < 15     -> informational


def calibrate_thresholds(
    config: WeightedScoringConfig = DEFAULT_SCORING_CONFIG,
) -> SeverityThresholds:
    """
    Shift all four cut points by one proportional adjustment.

    Higher tenant protection bias and conservatism lower the thresholds
    (findings are escalated sooner); the shift is capped at 20% and the
    floors stop thresholds from collapsing.
    """
    protection_bias = (config.tenant_protection_bias - 50) / 50
    conservatism = (config.conservatism_factor - 50) / 50

    adjustment = (protection_bias + conservatism) * 0.1
    adjustment = max(-MAX_ADJUSTMENT, min(MAX_ADJUSTMENT, adjustment))

    def shift(base: float, floor: float) -> float:
        return round_half_up(min(100.0, max(floor, base - base * adjustment)), 2)

    return SeverityThresholds(
        critical=shift(BASE_THRESHOLDS.critical, THRESHOLD_FLOORS.critical),
        serious=shift(BASE_THRESHOLDS.serious, THRESHOLD_FLOORS.serious),
        moderate=shift(BASE_THRESHOLDS.moderate, THRESHOLD_FLOORS.moderate),
        minor=shift(BASE_THRESHOLDS.minor, THRESHOLD_FLOORS.minor),
    )


def get_recommended_severity(
    score: float,
    thresholds: Optional[SeverityThresholds] = None,
) -> SeverityLevel:
    thresholds = thresholds or BASE_THRESHOLDS

    if score >= thresholds.critical:
        return SeverityLevel.CRITICAL
    if score >= thresholds.serious:
        return SeverityLevel.SERIOUS
    if score >= thresholds.moderate:
        return SeverityLevel.MODERATE
    if score >= thresholds.minor:
        return SeverityLevel.MINOR
    return SeverityLevel.INFORMATIONAL
