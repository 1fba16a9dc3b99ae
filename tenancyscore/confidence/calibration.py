import math

from tenancyscore.models.scores import ConfidenceInterval
from tenancyscore.models.taxonomy import AnalysisDepth
from tenancyscore.scoring.utils import clamp_score, round_half_up, to_score

DEFAULT_SAMPLE_SIZE = 100

DEPTH_MULTIPLIERS = {
    AnalysisDepth.BASIC: 0.85,
    AnalysisDepth.STANDARD: 1.0,
    AnalysisDepth.COMPREHENSIVE: 1.15,
    AnalysisDepth.EXPERT: 1.25,
}


def _z_score(confidence: float) -> float:
    if confidence >= 95:
        return 1.96
    if confidence >= 90:
        return 1.645
    return 1.28


def calculate_confidence_interval(
    value: float,
    confidence: float,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> ConfidenceInterval:
    """
    Normal-approximation interval around a 0-100 percentage.

    standard_error = sqrt(value * (100 - value) / n) / 100
    margin = z * standard_error * 100
    """
    value = clamp_score(value)
    if not sample_size or sample_size <= 0:
        sample_size = DEFAULT_SAMPLE_SIZE

    standard_error = math.sqrt((value * (100 - value)) / sample_size) / 100
    margin = _z_score(confidence) * standard_error * 100

    return ConfidenceInterval(
        lower=to_score(value - margin),
        upper=to_score(value + margin),
        margin=round_half_up(margin, 2),
    )


def calibrate_confidence(
    base_confidence: float,
    *,
    document_quality: float,
    analysis_depth=AnalysisDepth.STANDARD,
    legal_complexity: float = 0,
    validation_performed: bool = False,
    expert_review: bool = False,
) -> int:
    """
    Adjusts a raw confidence for the conditions the analysis ran under.
    Unknown depths are treated as standard.
    """
    adjusted = clamp_score(base_confidence)

    if document_quality < 50:
        adjusted *= 0.8
    elif document_quality > 80:
        adjusted *= 1.1

    adjusted *= DEPTH_MULTIPLIERS.get(analysis_depth, 1.0)

    # Complex legal situations are harder to call
    if legal_complexity > 70:
        adjusted *= 0.9
    elif legal_complexity < 30:
        adjusted *= 1.05

    if validation_performed:
        adjusted *= 1.1
    if expert_review:
        adjusted *= 1.2

    return to_score(adjusted)
