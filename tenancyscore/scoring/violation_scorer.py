# tenancyscore/scoring/violation_scorer.py

from typing import Iterable

from tenancyscore.models.scores import ViolationScoringMatrix
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG, WeightedScoringConfig
from tenancyscore.scoring.utils import clamp_score, round_half_up


def calculate_violation_score(
    violation_type,
    severity,
    context_factors: Iterable = (),
    config: WeightedScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """
    Calculates the weighted impact score (0-100) of one finding.

    score = base(type) x multiplier(severity) x product(context modifiers)
    then, when tenant_protection_bias > 50, the score is skewed upwards by
    score x (bias/100 - 0.5) x 0.5.

    Unknown types, severities and factors degrade to neutral defaults
    (50, 1.0, 1.0); this never raises on data.
    """
    score = config.base_score(violation_type)
    score *= config.severity_multiplier(severity)

    context_multiplier = 1.0
    for factor in context_factors or ():
        context_multiplier *= config.context_modifier(factor)
    score *= context_multiplier

    protection_bias = config.tenant_protection_bias / 100
    if protection_bias > 0.5:
        score += score * (protection_bias - 0.5) * 0.5

    return round_half_up(clamp_score(score), 2)


def get_violation_scoring_matrix(
    violation_type,
    config: WeightedScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ViolationScoringMatrix:
    return ViolationScoringMatrix(
        violation_type=violation_type,
        base_score=config.base_score(violation_type),
        severity_multipliers=config.severity_weights,
        context_modifiers=config.context_modifiers,
    )
