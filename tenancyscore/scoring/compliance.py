# tenancyscore/scoring/compliance.py

import logging
from typing import Dict, Iterable, Sequence

from tenancyscore.models.finding import Insight, Violation
from tenancyscore.models.scores import ComplianceScoring, PenaltyCalculation
from tenancyscore.models.taxonomy import LegalArea, SeverityLevel, ViolationCategory
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG, WeightedScoringConfig
from tenancyscore.scoring.utils import clamp_score, round_half_up, to_score
from tenancyscore.scoring.violation_scorer import calculate_violation_score
from tenancyscore.scoring.weights import (
    CATEGORY_PENALTY_FRACTION,
    INSIGHT_PENALTY_FRACTIONS,
    LEGAL_AREA_VIOLATIONS,
    VIOLATION_CATEGORIES,
    VIOLATION_PENALTY_FRACTIONS,
)

logger = logging.getLogger("tenancyscore.scoring")


def is_violation_in_legal_area(violation_type, legal_area) -> bool:
    return violation_type in LEGAL_AREA_VIOLATIONS.get(legal_area, ())


def calculate_compliance_score(
    violations: Sequence[Violation],
    insights: Sequence[Insight],
    context_factors: Iterable = (),
    config: WeightedScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ComplianceScoring:
    """
    Aggregates every violation and warning insight into a 0-100 score.

    Each finding's violation score is charged as a penalty using a
    severity-specific fraction; warning insights use half the fraction.
    A conservatism factor above 50 inflates the summed penalty.
    No violations and no warnings always scores exactly 100.
    """
    context_factors = tuple(context_factors or ())
    violations = tuple(violations or ())
    insights = tuple(insights or ())

    counts = {
        SeverityLevel.CRITICAL: 0,
        SeverityLevel.SERIOUS: 0,
        SeverityLevel.MODERATE: 0,
        SeverityLevel.MINOR: 0,
    }

    # Scores are reused for the per-area breakdown below
    violation_scores = []
    total_penalty = 0.0

    # 1. Confirmed violations
    for v in violations:
        score = calculate_violation_score(v.violation_type, v.severity, context_factors, config)
        violation_scores.append((v, score))

        total_penalty += score * VIOLATION_PENALTY_FRACTIONS.get(v.severity, 0.0)
        if v.severity in counts:
            counts[v.severity] += 1

    # 2. Soft signals
    soft_signals = [i for i in insights if i.is_warning and i.severity]
    for insight in soft_signals:
        score = calculate_violation_score(
            insight.violation_type, insight.severity, context_factors, config
        )
        total_penalty += score * INSIGHT_PENALTY_FRACTIONS.get(insight.severity, 0.0)

    if not violations and not soft_signals:
        total_penalty = 0.0
        final_score = 100
    else:
        # 3. Conservatism
        conservatism_adjustment = config.conservatism_factor / 100 - 0.5
        if conservatism_adjustment > 0:
            total_penalty += total_penalty * conservatism_adjustment * 0.3
        final_score = to_score(100 - total_penalty)

    category_scores = _category_scores(violation_scores)

    logger.debug(
        "Compliance scored: violations=%d warnings=%d penalty=%.2f final=%d",
        len(violations), len(soft_signals), total_penalty, final_score,
    )

    return ComplianceScoring(
        total_score=final_score,
        category_scores=category_scores,
        penalty_calculation=PenaltyCalculation(
            critical_violations=counts[SeverityLevel.CRITICAL],
            serious_violations=counts[SeverityLevel.SERIOUS],
            moderate_violations=counts[SeverityLevel.MODERATE],
            minor_violations=counts[SeverityLevel.MINOR],
            total_penalty=round_half_up(total_penalty, 2),
        ),
        final_score=final_score,
    )


def _category_scores(violation_scores) -> Dict[LegalArea, int]:
    scores = {}
    for area in LegalArea:
        relevant = [
            score for v, score in violation_scores
            if is_violation_in_legal_area(v.violation_type, area)
        ]
        if not relevant:
            scores[area] = 100
            continue
        penalty = sum(score * CATEGORY_PENALTY_FRACTION for score in relevant)
        scores[area] = to_score(100 - penalty)
    return scores


def calculate_category_risk_scores(
    violations: Sequence[Violation],
    context_factors: Iterable = (),
    config: WeightedScoringConfig = DEFAULT_SCORING_CONFIG,
) -> Dict[ViolationCategory, float]:
    """
    Mean violation score per thematic category (0 when the category is clean).
    """
    context_factors = tuple(context_factors or ())
    results = {}

    for category, members in VIOLATION_CATEGORIES.items():
        scores = [
            calculate_violation_score(v.violation_type, v.severity, context_factors, config)
            for v in violations or ()
            if v.violation_type in members
        ]
        if not scores:
            results[category] = 0.0
        else:
            results[category] = round_half_up(clamp_score(sum(scores) / len(scores)), 2)

    return results
