# tenancyscore/impact/assessment.py

import logging
import math
import re
from typing import Optional, Sequence

from tenancyscore.confidence.patterns import RENT_AMOUNT
from tenancyscore.impact import tables
from tenancyscore.models.context import AnalysisContext, AnalysisResult, FinancialTerms
from tenancyscore.models.finding import Insight, Violation
from tenancyscore.models.scores import (
    FinancialImpact,
    ImpactAssessment,
    LegalImpact,
    PracticalImpact,
    RiskCategories,
)
from tenancyscore.scoring.utils import finite_or, to_amount, to_score

logger = logging.getLogger("tenancyscore.impact")

_BARE_AMOUNT = re.compile(r"(\d[\d,]*(?:\.\d+)?)")


def calculate_impact_assessment(
    violations: Sequence[Violation],
    insights: Sequence[Insight],
    analysis_result: Optional[AnalysisResult],
    context: Optional[AnalysisContext] = None,
    *,
    compound_severity: bool = False,
) -> ImpactAssessment:
    """
    Translates confirmed violations into financial, legal and practical impact.

    Impact is driven by confirmed violations only; insights are accepted so
    the signature lines up with the compliance calculator.

    compound_severity:
        False - each violation's own contribution is scaled by its severity.
        True  - legacy behaviour: after each violation the running totals
                are multiplied by its severity, so multipliers compound in
                iteration order.
    """
    violations = tuple(violations or ())
    context = context or AnalysisContext()
    financial_terms = analysis_result.financial_terms if analysis_result else None

    return ImpactAssessment(
        financial_impact=calculate_financial_impact(violations, financial_terms),
        legal_impact=calculate_legal_impact(violations, compound_severity=compound_severity),
        practical_impact=calculate_practical_impact(
            violations, context, compound_severity=compound_severity
        ),
    )


def parse_monthly_rent(financial_terms: Optional[FinancialTerms]) -> float:
    """
    Monthly rent from the extracted financial terms. Falls back to
    DEFAULT_MONTHLY_RENT when absent or unparsable.
    """
    text = financial_terms.monthly_rent if financial_terms else ""
    match = RENT_AMOUNT.search(text or "") or _BARE_AMOUNT.search(text or "")

    if match:
        rent = finite_or(match.group(1).replace(",", ""), 0.0)
        if 0 < rent < math.inf:
            return rent

    logger.debug("Monthly rent unavailable; using default of %d", tables.DEFAULT_MONTHLY_RENT)
    return float(tables.DEFAULT_MONTHLY_RENT)


def _severity_multiplier(severity) -> float:
    return tables.IMPACT_SEVERITY_MULTIPLIERS.get(severity, 1.0)


def _accumulate(totals, contributions, multiplier, compound_severity):
    if compound_severity:
        return [(t + c) * multiplier for t, c in zip(totals, contributions)]
    return [t + c * multiplier for t, c in zip(totals, contributions)]


def calculate_financial_impact(
    violations: Sequence[Violation],
    financial_terms: Optional[FinancialTerms] = None,
) -> FinancialImpact:
    immediate_risk = 0.0
    ongoing_risk = 0.0
    categories = {
        "prohibited_fees": 0.0,
        "excessive_deposits": 0.0,
        "unfair_charges": 0.0,
        "legal_costs": 0.0,
        "lost_rights": 0.0,
    }

    for v in violations:
        amount = max(0.0, finite_or(v.financial_impact, 0.0))
        if math.isinf(amount):
            amount = 0.0

        bucket = tables.FINANCIAL_BUCKETS.get(v.violation_type)
        if bucket is None:
            if v.severity in tables.LEGAL_COST_SEVERITIES:
                categories["legal_costs"] += tables.ESTIMATED_LEGAL_ADVICE_COST
            continue

        horizon, category = bucket
        if horizon == "immediate":
            immediate_risk += amount
        else:
            # Recurring charges: annualise the monthly amount
            ongoing_risk += amount * tables.MONTHS_PER_YEAR
        categories[category] += amount

    if ongoing_risk == 0 and violations:
        monthly_rent = parse_monthly_rent(financial_terms)
        ongoing_risk = monthly_rent * tables.ONGOING_RISK_RENT_SHARE * len(violations)

    return FinancialImpact(
        immediate_risk=to_amount(immediate_risk),
        ongoing_risk=to_amount(ongoing_risk),
        total_exposure=to_amount(immediate_risk + ongoing_risk),
        risk_categories=RiskCategories(**{k: to_amount(v) for k, v in categories.items()}),
    )


def calculate_legal_impact(
    violations: Sequence[Violation],
    *,
    compound_severity: bool = False,
) -> LegalImpact:
    rights_at_risk = []
    totals = [0.0, 0.0, 0.0]  # enforcement, litigation, regulatory

    for v in violations:
        right = tables.RIGHTS_AT_RISK.get(v.violation_type)
        if right and right not in rights_at_risk:
            rights_at_risk.append(right)

        contributions = tables.LEGAL_RISK_CONTRIBUTIONS.get(v.violation_type, (0, 0, 0))
        totals = _accumulate(
            totals, contributions, _severity_multiplier(v.severity), compound_severity
        )

    enforcement, litigation, regulatory = totals
    return LegalImpact(
        rights_at_risk=tuple(rights_at_risk),
        enforcement_risk=to_score(enforcement),
        litigation_risk=to_score(litigation),
        regulatory_risk=to_score(regulatory),
    )


def calculate_practical_impact(
    violations: Sequence[Violation],
    context: Optional[AnalysisContext] = None,
    *,
    compound_severity: bool = False,
) -> PracticalImpact:
    # living conditions, security of tenure, day-to-day living, future options
    totals = [0.0, 0.0, 0.0, 0.0]

    for v in violations:
        contributions = tables.PRACTICAL_CONTRIBUTIONS.get(v.violation_type, (0, 0, 0, 0))
        totals = _accumulate(
            totals, contributions, _severity_multiplier(v.severity), compound_severity
        )

    living, security, day_to_day, future = totals

    profile = context.tenant_profile if context else None
    if profile is not None:
        if profile.type == tables.VULNERABLE_TENANT_TYPE:
            living *= tables.VULNERABLE_LIVING_CONDITIONS_SCALE
            day_to_day *= tables.VULNERABLE_DAY_TO_DAY_SCALE
        if profile.experience == tables.FIRST_TIME_EXPERIENCE:
            security *= tables.FIRST_TIME_SECURITY_SCALE

    return PracticalImpact(
        living_conditions=to_score(living),
        security_of_tenure=to_score(security),
        day_to_day_living=to_score(day_to_day),
        future_options=to_score(future),
    )
