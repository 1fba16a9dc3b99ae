from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple


def _plain(value):
    # Enum keys and values become their strings; tuples become lists
    if isinstance(value, Mapping):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return getattr(value, "value", value)


def _plain_dict(items) -> dict:
    return {name: _plain(value) for name, value in items}


class Serializable:
    def to_dict(self) -> dict:
        return asdict(self, dict_factory=_plain_dict)


@dataclass(frozen=True)
class PenaltyCalculation(Serializable):
    critical_violations: int
    serious_violations: int
    moderate_violations: int
    minor_violations: int
    total_penalty: float


@dataclass(frozen=True)
class ComplianceScoring(Serializable):
    total_score: int
    category_scores: Mapping[Any, int]  # LegalArea -> 0-100
    penalty_calculation: PenaltyCalculation
    final_score: int


@dataclass(frozen=True)
class FactorBreakdown(Serializable):
    document_completeness: int
    clause_clarity: int
    standard_compliance: int
    legal_complexity: int  # higher = more complex
    ambiguity_level: int  # higher = more ambiguous


@dataclass(frozen=True)
class ConfidenceMetrics(Serializable):
    overall_confidence: int
    data_quality: int
    analysis_completeness: int
    legal_certainty: int
    document_clarity: int
    factor_breakdown: FactorBreakdown


@dataclass(frozen=True)
class ConfidenceInterval(Serializable):
    lower: int
    upper: int
    margin: float


@dataclass(frozen=True)
class RiskCategories(Serializable):
    prohibited_fees: int
    excessive_deposits: int
    unfair_charges: int
    legal_costs: int
    lost_rights: int


@dataclass(frozen=True)
class FinancialImpact(Serializable):
    # Currency amounts, rounded to whole units
    immediate_risk: int
    ongoing_risk: int
    total_exposure: int
    risk_categories: RiskCategories


@dataclass(frozen=True)
class LegalImpact(Serializable):
    rights_at_risk: Tuple[str, ...]
    enforcement_risk: int
    litigation_risk: int
    regulatory_risk: int


@dataclass(frozen=True)
class PracticalImpact(Serializable):
    living_conditions: int
    security_of_tenure: int
    day_to_day_living: int
    future_options: int


@dataclass(frozen=True)
class ImpactAssessment(Serializable):
    financial_impact: FinancialImpact
    legal_impact: LegalImpact
    practical_impact: PracticalImpact


@dataclass(frozen=True)
class SeverityThresholds(Serializable):
    critical: float
    serious: float
    moderate: float
    minor: float


@dataclass(frozen=True)
class ViolationScoringMatrix:
    violation_type: Any
    base_score: float
    severity_multipliers: Mapping[Any, float]
    context_modifiers: Mapping[Any, float]
    max_score: float = 100.0
    min_score: float = 0.0


@dataclass(frozen=True)
class AnalysisReport:
    """
    Everything the presentation layer needs for one analysed document.
    Numeric fields are already clamped; ``to_dict`` is JSON-safe.
    """
    compliance: ComplianceScoring
    confidence: ConfidenceMetrics
    impact: ImpactAssessment
    thresholds: SeverityThresholds
    category_risk_scores: Mapping[Any, float]
    confidence_interval: ConfidenceInterval
    calibrated_confidence: int
    metadata: Mapping[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compliance_scoring": self.compliance.to_dict(),
            "confidence_metrics": self.confidence.to_dict(),
            "impact_assessment": self.impact.to_dict(),
            "severity_thresholds": self.thresholds.to_dict(),
            "category_risk_scores": _plain(self.category_risk_scores),
            "confidence_interval": self.confidence_interval.to_dict(),
            "calibrated_confidence": self.calibrated_confidence,
            "metadata": _plain(self.metadata),
        }
