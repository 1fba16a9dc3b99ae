from dataclasses import dataclass
from typing import Optional, Tuple

from tenancyscore.models.taxonomy import InsightType, TaxonomyValue


@dataclass(frozen=True)
class LegalReference:
    act: str
    year: Optional[int] = None
    section: Optional[str] = None
    description: str = ""
    relevant_text: Optional[str] = None
    enforcement_authority: Optional[str] = None
    penalties: Optional[str] = None


@dataclass(frozen=True)
class Recommendation:
    action: str
    priority: str = "medium"  # critical | high | medium | low
    legal_justification: str = ""
    timeframe: str = ""


@dataclass(frozen=True)
class Finding:
    """
    One issue detected upstream by the extraction service.
    Immutable once created.
    """
    violation_type: Optional[TaxonomyValue]
    severity: Optional[TaxonomyValue]
    evidence_text: str = ""
    legal_basis: Tuple[LegalReference, ...] = ()


@dataclass(frozen=True)
class Violation(Finding):
    """
    A Finding escalated to a confirmed violation, carrying remediation
    guidance and a financial estimate.
    """
    description: str = ""
    evidence: Tuple[str, ...] = ()
    recommendations: Tuple[Recommendation, ...] = ()
    financial_impact: float = 0.0  # currency amount
    impact_score: float = 0.0
    enforcement_risk: float = 0.0
    time_to_resolve: str = ""
    professional_advice_required: bool = False


@dataclass(frozen=True)
class Insight(Finding):
    """
    A Finding that was not escalated. Only warnings carrying a severity
    contribute to the compliance penalty.
    """
    title: str = ""
    content: str = ""
    insight_type: TaxonomyValue = InsightType.PRIMARY
    indicators: Tuple[str, ...] = ()
    confidence_score: Optional[float] = None
    contextual_factors: Tuple[str, ...] = ()

    @property
    def is_warning(self) -> bool:
        return self.insight_type == InsightType.WARNING
