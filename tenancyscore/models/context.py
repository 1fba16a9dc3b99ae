from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from tenancyscore.models.finding import Insight, Violation
from tenancyscore.models.taxonomy import (
    AnalysisDepth,
    DocumentType,
    TaxonomyValue,
)


@dataclass(frozen=True)
class TenantProfile:
    type: Optional[str] = None  # individual | family | student | professional | company | vulnerable_person
    experience: Optional[str] = None  # first_time | experienced | very_experienced
    financial_situation: Optional[str] = None  # budget_conscious | standard | premium
    protected_characteristics: Tuple[str, ...] = ()
    specific_needs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LandlordProfile:
    type: Optional[str] = None  # individual | company | council | housing_association | letting_agent
    experience: Optional[str] = None  # new | experienced | professional
    properties: int = 0


@dataclass(frozen=True)
class AnalysisContext:
    document_type: TaxonomyValue = DocumentType.RESIDENTIAL_TENANCY
    analysis_depth: TaxonomyValue = AnalysisDepth.STANDARD
    tenant_profile: Optional[TenantProfile] = None
    landlord_profile: Optional[LandlordProfile] = None
    focus_areas: Tuple[TaxonomyValue, ...] = ()
    special_considerations: Tuple[str, ...] = ()
    required_specializations: Tuple[str, ...] = ()
    market_segment: Optional[str] = None  # budget | standard | premium | luxury


# --- Extracted document sections ---
# Text fields are kept verbatim; parsing happens in the calculators
# that need them and always falls back to documented defaults.

@dataclass(frozen=True)
class PropertyDetails:
    address: str = ""
    property_type: str = ""
    size: str = ""


@dataclass(frozen=True)
class FinancialTerms:
    monthly_rent: str = ""
    total_deposit: str = ""
    deposit_protection: str = ""
    permitted_fees: str = ""
    prohibited_fees: str = ""


@dataclass(frozen=True)
class LeasePeriod:
    start_date: str = ""
    end_date: str = ""
    tenancy_type: str = ""
    notice_period: str = ""


@dataclass(frozen=True)
class Parties:
    landlord: str = ""
    tenant: str = ""
    guarantor: str = ""
    agent: str = ""


@dataclass(frozen=True)
class AnalysisResult:
    """
    Validated view of the extraction service's results object.

    Only ``insights`` is guaranteed; every other section is None when the
    upstream payload omitted it. Collections are tuples so the object is
    safe to share across concurrent calculations.
    """
    insights: Tuple[Insight, ...]
    violations: Optional[Tuple[Violation, ...]] = None
    recommendations: Optional[Tuple[str, ...]] = None
    property_details: Optional[PropertyDetails] = None
    financial_terms: Optional[FinancialTerms] = None
    lease_period: Optional[LeasePeriod] = None
    parties: Optional[Parties] = None
    risk_assessment: Optional[Mapping[str, Any]] = None
    impact_assessment: Optional[Mapping[str, Any]] = None
    compliance_score: Optional[float] = None
    validation_performed: bool = False
    expert_review: bool = False
