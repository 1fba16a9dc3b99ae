import logging
import re
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ValidationError

from tenancyscore.adapters.schemas import (
    AnalysisContextModel,
    AnalysisResultsModel,
    InsightModel,
    LegalReferenceModel,
    Payload,
    ViolationModel,
)
from tenancyscore.models.context import (
    AnalysisContext,
    AnalysisResult,
    FinancialTerms,
    LandlordProfile,
    LeasePeriod,
    Parties,
    PropertyDetails,
    TenantProfile,
)
from tenancyscore.models.finding import Insight, LegalReference, Recommendation, Violation
from tenancyscore.models.taxonomy import (
    AnalysisDepth,
    ContextFactor,
    DocumentType,
    InsightType,
    LegalArea,
    SeverityLevel,
    ViolationType,
    coerce_enum,
)

logger = logging.getLogger("tenancyscore.ingest")


class AnalysisInputError(ValueError):
    """The results payload broke its contract (``insights`` missing, null or not a list)."""


# =========================================================
# Results
# =========================================================

def normalize_analysis_results(payload: Payload) -> AnalysisResult:
    """
    Single ingress point for the extraction service's results object.

    Accepts the raw camelCase mapping (or an already-built
    ``AnalysisResultsModel``) and returns the immutable ``AnalysisResult``
    the calculators consume. Everything except ``insights`` is optional;
    malformed optional parts are dropped rather than rejected.
    """
    if payload is None:
        raise AnalysisInputError("analysis results are required")

    try:
        model = (
            payload
            if isinstance(payload, AnalysisResultsModel)
            else AnalysisResultsModel.model_validate(_as_mapping(payload))
        )
    except ValidationError as e:
        # Field locations only; values may carry document text
        locations = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        logger.warning("Rejected analysis results: %d invalid field(s) %s", len(locations), locations)
        raise AnalysisInputError(f"invalid analysis results: {', '.join(locations)}") from e

    raw_violations = model.violations if model.violations is not None else model.legal_violations

    result = AnalysisResult(
        insights=tuple(_insight(i) for i in model.insights),
        violations=None if raw_violations is None else tuple(_violation(v) for v in raw_violations),
        recommendations=None if model.recommendations is None else tuple(model.recommendations),
        property_details=_section(PropertyDetails, model.property_details),
        financial_terms=_section(FinancialTerms, model.financial_terms),
        lease_period=_section(LeasePeriod, model.lease_period),
        parties=_section(Parties, model.parties),
        risk_assessment=model.risk_assessment,
        impact_assessment=model.impact_assessment,
        compliance_score=model.compliance_score,
        validation_performed=model.validation_performed,
        expert_review=model.expert_review,
    )

    _log_unrecognised(result)
    logger.debug(
        "Normalised analysis results: insights=%d violations=%s",
        len(result.insights),
        "absent" if result.violations is None else len(result.violations),
    )
    return result


def _as_mapping(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True)
    if not isinstance(payload, dict):
        raise AnalysisInputError(
            f"payload must be a mapping, got {type(payload).__name__}"
        )
    return payload


def _section(cls, model: Optional[BaseModel]):
    if model is None:
        return None
    return cls(**model.model_dump())


def _legal_reference(ref: LegalReferenceModel) -> LegalReference:
    return LegalReference(**ref.model_dump())


def _insight(model: InsightModel) -> Insight:
    return Insight(
        violation_type=coerce_enum(ViolationType, model.violation_type),
        severity=coerce_enum(SeverityLevel, model.severity),
        evidence_text=model.evidence_text,
        legal_basis=tuple(_legal_reference(r) for r in model.legal_basis),
        title=model.title,
        content=model.content,
        insight_type=coerce_enum(InsightType, model.insight_type) or InsightType.PRIMARY,
        indicators=tuple(model.indicators),
        confidence_score=model.confidence_score,
        contextual_factors=tuple(model.contextual_factors),
    )


def _violation(model: ViolationModel) -> Violation:
    return Violation(
        violation_type=coerce_enum(ViolationType, model.violation_type),
        severity=coerce_enum(SeverityLevel, model.severity),
        evidence_text=model.evidence_text,
        legal_basis=tuple(_legal_reference(r) for r in model.legal_basis),
        description=model.description,
        evidence=tuple(model.evidence),
        recommendations=tuple(Recommendation(**r.model_dump()) for r in model.recommendations),
        financial_impact=model.financial_impact,
        impact_score=model.impact_score,
        enforcement_risk=model.enforcement_risk,
        time_to_resolve=model.time_to_resolve,
        professional_advice_required=model.professional_advice_required,
    )


def _log_unrecognised(result: AnalysisResult) -> None:
    findings = result.insights + (result.violations or ())
    unknown_types = sorted({
        f.violation_type for f in findings
        if f.violation_type is not None and not isinstance(f.violation_type, ViolationType)
    })
    unknown_severities = sorted({
        f.severity for f in findings
        if f.severity is not None and not isinstance(f.severity, SeverityLevel)
    })
    if unknown_types or unknown_severities:
        # Enum labels only, never free text
        logger.debug(
            "Unrecognised taxonomy values scored with neutral defaults: types=%s severities=%s",
            unknown_types, unknown_severities,
        )


# =========================================================
# Context
# =========================================================

def normalize_analysis_context(payload: Optional[Payload]) -> AnalysisContext:
    """
    Builds an ``AnalysisContext`` from its camelCase payload. A missing or
    non-mapping payload yields the default context (residential tenancy,
    standard depth).
    """
    if payload is None:
        return AnalysisContext()
    if isinstance(payload, AnalysisContext):
        return payload
    if not isinstance(payload, (dict, BaseModel)):
        logger.warning(
            "Ignoring analysis context: expected a mapping, got %s", type(payload).__name__
        )
        return AnalysisContext()

    model = (
        payload
        if isinstance(payload, AnalysisContextModel)
        else AnalysisContextModel.model_validate(_as_mapping(payload))
    )

    tenant = model.tenant_profile
    landlord = model.landlord_profile
    market_segment = model.market_segment or (
        model.property_details.market_segment if model.property_details else None
    )

    return AnalysisContext(
        document_type=coerce_enum(DocumentType, model.document_type) or DocumentType.RESIDENTIAL_TENANCY,
        analysis_depth=coerce_enum(AnalysisDepth, model.analysis_depth) or AnalysisDepth.STANDARD,
        tenant_profile=None if tenant is None else TenantProfile(
            type=_label(tenant.type),
            experience=_label(tenant.experience),
            financial_situation=_label(tenant.financial_situation),
            protected_characteristics=tuple(tenant.protected_characteristics),
            specific_needs=tuple(tenant.specific_needs),
        ),
        landlord_profile=None if landlord is None else LandlordProfile(
            type=_label(landlord.type),
            experience=_label(landlord.experience),
            properties=landlord.properties,
        ),
        focus_areas=tuple(coerce_enum(LegalArea, a) for a in model.focus_areas if a),
        special_considerations=tuple(model.special_considerations),
        required_specializations=tuple(model.required_specializations),
        market_segment=_label(market_segment),
    )


def _label(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value.strip().lower().replace("-", "_").replace(" ", "_") or None


# --- Context factor derivation ---

TENANT_TYPE_FACTORS = {
    "vulnerable_person": ContextFactor.VULNERABLE_TENANT,
    "student": ContextFactor.STUDENT_ACCOMMODATION,
    "company": ContextFactor.COMPANY_LET,
}

TENANT_EXPERIENCE_FACTORS = {
    "first_time": ContextFactor.FIRST_TIME_TENANT,
}

FINANCIAL_SITUATION_FACTORS = {
    "budget_conscious": ContextFactor.LOW_INCOME_TENANT,
}

# word in a protected characteristic -> factor
PROTECTED_CHARACTERISTIC_FACTORS = {
    "disability": ContextFactor.DISABLED_TENANT,
    "disabled": ContextFactor.DISABLED_TENANT,
    "age": ContextFactor.ELDERLY_TENANT,
    "elderly": ContextFactor.ELDERLY_TENANT,
}

LANDLORD_TYPE_FACTORS = {
    "council": ContextFactor.COUNCIL_LANDLORD,
    "housing_association": ContextFactor.HOUSING_ASSOCIATION,
    "letting_agent": ContextFactor.LETTING_AGENT_MANAGED,
}

LANDLORD_EXPERIENCE_FACTORS = {
    "new": ContextFactor.FIRST_TIME_LANDLORD,
    "professional": ContextFactor.PROFESSIONAL_LANDLORD,
}

DOCUMENT_TYPE_FACTORS = {
    DocumentType.STUDENT_ACCOMMODATION: ContextFactor.STUDENT_ACCOMMODATION,
    DocumentType.SOCIAL_HOUSING: ContextFactor.SOCIAL_HOUSING,
    DocumentType.COMPANY_LET: ContextFactor.COMPANY_LET,
    DocumentType.HOLIDAY_LET: ContextFactor.SHORT_TERM_LET,
    DocumentType.COMMERCIAL_LEASE: ContextFactor.COMMERCIAL_ELEMENT,
    DocumentType.BUSINESS_TENANCY: ContextFactor.COMMERCIAL_ELEMENT,
    DocumentType.MIXED_USE: ContextFactor.COMMERCIAL_ELEMENT,
    DocumentType.RENT_TO_RENT: ContextFactor.COMPLEX_ARRANGEMENT,
    DocumentType.SHARED_OWNERSHIP: ContextFactor.COMPLEX_ARRANGEMENT,
}

MARKET_SEGMENT_FACTORS = {
    "luxury": ContextFactor.LUXURY_PROPERTY,
}


def derive_context_factors(context: Optional[AnalysisContext]) -> Tuple[ContextFactor, ...]:
    """
    Maps an AnalysisContext onto the ContextFactor catalogue.

    Order is stable (tenant, landlord, document, market, then special
    considerations) and each factor appears at most once.
    """
    if context is None:
        return ()

    factors = []

    def add(factor):
        if factor is not None and factor not in factors:
            factors.append(factor)

    tenant = context.tenant_profile
    if tenant is not None:
        add(TENANT_TYPE_FACTORS.get(tenant.type))
        add(TENANT_EXPERIENCE_FACTORS.get(tenant.experience))
        add(FINANCIAL_SITUATION_FACTORS.get(tenant.financial_situation))
        for characteristic in tenant.protected_characteristics:
            for word in re.split(r"\W+", characteristic.lower()):
                add(PROTECTED_CHARACTERISTIC_FACTORS.get(word))

    landlord = context.landlord_profile
    if landlord is not None:
        add(LANDLORD_TYPE_FACTORS.get(landlord.type))
        add(LANDLORD_EXPERIENCE_FACTORS.get(landlord.experience))

    add(DOCUMENT_TYPE_FACTORS.get(context.document_type))
    add(MARKET_SEGMENT_FACTORS.get(context.market_segment))

    for consideration in context.special_considerations:
        factor = coerce_enum(ContextFactor, consideration)
        if isinstance(factor, ContextFactor):
            add(factor)

    return tuple(factors)
