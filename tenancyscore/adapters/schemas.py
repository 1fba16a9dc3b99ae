"""
Wire models for the extraction service's results payload.

The payload is camelCase JSON produced by an upstream model, so every model
is lenient: unknown keys are ignored, enum-like fields stay plain strings,
malformed numbers collapse to their default and malformed optional parts
(a section that is not an object, a text field that is not text, a finding
that is not an object) are dropped instead of failing the whole document.
The only hard contract is that ``insights`` is a list.
"""
import logging
import math
import re
from functools import lru_cache
from typing import Any, Dict, FrozenSet, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger("tenancyscore.ingest")

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")


def lenient_float(value: Any, default: float = 0.0) -> float:
    """
    Parses numbers the upstream model tends to emit ("£1,200", "85%", 72).
    Anything that is not a clean finite number becomes ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default

    text = str(value).replace(",", "").replace("£", "").replace("%", "").strip()
    if not _NUMBER.fullmatch(text):
        return default
    number = float(text)
    # Long digit runs overflow to inf
    return number if math.isfinite(number) else default


def lenient_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return False


def lenient_text(value: Any) -> Optional[str]:
    """Scalars become text; objects and lists are treated as not supplied."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _text_list(value: Any) -> List[str]:
    texts = (lenient_text(v) for v in _as_list(value))
    return [t for t in texts if t is not None]


def _objects(value: Any, field_name: str, wrap_key: Optional[str] = None) -> List[Any]:
    # Keeps mapping items; bare text is wrapped under ``wrap_key`` when given
    items = []
    dropped = 0
    for item in _as_list(value):
        text = lenient_text(item)
        if isinstance(item, dict):
            items.append(item)
        elif wrap_key and text is not None:
            items.append({wrap_key: text})
        else:
            dropped += 1
    if dropped:
        logger.debug("Dropped %d malformed item(s) from %s", dropped, field_name)
    return items


def _section(value: Any, field_name: str) -> Optional[Dict[str, Any]]:
    if isinstance(value, dict):
        return value
    logger.debug("Ignoring %s: expected an object, got %s", field_name, type(value).__name__)
    return None


@lru_cache(maxsize=None)
def _text_keys(model_cls) -> FrozenSet[str]:
    keys = set()
    for name, field in model_cls.model_fields.items():
        if field.annotation in (str, Optional[str]):
            keys.update((name, to_camel(name), field.alias or name))
    return frozenset(keys)


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _scrub_fields(cls, data):
        # null and non-text values in text fields mean "not supplied":
        # fall back to the field default
        if not isinstance(data, dict):
            return data
        text_keys = _text_keys(cls)
        cleaned = {}
        for key, value in data.items():
            if key in text_keys:
                value = lenient_text(value)
            if value is not None:
                cleaned[key] = value
        return cleaned


class LegalReferenceModel(WireModel):
    act: str = ""
    year: Optional[int] = None
    section: Optional[str] = None
    description: str = ""
    relevant_text: Optional[str] = None
    enforcement_authority: Optional[str] = None
    penalties: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def _year(cls, value):
        year = lenient_float(value, default=-1)
        return int(year) if year > 0 else None


class RecommendationModel(WireModel):
    action: str = ""
    priority: str = "medium"
    legal_justification: str = ""
    timeframe: str = ""


class FindingModel(WireModel):
    violation_type: Optional[str] = None
    severity: Optional[str] = None
    evidence_text: str = ""
    legal_basis: List[LegalReferenceModel] = Field(default_factory=list)

    @field_validator("legal_basis", mode="before")
    @classmethod
    def _basis(cls, value):
        # Some payloads cite the act as a bare string
        return _objects(value, "legalBasis", wrap_key="act")


class ViolationModel(FindingModel):
    description: str = ""
    evidence: List[str] = Field(default_factory=list)
    recommendations: List[RecommendationModel] = Field(default_factory=list)
    financial_impact: float = 0.0
    impact_score: float = 0.0
    enforcement_risk: float = 0.0
    time_to_resolve: str = ""
    professional_advice_required: bool = False

    @field_validator("financial_impact", "impact_score", "enforcement_risk", mode="before")
    @classmethod
    def _numbers(cls, value):
        return lenient_float(value)

    @field_validator("evidence", mode="before")
    @classmethod
    def _evidence(cls, value):
        return _text_list(value)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _actions(cls, value):
        return _objects(value, "recommendations", wrap_key="action")

    @field_validator("professional_advice_required", mode="before")
    @classmethod
    def _flag(cls, value):
        return lenient_bool(value)


class InsightModel(FindingModel):
    title: str = ""
    content: str = ""
    insight_type: str = Field(default="primary", alias="type")
    indicators: List[str] = Field(default_factory=list)
    confidence_score: Optional[float] = None
    contextual_factors: List[str] = Field(default_factory=list)

    @field_validator("indicators", "contextual_factors", mode="before")
    @classmethod
    def _lists(cls, value):
        return _text_list(value)

    @field_validator("confidence_score", mode="before")
    @classmethod
    def _confidence(cls, value):
        if value is None:
            return None
        score = lenient_float(value, default=math.nan)
        return None if math.isnan(score) else score


class PropertyDetailsModel(WireModel):
    address: str = ""
    property_type: str = ""
    size: str = ""


class FinancialTermsModel(WireModel):
    monthly_rent: str = ""
    total_deposit: str = ""
    deposit_protection: str = ""
    permitted_fees: str = ""
    prohibited_fees: str = ""


class LeasePeriodModel(WireModel):
    start_date: str = ""
    end_date: str = ""
    tenancy_type: str = ""
    notice_period: str = ""


class PartiesModel(WireModel):
    landlord: str = ""
    tenant: str = ""
    guarantor: str = ""
    agent: str = ""


class AnalysisResultsModel(WireModel):
    # Required: null, missing and non-list are all rejected
    insights: List[InsightModel]
    violations: Optional[List[ViolationModel]] = None
    legal_violations: Optional[List[ViolationModel]] = None
    recommendations: Optional[List[str]] = None
    property_details: Optional[PropertyDetailsModel] = None
    financial_terms: Optional[FinancialTermsModel] = None
    lease_period: Optional[LeasePeriodModel] = None
    parties: Optional[PartiesModel] = None
    risk_assessment: Optional[Dict[str, Any]] = None
    impact_assessment: Optional[Dict[str, Any]] = None
    compliance_score: Optional[float] = None
    validation_performed: bool = False
    expert_review: bool = False

    @field_validator("insights", mode="before")
    @classmethod
    def _insights(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("insights must be a list")
        return _objects(value, "insights")

    @field_validator("violations", "legal_violations", mode="before")
    @classmethod
    def _violations(cls, value, info: ValidationInfo):
        if not isinstance(value, (list, tuple)):
            logger.debug("Ignoring %s: expected a list, got %s", info.field_name, type(value).__name__)
            return None
        return _objects(value, info.field_name)

    @field_validator(
        "property_details",
        "financial_terms",
        "lease_period",
        "parties",
        "risk_assessment",
        "impact_assessment",
        mode="before",
    )
    @classmethod
    def _sections(cls, value, info: ValidationInfo):
        return _section(value, info.field_name)

    @field_validator("recommendations", mode="before")
    @classmethod
    def _recommendations(cls, value):
        # {"content": "..."} objects or plain strings
        items = [
            lenient_text(item.get("content", "")) if isinstance(item, dict) else lenient_text(item)
            for item in _as_list(value)
        ]
        return [item for item in items if item is not None]

    @field_validator("compliance_score", mode="before")
    @classmethod
    def _score(cls, value):
        if value is None:
            return None
        score = lenient_float(value, default=math.nan)
        return None if math.isnan(score) else score

    @field_validator("validation_performed", "expert_review", mode="before")
    @classmethod
    def _flags(cls, value):
        return lenient_bool(value)


class TenantProfileModel(WireModel):
    type: Optional[str] = None
    experience: Optional[str] = None
    financial_situation: Optional[str] = None
    protected_characteristics: List[str] = Field(default_factory=list)
    specific_needs: List[str] = Field(default_factory=list)

    @field_validator("protected_characteristics", "specific_needs", mode="before")
    @classmethod
    def _lists(cls, value):
        return _text_list(value)


class LandlordProfileModel(WireModel):
    type: Optional[str] = None
    experience: Optional[str] = None
    properties: int = 0

    @field_validator("properties", mode="before")
    @classmethod
    def _properties(cls, value):
        return max(0, int(lenient_float(value)))


class PropertyContextModel(WireModel):
    property_type: str = ""
    market_segment: Optional[str] = None


class AnalysisContextModel(WireModel):
    document_type: Optional[str] = None
    analysis_depth: Optional[str] = None
    tenant_profile: Optional[TenantProfileModel] = None
    landlord_profile: Optional[LandlordProfileModel] = None
    property_details: Optional[PropertyContextModel] = None
    focus_areas: List[str] = Field(default_factory=list)
    special_considerations: List[str] = Field(default_factory=list)
    required_specializations: List[str] = Field(default_factory=list)
    market_segment: Optional[str] = None

    @field_validator("tenant_profile", "landlord_profile", "property_details", mode="before")
    @classmethod
    def _sections(cls, value, info: ValidationInfo):
        return _section(value, info.field_name)

    @field_validator(
        "focus_areas", "special_considerations", "required_specializations", mode="before"
    )
    @classmethod
    def _lists(cls, value):
        return _text_list(value)


Payload = Union[Dict[str, Any], BaseModel]
