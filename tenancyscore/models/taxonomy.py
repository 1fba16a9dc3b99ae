from enum import Enum
from typing import Optional, Union


class ViolationType(str, Enum):
    DEPOSIT_VIOLATION = "deposit_violation"
    PROHIBITED_FEES = "prohibited_fees"
    REPAIR_RESPONSIBILITY = "repair_responsibility"
    NOTICE_PROCEDURE = "notice_procedure"
    ACCESS_RIGHTS = "access_rights"
    UNFAIR_TERMS = "unfair_terms"
    DISCRIMINATION = "discrimination"
    SAFETY_COMPLIANCE = "safety_compliance"
    INSURANCE_REQUIREMENTS = "insurance_requirements"
    SUBLETTING_RESTRICTIONS = "subletting_restrictions"
    RENT_INCREASE_PROCEDURES = "rent_increase_procedures"
    TERMINATION_CLAUSES = "termination_clauses"
    MAINTENANCE_OBLIGATIONS = "maintenance_obligations"
    UTILITY_RESPONSIBILITIES = "utility_responsibilities"
    PET_RESTRICTIONS = "pet_restrictions"
    OCCUPANCY_LIMITS = "occupancy_limits"
    PROPERTY_ALTERATIONS = "property_alterations"
    DISPUTE_RESOLUTION = "dispute_resolution"
    DATA_PROTECTION = "data_protection"
    CONSUMER_RIGHTS = "consumer_rights"
    HOUSING_STANDARDS = "housing_standards"
    PLANNING_COMPLIANCE = "planning_compliance"
    LICENSING_REQUIREMENTS = "licensing_requirements"
    ENERGY_EFFICIENCY = "energy_efficiency"
    FIRE_SAFETY = "fire_safety"
    GAS_SAFETY = "gas_safety"
    ELECTRICAL_SAFETY = "electrical_safety"
    GENERAL_COMPLIANCE = "general_compliance"


class SeverityLevel(str, Enum):
    CRITICAL = "critical"
    SERIOUS = "serious"
    MODERATE = "moderate"
    MINOR = "minor"
    INFORMATIONAL = "informational"

    @property
    def rank(self) -> int:
        """Higher rank means more severe (critical = 4, informational = 0)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    SeverityLevel.CRITICAL: 4,
    SeverityLevel.SERIOUS: 3,
    SeverityLevel.MODERATE: 2,
    SeverityLevel.MINOR: 1,
    SeverityLevel.INFORMATIONAL: 0,
}


class LegalArea(str, Enum):
    TENANT_FEES_ACT = "tenant_fees_act"
    HOUSING_ACT_1988 = "housing_act_1988"
    LANDLORD_TENANT_ACT_1985 = "landlord_tenant_act_1985"
    CONSUMER_RIGHTS_ACT = "consumer_rights_act"
    DEPOSIT_PROTECTION = "deposit_protection"
    HOUSING_HEALTH_SAFETY = "housing_health_safety"
    HOMES_FITNESS_ACT = "homes_fitness_act"
    GAS_SAFETY_REGULATIONS = "gas_safety_regulations"
    ELECTRICAL_SAFETY_STANDARDS = "electrical_safety_standards"
    FIRE_SAFETY_ORDER = "fire_safety_order"
    DEREGULATION_ACT = "deregulation_act"
    RIGHT_TO_RENT = "right_to_rent"
    ENERGY_PERFORMANCE_REGULATIONS = "energy_performance_regulations"
    GENERAL_DATA_PROTECTION = "general_data_protection"
    RENTERS_REFORM_BILL = "renters_reform_bill"
    BUSINESS_TENANCIES_ACT = "business_tenancies_act"
    AGRICULTURAL_HOLDINGS_ACT = "agricultural_holdings_act"
    HOUSING_ACT_1996 = "housing_act_1996"
    LOCALISM_ACT = "localism_act"
    PLANNING_ACTS = "planning_acts"
    BUILDING_REGULATIONS = "building_regulations"


class ViolationCategory(str, Enum):
    FINANCIAL = "FINANCIAL"
    SAFETY = "SAFETY"
    RIGHTS = "RIGHTS"
    OBLIGATIONS = "OBLIGATIONS"
    LIFESTYLE = "LIFESTYLE"
    COMPLIANCE = "COMPLIANCE"


class DocumentType(str, Enum):
    RESIDENTIAL_TENANCY = "residential_tenancy"
    ASSURED_SHORTHOLD_TENANCY = "assured_shorthold_tenancy"
    PERIODIC_TENANCY = "periodic_tenancy"
    COMMERCIAL_LEASE = "commercial_lease"
    BUSINESS_TENANCY = "business_tenancy"
    STUDENT_ACCOMMODATION = "student_accommodation"
    HOLIDAY_LET = "holiday_let"
    AGRICULTURAL_TENANCY = "agricultural_tenancy"
    SOCIAL_HOUSING = "social_housing"
    SHARED_OWNERSHIP = "shared_ownership"
    RENT_TO_RENT = "rent_to_rent"
    COMPANY_LET = "company_let"
    DIPLOMATIC_TENANCY = "diplomatic_tenancy"
    CROWN_ESTATE = "crown_estate"
    MIXED_USE = "mixed_use"
    UNKNOWN = "unknown"
    ALL = "all"


class ContextFactor(str, Enum):
    # Tenant
    VULNERABLE_TENANT = "vulnerable_tenant"
    FIRST_TIME_TENANT = "first_time_tenant"
    STUDENT_ACCOMMODATION = "student_accommodation"
    LOW_INCOME_TENANT = "low_income_tenant"
    ELDERLY_TENANT = "elderly_tenant"
    DISABLED_TENANT = "disabled_tenant"
    # Property
    SOCIAL_HOUSING = "social_housing"
    LUXURY_PROPERTY = "luxury_property"
    COMMERCIAL_ELEMENT = "commercial_element"
    SHORT_TERM_LET = "short_term_let"
    COMPANY_LET = "company_let"
    # Market
    HIGH_DEMAND_AREA = "high_demand_area"
    LOW_DEMAND_AREA = "low_demand_area"
    NEW_BUILD = "new_build"
    OLDER_PROPERTY = "older_property"
    # Landlord
    PROFESSIONAL_LANDLORD = "professional_landlord"
    FIRST_TIME_LANDLORD = "first_time_landlord"
    LETTING_AGENT_MANAGED = "letting_agent_managed"
    COUNCIL_LANDLORD = "council_landlord"
    HOUSING_ASSOCIATION = "housing_association"
    # Document
    STANDARD_TEMPLATE = "standard_template"
    BESPOKE_AGREEMENT = "bespoke_agreement"
    MULTIPLE_PROPERTIES = "multiple_properties"
    COMPLEX_ARRANGEMENT = "complex_arrangement"


class AnalysisDepth(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    COMPREHENSIVE = "comprehensive"
    EXPERT = "expert"


class InsightType(str, Enum):
    PRIMARY = "primary"
    ACCENT = "accent"
    WARNING = "warning"


# Values arriving from the extraction service are not guaranteed to be in the
# catalogue. Unknown values are kept as plain lowercase strings so every table
# lookup can fall back to its neutral default instead of failing.
TaxonomyValue = Union[Enum, str]


def coerce_enum(enum_cls, value) -> Optional[TaxonomyValue]:
    """
    Map a raw value onto ``enum_cls``.

    Returns the enum member when recognised, the normalised string when not,
    and None for empty input.
    """
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value

    text = str(value).strip().lower().replace("-", "_").replace(" ", "_")
    if not text:
        return None

    try:
        return enum_cls(text)
    except ValueError:
        return text
