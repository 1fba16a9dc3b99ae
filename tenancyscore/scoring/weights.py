# tenancyscore/scoring/weights.py

from tenancyscore.models.taxonomy import (
    ContextFactor,
    LegalArea,
    SeverityLevel,
    ViolationCategory,
    ViolationType,
)

"""
Centralized static weight tables.

This file must NOT import from any other scoring modules.
WeightedScoringConfig copies these into read-only mappings; nothing
reads them directly at scoring time.
"""

# Base impact score (0-100) per violation type
VIOLATION_BASE_SCORES = {
    # Direct financial or statutory harm
    ViolationType.DEPOSIT_VIOLATION: 85,
    ViolationType.PROHIBITED_FEES: 90,
    ViolationType.DISCRIMINATION: 95,
    ViolationType.SAFETY_COMPLIANCE: 88,
    ViolationType.UNFAIR_TERMS: 75,

    # Rights and security of tenure
    ViolationType.REPAIR_RESPONSIBILITY: 80,
    ViolationType.NOTICE_PROCEDURE: 78,
    ViolationType.ACCESS_RIGHTS: 70,
    ViolationType.TERMINATION_CLAUSES: 75,

    # Living conditions
    ViolationType.RENT_INCREASE_PROCEDURES: 65,
    ViolationType.MAINTENANCE_OBLIGATIONS: 60,
    ViolationType.UTILITY_RESPONSIBILITIES: 55,
    ViolationType.INSURANCE_REQUIREMENTS: 50,

    # Lifestyle
    ViolationType.SUBLETTING_RESTRICTIONS: 45,
    ViolationType.PET_RESTRICTIONS: 40,
    ViolationType.OCCUPANCY_LIMITS: 42,
    ViolationType.PROPERTY_ALTERATIONS: 38,

    # Administrative / procedural
    ViolationType.DISPUTE_RESOLUTION: 35,
    ViolationType.DATA_PROTECTION: 30,
    ViolationType.CONSUMER_RIGHTS: 50,
    ViolationType.HOUSING_STANDARDS: 70,

    # Regulatory
    ViolationType.PLANNING_COMPLIANCE: 25,
    ViolationType.LICENSING_REQUIREMENTS: 45,
    ViolationType.ENERGY_EFFICIENCY: 35,
    ViolationType.FIRE_SAFETY: 85,
    ViolationType.GAS_SAFETY: 90,
    ViolationType.ELECTRICAL_SAFETY: 85,
    ViolationType.GENERAL_COMPLIANCE: 40,
}

SEVERITY_MULTIPLIERS = {
    SeverityLevel.CRITICAL: 1.5,
    SeverityLevel.SERIOUS: 1.2,
    SeverityLevel.MODERATE: 1.0,
    SeverityLevel.MINOR: 0.7,
    SeverityLevel.INFORMATIONAL: 0.3,
}

# Relative importance of each statutory domain
LEGAL_AREA_WEIGHTS = {
    LegalArea.TENANT_FEES_ACT: 20,
    LegalArea.HOUSING_ACT_1988: 18,
    LegalArea.LANDLORD_TENANT_ACT_1985: 16,
    LegalArea.CONSUMER_RIGHTS_ACT: 15,
    LegalArea.DEPOSIT_PROTECTION: 12,

    LegalArea.HOUSING_HEALTH_SAFETY: 10,
    LegalArea.HOMES_FITNESS_ACT: 8,
    LegalArea.GAS_SAFETY_REGULATIONS: 7,
    LegalArea.ELECTRICAL_SAFETY_STANDARDS: 7,
    LegalArea.FIRE_SAFETY_ORDER: 6,

    LegalArea.DEREGULATION_ACT: 5,
    LegalArea.RIGHT_TO_RENT: 4,
    LegalArea.ENERGY_PERFORMANCE_REGULATIONS: 3,
    LegalArea.GENERAL_DATA_PROTECTION: 2,

    LegalArea.RENTERS_REFORM_BILL: 8,
    LegalArea.BUSINESS_TENANCIES_ACT: 5,
    LegalArea.AGRICULTURAL_HOLDINGS_ACT: 2,
    LegalArea.HOUSING_ACT_1996: 4,
    LegalArea.LOCALISM_ACT: 3,
    LegalArea.PLANNING_ACTS: 2,
    LegalArea.BUILDING_REGULATIONS: 4,
}

CONTEXT_MODIFIERS = {
    ContextFactor.VULNERABLE_TENANT: 1.3,
    ContextFactor.FIRST_TIME_TENANT: 1.2,
    ContextFactor.STUDENT_ACCOMMODATION: 1.15,
    ContextFactor.LOW_INCOME_TENANT: 1.25,
    ContextFactor.ELDERLY_TENANT: 1.2,
    ContextFactor.DISABLED_TENANT: 1.3,

    ContextFactor.SOCIAL_HOUSING: 0.9,
    ContextFactor.LUXURY_PROPERTY: 0.95,
    ContextFactor.COMMERCIAL_ELEMENT: 0.8,
    ContextFactor.SHORT_TERM_LET: 1.1,
    ContextFactor.COMPANY_LET: 0.85,

    ContextFactor.HIGH_DEMAND_AREA: 1.1,
    ContextFactor.LOW_DEMAND_AREA: 0.95,
    ContextFactor.NEW_BUILD: 0.9,
    ContextFactor.OLDER_PROPERTY: 1.1,

    ContextFactor.PROFESSIONAL_LANDLORD: 0.9,
    ContextFactor.FIRST_TIME_LANDLORD: 1.1,
    ContextFactor.LETTING_AGENT_MANAGED: 0.95,
    ContextFactor.COUNCIL_LANDLORD: 0.8,
    ContextFactor.HOUSING_ASSOCIATION: 0.8,

    ContextFactor.STANDARD_TEMPLATE: 0.9,
    ContextFactor.BESPOKE_AGREEMENT: 1.1,
    ContextFactor.MULTIPLE_PROPERTIES: 0.95,
    ContextFactor.COMPLEX_ARRANGEMENT: 1.2,
}

DEFAULT_TENANT_PROTECTION_BIAS = 75
DEFAULT_CONSERVATISM_FACTOR = 80

# Fallbacks for values outside the catalogue
UNKNOWN_VIOLATION_BASE_SCORE = 50.0
UNKNOWN_SEVERITY_MULTIPLIER = 1.0

# Share of a violation score charged as compliance penalty
VIOLATION_PENALTY_FRACTIONS = {
    SeverityLevel.CRITICAL: 0.40,
    SeverityLevel.SERIOUS: 0.25,
    SeverityLevel.MODERATE: 0.15,
    SeverityLevel.MINOR: 0.08,
    SeverityLevel.INFORMATIONAL: 0.02,
}

# Warning insights are soft signals: half the violation fraction
INSIGHT_PENALTY_FRACTIONS = {
    severity: fraction / 2
    for severity, fraction in VIOLATION_PENALTY_FRACTIONS.items()
}

CATEGORY_PENALTY_FRACTION = 0.2

# Which violation types fall under which statutory domain
LEGAL_AREA_VIOLATIONS = {
    LegalArea.TENANT_FEES_ACT: (ViolationType.PROHIBITED_FEES, ViolationType.DEPOSIT_VIOLATION),
    LegalArea.HOUSING_ACT_1988: (
        ViolationType.NOTICE_PROCEDURE,
        ViolationType.TERMINATION_CLAUSES,
        ViolationType.ACCESS_RIGHTS,
    ),
    LegalArea.LANDLORD_TENANT_ACT_1985: (
        ViolationType.REPAIR_RESPONSIBILITY,
        ViolationType.MAINTENANCE_OBLIGATIONS,
    ),
    LegalArea.CONSUMER_RIGHTS_ACT: (ViolationType.UNFAIR_TERMS, ViolationType.CONSUMER_RIGHTS),
    LegalArea.DEPOSIT_PROTECTION: (ViolationType.DEPOSIT_VIOLATION,),
    LegalArea.HOUSING_HEALTH_SAFETY: (ViolationType.SAFETY_COMPLIANCE, ViolationType.HOUSING_STANDARDS),
    LegalArea.HOMES_FITNESS_ACT: (ViolationType.HOUSING_STANDARDS, ViolationType.SAFETY_COMPLIANCE),
    LegalArea.GAS_SAFETY_REGULATIONS: (ViolationType.GAS_SAFETY,),
    LegalArea.ELECTRICAL_SAFETY_STANDARDS: (ViolationType.ELECTRICAL_SAFETY,),
    LegalArea.FIRE_SAFETY_ORDER: (ViolationType.FIRE_SAFETY,),
    LegalArea.DEREGULATION_ACT: (ViolationType.NOTICE_PROCEDURE, ViolationType.DEPOSIT_VIOLATION),
    LegalArea.RIGHT_TO_RENT: (ViolationType.DISCRIMINATION, ViolationType.GENERAL_COMPLIANCE),
    LegalArea.ENERGY_PERFORMANCE_REGULATIONS: (ViolationType.ENERGY_EFFICIENCY,),
    LegalArea.GENERAL_DATA_PROTECTION: (ViolationType.DATA_PROTECTION,),
    LegalArea.RENTERS_REFORM_BILL: (
        ViolationType.ACCESS_RIGHTS,
        ViolationType.TERMINATION_CLAUSES,
        ViolationType.RENT_INCREASE_PROCEDURES,
    ),
    LegalArea.BUSINESS_TENANCIES_ACT: (ViolationType.GENERAL_COMPLIANCE,),
    LegalArea.AGRICULTURAL_HOLDINGS_ACT: (ViolationType.GENERAL_COMPLIANCE,),
    LegalArea.HOUSING_ACT_1996: (ViolationType.GENERAL_COMPLIANCE,),
    LegalArea.LOCALISM_ACT: (ViolationType.GENERAL_COMPLIANCE,),
    LegalArea.PLANNING_ACTS: (ViolationType.PLANNING_COMPLIANCE,),
    LegalArea.BUILDING_REGULATIONS: (ViolationType.HOUSING_STANDARDS, ViolationType.SAFETY_COMPLIANCE),
}

VIOLATION_CATEGORIES = {
    ViolationCategory.FINANCIAL: (
        ViolationType.DEPOSIT_VIOLATION,
        ViolationType.PROHIBITED_FEES,
        ViolationType.RENT_INCREASE_PROCEDURES,
        ViolationType.UTILITY_RESPONSIBILITIES,
    ),
    ViolationCategory.SAFETY: (
        ViolationType.SAFETY_COMPLIANCE,
        ViolationType.FIRE_SAFETY,
        ViolationType.GAS_SAFETY,
        ViolationType.ELECTRICAL_SAFETY,
        ViolationType.HOUSING_STANDARDS,
    ),
    ViolationCategory.RIGHTS: (
        ViolationType.ACCESS_RIGHTS,
        ViolationType.DISCRIMINATION,
        ViolationType.UNFAIR_TERMS,
        ViolationType.CONSUMER_RIGHTS,
        ViolationType.TERMINATION_CLAUSES,
    ),
    ViolationCategory.OBLIGATIONS: (
        ViolationType.REPAIR_RESPONSIBILITY,
        ViolationType.MAINTENANCE_OBLIGATIONS,
        ViolationType.INSURANCE_REQUIREMENTS,
        ViolationType.NOTICE_PROCEDURE,
    ),
    ViolationCategory.LIFESTYLE: (
        ViolationType.PET_RESTRICTIONS,
        ViolationType.OCCUPANCY_LIMITS,
        ViolationType.PROPERTY_ALTERATIONS,
        ViolationType.SUBLETTING_RESTRICTIONS,
    ),
    ViolationCategory.COMPLIANCE: (
        ViolationType.PLANNING_COMPLIANCE,
        ViolationType.LICENSING_REQUIREMENTS,
        ViolationType.ENERGY_EFFICIENCY,
        ViolationType.GENERAL_COMPLIANCE,
        ViolationType.DATA_PROTECTION,
    ),
}
