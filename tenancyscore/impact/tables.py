from tenancyscore.models.taxonomy import SeverityLevel, ViolationType

# Severity scaling for legal and practical impact (separate from the
# compliance multipliers so tuning one never moves the other)
IMPACT_SEVERITY_MULTIPLIERS = {
    SeverityLevel.CRITICAL: 1.5,
    SeverityLevel.SERIOUS: 1.2,
    SeverityLevel.MODERATE: 1.0,
    SeverityLevel.MINOR: 0.7,
    SeverityLevel.INFORMATIONAL: 0.3,
}

DEFAULT_MONTHLY_RENT = 1000
ESTIMATED_LEGAL_ADVICE_COST = 500
ONGOING_RISK_RENT_SHARE = 0.1
MONTHS_PER_YEAR = 12

# --- Financial buckets ---
# violation type -> (exposure horizon, risk category)
FINANCIAL_BUCKETS = {
    ViolationType.PROHIBITED_FEES: ("immediate", "prohibited_fees"),
    ViolationType.DEPOSIT_VIOLATION: ("immediate", "excessive_deposits"),
    ViolationType.UNFAIR_TERMS: ("ongoing", "unfair_charges"),
    ViolationType.REPAIR_RESPONSIBILITY: ("ongoing", "lost_rights"),
}

LEGAL_COST_SEVERITIES = (SeverityLevel.CRITICAL, SeverityLevel.SERIOUS)

# --- Legal impact ---

RIGHTS_AT_RISK = {
    ViolationType.DEPOSIT_VIOLATION: "Deposit protection rights",
    ViolationType.PROHIBITED_FEES: "Protection from unfair fees",
    ViolationType.REPAIR_RESPONSIBILITY: "Right to habitable property",
    ViolationType.ACCESS_RIGHTS: "Right to quiet enjoyment",
    ViolationType.UNFAIR_TERMS: "Consumer protection rights",
    ViolationType.DISCRIMINATION: "Equality and non-discrimination rights",
}

# violation type -> (enforcement, litigation, regulatory)
LEGAL_RISK_CONTRIBUTIONS = {
    ViolationType.DEPOSIT_VIOLATION: (0, 0, 20),
    ViolationType.PROHIBITED_FEES: (25, 0, 15),
    ViolationType.REPAIR_RESPONSIBILITY: (0, 15, 0),
    ViolationType.ACCESS_RIGHTS: (0, 10, 0),
    ViolationType.UNFAIR_TERMS: (0, 20, 0),
    ViolationType.DISCRIMINATION: (30, 25, 0),
}

# --- Practical impact ---

# violation type -> (living conditions, security of tenure, day-to-day, future options)
PRACTICAL_CONTRIBUTIONS = {
    ViolationType.REPAIR_RESPONSIBILITY: (20, 0, 0, 0),
    ViolationType.MAINTENANCE_OBLIGATIONS: (20, 0, 0, 0),
    ViolationType.SAFETY_COMPLIANCE: (20, 0, 0, 0),
    ViolationType.NOTICE_PROCEDURE: (0, 25, 0, 0),
    ViolationType.TERMINATION_CLAUSES: (0, 25, 0, 0),
    ViolationType.ACCESS_RIGHTS: (0, 0, 15, 0),
    ViolationType.PET_RESTRICTIONS: (0, 0, 15, 0),
    ViolationType.OCCUPANCY_LIMITS: (0, 0, 15, 0),
    ViolationType.SUBLETTING_RESTRICTIONS: (0, 0, 0, 10),
    ViolationType.PROPERTY_ALTERATIONS: (0, 0, 0, 10),
    ViolationType.RENT_INCREASE_PROCEDURES: (0, 15, 10, 0),
}

VULNERABLE_TENANT_TYPE = "vulnerable_person"
FIRST_TIME_EXPERIENCE = "first_time"

VULNERABLE_LIVING_CONDITIONS_SCALE = 1.3
VULNERABLE_DAY_TO_DAY_SCALE = 1.2
FIRST_TIME_SECURITY_SCALE = 1.2
