from tenancyscore.impact.assessment import (
    calculate_financial_impact,
    calculate_impact_assessment,
    calculate_legal_impact,
    calculate_practical_impact,
    parse_monthly_rent,
)
from tenancyscore.models.context import AnalysisContext, FinancialTerms, TenantProfile
from tenancyscore.models.finding import Violation
from tenancyscore.models.taxonomy import SeverityLevel, ViolationType
from tests.fixtures.sample_tenancy import complete_result, serious_prohibited_fee


def _violation(violation_type, severity, amount=0.0):
    return Violation(violation_type=violation_type, severity=severity, financial_impact=amount)


def test_no_violations_means_no_impact():
    impact = calculate_impact_assessment([], [], complete_result())
    payload = impact.to_dict()

    assert payload["financial_impact"]["total_exposure"] == 0
    assert payload["legal_impact"]["rights_at_risk"] == []
    assert all(v == 0 for v in payload["practical_impact"].values())


def test_prohibited_fee_is_immediate_exposure_with_rent_fallback():
    financial = calculate_financial_impact(
        [serious_prohibited_fee(200)], FinancialTerms(monthly_rent="£1,200 per month")
    )

    assert financial.immediate_risk == 200
    assert financial.risk_categories.prohibited_fees == 200
    # No recurring charge: 10% of monthly rent per violation
    assert financial.ongoing_risk == 120
    assert financial.total_exposure == 320


def test_unfair_terms_are_annualised():
    financial = calculate_financial_impact([_violation(ViolationType.UNFAIR_TERMS, "moderate", 50)])

    assert financial.ongoing_risk == 600
    assert financial.immediate_risk == 0
    assert financial.risk_categories.unfair_charges == 50


def test_serious_violations_outside_financial_buckets_add_legal_costs():
    financial = calculate_financial_impact([
        _violation(ViolationType.ACCESS_RIGHTS, SeverityLevel.SERIOUS),
        _violation(ViolationType.GAS_SAFETY, SeverityLevel.CRITICAL),
        _violation(ViolationType.PET_RESTRICTIONS, SeverityLevel.MINOR),
    ])
    assert financial.risk_categories.legal_costs == 1000


def test_bad_amounts_are_treated_as_zero():
    financial = calculate_financial_impact([
        _violation(ViolationType.PROHIBITED_FEES, "serious", -300),
        _violation(ViolationType.DEPOSIT_VIOLATION, "serious", float("nan")),
        _violation(ViolationType.DEPOSIT_VIOLATION, "serious", float("inf")),
    ])
    assert financial.immediate_risk == 0
    assert financial.risk_categories.excessive_deposits == 0


def test_monthly_rent_parsing():
    assert parse_monthly_rent(FinancialTerms(monthly_rent="£1,200 pcm")) == 1200.0
    assert parse_monthly_rent(FinancialTerms(monthly_rent="Rent: 950.50 per month")) == 950.5
    assert parse_monthly_rent(FinancialTerms(monthly_rent="to be agreed")) == 1000.0
    assert parse_monthly_rent(FinancialTerms(monthly_rent="£0")) == 1000.0
    assert parse_monthly_rent(None) == 1000.0


def test_legal_impact_per_violation_scaling():
    legal = calculate_legal_impact([
        serious_prohibited_fee(),
        _violation(ViolationType.DEPOSIT_VIOLATION, SeverityLevel.CRITICAL),
    ])

    assert legal.enforcement_risk == 30  # 25 x 1.2
    assert legal.regulatory_risk == 48  # 15 x 1.2 + 20 x 1.5
    assert legal.litigation_risk == 0
    assert legal.rights_at_risk == ("Protection from unfair fees", "Deposit protection rights")


def test_legal_impact_compounding_mode():
    legal = calculate_legal_impact(
        [serious_prohibited_fee(), _violation(ViolationType.DEPOSIT_VIOLATION, SeverityLevel.CRITICAL)],
        compound_severity=True,
    )

    assert legal.enforcement_risk == 45  # (25 x 1.2) x 1.5
    assert legal.regulatory_risk == 57  # (15 x 1.2 + 20) x 1.5


def test_rights_at_risk_are_deduplicated_in_order():
    legal = calculate_legal_impact([
        _violation(ViolationType.ACCESS_RIGHTS, "minor"),
        _violation(ViolationType.UNFAIR_TERMS, "minor"),
        _violation(ViolationType.ACCESS_RIGHTS, "serious"),
    ])
    assert legal.rights_at_risk == ("Right to quiet enjoyment", "Consumer protection rights")


def test_legal_risks_are_clamped():
    legal = calculate_legal_impact([_violation(ViolationType.DISCRIMINATION, "critical")] * 5)
    assert legal.enforcement_risk == 100
    assert legal.litigation_risk == 100


def test_vulnerable_and_first_time_tenants_feel_more_impact():
    violations = [
        _violation(ViolationType.REPAIR_RESPONSIBILITY, SeverityLevel.MODERATE),
        _violation(ViolationType.NOTICE_PROCEDURE, SeverityLevel.MODERATE),
        _violation(ViolationType.ACCESS_RIGHTS, SeverityLevel.MODERATE),
    ]
    plain = calculate_practical_impact(violations, AnalysisContext())
    profiled = calculate_practical_impact(
        violations,
        AnalysisContext(tenant_profile=TenantProfile(type="vulnerable_person", experience="first_time")),
    )

    assert (plain.living_conditions, plain.security_of_tenure, plain.day_to_day_living) == (20, 25, 15)
    assert profiled.living_conditions == 26
    assert profiled.security_of_tenure == 30
    assert profiled.day_to_day_living == 18


def test_unknown_types_contribute_nothing_but_do_not_fail():
    impact = calculate_impact_assessment(
        [_violation("alien_clause", "weird", 10)], [], None, None
    )
    assert impact.legal_impact.enforcement_risk == 0
    assert impact.practical_impact.future_options == 0
    # Falls back to the default rent for ongoing exposure
    assert impact.financial_impact.ongoing_risk == 100


def test_practical_impact_compounding_mode():
    violations = [
        _violation(ViolationType.REPAIR_RESPONSIBILITY, SeverityLevel.CRITICAL),
        _violation(ViolationType.NOTICE_PROCEDURE, SeverityLevel.SERIOUS),
        _violation(ViolationType.PET_RESTRICTIONS, SeverityLevel.MODERATE),
    ]
    context = AnalysisContext(
        tenant_profile=TenantProfile(type="vulnerable_person", experience="first_time")
    )

    per_violation = calculate_practical_impact(violations, context)
    compounded = calculate_practical_impact(violations, context, compound_severity=True)

    # living 20 x 1.5 = 30, x 1.3 vulnerable = 39
    assert per_violation.living_conditions == 39
    # living (20 x 1.5) x 1.2 x 1.0 = 36, x 1.3 vulnerable = 46.8
    assert compounded.living_conditions == 47
    # security 25 x 1.2 = 30 either way, x 1.2 first time
    assert per_violation.security_of_tenure == compounded.security_of_tenure == 36
    # day-to-day 15 x 1.0, x 1.2 vulnerable
    assert per_violation.day_to_day_living == compounded.day_to_day_living == 18
    assert compounded.future_options == 0


def test_compounding_flag_reaches_both_legal_and_practical_impact():
    violations = [
        _violation(ViolationType.RENT_INCREASE_PROCEDURES, SeverityLevel.CRITICAL),
        _violation(ViolationType.ACCESS_RIGHTS, SeverityLevel.SERIOUS),
    ]
    impact = calculate_impact_assessment(violations, [], None, compound_severity=True)

    # (10 x 1.5 + 15) x 1.2 = 36 against 10 x 1.5 + 15 x 1.2 = 33 per violation
    assert impact.practical_impact.day_to_day_living == 36
    # security (15 x 1.5) x 1.2 = 27
    assert impact.practical_impact.security_of_tenure == 27
    # litigation (0 + 10) x 1.2 = 12
    assert impact.legal_impact.litigation_risk == 12
    assert calculate_impact_assessment(violations, [], None).practical_impact.day_to_day_living == 33
