import shutil

from tenancyscore.orchestrator.report_builder import build_analysis_report
from tenancyscore.scoring.thresholds import get_recommended_severity
from tenancyscore.scoring.violation_scorer import calculate_violation_score


# --- REPORT THEME ---
class Colors:
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD


def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)


def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")


def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")


def score_color(score):
    if score >= 80:
        return Colors.OKGREEN
    if score >= 50:
        return Colors.WARNING
    return Colors.FAIL


DOCUMENT = """ASSURED SHORTHOLD TENANCY AGREEMENT

1. The property address is Flat 2, 8 Mill Lane. The monthly rent is £1,150.
2. The tenant will pay a deposit of £1,320 and a check-out fee of £150.
3. The landlord may enter the property at any time without notice.
4. The notice period for termination is two months.
"""

RESULTS = {
    "insights": [
        {
            "title": "Check-out fee",
            "content": "Clause 2 charges a £150 check-out fee, a prohibited payment under the Tenant Fees Act 2019.",
            "type": "warning",
            "severity": "serious",
            "violationType": "prohibited_fees",
        },
        {
            "title": "Access without notice",
            "content": "Clause 3 lets the landlord enter without 24 hours notice.",
            "type": "warning",
            "severity": "moderate",
            "violationType": "access_rights",
        },
    ],
    "violations": [
        {
            "violationType": "prohibited_fees",
            "severity": "serious",
            "description": "Check-out fee",
            "financialImpact": 150,
        },
        {
            "violationType": "access_rights",
            "severity": "moderate",
            "description": "Entry without notice",
        },
    ],
    "financialTerms": {"monthlyRent": "£1,150"},
    "recommendations": ["Ask for the check-out fee to be removed"],
}

CONTEXT = {
    "analysisDepth": "standard",
    "tenantProfile": {"type": "individual", "experience": "first_time"},
    "landlordProfile": {"type": "individual", "experience": "new", "properties": 1},
}


def run_demo():
    # 1. INPUT
    print_section("Scenario Initialization")
    print_kv("Document length", f"{len(DOCUMENT)} chars")
    print_kv("Violations supplied", len(RESULTS["violations"]))
    print_kv("Insights supplied", len(RESULTS["insights"]))

    report = build_analysis_report(DOCUMENT, RESULTS, CONTEXT)

    # 2. VIOLATIONS
    print_section("Step 1: Violation Scoring")
    thresholds = report.thresholds
    factors = report.metadata["context_factors"]
    for idx, v in enumerate(RESULTS["violations"], 1):
        score = calculate_violation_score(v["violationType"], v["severity"], factors)
        banded = get_recommended_severity(score, thresholds)
        print(f"{idx}. {Colors.BOLD}{v['violationType']}{Colors.ENDC}")
        print(f"   ├─ Severity : {v['severity']}")
        print(f"   ├─ Score    : {score:.2f}")
        print(f"   └─ Band     : {banded.value}")

    # 3. COMPLIANCE
    print_section("Step 2: Compliance")
    compliance = report.compliance
    print_kv("Final Score", compliance.final_score, score_color(compliance.final_score) + Colors.BOLD)
    print_kv("Total Penalty", f"{compliance.penalty_calculation.total_penalty:.2f}")
    print_kv("Context Factors", ", ".join(factors) or "none")

    # 4. CONFIDENCE
    print_section("Step 3: Confidence")
    confidence = report.confidence
    interval = report.confidence_interval
    print_kv("Overall", confidence.overall_confidence, score_color(confidence.overall_confidence))
    print_kv("Interval (95%)", f"{interval.lower} - {interval.upper}")
    print_kv("Calibrated", report.calibrated_confidence)

    # 5. IMPACT
    print_section("Step 4: Impact")
    financial = report.impact.financial_impact
    print_kv("Immediate Exposure", f"£{financial.immediate_risk}")
    print_kv("Ongoing Exposure", f"£{financial.ongoing_risk}")
    print_kv("Rights at Risk", ", ".join(report.impact.legal_impact.rights_at_risk) or "none")

    print_separator("=")
    print_kv("Config Fingerprint", report.metadata["config_fingerprint"][:16], Colors.MUTED)
    print("\n")


if __name__ == "__main__":
    run_demo()
