import json

import pytest

from tenancyscore import settings
from tenancyscore.adapters.analysis_adapter import AnalysisInputError
from tenancyscore.orchestrator.report_builder import build_analysis_report
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG
from tests.fixtures.sample_tenancy import (
    CONTEXT_PAYLOAD,
    RESULTS_PAYLOAD,
    WELL_FORMED_AGREEMENT,
    complete_result,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        settings.TENANT_PROTECTION_BIAS_ENV,
        settings.CONSERVATISM_FACTOR_ENV,
        settings.COMPOUND_SEVERITY_ENV,
        settings.ENGINE_VERSION_ENV,
    ):
        monkeypatch.delenv(name, raising=False)


def test_report_from_raw_payload():
    report = build_analysis_report(WELL_FORMED_AGREEMENT, RESULTS_PAYLOAD)

    # Violation penalty 25 plus warning 12.5, inflated by 9%
    assert report.compliance.final_score == 59
    assert report.compliance.penalty_calculation.total_penalty == pytest.approx(40.88, abs=0.01)
    assert report.impact.financial_impact.immediate_risk == 150
    assert report.metadata["severity_mode"] == "per_violation"
    assert report.metadata["context_factors"] == []
    assert report.metadata["engine_version"] == settings.DEFAULT_ENGINE_VERSION


def test_report_is_json_safe():
    report = build_analysis_report(WELL_FORMED_AGREEMENT, RESULTS_PAYLOAD, CONTEXT_PAYLOAD)
    payload = json.loads(json.dumps(report.to_dict()))

    assert set(payload) == {
        "compliance_scoring",
        "confidence_metrics",
        "impact_assessment",
        "severity_thresholds",
        "category_risk_scores",
        "confidence_interval",
        "calibrated_confidence",
        "metadata",
    }
    assert payload["category_risk_scores"]["FINANCIAL"] == 100.0
    assert payload["compliance_scoring"]["category_scores"]["tenant_fees_act"] == 80
    assert payload["metadata"]["context_factors"] == [
        "vulnerable_tenant",
        "first_time_tenant",
        "disabled_tenant",
        "council_landlord",
        "professional_landlord",
        "high_demand_area",
    ]


def test_report_accepts_domain_objects():
    report = build_analysis_report(WELL_FORMED_AGREEMENT, complete_result(), config=DEFAULT_SCORING_CONFIG)

    assert report.compliance.final_score == 100
    assert report.confidence.overall_confidence == 100
    assert report.confidence_interval.to_dict() == {"lower": 100, "upper": 100, "margin": 0.0}
    assert report.calibrated_confidence == 100
    assert report.thresholds.critical == pytest.approx(75.65)


def test_metadata_fingerprints_the_config_used():
    tuned = DEFAULT_SCORING_CONFIG.with_overrides(conservatism_factor=50)
    report = build_analysis_report(WELL_FORMED_AGREEMENT, RESULTS_PAYLOAD, config=tuned)

    assert report.metadata["config_fingerprint"] == settings.compute_config_fingerprint(tuned)
    assert report.metadata["config_fingerprint"] != settings.compute_config_fingerprint(
        DEFAULT_SCORING_CONFIG
    )


def test_environment_settings_apply_when_not_passed(monkeypatch):
    monkeypatch.setenv(settings.CONSERVATISM_FACTOR_ENV, "50")
    monkeypatch.setenv(settings.COMPOUND_SEVERITY_ENV, "1")
    monkeypatch.setenv(settings.ENGINE_VERSION_ENV, "tenancyscore-test")

    report = build_analysis_report(WELL_FORMED_AGREEMENT, RESULTS_PAYLOAD)

    # 25 + 12.5 with no conservatism inflation
    assert report.compliance.final_score == 63
    assert report.metadata["severity_mode"] == "compounding"
    assert report.metadata["engine_version"] == "tenancyscore-test"


def test_explicit_flag_overrides_environment(monkeypatch):
    monkeypatch.setenv(settings.COMPOUND_SEVERITY_ENV, "true")
    report = build_analysis_report(
        WELL_FORMED_AGREEMENT, RESULTS_PAYLOAD, compound_severity=False
    )
    assert report.metadata["severity_mode"] == "per_violation"


def test_broken_insights_contract_raises():
    with pytest.raises(AnalysisInputError):
        build_analysis_report(WELL_FORMED_AGREEMENT, {"violations": []})


@pytest.mark.parametrize(
    "payload",
    [
        {"insights": [], "propertyDetails": "Flat 2, 8 Mill Lane"},
        {"insights": [{"title": "Deposit", "content": ["unprotected"]}]},
        {"insights": [], "violations": ["check-out fee"]},
        {"insights": [], "financialTerms": {"monthlyRent": {"amount": 1150}}},
    ],
)
def test_malformed_optional_fields_still_produce_a_report(payload):
    report = build_analysis_report(WELL_FORMED_AGREEMENT, payload)

    assert 0 <= report.compliance.final_score <= 100
    assert 0 <= report.confidence.overall_confidence <= 100
    json.dumps(report.to_dict())
