from tenancyscore.confidence.metrics import (
    assess_analysis_completeness,
    assess_clause_clarity,
    assess_document_completeness,
    assess_document_quality,
    assess_legal_certainty,
    assess_legal_complexity,
    assess_standard_compliance,
    calculate_confidence_metrics,
)
from tenancyscore.models.context import AnalysisContext, AnalysisResult, PropertyDetails
from tenancyscore.models.finding import Insight
from tenancyscore.models.taxonomy import AnalysisDepth, InsightType, SeverityLevel
from tests.fixtures.sample_tenancy import (
    SHORT_NOTE,
    WELL_FORMED_AGREEMENT,
    complete_result,
    detailed_insight,
)


def test_well_formed_agreement_scores_full_confidence():
    metrics = calculate_confidence_metrics(WELL_FORMED_AGREEMENT, complete_result())

    assert metrics.data_quality == 100
    assert metrics.analysis_completeness == 100
    assert metrics.legal_certainty == 100
    assert metrics.document_clarity == 100
    assert metrics.overall_confidence == 100


def test_short_document_has_low_quality():
    assert assess_document_quality(SHORT_NOTE) <= 30
    assert assess_document_quality("") == 0
    assert assess_document_quality(None) == 0


def test_placeholders_reduce_quality():
    with_placeholders = WELL_FORMED_AGREEMENT + "\nGuarantor: [NAME] _____ TBD\n"
    # three placeholders at 3 points each
    assert assess_document_quality(with_placeholders) == 91


def test_missing_result_counts_every_section_absent():
    assert assess_analysis_completeness(None) == 10
    deep = AnalysisContext(analysis_depth=AnalysisDepth.COMPREHENSIVE)
    assert assess_analysis_completeness(None, deep) == 0


def test_deep_analysis_expects_violation_risk_and_impact_sections():
    deep = AnalysisContext(analysis_depth=AnalysisDepth.EXPERT)
    assert assess_analysis_completeness(complete_result(), deep) == 55
    assert assess_analysis_completeness(
        complete_result(violations=(), risk_assessment={}, impact_assessment={}), deep
    ) == 100


def test_sparse_recommendations_are_penalised():
    assert assess_analysis_completeness(complete_result(recommendations=("One",))) == 90
    # An empty list is both a missing section and an empty one
    assert assess_analysis_completeness(complete_result(recommendations=())) == 65


def test_legal_certainty_without_insights():
    empty = AnalysisResult(insights=())
    assert assess_legal_certainty(empty) == 60
    assert assess_legal_certainty(None) == 60


def test_extreme_upstream_score_reduces_certainty():
    assert assess_legal_certainty(complete_result(compliance_score=100)) == 90
    assert assess_legal_certainty(complete_result(compliance_score=0)) == 90
    assert assess_legal_certainty(complete_result(compliance_score=64)) == 100


def test_hedging_terms_match_whole_words_only():
    mayor = AnalysisResult(insights=(
        Insight(violation_type=None, severity=None, content="The Mayor of London scheme applies."),
    ))
    hedged = AnalysisResult(insights=(
        Insight(violation_type=None, severity=None, content="This clause may be unenforceable."),
    ))
    assert assess_legal_certainty(mayor) == 60
    assert assess_legal_certainty(hedged) == 40


def test_factor_breakdown_for_well_formed_agreement():
    assert assess_document_completeness(WELL_FORMED_AGREEMENT) == 100
    assert assess_standard_compliance(WELL_FORMED_AGREEMENT) == 100
    assert assess_clause_clarity(WELL_FORMED_AGREEMENT) == 100


def test_vague_wording_lowers_clause_clarity():
    vague = "The tenant shall act reasonable and fair and pay promptly in due course."
    assert assess_clause_clarity(vague) == 88
    assert assess_document_completeness("") == 0
    assert assess_standard_compliance("") == 0


def test_legal_complexity_counts_serious_issues_acts_and_edge_cases():
    result = complete_result(
        insights=(
            detailed_insight("Fee", InsightType.WARNING),
            detailed_insight("Gas", severity=SeverityLevel.CRITICAL),
            detailed_insight("Rent"),
        ),
        property_details=PropertyDetails(property_type="Holiday let cottage"),
    )
    # 2 serious issues, 1 distinct act, edge-case property type
    assert assess_legal_complexity(result) == 30 + 10 + 20
    assert assess_legal_complexity(None) == 0


def test_metrics_stay_in_bounds_for_degenerate_inputs():
    metrics = calculate_confidence_metrics(None, None)
    payload = metrics.to_dict()

    for key in ("overall_confidence", "data_quality", "analysis_completeness",
                "legal_certainty", "document_clarity"):
        assert 0 <= payload[key] <= 100
    for value in payload["factor_breakdown"].values():
        assert 0 <= value <= 100
