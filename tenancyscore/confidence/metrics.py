"""
Confidence metrics: how far the analysis itself can be trusted.

Each sub-score starts from a fixed base and accumulates penalties and
bonuses from regex heuristics, then is clamped to 0-100. Missing inputs
count as absent signals and are penalised; nothing here raises on data.
"""
import logging
from typing import Optional

from tenancyscore.confidence import patterns
from tenancyscore.models.context import AnalysisContext, AnalysisResult
from tenancyscore.models.scores import ConfidenceMetrics, FactorBreakdown
from tenancyscore.models.taxonomy import AnalysisDepth, SeverityLevel
from tenancyscore.scoring.utils import to_score

logger = logging.getLogger("tenancyscore.confidence")

SUB_SCORE_WEIGHTS = {
    "data_quality": 0.25,
    "analysis_completeness": 0.25,
    "legal_certainty": 0.25,
    "document_clarity": 0.25,
}

REQUIRED_SECTIONS = (
    "property_details",
    "financial_terms",
    "lease_period",
    "parties",
    "insights",
    "recommendations",
)

DEEP_ANALYSIS_SECTIONS = ("violations", "risk_assessment", "impact_assessment")

_EMPTY_RESULT = AnalysisResult(insights=())


def calculate_confidence_metrics(
    document_text: Optional[str],
    analysis_result: Optional[AnalysisResult],
    context: Optional[AnalysisContext] = None,
) -> ConfidenceMetrics:
    text = document_text or ""
    context = context or AnalysisContext()

    data_quality = assess_document_quality(text)
    analysis_completeness = assess_analysis_completeness(analysis_result, context)
    legal_certainty = assess_legal_certainty(analysis_result)
    document_clarity = assess_document_clarity(text)

    factor_breakdown = FactorBreakdown(
        document_completeness=assess_document_completeness(text),
        clause_clarity=assess_clause_clarity(text),
        standard_compliance=assess_standard_compliance(text),
        legal_complexity=assess_legal_complexity(analysis_result),
        ambiguity_level=assess_ambiguity_level(text),
    )

    overall = to_score(
        data_quality * SUB_SCORE_WEIGHTS["data_quality"]
        + analysis_completeness * SUB_SCORE_WEIGHTS["analysis_completeness"]
        + legal_certainty * SUB_SCORE_WEIGHTS["legal_certainty"]
        + document_clarity * SUB_SCORE_WEIGHTS["document_clarity"]
    )

    logger.debug(
        "Confidence scored: overall=%d quality=%d completeness=%d certainty=%d clarity=%d",
        overall, data_quality, analysis_completeness, legal_certainty, document_clarity,
    )

    return ConfidenceMetrics(
        overall_confidence=overall,
        data_quality=data_quality,
        analysis_completeness=analysis_completeness,
        legal_certainty=legal_certainty,
        document_clarity=document_clarity,
        factor_breakdown=factor_breakdown,
    )


# =========================================================
# Sub-scores
# =========================================================

def assess_document_quality(document_text: Optional[str]) -> int:
    text = document_text or ""
    score = 100

    if len(text) < 1000:
        score -= 30
    elif len(text) < 2000:
        score -= 15

    if not patterns.STRUCTURE_MARKERS.search(text):
        score -= 20

    missing_terms = [t for t in patterns.KEY_TERMS if not patterns.contains(t, text)]
    score -= len(missing_terms) * 5

    present_indicators = [i for i in patterns.QUALITY_INDICATORS if patterns.contains(i, text)]
    score += len(present_indicators) * 3

    placeholder_count = len(patterns.PLACEHOLDERS.findall(text))
    if placeholder_count:
        score -= min(30, placeholder_count * 3)

    return to_score(score)


def _section_missing(result: AnalysisResult, section: str) -> bool:
    value = getattr(result, section, None)
    if value is None:
        return True
    if isinstance(value, (tuple, list)) and len(value) == 0:
        return True
    return False


def assess_analysis_completeness(
    analysis_result: Optional[AnalysisResult],
    context: Optional[AnalysisContext] = None,
) -> int:
    context = context or AnalysisContext()
    score = 100

    if analysis_result is None:
        # Nothing was supplied: every required section is absent
        score -= len(REQUIRED_SECTIONS) * 15
        result = _EMPTY_RESULT
    else:
        result = analysis_result
        missing = [s for s in REQUIRED_SECTIONS if _section_missing(result, s)]
        score -= len(missing) * 15

        insights = result.insights or ()
        if not insights:
            score -= 25
        elif len(insights) < 3:
            score -= 10

        detailed = [i for i in insights if i.content and len(i.content) > 100]
        if len(detailed) < len(insights) * 0.5:
            score -= 15

        if result.recommendations is not None:
            if len(result.recommendations) == 0:
                score -= 20
            elif len(result.recommendations) < 2:
                score -= 10

    if context.analysis_depth in (AnalysisDepth.COMPREHENSIVE, AnalysisDepth.EXPERT):
        for section in DEEP_ANALYSIS_SECTIONS:
            if getattr(result, section, None) is None:
                score -= 15

    return to_score(score)


def assess_legal_certainty(analysis_result: Optional[AnalysisResult]) -> int:
    insights = analysis_result.insights if analysis_result else ()
    insights = insights or ()
    score = 100

    has_legal_references = any(
        insight.legal_basis
        or any(patterns.LEGAL_INDICATOR.search(ind or "") for ind in insight.indicators)
        for insight in insights
    )
    if not has_legal_references:
        score -= 25

    has_specific_citations = any(
        insight.content and patterns.SPECIFIC_CITATION.search(insight.content)
        for insight in insights
    )
    if not has_specific_citations:
        score -= 15

    uncertain = [i for i in insights if i.content and patterns.HEDGING.search(i.content)]
    if len(uncertain) > len(insights) * 0.3:
        score -= 20

    # Extreme scores from upstream are rarely reliable
    compliance_score = analysis_result.compliance_score if analysis_result else None
    if compliance_score is not None and compliance_score in (0, 100):
        score -= 10

    return to_score(score)


def assess_document_clarity(document_text: Optional[str]) -> int:
    text = document_text or ""
    score = 100

    sentences = patterns.SENTENCE_SPLIT.split(text)
    long_sentences = [s for s in sentences if len(s) > 200]
    score -= min(20, len(long_sentences) * 2)

    jargon_count = len([t for t in patterns.LEGAL_JARGON if patterns.contains(t, text)])
    score -= jargon_count * 3

    if patterns.NUMBERED_STRUCTURE.search(text):
        score += 10
    if patterns.HEADINGS.search(text):
        score += 10
    if patterns.DEFINED_TERMS.search(text):
        score += 5

    return to_score(score)


# =========================================================
# Factor breakdown
# =========================================================

def assess_document_completeness(document_text: Optional[str]) -> int:
    text = document_text or ""
    score = 100
    for pattern, weight in patterns.ESSENTIAL_ELEMENTS:
        if not pattern.search(text):
            score -= weight
    return to_score(score)


def assess_clause_clarity(document_text: Optional[str]) -> int:
    text = document_text or ""
    score = 100

    ambiguity_count = len([t for t in patterns.AMBIGUOUS_TERMS if patterns.contains_word(t, text)])
    score -= min(30, ambiguity_count * 3)

    if patterns.SPECIFIC_TIMEFRAME.search(text):
        score += 10
    if patterns.SPECIFIC_AMOUNT.search(text):
        score += 10

    return to_score(score)


def assess_standard_compliance(document_text: Optional[str]) -> int:
    text = document_text or ""
    present = [c for c in patterns.STANDARD_CLAUSES if patterns.contains(c, text)]
    return to_score(len(present) / len(patterns.STANDARD_CLAUSES) * 100)


def assess_legal_complexity(analysis_result: Optional[AnalysisResult]) -> int:
    """Higher means more complex (0 = straightforward)."""
    if analysis_result is None:
        return 0

    insights = analysis_result.insights or ()
    score = 0

    serious_issues = [
        i for i in insights
        if i.is_warning or i.severity in (SeverityLevel.CRITICAL, SeverityLevel.SERIOUS)
    ]
    score += len(serious_issues) * 15

    acts = {ref.act for i in insights for ref in i.legal_basis if ref.act}
    score += len(acts) * 10

    details = analysis_result.property_details
    property_type = (details.property_type if details else "").lower()
    if any(term in property_type for term in patterns.EDGE_CASE_PROPERTY_TYPES):
        score += 20

    return to_score(score)


def assess_ambiguity_level(document_text: Optional[str]) -> int:
    """Higher means more ambiguous (0 = precise)."""
    text = document_text or ""
    score = 0

    for phrase in patterns.AMBIGUOUS_PHRASES:
        score += patterns.count_occurrences(phrase, text) * 5

    # Many distinct capitalised terms suggest undefined defined-terms
    if len(set(patterns.CAPITALISED_TERM.findall(text))) > 50:
        score += 15

    return to_score(score)
