import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from tenancyscore import settings
from tenancyscore.adapters.analysis_adapter import (
    derive_context_factors,
    normalize_analysis_context,
    normalize_analysis_results,
)
from tenancyscore.confidence.calibration import (
    calculate_confidence_interval,
    calibrate_confidence,
)
from tenancyscore.confidence.metrics import calculate_confidence_metrics
from tenancyscore.impact.assessment import calculate_impact_assessment
from tenancyscore.models.context import AnalysisContext, AnalysisResult
from tenancyscore.models.scores import AnalysisReport
from tenancyscore.scoring.compliance import (
    calculate_category_risk_scores,
    calculate_compliance_score,
)
from tenancyscore.scoring.config import WeightedScoringConfig
from tenancyscore.scoring.thresholds import calibrate_thresholds
from tenancyscore.telemetry import emit_exception_telemetry, emit_scoring_telemetry

logger = logging.getLogger("tenancyscore.report")

INTERVAL_CONFIDENCE_LEVEL = 95


def build_analysis_report(
    document_text: Optional[str],
    results: Union[AnalysisResult, Mapping[str, Any]],
    context: Union[AnalysisContext, Mapping[str, Any], None] = None,
    config: Optional[WeightedScoringConfig] = None,
    *,
    compound_severity: Optional[bool] = None,
) -> AnalysisReport:
    """
    Runs every calculator over one analysed document.

    ``results`` and ``context`` may be raw camelCase payloads; they are
    normalised first. ``config`` and ``compound_severity`` default to the
    environment settings. Only a broken ``insights`` contract raises.
    """
    try:
        if not isinstance(results, AnalysisResult):
            results = normalize_analysis_results(results)
        context = normalize_analysis_context(context)
    except ValueError as e:
        emit_exception_telemetry(e)
        raise

    if config is None:
        config = settings.load_scoring_config()
    if compound_severity is None:
        compound_severity = settings.compound_severity_enabled()

    context_factors = derive_context_factors(context)
    violations = results.violations or ()
    insights = results.insights

    # -------------------------------
    # Scoring
    # -------------------------------
    compliance = calculate_compliance_score(violations, insights, context_factors, config)
    category_risk_scores = calculate_category_risk_scores(violations, context_factors, config)
    thresholds = calibrate_thresholds(config)

    # -------------------------------
    # Confidence
    # -------------------------------
    confidence = calculate_confidence_metrics(document_text, results, context)
    interval = calculate_confidence_interval(
        confidence.overall_confidence, INTERVAL_CONFIDENCE_LEVEL
    )
    calibrated = calibrate_confidence(
        confidence.overall_confidence,
        document_quality=confidence.data_quality,
        analysis_depth=context.analysis_depth,
        legal_complexity=confidence.factor_breakdown.legal_complexity,
        validation_performed=results.validation_performed,
        expert_review=results.expert_review,
    )

    # -------------------------------
    # Impact
    # -------------------------------
    impact = calculate_impact_assessment(
        violations, insights, results, context, compound_severity=compound_severity
    )

    severity_mode = "compounding" if compound_severity else "per_violation"
    metadata = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "engine_version": settings.engine_version(),
        "config_fingerprint": settings.compute_config_fingerprint(config),
        "context_factors": [f.value for f in context_factors],
        "severity_mode": severity_mode,
    }

    logger.info(
        "Report built: final_score=%d confidence=%d violations=%d warnings=%d mode=%s",
        compliance.final_score,
        confidence.overall_confidence,
        len(violations),
        sum(1 for i in insights if i.is_warning),
        severity_mode,
    )
    emit_scoring_telemetry(
        final_score=compliance.final_score,
        overall_confidence=confidence.overall_confidence,
        violation_count=len(violations),
        severity_mode=severity_mode,
    )

    return AnalysisReport(
        compliance=compliance,
        confidence=confidence,
        impact=impact,
        thresholds=thresholds,
        category_risk_scores=category_risk_scores,
        confidence_interval=interval,
        calibrated_confidence=calibrated,
        metadata=metadata,
    )
