"""
Scoring telemetry.

Span events only, attached to whatever span the host application has
open. Outside a recording span every emitter is a no-op. Attributes are
scores, counts and fixed labels: never document text, evidence or names.
"""
import logging
from typing import Literal

from opentelemetry.trace import get_current_span

logger = logging.getLogger("tenancyscore.telemetry")

SeverityMode = Literal["per_violation", "compounding"]


def emit_scoring_telemetry(
    final_score: int,
    overall_confidence: int,
    violation_count: int,
    severity_mode: SeverityMode,
):
    """
    Emit a single event per scored document.

    Attributes are locked to the four arguments; anything else belongs
    in the report itself, not in telemetry.
    """
    if severity_mode not in ("per_violation", "compounding"):
        raise ValueError(
            f"severity_mode must be 'per_violation' or 'compounding', got {severity_mode!r}"
        )

    span = get_current_span()
    if not span.is_recording():
        return

    span.add_event(
        name="tenancyscore.scoring",
        attributes={
            "final_score": int(final_score),
            "overall_confidence": int(overall_confidence),
            "violation_count": int(violation_count),
            "severity_mode": severity_mode,
        },
    )


def scrub_exception_for_telemetry(exception: Exception) -> str:
    """
    Never log str(e): payload validation messages can quote document text.
    Only the exception class name leaves the process.
    """
    return type(exception).__name__


def emit_exception_telemetry(exception: Exception):
    exception_type = scrub_exception_for_telemetry(exception)
    logger.debug("Scoring failed with %s", exception_type)

    span = get_current_span()
    if not span.is_recording():
        return

    span.add_event(
        name="tenancyscore.exception",
        attributes={"exception_type": exception_type},
    )
