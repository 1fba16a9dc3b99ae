"""
Environment-level settings for the scoring engine.

Values are read from the process environment (optionally seeded from a
.env file) each time a loader is called, so tests can monkeypatch them.
A malformed value never stops scoring: it is logged and the default used.
"""
import hashlib
import json
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG, WeightedScoringConfig

load_dotenv()

logger = logging.getLogger("tenancyscore.settings")

DEFAULT_ENGINE_VERSION = "tenancyscore-1.0.0"

TENANT_PROTECTION_BIAS_ENV = "TENANCYSCORE_TENANT_PROTECTION_BIAS"
CONSERVATISM_FACTOR_ENV = "TENANCYSCORE_CONSERVATISM_FACTOR"
COMPOUND_SEVERITY_ENV = "TENANCYSCORE_COMPOUND_SEVERITY"
ENGINE_VERSION_ENV = "TENANCYSCORE_ENGINE_VERSION"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def _read_percentage(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s: not a number; using %s", name, default)
        return default

    if not 0 <= value <= 100:
        logger.warning("Ignoring %s: %s is outside 0-100; using %s", name, value, default)
        return default
    return value


def load_scoring_config(
    base: Optional[WeightedScoringConfig] = None,
) -> WeightedScoringConfig:
    """
    Default scoring configuration with the tunable knobs taken from the
    environment. Weight tables are not environment-configurable.
    """
    base = base or DEFAULT_SCORING_CONFIG
    return base.with_overrides(
        tenant_protection_bias=_read_percentage(
            TENANT_PROTECTION_BIAS_ENV, base.tenant_protection_bias
        ),
        conservatism_factor=_read_percentage(
            CONSERVATISM_FACTOR_ENV, base.conservatism_factor
        ),
    )


def compound_severity_enabled() -> bool:
    raw = (os.getenv(COMPOUND_SEVERITY_ENV) or "").strip().lower()
    if raw in _TRUE:
        return True
    if raw not in _FALSE:
        logger.warning("Ignoring %s: unrecognised flag value; using per-violation scaling",
                       COMPOUND_SEVERITY_ENV)
    return False


def engine_version() -> str:
    return os.getenv(ENGINE_VERSION_ENV) or DEFAULT_ENGINE_VERSION


def compute_config_fingerprint(config: WeightedScoringConfig) -> str:
    """
    Deterministic SHA-256 over the canonical JSON form of a configuration.
    Two reports with the same fingerprint were scored with identical weights.
    """
    serialized = json.dumps(
        config.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
