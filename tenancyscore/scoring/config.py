import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from tenancyscore.scoring.weights import (
    CONTEXT_MODIFIERS,
    DEFAULT_CONSERVATISM_FACTOR,
    DEFAULT_TENANT_PROTECTION_BIAS,
    LEGAL_AREA_WEIGHTS,
    SEVERITY_MULTIPLIERS,
    UNKNOWN_SEVERITY_MULTIPLIER,
    UNKNOWN_VIOLATION_BASE_SCORE,
    VIOLATION_BASE_SCORES,
)

_TABLE_FIELDS = (
    "violation_type_weights",
    "severity_weights",
    "category_weights",
    "context_modifiers",
)


@dataclass(frozen=True)
class WeightedScoringConfig:
    """
    Full parameter set threaded through every calculation.

    Tables are wrapped in read-only mappings on construction, so an
    instance can be shared freely. Build variants with ``with_overrides``.
    """
    violation_type_weights: Mapping[Any, float]
    severity_weights: Mapping[Any, float]
    category_weights: Mapping[Any, float]
    context_modifiers: Mapping[Any, float]
    tenant_protection_bias: float = DEFAULT_TENANT_PROTECTION_BIAS
    conservatism_factor: float = DEFAULT_CONSERVATISM_FACTOR

    def __post_init__(self):
        for name in _TABLE_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

        for name in ("tenant_protection_bias", "conservatism_factor"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value!r}")

    # Lookups are total: values outside the catalogue get neutral defaults.
    # Str-valued enum members hash like their value, so raw strings work too.

    def base_score(self, violation_type) -> float:
        weight = self.violation_type_weights.get(violation_type)
        return UNKNOWN_VIOLATION_BASE_SCORE if weight is None else weight

    def severity_multiplier(self, severity) -> float:
        multiplier = self.severity_weights.get(severity)
        return UNKNOWN_SEVERITY_MULTIPLIER if multiplier is None else multiplier

    def context_modifier(self, factor) -> float:
        modifier = self.context_modifiers.get(factor)
        return 1.0 if modifier is None else modifier

    def with_overrides(self, **changes) -> "WeightedScoringConfig":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        def plain(table):
            return {getattr(k, "value", k): v for k, v in sorted(
                table.items(), key=lambda item: str(getattr(item[0], "value", item[0]))
            )}

        return {
            "violation_type_weights": plain(self.violation_type_weights),
            "severity_weights": plain(self.severity_weights),
            "category_weights": plain(self.category_weights),
            "context_modifiers": plain(self.context_modifiers),
            "tenant_protection_bias": self.tenant_protection_bias,
            "conservatism_factor": self.conservatism_factor,
        }


DEFAULT_SCORING_CONFIG = WeightedScoringConfig(
    violation_type_weights=VIOLATION_BASE_SCORES,
    severity_weights=SEVERITY_MULTIPLIERS,
    category_weights=LEGAL_AREA_WEIGHTS,
    context_modifiers=CONTEXT_MODIFIERS,
)
