import logging

import pytest

from tenancyscore import settings
from tenancyscore.models.taxonomy import ContextFactor, SeverityLevel, ViolationType
from tenancyscore.scoring.config import DEFAULT_SCORING_CONFIG


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        settings.TENANT_PROTECTION_BIAS_ENV,
        settings.CONSERVATISM_FACTOR_ENV,
        settings.COMPOUND_SEVERITY_ENV,
        settings.ENGINE_VERSION_ENV,
    ):
        monkeypatch.delenv(name, raising=False)


def test_default_config_lookups():
    assert DEFAULT_SCORING_CONFIG.base_score(ViolationType.DISCRIMINATION) == 95
    assert DEFAULT_SCORING_CONFIG.severity_multiplier(SeverityLevel.INFORMATIONAL) == 0.3
    assert DEFAULT_SCORING_CONFIG.context_modifier(ContextFactor.COUNCIL_LANDLORD) == 0.8
    assert DEFAULT_SCORING_CONFIG.context_modifier("not_a_factor") == 1.0


def test_config_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_SCORING_CONFIG.violation_type_weights[ViolationType.GAS_SAFETY] = 1


def test_config_rejects_out_of_range_knobs():
    with pytest.raises(ValueError):
        DEFAULT_SCORING_CONFIG.with_overrides(tenant_protection_bias=101)
    with pytest.raises(ValueError):
        DEFAULT_SCORING_CONFIG.with_overrides(conservatism_factor=-1)


def test_with_overrides_leaves_original_untouched():
    tuned = DEFAULT_SCORING_CONFIG.with_overrides(conservatism_factor=20)

    assert tuned.conservatism_factor == 20
    assert DEFAULT_SCORING_CONFIG.conservatism_factor == 80
    assert tuned.violation_type_weights == DEFAULT_SCORING_CONFIG.violation_type_weights


def test_load_scoring_config_without_env_matches_default():
    assert settings.load_scoring_config() == DEFAULT_SCORING_CONFIG


def test_load_scoring_config_reads_env(monkeypatch):
    monkeypatch.setenv(settings.TENANT_PROTECTION_BIAS_ENV, "50")
    monkeypatch.setenv(settings.CONSERVATISM_FACTOR_ENV, "65.5")

    config = settings.load_scoring_config()

    assert config.tenant_protection_bias == 50.0
    assert config.conservatism_factor == 65.5


@pytest.mark.parametrize("raw", ["abc", "150", "-3"])
def test_malformed_env_falls_back_with_warning(monkeypatch, caplog, raw):
    monkeypatch.setenv(settings.TENANT_PROTECTION_BIAS_ENV, raw)

    with caplog.at_level(logging.WARNING, logger="tenancyscore.settings"):
        config = settings.load_scoring_config()

    assert config.tenant_protection_bias == 75
    assert settings.TENANT_PROTECTION_BIAS_ENV in caplog.text


def test_compound_severity_flag(monkeypatch):
    assert settings.compound_severity_enabled() is False

    monkeypatch.setenv(settings.COMPOUND_SEVERITY_ENV, "true")
    assert settings.compound_severity_enabled() is True

    monkeypatch.setenv(settings.COMPOUND_SEVERITY_ENV, "maybe")
    assert settings.compound_severity_enabled() is False


def test_engine_version(monkeypatch):
    assert settings.engine_version() == settings.DEFAULT_ENGINE_VERSION

    monkeypatch.setenv(settings.ENGINE_VERSION_ENV, "tenancyscore-2.0.0-rc1")
    assert settings.engine_version() == "tenancyscore-2.0.0-rc1"


def test_config_fingerprint_is_deterministic():
    first = settings.compute_config_fingerprint(DEFAULT_SCORING_CONFIG)
    second = settings.compute_config_fingerprint(
        DEFAULT_SCORING_CONFIG.with_overrides(tenant_protection_bias=75)
    )

    assert first == second
    assert len(first) == 64


def test_config_fingerprint_changes_with_weights():
    baseline = settings.compute_config_fingerprint(DEFAULT_SCORING_CONFIG)
    tuned = settings.compute_config_fingerprint(
        DEFAULT_SCORING_CONFIG.with_overrides(conservatism_factor=81)
    )
    assert baseline != tuned
