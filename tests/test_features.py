import pytest

from cmoperator.features import (
    FEATURE_ISTIO_CSR,
    OPERATOR_FEATURE_GATES,
    FeatureSpec,
    PreRelease,
    default_enabled,
)


def test_istio_csr_disabled_by_default():
    assert default_enabled("IstioCSR") is False


def test_istio_csr_is_tech_preview():
    spec = OPERATOR_FEATURE_GATES[FEATURE_ISTIO_CSR]
    assert spec == FeatureSpec(default=False, pre_release=PreRelease.TECH_PREVIEW)
    assert PreRelease("TechPreview") is spec.pre_release
    assert spec.lock_to_default is False


def test_gates_hold_only_known_features():
    defaults = {name: default_enabled(name) for name in OPERATOR_FEATURE_GATES}
    assert defaults == {FEATURE_ISTIO_CSR: False}


def test_unknown_feature_raises():
    with pytest.raises(KeyError):
        default_enabled("NoSuchFeature")


def test_gates_are_read_only():
    with pytest.raises(TypeError):
        OPERATOR_FEATURE_GATES["Other"] = FeatureSpec(default=True)


def test_feature_spec_defaults_to_ga():
    assert FeatureSpec(default=True).pre_release is PreRelease.GA