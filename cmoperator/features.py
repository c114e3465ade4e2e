"""Optional operator features and their default state."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class PreRelease(str, enum.Enum):
    """The maturity stage of a feature."""

    ALPHA = "ALPHA"
    BETA = "BETA"
    GA = ""
    DEPRECATED = "DEPRECATED"
    TECH_PREVIEW = "TechPreview"


@dataclass(frozen=True)
class FeatureSpec:
    """How a feature behaves when nobody sets it."""

    default: bool
    pre_release: PreRelease = PreRelease.GA
    lock_to_default: bool = False


# Enables the controller that deploys and manages the istio-csr agent.
FEATURE_ISTIO_CSR = "IstioCSR"

OPERATOR_FEATURE_GATES: Mapping[str, FeatureSpec] = MappingProxyType(
    {
        FEATURE_ISTIO_CSR: FeatureSpec(default=False, pre_release=PreRelease.TECH_PREVIEW),
    }
)


def default_enabled(feature: str) -> bool:
    """Return whether a known feature is on by default."""
    try:
        return OPERATOR_FEATURE_GATES[feature].default
    except KeyError:
        raise KeyError(f"feature {feature!r} is not registered") from None