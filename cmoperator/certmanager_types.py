"""The CertManager resource and the settings it carries for the cert-manager operands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from .conditions import Condition
from .groupversion import SCHEME_GROUP_VERSION
from .meta import ListMeta, ObjectMeta, TypeMeta, _omit_empty


def _type_meta(kind: str) -> TypeMeta:
    return TypeMeta(api_version=str(SCHEME_GROUP_VERSION), kind=kind)


@dataclass
class EnvVar:
    """An environment variable set on an operand container."""

    name: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, **_omit_empty({"value": self.value})}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EnvVar:
        return cls(data.get("name", ""), data.get("value", ""))


@dataclass
class Toleration:
    """Lets a pod be scheduled onto nodes carrying a matching taint."""

    key: str = ""
    operator: str = ""
    value: str = ""
    effect: str = ""
    toleration_seconds: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data = _omit_empty(
            {"key": self.key, "operator": self.operator, "value": self.value, "effect": self.effect}
        )
        if self.toleration_seconds is not None:
            data["tolerationSeconds"] = self.toleration_seconds
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Toleration:
        seconds = data.get("tolerationSeconds")
        return cls(
            *(data.get(k, "") for k in ("key", "operator", "value", "effect")),
            None if seconds is None else int(seconds),
        )


@dataclass
class CertManagerResourceRequirements:
    """Compute resource limits and requests, as quantity strings keyed by resource name."""

    limits: dict[str, str] = field(default_factory=dict)
    requests: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"limits": dict(self.limits), "requests": dict(self.requests)})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CertManagerResourceRequirements:
        data = data or {}
        return cls(*({str(k): str(v) for k, v in (data.get(key) or {}).items()} for key in ("limits", "requests")))


@dataclass
class CertManagerScheduling:
    """Node selection and tolerations for an operand's pods."""

    node_selector: dict[str, str] = field(default_factory=dict)
    tolerations: list[Toleration] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {"nodeSelector": dict(self.node_selector), "tolerations": [t.to_dict() for t in self.tolerations]}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CertManagerScheduling:
        data = data or {}
        return cls(
            dict(data.get("nodeSelector") or {}),
            [Toleration.from_dict(t) for t in data.get("tolerations") or []],
        )


@dataclass
class DeploymentConfig:
    """Overrides applied to one operand deployment: controller, webhook or cainjector."""

    override_args: list[str] = field(default_factory=list)
    override_env: list[EnvVar] = field(default_factory=list)
    override_labels: dict[str, str] = field(default_factory=dict)
    override_resources: CertManagerResourceRequirements = field(default_factory=CertManagerResourceRequirements)
    override_scheduling: CertManagerScheduling = field(default_factory=CertManagerScheduling)

    def to_dict(self) -> dict[str, Any]:
        return {
            **_omit_empty(
                {
                    "overrideArgs": list(self.override_args),
                    "overrideEnv": [env.to_dict() for env in self.override_env],
                    "overrideLabels": dict(self.override_labels),
                }
            ),
            "overrideResources": self.override_resources.to_dict(),
            "overrideScheduling": self.override_scheduling.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> DeploymentConfig:
        data = data or {}
        return cls(
            list(data.get("overrideArgs") or []),
            [EnvVar.from_dict(e) for e in data.get("overrideEnv") or []],
            dict(data.get("overrideLabels") or {}),
            CertManagerResourceRequirements.from_dict(data.get("overrideResources")),
            CertManagerScheduling.from_dict(data.get("overrideScheduling")),
        )


class ManagementState(str, enum.Enum):
    """Whether and how the operator manages its operands."""

    MANAGED = "Managed"
    UNMANAGED = "Unmanaged"
    FORCE = "Force"
    REMOVED = "Removed"


@dataclass
class OperatorSpec:
    """Settings common to every operator: management state, log levels and raw overrides."""

    management_state: ManagementState = ManagementState.MANAGED
    log_level: str = ""
    operator_log_level: str = ""
    unsupported_config_overrides: dict[str, Any] | None = None
    observed_config: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "managementState": ManagementState(self.management_state).value,
            **_omit_empty({"logLevel": self.log_level, "operatorLogLevel": self.operator_log_level}),
        }
        for key, raw in (
            ("unsupportedConfigOverrides", self.unsupported_config_overrides),
            ("observedConfig", self.observed_config),
        ):
            if raw is not None:
                data[key] = dict(raw)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OperatorSpec:
        data = data or {}
        return cls(
            ManagementState(data.get("managementState", "Managed")),
            data.get("logLevel", ""),
            data.get("operatorLogLevel", ""),
            data.get("unsupportedConfigOverrides"),
            data.get("observedConfig"),
        )


@dataclass
class OperatorStatus:
    """Status common to every operator."""

    observed_generation: int = 0
    conditions: list[Condition] = field(default_factory=list)
    version: str = ""
    ready_replicas: int = 0
    latest_available_revision: int = 0
    generations: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            **_omit_empty(
                {
                    "observedGeneration": self.observed_generation,
                    "conditions": [c.to_dict() for c in self.conditions],
                    "version": self.version,
                    "latestAvailableRevision": self.latest_available_revision,
                    "generations": [dict(g) for g in self.generations],
                }
            ),
            "readyReplicas": self.ready_replicas,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OperatorStatus:
        data = data or {}
        return cls(
            int(data.get("observedGeneration") or 0),
            [Condition.from_dict(c) for c in data.get("conditions") or []],
            data.get("version", ""),
            int(data.get("readyReplicas") or 0),
            int(data.get("latestAvailableRevision") or 0),
            [dict(g) for g in data.get("generations") or []],
        )


_DEPLOYMENT_CONFIG_KEYS = {
    "controller_config": "controllerConfig",
    "webhook_config": "webhookConfig",
    "cainjector_config": "cainjectorConfig",
}


@dataclass
class CertManagerSpec(OperatorSpec):
    """Desired state of cert-manager, with per-operand deployment overrides."""

    controller_config: DeploymentConfig | None = None
    webhook_config: DeploymentConfig | None = None
    cainjector_config: DeploymentConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        for attr, key in _DEPLOYMENT_CONFIG_KEYS.items():
            if getattr(self, attr) is not None:
                data[key] = getattr(self, attr).to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CertManagerSpec:
        data = data or {}
        configs = {
            attr: None if data.get(key) is None else DeploymentConfig.from_dict(data[key])
            for attr, key in _DEPLOYMENT_CONFIG_KEYS.items()
        }
        return cls(**vars(OperatorSpec.from_dict(data)), **configs)


@dataclass
class CertManagerStatus(OperatorStatus):
    """Observed state of cert-manager."""

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> CertManagerStatus:
        return cls(**vars(OperatorStatus.from_dict(data)))


@dataclass
class CertManager:
    """The cluster-scoped resource that configures the cert-manager installation."""

    type_meta: TypeMeta = field(default_factory=lambda: _type_meta("CertManager"))
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: CertManagerSpec = field(default_factory=CertManagerSpec)
    status: CertManagerStatus = field(default_factory=CertManagerStatus)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CertManager:
        return cls(
            TypeMeta.from_dict(data),
            ObjectMeta.from_dict(data.get("metadata")),
            CertManagerSpec.from_dict(data.get("spec")),
            CertManagerStatus.from_dict(data.get("status")),
        )


_OPERANDS = ("controller", "webhook", "cainjector")


@dataclass
class UnsupportedConfigOverrides:
    """Extra command-line arguments for each operand, given as unsupported overrides."""

    controller_args: list[str] = field(default_factory=list)
    webhook_args: list[str] = field(default_factory=list)
    cainjector_args: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {key: _omit_empty({"args": list(getattr(self, f"{key}_args"))}) for key in _OPERANDS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UnsupportedConfigOverrides:
        data = data or {}
        return cls(*(list((data.get(key) or {}).get("args") or []) for key in _OPERANDS))


@dataclass
class CertManagerList:
    """A list of CertManager objects."""

    type_meta: TypeMeta = field(default_factory=lambda: _type_meta("CertManagerList"))
    metadata: ListMeta = field(default_factory=ListMeta)
    items: list[CertManager] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.type_meta.to_dict(),
            "metadata": self.metadata.to_dict(),
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CertManagerList:
        return cls(
            TypeMeta.from_dict(data),
            ListMeta.from_dict(data.get("metadata")),
            [CertManager.from_dict(item) for item in data.get("items") or []],
        )