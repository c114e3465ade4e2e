import pytest

from cmoperator.certmanager_types import (
    CertManager,
    CertManagerList,
    CertManagerResourceRequirements,
    CertManagerScheduling,
    CertManagerSpec,
    CertManagerStatus,
    DeploymentConfig,
    EnvVar,
    ManagementState,
    OperatorSpec,
    OperatorStatus,
    Toleration,
    UnsupportedConfigOverrides,
)
from cmoperator.conditions import Condition, ConditionStatus
from cmoperator.meta import ListMeta, ObjectMeta


def _controller_config():
    return DeploymentConfig(
        override_args=["--dns01-recursive-nameservers=10.10.10.10:53", "--v=3"],
        override_env=[EnvVar(name="HTTP_PROXY", value="172.0.0.10:8080")],
        override_labels={"team": "infra"},
        override_resources=CertManagerResourceRequirements(
            limits={"cpu": "500m", "memory": "128Mi"},
            requests={"cpu": "10m", "memory": "32Mi"},
        ),
        override_scheduling=CertManagerScheduling(
            node_selector={"node-role.kubernetes.io/control-plane": ""},
            tolerations=[
                Toleration(
                    key="node-role.kubernetes.io/master",
                    operator="Exists",
                    effect="NoSchedule",
                )
            ],
        ),
    )


def test_env_var_omits_empty_value():
    assert EnvVar(name="FOO").to_dict() == {"name": "FOO"}
    env = EnvVar(name="FOO", value="BAR")
    assert EnvVar.from_dict(env.to_dict()) == env


def test_toleration_round_trip_with_seconds():
    tol = Toleration(key="toleration", operator="Exists", value="value", effect="NoSchedule",
                     toleration_seconds=30)
    data = tol.to_dict()
    assert data["tolerationSeconds"] == 30
    assert Toleration.from_dict(data) == tol


def test_toleration_without_seconds_has_no_key():
    assert "tolerationSeconds" not in Toleration(key="k").to_dict()


def test_resource_quantities_are_strings():
    res = CertManagerResourceRequirements.from_dict({"limits": {"cpu": 1}, "requests": {}})
    assert res.limits == {"cpu": "1"}
    assert res.to_dict() == {"limits": {"cpu": "1"}}


def test_deployment_config_round_trip():
    config = _controller_config()
    assert DeploymentConfig.from_dict(config.to_dict()) == config


def test_empty_deployment_config_keeps_nested_structs():
    assert DeploymentConfig().to_dict() == {"overrideResources": {}, "overrideScheduling": {}}


def test_deployment_config_keys():
    data = _controller_config().to_dict()
    assert data["overrideEnv"] == [{"name": "HTTP_PROXY", "value": "172.0.0.10:8080"}]
    assert data["overrideResources"]["limits"] == {"cpu": "500m", "memory": "128Mi"}
    assert data["overrideScheduling"]["nodeSelector"] == {"node-role.kubernetes.io/control-plane": ""}


def test_spec_flattens_operator_fields():
    spec = CertManagerSpec(management_state=ManagementState.MANAGED, log_level="Debug",
                           controller_config=_controller_config())
    data = spec.to_dict()
    assert data["managementState"] == "Managed"
    assert data["logLevel"] == "Debug"
    assert "webhookConfig" not in data
    assert CertManagerSpec.from_dict(data) == spec


def test_operator_spec_rejects_unknown_state():
    with pytest.raises(ValueError):
        OperatorSpec.from_dict({"managementState": "Sometimes"})


def test_operator_spec_keeps_raw_overrides():
    spec = OperatorSpec(unsupported_config_overrides={"controller": {"args": ["--v=3"]}})
    assert OperatorSpec.from_dict(spec.to_dict()) == spec


def test_operator_status_always_writes_ready_replicas():
    assert OperatorStatus().to_dict() == {"readyReplicas": 0}


def test_status_round_trip():
    status = CertManagerStatus(
        observed_generation=2,
        conditions=[Condition(type="cert-manager-controller-deploymentDegraded",
                              status=ConditionStatus.FALSE)],
        ready_replicas=1,
    )
    restored = CertManagerStatus.from_dict(status.to_dict())
    assert restored == status
    assert isinstance(restored, CertManagerStatus)


def test_cert_manager_default_type_meta():
    data = CertManager(metadata=ObjectMeta(name="cluster")).to_dict()
    assert data["apiVersion"] == "operator.openshift.io/v1alpha1"
    assert data["kind"] == "CertManager"
    assert data["metadata"] == {"name": "cluster"}


def test_cert_manager_round_trip():
    obj = CertManager(
        metadata=ObjectMeta(name="cluster"),
        spec=CertManagerSpec(controller_config=_controller_config(),
                             webhook_config=DeploymentConfig(override_args=["--v=3"])),
    )
    assert CertManager.from_dict(obj.to_dict()) == obj


def test_unsupported_config_overrides():
    overrides = UnsupportedConfigOverrides.from_dict({"controller": {"args": ["--v=3"]}})
    assert overrides.controller_args == ["--v=3"]
    assert overrides.webhook_args == []
    assert overrides.to_dict() == {"controller": {"args": ["--v=3"]}, "webhook": {}, "cainjector": {}}
    assert UnsupportedConfigOverrides.from_dict(overrides.to_dict()) == overrides


def test_list_round_trip():
    items = CertManagerList(metadata=ListMeta(resource_version="7"),
                            items=[CertManager(metadata=ObjectMeta(name="cluster"))])
    data = items.to_dict()
    assert data["kind"] == "CertManagerList"
    assert len(data["items"]) == 1
    assert CertManagerList.from_dict(data) == items


def test_empty_list_writes_items():
    assert CertManagerList().to_dict()["items"] == []