# cmoperator

Python models for the `operator.openshift.io/v1alpha1` API group used by the
cert-manager operator. The package describes the `CertManager` custom resource
as dataclasses. Each model converts to and from the plain dictionaries you get
from JSON or YAML manifests. It also includes status conditions, feature gates
and helpers for group-qualified resource names.

The package has no runtime dependencies.

## Installation

```
pip install cmoperator
```

## Modules

- `cmoperator.certmanager_types` holds `CertManager` and `CertManagerList`.
  It also holds `CertManagerSpec`, `CertManagerStatus`, `DeploymentConfig`,
  `CertManagerResourceRequirements`, `CertManagerScheduling`, `EnvVar`,
  `Toleration`, `OperatorSpec`, `OperatorStatus`, `ManagementState` and
  `UnsupportedConfigOverrides`.
- `cmoperator.meta` holds the shared metadata types `TypeMeta`, `ObjectMeta`,
  `ListMeta` and `ObjectReference`. It also holds `Duration`, which parses
  strings such as `"1h"`, `"30m"` or `"1h2m3.5s"` and formats them back, so
  that `str(Duration.parse("1h"))` gives `"1h0m0s"`.
- `cmoperator.conditions` holds `Condition`, `ConditionStatus` and
  `ConditionalStatus`. It also defines the constants `READY`, `DEGRADED`,
  `REASON_READY`, `REASON_FAILED` and `REASON_IN_PROGRESS`.
- `cmoperator.groupversion` holds `GroupVersion`, `GroupVersionResource`,
  `GroupResource`, `SCHEME_GROUP_VERSION` and the `resource()` helper.
- `cmoperator.features` holds the operator feature gates: `FeatureSpec`,
  `PreRelease`, `OPERATOR_FEATURE_GATES`, `FEATURE_ISTIO_CSR` and
  `default_enabled()`.

## Reading and writing manifests

```python
import json
from cmoperator.certmanager_types import CertManager

with open("certmanager.json") as fh:
    cm = CertManager.from_dict(json.load(fh))

print(cm.spec.controller_config)
print(json.dumps(cm.to_dict(), indent=2))
```

`to_dict()` uses the camel-case field names of the API and leaves out most
empty optional fields.

## Status conditions

```python
from cmoperator.conditions import ConditionalStatus, ConditionStatus, READY, REASON_READY

status = ConditionalStatus()
changed = status.set_condition(READY, ConditionStatus.TRUE, REASON_READY, "operand is ready")
ready = status.get_condition(READY)
```

`set_condition` returns `True` in two cases: when it adds a new condition, and
when it changes the status or reason of an existing one. In both cases it
stores the message and sets the transition time to now. If the status and
reason are unchanged, it returns `False` and leaves the condition as it is.
`get_condition` returns `None` for a condition type that is not present.

## Group-qualified resources

```python
from cmoperator.groupversion import SCHEME_GROUP_VERSION, resource

print(SCHEME_GROUP_VERSION)      # operator.openshift.io/v1alpha1
print(resource("certmanagers"))  # certmanagers.operator.openshift.io
```

## Feature gates

```python
from cmoperator.features import default_enabled

default_enabled("IstioCSR")  # False: a TechPreview feature, off by default
```

`default_enabled` raises `KeyError` for a feature that is not registered.

## What this package does not do

This package only describes data. It has no models for the IstioCSR resource.
It does not talk to a cluster or run a controller, and it provides no
command-line program. To read or apply objects, use whatever Kubernetes client
you already have, and pass it the dictionaries from `to_dict()`.

## Running the tests

```
pip install -e ".[test]"
pytest
```