"""The API group and version of the operator's resources."""

from __future__ import annotations

from dataclasses import dataclass

GROUP_NAME = "operator.openshift.io"


@dataclass(frozen=True)
class GroupResource:
    """A resource qualified by its API group."""

    group: str
    resource: str

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource qualified by its API group and version."""

    group: str
    version: str
    resource: str

    def group_resource(self) -> GroupResource:
        return GroupResource(group=self.group, resource=self.resource)


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def with_resource(self, resource: str) -> GroupVersionResource:
        return GroupVersionResource(group=self.group, version=self.version, resource=resource)

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


SCHEME_GROUP_VERSION = GroupVersion(group=GROUP_NAME, version="v1alpha1")


def resource(resource: str) -> GroupResource:
    """Qualify an unqualified resource name with this API group."""
    return SCHEME_GROUP_VERSION.with_resource(resource).group_resource()