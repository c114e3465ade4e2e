"""Object metadata and value types shared by the operator API objects."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from fractions import Fraction
from typing import Any, Mapping

_NANOS_PER_SECOND = 1_000_000_000

_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": _NANOS_PER_SECOND,
    "m": 60 * _NANOS_PER_SECOND,
    "h": 3600 * _NANOS_PER_SECOND,
}

_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def _omit_empty(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose values are empty, as JSON ``omitempty`` does."""
    return {key: value for key, value in data.items() if value not in (None, "", 0, {}, [])}


def _format_fraction(value: int, scale: int) -> str:
    whole, rest = divmod(value, scale)
    if not rest:
        return str(whole)
    width = len(str(scale)) - 1
    digits = str(rest).rjust(width, "0").rstrip("0")
    return f"{whole}.{digits}"


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time held in nanoseconds, written as a duration string such as ``1h0m0s``."""

    nanoseconds: int = 0

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse a duration string like ``1h``, ``30m`` or ``1h2m3.5s``."""
        rest = text
        sign = 1
        if rest[:1] in ("-", "+") and rest:
            if rest[0] == "-":
                sign = -1
            rest = rest[1:]
        if rest == "0":
            return cls(0)
        if not rest:
            raise ValueError(f"invalid duration {text!r}")
        total = Fraction(0)
        pos = 0
        while pos < len(rest):
            match = _PART.match(rest, pos)
            if match is None:
                raise ValueError(f"invalid duration {text!r}")
            total += Fraction(match.group(1)) * _UNITS[match.group(2)]
            pos = match.end()
        return cls(sign * int(total))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(micros * 1_000)

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.nanoseconds // 1_000)

    def total_seconds(self) -> float:
        return self.nanoseconds / _NANOS_PER_SECOND

    def __str__(self) -> str:
        nanos = self.nanoseconds
        if nanos == 0:
            return "0s"
        sign = "-" if nanos < 0 else ""
        magnitude = abs(nanos)
        if magnitude < _NANOS_PER_SECOND:
            if magnitude < 1_000:
                return f"{sign}{magnitude}ns"
            if magnitude < 1_000_000:
                return f"{sign}{_format_fraction(magnitude, 1_000)}µs"
            return f"{sign}{_format_fraction(magnitude, 1_000_000)}ms"
        seconds, fraction = divmod(magnitude, _NANOS_PER_SECOND)
        hours, remainder = divmod(seconds, 3600)
        minutes, secs = divmod(remainder, 60)
        text = _format_fraction(secs * _NANOS_PER_SECOND + fraction, _NANOS_PER_SECOND) + "s"
        if hours:
            text = f"{hours}h{minutes}m{text}"
        elif minutes:
            text = f"{minutes}m{text}"
        return sign + text


@dataclass
class TypeMeta:
    """The API version and kind of an object."""

    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"apiVersion": self.api_version, "kind": self.kind})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TypeMeta:
        data = data or {}
        return cls(api_version=data.get("apiVersion", ""), kind=data.get("kind", ""))


@dataclass
class ObjectMeta:
    """Standard metadata carried by every persisted object."""

    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    creation_timestamp: str | None = None
    deletion_timestamp: str | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "name": self.name,
                "generateName": self.generate_name,
                "namespace": self.namespace,
                "uid": self.uid,
                "resourceVersion": self.resource_version,
                "generation": self.generation,
                "creationTimestamp": self.creation_timestamp,
                "deletionTimestamp": self.deletion_timestamp,
                "labels": dict(self.labels),
                "annotations": dict(self.annotations),
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ObjectMeta:
        data = data or {}
        return cls(
            name=data.get("name", ""),
            generate_name=data.get("generateName", ""),
            namespace=data.get("namespace", ""),
            uid=data.get("uid", ""),
            resource_version=data.get("resourceVersion", ""),
            generation=int(data.get("generation", 0) or 0),
            creation_timestamp=data.get("creationTimestamp"),
            deletion_timestamp=data.get("deletionTimestamp"),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
        )


@dataclass
class ListMeta:
    """Metadata carried by list objects."""

    resource_version: str = ""
    continue_token: str = ""
    remaining_item_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _omit_empty(
            {"resourceVersion": self.resource_version, "continue": self.continue_token}
        )
        if self.remaining_item_count is not None:
            data["remainingItemCount"] = self.remaining_item_count
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ListMeta:
        data = data or {}
        remaining = data.get("remainingItemCount")
        return cls(
            resource_version=data.get("resourceVersion", ""),
            continue_token=data.get("continue", ""),
            remaining_item_count=None if remaining is None else int(remaining),
        )


@dataclass
class ObjectReference:
    """A reference to an issuer: its name, kind and API group."""

    name: str = ""
    kind: str = ""
    group: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        data.update(_omit_empty({"kind": self.kind, "group": self.group}))
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ObjectReference:
        data = data or {}
        return cls(
            name=data.get("name", ""),
            kind=data.get("kind", ""),
            group=data.get("group", ""),
        )