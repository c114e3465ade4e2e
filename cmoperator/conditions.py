"""Status conditions and the list that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

DEGRADED = "Degraded"
READY = "Ready"

REASON_FAILED = "Failed"
REASON_READY = "Ready"
REASON_IN_PROGRESS = "Progressing"


class ConditionStatus(str, enum.Enum):
    """The status of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class Condition:
    """One aspect of an object's current state."""

    type: str = ""
    status: ConditionStatus = ConditionStatus.UNKNOWN
    reason: str = ""
    message: str = ""
    last_transition_time: datetime | None = None
    observed_generation: int = 0

    def to_dict(self) -> dict[str, Any]:
        moment = self.last_transition_time
        data: dict[str, Any] = {
            "type": self.type,
            "status": ConditionStatus(self.status).value,
            "lastTransitionTime": None
            if moment is None
            else moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "reason": self.reason,
            "message": self.message,
        }
        if self.observed_generation:
            data["observedGeneration"] = self.observed_generation
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        text = data.get("lastTransitionTime")
        moment = None
        if text:
            moment = datetime.fromisoformat(text.replace("Z", "+00:00")).astimezone(timezone.utc)
        return cls(
            type=data.get("type", ""),
            status=ConditionStatus(data.get("status", "Unknown")),
            reason=data.get("reason", ""),
            message=data.get("message", ""),
            last_transition_time=moment,
            observed_generation=int(data.get("observedGeneration") or 0),
        )


@dataclass
class ConditionalStatus:
    """A list of conditions keyed by their type."""

    conditions: list[Condition] = field(default_factory=list)

    def get_condition(self, condition_type: str) -> Condition | None:
        """Return the condition of the given type, or None."""
        return next((c for c in self.conditions if c.type == condition_type), None)

    def set_condition(
        self, condition_type: str, status: ConditionStatus, reason: str, message: str
    ) -> bool:
        """Add or update a condition; return True when anything changed."""
        status = ConditionStatus(status)
        condition = self.get_condition(condition_type)
        if condition is None:
            self.conditions.append(Condition(condition_type, status, reason, message, _now()))
            return True
        if condition.status == status and condition.reason == reason:
            return False
        condition.status, condition.reason, condition.message = status, reason, message
        condition.last_transition_time = _now()
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"conditions": [c.to_dict() for c in self.conditions]} if self.conditions else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ConditionalStatus:
        return cls([Condition.from_dict(c) for c in (data or {}).get("conditions") or []])