"""Status models for KanaryDeployment CRD."""

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ConditionStatus(str, Enum):
    """Status values for conditions."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ConditionType(str, Enum):
    """Condition types read or written by the status reconciler.

    The conditions list itself accepts any type string so that conditions
    set by other controllers pass through untouched.
    """

    ERRORED = "Errored"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"


class Condition(BaseModel):
    """A condition in the status."""

    type: str
    # Other controllers may write values outside ConditionStatus and unset
    # (null) timestamps.
    status: Union[ConditionStatus, str]
    lastUpdateTime: Optional[datetime] = Field(default=None, alias="last_update_time")
    lastTransitionTime: Optional[datetime] = Field(default=None, alias="last_transition_time")
    reason: str = ""
    message: str = ""

    class Config:
        populate_by_name = True

    @classmethod
    def create(
        cls,
        condition_type: ConditionType,
        now: datetime,
        reason: str,
        message: str,
    ) -> "Condition":
        """Create a new True condition touched and transitioned at ``now``."""
        return cls(
            type=condition_type.value,
            status=ConditionStatus.TRUE,
            lastUpdateTime=now,
            lastTransitionTime=now,
            reason=reason,
            message=message,
        )


class KanaryDeploymentStatusReport(BaseModel):
    """Summary of the rollout, recomputed on every reconciliation."""

    status: str = ""
    validation: str = ""
    scale: str = ""
    traffic: str = ""


class KanaryDeploymentStatus(BaseModel):
    """Status of a KanaryDeployment resource."""

    conditions: list[Condition] = Field(default_factory=list)
    report: KanaryDeploymentStatusReport = Field(default_factory=KanaryDeploymentStatusReport)

    def index_of(self, condition_type: ConditionType) -> int:
        """Return the position of the condition of that type, or -1."""
        for i, cond in enumerate(self.conditions):
            if cond.type == condition_type.value:
                return i
        return -1

    def get_condition(self, condition_type: ConditionType) -> Condition | None:
        """Return the condition of that type, or None."""
        i = self.index_of(condition_type)
        if i < 0:
            return None
        return self.conditions[i]

    def update_condition(
        self,
        now: datetime,
        condition_type: ConditionType,
        status: ConditionStatus,
        message: str,
    ) -> None:
        """Set a condition's value in place.

        An existing condition always gets ``lastUpdateTime`` and ``message``
        refreshed, and ``lastTransitionTime`` only when its value changes.
        A missing condition is appended only when ``status`` is True.
        """
        cond = self.get_condition(condition_type)
        if cond is not None:
            if cond.status != status:
                cond.lastTransitionTime = now
                cond.status = status
            cond.lastUpdateTime = now
            cond.message = message
        elif status == ConditionStatus.TRUE:
            self.conditions.append(Condition.create(condition_type, now, "", message))

    def is_condition_true(self, condition_type: ConditionType) -> bool:
        """Check whether the condition of that type exists and is True."""
        cond = self.get_condition(condition_type)
        return cond is not None and cond.status == ConditionStatus.TRUE

    def is_failed(self) -> bool:
        """Check whether the rollout has a True Failed condition."""
        return self.is_condition_true(ConditionType.FAILED)

    def is_succeeded(self) -> bool:
        """Check whether the rollout has a True Succeeded condition."""
        return self.is_condition_true(ConditionType.SUCCEEDED)

    def to_dict(self) -> dict:
        """Convert to dictionary for status update."""
        return self.model_dump(mode="json", exclude_none=True)
