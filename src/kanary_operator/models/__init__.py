"""Models for KanaryDeployment CRD spec and status."""

from .kanarydeployment import KanaryDeployment, ObjectMeta
from .result import ReconcileOutcome, ReconcileResult
from .spec import KanaryDeploymentSpec
from .status import (
    Condition,
    ConditionStatus,
    ConditionType,
    KanaryDeploymentStatus,
    KanaryDeploymentStatusReport,
)

__all__ = [
    "Condition",
    "ConditionStatus",
    "ConditionType",
    "KanaryDeployment",
    "KanaryDeploymentSpec",
    "KanaryDeploymentStatus",
    "KanaryDeploymentStatusReport",
    "ObjectMeta",
    "ReconcileOutcome",
    "ReconcileResult",
]
