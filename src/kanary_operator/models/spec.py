"""Pydantic models for KanaryDeployment CRD spec."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from ..constants import (
    DEFAULT_INITIAL_DELAY,
    DEFAULT_MAX_INTERVAL_PERIOD,
    DEFAULT_STATIC_REPLICAS,
    DEFAULT_TRAFFIC_SOURCE,
    DEFAULT_VALIDATION_PERIOD,
)


class StaticScale(BaseModel):
    """Fixed replica count for the canary deployment."""

    replicas: int = DEFAULT_STATIC_REPLICAS


class HorizontalPodAutoscalerSpec(BaseModel):
    """Autoscaling policy for the canary deployment."""

    minReplicas: Optional[int] = Field(default=None, alias="min_replicas")
    maxReplicas: int = Field(..., alias="max_replicas")
    metrics: list[dict[str, Any]] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class ScaleSpec(BaseModel):
    """Scaling strategy, static unless an autoscaler is configured."""

    static: Optional[StaticScale] = None
    hpa: Optional[HorizontalPodAutoscalerSpec] = None


class MirrorSpec(BaseModel):
    """Traffic mirroring settings."""

    activate: bool = False


class TrafficSpec(BaseModel):
    """How live traffic reaches the canary pods."""

    source: str = DEFAULT_TRAFFIC_SOURCE
    mirror: Optional[MirrorSpec] = None


class LabelWatchSpec(BaseModel):
    """Invalidate the canary when labels appear on pods or the deployment."""

    podInvalidationLabels: Optional[dict[str, Any]] = Field(
        default=None, alias="pod_invalidation_labels"
    )
    deploymentInvalidationLabels: Optional[dict[str, Any]] = Field(
        default=None, alias="deployment_invalidation_labels"
    )

    class Config:
        populate_by_name = True


class PromQLSpec(BaseModel):
    """Validate the canary with a Prometheus query."""

    prometheusService: str = Field(default="", alias="prometheus_service")
    query: str = ""
    podNameKey: str = Field(default="pod", alias="pod_name_key")
    allPodsQuery: bool = Field(default=False, alias="all_pods_query")
    valueInRange: Optional[dict[str, Any]] = Field(default=None, alias="value_in_range")
    discreteValueOutOfList: Optional[dict[str, Any]] = Field(
        default=None, alias="discrete_value_out_of_list"
    )

    class Config:
        populate_by_name = True


class ManualSpec(BaseModel):
    """Validate the canary by hand."""

    statusAfterDeadline: str = Field(default="none", alias="status_after_deadline")
    status: str = ""

    class Config:
        populate_by_name = True


class ValidationItem(BaseModel):
    """One validation entry; any combination of mechanisms may be set."""

    labelWatch: Optional[LabelWatchSpec] = Field(default=None, alias="label_watch")
    promQL: Optional[PromQLSpec] = Field(default=None, alias="prom_ql")
    manual: Optional[ManualSpec] = None

    class Config:
        populate_by_name = True


class ValidationsSpec(BaseModel):
    """Validation configuration for the canary."""

    initialDelay: str = Field(default=DEFAULT_INITIAL_DELAY, alias="initial_delay")
    validationPeriod: str = Field(default=DEFAULT_VALIDATION_PERIOD, alias="validation_period")
    maxIntervalPeriod: str = Field(
        default=DEFAULT_MAX_INTERVAL_PERIOD, alias="max_interval_period"
    )
    noUpdate: bool = Field(default=False, alias="no_update")
    items: list[ValidationItem] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class ScheduleSpec(BaseModel):
    """Optional delayed start."""

    startTime: Optional[str] = Field(default=None, alias="start_time")

    class Config:
        populate_by_name = True


class KanaryDeploymentSpec(BaseModel):
    """Complete KanaryDeployment CRD spec."""

    serviceName: Optional[str] = Field(default=None, alias="service_name")
    deploymentName: Optional[str] = Field(default=None, alias="deployment_name")
    template: dict[str, Any] = Field(default_factory=dict)
    scale: ScaleSpec = Field(default_factory=ScaleSpec)
    traffic: TrafficSpec = Field(default_factory=TrafficSpec)
    validations: ValidationsSpec = Field(default_factory=ValidationsSpec)
    schedule: Optional[ScheduleSpec] = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_dict(cls, data: dict) -> "KanaryDeploymentSpec":
        """Create spec from dictionary (handles both camelCase and snake_case)."""
        return cls.model_validate(data)

    def has_autoscaling(self) -> bool:
        return self.scale.hpa is not None
