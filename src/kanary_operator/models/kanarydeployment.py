"""Pydantic model for the KanaryDeployment custom resource."""

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..constants import API_GROUP, API_VERSION, KIND
from .spec import KanaryDeploymentSpec
from .status import KanaryDeploymentStatus


class ObjectMeta(BaseModel):
    """Subset of Kubernetes object metadata the operator relies on."""

    name: str
    namespace: str = "default"
    uid: Optional[str] = None
    resourceVersion: Optional[str] = Field(default=None, alias="resource_version")
    generation: Optional[int] = None
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)

    class Config:
        populate_by_name = True
        extra = "allow"


class KanaryDeployment(BaseModel):
    """A KanaryDeployment resource: metadata, declared spec and observed status."""

    apiVersion: str = Field(default=f"{API_GROUP}/{API_VERSION}", alias="api_version")
    kind: str = KIND
    metadata: ObjectMeta
    spec: KanaryDeploymentSpec = Field(default_factory=KanaryDeploymentSpec)
    status: KanaryDeploymentStatus = Field(default_factory=KanaryDeploymentStatus)

    class Config:
        populate_by_name = True

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> "KanaryDeployment":
        """Create a resource from a kopf body or a raw API dictionary."""
        return cls.model_validate(_to_plain(body))

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_dict(self) -> dict:
        """Convert to dictionary for the status subresource write."""
        return self.model_dump(mode="json", exclude_none=True)


def _to_plain(value: Any) -> Any:
    """Unwrap kopf's read-only mapping views into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value
