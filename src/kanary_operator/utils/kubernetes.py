"""Kubernetes client utilities for the Kanary Operator."""

import logging
from typing import Any, Optional

import kubernetes
from kubernetes import client
from kubernetes.client.rest import ApiException

from ..constants import API_GROUP, API_VERSION, PLURAL
from ..models.kanarydeployment import KanaryDeployment

logger = logging.getLogger(__name__)


def get_k8s_client() -> client.ApiClient:
    """Get Kubernetes API client.

    Attempts to load in-cluster config first, falls back to kubeconfig.
    """
    try:
        kubernetes.config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes config")
    except kubernetes.config.ConfigException:
        kubernetes.config.load_kube_config()
        logger.debug("Loaded kubeconfig")

    return client.ApiClient()


class KubernetesStatusWriter:
    """Writes KanaryDeployment status through the status subresource.

    The written object carries the resourceVersion that was read, so a
    concurrent modification makes the API server reject the write with 409.
    """

    def __init__(self, api: Optional[client.CustomObjectsApi] = None):
        self._api = api

    @property
    def api(self) -> client.CustomObjectsApi:
        if self._api is None:
            self._api = client.CustomObjectsApi(get_k8s_client())
        return self._api

    def update(self, kd: KanaryDeployment, timeout: Optional[float] = None) -> None:
        """Replace the status of ``kd`` in the cluster.

        Args:
            kd: Resource carrying the new status
            timeout: Request deadline in seconds, None for the client default

        Raises:
            ApiException: The API server rejected the write
        """
        logger.info(f"Updating status of KanaryDeployment/{kd.name} in namespace {kd.namespace}")

        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["_request_timeout"] = timeout

        try:
            self.api.replace_namespaced_custom_object_status(
                API_GROUP,
                API_VERSION,
                kd.namespace,
                PLURAL,
                kd.name,
                kd.to_dict(),
                **kwargs,
            )
        except ApiException as e:
            if e.status == 409:
                logger.debug(f"KanaryDeployment/{kd.name} was modified concurrently")
            raise
