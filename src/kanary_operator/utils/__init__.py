"""Utility functions for the Kanary Operator."""

from .equality import semantic_deep_equal
from .kubernetes import KubernetesStatusWriter, get_k8s_client
from .status import update_status, update_status_for_failure
from .validation import validate_spec

__all__ = [
    "semantic_deep_equal",
    "KubernetesStatusWriter",
    "get_k8s_client",
    "update_status",
    "update_status_for_failure",
    "validate_spec",
]
