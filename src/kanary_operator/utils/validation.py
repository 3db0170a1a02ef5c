"""Validation utilities for KanaryDeployment spec."""

import re
from typing import Optional

from ..constants import TRAFFIC_SOURCE_MIRROR, VALID_TRAFFIC_SOURCES
from ..models.spec import KanaryDeploymentSpec


class SpecValidationError(ValueError):
    """Raised with the joined messages of an invalid spec."""


DURATION_PATTERN = r"^([0-9]+(\.[0-9]+)?(ns|us|µs|ms|s|m|h))+$"
VALID_MANUAL_STATUSES = ["", "valid", "invalid"]
VALID_MANUAL_DEADLINE_STATUSES = ["none", "valid", "invalid"]


def validate_spec(spec: KanaryDeploymentSpec) -> list[str]:
    """Validate KanaryDeployment spec for semantic correctness.

    Args:
        spec: Parsed spec to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    # Traffic
    if spec.traffic.source not in VALID_TRAFFIC_SOURCES:
        errors.append(
            f"spec.traffic.source must be one of {VALID_TRAFFIC_SOURCES}, "
            f"got '{spec.traffic.source}'"
        )
    if spec.traffic.source == TRAFFIC_SOURCE_MIRROR and spec.traffic.mirror is None:
        errors.append("spec.traffic.mirror is required when spec.traffic.source is 'mirror'")

    # Scale
    if spec.scale.static is not None and spec.scale.static.replicas < 0:
        errors.append(
            f"spec.scale.static.replicas must be at least 0, got {spec.scale.static.replicas}"
        )
    hpa = spec.scale.hpa
    if hpa is not None:
        if hpa.minReplicas is not None and hpa.minReplicas < 1:
            errors.append(f"spec.scale.hpa.minReplicas must be at least 1, got {hpa.minReplicas}")
        if hpa.maxReplicas < (hpa.minReplicas or 1):
            errors.append(
                f"spec.scale.hpa.maxReplicas must not be lower than minReplicas, "
                f"got {hpa.maxReplicas}"
            )

    # Validation periods
    for field_name in ("initialDelay", "validationPeriod", "maxIntervalPeriod"):
        error = validate_duration(getattr(spec.validations, field_name))
        if error:
            errors.append(f"spec.validations.{field_name}: {error}")

    # Validation items
    for i, item in enumerate(spec.validations.items):
        path = f"spec.validations.items[{i}]"
        if item.labelWatch is None and item.promQL is None and item.manual is None:
            errors.append(f"{path} must define one of labelWatch, promQL or manual")
        if item.promQL is not None:
            if not item.promQL.prometheusService:
                errors.append(f"{path}.promQL.prometheusService is required")
            if not item.promQL.query:
                errors.append(f"{path}.promQL.query is required")
        if item.manual is not None:
            if item.manual.status not in VALID_MANUAL_STATUSES:
                errors.append(
                    f"{path}.manual.status must be one of {VALID_MANUAL_STATUSES}, "
                    f"got '{item.manual.status}'"
                )
            if item.manual.statusAfterDeadline not in VALID_MANUAL_DEADLINE_STATUSES:
                errors.append(
                    f"{path}.manual.statusAfterDeadline must be one of "
                    f"{VALID_MANUAL_DEADLINE_STATUSES}, got '{item.manual.statusAfterDeadline}'"
                )

    return errors


def validate_duration(value: str) -> Optional[str]:
    """Validate a duration string such as '30s' or '1h30m'.

    Args:
        value: Duration string

    Returns:
        Error message if invalid, None if valid
    """
    if not re.match(DURATION_PATTERN, value):
        return f"Invalid duration format: '{value}'"

    return None
