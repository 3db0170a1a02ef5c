"""Status condition and report handling for KanaryDeployment resources.

Every function here works on copies: the resource handed in by the caller is
never modified. A status update is written at most once per call and only
when the status actually changed.
"""

import logging
from datetime import datetime
from typing import Optional, Protocol

from ..constants import (
    REPORT_SCALE_HPA,
    REPORT_SCALE_STATIC,
    REPORT_STATUS_FAILED,
    REPORT_STATUS_RUNNING,
    REPORT_STATUS_SUCCEEDED,
    REPORT_VALIDATION_LABEL_WATCH,
    REPORT_VALIDATION_MANUAL,
    REPORT_VALIDATION_PROMQL,
    REPORT_VALIDATION_UNKNOWN,
)
from ..models.kanarydeployment import KanaryDeployment
from ..models.result import ReconcileOutcome, ReconcileResult
from ..models.status import (
    ConditionStatus,
    ConditionType,
    KanaryDeploymentStatus,
    KanaryDeploymentStatusReport,
)
from .equality import semantic_deep_equal

logger = logging.getLogger(__name__)


class StatusWriter(Protocol):
    """Persists the status of a KanaryDeployment."""

    def update(self, kd: KanaryDeployment, timeout: Optional[float] = None) -> None:
        ...


def update_status_for_failure(
    writer: StatusWriter,
    kd: KanaryDeployment,
    now: datetime,
    result: ReconcileResult,
    err: Optional[BaseException],
    timeout: Optional[float] = None,
) -> ReconcileOutcome:
    """Record ``err`` in the Errored condition and persist the status if it changed."""
    new_status = kd.status.model_copy(deep=True)
    update_conditions_for_failure(new_status, now, err)
    return update_status(writer, kd, new_status, result, err, timeout=timeout)


def update_status(
    writer: StatusWriter,
    kd: KanaryDeployment,
    new_status: KanaryDeploymentStatus,
    result: ReconcileResult,
    err: Optional[BaseException],
    timeout: Optional[float] = None,
) -> ReconcileOutcome:
    """Persist ``new_status`` (with a fresh report) if it differs from ``kd.status``.

    Returns the caller's result and error unchanged unless the write fails,
    in which case the write error is returned with a neutral result.
    """
    updated_status = update_status_with_report(kd, new_status)
    if semantic_deep_equal(kd.status, updated_status):
        return ReconcileOutcome(result, err)

    updated_kd = kd.model_copy(deep=True)
    updated_kd.status = updated_status
    try:
        writer.update(updated_kd, timeout=timeout)
    except Exception as e:
        logger.error(
            f"Failed to update KanaryDeployment status "
            f"{updated_kd.namespace}/{updated_kd.name}: {e}"
        )
        return ReconcileOutcome(ReconcileResult(), e)

    return ReconcileOutcome(result, err)


def update_conditions_for_failure(
    status: KanaryDeploymentStatus, now: datetime, err: Optional[BaseException]
) -> None:
    """Set Errored to True with the error text, or to False when ``err`` is None."""
    if err is not None:
        status.update_condition(now, ConditionType.ERRORED, ConditionStatus.TRUE, str(err))
    else:
        status.update_condition(now, ConditionType.ERRORED, ConditionStatus.FALSE, "")


def is_failed(status: KanaryDeploymentStatus) -> bool:
    return status.is_failed()


def is_succeeded(status: KanaryDeploymentStatus) -> bool:
    return status.is_succeeded()


def update_status_with_report(
    kd: KanaryDeployment, status: KanaryDeploymentStatus
) -> KanaryDeploymentStatus:
    """Return ``status`` with its report recomputed.

    The same object is returned when the report is already current.
    """
    new_report = build_report(kd, status)
    if semantic_deep_equal(status.report, new_report):
        return status
    new_status = status.model_copy(deep=True)
    new_status.report = new_report
    return new_status


def build_report(kd: KanaryDeployment, status: KanaryDeploymentStatus) -> KanaryDeploymentStatusReport:
    return KanaryDeploymentStatusReport(
        status=get_report_status(status),
        validation=get_validation(kd),
        scale=get_scale(kd),
        traffic=get_traffic(kd),
    )


def get_report_status(status: KanaryDeploymentStatus) -> str:
    # Succeeded is checked first and wins if Failed is also True.
    if is_succeeded(status):
        return REPORT_STATUS_SUCCEEDED
    elif is_failed(status):
        return REPORT_STATUS_FAILED
    return REPORT_STATUS_RUNNING


def get_validation(kd: KanaryDeployment) -> str:
    """List the validation mechanisms configured across all items."""
    mechanisms = []
    for item in kd.spec.validations.items:
        if item.labelWatch is not None:
            mechanisms.append(REPORT_VALIDATION_LABEL_WATCH)
        if item.promQL is not None:
            mechanisms.append(REPORT_VALIDATION_PROMQL)
        if item.manual is not None:
            mechanisms.append(REPORT_VALIDATION_MANUAL)
    if not mechanisms:
        return REPORT_VALIDATION_UNKNOWN
    return ",".join(mechanisms)


def get_scale(kd: KanaryDeployment) -> str:
    if not kd.spec.has_autoscaling():
        return REPORT_SCALE_STATIC
    return REPORT_SCALE_HPA


def get_traffic(kd: KanaryDeployment) -> str:
    return str(kd.spec.traffic.source)
