"""Kanary Operator - kopf handlers for KanaryDeployment CRD.

This module keeps the status of KanaryDeployment resources current: it
records spec problems in the Errored condition and maintains the status
report. The rollout itself is driven elsewhere.
"""

import logging
from datetime import datetime, timezone
from typing import Any

import kopf
from pydantic import ValidationError

from .constants import (
    API_GROUP,
    API_VERSION,
    MONITOR_INITIAL_DELAY,
    MONITOR_INTERVAL,
    PLURAL,
    STATUS_UPDATE_RETRY_DELAY,
    STATUS_UPDATE_TIMEOUT,
)
from .models.kanarydeployment import KanaryDeployment
from .models.result import ReconcileOutcome, ReconcileResult
from .utils.kubernetes import KubernetesStatusWriter
from .utils.status import StatusWriter, update_status, update_status_for_failure
from .utils.validation import SpecValidationError, validate_spec

logger = logging.getLogger(__name__)

status_writer: StatusWriter = KubernetesStatusWriter()


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
    """Configure operator settings on startup."""
    settings.posting.level = logging.INFO
    settings.watching.connect_timeout = 60
    settings.watching.server_timeout = 300
    # The status subresource is replaced wholesale, so handler progress
    # must not live in it.
    settings.persistence.progress_storage = kopf.AnnotationsProgressStorage(
        prefix=API_GROUP
    )
    logger.info("Kanary Operator started")


@kopf.on.resume(API_GROUP, API_VERSION, PLURAL)
@kopf.on.create(API_GROUP, API_VERSION, PLURAL)
@kopf.on.update(API_GROUP, API_VERSION, PLURAL)
def reconcile_kanary_deployment(
    body: kopf.Body,
    name: str,
    namespace: str,
    logger: logging.Logger,
    **_: Any,
) -> None:
    """Handle creation, resumption and spec changes of a KanaryDeployment."""
    logger.info(f"Reconciling KanaryDeployment: {namespace}/{name}")
    reconcile_status(body, logger)


@kopf.timer(
    API_GROUP,
    API_VERSION,
    PLURAL,
    interval=MONITOR_INTERVAL,
    initial_delay=MONITOR_INITIAL_DELAY,
)
def monitor_kanary_deployment(
    body: kopf.Body,
    logger: logging.Logger,
    **_: Any,
) -> None:
    """Periodically refresh the status report of a KanaryDeployment.

    The Errored condition is left alone here: touching it would write a new
    lastUpdateTime on every tick.
    """
    reconcile_status(body, logger, record_errors=False)


def reconcile_status(
    body: kopf.Body, logger: logging.Logger, record_errors: bool = True
) -> ReconcileOutcome:
    """Run one status pass for ``body`` and translate the outcome for kopf.

    With ``record_errors`` the spec validation outcome is written to the
    Errored condition, otherwise only the report is refreshed.

    Raises:
        kopf.PermanentError: The resource or its spec is invalid
        kopf.TemporaryError: The status write failed or a requeue was requested
    """
    try:
        kd = KanaryDeployment.from_body(body)
    except ValidationError as e:
        raise kopf.PermanentError(f"Invalid KanaryDeployment: {e}")

    err = None
    validation_errors = validate_spec(kd.spec)
    if validation_errors:
        err = SpecValidationError(f"Validation failed: {'; '.join(validation_errors)}")
        logger.error(str(err))

    if record_errors:
        outcome = update_status_for_failure(
            status_writer,
            kd,
            _now(),
            ReconcileResult(),
            err,
            timeout=STATUS_UPDATE_TIMEOUT,
        )
    else:
        outcome = update_status(
            status_writer,
            kd,
            kd.status.model_copy(deep=True),
            ReconcileResult(),
            err,
            timeout=STATUS_UPDATE_TIMEOUT,
        )

    if outcome.error is not None and outcome.error is not err:
        raise kopf.TemporaryError(
            f"Failed to update status: {outcome.error}", delay=STATUS_UPDATE_RETRY_DELAY
        )
    if outcome.error is not None:
        raise kopf.PermanentError(str(outcome.error))
    if not outcome.result.is_zero():
        raise kopf.TemporaryError(
            "Requeue requested", delay=outcome.result.requeueAfter or STATUS_UPDATE_RETRY_DELAY
        )

    return outcome


def _now() -> datetime:
    # API timestamps have second precision.
    return datetime.now(timezone.utc).replace(microsecond=0)
