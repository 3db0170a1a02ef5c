"""Reconcile result returned to the control loop."""

from typing import NamedTuple, Optional

from pydantic import BaseModel, Field


class ReconcileResult(BaseModel):
    """Requeue request for the enclosing control loop.

    The default instance is the neutral result: nothing to requeue.
    """

    requeue: bool = False
    requeueAfter: Optional[float] = Field(default=None, alias="requeue_after")

    class Config:
        populate_by_name = True

    def is_zero(self) -> bool:
        return not self.requeue and self.requeueAfter is None


class ReconcileOutcome(NamedTuple):
    """Result and error handed back by a status update."""

    result: ReconcileResult
    error: Optional[BaseException]
