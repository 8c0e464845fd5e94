"""Polling of explorer verification jobs."""

import logging
import threading
import time
from typing import Optional

from .constants import DEFAULT_POLL_INTERVAL, PENDING_RESULT, STATUS_OK
from .explorer import ExplorerClient
from .types import JobResult, VerificationJob

logger = logging.getLogger(__name__)


def _wait(interval: float, cancel_event: Optional[threading.Event]) -> bool:
    """Sleep for interval seconds; return True if cancelled meanwhile."""
    if cancel_event is None:
        time.sleep(interval)
        return False
    return cancel_event.wait(interval)


def poll_verification_status(
    client: ExplorerClient,
    job: VerificationJob,
    interval: float = DEFAULT_POLL_INTERVAL,
    max_attempts: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
) -> VerificationJob:
    """
    Poll a verification job until it reaches a terminal state.

    Each attempt waits `interval` seconds, then queries checkverifystatus:
    - status "1" ends with SUCCESS
    - result "Pending in queue" keeps polling
    - anything else ends with FAILURE, keeping the explorer message

    Args:
        client: Explorer client
        job: Submitted job (updated in place)
        interval: Seconds to wait before each status query
        max_attempts: Give up with TIMED_OUT after this many queries (None = never)
        cancel_event: Set it to stop polling with CANCELLED

    Returns:
        The job, with result set to SUCCESS, FAILURE, TIMED_OUT or CANCELLED

    Raises:
        ExplorerConnectionError: On transport errors
    """
    while max_attempts is None or job.attempts < max_attempts:
        if _wait(interval, cancel_event):
            job.result = JobResult.CANCELLED
            job.message = "polling cancelled"
            return job

        data = client.check_status(job.guid)
        job.attempts += 1

        if data.get("status") == STATUS_OK:
            job.result = JobResult.SUCCESS
            job.message = data.get("result")
            return job

        if data.get("result") == PENDING_RESULT:
            logger.debug("%s still pending (attempt %d)", job.contract_name_path, job.attempts)
            continue

        job.result = JobResult.FAILURE
        job.message = f"{data.get('message')}, {data.get('result')}"
        return job

    job.result = JobResult.TIMED_OUT
    job.message = f"still pending after {job.attempts} attempt(s)"
    return job
