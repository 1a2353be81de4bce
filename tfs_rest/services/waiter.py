"""Block until a remote resource leaves the ``inProgress`` status.

Intended for sequential build scripts: the calling thread sleeps between
checks and there is no way to interrupt a wait other than its timeout.
"""
import logging
import time
from enum import Enum
from typing import Callable

import httpx

from ..client import DecodeError
from ..config import TfsConnection
from ..results import Result
from ..utils.helpers import ResourceId, require
from .builds import IN_PROGRESS, get_build_status

logger = logging.getLogger(__name__)

MIN_POLL_INTERVAL = 1.0


class PollOutcome(Enum):
    """Why a wait ended."""

    SUCCEEDED = "succeeded"
    TIMED_OUT = "timedOut"
    FAILED = "failed"


def poll_until_complete(
    fetch_status: Callable[[], Result[str]],
    timeout_minutes: float = 5,
    poll_interval_seconds: float = 5,
    *,
    label: str = "resource",
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> PollOutcome:
    """
    Call ``fetch_status`` until it reports something other than ``inProgress``.

    The elapsed time is checked before every fetch, so a timeout of zero or
    less returns TIMED_OUT without fetching at all. A failed fetch ends the
    wait with FAILED; it is never retried. Poll intervals under one second
    are raised to one second.
    """
    interval = poll_interval_seconds
    if interval < MIN_POLL_INTERVAL:
        logger.warning(
            "Poll interval %ss is too short, using %ss instead", poll_interval_seconds, MIN_POLL_INTERVAL
        )
        interval = MIN_POLL_INTERVAL

    timeout_seconds = timeout_minutes * 60
    start = clock()

    while clock() - start < timeout_seconds:
        try:
            result = fetch_status()
        except (httpx.HTTPError, DecodeError) as exc:
            logger.error("Waiting for %s failed: %s", label, exc)
            return PollOutcome.FAILED

        if not result.ok:
            logger.error("Waiting for %s failed: %s", label, result.error)
            return PollOutcome.FAILED

        elapsed = clock() - start
        if result.value != IN_PROGRESS:
            logger.info("%s reached status '%s' after %.0fs", label, result.value, elapsed)
            return PollOutcome.SUCCEEDED

        logger.info("%s is still in progress after %.0fs, checking again in %ss", label, elapsed, interval)
        sleep(interval)

    logger.warning("Timed out waiting for %s after %s minute(s)", label, timeout_minutes)
    return PollOutcome.TIMED_OUT


def wait_for_build(
    conn: TfsConnection,
    build_id: ResourceId,
    timeout_minutes: float = 5,
    poll_interval_seconds: float = 5,
    *,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> PollOutcome:
    """Wait for a build to finish. Any status other than ``inProgress`` counts as finished."""
    require(build_id, "build_id")
    return poll_until_complete(
        lambda: get_build_status(conn, build_id),
        timeout_minutes,
        poll_interval_seconds,
        label=f"build {build_id}",
        sleep=sleep,
        clock=clock,
    )
