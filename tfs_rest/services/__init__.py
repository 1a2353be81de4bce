"""Endpoint functions callable directly from automation scripts."""
from .waiter import PollOutcome, poll_until_complete, wait_for_build  # noqa: F401
