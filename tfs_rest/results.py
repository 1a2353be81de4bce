"""Explicit success/failure results returned by the service functions."""
import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

import httpx

from .client import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The request went through. ``value`` may legitimately be None or empty."""

    value: T
    ok = True


@dataclass(frozen=True)
class Failure:
    """The request could not be issued or its response could not be read."""

    error: str
    ok = False


Result = Union[Success[T], Failure]


def returns_result(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Wrap a service function so request errors become a logged ``Failure``.

    Transport errors, rejected credentials (HTTP status errors) and
    undecodable responses are collapsed into one ``Failure``. Anything else,
    including argument validation errors, propagates.
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
        try:
            return Success(func(*args, **kwargs))
        except (httpx.HTTPError, DecodeError) as exc:
            logger.error("%s failed: %s", func.__name__, exc)
            return Failure(f"{type(exc).__name__}: {exc}")

    return wrapper
