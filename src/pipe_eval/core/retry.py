"""Retry-with-backoff loop shared by the model gateways."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar

from pipe_eval.config.domain.gateway import RetryConfig
from pipe_eval.core.errors import PipeEvalError

# (attempt, reason, backoff_seconds) for the attempt that just failed.
RetryHook: TypeAlias = Callable[[int, str, float], None]

T = TypeVar("T")


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    retry: RetryConfig,
    on_retry: RetryHook,
) -> T:
    """Await operation until it succeeds or a failure may not be retried.

    Only PipeEvalErrors flagged `retriable` are retried. The final error is
    re-raised unchanged once max_attempts is reached. RetryConfig bounds
    max_attempts to at least 1, so the loop always returns or raises.
    """
    backoff = retry.initial_backoff_seconds
    for attempt in range(1, retry.max_attempts + 1):
        try:
            return await operation()
        except PipeEvalError as exc:
            if not exc.retriable or attempt == retry.max_attempts:
                raise
            on_retry(attempt, str(exc), backoff)
        await asyncio.sleep(backoff)
        backoff *= retry.backoff_multiplier
    raise AssertionError("unreachable: RetryConfig.max_attempts is >= 1")
