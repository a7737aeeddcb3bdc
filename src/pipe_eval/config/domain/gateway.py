"""Gateway configuration models — timeouts and retry policy for model calls."""

from pydantic import BaseModel, Field


class RetryConfig(BaseModel, frozen=True):
    # call_with_retry relies on at least one attempt.
    max_attempts: int = Field(default=3, ge=1)
    initial_backoff_seconds: float = Field(default=1.0, ge=0)
    backoff_multiplier: float = Field(default=2.0, ge=1)


class GatewayConfig(BaseModel, frozen=True):
    timeout_seconds: float = Field(default=60.0, gt=0)
    retry: RetryConfig = Field(default_factory=RetryConfig)
