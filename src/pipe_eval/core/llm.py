"""litellm helpers shared by the agent and judge gateways."""

import litellm

# Transient provider failures worth another attempt.
RETRIABLE_LLM_ERRORS: tuple[type[Exception], ...] = (
    litellm.RateLimitError,
    litellm.Timeout,
    litellm.APIConnectionError,
    litellm.ServiceUnavailableError,
    litellm.InternalServerError,
)


def quiet_litellm() -> None:
    litellm.suppress_debug_info = True


def is_retriable(exc: Exception) -> bool:
    return isinstance(exc, RETRIABLE_LLM_ERRORS)
