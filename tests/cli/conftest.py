from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # `run` configures structlog against the runner's captured stderr.
    yield
    structlog.reset_defaults()
