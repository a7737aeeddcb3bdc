"""Test case value objects — one input/expected-output pair probing an agent."""

from typing import Any

from pydantic import BaseModel


class CaseDraft(BaseModel, frozen=True):
    """A case as authored, before the store assigns it an id.

    Blank fields are allowed here so the store can report every problem at once.
    """

    input: str = ""
    expected_output: str = ""
    context: dict[str, Any] | None = None


class TestCase(BaseModel, frozen=True):
    """Immutable case owned by exactly one Dataset.

    `context` carries optional process field values (e.g. Pipefy card fields).
    """

    __test__ = False  # not a pytest test class

    id: str
    input: str
    expected_output: str
    context: dict[str, Any] | None = None
