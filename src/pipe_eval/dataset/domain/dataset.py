"""Dataset — a named, ordered collection of test cases for one process."""

from pydantic import BaseModel

from pipe_eval.dataset.domain.case import TestCase
from pipe_eval.dataset.domain.process import PipefyProcess


class Dataset(BaseModel, frozen=True):
    id: str
    name: str
    process: PipefyProcess
    description: str
    agent_context: str | None = None
    cases: tuple[TestCase, ...] = ()
