"""Dataset configuration model — where the cases come from and how to label them."""

from pathlib import Path

from pydantic import BaseModel, Field

from pipe_eval.dataset.domain.process import PipefyProcess


class DatasetConfig(BaseModel, frozen=True):
    path: Path
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    process: PipefyProcess
    agent_context: str | None = None
    input_key: str = Field(default="input", min_length=1)
    expected_key: str = Field(default="expected_output", min_length=1)
