"""EvalStatus — lifecycle states of an evaluation run."""

from enum import StrEnum


class EvalStatus(StrEnum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
