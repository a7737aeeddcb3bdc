"""Agent configuration models."""

from pydantic import BaseModel, Field, model_validator


class AgentConfig(BaseModel, frozen=True):
    """Transient agent settings built fresh for every run invocation."""

    model: str = Field(min_length=1)
    system_instruction: str = ""
    temperature: float = Field(default=0.2, ge=0.0, le=1.0)


class AgentSection(BaseModel, frozen=True):
    """The `agent:` block of a run config file.

    Exactly one of `preset` and `system_instruction` must be given; the preset
    is resolved to its prompt when the run is assembled.
    """

    model: str = Field(min_length=1)
    preset: str | None = None
    system_instruction: str | None = None
    temperature: float = Field(default=0.2, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _exactly_one_prompt_source(self) -> "AgentSection":
        if (self.preset is None) == (self.system_instruction is None):
            raise ValueError("exactly one of 'preset' or 'system_instruction' is required")
        return self
