"""Agent presets — ready-made personas for common Pipefy processes."""

from pydantic import BaseModel

from pipe_eval.core.errors import PipeEvalError


class AgentPreset(BaseModel, frozen=True):
    id: str
    label: str
    prompt: str


class UnknownPresetError(PipeEvalError):
    def __init__(self, preset_id: str) -> None:
        self.preset_id = preset_id
        super().__init__(f"Failed to find agent preset: '{preset_id}'")


DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a helpful Pipefy agent. Categorize the request and extract key entities."
)

_ALL: tuple[AgentPreset, ...] = (
    AgentPreset(id="custom", label="Custom Agent", prompt=""),
    AgentPreset(
        id="it_helpdesk",
        label="IT Helpdesk Agent",
        prompt=(
            "You are an intelligent IT Helpdesk agent for Pipefy. Your task is to "
            "analyze support tickets, categorize them into specific domains "
            "(Hardware, Software, Network, Access), and determine the urgency level "
            "based on the user's tone and impact."
        ),
    ),
    AgentPreset(
        id="purchase_process",
        label="Purchase Process Agent",
        prompt=(
            "You are a Procurement assistant in Pipefy. Analyze purchase requests to "
            "extract the vendor name, total amount, and list of items. Flag any "
            "high-value requests (over $1000) for manager approval."
        ),
    ),
    AgentPreset(
        id="recruitment",
        label="Recruitment Agent",
        prompt=(
            "You are an HR Recruitment AI agent. Parse candidate applications to "
            "extract the applicant's name, desired position, years of experience, "
            "and top 3 skills. Summarize their fit for a senior role."
        ),
    ),
    AgentPreset(
        id="sales",
        label="Sales Pipeline Agent",
        prompt=(
            "You are a Sales Development Representative agent. Qualify incoming "
            "leads by extracting budget, timeline, and company size. Classify the "
            "lead as Hot, Warm, or Cold based on purchasing intent."
        ),
    ),
)

PRESETS: dict[str, AgentPreset] = {preset.id: preset for preset in _ALL}


def find_presets(query: str = "") -> list[AgentPreset]:
    """Return presets whose label contains query, case-insensitively."""
    needle = query.lower()
    return [p for p in _ALL if needle in p.label.lower()]


def get_preset(preset_id: str) -> AgentPreset:
    """
    Raises:
        UnknownPresetError: if no preset has this id.
    """
    try:
        return PRESETS[preset_id]
    except KeyError:
        raise UnknownPresetError(preset_id=preset_id) from None


def resolve_system_instruction(preset_id: str) -> str:
    """Return the preset's prompt; the custom preset falls back to the default."""
    return get_preset(preset_id).prompt or DEFAULT_SYSTEM_INSTRUCTION
