"""${ENV_VAR} and ${ENV_VAR:-fallback} interpolation over raw YAML data."""

import os
import re
from typing import TypeAlias

# group(1) is the variable name, group(2) the optional fallback after ":-".
_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> list[str]:
    """Flatten every string leaf of the tree, in document order."""
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [leaf for item in data for leaf in _strings(item)]
    if isinstance(data, dict):
        return [leaf for value in data.values() for leaf in _strings(value)]
    return []


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset and has no fallback.

    Names are reported once each, in order of first appearance.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _REFERENCE.finditer(text):
            name, fallback = match.group(1), match.group(2)
            if fallback is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _substitute(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    return fallback if fallback is not None else match.group(0)


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every reference replaced by its value.

    Call `collect_missing_vars` first; unresolved references are left verbatim.
    """
    if isinstance(data, str):
        return _REFERENCE.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
