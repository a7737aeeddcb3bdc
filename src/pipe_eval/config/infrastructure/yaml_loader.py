"""YAML run-config loader — parses, interpolates env vars, validates, emits events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from pipe_eval.agent.domain.presets import PRESETS
from pipe_eval.config.domain.config import EvalConfig
from pipe_eval.config.domain.observer import ConfigObserver
from pipe_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from pipe_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an EvalConfig from a YAML file.

    A relative `dataset.path` is resolved against the config file's directory.
    """

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> EvalConfig:
        """
        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} without a fallback is unset
                (all collected first).
            ConfigValidationError: if the schema is violated or the agent
                preset is unknown.
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(resolved=interpolate(raw))
        _check_preset(cfg=cfg)
        cfg = _anchor_dataset_path(cfg=cfg, config_path=path)

        if cfg.judge.temperature > 0.0:
            self._observer.config_judge_temperature_warning(cfg.judge.temperature)
        self._observer.config_loaded(name=cfg.name, path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level must be a mapping")
    return raw


def _build_config(resolved: Any) -> EvalConfig:
    try:
        return EvalConfig.model_validate(resolved)
    except PydanticValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_preset(cfg: EvalConfig) -> None:
    preset = cfg.agent.preset
    if preset is not None and preset not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ConfigValidationError(
            f"unknown agent preset '{preset}' (known presets: {known})"
        )


def _anchor_dataset_path(cfg: EvalConfig, config_path: Path) -> EvalConfig:
    if cfg.dataset is None or cfg.dataset.path.is_absolute():
        return cfg
    dataset = cfg.dataset.model_copy(
        update={"path": config_path.parent / cfg.dataset.path}
    )
    return cfg.model_copy(update={"dataset": dataset})
