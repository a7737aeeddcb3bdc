"""Error types raised while loading run configuration."""

from pathlib import Path

from pipe_eval.core.errors import PipeEvalError


class MissingEnvVarsError(PipeEvalError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        super().__init__(
            "Failed to load config: missing environment variables: "
            + ", ".join(sorted(missing_vars))
        )


class ConfigValidationError(PipeEvalError):
    """Raised when the loaded config does not match the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(PipeEvalError):
    """Raised when the config file cannot be read or parsed as YAML."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
