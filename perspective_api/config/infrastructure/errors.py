"""Errors raised while resolving a ClientConfig from a file or the environment."""

from pathlib import Path

from perspective_api.core.errors import PerspectiveError

type ConfigSource = Path | str


def _origin(source: ConfigSource | None) -> str:
    return f" from {source}" if source is not None else ""


class MissingEnvVarsError(PerspectiveError):
    """A config file references ${VAR} placeholders that have no value."""

    def __init__(
        self, missing_vars: list[str], source: ConfigSource | None = None
    ) -> None:
        self.missing_vars = missing_vars
        self.source = source
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config{_origin(source)}:"
            f" environment variables not set: {var_list}"
        )


class ConfigValidationError(PerspectiveError):
    """Resolved config values do not form a valid ClientConfig."""

    def __init__(self, reason: str, source: ConfigSource | None = None) -> None:
        self.reason = reason
        self.source = source
        super().__init__(f"Failed to validate config{_origin(source)}: {reason}")


class ConfigLoadError(PerspectiveError):
    """The config file is missing or could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read config file {path}: {reason}")


class MissingApiKeyError(PerspectiveError):
    """No API key is available from arguments, environment, or config file."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to build client: no API key given; pass --api-key, set"
            " PERSPECTIVE_API_KEY or provide a config file"
        )
