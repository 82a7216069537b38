"""Config loaders: YAML file with env var interpolation, or plain environment."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from perspective_api.config.domain.client import ClientConfig
from perspective_api.config.domain.observer import ConfigObserver
from perspective_api.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from perspective_api.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigSource,
    ConfigValidationError,
    MissingApiKeyError,
    MissingEnvVarsError,
)

_ENV_FIELDS = {
    "api_key": "PERSPECTIVE_API_KEY",
    "base_url": "PERSPECTIVE_BASE_URL",
    "timeout_seconds": "PERSPECTIVE_TIMEOUT_SECONDS",
}


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a ClientConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path, overrides: dict[str, Any] | None = None) -> ClientConfig:
        """
        Load a ClientConfig from *path*, applying non-None *overrides* last.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the file is not a mapping or the schema is violated.
            yaml.YAMLError: if the file is not valid YAML.
        """
        raw = _parse_yaml(path=path)
        if not isinstance(raw, dict):
            raise ConfigValidationError(
                "expected a mapping at the top level", source=path
            )
        _check_missing_env_vars(raw=raw, source=path)
        interpolated = interpolate(raw)
        cfg = _build_config(
            resolved={**interpolated, **_clean(overrides)}, source=path
        )
        self._observer.config_loaded(
            base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds
        )
        return cfg


def config_from_env(
    observer: ConfigObserver, overrides: dict[str, Any] | None = None
) -> ClientConfig:
    """
    Build a ClientConfig from PERSPECTIVE_* environment variables.

    Raises:
        MissingApiKeyError: if no API key is given by overrides or environment.
        ConfigValidationError: if a value fails validation.
    """
    resolved: dict[str, Any] = {
        field: os.environ[var] for field, var in _ENV_FIELDS.items() if var in os.environ
    }
    resolved.update(_clean(overrides))
    if not resolved.get("api_key"):
        raise MissingApiKeyError()
    cfg = _build_config(resolved=resolved, source="environment")
    observer.config_loaded(base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds)
    return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise ConfigLoadError(path=path, reason=reason) from exc


def _check_missing_env_vars(raw: Any, source: Path) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing, source=source)


def _clean(overrides: dict[str, Any] | None) -> dict[str, Any]:
    return {key: value for key, value in (overrides or {}).items() if value is not None}


def _build_config(resolved: Any, source: ConfigSource) -> ClientConfig:
    try:
        return ClientConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc), source=source) from exc
