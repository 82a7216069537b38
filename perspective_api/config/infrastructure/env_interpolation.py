"""${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw YAML config data."""

import os
import re

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of referenced env vars that are unset and have no default.

    The whole tree is walked so every missing var is reported at once.
    """
    missing: list[str] = []
    for value in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(value):
            var_name, default = match.group(1), match.group(2)
            if default is None and var_name not in os.environ and var_name not in missing:
                missing.append(var_name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Substitute env var references with their runtime values or defaults.

    Call `collect_missing_vars` first; an unset var without a default raises KeyError.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _substitute(match: re.Match[str]) -> str:
    var_name, default = match.group(1), match.group(2)
    if default is not None:
        return os.environ.get(var_name, default)
    return os.environ[var_name]


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [s for item in data for s in _strings(item)]
    if isinstance(data, dict):
        return [s for value in data.values() for s in _strings(value)]
    return []
