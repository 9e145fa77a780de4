"""${ENV_VAR} substitution over parsed YAML data."""

import os
import re

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def find_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset, in first-seen order."""
    missing: list[str] = []
    for text in _strings(data):
        for name in _ENV_REF.findall(text):
            if name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for item in data.values() for text in _strings(item)]
    return []


def substitute(data: RawValue) -> RawValue:
    """
    Return a copy of *data* with every ${ENV_VAR} replaced by its value.

    Every referenced variable must be set; check with `find_missing_vars` first.
    """
    if isinstance(data, str):
        return _ENV_REF.sub(lambda m: os.environ[m.group(1)], data)
    if isinstance(data, list):
        return [substitute(item) for item in data]
    if isinstance(data, dict):
        return {key: substitute(value) for key, value in data.items()}
    return data
