"""Environment variable references in raw config data: ${NAME} and ${NAME:-fallback}."""

import os
import re
from collections.abc import Callable, Iterator

_REFERENCE = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for item in data.values():
            yield from _strings(item)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Names of referenced variables that are unset and carry no inline default,
    in first-seen order and without repeats.
    """
    missing: dict[str, None] = {}
    for text in _strings(data):
        for ref in _REFERENCE.finditer(text):
            name = ref.group("name")
            if ref.group("default") is None and name not in os.environ:
                missing.setdefault(name, None)
    return list(missing)


def _resolve(ref: re.Match[str]) -> str:
    name, default = ref.group("name", "default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of ``data`` with every reference replaced by its value.

    A reference without a default to an unset variable raises KeyError, so
    run ``collect_missing_vars`` first.
    """
    return _map_strings(data, lambda text: _REFERENCE.sub(_resolve, text))
