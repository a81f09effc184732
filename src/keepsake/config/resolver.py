"""``KEEPSAKE_SETTINGS__*`` environment overrides for settings data."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml

from keepsake.common import JsonDict
from keepsake.constants import ENV_PREFIX
from keepsake.utils.dicts import deep_merge


def apply_env_overrides(data: Mapping[str, object], environ: Mapping[str, str] | None = None) -> dict[str, object]:
    """Return ``data`` with environment overrides merged on top.

    ``KEEPSAKE_SETTINGS__AUTO_SAVE_INTERVAL=10`` sets ``auto_save_interval``.
    Values are parsed as YAML scalars, so ``true`` and ``10`` arrive typed.
    """
    overrides = env_overrides(os.environ if environ is None else environ)
    return deep_merge(data, overrides) if overrides else dict(data)


def env_overrides(environ: Mapping[str, str]) -> JsonDict:
    overrides: JsonDict = {}
    for name, raw in environ.items():
        segments = _override_path(name)
        if segments:
            _set_path(overrides, segments, _coerce(raw))
    return overrides


def _override_path(name: str) -> list[str]:
    if not name.upper().startswith(ENV_PREFIX):
        return []
    segments = (segment.strip("_").lower() for segment in name[len(ENV_PREFIX) :].split("__"))
    return [segment for segment in segments if segment]


def _set_path(target: JsonDict, segments: list[str], value: object) -> None:
    *parents, leaf = segments
    for segment in parents:
        child = target.get(segment)
        if not isinstance(child, dict):
            child = target[segment] = {}
        target = child
    target[leaf] = value


def _coerce(raw: str) -> object:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
