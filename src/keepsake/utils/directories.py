"""Application directory naming."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppDirectories:
    """Names the per-application folders under the XDG roots.

    Hosts embedding several independent stores pass a distinct ``app_name``
    each, which keeps their save files, registry and logs apart:
    - settings: ``$XDG_CONFIG_HOME/{app_name}/settings.yaml``
    - save files and registry: ``$XDG_DATA_HOME/{app_name}/``
    """

    app_name: str = "keepsake"
