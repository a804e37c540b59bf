"""Filesystem locations used by a hook run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from phpmnd_hook.models import Platform
from phpmnd_hook.host import binary_name

CONFIG_FILENAME = "phpmnd.json"


@dataclass(frozen=True)
class ProjectPaths:
    """Paths to the PHPMND binary and its configuration under a project root.

    Nothing here touches the filesystem; existence is checked by the caller.
    """

    root: Path
    platform: Platform

    @property
    def binary(self) -> Path:
        return self.root / "vendor" / "bin" / binary_name(self.platform)

    @property
    def config(self) -> Path:
        return self.root / CONFIG_FILENAME
