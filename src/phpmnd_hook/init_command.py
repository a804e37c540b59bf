"""phpmnd-hook init command — bootstrap PHPMND and pre-commit configuration."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from phpmnd_hook.paths import CONFIG_FILENAME

PRECOMMIT_FILENAME = ".pre-commit-config.yaml"
HOOK_ID = "phpmnd"

# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------


def _build_phpmnd_config() -> dict[str, Any]:
    return {
        "ignore-numbers": ["0", "1"],
        "ignore-funcs": [],
        "exclude-path": ["vendor", "tests"],
        "exclude-file": [],
        "suffixes": ["php"],
        "hint": True,
        "strings": False,
        "extensions": ["all"],
        "include-numeric-string": False,
        "allow-array-mapping": False,
    }


def _build_phpmnd_json() -> str:
    return json.dumps(_build_phpmnd_config(), indent=4) + "\n"


def _build_hook_entry() -> dict[str, Any]:
    return {
        "id": HOOK_ID,
        "name": "PHP Magic Number Detector",
        "entry": "phpmnd-hook run",
        "language": "system",
        "always_run": True,
        "pass_filenames": False,
    }


def _merge_precommit_config(existing: dict[str, Any] | None) -> tuple[dict[str, Any], bool]:
    """Add the phpmnd hook to a pre-commit config.

    Returns:
        The merged config and whether anything changed.
    """
    config = dict(existing or {})
    repos = list(config.get("repos") or [])

    for repo in repos:
        for hook in repo.get("hooks") or []:
            if hook.get("id") == HOOK_ID:
                return config, False

    local = next((r for r in repos if r.get("repo") == "local"), None)
    if local is None:
        local = {"repo": "local", "hooks": []}
        repos.append(local)
    local["hooks"] = list(local.get("hooks") or []) + [_build_hook_entry()]

    config["repos"] = repos
    return config, True


# ---------------------------------------------------------------------------
# File writers
# ---------------------------------------------------------------------------


def _write_phpmnd_json(root: Path, force: bool) -> bool:
    target = root / CONFIG_FILENAME
    if target.exists() and not force:
        print(f"⏭️  {CONFIG_FILENAME} already exists (use --force to overwrite)", file=sys.stderr)
        return False
    target.write_text(_build_phpmnd_json(), encoding="utf-8")
    print(f"📝 Wrote {target}", file=sys.stderr)
    return True


def _write_precommit_config(root: Path) -> bool:
    target = root / PRECOMMIT_FILENAME
    existing = None
    if target.exists():
        with open(target, encoding="utf-8") as f:
            existing = yaml.safe_load(f)
        if existing is not None and not isinstance(existing, dict):
            raise ValueError(f"{target} does not contain a YAML mapping")

    merged, changed = _merge_precommit_config(existing)
    if not changed:
        print(f"⏭️  '{HOOK_ID}' hook already registered in {PRECOMMIT_FILENAME}", file=sys.stderr)
        return False

    with open(target, "w", encoding="utf-8") as f:
        yaml.safe_dump(merged, f, sort_keys=False, default_flow_style=False)
    print(f"📝 Registered '{HOOK_ID}' hook in {target}", file=sys.stderr)
    return True


def init_command(args: argparse.Namespace) -> int:
    """Bootstrap ``phpmnd.json`` and the pre-commit hook entry."""
    root = Path(getattr(args, "path", None) or ".").resolve()
    if not root.is_dir():
        print(f"❌ Not a directory: {root}", file=sys.stderr)
        return 1

    _write_phpmnd_json(root, force=getattr(args, "force", False))

    if not getattr(args, "no_pre_commit", False):
        try:
            _write_precommit_config(root)
        except (yaml.YAMLError, ValueError) as e:
            print(f"❌ Could not update {PRECOMMIT_FILENAME}: {e}", file=sys.stderr)
            return 1

    print("\n✅ phpmnd-hook initialized. Run 'pre-commit install' to enable the hook.", file=sys.stderr)
    return 0
