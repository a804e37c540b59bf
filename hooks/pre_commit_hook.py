#!/usr/bin/env python3
"""Git pre-commit hook for phpmnd-hook.

Install by copying or symlinking this file to `.git/hooks/pre-commit`,
or use with the pre-commit framework:

    # .pre-commit-config.yaml
    repos:
      - repo: local
        hooks:
          - id: phpmnd
            name: PHP Magic Number Detector
            entry: phpmnd-hook run
            language: system
            always_run: true
            pass_filenames: false
"""

from __future__ import annotations

import subprocess
import sys


def main() -> int:
    """Run PHPMND on the repository being committed to."""
    cmd = [
        sys.executable,
        "-m",
        "phpmnd_hook",
        "run",
        *sys.argv[1:],
    ]

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
