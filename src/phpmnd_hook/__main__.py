"""phpmnd-hook CLI entry point.

Usage:
    phpmnd-hook run [--root PATH] [--config PATH] [--format text|json]
    phpmnd-hook init [--path PATH] [--force] [--no-pre-commit]
    python -m phpmnd_hook run [options]
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from phpmnd_hook import __version__
from phpmnd_hook.init_command import init_command
from phpmnd_hook.invoker import Invoker
from phpmnd_hook.reporters.console_reporter import ConsoleReporter
from phpmnd_hook.reporters.json_reporter import JSONReporter


def _resolve_project_root(explicit: str | None) -> Path:
    """Resolve the project root PHPMND should analyse.

    Search order:
    1. Explicit ``--root`` argument
    2. Top level of the enclosing git work tree
    3. Current directory
    """
    if explicit:
        return Path(explicit).resolve()

    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
        toplevel = result.stdout.strip()
        if toplevel:
            return Path(toplevel)
    except (subprocess.CalledProcessError, FileNotFoundError):
        pass

    return Path.cwd()


def run_command(args: argparse.Namespace) -> int:
    """Execute the run command."""
    root = _resolve_project_root(args.root)

    if args.format == "json":
        json_reporter = JSONReporter()
        outcome = Invoker(json_reporter, config_path=args.config).run(root)
        print(json_reporter.render(outcome))
    else:
        print(f"🔎 Running PHPMND on {root}...", file=sys.stderr)
        outcome = Invoker(ConsoleReporter(), config_path=args.config).run(root)

    return outcome.exit_code or 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="phpmnd-hook",
        description="Run the PHP Magic Number Detector as a git pre-commit hook",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run subcommand
    run_parser = subparsers.add_parser("run", help="Run PHPMND against the project")
    run_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Project root containing vendor/bin/phpmnd (default: git top level)",
    )
    run_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to phpmnd.json (default: <root>/phpmnd.json)",
    )
    run_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Bootstrap phpmnd.json and the pre-commit hook for this project",
    )
    init_parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Target directory to initialize (default: current directory)",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite an existing phpmnd.json",
    )
    init_parser.add_argument(
        "--no-pre-commit",
        action="store_true",
        default=False,
        help="Skip registering the hook in .pre-commit-config.yaml",
    )

    return parser


def main() -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "run":
        sys.exit(run_command(args))
    elif args.command == "init":
        sys.exit(init_command(args))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
