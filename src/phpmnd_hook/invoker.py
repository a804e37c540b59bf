"""Runs PHPMND against a project and turns its exit status into a hook outcome."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from phpmnd_hook.config import load_arguments
from phpmnd_hook.errors import ConfigParseError, ProcessSpawnError
from phpmnd_hook.host import detect_platform
from phpmnd_hook.models import (
    EXIT_ERRORS_FOUND,
    EXIT_WITH_EXCEPTIONS,
    ErrorKind,
    InvocationResult,
    Outcome,
    OutcomeKind,
    Platform,
)
from phpmnd_hook.paths import ProjectPaths
from phpmnd_hook.reporters.base import Reporter

SUCCESS_MESSAGE = "PHPMND detected no errors, allowing to proceed."
VIOLATIONS_MESSAGE = "PHPMND detected errors, aborting commit!"
EXCEPTION_PREFIX = "An error occurred trying to run PHPMND: \n"


class Invoker:
    """Locate PHPMND under a project root, run it and report the verdict.

    Collaborators are injected so the invoker can be exercised without a real
    host: ``platform_detector`` picks the binary name, ``runner`` has the
    signature of :func:`subprocess.run`.
    """

    def __init__(
        self,
        reporter: Reporter,
        platform_detector: Callable[[], Platform] = detect_platform,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        config_path: str | Path | None = None,
    ) -> None:
        self.reporter = reporter
        self.platform_detector = platform_detector
        self.runner = runner
        self.config_path = Path(config_path) if config_path else None

    def resolve_paths(self, project_root: str | Path) -> ProjectPaths:
        return ProjectPaths(Path(project_root), self.platform_detector())

    def build_command(self, project_root: str | Path) -> list[str]:
        """Build ``[binary, root, *flags]`` for ``project_root``.

        Raises:
            ConfigParseError: If the configuration file cannot be decoded.
        """
        paths = self.resolve_paths(project_root)
        if self.config_path and not self.config_path.exists():
            print(
                f"⚠️  Configuration file {self.config_path} not found, running PHPMND without it",
                file=sys.stderr,
            )
        config_path = self.config_path or paths.config
        return [str(paths.binary), str(paths.root), *load_arguments(config_path)]

    def execute(self, command: list[str]) -> InvocationResult:
        """Run PHPMND and wait for it to finish.

        Raises:
            ProcessSpawnError: If the binary is missing or cannot be started.
        """
        try:
            completed = self.runner(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ProcessSpawnError(f"Could not start {command[0]}: {e}") from e
        return InvocationResult(output=completed.stdout or "", returncode=completed.returncode)

    def run(self, project_root: str | Path) -> Outcome:
        """Run PHPMND for ``project_root`` and report the outcome.

        Never raises for expected failures: configuration and spawn problems
        are reported with exit code 2, violations with exit code 1.
        """
        command: list[str] = []
        try:
            command = self.build_command(project_root)
            result = self.execute(command)
        except ConfigParseError as e:
            return self._fail(ErrorKind.CONFIG_PARSE, e, command)
        except ProcessSpawnError as e:
            return self._fail(ErrorKind.PROCESS_SPAWN, e, command)
        except Exception as e:
            return self._fail(ErrorKind.UNEXPECTED, e, command)

        self.reporter.write(result.output)

        if result.successful:
            self.reporter.success(SUCCESS_MESSAGE, False)
            return Outcome(
                kind=OutcomeKind.SUCCESS,
                message=SUCCESS_MESSAGE,
                output=result.output,
                command=command,
            )

        self.reporter.error(VIOLATIONS_MESSAGE, EXIT_ERRORS_FOUND)
        return Outcome(
            kind=OutcomeKind.VIOLATIONS,
            message=VIOLATIONS_MESSAGE,
            output=result.output,
            exit_code=EXIT_ERRORS_FOUND,
            command=command,
        )

    def _fail(self, error_kind: ErrorKind, error: Exception, command: list[str]) -> Outcome:
        message = EXCEPTION_PREFIX + str(error)
        self.reporter.error(message, EXIT_WITH_EXCEPTIONS)
        return Outcome(
            kind=OutcomeKind.ERROR,
            message=message,
            exit_code=EXIT_WITH_EXCEPTIONS,
            error_kind=error_kind,
            command=command,
        )
