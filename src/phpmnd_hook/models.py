"""Data models for phpmnd-hook."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

EXIT_ERRORS_FOUND = 1
EXIT_WITH_EXCEPTIONS = 2


class Platform(str, Enum):
    """Host operating system families."""

    WINDOWS = "Windows"
    BSD = "BSD"
    DARWIN = "Darwin"
    SOLARIS = "Solaris"
    LINUX = "Linux"
    UNKNOWN = "Unknown"


class StringsMode(str, Enum):
    """How PHPMND should treat string literals."""

    UNSET = "unset"
    ALLOW = "allow"
    IGNORE = "ignore"


class OutcomeKind(str, Enum):
    """Result of a hook run."""

    SUCCESS = "SUCCESS"
    VIOLATIONS = "VIOLATIONS"
    ERROR = "ERROR"


class ErrorKind(str, Enum):
    """Why a hook run failed to produce a verdict."""

    CONFIG_PARSE = "CONFIG_PARSE"
    PROCESS_SPAWN = "PROCESS_SPAWN"
    UNEXPECTED = "UNEXPECTED"


@dataclass
class InvocationResult:
    """Captured output and exit status of one PHPMND process."""

    output: str
    returncode: int

    @property
    def successful(self) -> bool:
        return self.returncode == 0


@dataclass
class Outcome:
    """The outcome of a single hook run, as reported to the hook runner."""

    kind: OutcomeKind
    message: str
    output: str = ""
    exit_code: int | None = None
    error_kind: ErrorKind | None = None
    command: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    def to_dict(self) -> dict:
        return {
            "status": self.kind.value,
            "message": self.message,
            "exit_code": self.exit_code,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "command": self.command,
            "output": self.output,
        }
