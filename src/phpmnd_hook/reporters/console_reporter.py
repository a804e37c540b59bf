"""Terminal reporter for phpmnd-hook."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleReporter:
    """Print tool output and verdicts to the terminal.

    Tool output and success messages go to stdout, errors to stderr. Errors do
    not exit the process; the exit code is recorded on ``exit_code`` and the
    CLI exits with it once the run is over.
    """

    def __init__(self, stream: TextIO | None = None, err_stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.err_stream = err_stream if err_stream is not None else sys.stderr
        self.exit_code: int | None = None

    def write(self, text: str) -> None:
        if not text:
            return
        self.stream.write(text if text.endswith("\n") else text + "\n")
        self.stream.flush()

    def success(self, message: str, halts_execution: bool) -> None:
        print(f"✅ {message}", file=self.stream, flush=True)
        if halts_execution:
            raise SystemExit(0)

    def error(self, message: str, exit_code: int) -> None:
        self.exit_code = exit_code
        print(f"❌ {message}", file=self.err_stream, flush=True)
