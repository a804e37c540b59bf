"""JSON outcome reporter for phpmnd-hook."""

from __future__ import annotations

import json

from phpmnd_hook.models import Outcome


class JSONReporter:
    """Collect reporting events and serialize them with the outcome as JSON."""

    def __init__(self) -> None:
        self.events: list[dict] = []

    def write(self, text: str) -> None:
        self.events.append({"type": "write", "text": text})

    def success(self, message: str, halts_execution: bool) -> None:
        self.events.append(
            {"type": "success", "message": message, "halts_execution": halts_execution}
        )

    def error(self, message: str, exit_code: int) -> None:
        self.events.append({"type": "error", "message": message, "exit_code": exit_code})

    def render(self, outcome: Outcome) -> str:
        """Render the outcome and the recorded events as a JSON string.

        Args:
            outcome: The outcome of the hook run.

        Returns:
            A formatted JSON document.
        """
        data = outcome.to_dict()
        data["events"] = self.events
        return json.dumps(data, indent=2, ensure_ascii=False)
