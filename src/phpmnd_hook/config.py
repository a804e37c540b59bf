"""Loading ``phpmnd.json`` and translating it into PHPMND command-line flags."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from phpmnd_hook.errors import ConfigParseError
from phpmnd_hook.models import StringsMode

NON_ZERO_EXIT_FLAG = "--non-zero-exit-on-violation"

_LIST_KEYS = (
    "ignore-numbers",
    "ignore-funcs",
    "exclude-path",
    "exclude-file",
    "suffixes",
    "extensions",
)


@dataclass
class PhpMndConfig:
    """PHPMND options read from ``phpmnd.json``.

    ``None`` list fields mean the key was absent (or ``null``) and produce no
    flag at all.
    """

    ignore_numbers: list[str] | None = None
    ignore_funcs: list[str] | None = None
    exclude_path: list[str] | None = None
    exclude_file: list[str] | None = None
    suffixes: list[str] | None = None
    hint: bool = False
    strings: StringsMode = StringsMode.UNSET
    extensions: list[str] | None = None
    include_numeric_string: bool = False
    allow_array_mapping: bool = False

    @classmethod
    def load(cls, config_path: str | Path) -> PhpMndConfig:
        """Load options from a JSON file.

        A missing file yields the empty configuration.

        Raises:
            ConfigParseError: If the file is not valid JSON or has the wrong shape.
        """
        path = Path(config_path)
        if not path.exists():
            return cls()

        text = path.read_text(encoding="utf-8")
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"JSON Decode Error: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigParseError(
                f"JSON Decode Error: expected an object in {path.name}, got {type(raw).__name__}"
            )
        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> PhpMndConfig:
        """Build config from a decoded JSON object."""
        for key in _LIST_KEYS:
            value = raw.get(key)
            if value is not None and not isinstance(value, list):
                raise ConfigParseError(f"'{key}' must be a list, got {type(value).__name__}")

        return cls(
            ignore_numbers=_string_list(raw.get("ignore-numbers")),
            ignore_funcs=_string_list(raw.get("ignore-funcs")),
            exclude_path=_string_list(raw.get("exclude-path")),
            exclude_file=_string_list(raw.get("exclude-file")),
            suffixes=_string_list(raw.get("suffixes")),
            hint=_is_enabled(raw.get("hint")),
            strings=_strings_mode(raw.get("strings")),
            extensions=_string_list(raw.get("extensions")),
            include_numeric_string=_is_enabled(raw.get("include-numeric-string")),
            allow_array_mapping=_is_enabled(raw.get("allow-array-mapping")),
        )

    def to_arguments(self) -> list[str]:
        """Translate the options into PHPMND flags, in PHPMND's documented order.

        The list always ends with ``--non-zero-exit-on-violation``.
        """
        args: list[str] = []

        if self.ignore_numbers is not None:
            args.append("--ignore-numbers=" + ",".join(self.ignore_numbers))
        if self.ignore_funcs is not None:
            args.append("--ignore-funcs=" + ",".join(self.ignore_funcs))
        for exclude_path in self.exclude_path or []:
            args.append(f"--exclude-path={exclude_path}")
        for exclude_file in self.exclude_file or []:
            args.append(f"--exclude-file={exclude_file}")
        if self.suffixes is not None:
            args.append("--suffixes=" + ",".join(self.suffixes))
        if self.hint:
            args.append("--hint")
        if self.strings == StringsMode.ALLOW:
            args.append("--strings")
        elif self.strings == StringsMode.IGNORE:
            args.append("--ignore-strings")
        if self.extensions is not None:
            args.append("--extensions=" + ",".join(self.extensions))
        if self.include_numeric_string:
            args.append("--include-numeric-string")
        if self.allow_array_mapping:
            args.append("--allow-array-mapping")

        args.append(NON_ZERO_EXIT_FLAG)
        return args


def load_arguments(config_path: str | Path) -> list[str]:
    """Return the PHPMND flags for the configuration at ``config_path``."""
    return PhpMndConfig.load(config_path).to_arguments()


def _string_list(value: list[Any] | None) -> list[str] | None:
    if value is None:
        return None
    return [_to_flag_value(item) for item in value]


def _to_flag_value(item: Any) -> str:
    # Booleans follow PHP's string conversion, which phpmnd.json users rely on.
    if item is True:
        return "1"
    if item is False or item is None:
        return ""
    return str(item)


def _strings_mode(value: Any) -> StringsMode:
    """Decode the ``strings`` option.

    ``true`` or ``"allow"`` enables string checks; ``"ignore"`` or any other
    truthy value ignores strings; anything falsy leaves both flags off.
    """
    if value is True or value == StringsMode.ALLOW.value:
        return StringsMode.ALLOW
    if _is_enabled(value):
        return StringsMode.IGNORE
    return StringsMode.UNSET


def _is_enabled(value: Any) -> bool:
    """Truthiness as PHP sees it, where the string ``"0"`` is false."""
    if value == "0":
        return False
    return bool(value)
