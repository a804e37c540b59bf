"""Exceptions raised while preparing or running PHPMND."""

from __future__ import annotations


class PhpMndHookError(Exception):
    """Base class for phpmnd-hook errors."""


class ConfigParseError(PhpMndHookError):
    """``phpmnd.json`` exists but could not be decoded into options."""


class ProcessSpawnError(PhpMndHookError):
    """The PHPMND binary could not be started."""
