"""
Wiring errors — fatal conditions raised by the orchestration services.

Expected absences (no config file, plugin not applied, no matching
dependency) are never errors. Only the failures below abort
configuration.
"""

from __future__ import annotations


class WiringError(Exception):
    """Base class for all fatal wiring errors."""


class ConfigQueryError(WiringError):
    """The lombok config query process could not be launched or failed."""

    def __init__(self, directory: str, reason: str):
        self.directory = directory
        self.reason = reason
        super().__init__(f"Lombok config query failed for '{directory}': {reason}")


class ToolVersionError(WiringError):
    """The companion tool version could not be read from a plugin extension."""
