"""
Config snapshot — the lombok.config state of a source set's directories.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConfigSnapshot(BaseModel):
    """Resolved lombok config per source directory.

    A value of None means the directory does not exist or holds no
    lombok.config. Entries keep source directory declaration order.
    """

    model_config = ConfigDict(frozen=True)

    source_set: str
    entries: dict[str, str | None] = Field(default_factory=dict)

    def get(self, directory: str) -> str | None:
        return self.entries.get(directory)

    @property
    def directories(self) -> list[str]:
        return list(self.entries)

    def fingerprint(self) -> str:
        """Concatenation of all resolved configs, in directory order."""
        return "".join(config for config in self.entries.values() if config)
