"""
Build descriptor — the declarative input of a configuration run.

Loaded from build.yml, this declares what the host project looks like:
which plugins are applied, which source sets exist, what dependencies
are declared and how plugin extensions are configured.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from lombok_wiring.core.models.dependency import DependencyRule


class SourceSetSpec(BaseModel):
    """A source set declared in build.yml.

    When ``java_dirs`` is empty the host default ``src/<name>/java``
    is used.
    """

    name: str
    java_dirs: list[str] = Field(default_factory=list)
    encoding: str | None = None


class LombokSpec(BaseModel):
    """Settings for the lombok extension."""

    version: str | None = None
    rules: list[DependencyRule] = Field(default_factory=list)


class BuildDescriptor(BaseModel):
    """Root build declaration — loaded from build.yml."""

    version: int = 1

    name: str
    description: str = ""
    build_dir: str = "build"

    plugins: list[str] = Field(default_factory=list)
    source_sets: list[SourceSetSpec] = Field(default_factory=list)
    dependencies: dict[str, list[str]] = Field(default_factory=dict)
    extensions: dict[str, dict[str, Any]] = Field(default_factory=dict)
    lombok: LombokSpec = Field(default_factory=LombokSpec)

    def get_source_set(self, name: str) -> SourceSetSpec | None:
        """Look up a declared source set by name."""
        for spec in self.source_sets:
            if spec.name == name:
                return spec
        return None

    def applies(self, plugin_id: str) -> bool:
        return plugin_id in self.plugins
