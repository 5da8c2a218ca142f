"""
Dependency models — declared coordinates and injection rules.

A dependency is either a module coordinate (``group:name:version``) or a
local file (``libs/lombok.jar``). Rules describe the pattern "if A is
declared without companion C, inject C".
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict


class Dependency(BaseModel):
    """A single declared dependency."""

    model_config = ConfigDict(frozen=True)

    group: str | None = None
    name: str
    version: str | None = None
    path: str | None = None      # set for file dependencies only

    @classmethod
    def parse(cls, notation: str) -> Dependency:
        """Parse ``group:name[:version]`` or a path to a ``.jar`` file."""
        notation = notation.strip()
        if notation.endswith(".jar") or "/" in notation or "\\" in notation:
            return cls(name=PurePath(notation).stem, path=notation)

        parts = notation.split(":")
        if len(parts) == 2 and all(parts):
            return cls(group=parts[0], name=parts[1])
        if len(parts) == 3 and all(parts):
            return cls(group=parts[0], name=parts[1], version=parts[2])
        raise ValueError(f"Invalid dependency notation: {notation!r}")

    @property
    def is_file(self) -> bool:
        return self.path is not None

    @property
    def notation(self) -> str:
        if self.path is not None:
            return self.path
        parts = [self.group or "", self.name]
        if self.version:
            parts.append(self.version)
        return ":".join(parts)

    def __str__(self) -> str:
        return self.notation


class Surface(StrEnum):
    """Configuration surfaces of a source set that rules can target."""

    COMPILE_ONLY = "compileOnly"
    ANNOTATION_PROCESSOR = "annotationProcessor"
    COMPILE_CLASSPATH = "compileClasspath"


class CoordinateMatcher(BaseModel):
    """Matches dependencies by artifact name and, optionally, group."""

    model_config = ConfigDict(frozen=True)

    group: str | None = None
    name: str

    def matches(self, dependency: Dependency) -> bool:
        if dependency.name != self.name:
            return False
        return self.group is None or dependency.group == self.group


class DependencyRule(BaseModel):
    """Inject ``inject`` into ``target`` when ``trigger`` is declared in
    ``scan`` without anything matching ``companion``."""

    model_config = ConfigDict(frozen=True)

    name: str
    trigger: CoordinateMatcher
    companion: CoordinateMatcher
    inject: str
    scan: Surface = Surface.ANNOTATION_PROCESSOR
    target: Surface = Surface.ANNOTATION_PROCESSOR
