"""
Artifact resolution — map declared dependencies to local files.

This is not a dependency resolver: there is no download and no
transitive closure. Module coordinates map onto the Maven repository
layout under a local root; file dependencies map onto themselves.
"""

from __future__ import annotations

from pathlib import Path

from lombok_wiring.core.host.errors import ResolutionError
from lombok_wiring.core.models.dependency import Dependency

DEFAULT_REPOSITORY = Path.home() / ".m2" / "repository"


class ArtifactResolver:
    """Resolve dependencies against a Maven-layout local repository."""

    def __init__(self, repository: Path | None = None, base_dir: Path | None = None):
        self.repository = repository or DEFAULT_REPOSITORY
        self.base_dir = base_dir or Path.cwd()

    def resolve(self, dependency: Dependency) -> Path:
        if dependency.path is not None:
            path = Path(dependency.path)
            return path if path.is_absolute() else self.base_dir / path

        if not dependency.group or not dependency.version:
            raise ResolutionError(
                f"Cannot resolve '{dependency.notation}': group and version are required"
            )

        return (
            self.repository
            / dependency.group.replace(".", "/")
            / dependency.name
            / dependency.version
            / f"{dependency.name}-{dependency.version}.jar"
        )
