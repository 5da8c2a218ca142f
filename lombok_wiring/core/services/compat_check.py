"""
Compatibility checker — warn when lombok.config misses settings that
applied quality tools rely on.

JaCoCo only skips generated code marked ``@lombok.Generated``;
SpotBugs and SonarQube need Lombok's ``@SuppressFBWarnings``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from lombok_wiring.core.models.snapshot import ConfigSnapshot

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

COVERAGE_FRAGMENT = "lombok.addLombokGeneratedAnnotation = true"
SUPPRESSION_FRAGMENT = "lombok.extern.findbugs.addSuppressFBWarnings = true"

# plugin id → lombok.config line it requires
EXPECTED_SETTINGS: list[tuple[str, str]] = [
    ("jacoco", COVERAGE_FRAGMENT),
    ("com.github.spotbugs", SUPPRESSION_FRAGMENT),
    ("org.sonarqube", SUPPRESSION_FRAGMENT),
]


@dataclass(frozen=True)
class ConfigWarning:
    """A lombok.config that lacks an expected setting."""

    expected: str
    directory: str
    source_set: str

    @property
    def message(self) -> str:
        return (
            f"'{self.expected}' is not configured for '{self.directory}' "
            f"of the {self.source_set} source-set"
        )


def expected_fragments(project: BuildProject) -> list[str]:
    """Settings required by the applied plugins, without duplicates."""
    fragments: list[str] = []
    for plugin_id, fragment in EXPECTED_SETTINGS:
        if project.plugins.has_plugin(plugin_id) and fragment not in fragments:
            fragments.append(fragment)
    return fragments


def check_expected_setting(
    project: BuildProject,
    source_set_name: str,
    snapshot: ConfigSnapshot,
    expected: str,
) -> list[ConfigWarning]:
    """Warn for every existing directory whose config lacks ``expected``."""
    warnings = []
    for directory, config in snapshot.entries.items():
        if not Path(directory).exists():
            continue
        if config is not None and expected in config:
            continue
        warning = ConfigWarning(expected=expected, directory=directory, source_set=source_set_name)
        project.warn(warning.message)
        warnings.append(warning)
    return warnings
