"""
Lombok base plugin — the shared ``lombok`` configuration and extension.

Applying it publishes the ``lombok`` extension and creates the
``lombok`` configuration, which falls back to
``org.projectlombok:lombok:<version>`` when nothing is declared on it.
Source sets extend their compile-only and annotation-processor
configurations from it; the lombok config query runs on it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lombok_wiring.core.config.settings import WiringSettings, load_settings
from lombok_wiring.core.host.configurations import Configuration
from lombok_wiring.core.host.plugins import Plugin, register_plugin
from lombok_wiring.core.host.properties import Property
from lombok_wiring.core.models.dependency import Dependency, DependencyRule
from lombok_wiring.core.services.dependency_rules import default_rules

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

LOMBOK_EXTENSION = "lombok"
LOMBOK_CONFIGURATION = "lombok"
SETTINGS_EXTENSION = "lombokWiringSettings"


class LombokExtension:
    """User-facing lombok settings of a project."""

    def __init__(self, settings: WiringSettings):
        self.settings = settings
        self.version: Property[str] = Property("lombok.version", convention=settings.lombok_version)
        self.dependency_rules: list[DependencyRule] = default_rules(settings)

    def add_rule(self, rule: DependencyRule) -> None:
        if rule not in self.dependency_rules:
            self.dependency_rules.append(rule)


def project_settings(project: BuildProject) -> WiringSettings:
    """Settings registered on the project, or defaults from the environment."""
    settings = project.extensions.find_by_type(WiringSettings)
    if settings is None:
        settings = project.extensions.add(SETTINGS_EXTENSION, load_settings())
    return settings


@register_plugin
class LombokBasePlugin(Plugin):
    id = "io.freefair.lombok-base"

    extension: LombokExtension
    lombok_configuration: Configuration

    def apply(self, project: BuildProject) -> None:
        self.extension = project.extensions.add(
            LOMBOK_EXTENSION, LombokExtension(project_settings(project))
        )
        self.lombok_configuration = project.configurations.create(
            LOMBOK_CONFIGURATION,
            description="Lombok and the tools delombok needs on its classpath",
        )
        self.lombok_configuration.default_dependencies(self._add_default_lombok)

    def _add_default_lombok(self, dependencies: list[Dependency]) -> None:
        version = self.extension.version.get()
        logger.debug("Using default lombok dependency %s", version)
        dependencies.append(Dependency(group="org.projectlombok", name="lombok", version=version))
