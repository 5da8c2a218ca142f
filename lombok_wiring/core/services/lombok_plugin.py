"""
Lombok plugin — wires Lombok into every source set of a Java project.

Applying the plugin applies the base plugin and waits for ``java``.
Once Java support is present it configures every source set (see
``source_sets``), points Javadoc at the delombok output of ``main`` and
registers the quality-tool triggers evaluated at the barrier.

SpotBugs and SonarQube both trigger the same companion wiring: adding
``spotbugs-annotations`` to every compile-only configuration, so that
Lombok's ``@SuppressFBWarnings`` compiles. It runs once per project.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lombok_wiring.core.engine.triggers import CapabilityLedger, TriggerRegistry, plugin_applied
from lombok_wiring.core.host.java import JAVADOC_TASK_NAME, MAIN_SOURCE_SET_NAME, JavaPlugin
from lombok_wiring.core.host.plugins import Plugin, register_plugin
from lombok_wiring.core.host.tasks import Javadoc
from lombok_wiring.core.services.config_snapshot import LombokConfigReader
from lombok_wiring.core.services.delombok import DelombokTask
from lombok_wiring.core.services.lombok_base import LombokBasePlugin, project_settings
from lombok_wiring.core.services.source_sets import DELOMBOK_EXTENSION, SourceSetConfigurator
from lombok_wiring.core.services.version_resolver import (
    SPOTBUGS_PLUGIN_ID,
    resolve_companion_tool_version,
)

if TYPE_CHECKING:
    from lombok_wiring.core.host.java import SourceSet, SourceSetContainer
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

SONARQUBE_PLUGIN_ID = "org.sonarqube"
JAVA_DEFAULTS_CAPABILITY = "java-defaults"
SPOTBUGS_ANNOTATIONS_CAPABILITY = "spotbugs-annotations"
SPOTBUGS_ANNOTATIONS = "com.github.spotbugs:spotbugs-annotations"


def configure_delombok_defaults(delombok: DelombokTask) -> None:
    delombok.group = "lombok"
    delombok.format["pretty"] = None


@register_plugin
class LombokPlugin(Plugin):
    id = "io.freefair.lombok"

    project: BuildProject
    base: LombokBasePlugin
    ledger: CapabilityLedger
    triggers: TriggerRegistry
    configurator: SourceSetConfigurator | None = None

    def apply(self, project: BuildProject) -> None:
        self.project = project
        self.base = project.plugins.apply(LombokBasePlugin)
        self.ledger = CapabilityLedger.for_project(project)
        self.triggers = TriggerRegistry()

        project.tasks.with_type(DelombokTask).configure_each(configure_delombok_defaults)
        project.plugins.with_type(JavaPlugin, lambda _: self._configure_java_plugin_defaults())

    def _configure_java_plugin_defaults(self) -> None:
        if not self.ledger.claim(JAVA_DEFAULTS_CAPABILITY):
            return

        project = self.project
        source_sets: SourceSetContainer = project.extensions.get_by_name("sourceSets")

        reader = LombokConfigReader(
            project,
            self.base.lombok_configuration,
            project_settings(project).config_tool_main_class,
        )
        self.configurator = SourceSetConfigurator(project, self.base, self.ledger, reader)
        source_sets.all(self.configurator.configure)

        def use_delombok_source(javadoc: Javadoc) -> None:
            main = source_sets.get_by_name(MAIN_SOURCE_SET_NAME)
            javadoc.set_source(main.extensions.get_by_name(DELOMBOK_EXTENSION))

        project.tasks.named(JAVADOC_TASK_NAME, Javadoc, use_delombok_source)

        self.triggers.register(
            f"{SPOTBUGS_ANNOTATIONS_CAPABILITY}[{SPOTBUGS_PLUGIN_ID}]",
            plugin_applied(SPOTBUGS_PLUGIN_ID),
            self._configure_for_spotbugs,
        )
        self.triggers.register(
            f"{SPOTBUGS_ANNOTATIONS_CAPABILITY}[{SONARQUBE_PLUGIN_ID}]",
            plugin_applied(SONARQUBE_PLUGIN_ID),
            self._configure_for_spotbugs,
        )
        project.after_evaluate(self.triggers.evaluate)

    def _configure_for_spotbugs(self) -> None:
        if not self.ledger.claim(SPOTBUGS_ANNOTATIONS_CAPABILITY):
            logger.debug("spotbugs-annotations already wired")
            return

        project = self.project
        version = resolve_companion_tool_version(
            project, project_settings(project).spotbugs_default_version
        )
        notation = f"{SPOTBUGS_ANNOTATIONS}:{version}"

        def add_annotations(source_set: SourceSet) -> None:
            project.dependencies.add(source_set.compile_only_configuration_name, notation)
            logger.info("Added %s to %s", notation, source_set.compile_only_configuration_name)

        source_sets: SourceSetContainer = project.extensions.get_by_name("sourceSets")
        source_sets.all(add_annotations)
