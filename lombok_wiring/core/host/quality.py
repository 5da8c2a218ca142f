"""
Quality plugins — the code-quality tools the Lombok wiring reacts to.

These only stand in for the real plugins: they mark their id as applied
and publish the extension shape the real plugin exposes. SpotBugs ships
its settings as a dynamically shaped extension with a ``toolVersion``
property; the built-in code-quality plugins expose a typed extension.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lombok_wiring.core.host.extensions import DynamicExtension
from lombok_wiring.core.host.plugins import Plugin, register_plugin
from lombok_wiring.core.host.properties import Property

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject


class CodeQualityExtension:
    """Typed settings shared by the built-in code-quality plugins."""

    def __init__(self, tool_version: str | None = None):
        self.tool_version = tool_version
        self.ignore_failures = False


@register_plugin
class SpotBugsPlugin(Plugin):
    id = "com.github.spotbugs"

    def apply(self, project: BuildProject) -> None:
        project.extensions.add(
            "spotbugs",
            DynamicExtension(toolVersion=Property("toolVersion", convention="4.2.0")),
        )


@register_plugin
class SonarQubePlugin(Plugin):
    id = "org.sonarqube"

    def apply(self, project: BuildProject) -> None:
        project.extensions.add("sonarqube", DynamicExtension())


@register_plugin
class JacocoPlugin(Plugin):
    id = "jacoco"

    def apply(self, project: BuildProject) -> None:
        project.extensions.add("jacoco", CodeQualityExtension(tool_version="0.8.6"))
