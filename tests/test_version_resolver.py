"""
Tests for companion tool version resolution.
"""

import pytest

from lombok_wiring.core.errors import ToolVersionError
from lombok_wiring.core.host.extensions import DynamicExtension
from lombok_wiring.core.host.plugins import Plugin
from lombok_wiring.core.host.project import BuildProject
from lombok_wiring.core.host.properties import Property
from lombok_wiring.core.host.quality import CodeQualityExtension
from lombok_wiring.core.services.version_resolver import (
    HasToolVersion,
    resolve_companion_tool_version,
)


def _bare_spotbugs(extension=None):
    """A SpotBugs stand-in publishing the given extension (or none)."""

    class BareSpotBugsPlugin(Plugin):
        id = "com.github.spotbugs"

        def apply(self, project):
            if extension is not None:
                project.extensions.add("spotbugs", extension)

    return BareSpotBugsPlugin


class TestResolveCompanionToolVersion:
    def test_default_without_spotbugs(self, project: BuildProject):
        assert resolve_companion_tool_version(project, "4.1.3") == "4.1.3"

    def test_dynamic_extension_convention(self, project: BuildProject):
        project.plugins.apply("com.github.spotbugs")
        assert resolve_companion_tool_version(project, "4.1.3") == "4.2.0"

    def test_dynamic_extension_explicit_value(self, project: BuildProject):
        project.plugins.apply("com.github.spotbugs")
        project.extensions.get_by_name("spotbugs").get_property("toolVersion").set("4.0.6")
        assert resolve_companion_tool_version(project, "4.1.3") == "4.0.6"

    def test_plain_string_property(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs(DynamicExtension(toolVersion="4.3.0")))
        assert resolve_companion_tool_version(project, "4.1.3") == "4.3.0"

    def test_typed_extension(self, project: BuildProject):
        extension = CodeQualityExtension(tool_version="4.5.0")
        assert isinstance(extension, HasToolVersion)
        project.plugins.apply(_bare_spotbugs(extension))
        assert resolve_companion_tool_version(project, "4.1.3") == "4.5.0"


class TestMalformedExtension:
    def test_missing_extension(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs())
        with pytest.raises(ToolVersionError, match="no 'spotbugs' extension"):
            resolve_companion_tool_version(project, "4.1.3")

    def test_missing_property(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs(DynamicExtension()))
        with pytest.raises(ToolVersionError, match="toolVersion"):
            resolve_companion_tool_version(project, "4.1.3")

    def test_property_without_value(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs(DynamicExtension(toolVersion=Property("toolVersion"))))
        with pytest.raises(ToolVersionError):
            resolve_companion_tool_version(project, "4.1.3")

    def test_non_string_value(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs(DynamicExtension(toolVersion=42)))
        with pytest.raises(ToolVersionError, match="42"):
            resolve_companion_tool_version(project, "4.1.3")

    def test_unreadable_extension_type(self, project: BuildProject):
        project.plugins.apply(_bare_spotbugs(object()))
        with pytest.raises(ToolVersionError, match="object"):
            resolve_companion_tool_version(project, "4.1.3")
