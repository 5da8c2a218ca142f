"""
Version resolver — the spotbugs-annotations version to declare.

Resolution order:
    1. SpotBugs not applied      → the default version
    2. typed extension           → its ``tool_version``
    3. dynamic property bag      → its ``toolVersion`` property

A malformed extension in step 3 is a configuration error; the default
only applies when the plugin is absent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lombok_wiring.core.errors import ToolVersionError
from lombok_wiring.core.host.errors import HostError
from lombok_wiring.core.host.extensions import DynamicExtension
from lombok_wiring.core.host.properties import Property

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

SPOTBUGS_PLUGIN_ID = "com.github.spotbugs"
SPOTBUGS_EXTENSION = "spotbugs"
TOOL_VERSION_PROPERTY = "toolVersion"


@runtime_checkable
class HasToolVersion(Protocol):
    """Extension shapes that expose their tool version directly."""

    tool_version: str | None


def resolve_companion_tool_version(project: BuildProject, default_version: str) -> str:
    if not project.plugins.has_plugin(SPOTBUGS_PLUGIN_ID):
        logger.debug("SpotBugs not applied, using default version %s", default_version)
        return default_version

    extension = project.extensions.find_by_name(SPOTBUGS_EXTENSION)
    if extension is None:
        raise ToolVersionError(
            f"Plugin {SPOTBUGS_PLUGIN_ID} is applied but has no '{SPOTBUGS_EXTENSION}' extension"
        )

    if isinstance(extension, HasToolVersion):
        return _require_version(extension.tool_version, type(extension).__name__)

    return _read_tool_version_property(extension)


def _read_tool_version_property(extension: object) -> str:
    """Read ``toolVersion`` from a dynamically shaped extension."""
    if not isinstance(extension, DynamicExtension):
        raise ToolVersionError(
            f"Cannot read {TOOL_VERSION_PROPERTY} from extension of type {type(extension).__name__}"
        )

    try:
        value = extension.get_property(TOOL_VERSION_PROPERTY)
        if isinstance(value, Property):
            value = value.get()
    except HostError as e:
        raise ToolVersionError(f"Cannot read {SPOTBUGS_EXTENSION}.{TOOL_VERSION_PROPERTY}: {e}") from e

    return _require_version(value, f"{SPOTBUGS_EXTENSION}.{TOOL_VERSION_PROPERTY}")


def _require_version(value: object, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ToolVersionError(f"{source} does not hold a version string: {value!r}")
    return value.strip()
