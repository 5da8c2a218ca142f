"""
Config check use case — validate build.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lombok_wiring.core.config.loader import ConfigError, find_build_file, load_build
from lombok_wiring.core.config.settings import WiringSettings, load_settings
from lombok_wiring.core.host.plugins import known_plugin_ids
from lombok_wiring.core.models.build import BuildDescriptor
from lombok_wiring.core.models.dependency import Dependency
from lombok_wiring.core.services.lombok_plugin import LombokPlugin
from lombok_wiring.core.use_cases.configure import default_adapters


@dataclass
class ConfigCheckResult:
    """Result of descriptor validation."""

    valid: bool = False
    descriptor: BuildDescriptor | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "project_name": self.descriptor.name if self.descriptor else None,
            "plugin_count": len(self.descriptor.plugins) if self.descriptor else 0,
            "source_set_count": len(self.descriptor.source_sets) if self.descriptor else 0,
        }


def check_config(
    config_path: Path | None = None,
    settings: WiringSettings | None = None,
) -> ConfigCheckResult:
    """Validate a build descriptor without evaluating it.

    Args:
        config_path: Optional explicit path to build.yml.
        settings: Settings used to probe the Java launcher.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_build_file()
    if config_path is None:
        result.errors.append("No build.yml found.")
        return result
    result.config_path = config_path

    try:
        descriptor = load_build(config_path)
        result.descriptor = descriptor
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Plugins
    known = set(known_plugin_ids())
    for plugin_id in descriptor.plugins:
        if plugin_id not in known:
            result.errors.append(f"Unknown plugin '{plugin_id}'")

    dupes = {p for p in descriptor.plugins if descriptor.plugins.count(p) > 1}
    if dupes:
        result.warnings.append(f"Plugins applied more than once: {', '.join(sorted(dupes))}")

    if not descriptor.applies(LombokPlugin.id):
        result.warnings.append(f"Plugin '{LombokPlugin.id}' is not applied; nothing will be wired.")
    if not descriptor.applies("java"):
        result.warnings.append("Plugin 'java' is not applied; no source set will be configured.")

    # Source sets
    names = [s.name for s in descriptor.source_sets]
    source_set_dupes = {n for n in names if names.count(n) > 1}
    if source_set_dupes:
        result.errors.append(f"Duplicate source sets: {', '.join(sorted(source_set_dupes))}")

    root = config_path.parent
    for spec in descriptor.source_sets:
        for java_dir in spec.java_dirs:
            if not (root / java_dir).is_dir():
                result.warnings.append(
                    f"Source set '{spec.name}' directory does not exist: {java_dir}"
                )

    # Dependencies
    for configuration_name, notations in descriptor.dependencies.items():
        for notation in notations:
            try:
                Dependency.parse(notation)
            except ValueError as e:
                result.errors.append(f"{configuration_name}: {e}")

    # Tooling
    settings = settings or load_settings()
    status = default_adapters(settings).adapter_status()
    if not status["javaexec"]["available"]:
        result.warnings.append(
            f"Java launcher '{settings.java}' not found; lombok config checks will fail."
        )

    result.valid = len(result.errors) == 0
    return result
