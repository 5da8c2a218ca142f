"""
Configure use case — declare a project from build.yml and run the barrier.

Flow:
    build.yml → BuildProject → apply plugins → declare source sets,
    dependencies and extension values → evaluate() → ConfigureResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lombok_wiring.adapters.jvm.javaexec import JavaExecAdapter
from lombok_wiring.adapters.registry import AdapterRegistry
from lombok_wiring.core.config.loader import ConfigError, find_build_file, load_build, project_root
from lombok_wiring.core.config.settings import WiringSettings, load_settings
from lombok_wiring.core.errors import WiringError
from lombok_wiring.core.host import java as _java  # noqa: F401  registers "java"
from lombok_wiring.core.host import quality as _quality  # noqa: F401  registers quality plugins
from lombok_wiring.core.host.errors import HostError
from lombok_wiring.core.host.extensions import DynamicExtension
from lombok_wiring.core.host.java import SourceSetContainer
from lombok_wiring.core.host.project import BuildProject
from lombok_wiring.core.host.properties import Property
from lombok_wiring.core.host.resolution import ArtifactResolver
from lombok_wiring.core.models.build import BuildDescriptor
from lombok_wiring.core.services import lombok_plugin as _lombok  # noqa: F401  registers lombok plugins
from lombok_wiring.core.services.delombok import DelombokTask
from lombok_wiring.core.services.lombok_base import SETTINGS_EXTENSION, LombokExtension

logger = logging.getLogger(__name__)


@dataclass
class ConfigureResult:
    """Outcome of a configuration run."""

    project_name: str = ""
    config_path: Path | None = None
    plugins: list[str] = field(default_factory=list)
    delombok_tasks: list[dict[str, Any]] = field(default_factory=list)
    dependencies: dict[str, list[str]] = field(default_factory=dict)
    compile_inputs: dict[str, dict[str, Any]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "project": self.project_name,
            "config_path": str(self.config_path) if self.config_path else None,
            "plugins": self.plugins,
            "delombok_tasks": self.delombok_tasks,
            "dependencies": self.dependencies,
            "compile_inputs": self.compile_inputs,
            "warnings": self.warnings,
            "error": self.error,
        }


def default_adapters(settings: WiringSettings) -> AdapterRegistry:
    registry = AdapterRegistry()
    registry.register(JavaExecAdapter(java=settings.java))
    return registry


def build_project(
    descriptor: BuildDescriptor,
    root: Path,
    adapters: AdapterRegistry | None = None,
    settings: WiringSettings | None = None,
) -> BuildProject:
    """Declare a project from a descriptor, without evaluating it.

    Raises:
        ConfigError: if the descriptor references unknown plugins,
            configurations or extensions.
    """
    settings = settings or load_settings()
    project = BuildProject(
        descriptor.name,
        root,
        build_dir=descriptor.build_dir,
        resolver=ArtifactResolver(repository=settings.maven_repository, base_dir=root),
        adapters=adapters or default_adapters(settings),
    )
    project.extensions.add(SETTINGS_EXTENSION, settings)

    try:
        for plugin_id in descriptor.plugins:
            project.plugins.apply(plugin_id)

        _declare_source_sets(project, descriptor)

        for configuration_name, notations in descriptor.dependencies.items():
            for notation in notations:
                project.dependencies.add(configuration_name, notation)

        for name, values in descriptor.extensions.items():
            _configure_extension(project.extensions.get_by_name(name), name, values)

        lombok = project.extensions.find_by_type(LombokExtension)
        if lombok is not None:
            if descriptor.lombok.version:
                lombok.version.set(descriptor.lombok.version)
            for rule in descriptor.lombok.rules:
                lombok.add_rule(rule)
    except (HostError, ValueError) as e:
        raise ConfigError(str(e)) from e

    return project


def _declare_source_sets(project: BuildProject, descriptor: BuildDescriptor) -> None:
    if not descriptor.source_sets:
        return
    source_sets = project.extensions.find_by_type(SourceSetContainer)
    if source_sets is None:
        raise ConfigError("Source sets are declared but the 'java' plugin is not applied")

    for spec in descriptor.source_sets:
        source_set = source_sets.find_by_name(spec.name)
        if source_set is None:
            source_set = source_sets.create(spec.name, spec.java_dirs or None)
        elif spec.java_dirs:
            source_set.java.set_src_dirs(spec.java_dirs)

        if spec.encoding:
            encoding = spec.encoding
            project.tasks.named(source_set.compile_java_task_name).configure(
                lambda task, encoding=encoding: setattr(task.options, "encoding", encoding)
            )


def _configure_extension(extension: Any, name: str, values: dict[str, Any]) -> None:
    for key, value in values.items():
        if isinstance(extension, DynamicExtension):
            current = extension.get_property(key) if extension.has_property(key) else None
            if isinstance(current, Property):
                current.set(value)
            else:
                extension.set_property(key, Property(key, value))
        elif hasattr(extension, key):
            setattr(extension, key, value)
        else:
            raise ConfigError(f"Extension '{name}' has no property '{key}'")


def collect_result(project: BuildProject, result: ConfigureResult) -> ConfigureResult:
    result.project_name = project.name
    result.plugins = project.plugins.ids
    result.warnings = list(project.warnings)

    for configuration in project.configurations:
        if configuration.dependencies:
            result.dependencies[configuration.name] = [
                dep.notation for dep in configuration.dependencies
            ]

    for name in project.tasks.names:
        task = project.tasks.named(name).get()
        if isinstance(task, DelombokTask):
            result.delombok_tasks.append({
                "name": task.name,
                "target": str(task.target.get()),
                "encoding": task.encoding.get_or_none(),
                "input": [str(path) for path in task.input.files],
                "arguments": task.arguments(),
            })
        elif task.inputs.properties:
            result.compile_inputs[name] = task.inputs.properties

    return result


def run_configure(
    config_path: Path | None = None,
    adapters: AdapterRegistry | None = None,
    settings: WiringSettings | None = None,
) -> ConfigureResult:
    """Load build.yml, configure the project and evaluate it.

    Fatal errors (invalid descriptor, failed config query, unreadable
    tool version) are reported in ``result.error``.
    """
    result = ConfigureResult()

    try:
        if config_path is None:
            config_path = find_build_file()
        descriptor = load_build(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.config_path = config_path
    try:
        project = build_project(descriptor, project_root(config_path), adapters, settings)
        project.evaluate()
        return collect_result(project, result)
    except (ConfigError, WiringError, HostError) as e:
        logger.error("Configuration of '%s' failed: %s", descriptor.name, e)
        result.error = str(e)
        return result
