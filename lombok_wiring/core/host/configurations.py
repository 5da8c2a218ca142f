"""
Configurations — named dependency buckets and the dependency handler.

Configurations form a hierarchy through ``extends_from``. The declared
dependency set of a configuration behaves like a set: adding an equal
dependency twice keeps one entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from lombok_wiring.core.host.errors import DuplicateDomainObjectError, UnknownDomainObjectError
from lombok_wiring.core.host.resolution import ArtifactResolver
from lombok_wiring.core.models.dependency import Dependency

logger = logging.getLogger(__name__)


class Configuration:
    """A named set of dependencies, optionally extending other configurations."""

    def __init__(self, name: str, resolver: ArtifactResolver, description: str = ""):
        self.name = name
        self.description = description
        self._resolver = resolver
        self._dependencies: list[Dependency] = []
        self._extends: list[Configuration] = []
        self._default_actions: list[Callable[[list[Dependency]], None]] = []

    @property
    def dependencies(self) -> list[Dependency]:
        """Dependencies declared directly on this configuration."""
        return list(self._dependencies)

    @property
    def extends(self) -> list[Configuration]:
        return list(self._extends)

    def add(self, dependency: Dependency) -> bool:
        """Declare a dependency. Returns False if it was already declared."""
        if dependency in self._dependencies:
            return False
        self._dependencies.append(dependency)
        return True

    def extends_from(self, *configurations: Configuration) -> None:
        for configuration in configurations:
            if configuration is self:
                raise ValueError(f"Configuration '{self.name}' cannot extend itself")
            if configuration not in self._extends:
                self._extends.append(configuration)

    @property
    def hierarchy(self) -> list[Configuration]:
        """This configuration followed by everything it extends, breadth first."""
        result: list[Configuration] = []
        queue = [self]
        while queue:
            current = queue.pop(0)
            if current in result:
                continue
            result.append(current)
            queue.extend(current._extends)
        return result

    @property
    def all_dependencies(self) -> list[Dependency]:
        """Declared dependencies of this configuration and all it extends."""
        result: list[Dependency] = []
        for configuration in self.hierarchy:
            for dependency in configuration._dependencies:
                if dependency not in result:
                    result.append(dependency)
        return result

    def default_dependencies(self, action: Callable[[list[Dependency]], None]) -> None:
        """Register an action supplying dependencies when none are declared."""
        self._default_actions.append(action)

    def _effective_dependencies(self) -> list[Dependency]:
        result: list[Dependency] = []
        for configuration in self.hierarchy:
            declared = configuration._dependencies
            if not declared and configuration._default_actions:
                declared = []
                for action in configuration._default_actions:
                    action(declared)
            for dependency in declared:
                if dependency not in result:
                    result.append(dependency)
        return result

    @property
    def files(self) -> list[Path]:
        """Resolve the effective dependencies to files."""
        return [self._resolver.resolve(dep) for dep in self._effective_dependencies()]

    def __repr__(self) -> str:
        return f"<Configuration {self.name}>"


class ConfigurationContainer:
    """All configurations of a project."""

    def __init__(self, resolver: ArtifactResolver):
        self._resolver = resolver
        self._configurations: dict[str, Configuration] = {}

    def create(self, name: str, description: str = "") -> Configuration:
        if name in self._configurations:
            raise DuplicateDomainObjectError("configuration", name)
        configuration = Configuration(name, self._resolver, description)
        self._configurations[name] = configuration
        return configuration

    def maybe_create(self, name: str, description: str = "") -> Configuration:
        return self._configurations.get(name) or self.create(name, description)

    def get_by_name(self, name: str) -> Configuration:
        if name not in self._configurations:
            raise UnknownDomainObjectError("Configuration", name)
        return self._configurations[name]

    def find_by_name(self, name: str) -> Configuration | None:
        return self._configurations.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._configurations)

    def __contains__(self, name: object) -> bool:
        return name in self._configurations

    def __iter__(self) -> Iterator[Configuration]:
        return iter(list(self._configurations.values()))


class DependencyHandler:
    """Declares dependencies as (configuration name, notation) pairs."""

    def __init__(self, configurations: ConfigurationContainer):
        self._configurations = configurations

    def add(self, configuration_name: str, notation: str | Dependency) -> Dependency:
        dependency = notation if isinstance(notation, Dependency) else Dependency.parse(notation)
        configuration = self._configurations.get_by_name(configuration_name)
        if configuration.add(dependency):
            logger.debug("Added %s to configuration '%s'", dependency, configuration_name)
        return dependency
