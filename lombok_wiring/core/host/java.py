"""
Java plugin — source sets, their configurations and compile tasks.

Applying ``java`` publishes a ``sourceSets`` extension and creates the
``main`` and ``test`` source sets. Every source set, including ones
added later, gets its compileOnly / annotationProcessor /
implementation / compileClasspath configurations and a JavaCompile task.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from lombok_wiring.core.host.errors import DuplicateDomainObjectError, UnknownDomainObjectError
from lombok_wiring.core.host.extensions import ExtensionContainer
from lombok_wiring.core.host.plugins import Plugin, register_plugin
from lombok_wiring.core.host.properties import FileCollection
from lombok_wiring.core.host.tasks import JavaCompile, Javadoc
from lombok_wiring.core.models.dependency import Surface

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

MAIN_SOURCE_SET_NAME = "main"
TEST_SOURCE_SET_NAME = "test"
JAVADOC_TASK_NAME = "javadoc"


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


class SourceDirectorySet:
    """The source directories of one language within a source set."""

    def __init__(self, name: str, base_dir: Path):
        self.name = name
        self._base_dir = base_dir
        self._src_dirs: list[Path] = []

    def src_dir(self, path: str | Path) -> SourceDirectorySet:
        resolved = Path(path)
        if not resolved.is_absolute():
            resolved = self._base_dir / resolved
        if resolved not in self._src_dirs:
            self._src_dirs.append(resolved)
        return self

    def set_src_dirs(self, paths: Iterable[str | Path]) -> None:
        self._src_dirs = []
        for path in paths:
            self.src_dir(path)

    @property
    def src_dirs(self) -> list[Path]:
        return list(self._src_dirs)

    @property
    def files(self) -> list[Path]:
        """Existing source directories; what a task reads as input."""
        return [path for path in self._src_dirs if path.is_dir()]


class SourceSet:
    """A group of sources compiled together."""

    def __init__(self, name: str, project: BuildProject):
        self.name = name
        self.java = SourceDirectorySet("java", project.project_dir)
        self.java.src_dir(Path("src") / name / "java")
        self.extensions = ExtensionContainer()
        self.compile_classpath = FileCollection(f"{name}.compileClasspath")

    def get_task_name(self, verb: str, target: str = "") -> str:
        """``main`` omits its own name: compileJava vs compileTestJava."""
        middle = "" if self.name == MAIN_SOURCE_SET_NAME else _capitalize(self.name)
        return f"{verb}{middle}{_capitalize(target)}"

    def _configuration_name(self, base: str) -> str:
        if self.name == MAIN_SOURCE_SET_NAME:
            return base
        return f"{self.name}{_capitalize(base)}"

    @property
    def compile_only_configuration_name(self) -> str:
        return self._configuration_name("compileOnly")

    @property
    def annotation_processor_configuration_name(self) -> str:
        return self._configuration_name("annotationProcessor")

    @property
    def implementation_configuration_name(self) -> str:
        return self._configuration_name("implementation")

    @property
    def compile_classpath_configuration_name(self) -> str:
        return self._configuration_name("compileClasspath")

    @property
    def compile_java_task_name(self) -> str:
        return self.get_task_name("compile", "java")

    def configuration_name(self, surface: Surface) -> str:
        return self._configuration_name(surface.value)

    def __repr__(self) -> str:
        return f"<SourceSet {self.name}>"


class SourceSetContainer:
    """All source sets of a project, with live ``all()`` callbacks."""

    def __init__(self, project: BuildProject):
        self._project = project
        self._source_sets: dict[str, SourceSet] = {}
        self._actions: list[Callable[[SourceSet], None]] = []

    def create(self, name: str, src_dirs: Iterable[str | Path] | None = None) -> SourceSet:
        if name in self._source_sets:
            raise DuplicateDomainObjectError("source set", name)
        source_set = SourceSet(name, self._project)
        if src_dirs:
            source_set.java.set_src_dirs(src_dirs)
        self._source_sets[name] = source_set
        for action in list(self._actions):
            action(source_set)
        return source_set

    def maybe_create(self, name: str) -> SourceSet:
        return self._source_sets.get(name) or self.create(name)

    def get_by_name(self, name: str) -> SourceSet:
        if name not in self._source_sets:
            raise UnknownDomainObjectError("SourceSet", name)
        return self._source_sets[name]

    def find_by_name(self, name: str) -> SourceSet | None:
        return self._source_sets.get(name)

    def all(self, action: Callable[[SourceSet], None]) -> None:
        """Run ``action`` for every source set, present and future."""
        self._actions.append(action)
        for source_set in list(self._source_sets.values()):
            action(source_set)

    @property
    def names(self) -> list[str]:
        return list(self._source_sets)

    def __iter__(self) -> Iterator[SourceSet]:
        return iter(list(self._source_sets.values()))

    def __len__(self) -> int:
        return len(self._source_sets)


@register_plugin
class JavaPlugin(Plugin):
    """Adds Java compilation support."""

    id = "java"

    def apply(self, project: BuildProject) -> None:
        source_sets = project.extensions.add("sourceSets", SourceSetContainer(project))
        source_sets.all(lambda source_set: self._configure_source_set(project, source_set))

        main = source_sets.create(MAIN_SOURCE_SET_NAME)
        source_sets.create(TEST_SOURCE_SET_NAME)

        project.tasks.register(
            JAVADOC_TASK_NAME,
            Javadoc,
            lambda javadoc: javadoc.set_source(main.java),
        )

    def _configure_source_set(self, project: BuildProject, source_set: SourceSet) -> None:
        configurations = project.configurations
        compile_only = configurations.maybe_create(source_set.compile_only_configuration_name)
        implementation = configurations.maybe_create(source_set.implementation_configuration_name)
        configurations.maybe_create(source_set.annotation_processor_configuration_name)
        compile_classpath = configurations.maybe_create(
            source_set.compile_classpath_configuration_name
        )
        compile_classpath.extends_from(compile_only, implementation)
        source_set.compile_classpath.from_(compile_classpath)

        def configure_compile(task: JavaCompile) -> None:
            task.description = f"Compiles the {source_set.name} Java source."
            task.classpath.from_(source_set.compile_classpath)
            task.source.from_(source_set.java)

        project.tasks.register(source_set.compile_java_task_name, JavaCompile, configure_compile)
        logger.debug("Configured source set %s", source_set.name)
