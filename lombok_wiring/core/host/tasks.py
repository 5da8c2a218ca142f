"""
Tasks — lazily created units of work.

Tasks are registered as providers and only instantiated ("realized")
when something asks for them. Configuration actions queued on a
provider or on a whole task type run at realization time, so they see
everything declared before the task was first needed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from lombok_wiring.core.host.errors import DuplicateDomainObjectError, UnknownDomainObjectError
from lombok_wiring.core.host.properties import FileCollection

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Task")


class TaskInputs:
    """Named input values that take part in a task's up-to-date check."""

    def __init__(self) -> None:
        self._properties: dict[str, Any] = {}
        self._optional: set[str] = set()

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self._properties)

    def property(self, name: str, value: Any, optional: bool = False) -> TaskInputs:
        self._properties[name] = value
        if optional:
            self._optional.add(name)
        else:
            self._optional.discard(name)
        return self

    def is_optional(self, name: str) -> bool:
        return name in self._optional


class Task:
    """Base class for all tasks."""

    def __init__(self, name: str, project: BuildProject):
        self.name = name
        self.project = project
        self.group: str | None = None
        self.description = ""
        self.inputs = TaskInputs()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class CompileOptions:
    def __init__(self) -> None:
        self.encoding: str | None = None
        self.compiler_args: list[str] = []


class JavaCompile(Task):
    """Compiles the sources of one source set."""

    def __init__(self, name: str, project: BuildProject):
        super().__init__(name, project)
        self.options = CompileOptions()
        self.classpath = FileCollection(f"{name}.classpath")
        self.source = FileCollection(f"{name}.source")


class Javadoc(Task):
    """Generates API documentation from a source."""

    def __init__(self, name: str, project: BuildProject):
        super().__init__(name, project)
        self.source: Any = None

    def set_source(self, source: Any) -> None:
        self.source = source


class TaskProvider(Generic[T]):
    """A handle to a registered task that may not exist yet."""

    def __init__(self, container: TaskContainer, name: str, task_type: type[T]):
        self._container = container
        self.name = name
        self.type = task_type
        self._task: T | None = None
        self._pending: list[Callable[[T], None]] = []

    @property
    def is_realized(self) -> bool:
        return self._task is not None

    def configure(self, action: Callable[[T], None]) -> None:
        """Run ``action`` on the task now if realized, otherwise on realization."""
        if self._task is not None:
            action(self._task)
        else:
            self._pending.append(action)

    def get(self) -> T:
        if self._task is None:
            self._task = self._container._realize(self)
        return self._task

    def _drain(self, task: T) -> None:
        while self._pending:
            self._pending.pop(0)(task)

    def __repr__(self) -> str:
        return f"<TaskProvider {self.name} ({self.type.__name__})>"


class TaskCollection(Generic[T]):
    """A live view of all tasks of one type."""

    def __init__(self, container: TaskContainer, task_type: type[T]):
        self._container = container
        self._type = task_type

    def configure_each(self, action: Callable[[T], None]) -> None:
        """Apply ``action`` to every task of this type, present and future."""
        self._container._type_rules.append((self._type, action))
        for provider in self._container._providers.values():
            if provider.is_realized and isinstance(provider.get(), self._type):
                action(provider.get())

    def __iter__(self) -> Iterator[T]:
        for provider in list(self._container._providers.values()):
            if issubclass(provider.type, self._type):
                yield provider.get()


class TaskContainer:
    """All tasks of a project, keyed by name."""

    def __init__(self, project: BuildProject):
        self._project = project
        self._providers: dict[str, TaskProvider[Any]] = {}
        self._type_rules: list[tuple[type[Task], Callable[[Any], None]]] = []

    def register(
        self,
        name: str,
        task_type: type[T],
        configure: Callable[[T], None] | None = None,
    ) -> TaskProvider[T]:
        if name in self._providers:
            raise DuplicateDomainObjectError("task", name)
        provider: TaskProvider[T] = TaskProvider(self, name, task_type)
        if configure is not None:
            provider.configure(configure)
        self._providers[name] = provider
        logger.debug("Registered task %s (%s)", name, task_type.__name__)
        return provider

    def named(
        self,
        name: str,
        task_type: type[T] | None = None,
        configure: Callable[[T], None] | None = None,
    ) -> TaskProvider[T]:
        provider = self._providers.get(name)
        if provider is None:
            raise UnknownDomainObjectError("Task", name)
        if task_type is not None and not issubclass(provider.type, task_type):
            raise TypeError(
                f"Task '{name}' is a {provider.type.__name__}, not a {task_type.__name__}"
            )
        if configure is not None:
            provider.configure(configure)
        return provider

    def find(self, name: str) -> TaskProvider[Any] | None:
        return self._providers.get(name)

    def with_type(self, task_type: type[T]) -> TaskCollection[T]:
        return TaskCollection(self, task_type)

    def realize_all(self) -> None:
        for provider in list(self._providers.values()):
            provider.get()

    @property
    def names(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def _realize(self, provider: TaskProvider[T]) -> T:
        task = provider.type(provider.name, self._project)
        for task_type, action in self._type_rules:
            if isinstance(task, task_type):
                action(task)
        provider._task = task
        provider._drain(task)
        return task
