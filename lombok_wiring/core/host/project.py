"""
Build project — the host model a plugin is applied to.

Holds the plugin, extension, configuration, task containers and the
dependency handler, and owns the configuration lifecycle:
``after_evaluate()`` defers work to the barrier, ``evaluate()`` runs it
and then realizes every registered task.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from lombok_wiring.adapters.registry import AdapterRegistry
from lombok_wiring.core.engine.lifecycle import ConfigurationLifecycle
from lombok_wiring.core.host.configurations import (
    Configuration,
    ConfigurationContainer,
    DependencyHandler,
)
from lombok_wiring.core.host.extensions import ExtensionContainer
from lombok_wiring.core.host.plugins import PluginContainer
from lombok_wiring.core.host.properties import FileCollection
from lombok_wiring.core.host.resolution import ArtifactResolver
from lombok_wiring.core.host.tasks import TaskContainer
from lombok_wiring.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class JavaExecError(Exception):
    """A Java process could not be launched or exited unsuccessfully."""

    def __init__(self, receipt: Receipt):
        self.receipt = receipt
        super().__init__(receipt.error or "Java process failed")


class BuildProject:
    """An in-memory build project."""

    def __init__(
        self,
        name: str,
        project_dir: Path,
        build_dir: str | Path = "build",
        resolver: ArtifactResolver | None = None,
        adapters: AdapterRegistry | None = None,
    ):
        self.name = name
        self.project_dir = Path(project_dir)
        self.build_dir = self.file(build_dir)
        self.adapters = adapters or AdapterRegistry()
        self.resolver = resolver or ArtifactResolver(base_dir=self.project_dir)

        self.lifecycle = ConfigurationLifecycle(name)
        self.extensions = ExtensionContainer()
        self.configurations = ConfigurationContainer(self.resolver)
        self.dependencies = DependencyHandler(self.configurations)
        self.tasks = TaskContainer(self)
        self.plugins = PluginContainer(self)
        self.warnings: list[str] = []

    def file(self, path: str | Path) -> Path:
        """Resolve a path relative to the project directory."""
        resolved = Path(path)
        return resolved if resolved.is_absolute() else self.project_dir / resolved

    # ── Lifecycle ───────────────────────────────────────────────

    def after_evaluate(self, action: Callable[[BuildProject], None]) -> None:
        """Defer ``action`` until every declaration has been processed."""
        self.lifecycle.defer(lambda: action(self), label=getattr(action, "__qualname__", ""))

    def evaluate(self) -> None:
        """Run the configuration barrier, then realize all tasks."""
        if self.lifecycle.is_finalized:
            return
        self.lifecycle.finalize()
        self.tasks.realize_all()
        logger.info(
            "Evaluated project '%s': %d deferred actions, %d tasks",
            self.name,
            self.lifecycle.completed_count,
            len(self.tasks.names),
        )

    @property
    def evaluated(self) -> bool:
        return self.lifecycle.is_finalized

    # ── Diagnostics ─────────────────────────────────────────────

    def warn(self, message: str) -> None:
        """Report a non-fatal configuration problem."""
        self.warnings.append(message)
        logger.warning(message)

    # ── External processes ──────────────────────────────────────

    def javaexec(
        self,
        main_class: str,
        args: list[str],
        classpath: FileCollection | Configuration | list[Path] | None = None,
    ) -> str:
        """Run a Java main class synchronously and return its stdout.

        Raises:
            JavaExecError: if the process cannot be launched or fails.
            ResolutionError: if the classpath cannot be resolved.
        """
        files = list(classpath.files) if hasattr(classpath, "files") else list(classpath or [])
        action = Action.javaexec(main_class, args, [str(path) for path in files])
        receipt = self.adapters.execute_action(action, project_root=str(self.project_dir))
        if receipt.failed:
            raise JavaExecError(receipt)
        return receipt.output

    def __repr__(self) -> str:
        return f"<BuildProject {self.name}>"
