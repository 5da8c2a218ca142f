"""
Source-set configurator — Lombok wiring for one source set.

Immediately, while the source set is declared:
    - compileOnly and annotationProcessor extend the lombok configuration
    - the delombok task is registered and published as ``delombokTask``
    - the compile task gets ``-Xlint:-processing``

At the configuration barrier:
    - repeated ``-Xlint:-processing`` flags on the compile task are dropped
    - dependency rules are applied
    - the lombok.config snapshot becomes a compile task input and is
      checked against the applied quality plugins
    - the delombok task is bound to the settled compile task and
      source directories, then finalized
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lombok_wiring.core.engine.triggers import CapabilityLedger
from lombok_wiring.core.host.tasks import JavaCompile, TaskProvider
from lombok_wiring.core.services.compat_check import check_expected_setting, expected_fragments
from lombok_wiring.core.services.config_snapshot import LombokConfigReader
from lombok_wiring.core.services.delombok import DelombokTask
from lombok_wiring.core.services.dependency_rules import apply_dependency_rules

if TYPE_CHECKING:
    from lombok_wiring.core.host.java import SourceSet
    from lombok_wiring.core.host.project import BuildProject
    from lombok_wiring.core.services.lombok_base import LombokBasePlugin

logger = logging.getLogger(__name__)

DELOMBOK_EXTENSION = "delombokTask"
LINT_PROCESSING_FLAG = "-Xlint:-processing"
CONFIG_INPUT_PROPERTY = "lombokConfig"


def delombok_dir(source_set: SourceSet) -> str:
    return f"generated/sources/delombok/{source_set.java.name}/{source_set.name}"


class SourceSetConfigurator:
    """Wires Lombok into source sets; each source set at most once."""

    def __init__(
        self,
        project: BuildProject,
        base: LombokBasePlugin,
        ledger: CapabilityLedger,
        reader: LombokConfigReader,
    ):
        self.project = project
        self.base = base
        self.ledger = ledger
        self.reader = reader

    def configure(self, source_set: SourceSet) -> None:
        if not self.ledger.claim(f"source-set:{source_set.name}"):
            logger.debug("Source set %s already configured", source_set.name)
            return

        project = self.project
        lombok = self.base.lombok_configuration
        configurations = project.configurations
        configurations.get_by_name(source_set.compile_only_configuration_name).extends_from(lombok)
        configurations.get_by_name(source_set.annotation_processor_configuration_name).extends_from(
            lombok
        )

        def configure_delombok(delombok: DelombokTask) -> None:
            delombok.description = f"Runs delombok on the {source_set.name} source-set"
            delombok.target.convention(project.build_dir / delombok_dir(source_set))

        delombok_provider = project.tasks.register(
            source_set.get_task_name("delombok"), DelombokTask, configure_delombok
        )
        source_set.extensions.add(DELOMBOK_EXTENSION, delombok_provider)

        compile_provider = project.tasks.named(
            source_set.compile_java_task_name, JavaCompile, _suppress_processing_lint
        )

        project.after_evaluate(
            lambda _: self.finalize(source_set, delombok_provider, compile_provider)
        )

    def finalize(
        self,
        source_set: SourceSet,
        delombok_provider: TaskProvider[DelombokTask],
        compile_provider: TaskProvider[JavaCompile],
    ) -> None:
        """Deferred part of ``configure``; runs once at the barrier."""
        project = self.project

        # Runs after the configure actions queued before the barrier
        compile_provider.configure(_drop_repeated_lint_flag)
        apply_dependency_rules(project, source_set, self.base.extension.dependency_rules)

        snapshot = self.reader.snapshot(source_set)
        compile_provider.configure(
            lambda compile_java: compile_java.inputs.property(
                CONFIG_INPUT_PROPERTY, snapshot.fingerprint(), optional=True
            )
        )

        for fragment in expected_fragments(project):
            check_expected_setting(project, source_set.name, snapshot, fragment)

        def bind(delombok: DelombokTask) -> None:
            delombok.encoding.set(compile_provider.get().options.encoding)
            delombok.classpath.from_(source_set.compile_classpath)
            delombok.input.from_(source_set.java)
            delombok.finalize_inputs()

        delombok_provider.configure(bind)


def _suppress_processing_lint(compile_java: JavaCompile) -> None:
    if LINT_PROCESSING_FLAG not in compile_java.options.compiler_args:
        compile_java.options.compiler_args.append(LINT_PROCESSING_FLAG)


def _drop_repeated_lint_flag(compile_java: JavaCompile) -> None:
    args = compile_java.options.compiler_args
    first = args.index(LINT_PROCESSING_FLAG) if LINT_PROCESSING_FLAG in args else len(args)
    args[first + 1 :] = [arg for arg in args[first + 1 :] if arg != LINT_PROCESSING_FLAG]
