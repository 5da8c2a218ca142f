"""
Config snapshot reader — what lombok.config applies to each source directory.

Lombok resolves its configuration hierarchically, so the effective
config of a directory is obtained by asking lombok itself
(``lombok config <dir>``). Each directory is queried at most once per
reader; a reader lives for one configuration run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from lombok_wiring.core.errors import ConfigQueryError
from lombok_wiring.core.host.errors import ResolutionError
from lombok_wiring.core.host.project import JavaExecError
from lombok_wiring.core.models.snapshot import ConfigSnapshot

if TYPE_CHECKING:
    from lombok_wiring.core.host.configurations import Configuration
    from lombok_wiring.core.host.java import SourceSet
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

NO_CONFIG_SENTINEL = "No 'lombok.config' found for"


class LombokConfigReader:
    """Runs and caches lombok config queries."""

    def __init__(self, project: BuildProject, classpath: Configuration, main_class: str):
        self._project = project
        self._classpath = classpath
        self._main_class = main_class
        self._cache: dict[Path, str | None] = {}

    @property
    def directories(self) -> list[Path]:
        """Directories read so far."""
        return list(self._cache)

    def read_config(self, directory: Path) -> str | None:
        """The effective lombok config text for ``directory``.

        Returns None when the directory does not exist or lombok finds no
        lombok.config for it.

        Raises:
            ConfigQueryError: if the query process cannot run.
        """
        if directory in self._cache:
            return self._cache[directory]

        config = self._query(directory)
        self._cache[directory] = config
        return config

    def _query(self, directory: Path) -> str | None:
        if not directory.exists():
            return None

        try:
            output = self._project.javaexec(
                self._main_class,
                ["config", str(directory)],
                classpath=self._classpath,
            )
        except (JavaExecError, ResolutionError) as e:
            raise ConfigQueryError(str(directory), str(e)) from e

        logger.debug(output)

        if output.startswith(NO_CONFIG_SENTINEL):
            return None
        return output

    def snapshot(self, source_set: SourceSet) -> ConfigSnapshot:
        """Read the config of every source directory of ``source_set``."""
        entries = {str(directory): self.read_config(directory) for directory in source_set.java.src_dirs}
        return ConfigSnapshot(source_set=source_set.name, entries=entries)
