"""
Delombok task — expands Lombok annotations of a source set into plain
Java source.

The task only describes the generation: its target, encoding,
classpath, input directories and formatting options. ``arguments()``
renders them as the delombok command line handed to the lombok jar.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from lombok_wiring.core.host.properties import FileCollection, Property
from lombok_wiring.core.host.tasks import Task

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject


class DelombokTask(Task):
    """Generated-source task for one source set."""

    def __init__(self, name: str, project: BuildProject):
        super().__init__(name, project)
        self.target: Property[Path] = Property(f"{name}.target")
        self.encoding: Property[str] = Property(f"{name}.encoding")
        self.verbose: Property[bool] = Property(f"{name}.verbose", convention=False)
        self.classpath = FileCollection(f"{name}.classpath")
        self.input = FileCollection(f"{name}.input")
        # option name → value; None means a bare flag
        self.format: dict[str, str | None] = {}

    def finalize_inputs(self) -> None:
        """Freeze target, encoding, classpath and input."""
        self.target.finalize_value()
        self.encoding.finalize_value()
        self.classpath.finalize_value()
        self.input.finalize_value()

    @property
    def is_finalized(self) -> bool:
        return self.input.is_final

    def format_options(self) -> list[str]:
        options = []
        for key, value in self.format.items():
            options.append(f"--format={key}" if value is None else f"--format={key}:{value}")
        return options

    def arguments(self) -> list[str]:
        args = ["delombok"]
        if self.verbose.get():
            args.append("--verbose")
        args += self.format_options()
        if self.encoding.is_present():
            args.append(f"--encoding={self.encoding.get()}")
        classpath = self.classpath.files
        if classpath:
            args += ["--classpath", os.pathsep.join(str(path) for path in classpath)]
        args += ["--target", str(self.target.get())]
        args += [str(path) for path in self.input.files]
        return args
