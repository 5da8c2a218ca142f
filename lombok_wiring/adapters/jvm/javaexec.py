"""
Java exec adapter — launch a JVM main class and capture its output.

Used for the lombok config query (``lombok.launch.Main config <dir>``).
Standard output is returned verbatim: the caller classifies it.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import time
from pathlib import Path

from lombok_wiring.adapters.base import Adapter, ExecutionContext
from lombok_wiring.core.models.action import Receipt

logger = logging.getLogger(__name__)


class JavaExecAdapter(Adapter):
    """Run ``java -cp <classpath> <main_class> <args...>``.

    Action params:
        main_class (str): Fully qualified main class.
        classpath (list[str]): Classpath entries.
        args (list[str]): Program arguments.
        cwd (str): Override working directory (default: context.working_dir).

    No timeout is applied: the process runs to completion.
    """

    def __init__(self, java: str = "java"):
        self._java = java

    @property
    def name(self) -> str:
        return "javaexec"

    def is_available(self) -> bool:
        return shutil.which(self._java) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.param("main_class"):
            return False, "Missing required param: 'main_class'"
        if not isinstance(context.param("args", []), list):
            return False, "Param 'args' must be a list"

        cwd = context.working_dir
        if cwd and not Path(cwd).is_dir():
            return False, f"Working directory does not exist: {cwd}"

        return True, ""

    def command_line(self, context: ExecutionContext) -> list[str]:
        cmd = [self._java]
        classpath = [str(entry) for entry in context.param("classpath", [])]
        if classpath:
            cmd += ["-cp", os.pathsep.join(classpath)]
        cmd.append(context.param("main_class"))
        cmd += [str(arg) for arg in context.param("args", [])]
        return cmd

    def execute(self, context: ExecutionContext) -> Receipt:
        cmd = self.command_line(context)
        logger.debug("Executing: %s (cwd=%s)", " ".join(cmd), context.working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                cwd=context.working_dir,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            return Receipt.failure(
                self.name, context.action.id, f"Cannot launch {self._java}: {e}", command=cmd
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=result.stdout,
                duration_ms=elapsed_ms,
                exit_code=result.returncode,
                command=cmd,
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=result.stderr.strip() or f"Process exited with code {result.returncode}",
            output=result.stdout,
            duration_ms=elapsed_ms,
            exit_code=result.returncode,
            command=cmd,
        )
