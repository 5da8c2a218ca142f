"""
Action and Receipt models — how the build host asks for a process run.

An Action names the adapter to use and carries its parameters (main
class, classpath, program arguments). A Receipt records what came back:
captured stdout, the exit code, the command line, and an error text
when the run did not succeed. Adapters report failures in the Receipt;
the host decides which failures abort configuration.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """One requested process run."""

    id: str
    adapter: str
    name: str = ""
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def javaexec(
        cls,
        main_class: str,
        args: list[str],
        classpath: list[str] | None = None,
    ) -> Action:
        """A ``java -cp <classpath> <main_class> <args>`` request."""
        return cls(
            id=f"javaexec-{uuid.uuid4().hex[:8]}",
            adapter="javaexec",
            name=f"java {main_class}",
            params={
                "main_class": main_class,
                "classpath": list(classpath or []),
                "args": [str(arg) for arg in args],
            },
        )


class Receipt(BaseModel):
    """Outcome of an Action."""

    adapter: str
    action_id: str
    status: Literal["ok", "failed"] = "ok"

    output: str = ""                # stdout, verbatim
    error: str | None = None
    exit_code: int | None = None    # None when no process was started
    command: list[str] = Field(default_factory=list)

    finished_at: str = Field(default_factory=_timestamp)
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def success(cls, adapter: str, action_id: str, output: str = "", **fields: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, output=output, **fields)

    @classmethod
    def failure(cls, adapter: str, action_id: str, error: str, **fields: Any) -> Receipt:
        return cls(adapter=adapter, action_id=action_id, status="failed", error=error, **fields)
