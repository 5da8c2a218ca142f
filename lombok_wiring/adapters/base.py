"""
Adapter base — the contract every process adapter fulfils.

The build host never spawns processes itself. It hands an Action to the
AdapterRegistry, which picks the adapter by name and calls
``validate`` then ``execute``. An adapter reports every failure in the
returned Receipt instead of raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from lombok_wiring.core.models.action import Action, Receipt


class ExecutionContext(BaseModel):
    """An Action together with the project it runs for."""

    action: Action
    project_root: str = "."

    def param(self, name: str, default: Any = None) -> Any:
        return self.action.params.get(name, default)

    @property
    def working_dir(self) -> str:
        """``cwd`` from the action params, else the project root."""
        return self.param("cwd") or self.project_root


class Adapter(ABC):
    """Binding to one external tool."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name actions use to address this adapter."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the underlying tool can be found. Must not raise."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check the action params before running.

        Returns:
            (valid, message) — message explains why the action is invalid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> Receipt:
        """Run the action. Failures go into the Receipt, never raised."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
