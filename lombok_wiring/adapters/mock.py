"""
Mock adapter — stands in for a process adapter in tests.

Records every context it receives. Each action either gets a receipt
pinned to its id, or a success whose output comes from ``responder``
(when given) or a fixed default string.
"""

from __future__ import annotations

from collections.abc import Callable

from lombok_wiring.adapters.base import Adapter, ExecutionContext
from lombok_wiring.core.models.action import Receipt

Responder = Callable[[ExecutionContext], str]


class MockAdapter(Adapter):
    """A recording adapter that never starts a process."""

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
        responder: Responder | None = None,
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._responder = responder
        self._pinned: dict[str, Receipt] = {}
        self.call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.call_log)

    def is_available(self) -> bool:
        return self._available

    def set_response(self, action_id: str, receipt: Receipt) -> None:
        self._pinned[action_id] = receipt

    def set_failure(self, action_id: str, error: str = "Mock failure") -> None:
        self._pinned[action_id] = Receipt.failure(self._name, action_id, error)

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        self.call_log.append(context)
        action_id = context.action.id
        if action_id in self._pinned:
            return self._pinned[action_id]
        output = self._responder(context) if self._responder else self._default_output
        return Receipt.success(self._name, action_id, output, exit_code=0)

    def reset(self) -> None:
        self.call_log.clear()
        self._pinned.clear()
