"""
Adapter registry — name → adapter lookup and guarded dispatch.

``execute_action`` is the only way the build host runs an external
process. Whatever goes wrong (no adapter under that name, invalid
params, an adapter that raises despite its contract) comes back as a
failed Receipt.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from lombok_wiring.adapters.base import Adapter, ExecutionContext
from lombok_wiring.core.models.action import Action, Receipt

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Adapters of one configuration run, keyed by name."""

    def __init__(self, *adapters: Adapter) -> None:
        self._adapters: dict[str, Adapter] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: Adapter) -> None:
        """Add ``adapter``; an adapter with the same name is replaced."""
        if adapter.name in self._adapters:
            logger.warning("Overwriting existing adapter: %s", adapter.name)
        self._adapters[adapter.name] = adapter

    def unregister(self, name: str) -> None:
        self._adapters.pop(name, None)

    def get(self, name: str) -> Adapter | None:
        return self._adapters.get(name)

    def list_adapters(self) -> list[str]:
        return list(self._adapters)

    def adapter_status(self) -> dict[str, dict[str, Any]]:
        """Availability of each adapter's tool, for diagnostics."""
        return {
            name: {
                "name": name,
                "available": _probe(adapter),
                "type": type(adapter).__name__,
            }
            for name, adapter in self._adapters.items()
        }

    def execute_action(self, action: Action, project_root: str = ".") -> Receipt:
        """Validate and run ``action`` on its adapter. Never raises."""
        started = time.monotonic()
        receipt = self._dispatch(ExecutionContext(action=action, project_root=project_root))
        receipt.duration_ms = int((time.monotonic() - started) * 1000)
        if receipt.failed:
            logger.debug("Action %s failed: %s", action.id, receipt.error)
        return receipt

    def _dispatch(self, context: ExecutionContext) -> Receipt:
        action = context.action
        adapter = self._adapters.get(action.adapter)
        if adapter is None:
            return Receipt.failure(
                action.adapter, action.id, f"No adapter registered for '{action.adapter}'"
            )

        try:
            valid, message = adapter.validate(context)
        except Exception as e:
            return Receipt.failure(action.adapter, action.id, f"Validation error: {e}")
        if not valid:
            return Receipt.failure(action.adapter, action.id, f"Validation failed: {message}")

        try:
            return adapter.execute(context)
        except Exception as e:
            logger.error("Adapter %s raised during execution: %s", action.adapter, e)
            return Receipt.failure(action.adapter, action.id, f"Unexpected error: {e}")


def _probe(adapter: Adapter) -> bool:
    try:
        return adapter.is_available()
    except Exception:
        return False
