"""
Configuration lifecycle — the two-phase barrier.

Phase 1 (immediate) runs while the project is being declared: plugins
register tasks, extend configurations and *defer* everything that
depends on information declared later. Phase 2 runs once, when the
driver calls ``finalize()`` after all declarations are processed, and
drains every deferred action in registration order.

Flow:
    declare → defer(...) x N → finalize() → FINALIZED
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from lombok_wiring.core.host.errors import LifecycleError

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    """Lifecycle phases."""

    CONFIGURING = "configuring"
    FINALIZING = "finalizing"
    FINALIZED = "finalized"
    FAILED = "failed"


class ConfigurationLifecycle:
    """Collects deferred actions and runs them at a single barrier."""

    def __init__(self, name: str = ""):
        self.name = name
        self.phase = Phase.CONFIGURING
        self._pending: list[tuple[str, Callable[[], None]]] = []
        self._completed = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def completed_count(self) -> int:
        return self._completed

    @property
    def is_finalized(self) -> bool:
        return self.phase == Phase.FINALIZED

    def defer(self, action: Callable[[], None], label: str = "") -> None:
        """Schedule ``action`` for the barrier.

        Actions deferred while the barrier is running are drained in
        the same pass.
        """
        if self.phase in (Phase.FINALIZED, Phase.FAILED):
            raise LifecycleError(
                f"Cannot defer '{label or action}' — project '{self.name}' is already {self.phase}"
            )
        self._pending.append((label, action))

    def finalize(self) -> None:
        """Run every deferred action exactly once.

        Calling finalize() again after success is a no-op. Any exception
        raised by a deferred action aborts the barrier and propagates.
        """
        if self.phase == Phase.FINALIZED:
            return
        if self.phase != Phase.CONFIGURING:
            raise LifecycleError(f"Project '{self.name}' cannot be finalized while {self.phase}")

        self.phase = Phase.FINALIZING
        logger.debug("Finalizing '%s' (%d deferred actions)", self.name, len(self._pending))
        try:
            while self._pending:
                label, action = self._pending.pop(0)
                logger.debug("Running deferred action %s", label or action)
                action()
                self._completed += 1
        except Exception:
            self.phase = Phase.FAILED
            raise
        self.phase = Phase.FINALIZED
