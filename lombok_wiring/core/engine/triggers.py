"""
Triggers — conditional wiring evaluated once the plugin set is known.

A trigger pairs a predicate over the project with a wiring action.
The registry evaluates all of them at the configuration barrier, in
registration order, each at most once. The capability ledger records
which cross-cutting wiring has already been done for a project so that
several triggers sharing one action run it only once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

LEDGER_EXTENSION = "lombokWiring"


@dataclass
class Trigger:
    """A (predicate, action) pair."""

    name: str
    predicate: Callable[[BuildProject], bool]
    action: Callable[[], None]


def plugin_applied(plugin_id: str) -> Callable[[BuildProject], bool]:
    """Predicate: the plugin with this id is applied."""

    def predicate(project: BuildProject) -> bool:
        return project.plugins.has_plugin(plugin_id)

    predicate.__qualname__ = f"plugin_applied({plugin_id!r})"
    return predicate


@dataclass
class TriggerRegistry:
    """Ordered triggers, each fired at most once."""

    triggers: list[Trigger] = field(default_factory=list)
    fired: list[str] = field(default_factory=list)
    _evaluated: set[str] = field(default_factory=set, init=False, repr=False)

    def register(
        self,
        name: str,
        predicate: Callable[[BuildProject], bool],
        action: Callable[[], None],
    ) -> None:
        if any(trigger.name == name for trigger in self.triggers):
            logger.debug("Trigger %s already registered", name)
            return
        self.triggers.append(Trigger(name, predicate, action))

    def evaluate(self, project: BuildProject) -> list[str]:
        """Run the action of every matching, not yet evaluated trigger."""
        fired: list[str] = []
        for trigger in list(self.triggers):
            if trigger.name in self._evaluated:
                continue
            self._evaluated.add(trigger.name)
            if not trigger.predicate(project):
                logger.debug("Trigger %s: predicate not met", trigger.name)
                continue
            logger.debug("Trigger %s fired", trigger.name)
            trigger.action()
            fired.append(trigger.name)
        self.fired.extend(fired)
        return fired


class CapabilityLedger:
    """Per-project set of capabilities that have already been wired."""

    def __init__(self) -> None:
        self._claimed: set[str] = set()

    @classmethod
    def for_project(cls, project: BuildProject) -> CapabilityLedger:
        """The project's ledger, created on first use."""
        ledger = project.extensions.find_by_type(cls)
        if ledger is None:
            ledger = project.extensions.add(LEDGER_EXTENSION, cls())
        return ledger

    def claim(self, capability: str) -> bool:
        """Mark ``capability`` as wired. Returns False if it already was."""
        if capability in self._claimed:
            return False
        self._claimed.add(capability)
        return True

    @property
    def capabilities(self) -> list[str]:
        return sorted(self._claimed)

    def __contains__(self, capability: object) -> bool:
        return capability in self._claimed
