"""
Plugins — units of build logic applied to a project.

The container applies each plugin class at most once and notifies
presence callbacks (``with_id`` / ``with_type``) for plugins applied
both before and after the callback was registered.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from lombok_wiring.core.host.errors import UnknownDomainObjectError

if TYPE_CHECKING:
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="Plugin")

# Plugin id → plugin class, for applying plugins by id
_CATALOG: dict[str, type[Plugin]] = {}


class Plugin(ABC):
    """Abstract base class for all plugins."""

    id: ClassVar[str] = ""

    @abstractmethod
    def apply(self, project: BuildProject) -> None:
        """Apply this plugin's build logic to the project."""


def register_plugin(cls: type[P]) -> type[P]:
    """Class decorator making a plugin applicable by id."""
    if not cls.id:
        raise ValueError(f"Plugin {cls.__name__} has no id")
    _CATALOG[cls.id] = cls
    return cls


def plugin_class(plugin_id: str) -> type[Plugin]:
    if plugin_id not in _CATALOG:
        raise UnknownDomainObjectError("Plugin", plugin_id)
    return _CATALOG[plugin_id]


def known_plugin_ids() -> list[str]:
    return sorted(_CATALOG)


class PluginContainer:
    """The plugins applied to one project."""

    def __init__(self, project: BuildProject):
        self._project = project
        self._plugins: list[Plugin] = []
        self._id_actions: list[tuple[str, Callable[[Any], None]]] = []
        self._type_actions: list[tuple[type[Plugin], Callable[[Any], None]]] = []

    def apply(self, plugin: type[P] | str) -> P:
        """Apply a plugin class (or id). Re-applying returns the existing instance."""
        cls = plugin_class(plugin) if isinstance(plugin, str) else plugin
        existing = self.find_plugin(cls)
        if existing is not None:
            return existing

        # Actions registered while the plugin applies already see it in _plugins
        id_actions = list(self._id_actions)
        type_actions = list(self._type_actions)

        instance = cls()
        self._plugins.append(instance)
        try:
            instance.apply(self._project)
        except Exception:
            self._plugins.remove(instance)
            raise
        logger.debug("Applied plugin %s to '%s'", cls.id or cls.__name__, self._project.name)

        for plugin_id, action in id_actions:
            if cls.id == plugin_id:
                action(instance)
        for plugin_type, action in type_actions:
            if isinstance(instance, plugin_type):
                action(instance)
        return instance

    def has_plugin(self, plugin: type[Plugin] | str) -> bool:
        return self.find_plugin(plugin) is not None

    def find_plugin(self, plugin: type[P] | str) -> P | None:
        for instance in self._plugins:
            if isinstance(plugin, str):
                if instance.id == plugin:
                    return instance
            elif type(instance) is plugin:
                return instance
        return None

    def with_id(self, plugin_id: str, action: Callable[[Plugin], None]) -> None:
        """Run ``action`` for the plugin with this id, whenever it is applied."""
        self._id_actions.append((plugin_id, action))
        for instance in list(self._plugins):
            if instance.id == plugin_id:
                action(instance)

    def with_type(self, plugin_type: type[P], action: Callable[[P], None]) -> None:
        """Run ``action`` for every applied plugin of this type."""
        self._type_actions.append((plugin_type, action))
        for instance in list(self._plugins):
            if isinstance(instance, plugin_type):
                action(instance)

    @property
    def ids(self) -> list[str]:
        return [instance.id for instance in self._plugins]

    def __iter__(self):
        return iter(list(self._plugins))
