"""
Extensions — named objects that plugins publish on a project or source set.

An extension is either a typed object or a dynamically shaped property
bag (``DynamicExtension``) whose properties are only known by name.
"""

from __future__ import annotations

from typing import Any, TypeVar

from lombok_wiring.core.host.errors import (
    DuplicateDomainObjectError,
    MissingPropertyError,
    UnknownDomainObjectError,
)

T = TypeVar("T")


class DynamicExtension:
    """A property bag, addressed by property name."""

    def __init__(self, **properties: Any):
        self._properties: dict[str, Any] = dict(properties)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str) -> Any:
        if name not in self._properties:
            raise MissingPropertyError(f"Could not get unknown property '{name}'")
        return self._properties[name]

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value

    @property
    def property_names(self) -> list[str]:
        return list(self._properties)

    def __repr__(self) -> str:
        return f"<DynamicExtension {self.property_names}>"


class ExtensionContainer:
    """Named extensions, looked up by name or type."""

    def __init__(self) -> None:
        self._extensions: dict[str, Any] = {}

    def add(self, name: str, extension: T) -> T:
        if name in self._extensions:
            raise DuplicateDomainObjectError("extension", name)
        self._extensions[name] = extension
        return extension

    def get_by_name(self, name: str) -> Any:
        if name not in self._extensions:
            raise UnknownDomainObjectError("Extension", name)
        return self._extensions[name]

    def find_by_name(self, name: str) -> Any | None:
        return self._extensions.get(name)

    def find_by_type(self, kind: type[T]) -> T | None:
        for extension in self._extensions.values():
            if isinstance(extension, kind):
                return extension
        return None

    @property
    def names(self) -> list[str]:
        return list(self._extensions)

    def __contains__(self, name: object) -> bool:
        return name in self._extensions
