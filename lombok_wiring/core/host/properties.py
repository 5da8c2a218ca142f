"""
Lazy values — properties and file collections.

Both can be wired before their content is known and are read only when
queried. Once finalized they reject further mutation.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Generic, TypeVar

from lombok_wiring.core.host.errors import FinalizedValueError, MissingValueError

T = TypeVar("T")


class Property(Generic[T]):
    """A settable value with an optional convention (default)."""

    def __init__(self, name: str = "", value: T | None = None, convention: T | None = None):
        self.name = name
        self._value = value
        self._convention = convention
        self._final = False

    def set(self, value: T | None) -> None:
        self._check_mutable()
        self._value = value

    def convention(self, value: T | None) -> Property[T]:
        self._check_mutable()
        self._convention = value
        return self

    def get(self) -> T:
        value = self.get_or_none()
        if value is None:
            raise MissingValueError(f"No value has been specified for property '{self.name}'")
        return value

    def get_or_none(self) -> T | None:
        return self._value if self._value is not None else self._convention

    def is_present(self) -> bool:
        return self.get_or_none() is not None

    def finalize_value(self) -> None:
        self._final = True

    @property
    def is_final(self) -> bool:
        return self._final

    def _check_mutable(self) -> None:
        if self._final:
            raise FinalizedValueError(f"The value for property '{self.name}' is final")

    def __repr__(self) -> str:
        return f"<Property {self.name}={self.get_or_none()!r}>"


class FileCollection:
    """An ordered, lazily resolved collection of files.

    Sources may be paths, other file collections, objects exposing a
    ``files`` attribute (configurations, source directory sets) or
    callables returning any of those.
    """

    def __init__(self, name: str = "", sources: Iterable[Any] = ()):
        self.name = name
        self._sources: list[Any] = list(sources)
        self._final = False

    def from_(self, *sources: Any) -> FileCollection:
        if self._final:
            raise FinalizedValueError(f"The value for file collection '{self.name}' is final")
        self._sources.extend(sources)
        return self

    @property
    def sources(self) -> list[Any]:
        return list(self._sources)

    @property
    def files(self) -> list[Path]:
        seen: set[Path] = set()
        result: list[Path] = []
        for source in self._sources:
            for path in _flatten(source):
                if path not in seen:
                    seen.add(path)
                    result.append(path)
        return result

    def finalize_value(self) -> None:
        self._final = True

    @property
    def is_final(self) -> bool:
        return self._final

    def __iter__(self):
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


def _flatten(source: Any) -> list[Path]:
    if isinstance(source, (str, Path)):
        return [Path(source)]
    if callable(source) and not hasattr(source, "files"):
        return _flatten(source())
    if hasattr(source, "files"):
        return list(source.files)
    if isinstance(source, Iterable):
        return [path for item in source for path in _flatten(item)]
    raise TypeError(f"Cannot convert {source!r} to files")
