"""
Host errors — misuse of the in-memory build model.
"""

from __future__ import annotations


class HostError(Exception):
    """Base class for build host errors."""


class UnknownDomainObjectError(HostError, KeyError):
    """A named task, configuration, extension or source set does not exist."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} with name '{name}' not found")

    def __str__(self) -> str:
        return self.args[0]


class DuplicateDomainObjectError(HostError):
    """A named object was registered twice."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Cannot add {kind} '{name}' as a {kind} with that name already exists")


class MissingPropertyError(HostError, AttributeError):
    """A dynamic extension has no property with the requested name."""


class MissingValueError(HostError):
    """A property was queried without a value or convention."""


class FinalizedValueError(HostError):
    """A finalized property or file collection was mutated."""


class LifecycleError(HostError):
    """Work was deferred after the configuration barrier completed."""


class ResolutionError(HostError):
    """A dependency cannot be mapped to a file."""
