"""Adapters — tool bindings for external processes.

Public re-exports for convenient access.
"""

from lombok_wiring.adapters.base import Adapter, ExecutionContext
from lombok_wiring.adapters.jvm.javaexec import JavaExecAdapter
from lombok_wiring.adapters.mock import MockAdapter
from lombok_wiring.adapters.registry import AdapterRegistry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "JavaExecAdapter",
    "MockAdapter",
]
