"""
Domain models — Pydantic types for the wiring engine.

All models are re-exported here for convenient access:

    from lombok_wiring.core.models import Dependency, DependencyRule, ConfigSnapshot
"""

from lombok_wiring.core.models.action import Action, Receipt
from lombok_wiring.core.models.build import BuildDescriptor, LombokSpec, SourceSetSpec
from lombok_wiring.core.models.dependency import (
    CoordinateMatcher,
    Dependency,
    DependencyRule,
    Surface,
)
from lombok_wiring.core.models.snapshot import ConfigSnapshot

__all__ = [
    # action.py
    "Action",
    # build.py
    "BuildDescriptor",
    # snapshot.py
    "ConfigSnapshot",
    # dependency.py
    "CoordinateMatcher",
    "Dependency",
    "DependencyRule",
    "LombokSpec",
    "Receipt",
    "SourceSetSpec",
    "Surface",
]
