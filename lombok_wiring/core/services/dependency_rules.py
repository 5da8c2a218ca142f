"""
Dependency rules — inject companion dependencies a source set is missing.

Each rule reads: "if a dependency matching ``trigger`` is declared on the
``scan`` surface without one matching ``companion``, add ``inject`` to the
``target`` surface". Rules are evaluated at the configuration barrier,
once the source set's dependencies are fully declared. Re-evaluating a
rule after it injected is a no-op since the injected dependency then
satisfies the companion matcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lombok_wiring.core.config.settings import WiringSettings
from lombok_wiring.core.models.dependency import (
    CoordinateMatcher,
    Dependency,
    DependencyRule,
    Surface,
)

if TYPE_CHECKING:
    from lombok_wiring.core.host.java import SourceSet
    from lombok_wiring.core.host.project import BuildProject

logger = logging.getLogger(__name__)

MAPSTRUCT_RULE_NAME = "lombok-mapstruct-binding"


def mapstruct_binding_rule(version: str) -> DependencyRule:
    """MapStruct only sees Lombok-generated accessors through the binding."""
    return DependencyRule(
        name=MAPSTRUCT_RULE_NAME,
        trigger=CoordinateMatcher(group="org.mapstruct", name="mapstruct-processor"),
        companion=CoordinateMatcher(name="lombok-mapstruct-binding"),
        inject=f"org.projectlombok:lombok-mapstruct-binding:{version}",
        scan=Surface.ANNOTATION_PROCESSOR,
        target=Surface.ANNOTATION_PROCESSOR,
    )


def default_rules(settings: WiringSettings) -> list[DependencyRule]:
    return [mapstruct_binding_rule(settings.mapstruct_binding_version)]


def apply_dependency_rule(
    project: BuildProject,
    source_set: SourceSet,
    rule: DependencyRule,
) -> Dependency | None:
    """Evaluate one rule against a source set.

    Returns:
        The injected dependency, or None if the rule did not apply.
    """
    configuration = project.configurations.get_by_name(source_set.configuration_name(rule.scan))

    trigger: Dependency | None = None
    has_companion = False
    for dependency in configuration.all_dependencies:
        if rule.trigger.matches(dependency):
            trigger = dependency
        if rule.companion.matches(dependency):
            has_companion = True

    if trigger is None or has_companion:
        return None

    target_name = source_set.configuration_name(rule.target)
    logger.info(
        "Adding %s for source set %s because %s was found",
        rule.name,
        source_set.name,
        trigger,
    )
    return project.dependencies.add(target_name, rule.inject)


def apply_dependency_rules(
    project: BuildProject,
    source_set: SourceSet,
    rules: list[DependencyRule],
) -> list[Dependency]:
    injected = []
    for rule in rules:
        dependency = apply_dependency_rule(project, source_set, rule)
        if dependency is not None:
            injected.append(dependency)
    return injected


def apply_mapstruct_compatibility(
    project: BuildProject,
    source_set: SourceSet,
    version: str = "0.2.0",
) -> Dependency | None:
    """Add lombok-mapstruct-binding next to a lone mapstruct-processor."""
    return apply_dependency_rule(project, source_set, mapstruct_binding_rule(version))
