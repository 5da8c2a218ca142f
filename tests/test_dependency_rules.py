"""
Tests for companion dependency rules — the MapStruct binding in particular.
"""

import pytest

from lombok_wiring.core.host.java import JavaPlugin, SourceSet
from lombok_wiring.core.host.project import BuildProject
from lombok_wiring.core.models.dependency import (
    CoordinateMatcher,
    Dependency,
    DependencyRule,
    Surface,
)
from lombok_wiring.core.services.dependency_rules import (
    MAPSTRUCT_RULE_NAME,
    apply_dependency_rule,
    apply_mapstruct_compatibility,
    mapstruct_binding_rule,
)

BINDING = Dependency.parse("org.projectlombok:lombok-mapstruct-binding:0.2.0")


@pytest.fixture
def main(project: BuildProject) -> SourceSet:
    project.plugins.apply(JavaPlugin)
    return project.extensions.get_by_name("sourceSets").get_by_name("main")


def _processors(project: BuildProject, name: str = "annotationProcessor") -> list[Dependency]:
    return project.configurations.get_by_name(name).dependencies


class TestMapstructCompatibility:
    def test_injects_binding(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        injected = apply_mapstruct_compatibility(project, main)
        assert injected == BINDING
        assert BINDING in _processors(project)

    def test_no_processor_no_injection(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "org.immutables:value:2.8.8")
        assert apply_mapstruct_compatibility(project, main) is None
        assert BINDING not in _processors(project)

    def test_existing_binding_any_version(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        project.dependencies.add("annotationProcessor", "org.projectlombok:lombok-mapstruct-binding:0.1.0")
        assert apply_mapstruct_compatibility(project, main) is None
        assert len(_processors(project)) == 2

    def test_reapplying_is_noop(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        apply_mapstruct_compatibility(project, main)
        assert apply_mapstruct_compatibility(project, main) is None
        assert _processors(project).count(BINDING) == 1

    def test_other_group_does_not_trigger(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "com.example:mapstruct-processor:1.0")
        assert apply_mapstruct_compatibility(project, main) is None

    def test_inherited_trigger_counts(self, project: BuildProject, main: SourceSet):
        shared = project.configurations.create("sharedProcessors")
        project.configurations.get_by_name("annotationProcessor").extends_from(shared)
        project.dependencies.add("sharedProcessors", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        assert apply_mapstruct_compatibility(project, main) == BINDING

    def test_source_set_scoped(self, project: BuildProject, main: SourceSet):
        test = project.extensions.get_by_name("sourceSets").get_by_name("test")
        project.dependencies.add("testAnnotationProcessor", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        assert apply_mapstruct_compatibility(project, main) is None
        assert apply_mapstruct_compatibility(project, test) == BINDING
        assert BINDING in _processors(project, "testAnnotationProcessor")

    def test_custom_version(self, project: BuildProject, main: SourceSet):
        project.dependencies.add("annotationProcessor", "org.mapstruct:mapstruct-processor:1.4.1.Final")
        injected = apply_mapstruct_compatibility(project, main, version="0.3.0")
        assert injected.version == "0.3.0"


class TestDependencyRule:
    def test_default_rule_shape(self):
        rule = mapstruct_binding_rule("0.2.0")
        assert rule.name == MAPSTRUCT_RULE_NAME
        assert rule.scan == Surface.ANNOTATION_PROCESSOR
        assert rule.inject == "org.projectlombok:lombok-mapstruct-binding:0.2.0"

    def test_cross_surface_rule(self, project: BuildProject, main: SourceSet):
        rule = DependencyRule(
            name="checker-qual",
            trigger=CoordinateMatcher(group="org.checkerframework", name="checker"),
            companion=CoordinateMatcher(name="checker-qual"),
            inject="org.checkerframework:checker-qual:3.8.0",
            scan=Surface.ANNOTATION_PROCESSOR,
            target=Surface.COMPILE_ONLY,
        )
        project.dependencies.add("annotationProcessor", "org.checkerframework:checker:3.8.0")
        apply_dependency_rule(project, main, rule)
        assert Dependency.parse("org.checkerframework:checker-qual:3.8.0") in (
            project.configurations.get_by_name("compileOnly").dependencies
        )
