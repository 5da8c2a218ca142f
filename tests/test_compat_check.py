"""
Tests for the lombok.config compatibility checks against quality plugins.
"""

from lombok_wiring.core.host.project import BuildProject
from lombok_wiring.core.models.snapshot import ConfigSnapshot
from lombok_wiring.core.services.compat_check import (
    COVERAGE_FRAGMENT,
    SUPPRESSION_FRAGMENT,
    ConfigWarning,
    check_expected_setting,
    expected_fragments,
)


def _snapshot(**entries) -> ConfigSnapshot:
    return ConfigSnapshot(source_set="main", entries=entries)


class TestExpectedFragments:
    def test_none_without_quality_plugins(self, project: BuildProject):
        assert expected_fragments(project) == []

    def test_jacoco(self, project: BuildProject):
        project.plugins.apply("jacoco")
        assert expected_fragments(project) == [COVERAGE_FRAGMENT]

    def test_spotbugs_and_sonarqube_share_one_fragment(self, project: BuildProject):
        project.plugins.apply("com.github.spotbugs")
        project.plugins.apply("org.sonarqube")
        assert expected_fragments(project) == [SUPPRESSION_FRAGMENT]

    def test_all(self, project: BuildProject):
        for plugin_id in ("org.sonarqube", "jacoco", "com.github.spotbugs"):
            project.plugins.apply(plugin_id)
        assert expected_fragments(project) == [COVERAGE_FRAGMENT, SUPPRESSION_FRAGMENT]


class TestCheckExpectedSetting:
    def test_existing_directory_without_config_warns(self, project: BuildProject):
        main_java = project.project_dir / "src/main/java"
        main_java.mkdir(parents=True)
        snapshot = _snapshot(**{str(main_java): None})

        warnings = check_expected_setting(project, "main", snapshot, COVERAGE_FRAGMENT)

        assert warnings == [ConfigWarning(COVERAGE_FRAGMENT, str(main_java), "main")]
        assert project.warnings == [
            f"'lombok.addLombokGeneratedAnnotation = true' is not configured "
            f"for '{main_java}' of the main source-set"
        ]

    def test_config_lacking_fragment_warns(self, project: BuildProject):
        main_java = project.project_dir / "src/main/java"
        main_java.mkdir(parents=True)
        snapshot = _snapshot(**{str(main_java): "lombok.accessors.chain = true\n"})
        assert len(check_expected_setting(project, "main", snapshot, COVERAGE_FRAGMENT)) == 1

    def test_config_with_fragment_is_silent(self, project: BuildProject):
        main_java = project.project_dir / "src/main/java"
        main_java.mkdir(parents=True)
        snapshot = _snapshot(**{str(main_java): f"# {main_java}/lombok.config\n{COVERAGE_FRAGMENT}\n"})
        assert check_expected_setting(project, "main", snapshot, COVERAGE_FRAGMENT) == []
        assert project.warnings == []

    def test_missing_directory_is_silent(self, project: BuildProject):
        snapshot = _snapshot(**{str(project.project_dir / "src/main/java"): None})
        assert check_expected_setting(project, "main", snapshot, COVERAGE_FRAGMENT) == []

    def test_one_warning_per_directory(self, project: BuildProject):
        first = project.project_dir / "src/main/java"
        second = project.project_dir / "src/main/generated"
        first.mkdir(parents=True)
        second.mkdir(parents=True)
        snapshot = _snapshot(**{str(first): None, str(second): COVERAGE_FRAGMENT})

        warnings = check_expected_setting(project, "main", snapshot, COVERAGE_FRAGMENT)
        assert [w.directory for w in warnings] == [str(first)]
