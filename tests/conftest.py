"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from lombok_wiring.adapters.base import ExecutionContext
from lombok_wiring.adapters.mock import MockAdapter
from lombok_wiring.adapters.registry import AdapterRegistry
from lombok_wiring.core.config.settings import WiringSettings
from lombok_wiring.core.host import java as _java  # noqa: F401
from lombok_wiring.core.host import quality as _quality  # noqa: F401
from lombok_wiring.core.host.project import BuildProject
from lombok_wiring.core.services import lombok_plugin as _lombok  # noqa: F401
from lombok_wiring.core.services.lombok_base import SETTINGS_EXTENSION


def fake_lombok_config(context: ExecutionContext) -> str:
    """Answer ``lombok config <dir>`` from the lombok.config file in <dir>."""
    directory = Path(context.action.params["args"][1])
    config_file = directory / "lombok.config"
    if config_file.is_file():
        return f"# {config_file}\n{config_file.read_text()}"
    return f"No 'lombok.config' found for '{directory}'.\n"


@pytest.fixture
def java_exec() -> MockAdapter:
    """A stand-in for the Java launcher answering lombok config queries."""
    return MockAdapter(adapter_name="javaexec", responder=fake_lombok_config)


@pytest.fixture
def adapters(java_exec: MockAdapter) -> AdapterRegistry:
    registry = AdapterRegistry()
    registry.register(java_exec)
    return registry


@pytest.fixture
def settings(tmp_path: Path) -> WiringSettings:
    return WiringSettings(maven_repository=tmp_path / "repository")


@pytest.fixture
def project(tmp_path: Path, adapters: AdapterRegistry, settings: WiringSettings) -> BuildProject:
    """An empty build project rooted in a temp directory."""
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    build_project = BuildProject("demo", project_dir, adapters=adapters)
    build_project.extensions.add(SETTINGS_EXTENSION, settings)
    return build_project


@pytest.fixture
def lombok_config():
    """Write a lombok.config with the given lines into a directory."""

    def write(directory: Path, *lines: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        config = directory / "lombok.config"
        config.write_text("".join(f"{line}\n" for line in lines))
        return config

    return write
