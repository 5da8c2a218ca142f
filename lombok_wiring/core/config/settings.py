"""
Wiring settings — versions and tool locations with environment overrides.

Defaults are the versions the wiring was built against. Each can be
overridden through a ``LOMBOK_WIRING_*`` environment variable:

    LOMBOK_WIRING_LOMBOK_VERSION             lombok default dependency version
    LOMBOK_WIRING_MAPSTRUCT_BINDING_VERSION  injected lombok-mapstruct-binding version
    LOMBOK_WIRING_SPOTBUGS_VERSION           spotbugs-annotations version without SpotBugs
    LOMBOK_WIRING_JAVA                       java launcher
    LOMBOK_WIRING_MAVEN_REPOSITORY           local Maven repository root
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "LOMBOK_WIRING_"

_ENV_FIELDS = {
    "LOMBOK_VERSION": "lombok_version",
    "MAPSTRUCT_BINDING_VERSION": "mapstruct_binding_version",
    "SPOTBUGS_VERSION": "spotbugs_default_version",
    "JAVA": "java",
    "MAVEN_REPOSITORY": "maven_repository",
}


class WiringSettings(BaseModel):
    """Resolved settings for one configuration run."""

    lombok_version: str = "1.18.16"
    mapstruct_binding_version: str = "0.2.0"
    spotbugs_default_version: str = "4.1.3"
    config_tool_main_class: str = "lombok.launch.Main"
    java: str = "java"
    maven_repository: Path | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> WiringSettings:
    """Build settings from defaults and ``LOMBOK_WIRING_*`` overrides."""
    env = os.environ if environ is None else environ
    overrides = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = env.get(ENV_PREFIX + suffix)
        if value:
            overrides[field_name] = value
            logger.debug("Setting %s overridden from environment", field_name)
    return WiringSettings.model_validate(overrides)
