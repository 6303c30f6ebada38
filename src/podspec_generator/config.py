"""Configuration loading for podspec generation.

The configuration is a JSON file validated against the bundled JSON Schema
(schemas/podspec_config.schema.json) before it is turned into a
PodspecConfig.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schemas" / "podspec_config.schema.json"

J2OBJC_HOME_ENV = "J2OBJC_HOME"

DEFAULT_MIN_VERSION_IOS = "8.0"
DEFAULT_POD_VERSION = "0.1.0"
DEFAULT_DEST_PODSPEC_DIR = "build/j2objcOutputs"
DEFAULT_DEST_LIB_DIR = "build/j2objcOutputs/lib"
DEFAULT_DEST_SRC_MAIN_OBJC_DIR = "build/j2objcOutputs/src/main/objc"
DEFAULT_DEST_SRC_MAIN_RESOURCES_DIR = "build/j2objcOutputs/src/main/resources"


class ConfigError(ValueError):
    """Raised when the configuration is missing or invalid."""


@dataclass(frozen=True)
class PodspecConfig:
    """Build configuration for a single project's podspec.

    Directory fields are absolute once loaded through ``from_dict``.
    """

    project_name: str
    project_dir: Path
    pod_name: str
    min_version_ios: str
    pod_author: str
    pod_license: str
    pod_homepage_url: str
    pod_source_url: str
    pod_version: str
    j2objc_home: str | None
    dest_podspec_dir: Path
    dest_lib_dir: Path
    dest_src_main_objc_dir: Path
    dest_src_main_resources_dir: Path

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path) -> "PodspecConfig":
        """Build a config from already-validated data, applying defaults.

        Args:
            data: Dictionary conforming to the config schema
            base_dir: Directory used when ``project_dir`` is absent or relative

        Returns:
            PodspecConfig with absolute directories
        """
        project_dir = (base_dir / data.get("project_dir", ".")).resolve()

        def _dir(key: str, default: str) -> Path:
            return (project_dir / data.get(key, default)).resolve()

        project_name = data["project_name"]
        return cls(
            project_name=project_name,
            project_dir=project_dir,
            pod_name=data.get("pod_name", f"j2objc-{project_name}"),
            min_version_ios=data.get("min_version_ios", DEFAULT_MIN_VERSION_IOS),
            pod_author=data.get("pod_author", ""),
            pod_license=data.get("pod_license", ""),
            pod_homepage_url=data.get("pod_homepage_url", ""),
            pod_source_url=data.get("pod_source_url", ""),
            pod_version=data.get("pod_version", DEFAULT_POD_VERSION),
            j2objc_home=data.get("j2objc_home"),
            dest_podspec_dir=_dir("dest_podspec_dir", DEFAULT_DEST_PODSPEC_DIR),
            dest_lib_dir=_dir("dest_lib_dir", DEFAULT_DEST_LIB_DIR),
            dest_src_main_objc_dir=_dir("dest_src_main_objc_dir", DEFAULT_DEST_SRC_MAIN_OBJC_DIR),
            dest_src_main_resources_dir=_dir(
                "dest_src_main_resources_dir", DEFAULT_DEST_SRC_MAIN_RESOURCES_DIR
            ),
        )

    def resolve_j2objc_home(self) -> str:
        """Locate the J2ObjC distribution.

        Uses ``j2objc_home`` from the config, falling back to the
        J2OBJC_HOME environment variable.

        Returns:
            Path to the J2ObjC installation, without a trailing '/'

        Raises:
            ConfigError: If neither source provides a location
        """
        home = self.j2objc_home or os.environ.get(J2OBJC_HOME_ENV)
        if not home:
            raise ConfigError(
                f"J2ObjC home not set: add 'j2objc_home' to the config or set {J2OBJC_HOME_ENV}"
            )
        # A trailing separator would be rejected by the podspec path rules
        stripped = home.rstrip("/") or "/"
        if stripped != home:
            logger.debug("Stripped trailing separator from J2ObjC home: %s -> %s", home, stripped)
        return stripped


def load_schema() -> dict[str, Any]:
    """Load the config JSON schema from disk.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_config(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ValidationError: If the data doesn't conform to the schema
    """
    jsonschema.validate(instance=data, schema=load_schema())


def validate_config_with_error_details(data: dict[str, Any]) -> tuple[bool, str | None]:
    """Validate config data and return a user-friendly error message.

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_config(data)
        return True, None
    except ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
        error_msg = f"Validation error at {error_path}: {e.message}"
        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"
        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"


def load_config(path: Path) -> PodspecConfig:
    """Read and validate a JSON config file.

    Args:
        path: Path to the config file

    Returns:
        PodspecConfig with defaults applied

    Raises:
        ConfigError: If the file is missing, unreadable or fails validation
    """
    if not path.is_file():
        raise ConfigError(f"Config file does not exist: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {path}: {e}") from e

    is_valid, error_msg = validate_config_with_error_details(data)
    if not is_valid:
        raise ConfigError(f"Invalid config {path}: {error_msg}")

    logger.debug("Loaded config from %s", path)
    return PodspecConfig.from_dict(data, path.parent)
