"""
Configuration parameters for h2o-assembly.
"""

import json
import os
import pathlib
import tomllib
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError

from h2o_assembly.assembly_exceptions import AssemblyConfigError
from h2o_assembly.artifact_models import ORIGINAL_JAR_ENV_VAR, ReleaseMetadata

RELEASE_METADATA_PATH = pathlib.Path(__file__).parent / "release_metadata.json"
CONFIG_FILE_NAME = "assembly.toml"


def _table(config_dict: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return the [name] table of a configuration, empty if absent."""
    table = config_dict.get(name, {})
    if not isinstance(table, dict):
        raise AssemblyConfigError(f"[{name}] must be a table, got {type(table).__name__}")
    return table


def _release_aliases(release_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite snake_case release keys to the camelCase aliases used in JSON."""
    aliases = {
        name: info.alias
        for name, info in ReleaseMetadata.model_fields.items()
        if info.alias
    }
    return {aliases.get(key, key): value for key, value in release_dict.items()}


@dataclass
class AssemblyConfig:
    """
    Configuration parameters
    """

    release: ReleaseMetadata
    build_dir: str = "build"
    original_jar_env_var: str = ORIGINAL_JAR_ENV_VAR

    @property
    def cache_dir(self) -> str:
        return os.path.join(self.build_dir, "private")

    @property
    def maven_cache_dir(self) -> str:
        return os.path.join(self.cache_dir, "maven")

    @property
    def libs_dir(self) -> str:
        return os.path.join(self.build_dir, "libs")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "AssemblyConfig":
        """
        Create an AssemblyConfig from a dictionary.

        Args:
            config_dict: Dictionary with a "release" table and optional
                "assembly" table, as found in assembly.toml

        Returns:
            AssemblyConfig instance
        """
        assembly = _table(config_dict, "assembly")
        unknown = set(assembly) - {"build_dir", "original_jar_env_var"}
        if unknown:
            raise AssemblyConfigError(
                f"Unknown [assembly] settings: {', '.join(sorted(unknown))}"
            )
        for key, value in assembly.items():
            if not isinstance(value, str) or not value:
                raise AssemblyConfigError(
                    f"[assembly] {key} must be a non-empty string, got {value!r}"
                )
        try:
            release = ReleaseMetadata(**_table(config_dict, "release"))
        except ValidationError as e:
            raise AssemblyConfigError(f"Invalid release metadata: {e}") from e

        return cls(release=release, **assembly)

    @classmethod
    def load(
        cls, project_dir: str = ".", config_path: Optional[str] = None
    ) -> "AssemblyConfig":
        """
        Load the packaged release metadata and overlay assembly.toml.

        Args:
            project_dir: Directory searched for assembly.toml; relative
                build directories are resolved against it
            config_path: Explicit configuration file, must exist if given

        Returns:
            AssemblyConfig instance
        """
        with open(RELEASE_METADATA_PATH, "r") as f:
            release_dict: Dict[str, Any] = json.load(f)

        toml_path = pathlib.Path(config_path) if config_path else pathlib.Path(project_dir, CONFIG_FILE_NAME)
        toml_dict: Dict[str, Any] = {}
        if toml_path.exists():
            try:
                with open(toml_path, "rb") as f:
                    toml_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise AssemblyConfigError(f"Failed to parse {toml_path}: {e}") from e
        elif config_path:
            raise AssemblyConfigError(f"Configuration file does not exist: {toml_path}")

        release_dict.update(_release_aliases(_table(toml_dict, "release")))
        assembly = dict(_table(toml_dict, "assembly"))
        build_dir = assembly.get("build_dir", "build")
        if isinstance(build_dir, str) and build_dir:
            assembly["build_dir"] = os.path.join(project_dir, build_dir)

        return cls.from_dict({"release": release_dict, "assembly": assembly})
