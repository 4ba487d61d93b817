"""
Configuration loading for ccversion.

The optional ccversion.yaml file names the compiler to query and an
optional minimum version used for feature gating:

    compiler:
      path: /usr/bin/g++-13
      family: gnu
    minimum: "11.0"
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.exceptions import ConfigurationError, VersionParseError
from .toolchain.tool import CompilerFamily, CompilerTool
from .version import Version

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ccversion.yaml"


@dataclass
class DetectorConfig:
    """
    Settings for a detect run.

    Attributes:
        compiler: Compiler executable, None if not configured
        family: Explicit compiler family, classified from the path when None
        minimum: Minimum acceptable compiler version
    """

    compiler: Optional[str] = None
    family: Optional[CompilerFamily] = None
    minimum: Optional[Version] = None

    def merge(
        self,
        compiler: Optional[str] = None,
        family: Optional[CompilerFamily] = None,
        minimum: Optional[Version] = None,
    ) -> "DetectorConfig":
        """Return a copy with the given non-None values taking precedence."""
        return DetectorConfig(
            compiler=compiler if compiler is not None else self.compiler,
            family=family if family is not None else self.family,
            minimum=minimum if minimum is not None else self.minimum,
        )

    def to_tool(self) -> CompilerTool:
        """
        Build the compiler tool handle described by this configuration.

        MSVC detection always runs 'cl', so the compiler path may be
        omitted when the family is MSVC.

        Raises:
            ConfigurationError: If no compiler is configured
        """
        if self.compiler is None:
            if self.family is CompilerFamily.MSVC:
                return CompilerTool.from_path("cl", CompilerFamily.MSVC)
            raise ConfigurationError(
                "No compiler configured (use --compiler or compiler.path)"
            )
        return CompilerTool.from_path(self.compiler, self.family)


def parse_family(name: Any) -> CompilerFamily:
    """
    Parse a configured family name.

    Raises:
        ConfigurationError: If the name is not a known family
    """
    family = CompilerFamily.from_name(str(name))
    if family is CompilerFamily.UNKNOWN:
        raise ConfigurationError(
            f"Unknown compiler family '{name}'. Expected one of: gnu, clang, msvc"
        )
    return family


def parse_minimum(value: Any) -> Version:
    """
    Parse a configured minimum version.

    YAML reads an unquoted 11.10 as the float 11.1, so only strings and
    plain integers are accepted.

    Raises:
        ConfigurationError: If the value is not a dotted version
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigurationError(
            f"Invalid minimum version {value!r}: quote it in the YAML file "
            f"(e.g. minimum: \"11.10\")"
        )
    try:
        return Version.parse(str(value).strip())
    except VersionParseError as e:
        raise ConfigurationError(f"Invalid minimum version: {e}") from e


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required but missing, or is not
            a YAML mapping
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid configuration in {config_file}: expected a mapping"
        )
    return config


def load_config(config_file: Path, required: bool = False) -> DetectorConfig:
    """
    Load detector settings from a YAML file.

    Args:
        config_file: Path to ccversion.yaml
        required: If True, a missing file is an error

    Returns:
        DetectorConfig (defaults if the file is optional and missing)

    Raises:
        ConfigurationError: If the file or one of its values is invalid
    """
    data = load_yaml_config(config_file, required=required)

    compiler_section = data.get("compiler") or {}
    if isinstance(compiler_section, str):
        compiler_section = {"path": compiler_section}
    if not isinstance(compiler_section, dict):
        raise ConfigurationError("'compiler' must be a path or a mapping")

    config = DetectorConfig()
    if compiler_section.get("path") is not None:
        config.compiler = str(compiler_section["path"])
    if compiler_section.get("family") is not None:
        config.family = parse_family(compiler_section["family"])
    if data.get("minimum") is not None:
        config.minimum = parse_minimum(data["minimum"])

    logger.debug(f"Loaded configuration: {config}")
    return config
