"""
Detect command implementation.

Queries a compiler for its version, optionally gating on a minimum version.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ccversion.config import (
    DEFAULT_CONFIG_FILE,
    DetectorConfig,
    load_config,
    parse_family,
    parse_minimum,
)
from ccversion.core.exceptions import CcVersionError, ConfigurationError
from ccversion.toolchain.detector import CompilerVersionDetector

logger = logging.getLogger(__name__)


def _resolve_config(args) -> DetectorConfig:
    """
    Combine the configuration file with command-line overrides.

    An explicit --config must exist; the default ./ccversion.yaml is optional.
    """
    config_file: Optional[Path] = getattr(args, "config", None)
    if config_file:
        config = load_config(Path(config_file), required=True)
    else:
        config = load_config(Path.cwd() / DEFAULT_CONFIG_FILE, required=False)

    return config.merge(
        compiler=args.compiler,
        family=parse_family(args.family) if args.family else None,
        minimum=parse_minimum(args.minimum) if args.minimum else None,
    )


def run(args) -> int:
    """
    Run the detect command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 success, 1 detection failed or version below minimum,
        2 configuration error)
    """
    try:
        config = _resolve_config(args)
        tool = config.to_tool()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    logger.debug(f"Detecting version of {tool}")

    try:
        version = CompilerVersionDetector().detect(tool)
    except CcVersionError as e:
        logger.error(f"Error: {e}")
        return 1

    satisfied = config.minimum is None or version >= config.minimum

    if args.format == "json":
        result = {
            "compiler": str(tool.path),
            "family": tool.family.value,
            "version": str(version),
            "major": version.major,
            "minor": version.minor,
            "patch": version.patch,
        }
        if config.minimum is not None:
            result["minimum"] = str(config.minimum)
            result["satisfied"] = satisfied
        print(json.dumps(result, indent=2))
    else:
        print(version)

    if not satisfied:
        logger.error(
            f"Compiler version {version} is older than required minimum "
            f"{config.minimum}"
        )
        return 1

    return 0
