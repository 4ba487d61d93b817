"""
Centralized exception hierarchy for ccversion.

Every error raised by the detector, the version parser and the CLI
configuration layer derives from CcVersionError so callers can catch
them with a single except clause.
"""

from typing import List, Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class CcVersionError(Exception):
    """Base exception for all ccversion errors."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class VersionParseError(CcVersionError, ValueError):
    """Raised when a dotted version component is not a non-negative integer."""

    def __init__(self, text: str, index: int, component: str):
        self.text = text
        self.index = index
        self.component = component
        super().__init__(
            f"Invalid version '{text}': component {index} "
            f"('{component}') is not a non-negative integer"
        )


# ============================================================================
# Detection Exceptions
# ============================================================================


class DetectionError(CcVersionError):
    """Base exception for compiler version detection errors."""

    pass


class CommandFailedError(DetectionError):
    """Raised when the version query subprocess cannot be spawned or read."""

    def __init__(self, command: List[str], error: OSError):
        self.command = list(command)
        self.error = error
        super().__init__(f"Failed to run {' '.join(self.command)}: {error}")


class UnknownCompilerError(DetectionError):
    """Raised when the compiler family is not one of the supported ones."""

    def __init__(self, tool: Optional[object] = None):
        self.tool = tool
        msg = "Failed to detect compiler"
        if tool is not None:
            msg += f": {tool}"
        super().__init__(msg)


class BannerFormatError(DetectionError):
    """MSVC identification banner does not contain the version markers."""

    def __init__(self, banner: str):
        self.banner = banner
        first_line = banner.strip().splitlines()[0] if banner.strip() else ""
        super().__init__(f"MSVC banner format not recognized: {first_line!r}")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CcVersionError):
    """Raised when the configuration file is invalid."""

    pass
