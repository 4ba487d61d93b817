"""
Core functionality for ccversion.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    BannerFormatError,
    CcVersionError,
    CommandFailedError,
    ConfigurationError,
    DetectionError,
    UnknownCompilerError,
    VersionParseError,
)

__all__ = [
    "CcVersionError",
    "VersionParseError",
    "DetectionError",
    "CommandFailedError",
    "UnknownCompilerError",
    "BannerFormatError",
    "ConfigurationError",
]
