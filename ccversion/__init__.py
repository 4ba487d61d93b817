"""
ccversion - detect and compare native C/C++ compiler versions.

Example:
    >>> from ccversion import CompilerTool, Version, cc_version
    >>> version = cc_version(CompilerTool.from_path("g++"))
    >>> version >= Version.parse("11")
    True
"""

from ccversion.core.exceptions import (
    BannerFormatError,
    CcVersionError,
    CommandFailedError,
    ConfigurationError,
    DetectionError,
    UnknownCompilerError,
    VersionParseError,
)
from ccversion.toolchain import (
    CompilerFamily,
    CompilerTool,
    CompilerVersionDetector,
    cc_version,
    classify_executable,
    extract_msvc_version,
)
from ccversion.version import Version

__all__ = [
    "Version",
    "CompilerFamily",
    "CompilerTool",
    "CompilerVersionDetector",
    "cc_version",
    "classify_executable",
    "extract_msvc_version",
    "CcVersionError",
    "VersionParseError",
    "DetectionError",
    "CommandFailedError",
    "UnknownCompilerError",
    "BannerFormatError",
    "ConfigurationError",
]
