"""
Compiler toolchain module for ccversion.

This module provides:
- The compiler tool handle and family classification
- Compiler version detection for GNU, Clang and MSVC compilers
"""

from ccversion.toolchain.tool import (
    CompilerFamily,
    CompilerTool,
    classify_executable,
)
from ccversion.toolchain.detector import (
    CompilerVersionDetector,
    cc_version,
    extract_msvc_version,
)

__all__ = [
    # Tool
    "CompilerFamily",
    "CompilerTool",
    "classify_executable",
    # Detector
    "CompilerVersionDetector",
    "cc_version",
    "extract_msvc_version",
]
