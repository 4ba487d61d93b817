"""
ccversion/toolchain/detector.py

Compiler version detection - asks a compiler for its version and parses it.
"""

import logging
import subprocess
from typing import List

from ..core.exceptions import (
    BannerFormatError,
    CommandFailedError,
    UnknownCompilerError,
)
from ..version import Version
from .tool import CompilerTool

logger = logging.getLogger(__name__)

DUMPVERSION_FLAG = "-dumpversion"
MSVC_COMMAND = ["cl"]

_MSVC_VERSION_MARKER = "Version "
_MSVC_TARGET_MARKER = " for "


def extract_msvc_version(banner: str) -> str:
    """
    Extract the version substring from an MSVC identification banner.

    The banner looks like:
        Microsoft (R) C/C++ Optimizing Compiler Version 19.38.33133 for x64

    Args:
        banner: Text cl.exe printed on stderr

    Returns:
        Text between "Version " and " for " (e.g. "19.38.33133"), unstripped

    Raises:
        BannerFormatError: If either marker is missing or they are out of order
    """
    start = banner.find(_MSVC_VERSION_MARKER)
    end = banner.find(_MSVC_TARGET_MARKER)
    if start == -1 or end == -1:
        raise BannerFormatError(banner)

    start += len(_MSVC_VERSION_MARKER)
    if end < start:
        raise BannerFormatError(banner)

    return banner[start:end]


class CompilerVersionDetector:
    """
    Detect the version of a compiler.

    Uses the version-reporting convention of the tool's family:
    - GNU / Clang: '<compiler> -dumpversion' prints the bare version on stdout
    - MSVC: 'cl' without arguments prints an identification banner on stderr

    Each detect() call runs exactly one subprocess, with no timeout and
    no retries.

    Example:
        >>> tool = CompilerTool.from_path("/usr/bin/g++")
        >>> CompilerVersionDetector().detect(tool)
        Version('13.2.0')
    """

    def detect(self, tool: CompilerTool) -> Version:
        """
        Detect compiler version.

        Args:
            tool: Compiler tool handle

        Returns:
            Parsed compiler version

        Raises:
            CommandFailedError: If the compiler could not be run
            VersionParseError: If the reported version is not numeric
            BannerFormatError: If the MSVC banner is not recognized
            UnknownCompilerError: If the tool family is not supported
        """
        if tool.is_like_gnu() or tool.is_like_clang():
            output = self._run(list(tool.to_command()) + [DUMPVERSION_FLAG]).stdout
            text = output.decode("utf-8", errors="replace")
            convention = DUMPVERSION_FLAG
        elif tool.is_like_msvc():
            output = self._run(list(MSVC_COMMAND)).stderr
            text = extract_msvc_version(output.decode("utf-8", errors="replace"))
            convention = "cl banner"
        else:
            raise UnknownCompilerError(tool)

        version = Version.parse(text.strip())
        logger.info(f"Detected version {version} ({convention})")
        return version

    def _run(self, command: List[str]) -> subprocess.CompletedProcess:
        """
        Run a version query command and capture its output.

        The exit status is not checked; cl.exe exits non-zero when invoked
        without sources even though it printed its banner.

        Raises:
            CommandFailedError: If the process could not be spawned or read
        """
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, check=False)
        except OSError as e:
            raise CommandFailedError(command, e) from e

        logger.debug(
            f"{command[0]} exited with {result.returncode}: "
            f"stdout={result.stdout[:200]!r} stderr={result.stderr[:200]!r}"
        )
        return result


def cc_version(tool: CompilerTool) -> Version:
    """
    Convenience function to detect a compiler version.

    Args:
        tool: Compiler tool handle

    Returns:
        Parsed compiler version

    Example:
        >>> version = cc_version(CompilerTool.from_path("clang++"))
        >>> if version >= Version.parse("16"):
        ...     flags.append("-std=c++23")
    """
    detector = CompilerVersionDetector()
    return detector.detect(tool)
