"""
Compiler tool handle.

A CompilerTool describes a compiler the caller has already located: the
executable to run and the family whose version-reporting convention it
follows. ccversion never searches for compilers itself.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# gcc, g++, cc, c++ with optional cross prefix and version suffix
# (x86_64-linux-gnu-g++-13, aarch64-none-elf-gcc)
_GNU_NAME_RE = re.compile(r"^(?:.+-)?(?:gcc|g\+\+|cc|c\+\+)(?:-\d+(?:\.\d+)*)?$")


class CompilerFamily(Enum):
    """Version-reporting conventions understood by the detector."""

    GNU = "gnu"
    CLANG = "clang"
    MSVC = "msvc"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "CompilerFamily":
        """
        Map a family name to a CompilerFamily.

        Accepts the canonical values plus common aliases
        ('gcc', 'llvm', 'cl'). Unrecognized names map to UNKNOWN.
        """
        aliases = {
            "gnu": cls.GNU,
            "gcc": cls.GNU,
            "clang": cls.CLANG,
            "llvm": cls.CLANG,
            "msvc": cls.MSVC,
            "cl": cls.MSVC,
        }
        return aliases.get(name.strip().lower(), cls.UNKNOWN)


def classify_executable(path: Union[str, Path]) -> CompilerFamily:
    """
    Classify a compiler executable by its file name.

    Args:
        path: Compiler executable path or bare name

    Returns:
        CompilerFamily for the name, UNKNOWN if it is not recognized

    Example:
        >>> classify_executable("/usr/bin/x86_64-linux-gnu-g++-13")
        <CompilerFamily.GNU: 'gnu'>
    """
    name = Path(path).name.lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]

    # clang-cl follows the MSVC driver conventions
    if name in ("cl", "clang-cl"):
        family = CompilerFamily.MSVC
    elif "clang" in name:
        family = CompilerFamily.CLANG
    elif _GNU_NAME_RE.match(name):
        family = CompilerFamily.GNU
    else:
        family = CompilerFamily.UNKNOWN

    logger.debug(f"Classified {path} as {family.value}")
    return family


@dataclass(frozen=True)
class CompilerTool:
    """
    Handle for an already located compiler.

    Attributes:
        path: Compiler executable (path or name resolvable through PATH)
        family: Version-reporting convention of the compiler
        args: Extra arguments always passed to the compiler
    """

    path: Path
    family: CompilerFamily = CompilerFamily.UNKNOWN
    args: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        family: Optional[CompilerFamily] = None,
        args: Optional[List[str]] = None,
    ) -> "CompilerTool":
        """
        Create a tool handle, classifying the family from the name if needed.

        Args:
            path: Compiler executable
            family: Explicit family, classified from the name when None
            args: Extra compiler arguments

        Returns:
            CompilerTool instance
        """
        if family is None:
            family = classify_executable(path)
        return cls(Path(path), family, tuple(args or ()))

    def is_like_gnu(self) -> bool:
        """Whether the tool follows the GNU -dumpversion convention."""
        return self.family is CompilerFamily.GNU

    def is_like_clang(self) -> bool:
        """Whether the tool is a Clang driver."""
        return self.family is CompilerFamily.CLANG

    def is_like_msvc(self) -> bool:
        """Whether the tool reports its version in the MSVC banner."""
        return self.family is CompilerFamily.MSVC

    def to_command(self) -> List[str]:
        """Return the argv prefix that invokes the compiler."""
        return [str(self.path), *self.args]

    def __str__(self) -> str:
        """String representation."""
        return f"{self.family.value} compiler at {self.path}"
