"""
Compare command implementation.

Compares two dotted versions the same way detected compiler versions
are compared.
"""

import logging

from ccversion.core.exceptions import VersionParseError
from ccversion.version import Version

logger = logging.getLogger(__name__)

_OPERATORS = {-1: "<", 0: "==", 1: ">"}


def run(args) -> int:
    """
    Run the compare command.

    Args:
        args: Parsed command-line arguments (first, second)

    Returns:
        Exit code (0 for success, 1 if a version is invalid)
    """
    try:
        first = Version.parse(args.first.strip())
        second = Version.parse(args.second.strip())
    except VersionParseError as e:
        logger.error(f"Error: {e}")
        return 1

    print(f"{first} {_OPERATORS[first.compare(second)]} {second}")
    return 0
