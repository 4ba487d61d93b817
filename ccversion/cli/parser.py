"""
ccversion command-line interface.

    ccversion detect --compiler /usr/bin/g++-13 --minimum 11
    ccversion compare 19.16.27027.1 19.16
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import List, Optional

from .commands import compare, detect

try:
    __version__ = version("ccversion")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

COMMANDS = {
    "detect": detect.run,
    "compare": compare.run,
}

# --verbose shows logger names so detector debug output can be told apart
_LOG_FORMATS = {
    logging.DEBUG: "%(levelname)s [%(name)s] %(message)s",
    logging.INFO: "%(message)s",
    logging.ERROR: "%(levelname)s: %(message)s",
}


class CLI:
    """ccversion command-line interface."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="ccversion",
            description="Detect and compare C/C++ compiler versions",
        )
        parser.add_argument(
            "--version", action="version", version=f"ccversion {__version__}"
        )
        verbosity = parser.add_mutually_exclusive_group()
        verbosity.add_argument(
            "--verbose", "-v", action="store_true", help="Show debug output"
        )
        verbosity.add_argument(
            "--quiet", "-q", action="store_true", help="Show errors only"
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Configuration file (default: ./ccversion.yaml if present)",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

        detect_parser = subparsers.add_parser(
            "detect",
            help="Detect compiler version",
            description="Query a compiler for its version and print it",
        )
        detect_parser.add_argument(
            "--compiler",
            metavar="PATH",
            help="Compiler executable (e.g., /usr/bin/g++-13, clang++)",
        )
        detect_parser.add_argument(
            "--family",
            choices=["gnu", "clang", "msvc"],
            help="Compiler family [default: from executable name]",
        )
        detect_parser.add_argument(
            "--minimum",
            metavar="VERSION",
            help="Exit with status 1 if the compiler is older than VERSION",
        )
        detect_parser.add_argument(
            "--format", choices=["text", "json"], default="text", help="Output format"
        )

        compare_parser = subparsers.add_parser(
            "compare",
            help="Compare two versions",
            description="Compare two dotted versions (missing components count as 0)",
        )
        compare_parser.add_argument("first", metavar="A", help="First version")
        compare_parser.add_argument("second", metavar="B", help="Second version")

        return parser

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Parse arguments, set up logging and run the selected command.

        Returns:
            Exit code of the command, 1 without a command, 130 on Ctrl-C
        """
        parsed_args = self.parse_args(args)

        if parsed_args.verbose:
            level = logging.DEBUG
        elif parsed_args.quiet:
            level = logging.ERROR
        else:
            level = logging.INFO
        logging.basicConfig(level=level, format=_LOG_FORMATS[level], force=True)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130

    def _dispatch_command(self, args: argparse.Namespace) -> int:
        return COMMANDS[args.command](args)


def main():
    """Main entry point for CLI."""
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()
