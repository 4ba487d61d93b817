"""
Entry point for running the ccversion CLI as a module.

Usage: python -m ccversion [command] [options]
"""

from ccversion.cli.parser import main

if __name__ == "__main__":
    main()
