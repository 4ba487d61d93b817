"""
ccversion CLI module.

This module provides the command-line interface for ccversion.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
