"""
Pytest configuration and shared fixtures for ccversion tests.
"""

import subprocess
from typing import Callable

import pytest


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that invoke real compilers",
    )


def pytest_collection_modifyitems(config, items):
    """
    Skip integration tests unless --integration flag is provided.
    """
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


MSVC_BANNER = (
    "Microsoft(R) C/C++ Optimizing Compiler Version 19.16.27027.1 for x64\n"
    "Copyright (C) Microsoft Corporation.  All rights reserved.\n"
)


@pytest.fixture
def mock_compiler_output():
    """Raw bytes printed by each compiler family for its version query."""
    return {
        "gcc": b"11.2.0\n",
        "clang": b"18.1.8\n",
        "msvc": MSVC_BANNER.encode("utf-8"),
    }


@pytest.fixture
def completed_process() -> Callable[..., subprocess.CompletedProcess]:
    """Factory for subprocess.CompletedProcess results with bytes output."""

    def factory(
        args=None, returncode: int = 0, stdout: bytes = b"", stderr: bytes = b""
    ) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(
            args=args or [], returncode=returncode, stdout=stdout, stderr=stderr
        )

    return factory
