"""
Pytest configuration for the termedit test suite.

This conftest.py provides:
- Quiet logging (suppresses console output)
- An isolated .termedit/ home and working directory per test
- Sample config documents and files
"""

from pathlib import Path

import pytest

from termedit.cli.config import CLIConfig
from termedit.logging_config import setup_logging
from termedit.paths import reset_paths
from termedit.user_config import reset_user_config


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging(monkeypatch):
    """
    Suppress console logs for clean test output.

    TERMEDIT_QUIET keeps the CLI callback from re-enabling the console sink.
    """
    monkeypatch.setenv("TERMEDIT_QUIET", "1")
    setup_logging(level="DEBUG", suppress_console=True)


# ============================================================================
# ISOLATION FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """
    Point global and local config lookups at a fresh temp directory.

    Returns:
        The temporary working directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("TERMEDIT_HOME", str(home))
    monkeypatch.delenv("TERMEDIT_PLAIN", raising=False)
    monkeypatch.chdir(tmp_path)

    reset_paths()
    reset_user_config()
    CLIConfig.reset()
    yield tmp_path
    reset_paths()
    reset_user_config()
    CLIConfig.reset()


# ============================================================================
# SAMPLE DOCUMENTS
# ============================================================================

SAMPLE_CONFIG = """\
%% Release configuration
{kernel, [
    {logger_level, info},   % default level
    {inet_dist_listen_min, 9100}
]}.
{myapp, [
    {port, 8080},
    {host, "localhost"},
    {listeners, [
        {"127.0.0.1", 9090}
    ]},
    {servers, []}
]}.
"""

NESTED_CONFIG = "{outer, {inner, {42}}}.\n"

HTTP_CONFIG = """\
{http, [
    {"10.0.0.1", 80},
    {"10.0.0.2", 81},
    {"10.0.0.3", 82}
]}.
"""


@pytest.fixture
def sample_text():
    return SAMPLE_CONFIG


@pytest.fixture
def http_text():
    return HTTP_CONFIG


@pytest.fixture
def sample_file(tmp_path):
    """
    Write SAMPLE_CONFIG to a file.

    Returns:
        Path to sys.config in the temp directory
    """
    path = tmp_path / "sys.config"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path
