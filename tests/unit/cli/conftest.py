"""Shared fixtures for CLI command tests.

Common fixtures available from parent conftest.py:
- cli_runner: Click CLI test runner
- temp_dir: Temporary directory for test files
- clean_env: Environment without WARNPARSE_ vars
- sample_config_yaml: Sample YAML config content
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

GCC_LOG = """\
gcc -Wall -c src/foo.c
src/foo.c:10:5: warning: unused variable 'x' [-Wunused-variable]
src/foo.c:12:1: error: expected ';' before '}' token
"""


@pytest.fixture
def workdir(clean_env: None, temp_dir: Path) -> Path:
    """Run the command in an empty directory without user configuration."""
    os.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def gcc_log(workdir: Path) -> Path:
    """Write a small GCC build log into the working directory."""
    path = workdir / "build.log"
    path.write_text(GCC_LOG)
    return path
