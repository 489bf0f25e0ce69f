"""Root-level pytest fixtures for GroveGrid test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture, plus helpers for writing CSV slices to disk.
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from grovegrid.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs.

    Examples
    --------
    >>> def test_strict(make_config):
    ...     config = make_config(STRICT=True)
    ...     assert config.reader.strict
    """
    def _make(**user_overrides):
        if user_overrides:
            return resolve_config(param_config, UserConfig(**user_overrides), None)
        return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def data_dir(temp_dir):
    d = temp_dir / "data"
    d.mkdir()
    return d


@pytest.fixture
def write_csv(data_dir):
    """Write a CSV file into data_dir and return its path."""
    def _write(name: str, text: str) -> Path:
        path = data_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_month_dir(write_csv, data_dir):
    """Two semicolon slices with different coordinates."""
    write_csv("a.csv", "X;Y;Value;Size\n1;1;0;10\n1;2;3.5;12\n")
    write_csv("b.csv", "X;Y;Value;Size\n2;1;-1;0\n2;2;7.2;15\n")
    return data_dir


@pytest.fixture
def run_config(make_config, two_month_dir, temp_dir):
    """Config pointing at two_month_dir with outputs under temp_dir/out."""
    return make_config(
        IN_DIR=str(two_month_dir),
        OUT_DIR=str(temp_dir / "out"),
        JSON_OUT=str(temp_dir / "out" / "data.json"),
    )
