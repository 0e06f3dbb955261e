"""Pytest fixtures for rrutils tests."""

import json

import pytest

# Add parent directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rrutils.core.config_loader import ConfigAggregator, reset_config


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Each test starts without a memoized configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def package_file(tmp_path):
    """Create a minimal pyproject.toml to act as package metadata."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo-service"\nversion = "2.3.4"\n')
    return path


@pytest.fixture
def config_dir(tmp_path):
    """Create a config directory with a JSON file, a Python module and a stray README."""
    directory = tmp_path / "config"
    directory.mkdir()
    (directory / "a.json").write_text(json.dumps({"x": 1}))
    (directory / "b.py").write_text('config = {"y": 2}\n')
    (directory / "README.md").write_text("# not config\n")
    return directory


@pytest.fixture
def aggregator(package_file):
    """Create an aggregator whose metadata comes from the temporary pyproject.toml."""
    return ConfigAggregator(package_file=package_file)
