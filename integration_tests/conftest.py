"""
Pytest configuration and fixtures for integration tests.

The CLI is driven end to end against files in a temporary directory. The
LLM client is a Mock, so no model needs to be running.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import yaml

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from docgen.config_loader import ConfigLoader
from docgen.main import build_parser, run


@pytest.fixture
def config(tmp_path):
    """Configuration keeping cache, history and log inside tmp_path."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        "llm": {"rate_limit_calls_per_minute": 0},
        "generation": {"batch_delay_seconds": 0},
        "cache": {"file": str(tmp_path / "cache.json")},
        "history": {"file": str(tmp_path / "history.json")},
        "logging": {"file": str(tmp_path / "docgen.log")},
        "security": {"forbidden_paths": []},
    }), encoding="utf-8")
    return ConfigLoader(str(path))


@pytest.fixture
def llm():
    """Client answering with a fenced docstring, as local models often do."""
    client = Mock()
    client.generate.return_value = "```\nDoes the work.\n```"
    return client


@pytest.fixture
def cli(config, llm):
    """Run the CLI with the given arguments; returns the exit status."""
    def invoke(*argv):
        return run(build_parser().parse_args(list(argv)), config, client=llm)
    return invoke
