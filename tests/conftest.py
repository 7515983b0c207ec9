"""
Shared fixtures for the unit tests.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

PROJECTS_DIR = Path(__file__).parent / "test_projects"


@pytest.fixture
def projects_dir():
    """Directory holding sample source files."""
    return PROJECTS_DIR


@pytest.fixture
def mock_client():
    """LLM client that answers every prompt with the same docstring."""
    client = Mock()
    client.generate.return_value = "Generated documentation."
    return client
