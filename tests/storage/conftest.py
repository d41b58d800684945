"""
Storage Test Configuration and Fixtures

Fixtures shared across storage tests.

To use pytest:
    pip install -e ".[test]"
    pytest tests/storage/
"""

import tempfile
from pathlib import Path

import pytest

from storage.implementations.local_storage import LocalStorage
from storage.implementations.mock_storage import MockStorage


# =============================================================================
# STORAGE FIXTURES
# =============================================================================


@pytest.fixture
def temp_store_dir():
    """
    Provide a temporary object store directory.

    Automatically cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def local_storage(temp_store_dir):
    """LocalStorage rooted in a temporary directory"""
    return LocalStorage(base_path=temp_store_dir)


@pytest.fixture
def mock_storage():
    """
    Provide a fresh MockStorage instance for each test.

    Usage:
        def test_something(mock_storage):
            mock_storage.add_object("a.mp4", b"data", fail_times=2)
    """
    return MockStorage()
