"""
Hosting Test Configuration and Fixtures

The YouTube API client is replaced by a MagicMock, so no test reaches
the network.
"""

from unittest.mock import MagicMock

import pytest

from hosting.implementations.mock_host import MockHost
from hosting.implementations.youtube_host import YouTubeHost


# =============================================================================
# HOST FIXTURES
# =============================================================================


@pytest.fixture
def youtube_service():
    """
    MagicMock standing in for googleapiclient's youtube resource.

    Usage:
        youtube_service.videos().list().execute.return_value = {...}
    """
    return MagicMock()


@pytest.fixture
def youtube_host(youtube_service):
    """YouTubeHost using the mocked API client (no authentication)"""
    return YouTubeHost(youtube_service=youtube_service, category_id="17")


@pytest.fixture
def mock_host():
    """Provide a fresh MockHost instance for each test"""
    return MockHost(duration_seconds=10, chunk_size=4)
