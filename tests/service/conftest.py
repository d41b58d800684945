"""
Service Test Configuration and Fixtures

Every collaborator of the video store service is mocked: storage in
memory, host in memory, publisher recording events. Backoff waits are
recorded instead of slept.
"""

import pytest

from hosting.constants import Visibility
from hosting.implementations.mock_host import MockHost
from hosting.models.hosted_item import ItemMetadata
from progress.implementations.mock_publisher import MockPublisher
from service.controllers.video_store_service import VideoStoreService
from storage.implementations.mock_storage import MockStorage

# Short enough to keep tests fast, long enough to let several ticks happen
TEST_PROGRESS_INTERVAL = 0.01


class SleepRecorder:
    """Stands in for time.sleep"""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def sleeps():
    return SleepRecorder()


@pytest.fixture
def storage():
    storage = MockStorage()
    storage.add_object("key-1", b"0" * 64)
    return storage


@pytest.fixture
def host():
    return MockHost(duration_seconds=10, chunk_size=8)


@pytest.fixture
def publisher():
    return MockPublisher()


@pytest.fixture
def metadata():
    return ItemMetadata(title="Match", visibility=Visibility.PRIVATE)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def make_service(host, storage, sleeps):
    """
    Build a service with the shared mocks.

    Usage:
        def test_something(make_service, publisher):
            service = make_service(publisher=publisher, max_retries=2)
    """

    def _make(publisher=None, max_retries=10, **overrides):
        params = {
            "host": host,
            "storage": storage,
            "publisher": publisher,
            "max_retries": max_retries,
            "progress_interval": TEST_PROGRESS_INTERVAL,
            "sleep_func": sleeps,
        }
        params.update(overrides)
        return VideoStoreService(**params)

    return _make
