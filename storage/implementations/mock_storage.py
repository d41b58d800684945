"""
Mock Storage Implementation

In-memory object store for testing without a filesystem.
Can simulate objects that only become readable after a few attempts.
"""

import io
import logging
from typing import BinaryIO, Dict, List

from storage.interfaces.storage_interface import StorageBufferInterface, StorageError


class MockStorage(StorageBufferInterface):
    """
    Mock object store for testing.

    Useful for:
    - Unit tests of the upload service
    - Simulating eventually-consistent backends (fail N times, then succeed)
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        # key -> content
        self._objects: Dict[str, bytes] = {}

        # key -> remaining failures before the object becomes visible
        self._pending_failures: Dict[str, int] = {}

        # Track buffer() calls for test verification
        self.buffer_calls: List[str] = []

        self.logger.info("[MOCK] Storage initialized (simulation mode)")

    def add_object(self, key: str, content: bytes, fail_times: int = 0) -> None:
        """
        Store an object.

        Args:
            key: Storage key
            content: Object content
            fail_times: Number of buffer() calls that fail before it is readable.
                Use -1 to fail forever.
        """
        self._objects[key] = content
        self._pending_failures[key] = fail_times
        self.logger.debug(f"[MOCK] Added object {key} (fail_times={fail_times})")

    def buffer(self, key: str) -> BinaryIO:
        self.buffer_calls.append(key)

        if key not in self._objects:
            raise StorageError(f"Object not found in store: {key}")

        remaining = self._pending_failures.get(key, 0)
        if remaining != 0:
            if remaining > 0:
                self._pending_failures[key] = remaining - 1
            raise StorageError(f"Object not yet available: {key}")

        return io.BytesIO(self._objects[key])

    def is_available(self) -> bool:
        """Mock storage is always available"""
        return True

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def attempts_for(self, key: str) -> int:
        """Number of buffer() calls made for key"""
        return self.buffer_calls.count(key)

    def clear_history(self) -> None:
        """Clear recorded buffer() calls"""
        self.buffer_calls.clear()
