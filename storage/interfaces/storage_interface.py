"""
Storage Buffer Interface

Abstract interface for the object store uploads are read from.
The upload service depends on this interface, not on a concrete backend.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageBufferInterface(ABC):
    """
    Abstract base class for object storage buffers.

    A buffer returns the full content of a previously stored object as a
    readable binary stream.

    Backends may be eventually consistent: an object written a moment ago
    can still be reported as missing. Callers must not treat a single
    failure as permanent.
    """

    @abstractmethod
    def buffer(self, key: str) -> BinaryIO:
        """
        Load the object identified by key into a readable stream.

        Args:
            key: Storage key of the object

        Returns:
            Binary stream positioned at the start of the content

        Raises:
            StorageError: If the object cannot be read (yet)

        Example:
            stream = storage.buffer("uploads/video-42.mp4")
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the storage backend can be reached.

        Returns:
            True if buffer() calls can be served
        """


class StorageError(Exception):
    """
    Custom exception for storage-related errors.

    Makes it easy to catch storage-specific errors:
        except StorageError as e:
            logger.error(f"Storage failed: {e}")
    """


class StorageUnavailableError(StorageError):
    """
    Raised when an object could not be buffered after every retry.

    The last underlying StorageError is chained as __cause__.
    """

    def __init__(self, key: str, attempts: int, message: str):
        super().__init__(message)
        self.key = key
        self.attempts = attempts
