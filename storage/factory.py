"""
Storage Factory

Factory pattern for creating storage buffer implementations.
Follows the same pattern as hosting/factory.py.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from storage.implementations.local_storage import LocalStorage
from storage.implementations.mock_storage import MockStorage
from storage.interfaces.storage_interface import StorageBufferInterface

# Type alias for better type hints
StorageMode = Literal["local", "mock"]


class StorageFactory:
    """
    Factory for creating storage buffer implementations.

    Usage:
        # Local directory (settings.OBJECT_STORE_PATH)
        storage = StorageFactory.create_storage()

        # Force mock mode (useful for testing)
        storage = StorageFactory.create_storage(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_storage(
        cls,
        mode: StorageMode = "local",
        base_path: Optional[Path] = None,
    ) -> StorageBufferInterface:
        """
        Create a storage buffer instance.

        Args:
            mode: "local" (directory backed) or "mock" (in memory)
            base_path: Root directory for local storage

        Returns:
            StorageBufferInterface implementation

        Raises:
            ValueError: If mode is unknown
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Storage (forced)")
            return MockStorage()

        if mode == "local":
            cls._logger.info("Creating Local Storage")
            return LocalStorage(base_path)

        raise ValueError(f"Unknown storage mode: {mode}")


def create_storage(
    force_mock: bool = False,
    base_path: Optional[Path] = None,
) -> StorageBufferInterface:
    """
    Quick storage creation with simple mock override.

    Example:
        storage = create_storage(force_mock=True)
    """
    mode = "mock" if force_mock else "local"
    return StorageFactory.create_storage(mode=mode, base_path=base_path)
