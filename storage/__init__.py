"""
Storage Module

Object storage buffer the upload service reads video content from.

Architecture mirrors the hosting module:
- interfaces/: Abstract base classes (contracts)
- implementations/: Concrete implementations (local directory and mock)
- utils/: Shared utilities
"""

from storage.factory import StorageFactory, create_storage
from storage.implementations.local_storage import LocalStorage
from storage.implementations.mock_storage import MockStorage
from storage.interfaces.storage_interface import (
    StorageBufferInterface,
    StorageError,
    StorageUnavailableError,
)

# Public API - what users import
__all__ = [
    "LocalStorage",
    "MockStorage",
    "StorageBufferInterface",
    "StorageError",
    "StorageFactory",
    "StorageUnavailableError",
    "create_storage",
]
