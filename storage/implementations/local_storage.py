"""
Local Storage Implementation

Concrete implementation of StorageBufferInterface backed by a local directory.
Each storage key maps to a file below the base directory.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional

from config import settings
from storage.interfaces.storage_interface import StorageBufferInterface, StorageError
from storage.utils.path_utils import resolve_object_path


class LocalStorage(StorageBufferInterface):
    """
    Local filesystem object store.

    Objects are read fully into memory so the caller gets a seekable
    stream that stays valid even if the file is replaced afterwards.
    """

    def __init__(self, base_path: Optional[Path] = None, create: bool = True):
        """
        Initialize local storage.

        Args:
            base_path: Root directory of the store (None = settings.OBJECT_STORE_PATH)
            create: Create the directory if it doesn't exist

        Raises:
            StorageError: If the directory cannot be created
        """
        self.logger = logging.getLogger(__name__)
        self.base_path = Path(base_path or settings.OBJECT_STORE_PATH)

        if create:
            try:
                self.base_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(
                    f"Cannot create object store directory {self.base_path}: {e}"
                ) from e

        self.logger.info(f"Local storage initialized (base: {self.base_path})")

    def buffer(self, key: str) -> BinaryIO:
        path = resolve_object_path(self.base_path, key)

        if not path.is_file():
            raise StorageError(f"Object not found in store: {key}")

        try:
            content = path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read object {key}: {e}") from e

        self.logger.debug(f"Buffered {key} ({len(content)} bytes)")
        return io.BytesIO(content)

    def is_available(self) -> bool:
        return self.base_path.is_dir()

    def __repr__(self) -> str:
        return f"LocalStorage(base_path={self.base_path})"
