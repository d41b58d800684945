"""
Path Utilities

Helper functions for mapping storage keys onto the filesystem.
"""

import logging
from pathlib import Path

from storage.interfaces.storage_interface import StorageError

logger = logging.getLogger(__name__)


def resolve_object_path(base_path: Path, key: str) -> Path:
    """
    Resolve a storage key to a path inside the base directory.

    Args:
        base_path: Root directory of the object store
        key: Storage key (relative, "/" separated)

    Returns:
        Absolute path of the object

    Raises:
        StorageError: If the key is empty or escapes base_path

    Example:
        resolve_object_path(Path("/data/objects"), "videos/a.mp4")
        # Returns: Path("/data/objects/videos/a.mp4")
    """
    if not key or not key.strip():
        raise StorageError("Empty storage key")

    root = Path(base_path).resolve()
    candidate = (root / key.lstrip("/")).resolve()

    if candidate != root and root not in candidate.parents:
        logger.warning(f"Rejected storage key outside of store: {key}")
        raise StorageError(f"Storage key escapes the object store: {key}")

    return candidate
