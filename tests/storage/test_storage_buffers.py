"""
Storage Buffer Tests

Tests cover:
1. LocalStorage reads objects below its base directory
2. LocalStorage refuses keys escaping the store
3. MockStorage simulates objects that become available late
4. Factory creates correct implementations
"""

import pytest

from storage import StorageFactory, create_storage
from storage.implementations.local_storage import LocalStorage
from storage.implementations.mock_storage import MockStorage
from storage.interfaces.storage_interface import StorageError, StorageUnavailableError
from storage.utils.path_utils import resolve_object_path


# =============================================================================
# LOCAL STORAGE TESTS
# =============================================================================


class TestLocalStorage:
    """Test directory backed storage"""

    def test_buffer_returns_object_content(self, local_storage, temp_store_dir):
        """buffer() returns a stream with the stored bytes"""
        (temp_store_dir / "match.mp4").write_bytes(b"video-bytes")

        stream = local_storage.buffer("match.mp4")

        assert stream.read() == b"video-bytes"

    def test_buffer_nested_key(self, local_storage, temp_store_dir):
        """Keys containing "/" map to subdirectories"""
        (temp_store_dir / "uploads").mkdir()
        (temp_store_dir / "uploads" / "a.mp4").write_bytes(b"a")

        assert local_storage.buffer("uploads/a.mp4").read() == b"a"

    def test_buffer_missing_object_raises(self, local_storage):
        """Missing object raises StorageError"""
        with pytest.raises(StorageError, match="not found"):
            local_storage.buffer("missing.mp4")

    def test_buffer_key_escaping_store_raises(self, local_storage):
        """Keys resolving outside the base directory are rejected"""
        with pytest.raises(StorageError, match="escapes"):
            local_storage.buffer("../outside.mp4")

    def test_buffer_is_independent_of_file(self, local_storage, temp_store_dir):
        """The returned stream doesn't change when the file is replaced"""
        path = temp_store_dir / "a.mp4"
        path.write_bytes(b"first")

        stream = local_storage.buffer("a.mp4")
        path.write_bytes(b"second")

        assert stream.read() == b"first"

    def test_creates_base_directory(self, temp_store_dir):
        """Base directory is created when missing"""
        base = temp_store_dir / "store"

        storage = LocalStorage(base_path=base)

        assert base.is_dir()
        assert storage.is_available() is True

    def test_not_available_without_directory(self, temp_store_dir):
        """create=False leaves a missing directory missing"""
        storage = LocalStorage(base_path=temp_store_dir / "nope", create=False)

        assert storage.is_available() is False

    def test_base_path_that_is_a_file_raises(self, temp_store_dir):
        """A file where the store directory should be is a storage error"""
        file_path = temp_store_dir / "file"
        file_path.write_text("x")

        with pytest.raises(StorageError, match="Cannot create object store directory"):
            LocalStorage(base_path=file_path)


# =============================================================================
# MOCK STORAGE TESTS
# =============================================================================


class TestMockStorage:
    """Test in-memory storage"""

    def test_buffer_returns_content(self, mock_storage):
        mock_storage.add_object("a.mp4", b"data")

        assert mock_storage.buffer("a.mp4").read() == b"data"

    def test_fails_requested_number_of_times(self, mock_storage):
        """Object becomes readable after fail_times attempts"""
        mock_storage.add_object("a.mp4", b"data", fail_times=2)

        with pytest.raises(StorageError):
            mock_storage.buffer("a.mp4")
        with pytest.raises(StorageError):
            mock_storage.buffer("a.mp4")

        assert mock_storage.buffer("a.mp4").read() == b"data"
        assert mock_storage.attempts_for("a.mp4") == 3

    def test_fail_forever(self, mock_storage):
        mock_storage.add_object("a.mp4", b"data", fail_times=-1)

        for _ in range(5):
            with pytest.raises(StorageError):
                mock_storage.buffer("a.mp4")

    def test_unknown_key_raises(self, mock_storage):
        with pytest.raises(StorageError):
            mock_storage.buffer("missing.mp4")

        assert mock_storage.buffer_calls == ["missing.mp4"]

    def test_clear_history(self, mock_storage):
        mock_storage.add_object("a.mp4", b"data")
        mock_storage.buffer("a.mp4")

        mock_storage.clear_history()

        assert mock_storage.attempts_for("a.mp4") == 0


# =============================================================================
# PATH UTILS TESTS
# =============================================================================


class TestPathUtils:
    """Test key to path mapping"""

    def test_resolve_inside_store(self, temp_store_dir):
        path = resolve_object_path(temp_store_dir, "videos/a.mp4")

        assert path == (temp_store_dir / "videos" / "a.mp4").resolve()

    def test_leading_slash_stays_inside_store(self, temp_store_dir):
        path = resolve_object_path(temp_store_dir, "/a.mp4")

        assert path == (temp_store_dir / "a.mp4").resolve()

    @pytest.mark.parametrize("key", ["", "   "])
    def test_empty_key_rejected(self, temp_store_dir, key):
        with pytest.raises(StorageError, match="Empty"):
            resolve_object_path(temp_store_dir, key)


# =============================================================================
# ERROR TESTS
# =============================================================================


class TestStorageErrors:
    def test_unavailable_error_is_storage_error(self):
        error = StorageUnavailableError("a.mp4", 3, "gone")

        assert isinstance(error, StorageError)
        assert error.key == "a.mp4"
        assert error.attempts == 3
        assert str(error) == "gone"


# =============================================================================
# FACTORY TESTS
# =============================================================================


class TestStorageFactory:
    """Test storage factory"""

    def test_create_mock(self):
        assert isinstance(StorageFactory.create_storage(mode="mock"), MockStorage)

    def test_create_local(self, temp_store_dir):
        storage = StorageFactory.create_storage(mode="local", base_path=temp_store_dir)

        assert isinstance(storage, LocalStorage)
        assert storage.base_path == temp_store_dir

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError, match="Unknown storage mode"):
            StorageFactory.create_storage(mode="s3")

    def test_convenience_force_mock(self):
        assert isinstance(create_storage(force_mock=True), MockStorage)
