"""
Mock Host Implementation

In-memory video host for testing without the YouTube API.
Similar to MockStorage in the storage module.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import BinaryIO, Dict, List, Optional
from uuid import uuid4

from hosting.interfaces.video_host_interface import (
    NotFoundError,
    ProgressFunc,
    VideoHostInterface,
)
from hosting.models.hosted_item import ItemMetadata, Playlist, Video
from hosting.utils.validation_utils import check_read_only_fields

MOCK_WATCH_PREFIX = "https://mock.video.host/watch?v="


class MockHost(VideoHostInterface):
    """
    Mock video host for testing.

    Keeps videos and playlists in memory and applies the same read-only
    guard as the real hosts. Useful for:
    - Unit tests
    - Development without YouTube credentials
    """

    def __init__(
        self,
        duration_seconds: int = 0,
        chunk_size: int = 1024 * 1024,
        fail_with: Optional[Exception] = None,
    ):
        """
        Initialize mock host.

        Args:
            duration_seconds: Duration given to every created video
            chunk_size: Bytes per simulated chunk (one progress call each)
            fail_with: If set, create_video raises this error after reading the content

        Example:
            # Test error handling
            host = MockHost(fail_with=RequestError("quota", 403))
        """
        self.logger = logging.getLogger(__name__)
        self.duration_seconds = duration_seconds
        self.chunk_size = chunk_size
        self.fail_with = fail_with

        self.videos: Dict[str, Video] = {}
        self.playlists: Dict[str, Playlist] = {}
        self.playlist_items: Dict[str, List[str]] = {}
        self.thumbnails: Dict[str, bytes] = {}

        # Every call that changes hosted data, for test verification
        self.mutation_calls: List[str] = []

        self.logger.info("Mock Host initialized")

    @staticmethod
    def _new_id() -> str:
        return f"mock_{uuid4().hex[:11]}"

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc).replace(microsecond=0)

    # =========================================================================
    # VIDEOS
    # =========================================================================

    def create_video(
        self,
        meta: ItemMetadata,
        content: BinaryIO,
        on_progress: Optional[ProgressFunc] = None,
    ) -> Video:
        data = content.read()
        total = len(data)

        sent = 0
        while sent < total:
            sent = min(sent + self.chunk_size, total)
            if on_progress is not None:
                on_progress(sent, total)

        if self.fail_with is not None:
            raise self.fail_with

        self.mutation_calls.append("create_video")
        video = Video(
            id=self._new_id(),
            title=meta.title,
            description=meta.description,
            created_at=self._now(),
            duration_seconds=self.duration_seconds,
            visibility=meta.visibility,
            watch_prefix=MOCK_WATCH_PREFIX,
        )
        self.videos[video.id] = video

        self.logger.info(f"[MOCK] ✅ Upload successful: {video.id} ({total} bytes)")
        return replace(video)

    def retrieve_video(self, video_id: str) -> Video:
        if video_id not in self.videos:
            raise NotFoundError(f"video {video_id} not found")
        return replace(self.videos[video_id])

    def update_video(self, video_id: str, replacement: Video) -> Video:
        current = self.retrieve_video(video_id)
        check_read_only_fields(
            current.id, current.created_at, replacement.id, replacement.created_at
        )

        self.mutation_calls.append("update_video")
        self.videos[video_id] = replace(
            current,
            title=replacement.title,
            description=replacement.description,
            visibility=replacement.visibility,
        )
        return replace(self.videos[video_id])

    def delete_video(self, video_id: str) -> None:
        self.retrieve_video(video_id)
        self.mutation_calls.append("delete_video")
        del self.videos[video_id]

    def get_video_access_prefix(self) -> str:
        return MOCK_WATCH_PREFIX

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    def create_playlist(self, meta: ItemMetadata) -> Playlist:
        self.mutation_calls.append("create_playlist")
        playlist = Playlist(
            id=self._new_id(),
            item_count=0,
            title=meta.title,
            description=meta.description,
            created_at=self._now(),
            visibility=meta.visibility,
        )
        self.playlists[playlist.id] = playlist
        self.playlist_items[playlist.id] = []
        return replace(playlist)

    def retrieve_playlist(self, playlist_id: str) -> Playlist:
        if playlist_id not in self.playlists:
            raise NotFoundError(f"playlist {playlist_id} not found")
        return replace(
            self.playlists[playlist_id],
            item_count=len(self.playlist_items[playlist_id]),
        )

    def update_playlist(self, playlist_id: str, replacement: Playlist) -> Playlist:
        current = self.retrieve_playlist(playlist_id)
        check_read_only_fields(
            current.id, current.created_at, replacement.id, replacement.created_at
        )

        self.mutation_calls.append("update_playlist")
        self.playlists[playlist_id] = replace(
            current,
            title=replacement.title,
            description=replacement.description,
            visibility=replacement.visibility,
        )
        return self.retrieve_playlist(playlist_id)

    def delete_playlist(self, playlist_id: str) -> None:
        self.retrieve_playlist(playlist_id)
        self.mutation_calls.append("delete_playlist")
        del self.playlists[playlist_id]
        del self.playlist_items[playlist_id]

    # =========================================================================
    # UTILITIES
    # =========================================================================

    def add_video_to_playlist(self, video_id: str, playlist_id: str) -> None:
        self.retrieve_video(video_id)
        self.retrieve_playlist(playlist_id)
        self.mutation_calls.append("add_video_to_playlist")
        self.playlist_items[playlist_id].append(video_id)

    def set_thumbnail(self, video_id: str, content: BinaryIO) -> None:
        self.retrieve_video(video_id)
        self.mutation_calls.append("set_thumbnail")
        self.thumbnails[video_id] = content.read()
        self.videos[video_id].thumbnail_url = f"{MOCK_WATCH_PREFIX}{video_id}/thumbnail"
