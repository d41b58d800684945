"""
Video Host Interface

Abstract interface for video hosting platforms.
Follows Dependency Inversion Principle - the upload service depends on this
abstraction, not on the concrete YouTube API implementation.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Optional

from hosting.models.hosted_item import ItemMetadata, Playlist, Video

# Called with (bytes sent, total bytes) while a long operation runs
ProgressFunc = Callable[[int, int], None]


class VideoHostInterface(ABC):
    """
    Abstract base class for video hosting platforms.

    Any hosting implementation (YouTube, Vimeo, ...) must implement these
    methods. Errors returned by the platform are raised as RequestError
    when a status code is known.
    """

    # =========================================================================
    # VIDEOS
    # =========================================================================

    @abstractmethod
    def create_video(
        self,
        meta: ItemMetadata,
        content: BinaryIO,
        on_progress: Optional[ProgressFunc] = None,
    ) -> Video:
        """
        Upload a new video on the hosting platform.

        Args:
            meta: Title, description and visibility of the video
            content: Readable stream with the video content
            on_progress: Optional callback receiving (current, total) bytes.
                Must not block.

        Returns:
            The created Video, with its platform-assigned id and duration

        Example:
            with open("clip.mp4", "rb") as f:
                video = host.create_video(meta, f)
        """

    @abstractmethod
    def retrieve_video(self, video_id: str) -> Video:
        """
        Get an existing video by id.

        Raises:
            NotFoundError: If no video has this id
        """

    @abstractmethod
    def update_video(self, video_id: str, replacement: Video) -> Video:
        """
        Replace the mutable fields of a video.

        Only title, description and visibility are updated.
        id and created_at are READ-ONLY: a replacement changing them is
        rejected before the platform is called.

        Raises:
            NotFoundError: If no video has this id
            ValidationError: If replacement changes a read-only field
        """

    @abstractmethod
    def delete_video(self, video_id: str) -> None:
        """Delete a video from the hosting platform"""

    @abstractmethod
    def get_video_access_prefix(self) -> str:
        """
        URL prefix on which a video id can be appended to watch it.

        Example:
            url = host.get_video_access_prefix() + video.id
        """

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    @abstractmethod
    def create_playlist(self, meta: ItemMetadata) -> Playlist:
        """Create an empty playlist"""

    @abstractmethod
    def retrieve_playlist(self, playlist_id: str) -> Playlist:
        """
        Get an existing playlist by id.

        Raises:
            NotFoundError: If no playlist has this id
        """

    @abstractmethod
    def update_playlist(self, playlist_id: str, replacement: Playlist) -> Playlist:
        """
        Replace the mutable fields of a playlist.

        id and created_at are READ-ONLY, see update_video().
        """

    @abstractmethod
    def delete_playlist(self, playlist_id: str) -> None:
        """Delete a playlist from the hosting platform"""

    # =========================================================================
    # UTILITIES
    # =========================================================================

    @abstractmethod
    def add_video_to_playlist(self, video_id: str, playlist_id: str) -> None:
        """Append an existing video to an existing playlist"""

    @abstractmethod
    def set_thumbnail(self, video_id: str, content: BinaryIO) -> None:
        """
        Set the thumbnail of a video.

        Args:
            video_id: Video to update
            content: Readable stream with the image content
        """


class HostingError(Exception):
    """Base exception for hosting-related errors"""


class ValidationError(HostingError, ValueError):
    """
    Raised on invalid input, including attempts to change a read-only field.

    Never retried. No platform call is made for the rejected operation.
    """


class RequestError(HostingError):
    """
    A platform call failed with a known HTTP status code.

    The status code can be propagated as-is by an API layer.
    """

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(RequestError):
    """The requested item doesn't exist on the platform (HTTP 404)"""

    def __init__(self, message: str = "not found"):
        super().__init__(message, status_code=404)
