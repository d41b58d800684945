"""
YouTube Host Implementation

Concrete implementation of VideoHostInterface for the YouTube Data API v3.
Translates between generic videos/playlists and YouTube resources.
"""

import logging
from typing import Any, BinaryIO, Dict, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from hosting.auth.oauth_manager import OAuthManager
from hosting.constants import (
    DEFAULT_CATEGORY_ID,
    DEFAULT_THUMBNAIL_MIMETYPE,
    DEFAULT_VIDEO_MIMETYPE,
    PLAYLIST_ITEM_PARTS,
    PLAYLIST_PARTS,
    UPLOAD_CHUNK_SIZE,
    VIDEO_INSERT_PARTS,
    VIDEO_LIST_PARTS,
    VIDEO_UPDATE_PARTS,
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
    YOUTUBE_WATCH_PREFIX,
)
from hosting.interfaces.video_host_interface import (
    HostingError,
    NotFoundError,
    ProgressFunc,
    RequestError,
    VideoHostInterface,
)
from hosting.models.hosted_item import ItemMetadata, Playlist, Video
from hosting.utils.conversion_utils import iso8601_duration_to_seconds, parse_rfc3339
from hosting.utils.validation_utils import check_read_only_fields

# YouTube resources are plain dicts as returned by google-api-python-client
YouTubeResource = Dict[str, Any]


class YouTubeHost(VideoHostInterface):
    """
    Video host backed by the YouTube Data API v3.

    Every API error is converted by handle_google_api_error() so callers
    only deal with RequestError/NotFoundError, or unclassified errors
    (network, deserialization) passed through untouched.
    """

    def __init__(
        self,
        oauth_manager: Optional[OAuthManager] = None,
        category_id: Optional[str] = None,
        youtube_service=None,
    ):
        """
        Initialize YouTube host.

        Args:
            oauth_manager: OAuth manager for authentication
            category_id: Category of uploaded videos (default: Entertainment)
            youtube_service: Prebuilt API client (tests); skips authentication

        Example:
            oauth = OAuthManager(client_id, client_secret, refresh_token)
            host = YouTubeHost(oauth)
        """
        self.logger = logging.getLogger(__name__)

        self.oauth_manager = oauth_manager
        self.category_id = category_id or DEFAULT_CATEGORY_ID
        self.youtube_service = youtube_service

        if self.youtube_service is None:
            if oauth_manager is None:
                raise ValueError("An OAuth manager is required to reach YouTube")
            self._initialize_service()

        self.logger.info(f"YouTube Host initialized (category: {self.category_id})")

    def _initialize_service(self) -> None:
        """
        Initialize YouTube API service with authenticated credentials.

        Raises:
            RuntimeError: If credentials cannot be obtained
        """
        credentials = self.oauth_manager.get_credentials()

        self.youtube_service = build(
            YOUTUBE_API_SERVICE_NAME,
            YOUTUBE_API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )

        self.logger.debug("YouTube API service initialized")

    # =========================================================================
    # VIDEOS
    # =========================================================================

    def create_video(
        self,
        meta: ItemMetadata,
        content: BinaryIO,
        on_progress: Optional[ProgressFunc] = None,
    ) -> Video:
        body = {
            "snippet": {
                "title": meta.title,
                "description": meta.description,
                "categoryId": self.category_id,
            },
            "status": {
                "privacyStatus": meta.visibility.value,
            },
        }

        # Chunked requests are what makes the client report progress
        media = MediaIoBaseUpload(
            content,
            mimetype=DEFAULT_VIDEO_MIMETYPE,
            chunksize=UPLOAD_CHUNK_SIZE,
            resumable=True,
        )

        self.logger.info(f"Starting upload: {meta.title}")

        try:
            request = self.youtube_service.videos().insert(
                part=VIDEO_INSERT_PARTS,
                body=body,
                media_body=media,
            )
            response = self._execute_upload(request, on_progress)
        except Exception as e:
            classified = handle_google_api_error(e)
            if classified is e:
                raise
            raise classified from e

        if not response or "id" not in response:
            raise HostingError("Upload completed but no video ID returned")

        # The insert response lacks fileDetails, a second call is required
        video = to_generic_video(self._get_youtube_video_by_id(response["id"]))

        self.logger.info(
            f"✅ Upload successful: {video.id} ({video.duration_seconds}s)",
        )
        return video

    def _execute_upload(self, request, on_progress: Optional[ProgressFunc]):
        """
        Send the upload chunk by chunk, reporting progress after each one.

        Returns:
            The inserted YouTube video resource
        """
        response = None
        while response is None:
            status, response = request.next_chunk()
            if status is not None and on_progress is not None:
                on_progress(status.resumable_progress, status.total_size)
        return response

    def retrieve_video(self, video_id: str) -> Video:
        return to_generic_video(self._get_youtube_video_by_id(video_id))

    def update_video(self, video_id: str, replacement: Video) -> Video:
        current = self._get_youtube_video_by_id(video_id)

        # Raises before any call is made if a read-only attribute changed
        patch_youtube_video(current, replacement)

        body = {
            "id": current["id"],
            "snippet": current["snippet"],
            "status": current["status"],
        }
        updated = self._execute(
            self.youtube_service.videos().update(part=VIDEO_UPDATE_PARTS, body=body)
        )

        self.logger.info(f"Video {video_id} updated")

        # The update response only carries the updated parts
        return to_generic_video({**current, **updated})

    def delete_video(self, video_id: str) -> None:
        self._execute(self.youtube_service.videos().delete(id=video_id))
        self.logger.info(f"Video {video_id} deleted")

    def get_video_access_prefix(self) -> str:
        return YOUTUBE_WATCH_PREFIX

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    def create_playlist(self, meta: ItemMetadata) -> Playlist:
        body = {
            "snippet": {
                "title": meta.title,
                "description": meta.description,
            },
            "status": {
                "privacyStatus": meta.visibility.value,
            },
        }
        created = self._execute(
            self.youtube_service.playlists().insert(part=PLAYLIST_PARTS, body=body)
        )

        self.logger.info(f"Playlist {created.get('id')} created")
        return to_generic_playlist(created)

    def retrieve_playlist(self, playlist_id: str) -> Playlist:
        return to_generic_playlist(self._get_youtube_playlist_by_id(playlist_id))

    def update_playlist(self, playlist_id: str, replacement: Playlist) -> Playlist:
        current = self._get_youtube_playlist_by_id(playlist_id)

        patch_youtube_playlist(current, replacement)

        body = {
            "id": current["id"],
            "snippet": current["snippet"],
            "status": current["status"],
        }
        updated = self._execute(
            self.youtube_service.playlists().update(part=PLAYLIST_PARTS, body=body)
        )

        self.logger.info(f"Playlist {playlist_id} updated")
        return to_generic_playlist({**current, **updated})

    def delete_playlist(self, playlist_id: str) -> None:
        self._execute(self.youtube_service.playlists().delete(id=playlist_id))
        self.logger.info(f"Playlist {playlist_id} deleted")

    # =========================================================================
    # UTILITIES
    # =========================================================================

    def add_video_to_playlist(self, video_id: str, playlist_id: str) -> None:
        self._execute(
            self.youtube_service.playlistItems().insert(
                part=PLAYLIST_ITEM_PARTS,
                body={
                    "snippet": {
                        "playlistId": playlist_id,
                        "resourceId": {
                            "kind": "youtube#video",
                            "videoId": video_id,
                        },
                    },
                },
            )
        )
        self.logger.info(f"Added video {video_id} to playlist {playlist_id}")

    def set_thumbnail(self, video_id: str, content: BinaryIO) -> None:
        media = MediaIoBaseUpload(content, mimetype=DEFAULT_THUMBNAIL_MIMETYPE)
        self._execute(
            self.youtube_service.thumbnails().set(videoId=video_id, media_body=media)
        )
        self.logger.info(f"Thumbnail set for video {video_id}")

    # =========================================================================
    # API HELPERS
    # =========================================================================

    def _execute(self, request) -> YouTubeResource:
        """Execute an API request, classifying its errors"""
        try:
            return request.execute()
        except Exception as e:
            classified = handle_google_api_error(e)
            if classified is e:
                raise
            raise classified from e

    def _get_youtube_video_by_id(self, video_id: str) -> YouTubeResource:
        """
        Retrieve a YouTube video resource.

        Raises:
            NotFoundError: If the list call returns no item
        """
        response = self._execute(
            self.youtube_service.videos().list(part=VIDEO_LIST_PARTS, id=video_id)
        )
        items = response.get("items") or []
        if not items:
            raise NotFoundError(f"video {video_id} not found")
        return items[0]

    def _get_youtube_playlist_by_id(self, playlist_id: str) -> YouTubeResource:
        """
        Retrieve a YouTube playlist resource.

        Raises:
            NotFoundError: If the list call returns no item
        """
        response = self._execute(
            self.youtube_service.playlists().list(part=PLAYLIST_PARTS, id=playlist_id)
        )
        items = response.get("items") or []
        if not items:
            raise NotFoundError(f"playlist {playlist_id} not found")
        return items[0]


# =============================================================================
# ERROR CLASSIFICATION
# =============================================================================


def handle_google_api_error(error: Exception) -> Exception:
    """
    Map an error raised by the Google client to our error types.

    - HttpError: RequestError with the HTTP status (NotFoundError for 404)
    - Any error mentioning "not found": NotFoundError, even without a status
    - Anything else (network, deserialization): returned unchanged

    Returns:
        The exception to raise
    """
    if isinstance(error, HostingError):
        return error

    if isinstance(error, HttpError):
        status = int(error.resp.status)
        message = f"YouTube API error: {error.reason}"
        if status == 404:
            return NotFoundError(message)
        return RequestError(message, status_code=status)

    if "not found" in str(error).lower():
        return NotFoundError(str(error))

    return error


# =============================================================================
# TRANSLATION
# =============================================================================


def _default_thumbnail_url(snippet: YouTubeResource) -> str:
    thumbnails = snippet.get("thumbnails") or {}
    default = thumbnails.get("default") or {}
    return default.get("url", "")


def _video_duration_seconds(resource: YouTubeResource) -> int:
    """
    Duration of a YouTube video in seconds.

    fileDetails comes from the uploaded file itself and is set right after
    upload, while contentDetails is only filled once YouTube has processed
    the video. Prefer the former, fall back to the latter, then to 0.
    """
    file_details = resource.get("fileDetails") or {}
    if file_details.get("durationMs") is not None:
        return int(file_details["durationMs"]) // 1000

    content_details = resource.get("contentDetails") or {}
    if content_details.get("duration"):
        return iso8601_duration_to_seconds(content_details["duration"])

    return 0


def to_generic_video(resource: YouTubeResource) -> Video:
    """
    Convert a YouTube video resource into a generic Video.

    The resource must contain the "snippet" and "status" parts.

    Raises:
        ValueError: If a required part is missing or a field can't be parsed
    """
    snippet = resource.get("snippet")
    status = resource.get("status")
    if snippet is None or status is None:
        raise ValueError("Missing some required parts (snippet or status)")

    return Video(
        id=resource.get("id", ""),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        created_at=parse_rfc3339(snippet.get("publishedAt", "")),
        duration_seconds=_video_duration_seconds(resource),
        visibility=status.get("privacyStatus"),
        thumbnail_url=_default_thumbnail_url(snippet),
        watch_prefix=YOUTUBE_WATCH_PREFIX,
    )


def to_generic_playlist(resource: YouTubeResource) -> Playlist:
    """
    Convert a YouTube playlist resource into a generic Playlist.

    The resource must contain the "snippet", "contentDetails" and "status" parts.

    Raises:
        ValueError: If a required part is missing or a field can't be parsed
    """
    snippet = resource.get("snippet")
    status = resource.get("status")
    content_details = resource.get("contentDetails")
    if snippet is None or status is None or content_details is None:
        raise ValueError(
            "Missing some required parts (snippet, contentDetails or status)"
        )

    return Playlist(
        id=resource.get("id", ""),
        item_count=int(content_details.get("itemCount", 0)),
        title=snippet.get("title", ""),
        description=snippet.get("description", ""),
        created_at=parse_rfc3339(snippet.get("publishedAt", "")),
        visibility=status.get("privacyStatus"),
        thumbnail_url=_default_thumbnail_url(snippet),
    )


# =============================================================================
# PATCHING
# =============================================================================


def patch_youtube_video(src: YouTubeResource, patch: Video) -> None:
    """
    Update src in place with the mutable fields of patch.

    Raises:
        ValidationError: If patch changes "id" or "createdAt"
    """
    check_read_only_fields(
        src.get("id"),
        parse_rfc3339(src["snippet"]["publishedAt"]),
        patch.id,
        patch.created_at,
    )

    src["snippet"]["title"] = patch.title
    src["snippet"]["description"] = patch.description
    src["status"]["privacyStatus"] = patch.visibility.value


def patch_youtube_playlist(src: YouTubeResource, patch: Playlist) -> None:
    """
    Update src in place with the mutable fields of patch.

    Raises:
        ValidationError: If patch changes "id" or "createdAt"
    """
    check_read_only_fields(
        src.get("id"),
        parse_rfc3339(src["snippet"]["publishedAt"]),
        patch.id,
        patch.created_at,
    )

    src["snippet"]["title"] = patch.title
    src["snippet"]["description"] = patch.description
    src["status"]["privacyStatus"] = patch.visibility.value
