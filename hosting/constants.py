"""
Hosting Constants

Centralized configuration for the video hosting module.
"""

from enum import Enum

# =============================================================================
# YOUTUBE API CONFIGURATION
# =============================================================================

# OAuth 2.0 scopes required for YouTube operations
# https://developers.google.com/youtube/v3/guides/authentication
YOUTUBE_SCOPES = [
    "https://www.googleapis.com/auth/youtube",
    "https://www.googleapis.com/auth/youtube.upload",
]

# Google OAuth token endpoint used to refresh access tokens
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

# YouTube API service details
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"

# Prefix on which a video ID can be appended to watch it
YOUTUBE_WATCH_PREFIX = "https://www.youtube.com/watch?v="

# Category applied to uploads when none is configured (24 = Entertainment)
# https://developers.google.com/youtube/v3/docs/videoCategories
DEFAULT_CATEGORY_ID = "24"

# Resource parts requested for each kind of call
VIDEO_INSERT_PARTS = "snippet,status"
VIDEO_LIST_PARTS = "contentDetails,id,snippet,status,fileDetails"
VIDEO_UPDATE_PARTS = "snippet,status"
PLAYLIST_PARTS = "snippet,status,contentDetails"
PLAYLIST_ITEM_PARTS = "snippet"

# Chunk size used to drive upload progress callbacks (must be a multiple of 256 KB)
UPLOAD_CHUNK_SIZE = 10 * 1024 * 1024  # 10 MB

DEFAULT_VIDEO_MIMETYPE = "application/octet-stream"
DEFAULT_THUMBNAIL_MIMETYPE = "image/jpeg"

# =============================================================================
# METADATA LIMITS
# =============================================================================

# Taken from the YouTube docs (https://developers.google.com/youtube/v3/docs/videos#properties)
MAX_TITLE_CHARS = 100

# YouTube allows 5000 bytes; we keep a stricter limit common to all backends
MAX_DESCRIPTION_BYTES = 1000

# =============================================================================
# ENUMS
# =============================================================================


class Visibility(Enum):
    """Who can see a hosted item"""

    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


class VideoHostBackend(Enum):
    """Available video hosting platforms"""

    YOUTUBE = "youtube"
    MOCK = "mock"
