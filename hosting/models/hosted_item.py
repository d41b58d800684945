"""
Hosted Item Models

Provider-independent data classes for videos, playlists and the metadata
used to create them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from hosting.constants import Visibility


def _as_visibility(value) -> Visibility:
    """Coerce "public"/"private"/"unlisted" (or a Visibility) to Visibility"""
    if isinstance(value, Visibility):
        return value
    return Visibility(value)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as RFC3339 (UTC designator as "Z")"""
    return value.isoformat().replace("+00:00", "Z")


@dataclass
class ItemMetadata:
    """
    Metadata supplied when creating a video or a playlist.

    Input only: an ItemMetadata has no identity.
    Limits are checked by hosting.utils.validation_utils.validate_metadata.
    """

    title: str
    visibility: Visibility
    description: str = ""

    def __post_init__(self):
        self.visibility = _as_visibility(self.visibility)


@dataclass
class Video:
    """
    A video hosted on a video hosting platform.

    id, created_at and duration_seconds are read-only once the video exists.
    """

    id: str
    title: str
    description: str
    created_at: datetime
    duration_seconds: int
    visibility: Visibility
    thumbnail_url: str = ""
    # URL prefix to which the id is appended to watch the video
    watch_prefix: str = ""

    def __post_init__(self):
        self.visibility = _as_visibility(self.visibility)

    @property
    def watch_url(self) -> str:
        return f"{self.watch_prefix}{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (camelCase, as exposed by the API)"""
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": format_timestamp(self.created_at),
            "duration": self.duration_seconds,
            "visibility": self.visibility.value,
        }
        if self.thumbnail_url:
            data["thumbnailUrl"] = self.thumbnail_url
        return data


@dataclass
class Playlist:
    """
    A collection of videos on a video hosting platform.

    id, created_at and item_count are read-only from this service's point of view.
    """

    id: str
    item_count: int
    title: str
    description: str
    created_at: datetime
    visibility: Visibility
    thumbnail_url: str = ""

    def __post_init__(self):
        self.visibility = _as_visibility(self.visibility)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (camelCase, as exposed by the API)"""
        data = {
            "id": self.id,
            "itemCount": self.item_count,
            "title": self.title,
            "description": self.description,
            "createdAt": format_timestamp(self.created_at),
            "visibility": self.visibility.value,
        }
        if self.thumbnail_url:
            data["thumbnailUrl"] = self.thumbnail_url
        return data
