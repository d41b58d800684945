"""
Hosting Module

Generic video hosting capability, with one implementation per platform.

Public API:
    - VideoHostInterface: Capability set every platform implements
    - Video, Playlist, ItemMetadata: Generic models
    - RequestError, NotFoundError, ValidationError: Error taxonomy
    - HostFactory / create_host: Backend selection

Usage:
    from hosting import HostFactory, VideoHostBackend

    host = HostFactory.create_host(VideoHostBackend.YOUTUBE)
    video = host.retrieve_video("dQw4w9WgXcQ")
"""

from hosting.constants import VideoHostBackend, Visibility
from hosting.factory import HostFactory, create_host
from hosting.interfaces.video_host_interface import (
    HostingError,
    NotFoundError,
    ProgressFunc,
    RequestError,
    ValidationError,
    VideoHostInterface,
)
from hosting.models.hosted_item import ItemMetadata, Playlist, Video

# Public API
__all__ = [
    "HostFactory",
    "HostingError",
    "ItemMetadata",
    "NotFoundError",
    "Playlist",
    "ProgressFunc",
    "RequestError",
    "ValidationError",
    "Video",
    "VideoHostBackend",
    "VideoHostInterface",
    "Visibility",
    "create_host",
]
