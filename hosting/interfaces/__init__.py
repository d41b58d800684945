"""
Interfaces Package

Abstract interfaces for video hosting implementations.
"""

from hosting.interfaces.video_host_interface import (
    HostingError,
    NotFoundError,
    ProgressFunc,
    RequestError,
    ValidationError,
    VideoHostInterface,
)

__all__ = [
    "HostingError",
    "NotFoundError",
    "ProgressFunc",
    "RequestError",
    "ValidationError",
    "VideoHostInterface",
]
