"""
Service Controllers

High-level coordinators built on top of hosting, storage and progress.
"""

from service.controllers.video_store_service import (
    UploadError,
    UploadJob,
    VideoStoreService,
)

__all__ = ["UploadError", "UploadJob", "VideoStoreService"]
