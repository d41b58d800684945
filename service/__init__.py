"""
Service Module

Uploads stored objects to a video host, with retry and progress reporting.

Public API:
    - VideoStoreService: Upload orchestrator
    - UploadError: Host failure during an upload
    - ServiceConfig: YAML configuration
    - create_video_store_service: Wiring from configuration

Usage:
    from service import create_video_store_service

    service = create_video_store_service()
    video = service.upload_video_from_storage("job-1", "match.mp4", metadata)
"""

from service.config import ServiceConfig
from service.controllers.video_store_service import (
    UploadError,
    UploadJob,
    VideoStoreService,
)
from service.factory import create_video_store_service
from service.progress_relay import ProgressRelay, SampleMailbox

__all__ = [
    "ProgressRelay",
    "SampleMailbox",
    "ServiceConfig",
    "UploadError",
    "UploadJob",
    "VideoStoreService",
    "create_video_store_service",
]
