"""
Models Package

Progress event payloads and envelope.
"""

from progress.models.progress_event import (
    ProgressEvent,
    ProgressPayload,
    UploadDone,
    UploadFailure,
    UploadProgress,
)

__all__ = [
    "ProgressEvent",
    "ProgressPayload",
    "UploadDone",
    "UploadFailure",
    "UploadProgress",
]
