"""
Progress Module

Upload progress events and the publishers that broadcast them.

Public API:
    - ProgressPublisherInterface: Contract consumed by the upload service
    - ProgressState: InProgress / Done / Error
    - UploadProgress, UploadDone, UploadFailure: Event payloads
    - LoggingPublisher, MockPublisher: Implementations
"""

from progress.constants import ProgressState
from progress.implementations.logging_publisher import LoggingPublisher
from progress.implementations.mock_publisher import MockPublisher
from progress.interfaces.publisher_interface import (
    ProgressPublisherInterface,
    PublishError,
)
from progress.models.progress_event import (
    ProgressEvent,
    ProgressPayload,
    UploadDone,
    UploadFailure,
    UploadProgress,
)

__all__ = [
    "LoggingPublisher",
    "MockPublisher",
    "ProgressEvent",
    "ProgressPayload",
    "ProgressPublisherInterface",
    "ProgressState",
    "PublishError",
    "UploadDone",
    "UploadFailure",
    "UploadProgress",
]
