"""
Video Store Service

High-level coordinator for uploads from object storage.
Retrieves the stored object (with retry), hands it to the video host,
and relays upload progress to a publisher.

Flow:
    validate metadata -> buffer object (retry with backoff)
    -> start progress sampler -> host.create_video(..., on_progress)
    -> terminal event (Done / Error) -> return Video or raise UploadError
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, BinaryIO, Callable, Dict, Optional

from hosting.interfaces.video_host_interface import (
    ProgressFunc,
    RequestError,
    VideoHostInterface,
)
from hosting.models.hosted_item import ItemMetadata, Video
from hosting.utils.validation_utils import validate_metadata
from progress.interfaces.publisher_interface import ProgressPublisherInterface
from service.constants import (
    BACKOFF_BASE_SECONDS,
    DEFAULT_OBJECT_STORE_MAX_RETRY,
    DEFAULT_PROGRESS_INTERVAL_SECONDS,
)
from service.progress_relay import ProgressRelay
from storage.interfaces.storage_interface import (
    StorageBufferInterface,
    StorageError,
    StorageUnavailableError,
)


@dataclass
class UploadJob:
    """One upload request"""

    job_id: str
    storage_key: str
    metadata: ItemMetadata
    created_at: datetime = field(default_factory=datetime.now)


class VideoStoreService:
    """
    Upload orchestrator.

    This class:
    - Buffers the stored object, retrying with exponential backoff
    - Creates the video on the configured host
    - Publishes progress (InProgress samples, then exactly one Done or Error)
    - Exposes the host for the other CRUD operations (service.host)

    Usage:
        service = VideoStoreService(host, storage, publisher)

        video = service.upload_video_from_storage(
            job_id="job-1",
            storage_key="uploads/match.mp4",
            metadata=ItemMetadata(title="Match", visibility=Visibility.PRIVATE),
        )
        print(video.watch_url)
    """

    def __init__(
        self,
        host: VideoHostInterface,
        storage: StorageBufferInterface,
        publisher: Optional[ProgressPublisherInterface] = None,
        max_retries: int = DEFAULT_OBJECT_STORE_MAX_RETRY,
        progress_interval: float = DEFAULT_PROGRESS_INTERVAL_SECONDS,
        sleep_func: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize video store service.

        Args:
            host: VideoHostInterface implementation
            storage: StorageBufferInterface implementation
            publisher: Progress publisher, or None to disable progress events
            max_retries: Retries after the first failed storage read
            progress_interval: Seconds between two progress samples
            sleep_func: Used for backoff waits (injectable for tests)
        """
        if max_retries < 0:
            raise ValueError(f"max_retries cannot be negative, got {max_retries}")

        if progress_interval <= 0:
            raise ValueError(
                f"progress_interval must be positive, got {progress_interval}"
            )

        self.logger = logging.getLogger(__name__)

        self.host = host
        self.storage = storage
        self.publisher = publisher
        self.max_retries = max_retries
        self.progress_interval = progress_interval
        self._sleep = sleep_func

        self.logger.info(
            f"Video Store Service initialized "
            f"(host: {type(host).__name__}, progress: "
            f"{'enabled' if publisher else 'disabled'})"
        )

    # =========================================================================
    # UPLOAD
    # =========================================================================

    def upload_video_from_storage(
        self,
        job_id: str,
        storage_key: str,
        metadata: Optional[ItemMetadata],
    ) -> Video:
        """
        Upload a stored object as a new video.

        Args:
            job_id: Caller-chosen id, keys every progress event
            storage_key: Object key in storage
            metadata: Title, description and visibility of the new video

        Returns:
            The created Video

        Raises:
            ValidationError: If metadata is missing or invalid (no I/O done)
            StorageUnavailableError: If the object could not be buffered
            UploadError: If the host failed to create the video
        """
        validate_metadata(metadata)

        job = UploadJob(job_id=job_id, storage_key=storage_key, metadata=metadata)
        self.logger.info(f"Starting upload job {job.job_id} ({job.storage_key})")

        content = self._buffer_with_retry(job.storage_key)

        if self.publisher is None:
            uploaded = self._create_video(job, content, on_progress=None)
            self._log_success(job, uploaded)
            return uploaded

        relay = ProgressRelay(job.job_id, self.publisher, self.progress_interval)
        relay.start()

        video: Optional[Video] = None
        error: Optional[BaseException] = None
        try:
            video = self._create_video(job, content, on_progress=relay.on_progress)
        except Exception as e:
            error = e
            raise
        finally:
            relay.finish(video=video, error=_underlying_error(error))

        self._log_success(job, video)
        return video

    def _create_video(
        self,
        job: UploadJob,
        content: BinaryIO,
        on_progress: Optional[ProgressFunc],
    ) -> Video:
        try:
            return self.host.create_video(job.metadata, content, on_progress=on_progress)
        except Exception as e:
            self.logger.error(f"❌ Upload job {job.job_id} failed: {e}")
            raise UploadError(
                f"error while uploading video : {e}",
                status_code=e.status_code if isinstance(e, RequestError) else None,
            ) from e

    def _log_success(self, job: UploadJob, video: Video) -> None:
        elapsed = (datetime.now() - job.created_at).total_seconds()
        self.logger.info(
            f"✅ Upload job {job.job_id} done: {video.id} "
            f"({video.duration_seconds}s video, {elapsed:.1f}s elapsed)"
        )

    # =========================================================================
    # OBJECT STORAGE
    # =========================================================================

    def _buffer_with_retry(self, key: str) -> BinaryIO:
        """
        Buffer an object, retrying on failure.

        Attempts 0..max_retries; attempt n is followed by a 2^n seconds
        wait unless it was the last one.

        Raises:
            StorageUnavailableError: After the last failed attempt
        """
        attempts = self.max_retries + 1
        last_error: Optional[StorageError] = None

        for attempt in range(attempts):
            try:
                return self.storage.buffer(key)
            except StorageError as e:
                last_error = e
                self.logger.warning(
                    f"error in attempt {attempt} at downloading the video "
                    f"from the object storage: {e}"
                )

            if attempt < self.max_retries:
                self._sleep(BACKOFF_BASE_SECONDS**attempt)

        raise StorageUnavailableError(
            key,
            attempts,
            f"error while downloading video from object storage : {last_error}",
        ) from last_error

    def set_video_thumbnail_from_storage(self, video_id: str, storage_key: str) -> None:
        """
        Set a video's thumbnail from a stored image.

        Single storage attempt, no retry.

        Raises:
            StorageError: If the image could not be buffered
            RequestError / NotFoundError: If the host rejected it
        """
        try:
            content = self.storage.buffer(storage_key)
        except StorageError as e:
            raise StorageError(
                f"error while downloading thumbnail from object storage : {e}"
            ) from e

        self.host.set_thumbnail(video_id, content)
        self.logger.info(f"✅ Thumbnail set for video {video_id} ({storage_key})")

    # =========================================================================
    # STATUS
    # =========================================================================

    def get_status(self) -> Dict[str, Any]:
        """
        Get current service status.

        Example:
            status = service.get_status()
            print(f"Host: {status['host_type']}")
        """
        return {
            "host_type": type(self.host).__name__,
            "storage_type": type(self.storage).__name__,
            "progress_enabled": self.publisher is not None,
            "progress_interval": self.progress_interval,
            "max_retries": self.max_retries,
        }


def _underlying_error(error: Optional[BaseException]) -> Optional[BaseException]:
    """The host's own error, not the UploadError wrapping it"""
    if isinstance(error, UploadError) and error.__cause__ is not None:
        return error.__cause__
    return error


class UploadError(Exception):
    """
    Exception raised when the host failed to create a video.

    Attributes:
        status_code: HTTP status of the host's RequestError, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
