"""
Service Factory

Wires a VideoStoreService from its parts: the host selected by backend,
the storage buffer, and an optional progress publisher.
"""

import logging
from typing import Optional, Union

from hosting.constants import VideoHostBackend
from hosting.factory import HostFactory
from progress.implementations.logging_publisher import LoggingPublisher
from progress.interfaces.publisher_interface import ProgressPublisherInterface
from service.config import ServiceConfig
from service.controllers.video_store_service import VideoStoreService
from storage.factory import StorageFactory
from storage.interfaces.storage_interface import StorageBufferInterface

logger = logging.getLogger(__name__)


def create_video_store_service(
    backend: Union[VideoHostBackend, str, None] = None,
    storage: Optional[StorageBufferInterface] = None,
    publisher: Optional[ProgressPublisherInterface] = None,
    config: Optional[ServiceConfig] = None,
) -> VideoStoreService:
    """
    Create a video store service.

    Args:
        backend: Hosting platform (None = config.video_host_backend)
        storage: Storage buffer (None = local storage at config.object_store_path)
        publisher: Progress publisher (None = LoggingPublisher when
            config.progress_enabled, otherwise no progress events)
        config: Service configuration (None = load config/service.yaml)

    Returns:
        Configured VideoStoreService

    Raises:
        ValueError: If the backend has no implementation

    Example:
        service = create_video_store_service(VideoHostBackend.MOCK)
    """
    config = config or ServiceConfig()

    host = HostFactory.create_host(
        backend or config.video_host_backend,
        category_id=config.category_id or None,
    )

    if storage is None:
        storage = StorageFactory.create_storage(
            mode="local", base_path=config.object_store_path
        )

    if publisher is None and config.progress_enabled:
        publisher = LoggingPublisher(topic=config.progress_topic)

    logger.info(
        f"Creating video store service (backend: {type(host).__name__}, "
        f"storage: {type(storage).__name__})"
    )

    return VideoStoreService(
        host=host,
        storage=storage,
        publisher=publisher,
        max_retries=config.object_store_max_retry,
        progress_interval=config.progress_interval_seconds,
    )
