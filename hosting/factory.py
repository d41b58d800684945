"""
Hosting Factory

Factory pattern for creating video host implementations.
One implementation per backend, selected by VideoHostBackend.

Automatically configures from environment variables.
"""

import logging
from typing import Optional, Union

from config import settings
from hosting.auth.oauth_manager import OAuthManager
from hosting.constants import VideoHostBackend
from hosting.implementations.mock_host import MockHost
from hosting.implementations.youtube_host import YouTubeHost
from hosting.interfaces.video_host_interface import VideoHostInterface


class HostFactory:
    """
    Factory for creating video host implementations.

    Reads configuration from environment variables (see config/settings.py):
    - YT_CLIENT_ID, YT_CLIENT_SECRET, YT_REFRESH_TOKEN: YouTube OAuth
    - YT_CATEGORY_ID: Category of uploaded videos

    Usage:
        host = HostFactory.create_host(VideoHostBackend.YOUTUBE)

        # Testing
        host = HostFactory.create_host(VideoHostBackend.MOCK)
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_host(
        cls,
        backend: Union[VideoHostBackend, str] = VideoHostBackend.YOUTUBE,
        category_id: Optional[str] = None,
    ) -> VideoHostInterface:
        """
        Create a video host instance.

        Args:
            backend: Hosting platform to use (enum member or its value)
            category_id: Override YT_CATEGORY_ID from environment

        Returns:
            VideoHostInterface implementation

        Raises:
            ValueError: If the backend has no implementation or
                YouTube credentials are missing
        """
        try:
            backend = VideoHostBackend(backend)
        except ValueError as e:
            raise ValueError(
                f'the provided host "{backend}" has no available implementation'
            ) from e

        if backend == VideoHostBackend.MOCK:
            cls._logger.info("Creating Mock Host")
            return MockHost()

        if backend == VideoHostBackend.YOUTUBE:
            cls._logger.info("Creating YouTube Host")
            return cls._create_youtube_host(category_id)

        raise ValueError(f'the provided host "{backend}" has no available implementation')

    @classmethod
    def _create_youtube_host(cls, category_id: Optional[str] = None) -> YouTubeHost:
        """
        Create YouTube host from environment configuration.

        Raises:
            ValueError: If required env vars missing
            RuntimeError: If the access token cannot be obtained
        """
        oauth_manager = OAuthManager(
            client_id=settings.YT_CLIENT_ID,
            client_secret=settings.YT_CLIENT_SECRET,
            refresh_token=settings.YT_REFRESH_TOKEN,
        )

        return YouTubeHost(
            oauth_manager=oauth_manager,
            category_id=category_id or settings.YT_CATEGORY_ID,
        )


# Convenience function for quick creation
def create_host(force_mock: bool = False) -> VideoHostInterface:
    """
    Quick host creation with simple mock override.

    Uses VIDEO_HOST_BACKEND from the environment unless force_mock is set.

    Example:
        host = create_host(force_mock=True)
    """
    backend = VideoHostBackend.MOCK if force_mock else settings.VIDEO_HOST_BACKEND
    return HostFactory.create_host(backend)
