"""
Implementations Package

Concrete video host implementations.
"""

from hosting.implementations.mock_host import MockHost
from hosting.implementations.youtube_host import YouTubeHost

__all__ = [
    "MockHost",
    "YouTubeHost",
]
