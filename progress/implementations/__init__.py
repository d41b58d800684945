"""
Implementations Package

Concrete progress publishers.
"""

from progress.implementations.logging_publisher import LoggingPublisher
from progress.implementations.mock_publisher import MockPublisher

__all__ = [
    "LoggingPublisher",
    "MockPublisher",
]
