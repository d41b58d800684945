"""
Interfaces Package

Abstract interface for progress publishers.
"""

from progress.interfaces.publisher_interface import (
    ProgressPublisherInterface,
    PublishError,
)

__all__ = [
    "ProgressPublisherInterface",
    "PublishError",
]
