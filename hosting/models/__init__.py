"""
Models Package

Generic, provider-independent data structures.
"""

from hosting.models.hosted_item import ItemMetadata, Playlist, Video

__all__ = [
    "ItemMetadata",
    "Playlist",
    "Video",
]
