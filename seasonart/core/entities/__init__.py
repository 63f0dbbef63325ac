"""
Host entities a remote image provider works on.

Exports:
- Series: TV series with its external provider ids
- Season: Season of a series
- ImageType: Artwork classification
- RemoteImageInfo: Image candidate returned by a provider
"""

from seasonart.core.entities.media import ImageType, RemoteImageInfo, Season, Series

__all__ = [
    "ImageType",
    "RemoteImageInfo",
    "Season",
    "Series",
]
