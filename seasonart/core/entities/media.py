"""
Media entities.

Host-side entities a remote image provider works on: series linked to
external catalogs through provider ids, their seasons, and the image
results handed back to the host.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ImageType(str, Enum):
    """Kind of artwork a provider can return."""

    PRIMARY = "primary"


@dataclass
class Series:
    """
    TV series as known by the host library.

    Attributes:
        name: Display name
        provider_ids: External catalog ids keyed by provider name
                      (e.g. {"TvMaze": "82", "Tvdb": "121361"})
    """

    name: str = ""
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class Season:
    """
    Season of a series.

    Attributes:
        name: Display name
        index_number: Season number, None when unknown
        series: Parent series, None when the link is broken
    """

    name: str = ""
    index_number: Optional[int] = None
    series: Optional[Series] = None


@dataclass(frozen=True)
class RemoteImageInfo:
    """
    Image candidate returned by a remote provider.

    Attributes:
        url: Absolute image URL
        provider_name: Name of the provider that found it
        language: ISO 639-1 language tag
        type: Image classification
    """

    url: str
    provider_name: str
    language: Optional[str] = None
    type: ImageType = ImageType.PRIMARY
