"""
Client API TVmaze et transport avec retry.

- TvMazeClient: saisons d'une serie et telechargement d'images
- RetryRateLimitingStrategy: relance sur 429 avec Retry-After ou backoff exponentiel
- TvMazeAPIError, TransportError, RateLimitExhausted, Cancelled: erreurs du transport
"""

from seasonart.adapters.api.retry import (
    Cancelled,
    RateLimitExhausted,
    RetryPolicy,
    RetryRateLimitingStrategy,
    TransportError,
    TvMazeAPIError,
)
from seasonart.adapters.api.tvmaze_client import TvMazeClient

__all__ = [
    "Cancelled",
    "RateLimitExhausted",
    "RetryPolicy",
    "RetryRateLimitingStrategy",
    "TransportError",
    "TvMazeAPIError",
    "TvMazeClient",
]
