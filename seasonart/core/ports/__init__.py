"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API :
- IShowMetadataClient : Client de métadonnées de séries (saisons)
- RemoteRequest / RemoteResponse : Requête et réponse du transport
- TvMazeSeason : Saison retournée par l'API

Ports provider :
- IRemoteImageProvider : Provider d'images distant reconnu par l'hôte
"""

from seasonart.core.ports.api_clients import (
    IShowMetadataClient,
    RemoteRequest,
    RemoteResponse,
    TvMazeSeason,
)
from seasonart.core.ports.image_providers import IRemoteImageProvider

__all__ = [
    # Clients API
    "IShowMetadataClient",
    "RemoteRequest",
    "RemoteResponse",
    "TvMazeSeason",
    # Providers
    "IRemoteImageProvider",
]
