"""
Port des providers d'images distants.

Un provider déclare les entités qu'il sait traiter et les types d'images
qu'il fournit, puis résout les images candidates d'une entité.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from seasonart.core.entities.media import ImageType, RemoteImageInfo


class IRemoteImageProvider(ABC):
    """Interface d'un provider d'images pour l'hôte."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom du provider affiché par l'hôte."""
        ...

    @abstractmethod
    def supports(self, item: object) -> bool:
        """Indique si le provider sait traiter cette entité."""
        ...

    @abstractmethod
    def get_supported_images(self, item: object) -> list[ImageType]:
        """Types d'images que le provider peut retourner pour l'entité."""
        ...

    @abstractmethod
    async def get_images(
        self,
        item: object,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[RemoteImageInfo]:
        """
        Résout les images candidates d'une entité.

        Retourne une liste vide si rien n'est trouvé ou en cas d'échec.
        """
        ...

    @abstractmethod
    async def get_image_response(
        self,
        url: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """Télécharge une image trouvée par le provider."""
        ...
