"""
Client TVmaze pour les saisons et leurs images.

Implemente IShowMetadataClient. Chaque appel API passe par
RetryRateLimitingStrategy, qui gere le rate limiting (429) de TVmaze.
L'API publique TVmaze ne demande pas d'authentification.

Reference API: https://www.tvmaze.com/api
"""

import asyncio
from typing import Any, Optional

import httpx
from loguru import logger

from seasonart.adapters.api.retry import (
    Cancelled,
    RetryRateLimitingStrategy,
    TransportError,
)
from seasonart.core.ports.api_clients import (
    IShowMetadataClient,
    RemoteRequest,
    TvMazeSeason,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TvMazeClient(IShowMetadataClient):
    """
    Client TVmaze.

    Le client HTTP peut etre fourni par l'appelant (pool de connexions
    partage, non ferme par close()) ou cree a la premiere requete.

    Attributes:
        BASE_URL: URL de base par defaut de l'API TVmaze

    Example:
        client = TvMazeClient(strategy=RetryRateLimitingStrategy())
        seasons = await client.get_show_seasons(82)
        await client.close()
    """

    BASE_URL = "https://api.tvmaze.com"

    def __init__(
        self,
        strategy: RetryRateLimitingStrategy,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client TVmaze.

        Args:
            strategy: Strategie de retry sur rate limiting
            base_url: URL de base de l'API
            timeout: Timeout global des requetes en secondes
            connect_timeout: Timeout de connexion en secondes
            user_agent: User-Agent envoye a TVmaze (optionnel)
            http_client: Client httpx partage (optionnel)
        """
        self._strategy = strategy
        self._base_url = base_url
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._user_agent = user_agent
        self._client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, cree s'il n'existe pas.

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None:
            headers = {"User-Agent": self._user_agent} if self._user_agent else None
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=headers,
            )
            self._owns_client = True
        return self._client

    async def get_show_seasons(
        self,
        show_id: int,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Optional[list[TvMazeSeason]]:
        """
        Recupere les saisons d'une serie.

        Args:
            show_id: ID TVmaze de la serie
            cancel_event: Signal d'annulation optionnel

        Returns:
            Liste des saisons, ou None si la serie n'existe pas (404)

        Raises:
            TransportError: Erreur non relancable, payload inattendu ou saison mal formee
            RateLimitExhausted: 429 sur toutes les tentatives
            Cancelled: cancel_event declenche
        """
        client = await self._get_client()
        request = RemoteRequest(path=f"/shows/{show_id}/seasons", identifier=show_id)

        try:
            response = await self._strategy.execute(client, request, cancel_event)
        except TransportError as e:
            if e.status_code == 404:
                logger.debug(f"Serie TVmaze inconnue: {show_id}")
                return None
            raise

        if not isinstance(response.payload, list):
            raise TransportError(
                f"Unexpected seasons payload for show {show_id}",
                status_code=response.status_code,
            )

        seasons = []
        for item in response.payload:
            season = self._parse_season(item)
            if season is None:
                raise TransportError(
                    f"Malformed season entry for show {show_id}: {item!r}",
                    status_code=response.status_code,
                )
            seasons.append(season)
        return seasons

    @staticmethod
    def _parse_season(item: Any) -> Optional[TvMazeSeason]:
        """Convertit une saison JSON TVmaze en TvMazeSeason, None si mal formee."""
        if not isinstance(item, dict):
            return None
        image = item.get("image") or {}
        season_id = item.get("id", 0)
        number = item.get("number")
        name = item.get("name") or ""
        if (
            not isinstance(image, dict)
            or not _is_int(season_id)
            or not (number is None or _is_int(number))
            or not isinstance(name, str)
        ):
            return None
        medium = image.get("medium")
        original = image.get("original")
        if not all(url is None or isinstance(url, str) for url in (medium, original)):
            return None
        return TvMazeSeason(
            id=season_id,
            number=number,
            name=name,
            image_medium=medium,
            image_original=original,
        )

    async def fetch_image(
        self,
        url: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        """
        Telecharge une image sans retry.

        Args:
            url: URL absolue de l'image
            cancel_event: Signal d'annulation optionnel

        Raises:
            Cancelled: cancel_event deja declenche
        """
        if cancel_event is not None and cancel_event.is_set():
            raise Cancelled(f"Image download cancelled: {url}")
        client = await self._get_client()
        return await client.get(url)

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tvmaze"

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par ce client."""
        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None
