"""
Provider d'images de saison TVmaze.

Pour une saison dont la serie parente porte un ID TVmaze, recupere les
saisons de la serie sur TVmaze et retourne l'image originale de la saison
de meme numero. Tout echec API est journalise et donne une liste vide,
pour ne jamais interrompre un scan de metadonnees plus large.
"""

import asyncio
from typing import Optional

import httpx
from loguru import logger

from seasonart.adapters.api.retry import TvMazeAPIError
from seasonart.adapters.api.tvmaze_client import TvMazeClient
from seasonart.core.entities.media import (
    ImageType,
    RemoteImageInfo,
    Season,
    Series,
)
from seasonart.core.ports.image_providers import IRemoteImageProvider
from seasonart.utils.constants import IMAGE_LANGUAGE, PROVIDER_NAME
from seasonart.utils.helpers import get_tvmaze_id


class TvMazeSeasonImageProvider(IRemoteImageProvider):
    """
    Provider d'images primaires pour les saisons, adosse a TVmaze.

    Example:
        provider = TvMazeSeasonImageProvider(tvmaze_client=client)
        images = await provider.get_images(season)
    """

    def __init__(self, tvmaze_client: TvMazeClient) -> None:
        self._client = tvmaze_client

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def supports(self, item: object) -> bool:
        return isinstance(item, Season)

    def get_supported_images(self, item: object) -> list[ImageType]:
        return [ImageType.PRIMARY]

    async def get_images(
        self,
        item: object,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> list[RemoteImageInfo]:
        """
        Retourne l'image primaire TVmaze d'une saison.

        Liste vide si l'entite n'est pas une saison, si la saison n'a pas
        de serie ou de numero, si la serie n'a pas d'ID TVmaze, si aucune
        saison ne correspond, ou en cas d'erreur API.
        """
        if not isinstance(item, Season):
            return []

        series = item.series
        if series is None:
            # Lien invalide
            return []
        if item.index_number is None:
            return []

        try:
            images = await self._get_season_images(series, item.index_number, cancel_event)
        except TvMazeAPIError as e:
            logger.warning(f"[get_images] Echec TVmaze pour {item.name}: {e}")
            return []

        logger.info(f"[get_images] Images trouvees pour {item.name}: {images}")
        return images

    async def get_image_response(
        self,
        url: str,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> httpx.Response:
        return await self._client.fetch_image(url, cancel_event)

    async def _get_season_images(
        self,
        series: Series,
        season_number: int,
        cancel_event: Optional[asyncio.Event],
    ) -> list[RemoteImageInfo]:
        tvmaze_id = get_tvmaze_id(series.provider_ids)
        if tvmaze_id is None:
            # Necessite l'ID TVmaze de la serie
            return []

        seasons = await self._client.get_show_seasons(tvmaze_id, cancel_event)
        if seasons is None:
            return []

        for tvmaze_season in seasons:
            if tvmaze_season.number != season_number:
                continue
            if not tvmaze_season.image_original:
                return []
            return [
                RemoteImageInfo(
                    url=tvmaze_season.image_original,
                    provider_name=PROVIDER_NAME,
                    language=IMAGE_LANGUAGE,
                    type=ImageType.PRIMARY,
                )
            ]
        return []
