"""
Interfaces ports pour le client API TVmaze.

Définit les objets échangés avec le transport (RemoteRequest, RemoteResponse),
la saison telle que retournée par l'API (TvMazeSeason), et le contrat
IShowMetadataClient implémenté par l'adaptateur TVmaze.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RemoteRequest:
    """
    Requête sortante vers l'API de métadonnées.

    Attributs :
        path : Chemin de la ressource, relatif à l'URL de base de l'API
        identifier : Identifiant concerné (ID TVmaze de la série), pour les logs
        params : Paramètres de requête optionnels, en paires (nom, valeur)
    """

    path: str
    identifier: Optional[int] = None
    params: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class RemoteResponse:
    """
    Réponse réussie de l'API.

    Attributs :
        status_code : Statut HTTP de la dernière tentative
        payload : Corps JSON décodé (peut être vide)
        attempts : Nombre de tentatives utilisées
    """

    status_code: int
    payload: Any
    attempts: int = 1


@dataclass
class TvMazeSeason:
    """
    Saison d'une série telle que retournée par /shows/{id}/seasons.

    Attributs :
        id : ID TVmaze de la saison
        number : Numéro de saison
        name : Nom de la saison (souvent vide)
        image_medium : URL de l'image réduite
        image_original : URL de l'image originale
    """

    id: int
    number: Optional[int] = None
    name: str = ""
    image_medium: Optional[str] = None
    image_original: Optional[str] = None


class IShowMetadataClient(ABC):
    """Contrat du client de métadonnées de séries utilisé par les providers."""

    @abstractmethod
    async def get_show_seasons(
        self,
        show_id: int,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Optional[list[TvMazeSeason]]:
        """
        Récupère les saisons d'une série.

        Args :
            show_id : ID TVmaze de la série
            cancel_event : Signal d'annulation optionnel

        Retourne :
            Liste des saisons (éventuellement vide), ou None si la série est inconnue
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tvmaze')."""
        ...
