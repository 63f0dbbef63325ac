"""
Fonctions utilitaires partagees dans le projet SeasonArt.

- get_tvmaze_id : lecture de l'ID TVmaze dans les provider ids d'une serie
"""

from typing import Mapping, Optional

from seasonart.utils.constants import TVMAZE_PROVIDER_KEY


def get_tvmaze_id(provider_ids: Optional[Mapping[str, str]]) -> Optional[int]:
    """
    Retourne l'ID TVmaze d'une serie, ou None si absent ou invalide.

    La cle est comparee sans tenir compte de la casse ("TvMaze", "tvmaze").
    Seul un entier strictement positif est accepte.
    """
    if not provider_ids:
        return None

    wanted = TVMAZE_PROVIDER_KEY.lower()
    for key, value in provider_ids.items():
        if key.lower() != wanted:
            continue
        try:
            tvmaze_id = int(str(value).strip())
        except ValueError:
            return None
        return tvmaze_id if tvmaze_id > 0 else None
    return None
