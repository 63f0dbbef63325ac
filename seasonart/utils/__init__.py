"""
Utilitaires et constantes pour SeasonArt.
"""

from seasonart.utils.constants import IMAGE_LANGUAGE, PROVIDER_NAME, TVMAZE_PROVIDER_KEY
from seasonart.utils.helpers import get_tvmaze_id

__all__ = [
    "IMAGE_LANGUAGE",
    "PROVIDER_NAME",
    "TVMAZE_PROVIDER_KEY",
    "get_tvmaze_id",
]
