"""
Constantes globales pour SeasonArt.

- Nom du provider affiche par l'hote
- Cle du provider id TVmaze sur les series
- Langue des images TVmaze
"""

# Nom du provider tel qu'affiche par l'hote
PROVIDER_NAME = "TVmaze"

# Cle du provider id TVmaze dans Series.provider_ids
TVMAZE_PROVIDER_KEY = "TvMaze"

# TVmaze ne fournit pas la langue des images: on les considere anglaises
IMAGE_LANGUAGE = "en"
