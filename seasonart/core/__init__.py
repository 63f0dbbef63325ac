"""
Couche domaine (core).

Sous-packages :
- entities/ : Entités de l'hôte (Series, Season, RemoteImageInfo)
- ports/ : Interfaces abstraites pour le client API et les providers d'images
"""
