"""
SeasonArt - Images de saison TVmaze pour un serveur multimédia.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (provider d'images de saison)
- adapters/ : Couche infrastructure (client TVmaze, retry, CLI)
"""
