"""
Couche adaptateurs (infrastructure).

Sous-packages :
- api/ : Client TVmaze et transport avec retry sur rate limiting
- cli/ : Interface ligne de commande (Typer)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
