"""Commandes CLI de SeasonArt."""
