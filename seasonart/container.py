"""
Container d'injection de dependances via dependency-injector.

Assemble la configuration, la strategie de retry, le client TVmaze
et le provider d'images de saison pour la CLI et pour un hote embarquant
le provider.
"""

from dependency_injector import containers, providers

from .adapters.api.retry import RetryRateLimitingStrategy
from .adapters.api.tvmaze_client import TvMazeClient
from .config import Settings
from .services.season_image_provider import TvMazeSeasonImageProvider


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        provider = container.season_image_provider()
        images = await provider.get_images(season)
        await container.tvmaze_client().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Politique de retry construite depuis la configuration
    retry_policy = providers.Singleton(
        lambda settings: settings.retry_policy(),
        config,
    )

    # Strategie sans etat partage entre appels - Singleton
    retry_strategy = providers.Singleton(
        RetryRateLimitingStrategy,
        policy=retry_policy,
    )

    # Client TVmaze - Singleton pour partager le pool de connexions
    tvmaze_client = providers.Singleton(
        TvMazeClient,
        strategy=retry_strategy,
        base_url=config.provided.tvmaze_base_url,
        timeout=config.provided.http_timeout,
        connect_timeout=config.provided.http_connect_timeout,
        user_agent=config.provided.user_agent,
    )

    season_image_provider = providers.Factory(
        TvMazeSeasonImageProvider,
        tvmaze_client=tvmaze_client,
    )
