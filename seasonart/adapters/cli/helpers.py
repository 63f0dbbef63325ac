"""
Utilitaires partages pour les commandes CLI de SeasonArt.

- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le client HTTP
"""

from functools import wraps

from rich.console import Console

from seasonart.container import Container

console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client TVmaze du container est ferme a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            provider = container.season_image_provider()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tvmaze_client().close()
        return wrapper
    return decorator
