"""
Point d'entrée CLI de SeasonArt.

Configure le logging et fournit les commandes de consultation TVmaze.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import images, seasons
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="seasonart",
    help="Images de saison depuis TVmaze",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """SeasonArt - Images de saison TVmaze."""
    settings = get_config()
    configure_logging(
        log_level=level_from_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(images)
app.command()(seasons)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration SeasonArt")
    typer.echo(f"API TVmaze : {config.tvmaze_base_url}")
    typer.echo(f"Timeout : {config.http_timeout}s (connexion {config.http_connect_timeout}s)")
    typer.echo(f"Tentatives max : {config.retry_max_attempts}")
    typer.echo(f"Backoff : {config.retry_base_delay}s -> {config.retry_max_delay}s max")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"SeasonArt v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
