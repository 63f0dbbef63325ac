"""
Commandes CLI de consultation TVmaze: images de saison et liste des saisons.
"""

import asyncio
from typing import Annotated

import typer
from rich.table import Table

from seasonart.adapters.api.retry import TvMazeAPIError
from seasonart.adapters.cli.helpers import console, with_container
from seasonart.core.entities.media import Season, Series
from seasonart.utils.constants import TVMAZE_PROVIDER_KEY


def images(
    show_id: Annotated[int, typer.Argument(help="ID TVmaze de la serie")],
    season: Annotated[int, typer.Argument(help="Numero de saison")],
) -> None:
    """Affiche l'image primaire TVmaze d'une saison."""
    asyncio.run(_images_async(show_id, season))


@with_container()
async def _images_async(container, show_id: int, season_number: int) -> None:
    """Implementation async de la commande images."""
    provider = container.season_image_provider()

    season = Season(
        name=f"Saison {season_number}",
        index_number=season_number,
        series=Series(
            name=f"TVmaze #{show_id}",
            provider_ids={TVMAZE_PROVIDER_KEY: str(show_id)},
        ),
    )
    results = await provider.get_images(season)

    if not results:
        console.print(
            f"[yellow]Aucune image pour la saison {season_number} "
            f"de la serie {show_id}.[/yellow]"
        )
        raise typer.Exit(code=1)

    table = Table(title=f"{provider.name} - serie {show_id}, saison {season_number}")
    table.add_column("Type")
    table.add_column("Langue")
    table.add_column("URL")
    for image in results:
        table.add_row(image.type.value, image.language or "-", image.url)
    console.print(table)


def seasons(
    show_id: Annotated[int, typer.Argument(help="ID TVmaze de la serie")],
) -> None:
    """Liste les saisons TVmaze d'une serie avec leur image."""
    asyncio.run(_seasons_async(show_id))


@with_container()
async def _seasons_async(container, show_id: int) -> None:
    """Implementation async de la commande seasons."""
    client = container.tvmaze_client()

    try:
        tvmaze_seasons = await client.get_show_seasons(show_id)
    except TvMazeAPIError as e:
        console.print(f"[red]Erreur TVmaze:[/red] {e}")
        raise typer.Exit(code=1)

    if tvmaze_seasons is None:
        console.print(f"[yellow]Serie TVmaze inconnue: {show_id}[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title=f"Saisons TVmaze - serie {show_id}")
    table.add_column("Saison", justify="right")
    table.add_column("Nom")
    table.add_column("Image originale")
    for tvmaze_season in tvmaze_seasons:
        table.add_row(
            str(tvmaze_season.number) if tvmaze_season.number is not None else "?",
            tvmaze_season.name or "-",
            tvmaze_season.image_original or "[dim]aucune[/dim]",
        )
    console.print(table)
