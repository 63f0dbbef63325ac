"""
Fixtures pytest partagees pour les tests SeasonArt.

- Settings de test avec fichier de log temporaire
- Sleep factice qui enregistre les delais de backoff sans attendre
- Entites Series / Season type
"""

from pathlib import Path

import pytest

from seasonart.config import Settings
from seasonart.core.entities.media import Season, Series


class RecordingSleep:
    """Remplace asyncio.sleep: enregistre les delais et rend la main."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep factice pour les tests de backoff."""
    return RecordingSleep()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles de l'environnement."""
    return Settings(
        tvmaze_base_url="https://api.tvmaze.com",
        retry_max_attempts=4,
        retry_base_delay=1.0,
        retry_max_delay=8.0,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def series() -> Series:
    """Serie liee a TVmaze (Game of Thrones)."""
    return Series(name="Game of Thrones", provider_ids={"TvMaze": "82", "Tvdb": "121361"})


@pytest.fixture
def season(series: Series) -> Season:
    """Saison 1 de la serie type."""
    return Season(name="Season 1", index_number=1, series=series)
