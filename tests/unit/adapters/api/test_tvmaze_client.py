"""
Tests for TVmaze API client.

Uses respx to mock HTTP requests and test the client on top of the
rate-limited retry transport.
"""

import asyncio

import httpx
import pytest
import respx

from seasonart.adapters.api.retry import (
    Cancelled,
    RateLimitExhausted,
    RetryPolicy,
    RetryRateLimitingStrategy,
    TransportError,
)
from seasonart.adapters.api.tvmaze_client import TvMazeClient
from seasonart.core.ports.api_clients import IShowMetadataClient, TvMazeSeason
from tests.fixtures.tvmaze_responses import (
    SEASON_1_ORIGINAL,
    TVMAZE_BASE_URL,
    TVMAZE_NOT_FOUND_RESPONSE,
    TVMAZE_SEASONS_RESPONSE,
)


@pytest.fixture
def strategy(recording_sleep) -> RetryRateLimitingStrategy:
    """Strategy with a recording sleep so backoffs do not wait."""
    return RetryRateLimitingStrategy(
        RetryPolicy(max_attempts=3, base_delay=1.0, max_delay=4.0),
        sleep=recording_sleep,
    )


class TestTvMazeClientInterface:
    """Test the port implementation."""

    def test_implements_interface(self, strategy) -> None:
        client = TvMazeClient(strategy=strategy)
        assert isinstance(client, IShowMetadataClient)
        assert client.source == "tvmaze"


class TestGetShowSeasons:
    """Test /shows/{id}/seasons."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_parses_seasons(self, strategy) -> None:
        route = respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(200, json=TVMAZE_SEASONS_RESPONSE)
        )

        client = TvMazeClient(strategy=strategy)
        try:
            seasons = await client.get_show_seasons(82)
        finally:
            await client.close()

        assert route.call_count == 1
        assert seasons is not None
        assert [s.number for s in seasons] == [1, 2, 3]
        assert seasons[0] == TvMazeSeason(
            id=307,
            number=1,
            name="",
            image_medium="https://static.tvmaze.com/uploads/images/medium_portrait/24/60941.jpg",
            image_original=SEASON_1_ORIGINAL,
        )
        # Saison 3 sans image
        assert seasons[2].image_original is None
        assert seasons[2].image_medium is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_show_returns_none(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/99999999/seasons").mock(
            return_value=httpx.Response(404, json=TVMAZE_NOT_FOUND_RESPONSE)
        )

        client = TvMazeClient(strategy=strategy)
        try:
            assert await client.get_show_seasons(99999999) is None
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_seasons_is_empty_list(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/5/seasons").mock(
            return_value=httpx.Response(200, json=[])
        )

        client = TvMazeClient(strategy=strategy)
        try:
            assert await client.get_show_seasons(5) == []
        finally:
            await client.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_unexpected_payload_raises(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(200, json={"id": 82})
        )

        client = TvMazeClient(strategy=strategy)
        try:
            with pytest.raises(TransportError):
                await client.get_show_seasons(82)
        finally:
            await client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "entry",
        [
            {"id": 307, "number": 1, "image": "not-a-dict"},
            {"id": 307, "number": 1, "image": ["x"]},
            {"id": 307, "number": "one"},
            {"id": 307, "number": True},
            {"id": "307", "number": 1},
            {"id": 307, "number": 1, "name": 42},
            {"id": 307, "number": 1, "image": {"original": 60941}},
            "season",
            None,
        ],
    )
    @respx.mock
    async def test_malformed_season_entry_raises(self, strategy, entry) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(200, json=[TVMAZE_SEASONS_RESPONSE[0], entry])
        )

        client = TvMazeClient(strategy=strategy)
        try:
            with pytest.raises(TransportError) as exc_info:
                await client.get_show_seasons(82)
        finally:
            await client.close()

        assert exc_info.value.status_code == 200
        assert "Malformed season" in str(exc_info.value)

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_optional_fields_are_accepted(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(200, json=[{"id": 310}])
        )

        client = TvMazeClient(strategy=strategy)
        try:
            seasons = await client.get_show_seasons(82)
        finally:
            await client.close()

        assert seasons == [TvMazeSeason(id=310)]

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_propagates(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        client = TvMazeClient(strategy=strategy)
        try:
            with pytest.raises(TransportError) as exc_info:
                await client.get_show_seasons(82)
        finally:
            await client.close()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_retried_then_succeeds(self, strategy, recording_sleep) -> None:
        route = respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json=TVMAZE_SEASONS_RESPONSE),
            ]
        )

        client = TvMazeClient(strategy=strategy)
        try:
            seasons = await client.get_show_seasons(82)
        finally:
            await client.close()

        assert seasons is not None and len(seasons) == 3
        assert route.call_count == 2
        assert recording_sleep.delays == [1.0]

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_exhausted_propagates(self, strategy) -> None:
        route = respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(429)
        )

        client = TvMazeClient(strategy=strategy)
        try:
            with pytest.raises(RateLimitExhausted):
                await client.get_show_seasons(82)
        finally:
            await client.close()

        assert route.call_count == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_base_url_and_user_agent(self, strategy) -> None:
        route = respx.get("https://tvmaze.local/shows/82/seasons").mock(
            return_value=httpx.Response(200, json=[])
        )

        client = TvMazeClient(
            strategy=strategy,
            base_url="https://tvmaze.local",
            user_agent="seasonart-tests",
        )
        try:
            await client.get_show_seasons(82)
        finally:
            await client.close()

        assert route.calls[0].request.headers["User-Agent"] == "seasonart-tests"


class TestSharedHttpClient:
    """Test the injected connection pool."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_shared_client_is_not_closed(self, strategy) -> None:
        respx.get(f"{TVMAZE_BASE_URL}/shows/82/seasons").mock(
            return_value=httpx.Response(200, json=[])
        )

        async with httpx.AsyncClient(base_url=TVMAZE_BASE_URL) as shared:
            client = TvMazeClient(strategy=strategy, http_client=shared)
            await client.get_show_seasons(82)
            await client.close()
            assert not shared.is_closed


class TestFetchImage:
    """Test image pass-through."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_image_returns_raw_response(self, strategy) -> None:
        respx.get(SEASON_1_ORIGINAL).mock(
            return_value=httpx.Response(
                200, content=b"\xff\xd8jpeg", headers={"Content-Type": "image/jpeg"}
            )
        )

        client = TvMazeClient(strategy=strategy)
        try:
            response = await client.fetch_image(SEASON_1_ORIGINAL)
        finally:
            await client.close()

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "image/jpeg"
        assert response.content == b"\xff\xd8jpeg"

    @pytest.mark.asyncio
    async def test_fetch_image_cancelled(self, strategy) -> None:
        cancel_event = asyncio.Event()
        cancel_event.set()

        client = TvMazeClient(strategy=strategy)
        try:
            with pytest.raises(Cancelled):
                await client.fetch_image(SEASON_1_ORIGINAL, cancel_event)
        finally:
            await client.close()
