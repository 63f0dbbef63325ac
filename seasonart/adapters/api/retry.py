"""
Transport HTTP avec retry et backoff sur le rate limiting TVmaze.

Une requete logique vers l'API est relancee tant que le service repond
429 (Too Many Requests), dans la limite de RetryPolicy.max_attempts:
- si la reponse porte un header Retry-After, on attend la duree indiquee,
  plafonnee a max_delay
- sinon backoff exponentiel depuis base_delay, double a chaque tentative,
  plafonne a max_delay

Toute autre erreur (reseau, 4xx/5xx hors 429, corps non JSON) est propagee
immediatement sous forme de TransportError, sans retry.

Usage:
    strategy = RetryRateLimitingStrategy(RetryPolicy(max_attempts=4))
    response = await strategy.execute(
        client, RemoteRequest(path="/shows/82/seasons", identifier=82)
    )
"""

import asyncio
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Awaitable, Callable, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from seasonart.core.ports.api_clients import RemoteRequest, RemoteResponse


class TvMazeAPIError(Exception):
    """Erreur de base pour les appels a l'API TVmaze."""


class TransportError(TvMazeAPIError):
    """
    Echec non relancable: erreur reseau, statut HTTP autre que 429,
    ou reponse mal formee.

    Attributes:
        status_code: Statut HTTP de la reponse, ou None si pas de reponse.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RateLimitExhausted(TvMazeAPIError):
    """
    Toutes les tentatives ont recu un 429.

    Attributes:
        attempts: Nombre de tentatives effectuees
        retry_after: Dernier Retry-After recu (secondes), ou None
    """

    def __init__(self, attempts: int, retry_after: Optional[float] = None) -> None:
        self.attempts = attempts
        self.retry_after = retry_after
        super().__init__(f"Rate limited after {attempts} attempt(s)")


class Cancelled(TvMazeAPIError):
    """L'appelant a annule la requete avant sa resolution."""


class RateLimitError(Exception):
    """
    Signal interne: l'API a retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[float] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Parametres du retry sur 429.

    Attributes:
        max_attempts: Nombre total de tentatives (premiere incluse)
        base_delay: Delai du premier backoff en secondes
        max_delay: Plafond du backoff en secondes
    """

    max_attempts: int = 5
    base_delay: float = 1.0
    max_delay: float = 30.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay <= 0:
            raise ValueError("base_delay must be > 0")
        if self.max_delay < self.base_delay:
            raise ValueError("max_delay must be >= base_delay")


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """
    Convertit un header Retry-After en secondes.

    Accepte un nombre de secondes ou une date HTTP. Une valeur negative
    ou une date passee donne 0. Une valeur illisible ou non finie (inf, nan)
    donne None (on retombe alors sur le backoff exponentiel).
    """
    if not value:
        return None
    value = value.strip()
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return max(0.0, seconds) if math.isfinite(seconds) else None
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())


class wait_retry_after_or_exponential(wait_base):
    """
    Strategie d'attente tenacity: Retry-After si fourni, sinon exponentiel.

    Le backoff vaut base_delay * 2 ** (tentative - 1). Les deux sont
    plafonnes a max_delay.
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self._max_delay = policy.max_delay
        self._fallback = wait_exponential(
            multiplier=policy.base_delay, exp_base=2, max=policy.max_delay
        )

    def __call__(self, retry_state: RetryCallState) -> float:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, RateLimitError) and exc.retry_after is not None:
            return min(exc.retry_after, self._max_delay)
        return self._fallback(retry_state)


class RetryRateLimitingStrategy:
    """
    Execute une requete TVmaze en relancant sur 429.

    L'etat du retry (compteur, delais) est cree a chaque appel de execute()
    et n'est jamais partage: plusieurs appels concurrents sont independants.

    Attributes:
        policy: Parametres du retry
    """

    def __init__(
        self,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """
        Initialise la strategie.

        Args:
            policy: Parametres du retry (defaut: RetryPolicy())
            sleep: Fonction d'attente async, injectable pour les tests
        """
        self.policy = policy or RetryPolicy()
        self._sleep = sleep

    async def execute(
        self,
        client: httpx.AsyncClient,
        request: RemoteRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> RemoteResponse:
        """
        Execute une requete logique avec retry sur 429.

        Args:
            client: Client httpx (pool de connexions partage)
            request: Requete a executer
            cancel_event: Signal d'annulation optionnel, surveille avant
                          chaque tentative et pendant les attentes

        Returns:
            RemoteResponse avec le payload JSON decode

        Raises:
            RateLimitExhausted: 429 sur toutes les tentatives
            TransportError: Erreur non relancable
            Cancelled: cancel_event declenche
        """

        async def _cancellable_sleep(seconds: float) -> None:
            await self._wait(seconds, request, cancel_event)

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RateLimitError),
            wait=wait_retry_after_or_exponential(self.policy),
            stop=stop_after_attempt(self.policy.max_attempts),
            sleep=_cancellable_sleep,
            before_sleep=self._log_backoff(request),
        )

        try:
            async for attempt in retrying:
                with attempt:
                    if cancel_event is not None and cancel_event.is_set():
                        raise Cancelled(f"Request cancelled: {request.path}")
                    status_code, payload = await self._attempt(client, request)
        except RetryError as e:
            last = e.last_attempt
            exc = last.exception()
            retry_after = exc.retry_after if isinstance(exc, RateLimitError) else None
            logger.error(
                f"TVmaze rate limit epuise pour {request.path} "
                f"apres {last.attempt_number} tentative(s)"
            )
            raise RateLimitExhausted(last.attempt_number, retry_after) from exc

        return RemoteResponse(
            status_code=status_code,
            payload=payload,
            attempts=attempt.retry_state.attempt_number,
        )

    async def _attempt(
        self, client: httpx.AsyncClient, request: RemoteRequest
    ) -> tuple[int, Any]:
        """Une tentative: 429 -> RateLimitError, autres erreurs -> TransportError."""
        try:
            response = await client.get(request.path, params=request.params or None)
        except httpx.HTTPError as e:
            raise TransportError(f"Network error on {request.path}: {e}") from e

        if response.status_code == 429:
            raise RateLimitError(parse_retry_after(response.headers.get("Retry-After")))
        if response.status_code >= 400:
            raise TransportError(
                f"HTTP {response.status_code} on {request.path}",
                status_code=response.status_code,
            )

        try:
            return response.status_code, response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed response on {request.path}",
                status_code=response.status_code,
            ) from e

    async def _wait(
        self,
        seconds: float,
        request: RemoteRequest,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        """Attend le delai de backoff, interrompu par cancel_event."""
        if cancel_event is None:
            await self._sleep(seconds)
            return

        sleeper = asyncio.ensure_future(self._sleep(seconds))
        watcher = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({sleeper, watcher}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            pending = [task for task in (sleeper, watcher) if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        if cancel_event.is_set():
            raise Cancelled(f"Request cancelled during backoff: {request.path}")

    @staticmethod
    def _log_backoff(request: RemoteRequest) -> Callable[[RetryCallState], None]:
        def _before_sleep(retry_state: RetryCallState) -> None:
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            logger.warning(
                f"TVmaze 429 pour {request.path} (id={request.identifier}), "
                f"tentative {retry_state.attempt_number}, nouvel essai dans {delay:.1f}s"
            )

        return _before_sleep
