"""Resilient Random User Client — fetches seed identities from the randomuser.me API.

Invariants:
    - Rate limits (429), 5xx and connection/timeout errors: retried with exponential backoff
    - Other 4xx and malformed payloads: immediate failure, no retry
    - All failures surface as ExternalServiceError (core/errors.py)
    - Plain-text passwords returned here are hashed by the caller before storage

Design Decisions:
    - httpx.AsyncClient: the same client the test suite drives the app with,
      and MockTransport makes the upstream trivially fakeable
    - ±25% jitter on backoff: prevents synchronized retries across concurrent fetches
"""

import asyncio
import logging
import random
from dataclasses import dataclass

import httpx

from secureboard.core.errors import ErrorContext, ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "randomuser"
_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class RandomUser:
    """One identity as returned by the upstream service."""
    name: str
    password: str


class RandomUserClient:
    """Wraps httpx.AsyncClient with retry logic and error mapping."""

    def __init__(
        self,
        api_url: str,
        timeout_seconds: float = 10.0,
        max_retries: int = 3,
        base_delay_ms: int = 500,
        max_delay_ms: int = 10_000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def __aenter__(self) -> "RandomUserClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.client.aclose()

    async def fetch_users(self, count: int) -> list[RandomUser]:
        """Fetch `count` users concurrently (one request per user)."""
        return list(await asyncio.gather(
            *(self.fetch_user() for _ in range(count)),
        ))

    async def fetch_user(self) -> RandomUser:
        """Fetch a single user with automatic retry on transient failures."""
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.get(self.api_url)
            except httpx.TransportError as e:
                await self._handle_transient_error(str(e) or type(e).__name__, attempt)
                continue

            if response.status_code in _RETRYABLE_STATUS:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}", attempt,
                )
                continue
            if response.is_error:
                raise ExternalServiceError(
                    SERVICE_NAME, f"HTTP {response.status_code}",
                    ErrorContext(debug_info={"status_code": response.status_code}),
                )

            logger.info(
                "Random user fetched", extra={"attempt": attempt + 1},
            )
            return _parse_user(response)

        # Unreachable: _handle_transient_error raises on the last attempt
        raise ExternalServiceError(SERVICE_NAME, "retries exhausted")

    async def _handle_transient_error(self, reason: str, attempt: int) -> None:
        """Sleep before the next attempt, or raise once retries are exhausted."""
        if attempt >= self.max_retries:
            raise ExternalServiceError(
                SERVICE_NAME, f"{reason} after {self.max_retries} retries",
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"Random user fetch failed ({reason}), retry after {delay}ms",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311


def _parse_user(response: httpx.Response) -> RandomUser:
    """Extract "first last" and login.password from a randomuser.me payload."""
    try:
        person = response.json()["results"][0]
        name = f"{person['name']['first']} {person['name']['last']}"
        password = person["login"]["password"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise ExternalServiceError(SERVICE_NAME, f"malformed response: {e!r}")
    if not isinstance(password, str) or not password:
        raise ExternalServiceError(SERVICE_NAME, "malformed response: empty password")
    return RandomUser(name=name, password=password)
