"""HTTP fetcher with unbounded exponential backoff on transport failures."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Iterator

import httpx

from pho.config import Settings
from pho.crawler.errors import FatalError
from pho.crawler.models import FetchResult, content_type_of

logger = logging.getLogger(__name__)

# Requests that can never succeed, however often they are retried.
_NOT_RETRYABLE = (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.TooManyRedirects)


@dataclass
class Backoff:
    """Exponential backoff policy.

    Every wait grows by ``multiplier`` and gets upward jitter of at most
    ``jitter`` times the current interval, so consecutive waits never shrink
    as long as ``jitter <= multiplier - 1``.  Waits are capped at
    ``max_interval``; the number of attempts is not.
    """

    initial_interval: float = 0.5
    multiplier: float = 1.5
    max_interval: float = 60.0
    jitter: float = 0.5

    def __post_init__(self) -> None:
        self.jitter = max(0.0, min(self.jitter, self.multiplier - 1))

    def intervals(self) -> Iterator[float]:
        interval = self.initial_interval
        while True:
            yield min(interval * (1 + random.uniform(0, self.jitter)), self.max_interval)
            interval = min(interval * self.multiplier, self.max_interval)

    @classmethod
    def from_settings(cls, settings: Settings) -> Backoff:
        return cls(
            initial_interval=settings.retry_initial_interval,
            multiplier=settings.retry_multiplier,
            max_interval=settings.retry_max_interval,
        )


def build_client(settings: Settings) -> httpx.Client:
    """Return the HTTP client shared by every request of a walk."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


class Fetcher:
    """Issues GET requests, retrying until the server answers.

    Any HTTP response counts as an answer, whatever its status code.  Only
    transport failures (refused connections, timeouts, DNS errors) are
    retried, and they are retried without limit.
    """

    def __init__(
        self,
        client: httpx.Client,
        backoff: Backoff | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._backoff = backoff or Backoff()
        self._sleep = sleep

    def fetch(self, url: str) -> FetchResult:
        """GET *url* and return the still-open response.

        Raises:
            FatalError: If the request is malformed and can never succeed.
        """
        waits = self._backoff.intervals()
        while True:
            try:
                request = self._client.build_request("GET", url)
                response = self._client.send(request, stream=True)
            except _NOT_RETRYABLE as exc:
                raise FatalError(f"cannot request: {exc}", url=url) from exc
            except httpx.TransportError as exc:
                wait = next(waits)
                logger.warning("%s waiting %.2fs to retry %s", exc, wait, url)
                self._sleep(wait)
                continue

            return FetchResult(
                url=url,
                response=response,
                content_type=content_type_of(response),
            )
