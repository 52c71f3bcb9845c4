# dreamhouse/adapters/clients/http_resilience.py
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from ...config import settings

log = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class CircuitOpenError(httpx.HTTPError):
    pass


@dataclass
class CircuitBreaker:
    """
    Process-wide breaker: after `threshold` consecutive failures every call is
    refused until `reset_after_s` has passed. Then it goes half-open: exactly
    one trial call is let through; success closes the breaker, failure opens
    it again for another full window.
    """

    threshold: int
    reset_after_s: float
    fails: int = 0
    opened_at: float | None = None
    trial_in_flight: bool = False

    def is_open(self, now: float) -> bool:
        if self.opened_at is None:
            return False
        if now - self.opened_at < self.reset_after_s or self.trial_in_flight:
            return True
        self.trial_in_flight = True
        return False

    def record_success(self) -> None:
        self.fails = 0
        self.opened_at = None
        self.trial_in_flight = False

    def record_failure(self, now: float) -> None:
        self.fails += 1
        if self.trial_in_flight:
            self.trial_in_flight = False
            self.opened_at = now
            log.warning("trial call failed, circuit re-opened")
        elif self.fails >= self.threshold and self.opened_at is None:
            self.opened_at = now
            log.warning("circuit opened after %d failures", self.fails)


@dataclass
class RateLimiter:
    rps: float
    _last: float = 0.0
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    async def wait(self) -> None:
        if self.rps <= 0:
            return
        async with self._lock:
            gap = self._last + 1.0 / self.rps - time.monotonic()
            if gap > 0:
                await asyncio.sleep(gap)
            self._last = time.monotonic()


_breaker = CircuitBreaker(
    threshold=int(settings.HTTP_CIRCUIT_FAIL_THRESHOLD),
    reset_after_s=float(settings.HTTP_CIRCUIT_RESET_S),
)
_limiter = RateLimiter(rps=float(settings.HTTP_RATE_LIMIT_RPS))


def reset_circuit() -> None:
    _breaker.record_success()


def _retryable(exc: Exception) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRYABLE_STATUS
    return isinstance(exc, (httpx.TimeoutException, httpx.NetworkError))


async def resilient_request(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    json: Any | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """
    One outbound call with retries on timeouts, network errors and 429/5xx.
    Other 4xx responses raise immediately; the upstream answered, so they
    close the breaker instead of counting against it. Once the breaker opens
    mid-call the remaining retries are skipped.
    """
    if _breaker.is_open(time.time()):
        raise CircuitOpenError(f"circuit_open: refusing external call to {url}")

    await _limiter.wait()

    max_retries = int(settings.HTTP_MAX_RETRIES)
    backoff = float(settings.HTTP_BACKOFF_BASE_S)

    async with httpx.AsyncClient(timeout=httpx.Timeout(float(settings.HTTP_TIMEOUT_S)), transport=transport) as client:
        for attempt in range(max_retries + 1):
            try:
                resp = await client.request(method, url, headers=headers, json=json)
                resp.raise_for_status()
            except httpx.HTTPError as e:
                if not _retryable(e):
                    _breaker.record_success()
                    raise
                _breaker.record_failure(time.time())
                if attempt >= max_retries or _breaker.is_open(time.time()):
                    raise
                delay = min(5.0, backoff * (2**attempt))
                log.info("retrying %s %s attempt=%d delay=%.2fs error=%s", method, url, attempt + 1, delay, e)
                await asyncio.sleep(delay)
                continue

            _breaker.record_success()
            return resp

    raise RuntimeError("unreachable")
