"""Resilient HTTP GET with a deadline and exponential backoff.

This module executes requests against the content API. Failures are
classified into terminal and retryable:

- 4xx responses fail fast (retrying won't help)
- a timeout ends the call, even when attempts remain
- 5xx responses and connection errors are retried with backoff 2s, 4s, 8s...

The ``timeout=`` that requests accepts bounds each socket read, not the whole
response, so every attempt runs on a worker thread and the caller waits for
it no longer than the time left before the deadline. A body that trickles in
or stalls after the headers therefore still ends the call on time.

The HTTP transport and the clock are injected so retries can be exercised
without a network or real sleeps.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any, Dict, Mapping, Optional

import requests
from requests.exceptions import RequestException, Timeout
from urllib3.exceptions import ReadTimeoutError

from .config import ClientConfig, DEFAULT_CONFIG
from .errors import ClientError, ResponseValidationError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {'Content-Type': 'application/json'}


class SystemClock:
    """Clock backed by the time module."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


def backoff_seconds(attempt: int) -> int:
    """Delay before the attempt following ``attempt`` (1-based)."""
    return 2 ** attempt


class ResilientFetcher:
    """Executes GET requests with a bounded deadline and bounded retries.

    Example:
        >>> fetcher = ResilientFetcher(ClientConfig(retries=3))
        >>> data = fetcher.execute("https://leafpad.io/api/public/v1/post/acme")
    """

    def __init__(
        self,
        config: ClientConfig = DEFAULT_CONFIG,
        session: Optional[requests.Session] = None,
        clock: Optional[SystemClock] = None,
    ):
        """Initialize the fetcher.

        Args:
            config: Supplies timeout_ms and retries
            session: Transport with a requests-compatible ``get``; a new
                     requests.Session is created when omitted
            clock: Object with ``monotonic()`` and ``sleep(seconds)``
        """
        self._config = config
        self._session = session if session is not None else requests.Session()
        self._clock = clock if clock is not None else SystemClock()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def execute(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """GET the URL and return the parsed JSON body.

        Args:
            url: Fully built request URL
            headers: Extra request headers; these win over the defaults

        Returns:
            The decoded JSON value, unvalidated

        Raises:
            ClientError: HTTP_<status> for 4xx, TIMEOUT when the deadline
                         passes, MAX_RETRIES_EXCEEDED when attempts run out
            ResponseValidationError: If a 2xx body is not valid JSON
        """
        max_attempts = self._config.retries
        request_headers: Dict[str, str] = {**DEFAULT_HEADERS, **(headers or {})}
        deadline = self._clock.monotonic() + self._config.timeout_seconds

        last_error: Exception = Exception("Unknown error")

        for attempt in range(1, max_attempts + 1):
            remaining = deadline - self._clock.monotonic()
            if remaining <= 0:
                logger.error(f"Request to {url} timed out before attempt {attempt}")
                raise ClientError.timeout()

            logger.debug(f"GET {url} (attempt {attempt}/{max_attempts})")
            try:
                return self._attempt(url, request_headers, remaining)
            except Timeout as e:
                logger.error(f"Request to {url} timed out on attempt {attempt}")
                raise ClientError.timeout() from e
            except ClientError as e:
                if e.is_client_side:
                    logger.debug(f"Not retrying {url}: {e.message}")
                    raise
                last_error = e
            except RequestException as e:
                # requests reports a body read timeout as ConnectionError
                if _is_read_timeout(e) or self._clock.monotonic() >= deadline:
                    logger.error(f"Request to {url} timed out on attempt {attempt}: {e}")
                    raise ClientError.timeout() from e
                last_error = e

            if attempt < max_attempts:
                wait_time = backoff_seconds(attempt)
                logger.warning(
                    f"Request to {url} failed ({last_error}), retrying in {wait_time}s "
                    f"(attempt {attempt + 1}/{max_attempts})"
                )
                self._clock.sleep(wait_time)

        logger.error(f"Request to {url} failed after {max_attempts} attempts: {last_error}")
        raise ClientError.max_retries_exceeded(max_attempts, str(last_error)) from last_error

    def _attempt(self, url: str, headers: Dict[str, str], timeout: float) -> Any:
        """Run one attempt, waiting at most ``timeout`` seconds for the whole response.

        Raises:
            Timeout: If headers and body together take longer than timeout
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="content-fetch")
        future = executor.submit(self._request, url, headers, timeout)
        # Don't join: an abandoned request ends on its own socket timeout
        executor.shutdown(wait=False)
        try:
            return future.result(timeout=timeout)
        except FuturesTimeoutError as e:
            future.cancel()
            raise Timeout(f"No complete response within {timeout:.2f}s") from e

    def _request(self, url: str, headers: Dict[str, str], timeout: float) -> Any:
        """GET and decode one response; raise ClientError on a non-2xx status."""
        response = self._session.get(url, headers=headers, timeout=timeout)

        if not response.ok:
            raise ClientError.from_status(
                response.status_code,
                response.reason or "",
                _read_body(response),
            )

        try:
            return response.json()
        except ValueError as e:
            raise ResponseValidationError(f"body is not valid JSON ({e})") from e


def _read_body(response: requests.Response) -> str:
    """Best-effort read of an error response body."""
    try:
        return response.text or ""
    except (RequestException, UnicodeDecodeError) as e:
        logger.debug(f"Could not read error body: {e}")
        return ""


def _is_read_timeout(error: RequestException) -> bool:
    return any(isinstance(arg, ReadTimeoutError) for arg in error.args)
