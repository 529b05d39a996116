"""Where: src/sizeof/platform/http/client.py
What: HTTP adapter with retry logic for catalog listing and raw file requests.
Why: Decouple network concerns from catalog parsing and error translation.
"""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Protocol, cast

import requests

from sizeof.config.settings import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_MAX_ATTEMPTS,
    HTTP_TIMEOUT_DEFAULT,
    HTTP_USER_AGENT,
)
from sizeof.platform.logging import logger


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to catalog stores.

    ``status`` is 0 when no response was received at all.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    text: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.text is not None

    def json(self) -> Any:
        """Decode the body as JSON; ``None`` when absent or malformed."""

        if self.text is None:
            return None
        try:
            return json.loads(self.text)
        except ValueError as exc:
            logger.warning("HTTP JSON parse error: %s", exc)
            return None


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch text payloads."""

    def get(self, url: str, params: Mapping[str, str] | None = None) -> HTTPResult:
        ...


class RequestsHTTPClient:
    """Perform GET requests with ``requests`` and retry rate-limit/server errors."""

    _max_attempts: int
    _timeout: float

    def __init__(
        self,
        *,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        max_attempts: int = HTTP_MAX_ATTEMPTS,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)
        self._session = session or requests.Session()

    def get(self, url: str, params: Mapping[str, str] | None = None) -> HTTPResult:
        headers = {"User-Agent": HTTP_USER_AGENT}

        for attempt in range(self._max_attempts):
            result = self._attempt(url, params, headers)

            if self._should_retry(result.status):
                if attempt < self._max_attempts - 1:
                    delay = self._retry_delay(result.headers)
                    logger.warning(
                        "HTTP rate-limited/server error (status=%s) for %s. Retrying in %.1fs.",
                        result.status,
                        url,
                        delay,
                    )
                    time.sleep(delay)
                    continue

                logger.warning(
                    "HTTP rate-limited/server error (status=%s) for %s. Giving up.",
                    result.status,
                    url,
                )
                return HTTPResult(status=result.status, headers=result.headers)

            if result.status and not 200 <= result.status < 300:
                logger.debug("HTTP error: status=%s url=%s", result.status, url)
                return HTTPResult(status=result.status, headers=result.headers)

            return result

        return HTTPResult(status=0)

    def _attempt(
        self,
        url: str,
        params: Mapping[str, str] | None,
        headers: dict[str, str],
    ) -> HTTPResult:
        try:
            response = self._session.get(
                url,
                params=dict(params) if params else None,
                headers=headers,
                timeout=(HTTP_CONNECT_TIMEOUT, self._timeout),
            )
        except requests.RequestException as exc:
            logger.warning("HTTP request error for %s: %s", url, exc)
            return HTTPResult(status=0)

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        if not 200 <= status < 300:
            return HTTPResult(status=status, headers=response_headers)

        return HTTPResult(status=status, headers=response_headers, text=response.text)

    @staticmethod
    def _should_retry(status: int) -> bool:
        return status == 429 or status >= 500

    @staticmethod
    def _retry_delay(headers: dict[str, str]) -> float:
        retry_after = _parse_retry_after(headers.get("Retry-After"))
        return max(1.0, min(10.0, retry_after or 1.0))


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    stripped = value.strip()
    if stripped.isdigit():
        return float(int(stripped))
    try:
        dt = parsedate_to_datetime(stripped)
    except (TypeError, ValueError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = (dt - datetime.now(timezone.utc)).total_seconds()
    return max(0.0, delta)


__all__ = ["HTTPClient", "HTTPResult", "RequestsHTTPClient"]
