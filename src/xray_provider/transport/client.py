"""Synchronous HTTP client for the Xray REST API."""

from typing import Any

import httpx
import structlog

from xray_provider import __version__
from xray_provider.config.settings import Settings
from xray_provider.core.exceptions import (
    APIError,
    ConfigurationError,
    ResponseDecodeError,
    TransportError,
)

logger = structlog.get_logger(__name__)


class XrayClient:
    """Thin JSON client over ``httpx.Client``.

    Mutating calls (PUT, POST) are sent exactly once. GET calls are retried on
    transport errors and 5xx responses up to ``retry_count`` times, unless the
    caller asks for ``never_retry``.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        timeout: float = 30.0,
        retry_count: int = 0,
        user_agent: str = "xray-provider",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/json",
            "User-Agent": f"{user_agent}/{__version__}",
        }
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        self._retry_count = max(retry_count, 0)
        self._http = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> "XrayClient":
        if not settings.url:
            raise ConfigurationError("Xray URL is not configured (set XRAY_URL)")
        if not settings.access_token:
            raise ConfigurationError("Xray access token is not configured (set XRAY_ACCESS_TOKEN)")

        return cls(
            base_url=settings.url,
            access_token=settings.access_token,
            timeout=settings.request_timeout,
            retry_count=settings.retry_count,
            user_agent=settings.user_agent,
            transport=transport,
        )

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        never_retry: bool = False,
    ) -> Any:
        attempts = 1 if never_retry else self._retry_count + 1
        return self._request("GET", path, params=params, attempts=attempts)

    def put(self, path: str, body: Any, params: dict[str, Any] | None = None) -> Any:
        return self._request("PUT", path, json=body, params=params)

    def post(self, path: str, body: Any, params: dict[str, Any] | None = None) -> Any:
        return self._request("POST", path, json=body, params=params)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "XrayClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        attempts: int = 1,
    ) -> Any:
        for attempt in range(1, attempts + 1):
            last_attempt = attempt == attempts
            try:
                response = self._http.request(method, path, json=json, params=params)
            except httpx.RequestError as e:
                if not last_attempt:
                    logger.debug("Retrying request", method=method, path=path, attempt=attempt, error=str(e))
                    continue
                raise TransportError(
                    f"{method} {path} failed: {e}",
                    details={"method": method, "path": path},
                ) from e

            if response.status_code >= 500 and not last_attempt:
                logger.debug(
                    "Retrying request",
                    method=method,
                    path=path,
                    attempt=attempt,
                    status_code=response.status_code,
                )
                continue

            return self._decode(method, path, response)

    @staticmethod
    def _decode(method: str, path: str, response: httpx.Response) -> Any:
        if not response.is_success:
            logger.debug("Request failed", method=method, path=path, status_code=response.status_code)
            raise APIError(
                f"{method} {path} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
                details={"method": method, "path": path},
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"{method} {path} returned a non-JSON body: {response.text[:200]}",
                details={"method": method, "path": path},
            ) from e
