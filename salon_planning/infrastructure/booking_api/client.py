from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_planning.application.exceptions import BookingApiContractError, BookingApiUpstreamError
from salon_planning.core.config import settings
from salon_planning.infrastructure.booking_api.retry import retry


class BookingApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        max_attempts: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        base_url = base_url or settings.BOOKING_API_BASE_URL
        if not base_url:
            raise ValueError("BOOKING_API_BASE_URL is required for the booking API client")

        token = api_token if api_token is not None else settings.BOOKING_API_TOKEN
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout if timeout is not None else settings.BOOKING_API_TIMEOUT,
            transport=transport,
        )
        self._send = retry(
            max_attempts=max_attempts or settings.BOOKING_API_MAX_ATTEMPTS,
            backoff_seconds=backoff_seconds if backoff_seconds is not None else settings.BOOKING_API_BACKOFF_SECONDS,
        )(self._send_once)
        self._logger = logging.getLogger(__name__)

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post_json(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, json=payload)

    def put_json(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("PUT", path, json=payload)

    def delete(self, path: str) -> None:
        self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._send(method, path, **kwargs)
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Booking API returned an error",
                extra={"status": e.response.status_code, "path": path, "error": e.response.text[:200]},
            )
            raise BookingApiUpstreamError(f"{method} {path} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Booking API unreachable", extra={"path": path, "error": str(e)})
            raise BookingApiUpstreamError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BookingApiContractError(f"{method} {path} returned a non-JSON body") from e

    def _send_once(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self._client.request(method, path, **kwargs)
        response.raise_for_status()
        return response
