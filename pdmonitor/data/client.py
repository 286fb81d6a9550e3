"""
pdmonitor/data/client.py
────────────────────────
HTTP client adapter for the diagnostic API.

One fixed origin, fixed 10 s timeout, GET + JSON only. Transport and HTTP
failures are normalized into the ApiError taxonomy; every request and
response is recorded on the ``pdmonitor.trace`` logger.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from config.settings import settings
from pdmonitor.data.errors import (
    MalformedResponse,
    NetworkUnreachable,
    RequestTimeout,
    ServerError,
)
from pdmonitor.logging_config import TRACE_LOGGER

REQUEST_TIMEOUT_S = 10.0

logger = logging.getLogger(__name__)
trace_logger = logging.getLogger(TRACE_LOGGER)


def _trace_request(request: httpx.Request) -> None:
    try:
        trace_logger.info(
            "request",
            extra={"method": request.method, "path": str(request.url)},
        )
    except Exception:  # noqa: BLE001 - tracing must never affect the request
        logger.debug("request trace failed", exc_info=True)


def _trace_response(response: httpx.Response) -> None:
    try:
        trace_logger.info(
            "response",
            extra={
                "method": response.request.method,
                "path": str(response.request.url),
                "status": response.status_code,
            },
        )
    except Exception:  # noqa: BLE001 - tracing must never affect the request
        logger.debug("response trace failed", exc_info=True)


def _extract_detail(response: httpx.Response) -> str | None:
    """Best-effort ``detail`` from an error body; None when there is none."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    detail = data.get("detail")
    if isinstance(detail, str):
        return detail.strip() or None
    if isinstance(detail, list):
        # FastAPI validation errors: [{"loc": [...], "msg": "...", ...}, ...]
        messages = [str(item["msg"]) for item in detail if isinstance(item, dict) and item.get("msg")]
        return "; ".join(messages) or None
    return None


class ApiClient:
    """Minimal HTTP client for the diagnostic API."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=REQUEST_TIMEOUT_S,
            headers={"Accept": "application/json"},
            event_hooks={"request": [_trace_request], "response": [_trace_response]},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` and return the decoded JSON payload."""
        try:
            response = self._client.get(path, params=dict(params or {}))
        except httpx.TimeoutException as exc:
            logger.warning("request timed out", extra={"path": path})
            raise RequestTimeout() from exc
        except httpx.TransportError as exc:
            logger.warning("no response received", extra={"path": path, "reason": type(exc).__name__})
            raise NetworkUnreachable() from exc

        if response.is_error:
            detail = _extract_detail(response)
            logger.warning(
                "server error",
                extra={"path": path, "status": response.status_code, "reason": detail},
            )
            raise ServerError(response.status_code, detail)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("response body is not JSON", extra={"path": path, "status": response.status_code})
            raise MalformedResponse() from exc
