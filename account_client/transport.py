"""HTTP transports that turn responses and network errors into plain values.

A transport never raises for HTTP or connectivity problems: every call
returns either a ``TransportSuccess`` or a ``TransportFailure``. Any object
with a matching ``send(method, path, body)`` can be handed to a client in
place of the httpx-backed defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from account_client.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportSuccess:
    status_code: int
    payload: Any = None


@dataclass(frozen=True)
class TransportFailure:
    """A failed exchange.

    ``status_code`` is None when no response was received at all (connection
    refused, timeout, ...). ``code`` and ``detail`` are read from a JSON error
    body when the server sent one.
    """

    message: str
    status_code: int | None = None
    code: str | None = None
    detail: str | None = None

    @property
    def has_response(self) -> bool:
        return self.status_code is not None

    def __str__(self) -> str:
        return self.message


TransportOutcome = TransportSuccess | TransportFailure


class Transport(Protocol):
    def send(self, method: str, path: str, body: dict | None = None) -> TransportOutcome: ...


class AsyncTransport(Protocol):
    async def send(self, method: str, path: str, body: dict | None = None) -> TransportOutcome: ...


def outcome_from_response(response: httpx.Response) -> TransportOutcome:
    """Map a received response to a success or a structured failure."""
    if response.is_success:
        return TransportSuccess(response.status_code, _json_or_none(response))

    code = detail = None
    body = _json_or_none(response)
    if isinstance(body, dict):
        if isinstance(body.get("code"), str):
            code = body["code"]
        if body.get("detail") is not None:
            detail = str(body["detail"])

    return TransportFailure(
        f"Request failed with status code {response.status_code}",
        status_code=response.status_code,
        code=code,
        detail=detail,
    )


def failure_from_error(exc: Exception) -> TransportFailure:
    """Map a request that never produced a response to an unstructured failure."""
    return TransportFailure(str(exc) or type(exc).__name__)


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class _HttpxTransportConfig:
    """Mixin providing base URL handling and httpx client options."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        verify: bool | None = None,
        **httpx_kwargs,
    ):
        self._base_url = (base_url or settings.BASE_URL).rstrip("/")
        self._httpx_kwargs = {
            "timeout": settings.TIMEOUT_SECONDS if timeout is None else timeout,
            "verify": settings.VERIFY_TLS if verify is None else verify,
            **httpx_kwargs,
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"


class HttpxTransport(_HttpxTransportConfig):
    """Blocking transport built on ``httpx.Client``."""

    def __init__(self, base_url: str | None = None, **kwargs):
        super().__init__(base_url, **kwargs)
        self._client = httpx.Client(**self._httpx_kwargs)

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def send(self, method: str, path: str, body: dict | None = None) -> TransportOutcome:
        logger.debug("%s %s", method, path)
        try:
            resp = self._client.request(method, self._url(path), json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("%s %s failed without a response: %s", method, path, exc)
            return failure_from_error(exc)
        return outcome_from_response(resp)


class AsyncHttpxTransport(_HttpxTransportConfig):
    """Asynchronous transport built on ``httpx.AsyncClient``.

    A single instance may serve many concurrent requests.
    """

    def __init__(self, base_url: str | None = None, **kwargs):
        super().__init__(base_url, **kwargs)
        self._client = httpx.AsyncClient(**self._httpx_kwargs)

    async def __aenter__(self) -> AsyncHttpxTransport:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, method: str, path: str, body: dict | None = None) -> TransportOutcome:
        logger.debug("%s %s", method, path)
        try:
            resp = await self._client.request(method, self._url(path), json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("%s %s failed without a response: %s", method, path, exc)
            return failure_from_error(exc)
        return outcome_from_response(resp)
