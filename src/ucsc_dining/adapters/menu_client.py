"""HTTP clients for the UCSC nutrition site."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from ucsc_dining.domain.requests import MenuEndpoint, MenuRequest

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}

_logger = logging.getLogger(__name__)


class MenuClient(Protocol):
    """Interface for fetching raw menu pages."""

    def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        """Return the raw response body for a menu request."""


class AsyncMenuClient(Protocol):
    """Async interface for fetching raw menu pages."""

    async def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        """Return the raw response body for a menu request."""


def _request_kwargs(endpoint: MenuEndpoint, request: MenuRequest) -> dict[str, object]:
    """Return httpx request arguments for the endpoint variant."""
    if endpoint is MenuEndpoint.LEGACY:
        return {"content": request.legacy_form(), "headers": _FORM_HEADERS}
    return {"params": request.query_params()}


def _check_status(
    response: httpx.Response, request: MenuRequest, *, strict: bool
) -> None:
    """Raise or warn on a non-2xx upstream status."""
    if response.is_success:
        return
    if strict:
        response.raise_for_status()
    _logger.warning(
        "Menu upstream returned status=%s for hall=%s date=%s",
        response.status_code,
        request.hall.label,
        request.serve_date,
    )


@dataclass
class HttpxMenuClient:
    """Menu client implemented with a blocking httpx session."""

    http_client: httpx.Client
    endpoint: MenuEndpoint = MenuEndpoint.MENU_SAMP
    timeout: float | None = None
    raise_for_status: bool = False

    @classmethod
    def create(
        cls,
        endpoint: MenuEndpoint = MenuEndpoint.MENU_SAMP,
        timeout: float | None = None,
        raise_for_status: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> "HttpxMenuClient":
        """Create a menu client with a managed httpx session."""
        return cls(
            http_client=httpx.Client(transport=transport, follow_redirects=True),
            endpoint=endpoint,
            timeout=timeout,
            raise_for_status=raise_for_status,
        )

    def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        """Fetch the menu page and return its body bytes."""
        with self.http_client.stream(
            self.endpoint.method,
            self.endpoint.url,
            timeout=timeout if timeout is not None else self.timeout,
            follow_redirects=True,
            **_request_kwargs(self.endpoint, request),
        ) as response:
            body = response.read()
            _check_status(response, request, strict=self.raise_for_status)
        return body

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()


@dataclass
class AsyncHttpxMenuClient:
    """Menu client implemented with an async httpx session."""

    http_client: httpx.AsyncClient
    endpoint: MenuEndpoint = MenuEndpoint.MENU_SAMP
    timeout: float | None = None
    raise_for_status: bool = False

    @classmethod
    def create(
        cls,
        endpoint: MenuEndpoint = MenuEndpoint.MENU_SAMP,
        timeout: float | None = None,
        raise_for_status: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AsyncHttpxMenuClient":
        """Create an async menu client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(transport=transport, follow_redirects=True),
            endpoint=endpoint,
            timeout=timeout,
            raise_for_status=raise_for_status,
        )

    async def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        """Fetch the menu page and return its body bytes."""
        async with self.http_client.stream(
            self.endpoint.method,
            self.endpoint.url,
            timeout=timeout if timeout is not None else self.timeout,
            follow_redirects=True,
            **_request_kwargs(self.endpoint, request),
        ) as response:
            body = await response.aread()
            _check_status(response, request, strict=self.raise_for_status)
        return body

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
