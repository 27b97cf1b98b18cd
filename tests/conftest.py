"""Shared test fixtures."""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from ucsc_dining.config import Settings
from ucsc_dining.domain.requests import MenuRequest


@dataclass
class FakeMenuClient:
    """Fake menu client that records requests and returns static bytes."""

    content: bytes = b"<html>menu</html>"
    error: Exception | None = None
    requests: list[MenuRequest] = field(default_factory=list)

    def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.content


@dataclass
class FakeAsyncMenuClient:
    """Async fake menu client that records requests."""

    content: bytes = b"<html>menu</html>"
    requests: list[MenuRequest] = field(default_factory=list)

    async def fetch(self, request: MenuRequest, timeout: float | None = None) -> bytes:
        self.requests.append(request)
        return self.content


class TrackingStream(httpx.SyncByteStream):
    """Response stream that records whether it was closed.

    When ``fail_after`` is set the stream yields that many chunks and then
    drops the connection.
    """

    def __init__(self, chunks: list[bytes], fail_after: int | None = None) -> None:
        self.chunks = chunks
        self.fail_after = fail_after
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise httpx.RemoteProtocolError("peer closed connection mid-body")
            yield chunk

    def close(self) -> None:
        self.closed = True


class AsyncTrackingStream(httpx.AsyncByteStream):
    """Async response stream that records whether it was closed."""

    def __init__(self, chunks: list[bytes], fail_after: int | None = None) -> None:
        self.chunks = chunks
        self.fail_after = fail_after
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index >= self.fail_after:
                raise httpx.RemoteProtocolError("peer closed connection mid-body")
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "UCSC_DINING_ENDPOINT",
        "UCSC_DINING_TIMEZONE",
        "UCSC_DINING_TIMEOUT_SECONDS",
        "UCSC_DINING_RAISE_FOR_STATUS",
        "UCSC_DINING_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def menu_client() -> FakeMenuClient:
    return FakeMenuClient()
