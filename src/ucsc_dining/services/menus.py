"""Menu services resolving serve dates and fetching menu pages."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from ucsc_dining.adapters.menu_client import AsyncMenuClient, MenuClient
from ucsc_dining.config import UPSTREAM_TIMEZONE
from ucsc_dining.domain.halls import DiningHall
from ucsc_dining.domain.requests import MenuRequest, build_menu_request

_logger = logging.getLogger(__name__)


@dataclass
class ServeDateClock:
    """Resolves "today" in the upstream's time zone.

    A ``timezone_name`` of None means the process local clock. An injected
    ``clock`` returning a naive datetime is taken as already local; aware
    values are converted to the configured zone.
    """

    timezone_name: str | None = UPSTREAM_TIMEZONE
    clock: Callable[[], datetime] | None = None

    def now(self) -> datetime:
        """Return the current time in the configured zone."""
        tz = ZoneInfo(self.timezone_name) if self.timezone_name else None
        if self.clock is None:
            return datetime.now(tz=tz)
        current = self.clock()
        if current.tzinfo is None:
            return current
        return current.astimezone(tz)

    def today(self) -> date:
        """Return the current calendar day."""
        return self.now().date()


@dataclass
class MenuService:
    """Service for fetching menu pages by hall and date."""

    client: MenuClient
    clock: ServeDateClock
    debug: bool = False

    def menu(
        self, hall: DiningHall, when: date, timeout: float | None = None
    ) -> bytes:
        """Fetch the hall's menu on the calendar day of ``when``."""
        request = build_menu_request(hall, when)
        try:
            body = self.client.fetch(request, timeout=timeout)
        except Exception as exc:
            if self.debug:
                _log_failure(request, exc)
            raise
        if self.debug:
            _log_success(request, body)
        return body

    def menu_today(self, hall: DiningHall, timeout: float | None = None) -> bytes:
        """Fetch the hall's menu for today."""
        return self.menu(hall, self.clock.today(), timeout)


@dataclass
class AsyncMenuService:
    """Async counterpart of MenuService."""

    client: AsyncMenuClient
    clock: ServeDateClock
    debug: bool = False

    async def menu(
        self, hall: DiningHall, when: date, timeout: float | None = None
    ) -> bytes:
        """Fetch the hall's menu on the calendar day of ``when``."""
        request = build_menu_request(hall, when)
        try:
            body = await self.client.fetch(request, timeout=timeout)
        except Exception as exc:
            if self.debug:
                _log_failure(request, exc)
            raise
        if self.debug:
            _log_success(request, body)
        return body

    async def menu_today(
        self, hall: DiningHall, timeout: float | None = None
    ) -> bytes:
        """Fetch the hall's menu for today."""
        return await self.menu(hall, self.clock.today(), timeout)


def _log_success(request: MenuRequest, body: bytes) -> None:
    _logger.info(
        "Menu fetch: hall=%s date=%s bytes=%s",
        request.hall.label,
        request.serve_date,
        len(body),
    )


def _log_failure(request: MenuRequest, exc: Exception) -> None:
    _logger.warning(
        "Menu fetch failed: hall=%s date=%s: %s",
        request.hall.label,
        request.serve_date,
        exc,
    )
