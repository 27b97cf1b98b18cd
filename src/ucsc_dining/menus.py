"""Convenience entry points for fetching UCSC dining hall menus.

Each call opens a short-lived HTTP session and closes it before returning:

    from datetime import date

    from ucsc_dining.domain.halls import DiningHall
    from ucsc_dining.menus import menu, menu_today

    html = menu_today(DiningHall.PORTER_KRESGE)
    html = menu(DiningHall.COLLEGES_NINE_TEN, date(2018, 1, 5))

Long-running callers should build a container once and reuse its service.
"""

from collections.abc import Callable
from datetime import date, datetime

import httpx

from ucsc_dining.config import Settings
from ucsc_dining.containers import build_async_container, build_container
from ucsc_dining.domain.halls import DiningHall


def menu(
    hall: DiningHall,
    when: date,
    *,
    settings: Settings | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """Return the raw menu page for the hall on the calendar day of ``when``."""
    container = build_container(settings, transport=transport)
    try:
        return container.menu_service.menu(hall, when, timeout=timeout)
    finally:
        container.close_resources()


def menu_today(
    hall: DiningHall,
    *,
    settings: Settings | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
    clock: Callable[[], datetime] | None = None,
) -> bytes:
    """Return today's raw menu page for the hall."""
    container = build_container(settings, transport=transport, clock=clock)
    try:
        return container.menu_service.menu_today(hall, timeout=timeout)
    finally:
        container.close_resources()


async def amenu(
    hall: DiningHall,
    when: date,
    *,
    settings: Settings | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """Async variant of :func:`menu`."""
    container = build_async_container(settings, transport=transport)
    try:
        return await container.menu_service.menu(hall, when, timeout=timeout)
    finally:
        await container.close_resources()


async def amenu_today(
    hall: DiningHall,
    *,
    settings: Settings | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Callable[[], datetime] | None = None,
) -> bytes:
    """Async variant of :func:`menu_today`."""
    container = build_async_container(settings, transport=transport, clock=clock)
    try:
        return await container.menu_service.menu_today(hall, timeout=timeout)
    finally:
        await container.close_resources()
